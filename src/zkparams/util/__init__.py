"""util package.

Helpers shared across the package: bit/bitmask conversions and field sizing arithmetic.
"""
