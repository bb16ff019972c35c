"""model package.

Blank circuit descriptors, key types, their canonical serialisation, and the reference proving system.
"""
