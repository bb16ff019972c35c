"""model package.

Provides the `Network` record every network instantiation fills in.
"""
