"""identity package.

Derivation of circuit identities from verifying keys, and the hash functions networks use for it.
"""
