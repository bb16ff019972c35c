"""Content checksums for key artifacts."""

import hashlib


def checksum(data: bytes) -> str:
    """Return the lower-case hexadecimal SHA-256 digest of `data`."""
    return hashlib.sha256(data).hexdigest()
