"""artifacts package.

This package provides the services shared by every setup: checksumming serialised keys, writing them to disk under
local or versioned names, and emitting the JSON manifest that describes them.

Usage example:
    >>> from zkparams.artifacts.checksum import checksum
    >>> from zkparams.artifacts.writer import versioned_filename
    >>>
    >>> versioned_filename("inner.proving", checksum(b"abc"))
    'inner.proving.ba7816b'
"""
