"""Persistence of key artifacts under local and versioned names."""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

VERSION_LENGTH = 7


def versioned_filename(filename: str, checksum: str) -> str:
    """Return the distribution name of `filename` for an artifact with the given checksum.

    The name is `filename` followed by a dot and the first seven characters of `checksum`. If `checksum` is shorter
    than seven characters, `filename` is returned unchanged.

    Example:
        >>> versioned_filename("inner.proving", "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad")
        'inner.proving.ba7816b'
        >>> versioned_filename("inner.proving", "abc")
        'inner.proving'
    """
    if len(checksum) < VERSION_LENGTH:
        return filename
    return f"{filename}.{checksum[:VERSION_LENGTH]}"


def _write(path: Path, data: bytes) -> Path:
    with path.open("wb") as f:
        f.write(data)
    logger.debug("Wrote %d bytes to %s", len(data), path)
    return path


def write_local(filename: str, data: bytes) -> Path:
    """Write `data` to `filename`, creating or truncating it.

    Raises:
        OSError: If the file cannot be written.
    """
    return _write(Path(filename), data)


def write_remote(filename: str, checksum: str, data: bytes) -> Path:
    """Write `data` under the versioned name derived from `filename` and `checksum`.

    Args:
        filename (str): Unversioned name of the artifact.
        checksum (str): Checksum of `data`, the first seven characters of which version the name.
        data (bytes): Serialised artifact.

    Returns:
        The path that was written.

    Raises:
        OSError: If the file cannot be written.
    """
    return _write(Path(versioned_filename(filename, checksum)), data)
