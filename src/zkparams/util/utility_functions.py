"""Utility functions."""


def boolean_list_to_bitmask(boolean_list: list[bool]) -> int:
    """Convert a list of True, False into a bitmask.

    Example:
        >>> boolean_list_to_bitmask([True])
        1
        >>> boolean_list_to_bitmask([True,False])
        1
        >>> boolean_list_to_bitmask([False,True])
        2
        >>> boolean_list_to_bitmask([True,True])
        3
    """
    bitmask = 0
    for ix, option in enumerate(boolean_list):
        bitmask |= 1 << ix if option else 0
    return bitmask


def bitmask_to_boolean_list(bitmask: int, list_length: int) -> list[bool]:
    """Convert a bitmask to a list of True, False of length list_length.

    Example:
        >>> bitmask_to_boolean_list(1,1)
        [True]
        >>> bitmask_to_boolean_list(1,2)
        [True, False]
        >>> bitmask_to_boolean_list(2,2)
        [False, True]
        >>> bitmask_to_boolean_list(3,2)
        [True, True]
    """
    if bitmask < 0:
        msg = f"The bitmask must be a non-negative integer: bitmask: {bitmask}"
        raise ValueError(msg)
    if bitmask.bit_length() > list_length:
        msg = f"The bitmask does not fit in {list_length} bits: bitmask: {bitmask}"
        raise ValueError(msg)
    out = []
    while bitmask > 0:
        out.append(bool(bitmask & 1))
        bitmask = bitmask >> 1
    return [*out, *[False] * (list_length - len(out))]


def boolean_list_to_bytes(boolean_list: list[bool]) -> bytes:
    """Pack a list of bits into bytes, bit `i` landing in bit `i % 8` of byte `i // 8`.

    Example:
        >>> boolean_list_to_bytes([True, False, False, False, False, False, False, False, True])
        b'\\x01\\x01'
    """
    return boolean_list_to_bitmask(boolean_list).to_bytes((len(boolean_list) + 7) // 8, byteorder="little")


def byte_size(modulus: int) -> int:
    """Number of bytes needed to store an element of the field of order `modulus`."""
    return (modulus.bit_length() + 7) // 8


def next_power_of_two(n: int) -> int:
    """Return the smallest power of two greater than or equal to `n` (and at least 1)."""
    if n < 0:
        msg = f"The size must be a non-negative integer: n: {n}"
        raise ValueError(msg)
    return 1 if n <= 1 else 1 << (n - 1).bit_length()


def two_adicity(modulus: int) -> int:
    """Return the largest `s` such that `2^s` divides `modulus - 1`."""
    m = modulus - 1
    return (m & -m).bit_length() - 1
