"""Canonical little-endian encoding of curve points and field elements."""

from zkparams.errors import SerializationError
from zkparams.util.utility_functions import bitmask_to_boolean_list, byte_size

G1_COORDINATES = 2
G2_COORDINATES = 4


def field_to_bytes_le(value: int, modulus: int) -> bytes:
    """Serialise a field element on the fixed width of the field.

    Raises:
        SerializationError: If `value` is not in `[0, modulus)`.
    """
    if not 0 <= value < modulus:
        msg = f"The value is not a canonical field element: value: {value}"
        raise SerializationError(msg)
    return value.to_bytes(byte_size(modulus), byteorder="little")


def u32_to_bytes_le(n: int) -> bytes:
    """Serialise a length prefix."""
    try:
        return n.to_bytes(4, byteorder="little")
    except OverflowError as e:
        msg = f"The length does not fit in a u32: n: {n}"
        raise SerializationError(msg) from e


def u64_to_bytes_le(n: int) -> bytes:
    try:
        return n.to_bytes(8, byteorder="little")
    except OverflowError as e:
        msg = f"The value does not fit in a u64: n: {n}"
        raise SerializationError(msg) from e


def point_coordinates(point, num_coordinates: int) -> list[int]:
    """Return the affine coordinates of `point` over the base field.

    Raises:
        SerializationError: If the point does not have `num_coordinates` coordinates, e.g. the point at infinity.
    """
    if getattr(point, "infinity", False):
        msg = "The point at infinity has no affine coordinates"
        raise SerializationError(msg)
    coordinates = point.to_list()
    if len(coordinates) != num_coordinates or any(c is None for c in coordinates):
        msg = f"Malformed curve point: expected {num_coordinates} coordinates, got {coordinates}"
        raise SerializationError(msg)
    return coordinates


def point_to_bytes_le(point, modulus: int, num_coordinates: int) -> bytes:
    return b"".join(field_to_bytes_le(c, modulus) for c in point_coordinates(point, num_coordinates))


def points_to_bytes_le(points: list, modulus: int, num_coordinates: int) -> bytes:
    """Serialise a vector of points, prefixed by its length."""
    return u32_to_bytes_le(len(points)) + b"".join(point_to_bytes_le(p, modulus, num_coordinates) for p in points)


def point_to_minimal_bits(point, modulus: int, num_coordinates: int) -> list[bool]:
    """Concatenate the bits of the coordinates of `point`, each on exactly `modulus.bit_length()` bits."""
    out = []
    for c in point_coordinates(point, num_coordinates):
        if not 0 <= c < modulus:
            msg = f"The value is not a canonical field element: value: {c}"
            raise SerializationError(msg)
        out.extend(bitmask_to_boolean_list(c, modulus.bit_length()))
    return out


class ByteReader:
    """Reads the encodings above back from a buffer, front to back.

    Every read raises `SerializationError` if the buffer is too short or holds a non-canonical value.
    """

    def __init__(self, data: bytes):
        self.data = data
        self.offset = 0

    def _take(self, n: int) -> bytes:
        if self.offset + n > len(self.data):
            msg = f"Truncated data: expected {n} more bytes at offset {self.offset}, got {len(self.data) - self.offset}"
            raise SerializationError(msg)
        out = self.data[self.offset : self.offset + n]
        self.offset += n
        return out

    def read_u32(self) -> int:
        return int.from_bytes(self._take(4), byteorder="little")

    def read_u64(self) -> int:
        return int.from_bytes(self._take(8), byteorder="little")

    def read_field(self, modulus: int) -> int:
        value = int.from_bytes(self._take(byte_size(modulus)), byteorder="little")
        if value >= modulus:
            msg = f"The value is not a canonical field element: value: {value}"
            raise SerializationError(msg)
        return value

    def read_point(self, modulus: int, num_coordinates: int, build):
        """Read a point and rebuild it from its coordinates with `build`."""
        return build([self.read_field(modulus) for _ in range(num_coordinates)])

    def read_points(self, modulus: int, num_coordinates: int, build) -> list:
        """Read a vector of points written by `points_to_bytes_le`."""
        n = self.read_u32()
        if n * byte_size(modulus) * num_coordinates > len(self.data) - self.offset:
            msg = f"Truncated data: the vector announces {n} points"
            raise SerializationError(msg)
        return [self.read_point(modulus, num_coordinates, build) for _ in range(n)]

    def finish(self) -> None:
        """Check that the whole buffer was consumed."""
        if self.offset != len(self.data):
            msg = f"Trailing data: {len(self.data) - self.offset} bytes left at offset {self.offset}"
            raise SerializationError(msg)
