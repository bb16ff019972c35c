"""Circuit identities: commitments to the exact verifying key of a circuit."""

import hashlib
from typing import Protocol

from tx_engine import hash256d

from zkparams.util.utility_functions import boolean_list_to_bytes, byte_size


class MinimalBits(Protocol):
    def to_minimal_bits(self) -> list[bool]: ...


class CircuitIdCRH:
    """Collision-resistant hash from bit strings to elements of a scalar field.

    Subclasses provide `_digest`, which must bind the personalisation; the digest is read as a little-endian integer
    and reduced modulo the field order.

    Attributes:
        personalisation (bytes): Domain separator prepended to every input.
        modulus (int): Order of the field the output lives in.
    """

    def __init__(self, personalisation: bytes, modulus: int):
        """Initialise the CRH.

        Args:
            personalisation (bytes): Domain separator prepended to every input.
            modulus (int): Order of the field the output lives in.

        Raises:
            ValueError: If `modulus` is smaller than 2.
        """
        if modulus < 2:  # noqa: PLR2004
            msg = f"The modulus must be at least 2: modulus: {modulus}"
            raise ValueError(msg)
        self.personalisation = personalisation
        self.modulus = modulus

    def _digest(self, data: bytes) -> bytes:
        raise NotImplementedError

    def hash(self, bits: list[bool]) -> int:
        """Hash a bit string to a field element."""
        digest = self._digest(boolean_list_to_bytes(bits))
        return int.from_bytes(digest, byteorder="little") % self.modulus

    def to_bytes_le(self, element: int) -> bytes:
        """Serialise a field element in little-endian order on the fixed width of the field."""
        return element.to_bytes(byte_size(self.modulus), byteorder="little")


class DoubleSha256CRH(CircuitIdCRH):
    """CRH based on double SHA-256."""

    def _digest(self, data: bytes) -> bytes:
        return hash256d(self.personalisation + data)


class Blake2sCRH(CircuitIdCRH):
    """CRH based on BLAKE2s, keyed by the personalisation field of the hash (at most 8 bytes)."""

    def __init__(self, personalisation: bytes, modulus: int):
        if len(personalisation) > hashlib.blake2s.PERSON_SIZE:
            msg = f"The personalisation is longer than {hashlib.blake2s.PERSON_SIZE} bytes: {personalisation!r}"
            raise ValueError(msg)
        super().__init__(personalisation, modulus)

    def _digest(self, data: bytes) -> bytes:
        return hashlib.blake2s(data, person=self.personalisation).digest()


def derive_circuit_id(verifying_key: MinimalBits, crh: CircuitIdCRH) -> str:
    """Derive the identity of a circuit from its verifying key.

    The verifying key is reduced to its minimal bit encoding, hashed with `crh`, and the resulting field element is
    serialised in little-endian order and hex encoded. Any change to the encoding of the key changes the identity.

    Args:
        verifying_key: Structured verifying key, exposing `to_minimal_bits()`.
        crh (CircuitIdCRH): Identity hash of the network and circuit.

    Returns:
        The circuit identity as a hexadecimal string.
    """
    return crh.to_bytes_le(crh.hash(verifying_key.to_minimal_bits())).hex()
