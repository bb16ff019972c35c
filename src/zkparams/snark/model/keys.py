"""Keys and reference strings produced by the reference proving system."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Optional

from elliptic_curves.models.ec import ShortWeierstrassEllipticCurvePoint

from zkparams.snark.model.serialisation import (
    G1_COORDINATES,
    G2_COORDINATES,
    ByteReader,
    point_to_bytes_le,
    point_to_minimal_bits,
    points_to_bytes_le,
    u64_to_bytes_le,
)


@dataclass
class VerifyingKey:
    r"""Verifying key of a circuit-specific setup.

    Attributes:
        alpha_g1 (ShortWeierstrassEllipticCurvePoint): alpha * G1.
        beta_g2 (ShortWeierstrassEllipticCurvePoint): beta * G2.
        gamma_g2 (ShortWeierstrassEllipticCurvePoint): gamma * G2.
        delta_g2 (ShortWeierstrassEllipticCurvePoint): delta * G2.
        gamma_abc_g1 (list[ShortWeierstrassEllipticCurvePoint]): Points the verifier combines with the public inputs,
            one for the constant and one per public input.
        modulus (int): Order of the base field of the curve.
    """

    alpha_g1: ShortWeierstrassEllipticCurvePoint
    beta_g2: ShortWeierstrassEllipticCurvePoint
    gamma_g2: ShortWeierstrassEllipticCurvePoint
    delta_g2: ShortWeierstrassEllipticCurvePoint
    gamma_abc_g1: list[ShortWeierstrassEllipticCurvePoint]
    modulus: int

    def to_bytes_le(self) -> bytes:
        """Canonical little-endian serialisation of the key."""
        return b"".join(
            [
                point_to_bytes_le(self.alpha_g1, self.modulus, G1_COORDINATES),
                point_to_bytes_le(self.beta_g2, self.modulus, G2_COORDINATES),
                point_to_bytes_le(self.gamma_g2, self.modulus, G2_COORDINATES),
                point_to_bytes_le(self.delta_g2, self.modulus, G2_COORDINATES),
                points_to_bytes_le(self.gamma_abc_g1, self.modulus, G1_COORDINATES),
            ]
        )

    def to_minimal_bits(self) -> list[bool]:
        """Bits of every coordinate of the key, in serialisation order, with no padding."""
        out = point_to_minimal_bits(self.alpha_g1, self.modulus, G1_COORDINATES)
        for point in [self.beta_g2, self.gamma_g2, self.delta_g2]:
            out += point_to_minimal_bits(point, self.modulus, G2_COORDINATES)
        for point in self.gamma_abc_g1:
            out += point_to_minimal_bits(point, self.modulus, G1_COORDINATES)
        return out


@dataclass
class ProvingKey:
    """Proving key of a circuit-specific setup.

    Attributes:
        verifying_key (VerifyingKey): The matching verifying key.
        beta_g1 (ShortWeierstrassEllipticCurvePoint): beta * G1.
        delta_g1 (ShortWeierstrassEllipticCurvePoint): delta * G1.
        a_query (list[ShortWeierstrassEllipticCurvePoint]): One point per variable.
        b_g1_query (list[ShortWeierstrassEllipticCurvePoint]): One point per variable.
        h_query (list[ShortWeierstrassEllipticCurvePoint]): One point per power of the constraint domain but the last.
        l_query (list[ShortWeierstrassEllipticCurvePoint]): One point per private variable.
    """

    verifying_key: VerifyingKey
    beta_g1: ShortWeierstrassEllipticCurvePoint
    delta_g1: ShortWeierstrassEllipticCurvePoint
    a_query: list[ShortWeierstrassEllipticCurvePoint]
    b_g1_query: list[ShortWeierstrassEllipticCurvePoint]
    h_query: list[ShortWeierstrassEllipticCurvePoint]
    l_query: list[ShortWeierstrassEllipticCurvePoint]

    def to_bytes_le(self) -> bytes:
        """Canonical little-endian serialisation of the key, verifying key first."""
        modulus = self.verifying_key.modulus
        return b"".join(
            [
                self.verifying_key.to_bytes_le(),
                point_to_bytes_le(self.beta_g1, modulus, G1_COORDINATES),
                point_to_bytes_le(self.delta_g1, modulus, G1_COORDINATES),
                points_to_bytes_le(self.a_query, modulus, G1_COORDINATES),
                points_to_bytes_le(self.b_g1_query, modulus, G1_COORDINATES),
                points_to_bytes_le(self.h_query, modulus, G1_COORDINATES),
                points_to_bytes_le(self.l_query, modulus, G1_COORDINATES),
            ]
        )


@dataclass
class UniversalSRS:
    """Structured reference string of a universal setup.

    Attributes:
        powers_of_beta_g (list[ShortWeierstrassEllipticCurvePoint]): beta^i * G1 for i in [0, max_degree].
        h (ShortWeierstrassEllipticCurvePoint): Generator of G2.
        beta_h (ShortWeierstrassEllipticCurvePoint): beta * G2.
        modulus (int): Order of the base field of the curve.
    """

    powers_of_beta_g: list[ShortWeierstrassEllipticCurvePoint]
    h: ShortWeierstrassEllipticCurvePoint
    beta_h: ShortWeierstrassEllipticCurvePoint
    modulus: int

    @property
    def max_degree(self) -> int:
        return len(self.powers_of_beta_g) - 1

    def to_bytes_le(self) -> bytes:
        return b"".join(
            [
                points_to_bytes_le(self.powers_of_beta_g, self.modulus, G1_COORDINATES),
                point_to_bytes_le(self.h, self.modulus, G2_COORDINATES),
                point_to_bytes_le(self.beta_h, self.modulus, G2_COORDINATES),
            ]
        )

    @classmethod
    def from_bytes_le(
        cls,
        data: bytes,
        modulus: int,
        g1_from_coordinates: Callable[[list[int]], ShortWeierstrassEllipticCurvePoint],
        g2_from_coordinates: Callable[[list[int]], ShortWeierstrassEllipticCurvePoint],
    ) -> "UniversalSRS":
        """Read back a structured reference string serialised with `to_bytes_le`.

        Args:
            data (bytes): The serialised SRS.
            modulus (int): Order of the base field of the curve.
            g1_from_coordinates (Callable): Builds a point of G1 from its affine coordinates.
            g2_from_coordinates (Callable): Builds a point of G2 from its affine coordinates.

        Returns:
            The structured reference string.

        Raises:
            SerializationError: If `data` is truncated, has trailing bytes or holds non-canonical coordinates.
        """
        reader = ByteReader(data)
        powers_of_beta_g = reader.read_points(modulus, G1_COORDINATES, g1_from_coordinates)
        h = reader.read_point(modulus, G2_COORDINATES, g2_from_coordinates)
        beta_h = reader.read_point(modulus, G2_COORDINATES, g2_from_coordinates)
        reader.finish()
        return cls(powers_of_beta_g=powers_of_beta_g, h=h, beta_h=beta_h, modulus=modulus)


@dataclass
class IndexVerifierKey:
    """Verifying key of a circuit indexed against a universal SRS.

    Attributes:
        num_constraints (int): Number of constraints of the indexed circuit.
        num_variables (int): Number of variables of the indexed circuit.
        num_non_zero (int): Number of non-zero matrix entries of the indexed circuit.
        index_commitments (list[ShortWeierstrassEllipticCurvePoint]): Commitments to the index polynomials.
        h (ShortWeierstrassEllipticCurvePoint): Generator of G2, taken from the SRS.
        beta_h (ShortWeierstrassEllipticCurvePoint): beta * G2, taken from the SRS.
        modulus (int): Order of the base field of the curve.
    """

    num_constraints: int
    num_variables: int
    num_non_zero: int
    index_commitments: list[ShortWeierstrassEllipticCurvePoint]
    h: ShortWeierstrassEllipticCurvePoint
    beta_h: ShortWeierstrassEllipticCurvePoint
    modulus: int

    def to_bytes_le(self) -> bytes:
        return b"".join(
            [
                u64_to_bytes_le(self.num_constraints),
                u64_to_bytes_le(self.num_variables),
                u64_to_bytes_le(self.num_non_zero),
                points_to_bytes_le(self.index_commitments, self.modulus, G1_COORDINATES),
                point_to_bytes_le(self.h, self.modulus, G2_COORDINATES),
                point_to_bytes_le(self.beta_h, self.modulus, G2_COORDINATES),
            ]
        )

    def to_minimal_bits(self) -> list[bool]:
        out = []
        for point in self.index_commitments:
            out += point_to_minimal_bits(point, self.modulus, G1_COORDINATES)
        for point in [self.h, self.beta_h]:
            out += point_to_minimal_bits(point, self.modulus, G2_COORDINATES)
        return out


@dataclass
class IndexProverKey:
    """Proving key of a circuit indexed against a universal SRS.

    Attributes:
        verifying_key (IndexVerifierKey): The matching verifying key.
        committer_powers (list[ShortWeierstrassEllipticCurvePoint]): The SRS trimmed to the degree bound of the circuit.
    """

    verifying_key: IndexVerifierKey
    committer_powers: list[ShortWeierstrassEllipticCurvePoint]

    def to_bytes_le(self) -> bytes:
        return self.verifying_key.to_bytes_le() + points_to_bytes_le(
            self.committer_powers, self.verifying_key.modulus, G1_COORDINATES
        )


@dataclass
class PoSW:
    """Proof-of-succinct-work parameters.

    A verifier-only instance carries no proving key.

    Attributes:
        proving_key (IndexProverKey | None): Proving key, if the instance can prove.
        verifying_key (IndexVerifierKey): Verifying key.
    """

    proving_key: Optional[IndexProverKey]
    verifying_key: IndexVerifierKey
