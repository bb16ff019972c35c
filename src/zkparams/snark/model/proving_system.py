"""Reference proving system over a pairing-friendly curve."""

import hashlib
import logging
from random import Random
from typing import Protocol

from elliptic_curves.models.bilinear_pairings import BilinearPairingCurve

from zkparams.errors import SynthesisError
from zkparams.snark.model import ahp
from zkparams.snark.model.circuit import BlankCircuit
from zkparams.snark.model.keys import (
    IndexProverKey,
    IndexVerifierKey,
    PoSW,
    ProvingKey,
    UniversalSRS,
    VerifyingKey,
)
from zkparams.util.utility_functions import next_power_of_two, two_adicity

logger = logging.getLogger(__name__)

# Marlin indexes three polynomials (row, col, val) for each of the matrices A, B, C, plus row * col for each.
INDEX_POLYNOMIALS = 12
INDEX_POLYNOMIAL_TERMS = 4


class ProvingSystem(Protocol):
    """Operations the setup pipeline needs from a proving system."""

    def max_degree(self, num_constraints: int, num_variables: int, num_non_zero: int) -> int: ...

    def universal_setup(self, max_degree: int, rng: Random): ...

    def setup(self, circuit: BlankCircuit, rng: Random) -> tuple: ...

    def srs_from_bytes_le(self, data: bytes): ...

    def posw_setup(self, circuit: BlankCircuit, srs): ...


class PairingProvingSystem:
    """Setups over the groups of a bilinear pairing curve.

    The keys have the group structure and serialisation layout of Groth16 (circuit-specific setups) and Marlin over
    KZG10 (universal setups). A blank circuit only exposes its shape, so every variable is bound to a power of the
    trapdoor: the keys are well formed but do not encode the constraints of a concrete circuit.

    Every point is held in memory as an `elliptic_curves` object until the key is serialised. This is fine for the
    circuit-specific and posw setups, but the default universal bounds need about 25 million points of MNT4-753, so
    `zkparams-setup universal testnet2` does not complete in practice. Lower the universal `degree_bounds` in the
    configuration to generate a smaller SRS.

    Attributes:
        curve (BilinearPairingCurve): Curve over which the keys are generated.
        scalar_modulus (int): Order of G1 and G2.
        base_modulus (int): Order of the base field of G1.
        g1: Generator of G1.
        g2: Generator of G2.
    """

    def __init__(self, curve: BilinearPairingCurve):
        """Initialise the proving system.

        Args:
            curve (BilinearPairingCurve): Curve over which the keys are generated.
        """
        self.curve = curve
        self.scalar_modulus = curve.scalar_field.get_modulus()
        self.base_modulus = curve.g1_field.get_modulus()
        self.g1 = curve.g1_curve.get_generator()
        self.g2 = curve.g2_curve.get_generator()

    def _sample_scalar(self, rng: Random) -> int:
        return rng.randrange(1, self.scalar_modulus)

    def _g1_from_coordinates(self, coordinates: list[int]):
        field = type(self.g1.x)
        x, y = coordinates
        return self.curve.g1_curve(x=field(x), y=field(y), infinity=False)

    def _g2_from_coordinates(self, coordinates: list[int]):
        base_field = type(self.g1.x)
        field = type(self.g2.x)
        x0, x1, y0, y1 = coordinates
        return self.curve.g2_curve(
            x=field(base_field(x0), base_field(x1)),
            y=field(base_field(y0), base_field(y1)),
            infinity=False,
        )

    def srs_from_bytes_le(self, data: bytes) -> UniversalSRS:
        """Read back a structured reference string serialised over this curve.

        Raises:
            SerializationError: If `data` is not a well-formed serialised SRS.
        """
        return UniversalSRS.from_bytes_le(data, self.base_modulus, self._g1_from_coordinates, self._g2_from_coordinates)

    def max_degree(self, num_constraints: int, num_variables: int, num_non_zero: int) -> int:
        """Degree bound of an SRS able to index circuits of the given shape.

        Raises:
            SynthesisError: If the shape needs a domain larger than the scalar field supports.
        """
        return ahp.max_degree(num_constraints, num_variables, num_non_zero, two_adicity(self.scalar_modulus))

    def universal_setup(self, max_degree: int, rng: Random) -> UniversalSRS:
        """Generate a structured reference string supporting polynomials up to degree `max_degree`.

        Args:
            max_degree (int): Largest degree the SRS supports.
            rng (Random): Source of the trapdoor.

        Returns:
            The structured reference string.

        Raises:
            SynthesisError: If `max_degree` is negative.
        """
        if max_degree < 0:
            msg = f"The degree bound must be non-negative: max_degree: {max_degree}"
            raise SynthesisError(msg)

        r = self.scalar_modulus
        beta = self._sample_scalar(rng)

        powers_of_beta_g = []
        power = 1
        for i in range(max_degree + 1):
            powers_of_beta_g.append(self.g1.multiply(power))
            power = power * beta % r
            if i and i % 65536 == 0:
                logger.debug("Computed %d of %d powers", i, max_degree + 1)

        return UniversalSRS(
            powers_of_beta_g=powers_of_beta_g,
            h=self.g2,
            beta_h=self.g2.multiply(beta),
            modulus=self.base_modulus,
        )

    def setup(self, circuit: BlankCircuit, rng: Random) -> tuple[ProvingKey, VerifyingKey]:
        """Run a circuit-specific setup.

        Args:
            circuit (BlankCircuit): Shape of the circuit.
            rng (Random): Source of the trapdoor.

        Returns:
            The proving key and the verifying key of the circuit.
        """
        r = self.scalar_modulus
        tau, alpha, beta, gamma, delta = (self._sample_scalar(rng) for _ in range(5))
        gamma_inverse = pow(gamma, -1, r)
        delta_inverse = pow(delta, -1, r)

        # Variable i evaluates to u_i(tau) = tau^i, v_i(tau) = tau^(i + 1), w_i(tau) = tau^(i + 2)
        u = [pow(tau, i, r) for i in range(circuit.num_variables)]
        v = [u_i * tau % r for u_i in u]
        w = [v_i * tau % r for v_i in v]
        combined = [(beta * u_i + alpha * v_i + w_i) % r for u_i, v_i, w_i in zip(u, v, w)]

        n = next_power_of_two(circuit.num_constraints)
        t_tau = (pow(tau, n, r) - 1) % r
        num_inputs = circuit.num_public_inputs + 1

        verifying_key = VerifyingKey(
            alpha_g1=self.g1.multiply(alpha),
            beta_g2=self.g2.multiply(beta),
            gamma_g2=self.g2.multiply(gamma),
            delta_g2=self.g2.multiply(delta),
            gamma_abc_g1=[self.g1.multiply(c * gamma_inverse % r) for c in combined[:num_inputs]],
            modulus=self.base_modulus,
        )
        proving_key = ProvingKey(
            verifying_key=verifying_key,
            beta_g1=self.g1.multiply(beta),
            delta_g1=self.g1.multiply(delta),
            a_query=[self.g1.multiply(u_i) for u_i in u],
            b_g1_query=[self.g1.multiply(v_i) for v_i in v],
            h_query=[self.g1.multiply(pow(tau, i, r) * t_tau * delta_inverse % r) for i in range(n - 1)],
            l_query=[self.g1.multiply(c * delta_inverse % r) for c in combined[num_inputs:]],
        )

        logger.debug(
            "Setup of %s: %d constraints, %d variables, %d public inputs",
            circuit.name,
            circuit.num_constraints,
            circuit.num_variables,
            circuit.num_public_inputs,
        )
        return proving_key, verifying_key

    def _index_coefficient(self, circuit: BlankCircuit, polynomial: int, term: int) -> int:
        seed = (
            f"{circuit.name}:{circuit.num_constraints}:{circuit.num_variables}:{circuit.num_non_zero}:"
            f"{polynomial}:{term}"
        )
        return int.from_bytes(hashlib.sha256(seed.encode()).digest(), byteorder="little") % self.scalar_modulus

    def posw_setup(self, circuit: BlankCircuit, srs: UniversalSRS) -> PoSW:
        """Index a circuit against a universal SRS.

        The SRS is trimmed to the degree bound of the circuit, and the index polynomials, which only depend on the
        shape of the circuit, are committed to with the trimmed powers. No randomness is consumed.

        Args:
            circuit (BlankCircuit): Shape of the circuit.
            srs (UniversalSRS): Structured reference string to index against.

        Returns:
            The proving and verifying keys of the circuit.

        Raises:
            SynthesisError: If the SRS does not support the degree bound of the circuit.
        """
        degree = self.max_degree(circuit.num_constraints, circuit.num_variables, circuit.num_non_zero)
        if degree > srs.max_degree:
            msg = f"The SRS supports degree {srs.max_degree}, but {circuit.name} requires degree {degree}"
            raise SynthesisError(msg)

        committer_powers = srs.powers_of_beta_g[: degree + 1]

        index_commitments = []
        for j in range(INDEX_POLYNOMIALS):
            commitment = committer_powers[0].multiply(self._index_coefficient(circuit, j, 0))
            for i in range(1, min(INDEX_POLYNOMIAL_TERMS, len(committer_powers))):
                commitment += committer_powers[i].multiply(self._index_coefficient(circuit, j, i))
            index_commitments.append(commitment)

        verifying_key = IndexVerifierKey(
            num_constraints=circuit.num_constraints,
            num_variables=circuit.num_variables,
            num_non_zero=circuit.num_non_zero,
            index_commitments=index_commitments,
            h=srs.h,
            beta_h=srs.beta_h,
            modulus=srs.modulus,
        )
        return PoSW(
            proving_key=IndexProverKey(verifying_key=verifying_key, committer_powers=committer_powers),
            verifying_key=verifying_key,
        )
