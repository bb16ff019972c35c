"""Testnet1: BLS12-381, double SHA-256 circuit identities, no universal SRS."""

from elliptic_curves.instantiations.bls12_381.bls12_381 import BLS12_381

from zkparams.identity.circuit_id import DoubleSha256CRH
from zkparams.networks.model.network import Network
from zkparams.setup.parameter_kind import ParameterKind
from zkparams.snark.model.circuit import BlankCircuit
from zkparams.snark.model.proving_system import PairingProvingSystem

proving_system = PairingProvingSystem(BLS12_381)
r = proving_system.scalar_modulus

testnet1 = Network(
    name="testnet1",
    proving_system=proving_system,
    circuits={
        ParameterKind.INNER: BlankCircuit("inner", 1024, 1100, 8, 4096),
        ParameterKind.INPUT: BlankCircuit("input", 512, 560, 5, 2048),
        ParameterKind.OUTPUT: BlankCircuit("output", 512, 560, 5, 2048),
        ParameterKind.VALUE_CHECK: BlankCircuit("value_check", 256, 300, 3, 1024),
        ParameterKind.POSW: BlankCircuit("posw", 16384, 16384, 2, 32768),
    },
    circuit_id_crhs={
        ParameterKind.INNER: DoubleSha256CRH(b"zkparams.inner.circuit_id", r),
        ParameterKind.INPUT: DoubleSha256CRH(b"zkparams.input.circuit_id", r),
        ParameterKind.OUTPUT: DoubleSha256CRH(b"zkparams.output.circuit_id", r),
        ParameterKind.VALUE_CHECK: DoubleSha256CRH(b"zkparams.value_check.circuit_id", r),
    },
    supports_universal_srs=False,
)
