"""Testnet2: MNT4-753, BLAKE2s circuit identities, universal SRS."""

from elliptic_curves.instantiations.mnt4_753.mnt4_753 import MNT4_753

from zkparams.identity.circuit_id import Blake2sCRH
from zkparams.networks.model.network import Network
from zkparams.setup.parameter_kind import ParameterKind
from zkparams.snark.model.circuit import BlankCircuit
from zkparams.snark.model.proving_system import PairingProvingSystem

proving_system = PairingProvingSystem(MNT4_753)
r = proving_system.scalar_modulus

testnet2 = Network(
    name="testnet2",
    proving_system=proving_system,
    circuits={
        ParameterKind.INNER: BlankCircuit("inner", 2048, 2200, 8, 8192),
        ParameterKind.INPUT: BlankCircuit("input", 512, 560, 6, 2048),
        ParameterKind.OUTPUT: BlankCircuit("output", 512, 560, 6, 2048),
        ParameterKind.VALUE_CHECK: BlankCircuit("value_check", 256, 300, 3, 1024),
        ParameterKind.POSW: BlankCircuit("posw", 32768, 32768, 2, 65536),
    },
    circuit_id_crhs={
        ParameterKind.INNER: Blake2sCRH(b"zkpInner", r),
        ParameterKind.INPUT: Blake2sCRH(b"zkpInput", r),
        ParameterKind.OUTPUT: Blake2sCRH(b"zkpOutpt", r),
        ParameterKind.VALUE_CHECK: Blake2sCRH(b"zkpValCk", r),
    },
    supports_universal_srs=True,
)
