"""Networks: the field arithmetic, circuit shapes and identity hashes a setup runs against."""

from dataclasses import dataclass

from zkparams.identity.circuit_id import CircuitIdCRH
from zkparams.setup.parameter_kind import ParameterKind
from zkparams.snark.model.circuit import BlankCircuit
from zkparams.snark.model.proving_system import ProvingSystem


@dataclass(frozen=True)
class Network:
    """A network the setup tool can generate parameters for.

    Attributes:
        name (str): Name of the network.
        proving_system (ProvingSystem): Proving system instantiated over the curve of the network.
        circuits (dict[ParameterKind, BlankCircuit]): Blank circuit of every kind that has one.
        circuit_id_crhs (dict[ParameterKind, CircuitIdCRH]): Identity hash of every kind that carries a circuit id.
        supports_universal_srs (bool): Whether a universal SRS can be generated for the network.
    """

    name: str
    proving_system: ProvingSystem
    circuits: dict[ParameterKind, BlankCircuit]
    circuit_id_crhs: dict[ParameterKind, CircuitIdCRH]
    supports_universal_srs: bool

    def blank_circuit(self, kind: ParameterKind) -> BlankCircuit:
        """Return the blank circuit of `kind`.

        Raises:
            KeyError: If the network defines no circuit for `kind`.
        """
        return self.circuits[kind]

    def circuit_id_crh(self, kind: ParameterKind) -> CircuitIdCRH:
        """Return the identity hash of `kind`.

        Raises:
            KeyError: If the network defines no identity hash for `kind`.
        """
        return self.circuit_id_crhs[kind]
