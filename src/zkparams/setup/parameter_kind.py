"""Parameter kinds and the per-kind configuration of the setup pipeline."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ParameterKind(Enum):
    UNIVERSAL = "universal"
    INNER = "inner"
    INPUT = "input"
    OUTPUT = "output"
    VALUE_CHECK = "value_check"
    POSW = "posw"


class SetupStage(Enum):
    """How the keys of a kind are produced."""

    UNIVERSAL = "universal"
    CIRCUIT_SPECIFIC = "circuit_specific"
    POSW = "posw"


DegreeBounds = tuple[int, int, int]


@dataclass(frozen=True)
class SetupProfile:
    """Everything that distinguishes the setup of one parameter kind from another.

    Attributes:
        kind (ParameterKind): The parameter kind.
        stage (SetupStage): How the keys are produced.
        degree_bounds (DegreeBounds | None): Number of constraints, variables and non-zero entries the SRS of the
            kind must support. Only set for the stages that generate an SRS.
        carries_circuit_id (bool): Whether the metadata of the kind includes a circuit identity.
    """

    kind: ParameterKind
    stage: SetupStage
    degree_bounds: Optional[DegreeBounds] = None
    carries_circuit_id: bool = False

    @property
    def metadata_filename(self) -> str:
        return f"{self.kind.value}.metadata"

    @property
    def remote_filename(self) -> str:
        """Unversioned name of the artifact distributed under a versioned name."""
        if self.stage is SetupStage.UNIVERSAL:
            return f"{self.kind.value}.srs"
        return f"{self.kind.value}.proving"

    @property
    def local_filename(self) -> Optional[str]:
        """Name of the verifying key, or `None` for kinds that only produce an SRS."""
        if self.stage is SetupStage.UNIVERSAL:
            return None
        return f"{self.kind.value}.verifying"


UNIVERSAL_DEGREE_BOUNDS: DegreeBounds = (2_000_000, 4_000_000, 8_000_000)
POSW_DEGREE_BOUNDS: DegreeBounds = (40_000, 40_000, 60_000)

PROFILES: dict[ParameterKind, SetupProfile] = {
    ParameterKind.UNIVERSAL: SetupProfile(ParameterKind.UNIVERSAL, SetupStage.UNIVERSAL, UNIVERSAL_DEGREE_BOUNDS),
    ParameterKind.INNER: SetupProfile(ParameterKind.INNER, SetupStage.CIRCUIT_SPECIFIC, carries_circuit_id=True),
    ParameterKind.INPUT: SetupProfile(ParameterKind.INPUT, SetupStage.CIRCUIT_SPECIFIC, carries_circuit_id=True),
    ParameterKind.OUTPUT: SetupProfile(ParameterKind.OUTPUT, SetupStage.CIRCUIT_SPECIFIC, carries_circuit_id=True),
    ParameterKind.VALUE_CHECK: SetupProfile(
        ParameterKind.VALUE_CHECK, SetupStage.CIRCUIT_SPECIFIC, carries_circuit_id=True
    ),
    ParameterKind.POSW: SetupProfile(ParameterKind.POSW, SetupStage.POSW, POSW_DEGREE_BOUNDS),
}

if set(PROFILES) != set(ParameterKind):
    msg = f"Missing setup profiles: {set(ParameterKind) - set(PROFILES)}"
    raise RuntimeError(msg)
