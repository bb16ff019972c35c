"""Manifest describing the artifacts produced by a setup."""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Metadata:
    """Sizes, checksums and, where applicable, the circuit identity of a set of artifacts.

    A universal setup only fills the `srs_*` fields; every other setup fills the `proving_*` and `verifying_*` fields
    and, for circuit-specific setups, `circuit_id`.

    Attributes:
        proving_checksum (str | None): Checksum of the serialised proving key.
        proving_size (int | None): Size in bytes of the serialised proving key.
        verifying_checksum (str | None): Checksum of the serialised verifying key.
        verifying_size (int | None): Size in bytes of the serialised verifying key.
        circuit_id (str | None): Identity of the circuit, derived from its verifying key.
        srs_checksum (str | None): Checksum of the serialised structured reference string.
        srs_size (int | None): Size in bytes of the serialised structured reference string.
    """

    proving_checksum: Optional[str] = None
    proving_size: Optional[int] = None
    verifying_checksum: Optional[str] = None
    verifying_size: Optional[int] = None
    circuit_id: Optional[str] = None
    srs_checksum: Optional[str] = None
    srs_size: Optional[int] = None

    @classmethod
    def for_srs(cls, srs_checksum: str, srs_size: int) -> "Metadata":
        """Metadata of a universal setup."""
        return cls(srs_checksum=srs_checksum, srs_size=srs_size)

    @classmethod
    def for_keys(
        cls,
        proving_checksum: str,
        proving_size: int,
        verifying_checksum: str,
        verifying_size: int,
        circuit_id: Optional[str] = None,
    ) -> "Metadata":
        """Metadata of a setup producing a proving and a verifying key."""
        return cls(
            proving_checksum=proving_checksum,
            proving_size=proving_size,
            verifying_checksum=verifying_checksum,
            verifying_size=verifying_size,
            circuit_id=circuit_id,
        )

    def to_dict(self) -> dict:
        """Return the fields that are set, in manifest order."""
        if self.srs_checksum is not None:
            return {"srs_checksum": self.srs_checksum, "srs_size": self.srs_size}

        out = {
            "proving_checksum": self.proving_checksum,
            "proving_size": self.proving_size,
            "verifying_checksum": self.verifying_checksum,
            "verifying_size": self.verifying_size,
        }
        if self.circuit_id is not None:
            out["circuit_id"] = self.circuit_id
        return out

    def to_json(self) -> str:
        """Pretty-printed JSON document of the manifest."""
        return json.dumps(self.to_dict(), indent=2)


def write_metadata(filename: str, metadata: Metadata) -> Path:
    """Write the JSON form of `metadata` to `filename`, creating or truncating it.

    The file ends with a newline, so that it holds exactly what `emit_metadata` prints.

    Raises:
        OSError: If the file cannot be written.
    """
    path = Path(filename)
    with path.open("w") as f:
        f.write(metadata.to_json() + "\n")
    logger.debug("Wrote metadata to %s", path)
    return path


def emit_metadata(filename: str, metadata: Metadata) -> Path:
    """Print the JSON form of `metadata` on standard output, then persist it with `write_metadata`."""
    print(metadata.to_json())
    return write_metadata(filename, metadata)
