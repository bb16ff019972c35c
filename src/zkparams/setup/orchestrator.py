"""The setup pipeline shared by every parameter kind."""

import logging
import secrets
from dataclasses import dataclass
from random import Random
from typing import Optional, assert_never

from zkparams.artifacts.checksum import checksum
from zkparams.artifacts.metadata import Metadata, emit_metadata
from zkparams.artifacts.writer import write_local, write_remote
from zkparams.config import SetupConfig
from zkparams.errors import InvariantViolation
from zkparams.identity.circuit_id import derive_circuit_id
from zkparams.networks.model.network import Network
from zkparams.setup.parameter_kind import PROFILES, ParameterKind, SetupProfile, SetupStage

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SetupArtifacts:
    """Serialised output of a setup, ready to be checksummed and persisted.

    Attributes:
        remote_bytes (bytes): Proving key, or SRS for a universal setup. Distributed under a versioned name.
        local_bytes (bytes | None): Verifying key, if the setup produces one.
        circuit_id (str | None): Circuit identity, if the kind carries one.
    """

    remote_bytes: bytes
    local_bytes: Optional[bytes] = None
    circuit_id: Optional[str] = None


def _universal_stage(profile: SetupProfile, network: Network, rng: Random, config: SetupConfig) -> SetupArtifacts:
    proving_system = network.proving_system
    max_degree = proving_system.max_degree(*config.degree_bounds[profile.kind])
    logger.info("Generating a universal SRS of degree %d for %s", max_degree, network.name)
    srs = proving_system.universal_setup(max_degree, rng)
    return SetupArtifacts(remote_bytes=srs.to_bytes_le())


def _circuit_specific_stage(
    profile: SetupProfile, network: Network, rng: Random, config: SetupConfig
) -> SetupArtifacts:
    circuit = network.blank_circuit(profile.kind)
    logger.info("Running the %s circuit setup for %s", circuit.name, network.name)
    proving_key, verifying_key = network.proving_system.setup(circuit, rng)

    # The identity is derived from the structured key, before it is serialised.
    circuit_id = None
    if profile.carries_circuit_id:
        circuit_id = derive_circuit_id(verifying_key, network.circuit_id_crh(profile.kind))

    return SetupArtifacts(
        remote_bytes=proving_key.to_bytes_le(),
        local_bytes=verifying_key.to_bytes_le(),
        circuit_id=circuit_id,
    )


def _posw_stage(profile: SetupProfile, network: Network, rng: Random, config: SetupConfig) -> SetupArtifacts:
    proving_system = network.proving_system

    # Stage 1: an SRS dedicated to the posw circuit.
    max_degree = proving_system.max_degree(*config.degree_bounds[profile.kind])
    logger.info("Generating a posw SRS of degree %d for %s", max_degree, network.name)
    srs_bytes = proving_system.universal_setup(max_degree, rng).to_bytes_le()
    logger.info("posw srs size: %d bytes", len(srs_bytes))

    # Stage 2: index the posw circuit against the SRS read back from its serialisation.
    srs = proving_system.srs_from_bytes_le(srs_bytes)
    posw = proving_system.posw_setup(network.blank_circuit(profile.kind), srs)
    if posw.proving_key is None:
        msg = "The posw setup returned no proving key"
        raise InvariantViolation(msg)

    circuit_id = None
    if profile.carries_circuit_id:
        circuit_id = derive_circuit_id(posw.verifying_key, network.circuit_id_crh(profile.kind))

    return SetupArtifacts(
        remote_bytes=posw.proving_key.to_bytes_le(),
        local_bytes=posw.verifying_key.to_bytes_le(),
        circuit_id=circuit_id,
    )


def _build_metadata(artifacts: SetupArtifacts) -> tuple[Metadata, str]:
    remote_checksum = checksum(artifacts.remote_bytes)
    if artifacts.local_bytes is None:
        return Metadata.for_srs(remote_checksum, len(artifacts.remote_bytes)), remote_checksum

    metadata = Metadata.for_keys(
        proving_checksum=remote_checksum,
        proving_size=len(artifacts.remote_bytes),
        verifying_checksum=checksum(artifacts.local_bytes),
        verifying_size=len(artifacts.local_bytes),
        circuit_id=artifacts.circuit_id,
    )
    return metadata, remote_checksum


def run_setup(
    kind: ParameterKind,
    network: Network,
    rng: Optional[Random] = None,
    config: Optional[SetupConfig] = None,
) -> Metadata:
    """Generate, describe and persist the parameters of `kind` for `network`.

    The metadata is printed on standard output and written to `<kind>.metadata`. The proving key (or the SRS of a
    universal setup) is written to `<kind>.proving.<checksum prefix>` (`universal.srs.<checksum prefix>`), and the
    verifying key to `<kind>.verifying`, all in the working directory. The first failure aborts the run; files
    written before it are left in place.

    Args:
        kind (ParameterKind): Kind of parameters to generate.
        network (Network): Network to generate them for.
        rng (Random | None): Source of randomness of the setup. Defaults to a fresh `secrets.SystemRandom()`.
        config (SetupConfig | None): Configuration of the run. Defaults to `SetupConfig()`.

    Returns:
        The metadata of the generated parameters.

    Raises:
        InvariantViolation: If `network` cannot generate `kind`, or the setup result lacks a proving key.
        ZkParamsError: If the setup or the serialisation of its result fails.
        OSError: If an artifact cannot be written.
    """
    profile = PROFILES[kind]
    rng = rng if rng is not None else secrets.SystemRandom()
    config = config if config is not None else SetupConfig()

    if profile.stage is SetupStage.UNIVERSAL and not network.supports_universal_srs:
        msg = f"{network.name} does not support a universal SRS"
        raise InvariantViolation(msg)

    match profile.stage:
        case SetupStage.UNIVERSAL:
            artifacts = _universal_stage(profile, network, rng, config)
        case SetupStage.CIRCUIT_SPECIFIC:
            artifacts = _circuit_specific_stage(profile, network, rng, config)
        case SetupStage.POSW:
            artifacts = _posw_stage(profile, network, rng, config)
        case _:
            assert_never(profile.stage)

    metadata, remote_checksum = _build_metadata(artifacts)

    emit_metadata(profile.metadata_filename, metadata)
    path = write_remote(profile.remote_filename, remote_checksum, artifacts.remote_bytes)
    logger.info("Wrote %s", path)
    if artifacts.local_bytes is not None:
        path = write_local(profile.local_filename, artifacts.local_bytes)
        logger.info("Wrote %s", path)

    return metadata
