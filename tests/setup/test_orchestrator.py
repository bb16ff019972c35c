import hashlib
import json
import secrets
from random import Random

import pytest

from zkparams.config import SetupConfig
from zkparams.errors import InvariantViolation, SerializationError, SynthesisError
from zkparams.setup.orchestrator import run_setup
from zkparams.setup.parameter_kind import ParameterKind

SHA256_ABC = "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"
STUB_MODULUS = 2**255 - 19


def call_names(network):
    return [call[0] for call in network.proving_system.calls]


def test_inner_end_to_end(workdir, stub_network, capsys):
    metadata = run_setup(ParameterKind.INNER, stub_network, rng=Random(0))

    sha256_xyz = hashlib.sha256(b"xyz").hexdigest()
    circuit_id = (
        (int.from_bytes(hashlib.sha256(b"xyz").digest(), byteorder="little") % STUB_MODULUS)
        .to_bytes(32, byteorder="little")
        .hex()
    )
    expected = {
        "proving_checksum": SHA256_ABC,
        "proving_size": 3,
        "verifying_checksum": sha256_xyz,
        "verifying_size": 3,
        "circuit_id": circuit_id,
    }

    assert metadata.to_dict() == expected
    assert json.loads((workdir / "inner.metadata").read_text()) == expected
    assert list(json.loads((workdir / "inner.metadata").read_text())) == list(expected)
    assert (workdir / "inner.proving.ba7816b").read_bytes() == b"abc"
    assert (workdir / "inner.verifying").read_bytes() == b"xyz"
    assert sorted(p.name for p in workdir.iterdir()) == ["inner.metadata", "inner.proving.ba7816b", "inner.verifying"]
    assert capsys.readouterr().out == (workdir / "inner.metadata").read_text()


@pytest.mark.parametrize(
    "kind", [ParameterKind.INNER, ParameterKind.INPUT, ParameterKind.OUTPUT, ParameterKind.VALUE_CHECK]
)
def test_circuit_specific_kinds(workdir, stub_network, kind):
    metadata = run_setup(kind, stub_network, rng=Random(0))

    assert metadata.circuit_id is not None
    assert (workdir / f"{kind.value}.metadata").exists()
    assert (workdir / f"{kind.value}.proving.ba7816b").read_bytes() == b"abc"
    assert (workdir / f"{kind.value}.verifying").read_bytes() == b"xyz"

    setup_call = stub_network.proving_system.calls[0]
    assert setup_call[0] == "setup"
    assert setup_call[1] == stub_network.blank_circuit(kind)


def test_universal(workdir, make_stub_network):
    network = make_stub_network(srs=b"abc")

    metadata = run_setup(ParameterKind.UNIVERSAL, network, rng=Random(0))

    assert metadata.to_dict() == {"srs_checksum": SHA256_ABC, "srs_size": 3}
    assert json.loads((workdir / "universal.metadata").read_text()) == metadata.to_dict()
    assert (workdir / "universal.srs.ba7816b").read_bytes() == b"abc"
    assert sorted(p.name for p in workdir.iterdir()) == ["universal.metadata", "universal.srs.ba7816b"]
    assert network.proving_system.calls[0] == ("max_degree", (2_000_000, 4_000_000, 8_000_000))
    assert network.proving_system.calls[1][:2] == ("universal_setup", 14_000_000)


def test_posw_is_a_two_stage_setup(workdir, stub_network):
    metadata = run_setup(ParameterKind.POSW, stub_network, rng=Random(0))

    assert call_names(stub_network) == ["max_degree", "universal_setup", "srs_from_bytes_le", "posw_setup"]
    calls = stub_network.proving_system.calls
    assert calls[0] == ("max_degree", (40_000, 40_000, 60_000))
    assert calls[1][1] == 140_000
    # The second stage indexes against the SRS read back from the bytes of the first
    assert calls[2] == ("srs_from_bytes_le", b"reference string")
    assert calls[3][2].to_bytes_le() == b"reference string"

    assert metadata.circuit_id is None
    assert "circuit_id" not in json.loads((workdir / "posw.metadata").read_text())
    assert (workdir / "posw.proving.ba7816b").read_bytes() == b"abc"
    assert (workdir / "posw.verifying").read_bytes() == b"xyz"


def test_posw_without_proving_key_aborts(workdir, make_stub_network):
    network = make_stub_network(posw_has_proving_key=False)

    with pytest.raises(InvariantViolation):
        run_setup(ParameterKind.POSW, network, rng=Random(0))

    assert list(workdir.iterdir()) == []


def test_posw_srs_that_does_not_read_back_aborts(workdir, make_stub_network):
    network = make_stub_network(decode_failure=SerializationError("Trailing data"))

    with pytest.raises(SerializationError):
        run_setup(ParameterKind.POSW, network, rng=Random(0))

    assert "posw_setup" not in call_names(network)
    assert list(workdir.iterdir()) == []


def test_universal_on_unsupported_network_aborts(workdir, make_stub_network):
    network = make_stub_network(supports_universal_srs=False)

    with pytest.raises(InvariantViolation):
        run_setup(ParameterKind.UNIVERSAL, network)

    assert network.proving_system.calls == []
    assert list(workdir.iterdir()) == []


@pytest.mark.parametrize("kind", [ParameterKind.INNER, ParameterKind.UNIVERSAL])
def test_setup_failure_propagates(workdir, make_stub_network, kind):
    network = make_stub_network(failure=SynthesisError("domain too large"))

    with pytest.raises(SynthesisError):
        run_setup(kind, network)

    assert list(workdir.iterdir()) == []


def test_degree_bounds_come_from_the_configuration(workdir, stub_network):
    config = SetupConfig()
    config.degree_bounds[ParameterKind.POSW] = (1, 2, 3)

    run_setup(ParameterKind.POSW, stub_network, config=config)

    assert stub_network.proving_system.calls[0] == ("max_degree", (1, 2, 3))


def test_default_randomness_is_fresh(workdir, stub_network):
    run_setup(ParameterKind.INNER, stub_network)

    assert isinstance(stub_network.proving_system.calls[0][2], secrets.SystemRandom)


def test_runs_are_reproducible(workdir, make_stub_network):
    first = run_setup(ParameterKind.INNER, make_stub_network())
    first_manifest = (workdir / "inner.metadata").read_text()
    second = run_setup(ParameterKind.INNER, make_stub_network())

    assert first == second
    assert (workdir / "inner.metadata").read_text() == first_manifest


def test_write_failure_propagates(workdir, stub_network):
    (workdir / "inner.verifying").mkdir()

    with pytest.raises(OSError):  # noqa: PT011
        run_setup(ParameterKind.INNER, stub_network)

    # Files written before the failure are left in place
    assert (workdir / "inner.metadata").exists()
    assert (workdir / "inner.proving.ba7816b").exists()
