import hashlib
from dataclasses import dataclass, field
from typing import Optional

import pytest

from zkparams.identity.circuit_id import CircuitIdCRH
from zkparams.networks.model.network import Network
from zkparams.setup.parameter_kind import ParameterKind
from zkparams.snark.model.circuit import BlankCircuit
from zkparams.util.utility_functions import bitmask_to_boolean_list

STUB_MODULUS = 2**255 - 19


def pytest_addoption(parser):
    parser.addoption(
        "--run-slow",
        action="store_true",
        default=False,
        help="Run the setups over MNT4-753, which take minutes in pure Python",
    )


def pytest_collection_modifyitems(config, items):
    if config.getoption("--run-slow"):
        return
    skip_slow = pytest.mark.skip(reason="needs --run-slow")
    for item in items:
        if "slow" in item.keywords:
            item.add_marker(skip_slow)


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: setups over large curves")


@dataclass
class StubKey:
    data: bytes

    def to_bytes_le(self) -> bytes:
        return self.data

    def to_minimal_bits(self) -> list[bool]:
        return bitmask_to_boolean_list(int.from_bytes(self.data, byteorder="little"), 8 * len(self.data))


@dataclass
class StubPoSW:
    proving_key: Optional[StubKey]
    verifying_key: StubKey


class Sha256CRH(CircuitIdCRH):
    def _digest(self, data: bytes) -> bytes:
        return hashlib.sha256(self.personalisation + data).digest()


@dataclass
class StubProvingSystem:
    """Proving system returning fixed bytes and recording the calls it receives."""

    proving: bytes = b"abc"
    verifying: bytes = b"xyz"
    srs: bytes = b"reference string"
    posw_has_proving_key: bool = True
    failure: Optional[Exception] = None
    decode_failure: Optional[Exception] = None
    calls: list = field(default_factory=list)

    def max_degree(self, num_constraints, num_variables, num_non_zero):
        self.calls.append(("max_degree", (num_constraints, num_variables, num_non_zero)))
        return num_constraints + num_variables + num_non_zero

    def universal_setup(self, max_degree, rng):
        self.calls.append(("universal_setup", max_degree, rng))
        if self.failure is not None:
            raise self.failure
        return StubKey(self.srs)

    def setup(self, circuit, rng):
        self.calls.append(("setup", circuit, rng))
        if self.failure is not None:
            raise self.failure
        return StubKey(self.proving), StubKey(self.verifying)

    def srs_from_bytes_le(self, data):
        self.calls.append(("srs_from_bytes_le", data))
        if self.decode_failure is not None:
            raise self.decode_failure
        return StubKey(data)

    def posw_setup(self, circuit, srs):
        self.calls.append(("posw_setup", circuit, srs))
        return StubPoSW(StubKey(self.proving) if self.posw_has_proving_key else None, StubKey(self.verifying))


@pytest.fixture
def make_stub_network():
    def make(supports_universal_srs: bool = True, **kwargs) -> Network:
        return Network(
            name="stubnet",
            proving_system=StubProvingSystem(**kwargs),
            circuits={
                kind: BlankCircuit(kind.value, 4, 6, 1, 8) for kind in ParameterKind if kind != ParameterKind.UNIVERSAL
            },
            circuit_id_crhs={
                kind: Sha256CRH(b"", STUB_MODULUS)
                for kind in [ParameterKind.INNER, ParameterKind.INPUT, ParameterKind.OUTPUT, ParameterKind.VALUE_CHECK]
            },
            supports_universal_srs=supports_universal_srs,
        )

    return make


@pytest.fixture
def stub_network(make_stub_network):
    return make_stub_network()


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path
