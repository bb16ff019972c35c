"""networks package.

This package provides the networks parameters can be generated for.

Subpackages:
    - model: Contains the `Network` record.
    - testnet1: Contains the instantiation of testnet1 over BLS12-381.
    - testnet2: Contains the instantiation of testnet2 over MNT4-753.
"""

from enum import Enum

from zkparams.networks.model.network import Network
from zkparams.networks.testnet1.testnet1 import testnet1
from zkparams.networks.testnet2.testnet2 import testnet2


class NetworkId(Enum):
    TESTNET1 = "testnet1"
    TESTNET2 = "testnet2"


NETWORKS: dict[NetworkId, Network] = {
    NetworkId.TESTNET1: testnet1,
    NetworkId.TESTNET2: testnet2,
}


def get_network(network_id: NetworkId) -> Network:
    return NETWORKS[network_id]
