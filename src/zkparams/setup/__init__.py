"""setup package.

This package provides the setup pipeline: the parameter kinds, the table of per-kind profiles, and the generic
orchestrator that runs a setup, derives circuit identities, checksums the artifacts and persists them.

Usage example:
    Generate the inner circuit parameters of testnet2 in the working directory:

    >>> from zkparams.networks import NetworkId, get_network
    >>> from zkparams.setup.orchestrator import run_setup
    >>> from zkparams.setup.parameter_kind import ParameterKind
    >>>
    >>> metadata = run_setup(ParameterKind.INNER, get_network(NetworkId.TESTNET2))
"""
