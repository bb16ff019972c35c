"""snark package.

This package provides the proving-system collaborator of the setup pipeline: the `ProvingSystem` interface the
pipeline relies on, and `PairingProvingSystem`, a reference implementation over the curves of `elliptic_curves`.

Subpackages:
    - model: Contains the blank circuit descriptor, the key types and their serialisation, the degree bounds of
        universal setups, and the reference proving system.

Usage example:
    Run a circuit-specific setup over BLS12-381:

    >>> from secrets import SystemRandom
    >>> from elliptic_curves.instantiations.bls12_381.bls12_381 import BLS12_381
    >>> from zkparams.snark.model.circuit import BlankCircuit
    >>> from zkparams.snark.model.proving_system import PairingProvingSystem
    >>>
    >>> proving_system = PairingProvingSystem(BLS12_381)
    >>> proving_key, verifying_key = proving_system.setup(BlankCircuit("toy", 4, 6, 1, 8), SystemRandom())
    >>> len(verifying_key.to_bytes_le())
    868
"""
