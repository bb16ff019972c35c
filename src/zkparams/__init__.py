"""zkparams: parameter generation for a zero-knowledge proving system.

The `zkparams` package generates the proving and verifying keys of a fixed set of circuits (a universal setup and
several circuit-specific setups), checksums them, names them for distribution after their checksum, and describes
them in a JSON manifest.

Usage example:
    From the command line, generate the parameters of the inner circuit of testnet2:

        $ zkparams-setup inner testnet2

    which prints the manifest and writes `inner.metadata`, `inner.proving.<checksum prefix>` and `inner.verifying`
    to the working directory.
"""
