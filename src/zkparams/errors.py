"""Exceptions raised while generating parameters."""


class ZkParamsError(Exception):
    """Base class for errors that are propagated to the caller of a setup."""


class SerializationError(ZkParamsError):
    """An artifact could not be converted to its canonical byte form."""


class SynthesisError(ZkParamsError):
    """The proving system could not complete a setup for the requested sizes."""


class ConfigError(ZkParamsError):
    """The configuration file is missing or malformed."""


class InvariantViolation(Exception):  # noqa: N818
    """An unrecoverable condition: the run cannot continue and must abort.

    Raised for invalid network/parameter combinations and for setup results that lack a component the pipeline
    requires. It deliberately does not derive from `ZkParamsError`.
    """
