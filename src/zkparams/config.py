"""Configuration of the setup tool."""

import logging
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from zkparams.errors import ConfigError
from zkparams.setup.parameter_kind import PROFILES, DegreeBounds, ParameterKind

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _default_degree_bounds() -> dict[ParameterKind, DegreeBounds]:
    return {kind: profile.degree_bounds for kind, profile in PROFILES.items() if profile.degree_bounds is not None}


@dataclass
class SetupConfig:
    """Settings of a setup run.

    Attributes:
        log_level (str): Level of the messages logged on standard error.
        degree_bounds (dict[ParameterKind, DegreeBounds]): Sizes of the SRS generated by the kinds that generate one.
    """

    log_level: str = "INFO"
    degree_bounds: dict[ParameterKind, DegreeBounds] = field(default_factory=_default_degree_bounds)

    def __post_init__(self):
        if not isinstance(self.log_level, str) or self.log_level.upper() not in LOG_LEVELS:
            msg = f"Unknown log level: {self.log_level}"
            raise ConfigError(msg)
        self.log_level = self.log_level.upper()

    @property
    def logging_level(self) -> int:
        return getattr(logging, self.log_level)


def _is_degree_bound(value) -> bool:
    # TOML booleans are ints in Python
    return type(value) is int and value > 0


def _parse_degree_bounds(data) -> dict[ParameterKind, DegreeBounds]:
    if not isinstance(data, dict):
        msg = f"degree_bounds must be a table, got: {data!r}"
        raise ConfigError(msg)

    out = _default_degree_bounds()
    for key, bounds in data.items():
        try:
            kind = ParameterKind(key)
        except ValueError as e:
            msg = f"Unknown parameter kind in degree_bounds: {key}"
            raise ConfigError(msg) from e
        if kind not in out:
            msg = f"The parameter kind {key} does not generate an SRS"
            raise ConfigError(msg)
        well_formed = isinstance(bounds, list) and len(bounds) == 3  # noqa: PLR2004
        if not well_formed or not all(_is_degree_bound(b) for b in bounds):
            msg = f"The degree bounds of {key} must be three positive integers: {bounds}"
            raise ConfigError(msg)
        out[kind] = tuple(bounds)
    return out


def load_config(config_path: Optional[Path] = None) -> SetupConfig:
    """Load the configuration from a TOML file, or return the default configuration.

    Example of configuration file:
        log_level = "DEBUG"

        [degree_bounds]
        posw = [40000, 40000, 60000]

    Args:
        config_path (Path | None): Path of the configuration file. If `None`, the default configuration is returned.

    Returns:
        The configuration.

    Raises:
        ConfigError: If the file cannot be read or is malformed.
    """
    if config_path is None:
        return SetupConfig()

    try:
        with Path.open(config_path, "rb") as f:
            data = tomllib.load(f)
    except OSError as e:
        msg = f"Could not read configuration file {config_path}: {e}"
        raise ConfigError(msg) from e
    except tomllib.TOMLDecodeError as e:
        msg = f"Malformed configuration file {config_path}: {e}"
        raise ConfigError(msg) from e

    unknown = set(data) - {"log_level", "degree_bounds"}
    if unknown:
        msg = f"Unknown configuration keys: {sorted(unknown)}"
        raise ConfigError(msg)

    return SetupConfig(
        log_level=data.get("log_level", "INFO"),
        degree_bounds=_parse_degree_bounds(data.get("degree_bounds", {})),
    )
