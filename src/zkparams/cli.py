"""Command line entry point: `zkparams-setup <parameter> <network>`.

Positional arguments after the network are accepted and ignored.
"""

import argparse
import logging
import sys
from enum import Enum
from pathlib import Path
from typing import Optional, TypeVar

from zkparams.config import load_config
from zkparams.errors import ConfigError, InvariantViolation, ZkParamsError
from zkparams.networks import NetworkId, get_network
from zkparams.setup.orchestrator import run_setup
from zkparams.setup.parameter_kind import ParameterKind

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

E = TypeVar("E", bound=Enum)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="zkparams-setup",
        description="Generate the parameters of a circuit, print their metadata and write them to the working \
            directory.",
    )
    parser.add_argument(
        "parameter",
        nargs="?",
        help=f"Parameters to generate: {', '.join(k.value for k in ParameterKind)}",
    )
    parser.add_argument(
        "network",
        nargs="?",
        help=f"Network to generate them for: {', '.join(n.value for n in NetworkId)}",
    )
    parser.add_argument("extra", nargs="*", help=argparse.SUPPRESS)
    parser.add_argument("--config", type=Path, help="TOML configuration file", required=False)
    return parser


def _parse_selector(parser: argparse.ArgumentParser, selector: type[E], value: str, name: str) -> E:
    """Map a command line token to a member of `selector`, aborting on unknown tokens."""
    try:
        return selector(value)
    except ValueError:
        parser.error(f"Invalid {name}: {value}. Expected one of: {', '.join(m.value for m in selector)}")


def main(argv: Optional[list[str]] = None) -> int:
    """Run the setup selected on the command line.

    Exit status:
        - 0: the setup succeeded, or fewer than two selectors were given (a usage message is printed).
        - 1: the setup failed with a propagated error (I/O, serialisation, setup failure).
        - 2: invalid selectors or configuration, or an unrecoverable condition during the setup.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    given = sum(arg is not None for arg in (args.parameter, args.network))
    if given < 2:  # noqa: PLR2004
        print(f"Invalid number of arguments. Given: {given} - Required: 2", file=sys.stderr)
        parser.print_usage(sys.stderr)
        return 0

    kind = _parse_selector(parser, ParameterKind, args.parameter, "parameter")
    network = get_network(_parse_selector(parser, NetworkId, args.network, "network"))
    if kind is ParameterKind.UNIVERSAL and not network.supports_universal_srs:
        parser.error(f"{network.name} does not support a universal SRS")

    try:
        config = load_config(args.config)
    except ConfigError as e:
        parser.error(str(e))

    logging.basicConfig(level=config.logging_level, format=LOG_FORMAT, stream=sys.stderr)

    try:
        run_setup(kind, network, config=config)
    except InvariantViolation as e:
        parser.exit(2, f"{parser.prog}: fatal: {e}\n")
    except (ZkParamsError, OSError) as e:
        logger.error("The %s setup for %s failed: %s", kind.value, network.name, e)  # noqa: TRY400
        return 1

    return 0
