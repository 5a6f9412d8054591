"""
Labor genesis composer CLI entry point.

Build the chain specification of a Labor network, or inspect the keys a
secret URI derives.

Usage::

    python -m labor_spec build-spec --chain dev
    python -m labor_spec build-spec --chain staging --output labor-testnet.json
    python -m labor_spec build-spec --chain network.yaml --seed 7 --runtime runtime.wasm
    python -m labor_spec inspect-key //Alice
    python -m labor_spec inspect-key //Alice//stash --network-prefix 2

Commands:
    build-spec   Compose a chain specification and print it as JSON
    inspect-key  Show the public key, address and session keys of a secret URI

Options:
    --chain            dev, local, staging, a .yaml parameter file or a .json snapshot
    --output           Write the chain specification to a file instead of stdout
    --runtime          Runtime code blob stored in the genesis state
    --seed             Seed for nomination targets of custom chains
    --network-prefix   SS58 address prefix (default: 42)
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import yaml
from pydantic import ValidationError

from labor_spec.subspecs.chain_spec import load_chain_spec
from labor_spec.subspecs.keys import DEFAULT_SS58_PREFIX, inspect_key
from labor_spec.types import GenesisError

logger = logging.getLogger(__name__)


class ColoredFormatter(logging.Formatter):
    """Logging formatter with ANSI colors for better readability."""

    # ANSI color codes
    GREY = "\x1b[38;5;244m"
    BLUE = "\x1b[38;5;39m"
    GREEN = "\x1b[38;5;40m"
    YELLOW = "\x1b[38;5;220m"
    RED = "\x1b[38;5;196m"
    BOLD_RED = "\x1b[38;5;196;1m"
    CYAN = "\x1b[38;5;51m"
    RESET = "\x1b[0m"

    LEVEL_COLORS = {
        logging.DEBUG: GREY,
        logging.INFO: GREEN,
        logging.WARNING: YELLOW,
        logging.ERROR: RED,
        logging.CRITICAL: BOLD_RED,
    }

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with colors."""
        color = self.LEVEL_COLORS.get(record.levelno, self.RESET)

        timestamp = f"{self.CYAN}{self.formatTime(record, self.datefmt)}{self.RESET}"
        levelname = f"{color}{record.levelname:8}{self.RESET}"
        name = f"{self.BLUE}{record.name}{self.RESET}"

        return f"{timestamp} {levelname} {name}: {record.getMessage()}"


def setup_logging(verbose: bool = False, no_color: bool = False) -> None:
    """Send log records to stderr, keeping stdout free for the chain specification."""
    level = logging.DEBUG if verbose else logging.INFO

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)

    if no_color:
        formatter = logging.Formatter(
            "%(asctime)s %(levelname)-8s %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    else:
        formatter = ColoredFormatter(datefmt="%Y-%m-%d %H:%M:%S")

    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.setLevel(level)
    root.addHandler(handler)


def build_spec(
    chain: str, output: Path | None, runtime: Path | None, seed: int | None
) -> None:
    """Compose the requested chain specification and write it out."""
    code = runtime.read_bytes() if runtime is not None else b""
    if runtime is not None:
        logger.info("Loaded %d bytes of runtime code from %s", len(code), runtime)

    spec = load_chain_spec(chain, code=code, rng_seed=seed)
    text = spec.to_json()

    if output is None:
        print(text)
    else:
        output.write_text(text + "\n", encoding="utf-8")
        logger.info("Wrote chain spec %s to %s", spec.id, output)


def print_key(suri: str, prefix: int) -> None:
    """Print what a secret URI derives, one `label: value` line each."""
    for label, value in inspect_key(suri, prefix).items():
        print(f"{label}: {value}")


def create_parser() -> argparse.ArgumentParser:
    """Command-line parser for both subcommands."""
    parser = argparse.ArgumentParser(
        prog="labor-spec",
        description="Labor network genesis composer",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored logging output",
    )

    commands = parser.add_subparsers(dest="command", required=True)

    build = commands.add_parser("build-spec", help="Compose a chain specification")
    build.add_argument(
        "--chain",
        default="dev",
        help="dev, local, staging, a .yaml parameter file or a .json snapshot (default: dev)",
    )
    build.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Write the chain specification to this file instead of stdout",
    )
    build.add_argument(
        "--runtime",
        type=Path,
        default=None,
        help="Runtime code blob (WASM) stored in the genesis state",
    )
    build.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for nomination targets, overriding rng_seed of a parameter file",
    )

    inspect = commands.add_parser("inspect-key", help="Inspect a secret URI")
    inspect.add_argument("suri", help="Secret URI, e.g. //Alice or '<phrase>//hard///password'")
    inspect.add_argument(
        "--network-prefix",
        type=int,
        default=DEFAULT_SS58_PREFIX,
        help=f"SS58 address prefix (default: {DEFAULT_SS58_PREFIX})",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns the process exit status."""
    args = create_parser().parse_args(argv)

    setup_logging(args.verbose, args.no_color)

    try:
        if args.command == "build-spec":
            build_spec(args.chain, args.output, args.runtime, args.seed)
        else:
            print_key(args.suri, args.network_prefix)
    except (GenesisError, ValidationError, yaml.YAMLError, OSError) as e:
        logger.error("%s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
