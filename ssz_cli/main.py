"""
CLI Main Entry Point

Parses command-line arguments and dispatches to subcommands.

Usage:
    python -m ssz_cli serialize TYPE VALUE [--file PATH] [--json]
    python -m ssz_cli deserialize TYPE HEX [--json]
    python -m ssz_cli root TYPE (VALUE | --file PATH | --hex HEX) [--json]
    python -m ssz_cli describe TYPE [--json]
    python -m ssz_cli config --init | --show

Environment Variables:
    SSZ_LOG_LEVEL                Log level (default: INFO)
    SSZ_LOG_FILE                 Optional log file
    SSZ_MAX_INPUT_BYTES          Largest encoding accepted for decoding
    SSZ_OUTPUT_FORMAT            human or json
    SSZ_PRELOAD_ZERO_HASH_DEPTH  Zero-hash table depth to fill at startup
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
import traceback
from pathlib import Path
from typing import Sequence

from ssz_core import __version__
from ssz_core.config import get_default_config_template, set_default_config
from ssz_core.errors import SSZException
from ssz_core.merkle import preload_zero_hashes
from ssz_core.types import describe
from ssz_cli.commands import codec, root
from ssz_cli.commands.common import (
    EXIT_RUNTIME_ERROR,
    EXIT_SUCCESS,
    emit,
    report_error,
    resolve_type,
)
from ssz_cli.config import load_config


logger = logging.getLogger(__name__)


def setup_logging(level: str = "INFO", log_file: str | None = None) -> None:
    """Configure logging for the CLI."""
    log_level = getattr(logging, level.upper(), logging.INFO)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=handlers,
    )


def _add_output_flags(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--json",
        action="store_true",
        default=False,
        help="Output machine-readable JSON",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        default=False,
        help="Print tracebacks for unexpected errors",
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="ssz",
        description="Canonical SSZ CLI - serialize, deserialize and Merkleize typed values.",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "--config", "-c",
        type=Path,
        default=None,
        help="Path to configuration file (default: ./ssz.json or ~/.config/ssz/config.json)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (overrides config)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # --- serialize command ---
    serialize_parser = subparsers.add_parser(
        "serialize",
        help="Encode a JSON value as canonical bytes",
        description="Build a value of TYPE from JSON and print its canonical encoding as hex.",
    )
    serialize_parser.add_argument("type", type=str, help='Type expression, e.g. "Vector[uint8, 4]"')
    serialize_parser.add_argument("value", type=str, nargs="?", default=None, help="Value as JSON")
    serialize_parser.add_argument("--file", "-f", type=str, default=None, help="Read the JSON value from a file")
    _add_output_flags(serialize_parser)
    serialize_parser.set_defaults(func=codec.serialize_cmd)

    # --- deserialize command ---
    deserialize_parser = subparsers.add_parser(
        "deserialize",
        help="Decode canonical bytes into a JSON value",
        description="Decode a hex encoding as exactly one value of TYPE.",
    )
    deserialize_parser.add_argument("type", type=str, help="Type expression")
    deserialize_parser.add_argument("encoding", type=str, help="Encoding as hex (0x prefix optional)")
    _add_output_flags(deserialize_parser)
    deserialize_parser.set_defaults(func=codec.deserialize_cmd)

    # --- root command ---
    root_parser = subparsers.add_parser(
        "root",
        help="Compute the hash tree root of a value",
        description="Compute the 32-byte Merkle root of a value given as JSON or as its encoding.",
    )
    root_parser.add_argument("type", type=str, help="Type expression")
    root_parser.add_argument("value", type=str, nargs="?", default=None, help="Value as JSON")
    root_parser.add_argument("--file", "-f", type=str, default=None, help="Read the JSON value from a file")
    root_parser.add_argument("--hex", type=str, default=None, help="Take the value from its hex encoding")
    _add_output_flags(root_parser)
    root_parser.set_defaults(func=root.root_cmd)

    # --- describe command ---
    describe_parser = subparsers.add_parser(
        "describe",
        help="Show static facts about a type",
        description="Print whether TYPE is variable-size, its fixed size and whether it is composite.",
    )
    describe_parser.add_argument("type", type=str, help="Type expression")
    _add_output_flags(describe_parser)
    describe_parser.set_defaults(func=describe_cmd)

    # --- config command ---
    config_parser = subparsers.add_parser(
        "config",
        help="Manage CLI configuration",
        description="Initialize or display configuration.",
    )
    config_parser.add_argument(
        "--init",
        action="store_true",
        default=False,
        help="Create a template configuration file",
    )
    config_parser.add_argument(
        "--show",
        action="store_true",
        default=False,
        help="Show current configuration",
    )
    config_parser.add_argument(
        "--path",
        type=str,
        default="ssz.json",
        help="Path for config file (default: ssz.json)",
    )
    config_parser.set_defaults(func=config_cmd)

    return parser


def describe_cmd(args: argparse.Namespace) -> int:
    """Handle describe command."""
    try:
        descriptor = describe(resolve_type(args.type))
    except SSZException as e:
        return report_error(args, e)

    if descriptor.is_variable_size:
        human = f"{descriptor.name}: variable-size"
    else:
        human = f"{descriptor.name}: fixed-size, {descriptor.size_hint} bytes"
    human += ", composite" if descriptor.is_composite else ", basic"
    emit(args, descriptor.to_dict(), human=human)
    return EXIT_SUCCESS


def config_cmd(args: argparse.Namespace) -> int:
    """Handle config command."""
    if args.init:
        config_path = Path(args.path)
        if config_path.exists():
            print(f"Error: Config file already exists: {config_path}", file=sys.stderr)
            return EXIT_RUNTIME_ERROR

        config_path.write_text(get_default_config_template())
        print(f"Created configuration file: {config_path}")
        print("You can also use environment variables (SSZ_* prefix).")
        return EXIT_SUCCESS

    if args.show:
        print(json.dumps(args.cli_config.to_dict(), indent=2))
        return EXIT_SUCCESS

    print("Usage: ssz config [--init|--show]")
    print("  --init  Create a template configuration file")
    print("  --show  Show current configuration")
    return EXIT_SUCCESS


def main(argv: Sequence[str] | None = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0=success, 1=error, 2=codec or Merkleization failure)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return EXIT_RUNTIME_ERROR

    try:
        config = load_config(args.config)
    except Exception as e:
        print(f"Error loading configuration: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    log_level = args.log_level or config.logging.level
    setup_logging(level=log_level, log_file=config.logging.file)
    set_default_config(config)

    if config.merkle.preload_zero_hash_depth:
        preload_zero_hashes(config.merkle.preload_zero_hash_depth)

    args.cli_config = config

    try:
        return args.func(args)
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return EXIT_RUNTIME_ERROR
    except Exception as e:
        if getattr(args, "debug", False):
            traceback.print_exc()
        else:
            print(f"Error: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR


if __name__ == "__main__":
    sys.exit(main())
