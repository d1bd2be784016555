"""
CLI Root Command

Compute the hash tree root of a value given as JSON or as its encoding.

Usage:
    ssz root "List[uint64, 16]" "[1, 2, 3]"
    ssz root "Vector[uint8, 4]" --hex 0x01020304 [--json]
"""

from __future__ import annotations

import logging
from argparse import Namespace

from ssz_core import deserialize, hash_tree_root
from ssz_core.crypto.hashing import to_hex
from ssz_core.errors import SSZException
from ssz_cli.commands.common import (
    EXIT_SUCCESS,
    emit,
    load_value,
    parse_encoding,
    report_error,
    resolve_type,
)


logger = logging.getLogger(__name__)


def root_cmd(args: Namespace) -> int:
    """
    Execute the root command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code
    """
    config = getattr(args, "cli_config", None)
    max_input_bytes = config.codec.max_input_bytes if config is not None else None
    try:
        typ = resolve_type(args.type)
        if args.hex:
            value = deserialize(typ, parse_encoding(args.hex, max_input_bytes))
        else:
            value = load_value(typ, args)
        root = hash_tree_root(value)
    except (SSZException, ValueError, TypeError, OSError) as e:
        return report_error(args, e)

    logger.info(f"Computed root of {typ.type_name()}")
    emit(args, {
        "ok": True,
        "type": typ.type_name(),
        "root": to_hex(root),
    }, human=to_hex(root))
    return EXIT_SUCCESS
