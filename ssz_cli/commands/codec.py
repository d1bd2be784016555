"""
CLI Serialize / Deserialize Commands

Usage:
    ssz serialize "Vector[uint8, 4]" "[1, 2, 3, 4]"
    ssz deserialize "Vector[uint8, 4]" 0x01020304 [--json]
"""

from __future__ import annotations

import json
import logging
from argparse import Namespace

from ssz_core import deserialize, serialize
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


def serialize_cmd(args: Namespace) -> int:
    """
    Execute the serialize command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code
    """
    try:
        typ = resolve_type(args.type)
        value = load_value(typ, args)
        encoding = serialize(value)
    except (SSZException, ValueError, TypeError, OSError) as e:
        return report_error(args, e)

    logger.info(f"Serialized {typ.type_name()} to {len(encoding)} bytes")
    emit(args, {
        "ok": True,
        "type": typ.type_name(),
        "length": len(encoding),
        "encoding": to_hex(encoding),
    }, human=to_hex(encoding))
    return EXIT_SUCCESS


def deserialize_cmd(args: Namespace) -> int:
    """
    Execute the deserialize command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code
    """
    config = getattr(args, "cli_config", None)
    max_input_bytes = config.codec.max_input_bytes if config is not None else None
    try:
        typ = resolve_type(args.type)
        data = parse_encoding(args.encoding, max_input_bytes)
        value = deserialize(typ, data)
    except (SSZException, ValueError, TypeError) as e:
        return report_error(args, e)

    logger.info(f"Deserialized {len(data)} bytes as {typ.type_name()}")
    obj = value.to_obj()
    emit(args, {
        "ok": True,
        "type": typ.type_name(),
        "value": obj,
    }, human=json.dumps(obj))
    return EXIT_SUCCESS
