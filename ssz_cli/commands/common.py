"""
Helpers shared by CLI commands: argument decoding, output and error reporting.
"""

from __future__ import annotations

import json
import logging
import sys
from argparse import Namespace
from pathlib import Path
from typing import Any

from ssz_core.crypto.hashing import from_hex
from ssz_core.errors import SSZException, TypeExpressionException
from ssz_core.types import SimpleSerialize, parse_type, value_from_obj


logger = logging.getLogger(__name__)


# Exit codes
EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1
EXIT_CODEC_FAILED = 2


def wants_json(args: Namespace) -> bool:
    """JSON output if requested by flag or configured as the default."""
    if getattr(args, "json", False):
        return True
    config = getattr(args, "cli_config", None)
    return config is not None and config.output_format == "json"


def resolve_type(expression: str) -> type[SimpleSerialize]:
    typ = parse_type(expression)
    logger.debug(f"Resolved type expression {expression!r} to {typ.type_name()}")
    return typ


def load_value(typ: type[SimpleSerialize], args: Namespace) -> SimpleSerialize:
    """Build a value from the positional JSON argument or --file."""
    if getattr(args, "file", None):
        text = Path(args.file).read_text(encoding="utf-8")
    elif getattr(args, "value", None) is not None:
        text = args.value
    else:
        raise ValueError("a JSON value or --file is required")
    return value_from_obj(typ, json.loads(text))


def parse_encoding(text: str, max_input_bytes: int | None = None) -> bytes:
    """Decode hex with or without 0x prefix, enforcing the configured bound."""
    text = text.strip()
    if not text.startswith("0x"):
        text = "0x" + text
    data = from_hex(text)
    if max_input_bytes is not None and len(data) > max_input_bytes:
        raise ValueError(
            f"input of {len(data)} bytes exceeds max_input_bytes={max_input_bytes}"
        )
    return data


def emit(args: Namespace, result: dict[str, Any], human: str) -> None:
    """Print a result as JSON, or the one-line human form."""
    if wants_json(args):
        print(json.dumps(result, indent=2))
    else:
        print(human)


def report_error(args: Namespace, error: Exception) -> int:
    """Print an error and map it to an exit code."""
    if isinstance(error, SSZException) and not isinstance(error, TypeExpressionException):
        exit_code = EXIT_CODEC_FAILED
    else:
        exit_code = EXIT_RUNTIME_ERROR

    if wants_json(args):
        if isinstance(error, SSZException):
            payload = error.to_error_model().model_dump()
        else:
            payload = {"code": type(error).__name__, "message": str(error), "details": {}}
        print(json.dumps({"ok": False, "error": payload}, indent=2))
    else:
        print(f"Error: {error}", file=sys.stderr)
    return exit_code
