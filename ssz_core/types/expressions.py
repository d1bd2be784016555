"""
Textual type expressions and JSON value conversion.

Grammar:
    type   := basic | "Vector" "[" type "," INT "]" | "List" "[" type "," INT "]"
    basic  := uint8 | uint16 | uint32 | uint64 | uint128 | uint256
            | boolean | bool | byte | bit

Example:
    >>> parse_type("Vector[List[uint16, 8], 3]").type_name()
    'Vector[List[uint16, 8], 3]'
"""
from __future__ import annotations

import re
from typing import Any

from ssz_core.errors import TypeExpressionException
from ssz_core.types.base import SimpleSerialize, coerce
from ssz_core.types.basic import BASIC_TYPES
from ssz_core.types.bounded_list import List
from ssz_core.types.vector import Vector


_TOKEN_RE = re.compile(r"\s*(?:([A-Za-z_][A-Za-z0-9_]*)|(\d+)|([\[\],]))")

_COMPOSITES: dict[str, type[SimpleSerialize]] = {
    "Vector": Vector,
    "List": List,
}


def _tokenize(expression: str) -> list[str]:
    tokens: list[str] = []
    position = 0
    stripped = expression.rstrip()
    while position < len(stripped):
        match = _TOKEN_RE.match(stripped, position)
        if match is None:
            raise TypeExpressionException(
                f"unexpected character {stripped[position]!r} at position {position}",
                expression,
            )
        tokens.append(match.group(match.lastindex or 0))
        position = match.end()
    return tokens


class _Parser:
    def __init__(self, expression: str) -> None:
        self.expression = expression
        self.tokens = _tokenize(expression)
        self.position = 0

    def _peek(self) -> str | None:
        if self.position < len(self.tokens):
            return self.tokens[self.position]
        return None

    def _take(self, expected: str | None = None) -> str:
        token = self._peek()
        if token is None:
            raise TypeExpressionException("unexpected end of type expression", self.expression)
        if expected is not None and token != expected:
            raise TypeExpressionException(
                f"expected {expected!r} but found {token!r}", self.expression
            )
        self.position += 1
        return token

    def parse(self) -> type[SimpleSerialize]:
        typ = self._parse_type()
        if self._peek() is not None:
            raise TypeExpressionException(
                f"unexpected trailing token {self._peek()!r}", self.expression
            )
        return typ

    def _parse_type(self) -> type[SimpleSerialize]:
        name = self._take()
        if name in BASIC_TYPES:
            return BASIC_TYPES[name]
        if name not in _COMPOSITES:
            raise TypeExpressionException(f"unknown type {name!r}", self.expression)

        self._take("[")
        element_type = self._parse_type()
        self._take(",")
        size = self._take()
        if not size.isdigit():
            raise TypeExpressionException(
                f"expected an integer length but found {size!r}", self.expression
            )
        self._take("]")
        return _COMPOSITES[name][element_type, int(size)]


def parse_type(expression: str) -> type[SimpleSerialize]:
    """
    Resolve a type expression such as ``"List[uint64, 1024]"``.

    Raises:
        TypeExpressionException: If the expression is malformed or names
            an unknown type
    """
    return _Parser(expression).parse()


def value_from_obj(typ: type[SimpleSerialize], obj: Any) -> SimpleSerialize:
    """Build a value of ``typ`` from ints, bools and nested lists."""
    return coerce(typ, obj)


def value_to_obj(value: SimpleSerialize) -> Any:
    """Inverse of value_from_obj."""
    return value.to_obj()


__all__ = [
    "parse_type",
    "value_from_obj",
    "value_to_obj",
]
