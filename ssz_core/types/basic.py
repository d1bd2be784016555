"""
Basic (leaf) element types.

Unsigned integers are little-endian and fixed width; booleans are a single
byte that must be 0x00 or 0x01. A basic value's hash tree root is its
encoding right-padded to one chunk.
"""
from __future__ import annotations

from typing import Any, ClassVar

from ssz_core.errors import (
    AdditionalInput,
    ExpectedFurtherInput,
    InvalidByte,
    ValueOutOfRange,
)
from ssz_core.merkle.merkleization import merkleize, pack_bytes
from ssz_core.types.base import SimpleSerialize


def _check_exact_length(encoding: bytes, expected: int) -> None:
    if len(encoding) < expected:
        raise ExpectedFurtherInput(provided=len(encoding), expected=expected)
    if len(encoding) > expected:
        raise AdditionalInput(provided=len(encoding), expected=expected)


class BasicValue(SimpleSerialize):
    """Shared behaviour of basic types: fixed size, packed into chunks."""

    __slots__ = ()

    @classmethod
    def is_variable_size(cls) -> bool:
        return False

    @classmethod
    def is_composite_type(cls) -> bool:
        return False

    def hash_tree_root(self) -> bytes:
        return merkleize(pack_bytes(self.encode_bytes()))


class BasicUint(int, BasicValue):
    """Unsigned integer of ``BITS`` bits."""

    BITS: ClassVar[int] = 0

    def __new__(cls, value: Any = 0) -> "BasicUint":
        if cls.BITS == 0:
            raise TypeError("BasicUint cannot be instantiated directly")
        if not isinstance(value, int):
            raise TypeError(f"{cls.__name__} expects an int, got {type(value).__name__}")
        if value < 0 or value >= 1 << cls.BITS:
            raise ValueOutOfRange(cls.__name__, value)
        return super().__new__(cls, value)

    @classmethod
    def size_hint(cls) -> int:
        return cls.BITS // 8

    def serialize(self, buffer: bytearray) -> int:
        size = self.size_hint()
        buffer.extend(int(self).to_bytes(size, "little"))
        return size

    @classmethod
    def deserialize(cls, encoding: bytes) -> "BasicUint":
        _check_exact_length(encoding, cls.size_hint())
        return cls(int.from_bytes(encoding, "little"))

    def to_obj(self) -> int:
        return int(self)

    @classmethod
    def from_obj(cls, obj: Any) -> "BasicUint":
        return cls(obj)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({int(self)})"


class uint8(BasicUint):
    BITS = 8


class uint16(BasicUint):
    BITS = 16


class uint32(BasicUint):
    BITS = 32


class uint64(BasicUint):
    BITS = 64


class uint128(BasicUint):
    BITS = 128


class uint256(BasicUint):
    BITS = 256


class boolean(int, BasicValue):
    """Single-byte boolean."""

    def __new__(cls, value: Any = False) -> "boolean":
        if isinstance(value, bool):
            return super().__new__(cls, int(value))
        if isinstance(value, int) and value in (0, 1):
            return super().__new__(cls, int(value))
        raise ValueOutOfRange(cls.__name__, value)

    @classmethod
    def size_hint(cls) -> int:
        return 1

    def serialize(self, buffer: bytearray) -> int:
        buffer.append(1 if self else 0)
        return 1

    @classmethod
    def deserialize(cls, encoding: bytes) -> "boolean":
        _check_exact_length(encoding, 1)
        byte = encoding[0]
        if byte not in (0, 1):
            raise InvalidByte(byte)
        return cls(byte == 1)

    def to_obj(self) -> bool:
        return bool(self)

    @classmethod
    def from_obj(cls, obj: Any) -> "boolean":
        return cls(obj)

    def __repr__(self) -> str:
        return f"boolean({bool(self)})"


# Common aliases
byte = uint8
bit = boolean

BASIC_TYPES: dict[str, type[BasicValue]] = {
    "uint8": uint8,
    "uint16": uint16,
    "uint32": uint32,
    "uint64": uint64,
    "uint128": uint128,
    "uint256": uint256,
    "boolean": boolean,
    "bool": boolean,
    "byte": byte,
    "bit": bit,
}


__all__ = [
    "BasicValue",
    "BasicUint",
    "uint8",
    "uint16",
    "uint32",
    "uint64",
    "uint128",
    "uint256",
    "boolean",
    "byte",
    "bit",
    "BASIC_TYPES",
]
