"""
Canonical SSZ serialization and Merkleization.

Deterministic binary encoding of homogeneous composites and the binary
Merkle roots that commit to them.

Usage:
    from ssz_core import Vector, uint8, serialize, deserialize, hash_tree_root

    Bytes4 = Vector[uint8, 4]
    value = Bytes4([1, 2, 3, 4])

    encoding = serialize(value)              # b"\\x01\\x02\\x03\\x04"
    assert deserialize(Bytes4, encoding) == value
    root = hash_tree_root(value)             # 32 bytes
"""

from __future__ import annotations

from typing import TypeVar

__version__ = "0.1.0"

from .errors import (
    ErrorCodes,
    SSZError,
    SSZException,
    SSZTypeException,
    InvalidBound,
    TypeExpressionException,
    InstanceException,
    ExactLength,
    BoundedLength,
    ValueOutOfRange,
    SerializeException,
    MaximumEncodedLengthExceeded,
    DeserializeException,
    ExpectedFurtherInput,
    AdditionalInput,
    InvalidByte,
    InvalidOffsetsLength,
    OffsetNotIncreasing,
    OffsetOutOfBounds,
    MerkleizationError,
    InputExceedsLimit,
)
from .crypto import BYTES_PER_CHUNK, to_hex, from_hex
from .merkle import (
    ZERO_CHUNK,
    MAX_MERKLE_TREE_DEPTH,
    RootCache,
    chunk_count,
    merkleize,
    mix_in_length,
    next_power_of_two,
    pack,
    pack_bytes,
    zero_hash,
)
from .types import (
    SimpleSerialize,
    TypeDescriptor,
    describe,
    uint8,
    uint16,
    uint32,
    uint64,
    uint128,
    uint256,
    boolean,
    byte,
    bit,
    Vector,
    List,
    parse_type,
    value_from_obj,
    value_to_obj,
)
from .codec import (
    BYTES_PER_LENGTH_OFFSET,
    serialize_composite,
    deserialize_homogeneous_composite,
)


T = TypeVar("T", bound=SimpleSerialize)


def serialize(value: SimpleSerialize) -> bytes:
    """Return the canonical encoding of ``value``."""
    return value.encode_bytes()


def deserialize(typ: type[T], data: bytes) -> T:
    """Decode ``data`` as exactly one value of ``typ``."""
    return typ.deserialize(bytes(data))


def hash_tree_root(value: SimpleSerialize) -> bytes:
    """Return the 32-byte Merkle root of ``value``."""
    return value.hash_tree_root()


__all__ = [
    "__version__",
    # Facade
    "serialize",
    "deserialize",
    "hash_tree_root",
    # Types
    "SimpleSerialize",
    "TypeDescriptor",
    "describe",
    "uint8",
    "uint16",
    "uint32",
    "uint64",
    "uint128",
    "uint256",
    "boolean",
    "byte",
    "bit",
    "Vector",
    "List",
    "parse_type",
    "value_from_obj",
    "value_to_obj",
    # Codec
    "BYTES_PER_LENGTH_OFFSET",
    "serialize_composite",
    "deserialize_homogeneous_composite",
    # Merkleization
    "BYTES_PER_CHUNK",
    "ZERO_CHUNK",
    "MAX_MERKLE_TREE_DEPTH",
    "RootCache",
    "chunk_count",
    "merkleize",
    "mix_in_length",
    "next_power_of_two",
    "pack",
    "pack_bytes",
    "zero_hash",
    "to_hex",
    "from_hex",
    # Errors
    "ErrorCodes",
    "SSZError",
    "SSZException",
    "SSZTypeException",
    "InvalidBound",
    "TypeExpressionException",
    "InstanceException",
    "ExactLength",
    "BoundedLength",
    "ValueOutOfRange",
    "SerializeException",
    "MaximumEncodedLengthExceeded",
    "DeserializeException",
    "ExpectedFurtherInput",
    "AdditionalInput",
    "InvalidByte",
    "InvalidOffsetsLength",
    "OffsetNotIncreasing",
    "OffsetOutOfBounds",
    "MerkleizationError",
    "InputExceedsLimit",
]
