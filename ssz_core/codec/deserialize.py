"""
Homogeneous composite deserialization.

Decodes a sequence of same-typed elements. Fixed-size elements are sliced
at a constant stride; variable-size elements are located through the offset
table at the front of the encoding.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from ssz_core.codec.serialize import BYTES_PER_LENGTH_OFFSET
from ssz_core.errors import (
    AdditionalInput,
    ExpectedFurtherInput,
    InvalidBound,
    InvalidOffsetsLength,
    OffsetNotIncreasing,
    OffsetOutOfBounds,
)

if TYPE_CHECKING:
    from ssz_core.types.base import T


def deserialize_offset(encoding: bytes, position: int) -> int:
    """Read the 4-byte little-endian offset starting at ``position``."""
    end = position + BYTES_PER_LENGTH_OFFSET
    if len(encoding) < end:
        raise ExpectedFurtherInput(provided=len(encoding), expected=end)
    return int.from_bytes(encoding[position:end], "little")


def _read_offsets(encoding: bytes) -> list[int]:
    first_offset = deserialize_offset(encoding, 0)
    if first_offset == 0 or first_offset % BYTES_PER_LENGTH_OFFSET != 0:
        raise InvalidOffsetsLength(first_offset)
    if first_offset > len(encoding):
        raise OffsetOutOfBounds(offset=first_offset, length=len(encoding))

    offsets = [first_offset]
    for position in range(BYTES_PER_LENGTH_OFFSET, first_offset, BYTES_PER_LENGTH_OFFSET):
        offset = deserialize_offset(encoding, position)
        if offset < offsets[-1]:
            raise OffsetNotIncreasing(start=offsets[-1], end=offset)
        if offset > len(encoding):
            raise OffsetOutOfBounds(offset=offset, length=len(encoding))
        offsets.append(offset)
    return offsets


def deserialize_homogeneous_composite(element_type: type[T], encoding: bytes) -> list[T]:
    """
    Decode every element of a homogeneous composite encoding.

    Args:
        element_type: Type of every element
        encoding: The complete composite encoding

    Returns:
        Decoded elements in order (empty for empty input)

    Raises:
        AdditionalInput: Fixed-size elements and a trailing partial element
        InvalidBound: Fixed-size elements that encode to zero bytes
        ExpectedFurtherInput: Truncated offset table
        InvalidOffsetsLength: First offset is zero or not offset-aligned
        OffsetNotIncreasing: An offset precedes the one before it
        OffsetOutOfBounds: An offset points past the end of the input
        SSZException: Propagated from element decoding
    """
    encoding = bytes(encoding)
    if not encoding:
        return []

    if not element_type.is_variable_size():
        size = element_type.size_hint()
        if size == 0:
            raise InvalidBound(0)
        remainder = len(encoding) % size
        if remainder != 0:
            raise AdditionalInput(provided=len(encoding), expected=len(encoding) - remainder)
        return [
            element_type.deserialize(encoding[start:start + size])
            for start in range(0, len(encoding), size)
        ]

    offsets = _read_offsets(encoding)
    bounds = offsets + [len(encoding)]
    return [
        element_type.deserialize(encoding[start:end])
        for start, end in zip(bounds, bounds[1:])
    ]


__all__ = [
    "deserialize_offset",
    "deserialize_homogeneous_composite",
]
