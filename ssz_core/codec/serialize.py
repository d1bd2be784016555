"""
Composite serialization.

Layout of a composite encoding:
    fixed part:    for each element in order, either its encoding (fixed-size
                   element) or a 4-byte little-endian offset (variable-size)
    variable part: encodings of the variable-size elements, in order

Offsets are measured from the start of the composite encoding, so the first
offset always equals the length of the fixed part.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from ssz_core.errors import MaximumEncodedLengthExceeded

if TYPE_CHECKING:
    from ssz_core.types.base import SimpleSerialize


BYTES_PER_LENGTH_OFFSET: int = 4

# Largest encoding a 4-byte offset can address
MAXIMUM_LENGTH: int = 2 ** (8 * BYTES_PER_LENGTH_OFFSET)


def serialize_offset(offset: int) -> bytes:
    return offset.to_bytes(BYTES_PER_LENGTH_OFFSET, "little")


def serialize_composite(values: Sequence[SimpleSerialize], buffer: bytearray) -> int:
    """
    Append the canonical encoding of an ordered sequence of values.

    Args:
        values: Elements in order; fixed- and variable-size may be mixed
        buffer: Destination, only extended once the whole encoding is built

    Returns:
        Number of bytes appended

    Raises:
        MaximumEncodedLengthExceeded: If the encoding reaches 2**32 bytes
        SSZException: Propagated from element serialization
    """
    fixed_parts: list[bytes | None] = []
    variable_parts: list[bytes] = []
    fixed_length = 0

    for value in values:
        part = bytearray()
        value.serialize(part)
        if value.is_variable_size():
            fixed_parts.append(None)
            variable_parts.append(bytes(part))
            fixed_length += BYTES_PER_LENGTH_OFFSET
        else:
            fixed_parts.append(bytes(part))
            fixed_length += len(part)

    total_length = fixed_length + sum(len(part) for part in variable_parts)
    if total_length >= MAXIMUM_LENGTH:
        raise MaximumEncodedLengthExceeded(total_length)

    encoding = bytearray()
    offset = fixed_length
    variable_iter = iter(variable_parts)
    for fixed in fixed_parts:
        if fixed is None:
            encoding.extend(serialize_offset(offset))
            offset += len(next(variable_iter))
        else:
            encoding.extend(fixed)
    for part in variable_parts:
        encoding.extend(part)

    buffer.extend(encoding)
    return total_length


__all__ = [
    "BYTES_PER_LENGTH_OFFSET",
    "MAXIMUM_LENGTH",
    "serialize_offset",
    "serialize_composite",
]
