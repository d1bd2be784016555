"""
Composite codec: offset-table serialization and homogeneous decoding.
"""
from .serialize import (
    BYTES_PER_LENGTH_OFFSET,
    MAXIMUM_LENGTH,
    serialize_offset,
    serialize_composite,
)
from .deserialize import (
    deserialize_offset,
    deserialize_homogeneous_composite,
)

__all__ = [
    "BYTES_PER_LENGTH_OFFSET",
    "MAXIMUM_LENGTH",
    "serialize_offset",
    "serialize_composite",
    "deserialize_offset",
    "deserialize_homogeneous_composite",
]
