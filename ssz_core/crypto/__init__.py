"""
Core cryptographic utilities.

Hash primitives for Merkleization and hex helpers for display.
"""
from .hashing import (
    BYTES_PER_CHUNK,
    sha256,
    hash_concat,
    to_hex,
    from_hex,
)

__all__ = [
    "BYTES_PER_CHUNK",
    "sha256",
    "hash_concat",
    "to_hex",
    "from_hex",
]
