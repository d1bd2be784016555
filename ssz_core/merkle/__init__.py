"""
Merkleization

Chunk packing, Merkle roots with zero-subtree padding, and an explicit
per-element root cache.

Usage:
    from ssz_core.merkle import merkleize, pack, mix_in_length

    root = merkleize(pack(values))
    list_root = mix_in_length(merkleize(chunks, limit=16), len(values))
"""
from .merkleization import (
    ZERO_CHUNK,
    MAX_MERKLE_TREE_DEPTH,
    zero_hash,
    preload_zero_hashes,
    next_power_of_two,
    tree_depth,
    chunk_count,
    pack_bytes,
    pack,
    merkleize,
    mix_in_length,
)

from .cache import RootCache


__all__ = [
    "ZERO_CHUNK",
    "MAX_MERKLE_TREE_DEPTH",
    "zero_hash",
    "preload_zero_hashes",
    "next_power_of_two",
    "tree_depth",
    "chunk_count",
    "pack_bytes",
    "pack",
    "merkleize",
    "mix_in_length",
    "RootCache",
]
