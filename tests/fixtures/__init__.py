"""
Test fixtures package for canonical SSZ tests.

This package provides factory functions and reference helpers.
- common.py: chunk builders, a naive reference Merkle root, common types

Usage:
    from fixtures.common import chunk, naive_merkle_root

    def test_something():
        assert merkleize(chunk(1)) == naive_merkle_root(chunk(1))
"""

from .common import (
    chunk,
    chunks,
    naive_merkle_root,
    make_bytes4,
    make_variable_vector,
)

__all__ = [
    "chunk",
    "chunks",
    "naive_merkle_root",
    "make_bytes4",
    "make_variable_vector",
]
