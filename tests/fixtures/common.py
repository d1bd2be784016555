"""
Common test fixtures shared by all modules.

Provides factory functions and reference helpers:
- Chunk construction
- A naive perfect-tree Merkle root used to cross-check merkleize()
- Frequently used parametrized types and values
"""

from typing import Optional

from ssz_core.crypto.hashing import BYTES_PER_CHUNK, hash_concat
from ssz_core.merkle.merkleization import next_power_of_two
from ssz_core.types import List, SimpleSerialize, Vector, uint8, uint16, uint64


Bytes4 = Vector[uint8, 4]
Uint16x4 = Vector[uint16, 4]
Uint64x3 = Vector[uint64, 3]
ByteList8 = List[uint8, 8]
NestedVector = Vector[Bytes4, 3]
VariableVector = Vector[ByteList8, 3]


def chunk(fill: int) -> bytes:
    """A chunk with every byte set to ``fill``."""
    return bytes([fill]) * BYTES_PER_CHUNK


def chunks(*fills: int) -> bytes:
    return b"".join(chunk(f) for f in fills)


def naive_merkle_root(data: bytes, limit: Optional[int] = None) -> bytes:
    """
    Build the full padded tree explicitly, without the zero-hash table.

    Used as an independent reference for merkleize().
    """
    leaves = [data[i:i + BYTES_PER_CHUNK] for i in range(0, len(data), BYTES_PER_CHUNK)]
    width = next_power_of_two(limit if limit is not None else len(leaves))
    leaves += [bytes(BYTES_PER_CHUNK)] * (width - len(leaves))
    while len(leaves) > 1:
        leaves = [hash_concat(leaves[i], leaves[i + 1]) for i in range(0, len(leaves), 2)]
    return leaves[0]


def make_bytes4(values: Optional[list[int]] = None) -> SimpleSerialize:
    """Create a Vector[uint8, 4] with defaults."""
    return Bytes4(values if values is not None else [1, 2, 3, 4])


def make_variable_vector(items: Optional[list[list[int]]] = None) -> SimpleSerialize:
    """Create a Vector[List[uint8, 8], 3] with defaults."""
    if items is None:
        items = [[1, 2], [], [3, 4, 5]]
    return VariableVector(items)

