"""
Merkleization Implementation
Chunk packing and binary Merkle tree roots over 32-byte chunks.

This module provides:
- Packing of basic-value encodings into zero-padded chunks
- Merkle root computation with power-of-two padding and optional capacity
- A process-wide table of zero-subtree hashes
- Length mix-in for variable-length collections

Canonical Commitment Rules (Hard Contracts):
1. Chunk: 32 bytes; a packed stream is right-padded with zero bytes
2. Parent hashing: parent = sha256(left + right)
3. Padding rule: leaf count rounds up to the next power of two
   (next_power_of_two(0) == 1); absent leaves are zero chunks
4. Capacity: with `limit`, the tree has next_power_of_two(limit) leaves
   regardless of how many chunks are present
5. Zero subtrees: zero_hash(0) = 32 zero bytes,
   zero_hash(d + 1) = sha256(zero_hash(d) + zero_hash(d))
6. Length mix-in: sha256(root + uint256_le(length))

Determinism Notes:
- Chunk order is defined by the caller and never changed here
- Only the chunks actually present are hashed; padding above them
  comes from the zero-hash table
"""
from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING, Iterable

from ssz_core.crypto.hashing import BYTES_PER_CHUNK, hash_concat
from ssz_core.errors import InputExceedsLimit, MerkleizationError, SSZException

if TYPE_CHECKING:
    from ssz_core.types.base import SimpleSerialize


logger = logging.getLogger(__name__)


ZERO_CHUNK: bytes = bytes(BYTES_PER_CHUNK)

# Deepest tree supported; enough for any limit below 2**64
MAX_MERKLE_TREE_DEPTH: int = 64

# Append-only; index is subtree depth. Reads never take the lock.
_ZERO_HASHES: list[bytes] = [ZERO_CHUNK]
_ZERO_HASHES_LOCK = threading.Lock()


def zero_hash(depth: int) -> bytes:
    """
    Return the root of a perfect subtree of zero chunks with the given depth.

    Args:
        depth: Subtree depth (0 is a single zero chunk)

    Returns:
        32-byte node

    Raises:
        MerkleizationError: If depth is negative or above MAX_MERKLE_TREE_DEPTH
    """
    if depth < 0 or depth > MAX_MERKLE_TREE_DEPTH:
        raise MerkleizationError(
            f"zero hash depth {depth} outside supported range 0..{MAX_MERKLE_TREE_DEPTH}",
            details={"depth": depth},
        )
    if depth < len(_ZERO_HASHES):
        return _ZERO_HASHES[depth]

    with _ZERO_HASHES_LOCK:
        start = len(_ZERO_HASHES)
        while len(_ZERO_HASHES) <= depth:
            previous = _ZERO_HASHES[-1]
            _ZERO_HASHES.append(hash_concat(previous, previous))
        if len(_ZERO_HASHES) > start:
            logger.debug(f"Extended zero hash table from depth {start - 1} to {depth}")
    return _ZERO_HASHES[depth]


def preload_zero_hashes(depth: int) -> None:
    """Populate the zero-hash table up to ``depth`` ahead of time."""
    zero_hash(min(depth, MAX_MERKLE_TREE_DEPTH))


def next_power_of_two(n: int) -> int:
    """
    Return the smallest power of two >= n, with next_power_of_two(0) == 1.

    Example:
        >>> [next_power_of_two(n) for n in (0, 1, 2, 3, 5, 8)]
        [1, 1, 2, 4, 8, 8]
    """
    if n <= 1:
        return 1
    return 1 << (n - 1).bit_length()


def tree_depth(leaf_count: int) -> int:
    """Number of parent levels above ``leaf_count`` leaves once padded."""
    return next_power_of_two(leaf_count).bit_length() - 1


def chunk_count(element_type: "type[SimpleSerialize]", length: int) -> int:
    """
    Number of chunks needed for ``length`` elements of ``element_type``.

    Basic elements are packed, so several share a chunk; composite
    elements contribute one root each.
    """
    if element_type.is_composite_type():
        return length
    return (length * element_type.size_hint() + BYTES_PER_CHUNK - 1) // BYTES_PER_CHUNK


def pack_bytes(buffer: bytes | bytearray) -> bytes:
    """
    Right-pad a byte stream with zeros to a whole number of chunks.

    An empty stream stays empty.
    """
    remainder = len(buffer) % BYTES_PER_CHUNK
    if remainder == 0:
        return bytes(buffer)
    return bytes(buffer) + bytes(BYTES_PER_CHUNK - remainder)


def pack(values: Iterable["SimpleSerialize"]) -> bytes:
    """
    Serialize basic values in order into one stream and pad it into chunks.

    Raises:
        MerkleizationError: If any value fails to serialize
    """
    buffer = bytearray()
    try:
        for value in values:
            value.serialize(buffer)
    except SSZException as e:
        raise MerkleizationError(
            f"could not serialize values for packing: {e.message}",
            details={"cause": e.code},
        ) from e
    return pack_bytes(buffer)


def merkleize(chunks: bytes | bytearray | memoryview, limit: int | None = None) -> bytes:
    """
    Compute the Merkle root of a sequence of 32-byte chunks.

    Algorithm:
    1. Leaf count is next_power_of_two(limit) when a limit is given,
       otherwise next_power_of_two(number of chunks)
    2. If no chunks are present, the root is the zero hash at that depth
    3. Otherwise, level by level: pad an odd level with the zero hash
       for that depth, then hash adjacent pairs

    Args:
        chunks: Concatenated chunks; length must be a multiple of 32
        limit: Optional maximum number of chunks the tree commits to

    Returns:
        32-byte Merkle root

    Raises:
        InputExceedsLimit: If there are more chunks than `limit`
        MerkleizationError: If `chunks` is not chunk-aligned or the
            tree would be deeper than MAX_MERKLE_TREE_DEPTH
    """
    data = bytes(chunks)
    if len(data) % BYTES_PER_CHUNK != 0:
        raise MerkleizationError(
            f"input of {len(data)} bytes is not a whole number of chunks",
            details={"length": len(data)},
        )
    count = len(data) // BYTES_PER_CHUNK

    if limit is not None:
        if limit < 0:
            raise MerkleizationError(
                f"limit must be non-negative, got {limit}",
                details={"limit": limit},
            )
        if count > limit:
            raise InputExceedsLimit(limit=limit, provided=count)
        depth = tree_depth(limit)
    else:
        depth = tree_depth(count)

    if depth > MAX_MERKLE_TREE_DEPTH:
        raise MerkleizationError(
            f"tree depth {depth} exceeds maximum {MAX_MERKLE_TREE_DEPTH}",
            details={"depth": depth},
        )

    if count == 0:
        return zero_hash(depth)

    layer: list[bytes] = [
        data[i:i + BYTES_PER_CHUNK] for i in range(0, len(data), BYTES_PER_CHUNK)
    ]
    for level in range(depth):
        if len(layer) % 2 == 1:
            layer.append(zero_hash(level))
        layer = [hash_concat(layer[i], layer[i + 1]) for i in range(0, len(layer), 2)]

    return layer[0]


def mix_in_length(root: bytes, length: int) -> bytes:
    """Bind a collection's length into its root: sha256(root + uint256_le(length))."""
    return hash_concat(root, length.to_bytes(BYTES_PER_CHUNK, "little"))


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
]
