"""
Explicit memoization of per-element roots.

A RootCache is owned by the caller and passed into hash_tree_root().
Entries are keyed by element index and remember the element type and
encoding they were computed from; an entry is only reused while the element
at that index has the same type and still encodes to the same bytes, so
mutating an element (or reusing the cache for another composite) can never
yield a stale root.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional


@dataclass
class RootCache:
    """
    Index-keyed cache of element roots.

    Attributes:
        hits: Number of lookups served from the cache
        misses: Number of lookups that computed a fresh root
    """
    _entries: dict[int, tuple[Optional[type], bytes, bytes]] = field(default_factory=dict)
    hits: int = 0
    misses: int = 0

    def root_for(
        self,
        index: int,
        encoding: bytes,
        compute: Callable[[], bytes],
        element_type: Optional[type] = None,
    ) -> bytes:
        """
        Return the cached root for ``index`` if ``element_type`` and
        ``encoding`` are unchanged, otherwise compute, store and return a
        fresh one.
        """
        entry = self._entries.get(index)
        if entry is not None and entry[0] is element_type and entry[1] == encoding:
            self.hits += 1
            return entry[2]
        self.misses += 1
        root = compute()
        self._entries[index] = (element_type, encoding, root)
        return root

    def invalidate(self, index: int) -> None:
        self._entries.pop(index, None)

    def truncate(self, length: int) -> None:
        """Drop entries for indices >= length."""
        for index in [i for i in self._entries if i >= length]:
            del self._entries[index]

    def clear(self) -> None:
        self._entries.clear()
        self.hits = 0
        self.misses = 0

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, index: object) -> bool:
        return index in self._entries


__all__ = ["RootCache"]
