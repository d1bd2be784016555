"""
Root Cache Unit Tests
Tests for ssz_core/merkle/cache.py
"""
from ssz_core.merkle import RootCache
from ssz_core.types import List, Vector, uint8, uint16


def _counting(root: bytes):
    calls = []

    def compute():
        calls.append(1)
        return root

    return compute, calls


class TestRootCache:
    """Tests for RootCache bookkeeping."""

    def test_miss_then_hit(self):
        cache = RootCache()
        compute, calls = _counting(b"r" * 32)

        assert cache.root_for(0, b"enc", compute) == b"r" * 32
        assert cache.root_for(0, b"enc", compute) == b"r" * 32
        assert len(calls) == 1
        assert (cache.hits, cache.misses) == (1, 1)

    def test_changed_encoding_recomputes(self):
        cache = RootCache()
        cache.root_for(0, b"old", lambda: b"a" * 32)

        assert cache.root_for(0, b"new", lambda: b"b" * 32) == b"b" * 32
        assert cache.misses == 2

    def test_invalidate(self):
        cache = RootCache()
        cache.root_for(3, b"x", lambda: b"a" * 32)
        cache.invalidate(3)
        cache.invalidate(99)

        assert 3 not in cache

    def test_truncate(self):
        cache = RootCache()
        for index in range(5):
            cache.root_for(index, b"x", lambda: b"a" * 32)
        cache.truncate(2)

        assert len(cache) == 2
        assert 1 in cache
        assert 2 not in cache

    def test_clear_resets_counters(self):
        cache = RootCache()
        cache.root_for(0, b"x", lambda: b"a" * 32)
        cache.root_for(0, b"x", lambda: b"a" * 32)
        cache.clear()

        assert len(cache) == 0
        assert (cache.hits, cache.misses) == (0, 0)

    def test_changed_element_type_recomputes(self):
        cache = RootCache()
        cache.root_for(0, b"x", lambda: b"a" * 32, int)

        assert cache.root_for(0, b"x", lambda: b"b" * 32, bytes) == b"b" * 32
        assert cache.misses == 2


class TestRootCacheAcrossValues:
    """A cache reused across composites must never mix up their roots."""

    def test_equal_encodings_of_different_element_types(self):
        first = Vector[List[uint8, 4], 1]([[1, 0]])
        second = Vector[List[uint16, 4], 1]([[1]])
        assert first.encode_bytes() == second.encode_bytes()

        cache = RootCache()
        first.hash_tree_root(cache)

        assert second.hash_tree_root(cache) == second.hash_tree_root()
        assert cache.hits == 0
