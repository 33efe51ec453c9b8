"""Tests for the LRU eviction cache."""

import threading
from concurrent.futures import ThreadPoolExecutor

import pytest
from linkalias.core.cache import EvictionCache


class TestEvictionCache:
    """Test LRU cache behavior."""

    def test_get_missing(self):
        """Test missing key returns None."""
        cache = EvictionCache(3)

        assert cache.get("missing") is None
        assert cache.stats()["misses"] == 1

    def test_put_and_get(self):
        """Test basic storage."""
        cache = EvictionCache(3)

        cache.put("a", 1)
        assert cache.get("a") == 1
        assert len(cache) == 1
        assert "a" in cache

    def test_evicts_least_recently_used(self):
        """Test the oldest entry goes when a new key overflows capacity."""
        cache = EvictionCache(3)

        for key in "abc":
            cache.put(key, key.upper())
        cache.put("d", "D")

        assert "a" not in cache
        assert cache.keys() == ["b", "c", "d"]
        assert cache.stats()["evictions"] == 1

    def test_get_refreshes_recency(self):
        """Test a hit protects the entry from the next eviction."""
        cache = EvictionCache(3)

        for key in "abc":
            cache.put(key, key.upper())
        cache.get("a")
        cache.put("d", "D")

        assert cache.get("b") is None
        assert cache.keys() == ["c", "a", "d"]

    def test_update_does_not_evict(self):
        """Test updating an existing key keeps every entry."""
        cache = EvictionCache(3)

        for key in "abc":
            cache.put(key, key.upper())
        cache.put("a", "A2")

        assert len(cache) == 3
        assert cache.get("a") == "A2"
        assert cache.stats()["evictions"] == 0
        assert cache.keys() == ["b", "c", "a"]

    def test_contains_does_not_refresh(self):
        """Test membership check leaves recency alone."""
        cache = EvictionCache(2)

        cache.put("a", 1)
        cache.put("b", 2)
        assert "a" in cache
        cache.put("c", 3)

        assert "a" not in cache

    def test_capacity_one(self):
        """Test the smallest enabled cache."""
        cache = EvictionCache(1)

        cache.put("a", 1)
        cache.put("b", 2)

        assert cache.keys() == ["b"]

    def test_zero_capacity_is_inert(self):
        """Test capacity 0 never retains an entry."""
        cache = EvictionCache(0)

        cache.put("a", 1)

        assert not cache.enabled
        assert cache.get("a") is None
        assert len(cache) == 0

    def test_negative_capacity(self):
        """Test negative capacity is rejected."""
        with pytest.raises(ValueError, match=">= 0"):
            EvictionCache(-1)

    def test_clear(self):
        """Test clear empties the cache."""
        cache = EvictionCache(3)

        cache.put("a", 1)
        cache.put("b", 2)
        cache.clear()

        assert len(cache) == 0
        assert cache.keys() == []
        cache.put("c", 3)
        assert cache.keys() == ["c"]

    def test_concurrent_access_keeps_bound(self):
        """Test size never exceeds capacity under concurrent get/put."""
        capacity = 8
        cache = EvictionCache(capacity)
        violations = []
        stop = threading.Event()

        def watch():
            while not stop.is_set():
                if len(cache) > capacity:
                    violations.append(len(cache))

        def work(worker):
            for i in range(2000):
                key = f"k{(worker * 7 + i) % 50}"
                cache.put(key, i)
                cache.get(f"k{i % 50}")

        watcher = threading.Thread(target=watch)
        watcher.start()
        with ThreadPoolExecutor(max_workers=8) as executor:
            list(executor.map(work, range(8)))
        stop.set()
        watcher.join()

        assert violations == []
        assert len(cache) == capacity
        keys = cache.keys()
        assert len(keys) == len(set(keys)) == capacity
        assert all(key in cache for key in keys)
