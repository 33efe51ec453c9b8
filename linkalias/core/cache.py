"""In-process LRU cache for alias lookups."""

import logging
import threading
from typing import Dict, Generic, Hashable, List, Optional, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class _Node(Generic[K, V]):
    """Entry in the recency list."""

    __slots__ = ("key", "value", "prev", "next")

    def __init__(self, key: Optional[K] = None, value: Optional[V] = None):
        self.key = key
        self.value = value
        self.prev: Optional["_Node[K, V]"] = None
        self.next: Optional["_Node[K, V]"] = None


class EvictionCache(Generic[K, V]):
    """Bounded mapping with least-recently-used eviction.

    Recency is kept in a doubly linked list between two sentinels: the node
    after ``_head`` is the most recently used, the node before ``_tail`` the
    least recently used. ``_index`` maps keys to their nodes so that every
    operation is O(1). A single lock serialises all operations.

    A capacity of 0 disables the cache: nothing is stored and every lookup
    misses.
    """

    def __init__(self, capacity: int, logger: Optional[logging.Logger] = None):
        """Initialize the cache.

        Args:
            capacity: Maximum number of entries (0 disables caching)
            logger: Optional logger instance

        Raises:
            ValueError: If capacity is negative
        """
        if capacity < 0:
            raise ValueError(f"Cache capacity must be >= 0, got {capacity}")

        self._capacity = capacity
        self.logger = logger or logging.getLogger(__name__)
        self._index: Dict[K, _Node[K, V]] = {}
        self._head: _Node[K, V] = _Node()
        self._tail: _Node[K, V] = _Node()
        self._head.next = self._tail
        self._tail.prev = self._head
        self._lock = threading.Lock()

        self._hits = 0
        self._misses = 0
        self._evictions = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def enabled(self) -> bool:
        return self._capacity > 0

    def get(self, key: K) -> Optional[V]:
        """Get a value and mark it most recently used.

        Args:
            key: Cache key

        Returns:
            Cached value or None
        """
        with self._lock:
            node = self._index.get(key)
            if node is None:
                self._misses += 1
                return None

            self._hits += 1
            self._unlink(node)
            self._push_front(node)
            return node.value

    def put(self, key: K, value: V) -> None:
        """Insert or update a value and mark it most recently used.

        Inserting a new key into a full cache evicts the least recently
        used entry. Updating an existing key never evicts.

        Args:
            key: Cache key
            value: Value to cache
        """
        if not self.enabled:
            return

        with self._lock:
            node = self._index.get(key)
            if node is not None:
                node.value = value
                self._unlink(node)
                self._push_front(node)
                return

            node = _Node(key, value)
            self._index[key] = node
            self._push_front(node)

            if len(self._index) > self._capacity:
                eldest = self._tail.prev
                self._unlink(eldest)
                del self._index[eldest.key]
                self._evictions += 1
                self.logger.debug(f"Evicted {eldest.key} from cache")

    def keys(self) -> List[K]:
        """Snapshot of keys, least recently used first."""
        with self._lock:
            keys = []
            node = self._tail.prev
            while node is not self._head:
                keys.append(node.key)
                node = node.prev
            return keys

    def clear(self) -> None:
        """Remove every entry."""
        with self._lock:
            self._index.clear()
            self._head.next = self._tail
            self._tail.prev = self._head

    def stats(self) -> Dict[str, int]:
        """Get cache counters.

        Returns:
            Dictionary with size, capacity, hits, misses and evictions
        """
        with self._lock:
            return {
                "size": len(self._index),
                "capacity": self._capacity,
                "hits": self._hits,
                "misses": self._misses,
                "evictions": self._evictions,
            }

    def __len__(self) -> int:
        with self._lock:
            return len(self._index)

    def __contains__(self, key: object) -> bool:
        # Membership test only; does not refresh recency.
        with self._lock:
            return key in self._index

    def _unlink(self, node: _Node[K, V]) -> None:
        node.prev.next = node.next
        node.next.prev = node.prev
        node.prev = None
        node.next = None

    def _push_front(self, node: _Node[K, V]) -> None:
        node.prev = self._head
        node.next = self._head.next
        self._head.next.prev = node
        self._head.next = node
