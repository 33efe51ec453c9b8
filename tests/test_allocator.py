"""Tests for identifier allocation."""

from concurrent.futures import ThreadPoolExecutor

import pytest
from linkalias.core.allocator import IdentifierAllocator


class TestIdentifierAllocator:
    """Test identifier allocation."""

    def test_starts_at_one(self):
        """Test first identifier is 1."""
        allocator = IdentifierAllocator()

        assert allocator.last == 0
        assert allocator.next() == 1
        assert allocator.last == 1

    def test_strictly_increasing(self):
        """Test every identifier exceeds the previous one."""
        allocator = IdentifierAllocator()

        ids = [allocator.next() for _ in range(100)]
        assert ids == list(range(1, 101))

    def test_invalid_start(self):
        """Test 0 cannot be issued."""
        with pytest.raises(ValueError):
            IdentifierAllocator(start=0)

    def test_concurrent_next(self):
        """Test concurrent callers never share an identifier."""
        allocator = IdentifierAllocator()

        def take(_):
            return [allocator.next() for _ in range(500)]

        with ThreadPoolExecutor(max_workers=16) as executor:
            batches = list(executor.map(take, range(16)))

        ids = [i for batch in batches for i in batch]
        assert len(ids) == len(set(ids)) == 8000
        assert sorted(ids) == list(range(1, 8001))
        assert allocator.last == 8000
        # Each caller saw its own values in increasing order
        for batch in batches:
            assert batch == sorted(batch)
