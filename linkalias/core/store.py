"""Alias store: shortening and resolution of URLs."""

import logging
from typing import Any, Dict, Optional

from .allocator import IdentifierAllocator
from .cache import EvictionCache
from .codec import Base62Codec
from .errors import AliasNotFoundError


class AliasStore:
    """Authoritative alias -> URL mapping, optionally fronted by an LRU cache.

    URLs passed to ``shorten`` must already be validated; see
    ``linkalias.common.validators``.

    The mapping is a plain dict. Single-key assignment and lookup are atomic
    and values are immutable strings, so a concurrent reader sees either the
    complete entry or nothing. Identifier allocation and the cache carry
    their own locks.
    """

    def __init__(
        self,
        base_url_prefix: str,
        cache_capacity: int = 0,
        allocator: Optional[IdentifierAllocator] = None,
        codec: Optional[Base62Codec] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """Initialize alias store.

        Args:
            base_url_prefix: String prepended to every short code
            cache_capacity: LRU cache capacity (0 disables caching)
            allocator: Optional identifier allocator
            codec: Optional base62 codec
            logger: Optional logger

        Raises:
            ValueError: If cache_capacity is negative
        """
        if cache_capacity < 0:
            raise ValueError(f"Cache capacity must be >= 0, got {cache_capacity}")

        self.base_url_prefix = base_url_prefix
        self.allocator = allocator or IdentifierAllocator()
        self.codec = codec or Base62Codec()
        self.logger = logger or logging.getLogger(__name__)
        self._urls: Dict[str, str] = {}
        self._closed = False

        self.cache: Optional[EvictionCache[str, str]] = None
        if cache_capacity > 0:
            self.cache = EvictionCache(cache_capacity, logger=self.logger)
            self.logger.info(f"LRU cache enabled with capacity={cache_capacity}")

    def shorten(self, original_url: str) -> str:
        """Create a new alias for a URL.

        The cache is not populated here; it fills on first resolve.

        Args:
            original_url: Validated http(s) URL

        Returns:
            The alias (base URL prefix + short code)
        """
        identifier = self.allocator.next()
        alias = self.alias_for(self.codec.encode(identifier))
        self._urls[alias] = original_url

        self.logger.info(f"Created alias: {alias} -> {original_url}")
        return alias

    def resolve(self, alias: str) -> str:
        """Get the original URL for an alias.

        Args:
            alias: Alias returned by ``shorten``

        Returns:
            The original URL

        Raises:
            AliasNotFoundError: If the alias was never issued
        """
        if self.cache is not None:
            cached_url = self.cache.get(alias)
            if cached_url is not None:
                self.logger.debug(f"Cache hit for {alias}")
                return cached_url

        original_url = self._urls.get(alias)
        if original_url is None:
            self.logger.warning(f"Alias not found: {alias}")
            raise AliasNotFoundError(alias)

        if self.cache is not None:
            self.cache.put(alias, original_url)

        self.logger.debug(f"Resolved alias: {alias} -> {original_url}")
        return original_url

    def alias_for(self, short_code: str) -> str:
        """Build the alias for a short code."""
        return f"{self.base_url_prefix}{short_code}"

    def get_statistics(self) -> Dict[str, Any]:
        """Get store statistics.

        Returns:
            Dictionary with statistics
        """
        stats: Dict[str, Any] = {
            "total_urls": len(self._urls),
            "last_identifier": self.allocator.last,
            "cache_enabled": self.cache is not None,
        }
        if self.cache is not None:
            stats["cache"] = self.cache.stats()
        return stats

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        """Mark the store as shut down and drop cached entries.

        Mappings stay readable for whoever still holds the instance; the
        HTTP layer stops routing requests to a closed store.
        """
        if self._closed:
            return
        self._closed = True
        if self.cache is not None:
            self.cache.clear()
        self.logger.info(f"Closed alias store with {len(self._urls)} aliases")

    def health_check(self) -> Dict[str, bool]:
        """Perform health check.

        The store is unhealthy once closed. The cache is unhealthy if it
        holds more entries than its capacity or has been cleared by close.

        Returns:
            Dictionary with health status
        """
        store_healthy = not self._closed
        cache_healthy = True
        if self.cache is not None:
            cache_healthy = store_healthy and len(self.cache) <= self.cache.capacity

        return {
            "store": store_healthy,
            "cache": cache_healthy,
            "overall": store_healthy and cache_healthy,
        }

    def __len__(self) -> int:
        return len(self._urls)

    def __contains__(self, alias: object) -> bool:
        return alias in self._urls
