"""Core alias allocation, encoding, caching and storage."""

from .allocator import IdentifierAllocator
from .codec import Base62Codec
from .cache import EvictionCache
from .store import AliasStore
from .errors import LinkAliasError, AliasNotFoundError, InvalidURLError

__all__ = [
    "IdentifierAllocator",
    "Base62Codec",
    "EvictionCache",
    "AliasStore",
    "LinkAliasError",
    "AliasNotFoundError",
    "InvalidURLError",
]
