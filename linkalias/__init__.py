"""Concurrent URL aliasing with an LRU-fronted in-memory store."""

from .core import (
    AliasStore,
    AliasNotFoundError,
    Base62Codec,
    EvictionCache,
    IdentifierAllocator,
    InvalidURLError,
    LinkAliasError,
)

__version__ = "1.0.0"

__all__ = [
    "AliasStore",
    "AliasNotFoundError",
    "Base62Codec",
    "EvictionCache",
    "IdentifierAllocator",
    "InvalidURLError",
    "LinkAliasError",
]
