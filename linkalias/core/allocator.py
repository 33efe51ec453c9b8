"""Thread-safe identifier allocation."""

import threading


class IdentifierAllocator:
    """Hand out strictly increasing integer identifiers.

    The first identifier is ``start`` (1 by default); 0 is never issued so
    that every encoded alias is non-empty.
    """

    def __init__(self, start: int = 1):
        if start < 1:
            raise ValueError("start must be >= 1")
        self._last = start - 1
        self._lock = threading.Lock()

    def next(self) -> int:
        """Return the next identifier.

        Returns:
            An identifier greater than every identifier returned before
        """
        with self._lock:
            self._last += 1
            return self._last

    @property
    def last(self) -> int:
        """Most recently issued identifier, 0 if none was issued."""
        with self._lock:
            return self._last
