"""
In-memory key/value cache used for admission control.

The API marks a version as in flight before running a diff so that at
most one diff per version proceeds at a time. Entries never expire.
"""

import threading
from typing import Any, Dict, Optional, Tuple

READINESS_KEY = "ready"


class InMemoryCache:
    """
    Thread-safe dictionary-backed cache without expiration.
    """

    def __init__(self):
        self._items: Dict[str, Any] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> Tuple[Optional[Any], bool]:
        """
        Look up a key.

        Returns:
            (value, found) pair; value is None when the key is absent
        """
        with self._lock:
            if key in self._items:
                return self._items[key], True
            return None, False

    def set(self, key: str, value: Any) -> None:
        with self._lock:
            self._items[key] = value

    def add(self, key: str, value: Any) -> bool:
        """
        Set a key only if it is absent.

        Returns:
            True if the key was stored, False if it already existed
        """
        with self._lock:
            if key in self._items:
                return False
            self._items[key] = value
            return True

    def delete(self, key: str) -> None:
        with self._lock:
            self._items.pop(key, None)

    def clear(self) -> None:
        """Remove every entry, including the readiness key."""
        with self._lock:
            self._items.clear()


def init_cache() -> InMemoryCache:
    """Create a cache seeded with the readiness key."""
    cache = InMemoryCache()
    cache.set(READINESS_KEY, 0)
    return cache
