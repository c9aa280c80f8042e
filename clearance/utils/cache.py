"""
Time-based response cache used by the API client
"""

import time
from typing import Any, Callable, Dict, Optional, Tuple


class TTLCache:
    """
    In-memory cache whose entries expire a fixed number of seconds after they are stored

    Args:
        ttl: Entry lifetime in seconds
        clock: Function returning the current time in seconds
    """

    def __init__(self, ttl: float = 60, clock: Callable[[], float] = time.monotonic):
        self.ttl = ttl
        self._clock = clock
        self._entries: Dict[str, Tuple[Any, float]] = {}

    def get(self, key: str) -> Optional[Any]:
        """Return the cached value, or None if missing or expired"""
        entry = self._entries.get(key)
        if entry is None:
            return None

        value, expires_at = entry
        if self._clock() >= expires_at:
            del self._entries[key]
            return None
        return value

    def set(self, key: str, value: Any) -> None:
        self._entries[key] = (value, self._clock() + self.ttl)

    def invalidate_prefix(self, prefix: str) -> int:
        """
        Drop every entry whose key starts with prefix

        Returns:
            Number of entries removed
        """
        stale = [key for key in self._entries if key.startswith(prefix)]
        for key in stale:
            del self._entries[key]
        return len(stale)

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)
