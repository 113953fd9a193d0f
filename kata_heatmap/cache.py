"""
Bounded in-memory cache of fetched event sets.

Owned by the web app; the aggregation functions never cache anything.
"""

from collections import OrderedDict
from threading import RLock
from time import monotonic


class EventSetCache:
    """LRU cache of event sets keyed by username, with a time-to-live."""

    def __init__(self, max_entries: int = 32, ttl_seconds: int = 300):
        self.max_entries = max(1, max_entries)
        self.ttl_seconds = max(1, ttl_seconds)
        self._entries: OrderedDict[str, tuple[float, tuple]] = OrderedDict()
        self._lock = RLock()

    def get(self, username: str) -> tuple | None:
        """Return the cached event set for username, or None if absent or expired."""
        key = username.lower()
        now = monotonic()

        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None

            stored_at, events = entry
            if now - stored_at > self.ttl_seconds:
                del self._entries[key]
                return None

            self._entries.move_to_end(key)
            return events

    def put(self, username: str, events) -> tuple:
        """Store an event set, evicting the least recently used entry when full."""
        key = username.lower()
        frozen = tuple(events)

        with self._lock:
            self._entries[key] = (monotonic(), frozen)
            self._entries.move_to_end(key)
            while len(self._entries) > self.max_entries:
                self._entries.popitem(last=False)

        return frozen

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)
