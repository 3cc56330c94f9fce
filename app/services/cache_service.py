import time
import logging
from collections import OrderedDict
from typing import Callable, Generic, Optional, Tuple, TypeVar

logger = logging.getLogger(__name__)

V = TypeVar("V")


class LyricsCache(Generic[V]):
    """
    Bounded in-memory store for lookup results, keyed by normalized query.

    - LRU eviction once max_entries is exceeded.
    - Optional TTL; expired entries are dropped on read.
    - No locking: only touched from the event loop, last write wins.
    """

    def __init__(
        self,
        max_entries: int = 1024,
        ttl_seconds: Optional[float] = None,
        clock: Callable[[], float] = time.monotonic
    ):
        if max_entries < 1:
            raise ValueError("max_entries must be at least 1")
        self.max_entries = max_entries
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: "OrderedDict[str, Tuple[float, V]]" = OrderedDict()

    def get(self, key: str) -> Optional[V]:
        """
        Return the cached value or None on miss/expiry.
        A hit marks the entry as most recently used.
        """
        entry = self._entries.get(key)
        if entry is None:
            return None

        stored_at, value = entry
        if self._is_expired(stored_at):
            logger.debug(f"Cache entry expired: {key}")
            del self._entries[key]
            return None

        self._entries.move_to_end(key)
        return value

    def set(self, key: str, value: V) -> None:
        self._entries[key] = (self._clock(), value)
        self._entries.move_to_end(key)

        while len(self._entries) > self.max_entries:
            evicted, _ = self._entries.popitem(last=False)
            logger.debug(f"Cache full ({self.max_entries}), evicted: {evicted}")

    def clear(self) -> None:
        self._entries.clear()

    def _is_expired(self, stored_at: float) -> bool:
        if self.ttl_seconds is None:
            return False
        return self._clock() - stored_at >= self.ttl_seconds

    def __contains__(self, key: str) -> bool:
        # Membership test leaves LRU order and expired entries alone
        entry = self._entries.get(key)
        return entry is not None and not self._is_expired(entry[0])

    def __len__(self) -> int:
        return len(self._entries)
