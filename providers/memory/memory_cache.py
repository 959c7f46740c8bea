"""
In-process implementation of cache client

Dictionary of CacheEntry objects with lazy expiry
"""

import logging
import sys
import threading
import time
from collections.abc import Callable
from datetime import timedelta

from core.interfaces.cache import BaseCacheClient
from core.models.cache import CacheEntry

logger = logging.getLogger(__name__)

NO_EXPIRY = float("inf")


class InMemoryCacheClient(BaseCacheClient):
    """
    In-memory implementation

    Features:
    - Per-entry TTL with lazy expiry (expired entries evicted on access)
    - Per-key atomic mutation (single lock around every dict operation)
    - Injectable clock for deterministic tests

    Scope: one process. Use RedisClient to share entries between workers.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._clock = clock
        self._entries: dict[str, CacheEntry[str]] = {}
        self._lock = threading.RLock()
        self._connected = False

    async def connect(self) -> None:
        """Nothing to dial; marks the client usable"""
        self._connected = True
        logger.info("✓ In-memory cache ready")

    def _ensure_connected(self) -> None:
        if not self._connected:
            raise RuntimeError("In-memory cache not connected")

    async def get(self, key: str) -> str | None:
        """Get value by key, evicting it if expired"""
        self._ensure_connected()

        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            if entry.is_expired(self._clock()):
                del self._entries[key]
                return None
            return entry.value

    async def set(self, key: str, value: str, ttl: timedelta | None = None) -> bool:
        """Set key-value, replacing any previous entry"""
        self._ensure_connected()

        expires_at = self._clock() + ttl.total_seconds() if ttl is not None else NO_EXPIRY
        with self._lock:
            self._entries[key] = CacheEntry[str](value=value, expires_at=expires_at)
        return True

    async def delete(self, *keys: str) -> int:
        """Delete one or more keys"""
        self._ensure_connected()

        removed = 0
        with self._lock:
            for key in keys:
                if self._entries.pop(key, None) is not None:
                    removed += 1
        return removed

    async def scan_prefix(self, prefix: str) -> list[str]:
        """List live keys with prefix, evicting expired matches"""
        self._ensure_connected()

        now = self._clock()
        live = []
        with self._lock:
            for key in [k for k in self._entries if k.startswith(prefix)]:
                if self._entries[key].is_expired(now):
                    del self._entries[key]
                else:
                    live.append(key)
        return live

    async def purge_expired(self) -> int:
        """
        Evict every expired entry

        Returns:
            Number of entries evicted
        """
        self._ensure_connected()

        now = self._clock()
        with self._lock:
            expired = [k for k, entry in self._entries.items() if entry.is_expired(now)]
            for key in expired:
                del self._entries[key]

        if expired:
            logger.debug(f"Purged {len(expired)} expired cache entries")
        return len(expired)

    async def memory_usage(self) -> int | None:
        """Approximate size of stored keys and values in bytes"""
        with self._lock:
            return sum(
                sys.getsizeof(key) + sys.getsizeof(entry.value)
                for key, entry in self._entries.items()
            )

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    async def close(self) -> None:
        """Drop all entries"""
        with self._lock:
            self._entries.clear()
        self._connected = False
        logger.info("✓ In-memory cache closed")
