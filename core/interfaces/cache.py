from abc import ABC, abstractmethod
from datetime import timedelta


class BaseCacheClient(ABC):
    """
    Abstract interface for caching layer

    Key/value store with per-entry TTL. Expired entries are never returned.

    Implementations:
    - InMemoryCacheClient (process-local, lazy expiry)
    - RedisClient (shared, native expiry)
    """

    @abstractmethod
    async def connect(self) -> None:
        """Establish connection to cache service"""

    @abstractmethod
    async def get(self, key: str) -> str | None:
        """
        Get value by key

        Args:
            key: Cache key

        Returns:
            Value as string, or None if not found or expired
        """

    @abstractmethod
    async def set(self, key: str, value: str, ttl: timedelta | None = None) -> bool:
        """
        Set key-value with optional TTL (overwrites)

        Args:
            key: Cache key
            value: Value to store (string)
            ttl: Time to live (None = no expiry)

        Returns:
            True if successful
        """

    @abstractmethod
    async def delete(self, *keys: str) -> int:
        """
        Delete one or more keys

        Returns:
            Number of keys removed
        """

    @abstractmethod
    async def scan_prefix(self, prefix: str) -> list[str]:
        """
        List live keys starting with prefix

        Expired entries are evicted, not listed.

        Args:
            prefix: Literal key prefix (no glob characters)

        Returns:
            Matching keys
        """

    @abstractmethod
    async def purge_expired(self) -> int:
        """
        Evict every expired entry

        Returns:
            Number of entries evicted (0 for backends with native expiry)
        """

    @abstractmethod
    async def memory_usage(self) -> int | None:
        """Approximate bytes held by the cache, None if unknown"""

    @abstractmethod
    async def close(self) -> None:
        """Close connection"""
