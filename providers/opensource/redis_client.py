"""
Redis implementation of cache client

Shared cache for multi-worker deployments; expiry is handled by Redis itself
"""

import logging
import re
from datetime import timedelta

from redis.asyncio import Redis

from config.settings import get_settings
from core.interfaces.cache import BaseCacheClient

logger = logging.getLogger(__name__)

_GLOB_SPECIAL = re.compile(r"([*?\[\]\\])")


def escape_glob(text: str) -> str:
    """Escape Redis MATCH pattern metacharacters"""
    return _GLOB_SPECIAL.sub(r"\\\1", text)


class RedisClient(BaseCacheClient):
    """
    Redis implementation

    Features:
    - In-memory storage (microsecond latency)
    - Native millisecond TTL (PX), so expired keys are never returned
    - SCAN-based prefix listing (non-blocking, unlike KEYS)
    """

    def __init__(self, scan_count: int = 500):
        self.settings = get_settings()
        self.client: Redis | None = None
        self.scan_count = scan_count

    async def connect(self) -> None:
        """Connect to Redis"""
        try:
            self.client = Redis.from_url(self.settings.redis_url, decode_responses=True)
            # Test connection
            await self.client.ping()
            logger.info(
                f"✓ Connected to Redis: {self.settings.REDIS_HOST}:{self.settings.REDIS_PORT}"
            )
        except Exception as e:
            logger.error(f"✗ Failed to connect to Redis: {e}")
            raise

    def _require_client(self) -> Redis:
        if not self.client:
            raise RuntimeError("Redis client not connected")
        return self.client

    async def get(self, key: str) -> str | None:
        """Get value by key"""
        client = self._require_client()

        try:
            return await client.get(key)
        except Exception as e:
            logger.error(f"✗ Redis GET error: {e}")
            raise

    async def set(self, key: str, value: str, ttl: timedelta | None = None) -> bool:
        """
        Set key-value with optional TTL

        Args:
            key: Redis key
            value: Value to set
            ttl: TTL as timedelta, stored with millisecond precision (min 1ms)
        """
        client = self._require_client()

        try:
            if ttl is None:
                return bool(await client.set(key, value))

            px = max(1, int(ttl / timedelta(milliseconds=1)))
            return bool(await client.set(key, value, px=px))
        except Exception as e:
            logger.error(f"✗ Redis SET error: {e}")
            raise

    async def delete(self, *keys: str) -> int:
        """Delete one or more keys"""
        client = self._require_client()
        if not keys:
            return 0

        try:
            return await client.delete(*keys)
        except Exception as e:
            logger.error(f"✗ Redis DELETE error: {e}")
            raise

    async def scan_prefix(self, prefix: str) -> list[str]:
        """List keys starting with prefix via SCAN MATCH"""
        client = self._require_client()

        try:
            pattern = f"{escape_glob(prefix)}*"
            return [key async for key in client.scan_iter(match=pattern, count=self.scan_count)]
        except Exception as e:
            logger.error(f"✗ Redis SCAN error: {e}")
            raise

    async def purge_expired(self) -> int:
        """Redis evicts expired keys itself"""
        self._require_client()
        return 0

    async def memory_usage(self) -> int | None:
        """used_memory from INFO memory (whole Redis instance)"""
        client = self._require_client()

        try:
            info = await client.info("memory")
            return info.get("used_memory")
        except Exception as e:
            logger.error(f"✗ Redis INFO error: {e}")
            raise

    async def close(self) -> None:
        """Close connection"""
        if self.client:
            await self.client.aclose()
            self.client = None
            logger.info("✓ Redis connection closed")
