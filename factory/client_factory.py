"""
Client factory - Auto-create clients based on configuration

Dependency injection pattern for backend-agnostic code
"""

import logging

from config.settings import get_settings
from core.interfaces.cache import BaseCacheClient
from core.interfaces.repository import BaseMarketDataRepository
from services.cache_service.market_data_cache import MarketDataCacheService

logger = logging.getLogger(__name__)


def create_cache_client() -> BaseCacheClient:
    """
    Create cache client based on CACHE_BACKEND config

    Returns:
        BaseCacheClient: In-memory (memory) or Redis (redis)

    Examples:
        >>> # .env: CACHE_BACKEND=memory
        >>> client = create_cache_client()  # Returns InMemoryCacheClient
        >>>
        >>> # .env: CACHE_BACKEND=redis
        >>> client = create_cache_client()  # Returns RedisClient
    """
    settings = get_settings()
    backend = settings.CACHE_BACKEND.lower()

    if backend == "memory":
        from providers.memory.memory_cache import InMemoryCacheClient

        logger.info("✓ Creating InMemoryCacheClient (memory)")
        return InMemoryCacheClient()

    elif backend == "redis":
        from providers.opensource.redis_client import RedisClient

        logger.info("✓ Creating RedisClient (redis)")
        return RedisClient()

    else:
        raise ValueError(
            f"Unsupported cache backend: {backend}. Supported: memory, redis"
        )


def create_market_data_repository() -> BaseMarketDataRepository:
    """
    Create persistent market data store

    Currently always returns ClickHouseMarketDataRepository

    Returns:
        BaseMarketDataRepository: ClickHouse repository
    """
    from providers.opensource.clickhouse import ClickHouseMarketDataRepository

    logger.info("✓ Creating ClickHouseMarketDataRepository")
    return ClickHouseMarketDataRepository()


def create_cache_service() -> MarketDataCacheService:
    """
    Wire cache client and repository into a MarketDataCacheService

    Each call returns a new, unconnected service; call connect() before use.

    Example:
        >>> service = create_cache_service()
        >>> await service.connect()
        >>> quote = await service.get_quote("AAPL")
    """
    return MarketDataCacheService(
        cache=create_cache_client(),
        repository=create_market_data_repository(),
        settings=get_settings(),
    )
