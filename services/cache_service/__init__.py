"""
Cache Service - Market data caching

TTL read-through cache for symbol metadata, quotes and candle ranges
with repository fallback and targeted/bulk invalidation.
"""

from services.cache_service.market_data_cache import MarketDataCacheService

__all__ = ["MarketDataCacheService"]
