"""
Market Data Cache - TTL read-through cache for symbols, quotes and candles

Strategy:
1. Cache hit → return (expired entries are absent, never "stale but servable")
2. Miss → repository fallback (awaited, errors propagate unchanged)
3. Population is a separate, explicit step:
   - symbols / candles: fallback result is re-primed with the kind's default TTL
   - quotes: fallback result is returned as-is; callers re-prime via set_quote()

Key layout (under CACHE_KEY_PREFIX):
    symbol:{SYMBOL}
    quote:{SYMBOL}
    candles:{SYMBOL}:{RESOLUTION}:{FROM}:{TO}

Cloud-agnostic:
- Cache: in-memory or Redis (via BaseCacheClient)
- Store: ClickHouse, etc. (via BaseMarketDataRepository)
"""

import logging
from datetime import timedelta
from typing import TypeVar
from urllib.parse import quote as url_quote

from pydantic import BaseModel

from config.settings import Settings, get_settings
from core.interfaces.cache import BaseCacheClient
from core.interfaces.repository import BaseMarketDataRepository
from core.models.cache import CacheStats
from core.models.market_data import CandleResponse, Quote, SymbolInfo

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


class MarketDataCacheService:
    """Read-through cache over three independent kinds of market data"""

    SYMBOL = "symbol"
    QUOTE = "quote"
    CANDLES = "candles"

    def __init__(
        self,
        cache: BaseCacheClient,
        repository: BaseMarketDataRepository,
        settings: Settings | None = None,
    ):
        self.cache = cache
        self.repository = repository
        self.settings = settings or get_settings()
        self.prefix = self.settings.CACHE_KEY_PREFIX

    # ============================================
    # LIFECYCLE
    # ============================================
    async def connect(self) -> None:
        await self.cache.connect()
        await self.repository.connect()

    async def close(self) -> None:
        await self.cache.close()
        await self.repository.close()

    # ============================================
    # KEYS
    # ============================================
    @staticmethod
    def _segment(part: str) -> str:
        # ':' separates key segments; "BINANCE:BTCUSDT" must stay one segment
        return url_quote(part, safe="")

    def _symbol_key(self, symbol: str) -> str:
        return f"{self.prefix}{self.SYMBOL}:{self._segment(symbol)}"

    def _quote_key(self, symbol: str) -> str:
        return f"{self.prefix}{self.QUOTE}:{self._segment(symbol)}"

    def _candle_prefix(self, symbol: str, resolution: str | None = None) -> str:
        base = f"{self.prefix}{self.CANDLES}:{self._segment(symbol)}:"
        if resolution is None:
            return base
        return f"{base}{self._segment(resolution)}:"

    def _candle_key(self, symbol: str, resolution: str, from_ts: int, to_ts: int) -> str:
        return f"{self._candle_prefix(symbol, resolution)}{from_ts}:{to_ts}"

    # ============================================
    # RAW ACCESS
    # ============================================
    async def _read(self, key: str, model: type[M]) -> M | None:
        cached = await self.cache.get(key)
        if cached is None:
            logger.debug(f"Cache miss: {key}")
            return None

        logger.debug(f"Cache hit: {key}")
        return model.model_validate_json(cached)

    async def _store(self, key: str, value: BaseModel, ttl: timedelta) -> None:
        await self.cache.set(key, value.model_dump_json(), ttl=ttl)

    # ============================================
    # SYMBOLS
    # ============================================
    async def get_symbol(self, symbol: str) -> SymbolInfo | None:
        """
        Get symbol metadata

        Falls back to the repository on miss and re-primes the cache.
        """
        key = self._symbol_key(symbol)
        cached = await self._read(key, SymbolInfo)
        if cached is not None:
            return cached

        info = await self.repository.find_symbol(symbol)
        if info is None:
            return None

        await self._store(key, info, self.settings.symbol_ttl)
        return info

    async def set_symbol(
        self, symbol: str, info: SymbolInfo, ttl: timedelta | None = None
    ) -> None:
        """Cache symbol metadata (and persist it when write-through is on)"""
        if ttl is None:
            ttl = self.settings.symbol_ttl
        await self._store(self._symbol_key(symbol), info, ttl)

        if self.settings.CACHE_WRITE_THROUGH:
            await self.repository.upsert_symbol(info)

    async def delete_symbol(self, symbol: str) -> None:
        await self.cache.delete(self._symbol_key(symbol))

    # ============================================
    # QUOTES
    # ============================================
    async def get_quote(self, symbol: str) -> Quote | None:
        """
        Get latest quote

        Falls back to the repository on miss. The fallback result is NOT
        cached; callers re-prime with set_quote().
        """
        cached = await self._read(self._quote_key(symbol), Quote)
        if cached is not None:
            return cached

        return await self.repository.find_latest_quote(symbol)

    async def set_quote(self, symbol: str, quote: Quote, ttl: timedelta | None = None) -> None:
        if ttl is None:
            ttl = self.settings.quote_ttl
        await self._store(self._quote_key(symbol), quote, ttl)

    async def delete_quote(self, symbol: str) -> None:
        await self.cache.delete(self._quote_key(symbol))

    # ============================================
    # CANDLES
    # ============================================
    async def get_candle_data(
        self, symbol: str, resolution: str, from_ts: int, to_ts: int
    ) -> CandleResponse | None:
        """
        Get candles for an exact (symbol, resolution, from, to) range

        Falls back to the repository on miss; a non-empty result is
        re-primed with the candle TTL. Empty results return None.
        """
        key = self._candle_key(symbol, resolution, from_ts, to_ts)
        cached = await self._read(key, CandleResponse)
        if cached is not None:
            return cached

        candles = await self.repository.find_candles(symbol, resolution, from_ts, to_ts)
        if not candles:
            return None

        response = CandleResponse(symbol=symbol, resolution=resolution, data=candles)
        await self._store(key, response, self.settings.candle_ttl)
        return response

    async def set_candle_data(
        self,
        symbol: str,
        resolution: str,
        from_ts: int,
        to_ts: int,
        data: CandleResponse,
        ttl: timedelta | None = None,
    ) -> None:
        """Cache a candle range (and persist the candles when write-through is on)"""
        key = self._candle_key(symbol, resolution, from_ts, to_ts)
        if ttl is None:
            ttl = self.settings.candle_ttl
        await self._store(key, data, ttl)

        if self.settings.CACHE_WRITE_THROUGH and data.data:
            await self.repository.bulk_insert_candles(symbol, resolution, data.data)

    async def delete_candle_data(self, symbol: str, resolution: str | None = None) -> int:
        """
        Delete cached candle ranges

        Args:
            symbol: Ticker symbol
            resolution: Only this resolution; None removes every resolution

        Returns:
            Number of cached ranges removed
        """
        keys = await self.cache.scan_prefix(self._candle_prefix(symbol, resolution))
        if not keys:
            return 0
        return await self.cache.delete(*keys)

    # ============================================
    # INVALIDATION
    # ============================================
    async def invalidate_symbol(self, symbol: str) -> None:
        """Remove metadata, quote and every candle range for symbol"""
        await self.delete_symbol(symbol)
        await self.delete_quote(symbol)
        removed = await self.delete_candle_data(symbol)
        logger.info(f"✓ Invalidated cache for {symbol} ({removed} candle ranges)")

    async def invalidate_all(self) -> None:
        """Clear every cached kind under this service's prefix"""
        keys = await self.cache.scan_prefix(self.prefix)
        if keys:
            await self.cache.delete(*keys)
        logger.info(f"✓ Invalidated entire market data cache ({len(keys)} entries)")

    # ============================================
    # STATISTICS
    # ============================================
    async def get_stats(self) -> CacheStats:
        """
        Count live entries per kind

        Expired entries are swept first, so counts and memory usage never
        include anything past its TTL.
        """
        purged = await self.cache.purge_expired()
        if purged:
            logger.debug(f"Swept {purged} expired cache entries")

        symbols = await self.cache.scan_prefix(f"{self.prefix}{self.SYMBOL}:")
        quotes = await self.cache.scan_prefix(f"{self.prefix}{self.QUOTE}:")
        candles = await self.cache.scan_prefix(f"{self.prefix}{self.CANDLES}:")

        return CacheStats(
            symbols_count=len(symbols),
            quotes_count=len(quotes),
            candle_data_count=len(candles),
            memory_usage=await self.cache.memory_usage(),
        )
