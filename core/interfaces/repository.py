from abc import ABC, abstractmethod

from core.models.market_data import Candle, Quote, SymbolInfo


class BaseMarketDataRepository(ABC):
    """
    Abstract interface for the persistence store behind the cache

    Errors raised by implementations propagate to cache callers unchanged.

    Implementations:
    - ClickHouseMarketDataRepository (OLAP, columnar)
    """

    @abstractmethod
    async def connect(self) -> None:
        """Establish connection to database"""

    @abstractmethod
    async def find_symbol(self, symbol: str) -> SymbolInfo | None:
        """
        Look up symbol metadata

        Returns:
            SymbolInfo or None if unknown
        """

    @abstractmethod
    async def upsert_symbol(self, info: SymbolInfo) -> None:
        """Insert or replace symbol metadata"""

    @abstractmethod
    async def find_candles(
        self,
        symbol: str,
        resolution: str,
        from_ts: int,
        to_ts: int,
        limit: int | None = None,
    ) -> list[Candle]:
        """
        Query candles in [from_ts, to_ts]

        Args:
            symbol: Ticker symbol
            resolution: Chart resolution
            from_ts: Range start (unix seconds, inclusive)
            to_ts: Range end (unix seconds, inclusive)
            limit: Keep only the most recent N candles

        Returns:
            Candles ordered by timestamp ASC
        """

    @abstractmethod
    async def bulk_insert_candles(
        self, symbol: str, resolution: str, candles: list[Candle]
    ) -> int:
        """
        Persist candles (duplicates by timestamp are replaced)

        Returns:
            Number of rows written
        """

    @abstractmethod
    async def find_latest_quote(self, symbol: str) -> Quote | None:
        """Latest quote derived from stored data, None if no data"""

    @abstractmethod
    async def close(self) -> None:
        """Close connection"""
