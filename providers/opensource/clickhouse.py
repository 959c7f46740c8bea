"""
ClickHouse implementation of the market data repository

Persistence store behind the cache: symbol metadata and candles
"""

import logging
from typing import Any

from clickhouse_driver import Client

from config.settings import get_settings
from core.interfaces.repository import BaseMarketDataRepository
from core.models.market_data import Candle, Quote, SymbolInfo

logger = logging.getLogger(__name__)

CANDLE_COLUMNS = "timestamp, open, high, low, close, volume"


class ClickHouseMarketDataRepository(BaseMarketDataRepository):
    """
    ClickHouse implementation

    Features:
    - ReplacingMergeTree tables: re-inserting a symbol or candle replaces it
    - FINAL reads so replaced rows never surface
    - Columnar storage for long candle histories
    """

    def __init__(self):
        self.settings = get_settings()
        self.client: Client | None = None
        self.database = self.settings.CLICKHOUSE_DB

    async def connect(self) -> None:
        """Establish connection to ClickHouse and ensure tables exist"""
        try:
            self.client = Client(
                host=self.settings.CLICKHOUSE_HOST,
                port=self.settings.CLICKHOUSE_PORT,
                database=self.settings.CLICKHOUSE_DB,
                user=self.settings.CLICKHOUSE_USER,
                password=self.settings.CLICKHOUSE_PASSWORD,
            )
            # Test connection
            self.client.execute("SELECT 1")
            self.ensure_schema()
            logger.info(
                f"✓ Connected to ClickHouse: "
                f"{self.settings.CLICKHOUSE_HOST}:{self.settings.CLICKHOUSE_PORT}"
            )
        except Exception as e:
            logger.error(f"✗ Failed to connect to ClickHouse: {e}")
            raise

    def _require_client(self) -> Client:
        if not self.client:
            raise RuntimeError("ClickHouse client not connected")
        return self.client

    def ensure_schema(self) -> None:
        """Create symbols and candles tables if missing"""
        client = self._require_client()

        client.execute(
            f"""
            CREATE TABLE IF NOT EXISTS {self.database}.symbols
            (
                symbol String,
                description String,
                display_symbol String,
                type String,
                currency String,
                updated_at DateTime64(3) DEFAULT now64(3)
            )
            ENGINE = ReplacingMergeTree(updated_at)
            ORDER BY symbol
            """
        )
        client.execute(
            f"""
            CREATE TABLE IF NOT EXISTS {self.database}.candles
            (
                symbol String,
                resolution LowCardinality(String),
                timestamp Int64,
                open Float64,
                high Float64,
                low Float64,
                close Float64,
                volume UInt64,
                inserted_at DateTime64(3) DEFAULT now64(3)
            )
            ENGINE = ReplacingMergeTree(inserted_at)
            ORDER BY (symbol, resolution, timestamp)
            """
        )

    async def find_symbol(self, symbol: str) -> SymbolInfo | None:
        """Look up symbol metadata"""
        client = self._require_client()

        try:
            rows = client.execute(
                f"""
                SELECT symbol, description, display_symbol, type, currency
                FROM {self.database}.symbols FINAL
                WHERE symbol = %(symbol)s
                LIMIT 1
                """,
                {"symbol": symbol},
            )
        except Exception as e:
            logger.error(f"✗ ClickHouse symbol lookup error for {symbol}: {e}")
            raise

        if not rows:
            return None

        symbol_, description, display_symbol, type_, currency = rows[0]
        return SymbolInfo(
            symbol=symbol_,
            description=description,
            display_symbol=display_symbol,
            type=type_,
            currency=currency or "USD",
        )

    async def upsert_symbol(self, info: SymbolInfo) -> None:
        """Insert symbol row (ReplacingMergeTree keeps the newest)"""
        client = self._require_client()

        try:
            client.execute(
                f"""
                INSERT INTO {self.database}.symbols
                (symbol, description, display_symbol, type, currency)
                VALUES
                """,
                [(info.symbol, info.description, info.display_symbol, info.type, info.currency)],
            )
            logger.debug(f"Upserted symbol {info.symbol}")
        except Exception as e:
            logger.error(f"✗ ClickHouse symbol upsert error for {info.symbol}: {e}")
            raise

    async def find_candles(
        self,
        symbol: str,
        resolution: str,
        from_ts: int,
        to_ts: int,
        limit: int | None = None,
    ) -> list[Candle]:
        """
        Query candles in [from_ts, to_ts], oldest first

        With a limit, the most recent `limit` candles of the range are kept.
        """
        client = self._require_client()

        params: dict[str, Any] = {
            "symbol": symbol,
            "resolution": resolution,
            "from_ts": from_ts,
            "to_ts": to_ts,
        }
        query = f"""
            SELECT {CANDLE_COLUMNS}
            FROM {self.database}.candles FINAL
            WHERE symbol = %(symbol)s
              AND resolution = %(resolution)s
              AND timestamp BETWEEN %(from_ts)s AND %(to_ts)s
            ORDER BY timestamp DESC
        """
        if limit is not None:
            query += " LIMIT %(limit)s"
            params["limit"] = limit

        try:
            rows = client.execute(query, params)
        except Exception as e:
            logger.error(f"✗ ClickHouse candle query error for {symbol}/{resolution}: {e}")
            raise

        # Fetched newest-first so LIMIT keeps the most recent; flip to ascending
        return [self._row_to_candle(row) for row in reversed(rows)]

    async def bulk_insert_candles(
        self, symbol: str, resolution: str, candles: list[Candle]
    ) -> int:
        """Batch insert candles"""
        if not candles:
            return 0

        client = self._require_client()

        rows = [
            (symbol, resolution, c.timestamp, c.open, c.high, c.low, c.close, c.volume)
            for c in candles
        ]

        try:
            client.execute(
                f"""
                INSERT INTO {self.database}.candles
                (symbol, resolution, {CANDLE_COLUMNS})
                VALUES
                """,
                rows,
            )
            logger.debug(f"Inserted {len(rows)} candles for {symbol}/{resolution}")
            return len(rows)
        except Exception as e:
            logger.error(f"✗ ClickHouse candle insert error for {symbol}/{resolution}: {e}")
            raise

    async def find_latest_quote(self, symbol: str) -> Quote | None:
        """Quote from the two most recent candles at QUOTE_RESOLUTION"""
        client = self._require_client()

        try:
            rows = client.execute(
                f"""
                SELECT {CANDLE_COLUMNS}
                FROM {self.database}.candles FINAL
                WHERE symbol = %(symbol)s AND resolution = %(resolution)s
                ORDER BY timestamp DESC
                LIMIT 2
                """,
                {"symbol": symbol, "resolution": self.settings.QUOTE_RESOLUTION},
            )
        except Exception as e:
            logger.error(f"✗ ClickHouse quote query error for {symbol}: {e}")
            raise

        if not rows:
            return None

        latest = self._row_to_candle(rows[0])
        previous = self._row_to_candle(rows[1]) if len(rows) > 1 else None
        return Quote.from_candles(symbol, latest, previous)

    @staticmethod
    def _row_to_candle(row: tuple) -> Candle:
        timestamp, open_, high, low, close, volume = row
        return Candle(
            timestamp=timestamp, open=open_, high=high, low=low, close=close, volume=volume
        )

    async def close(self) -> None:
        """Close connection"""
        if self.client:
            self.client.disconnect()
            self.client = None
            logger.info("✓ ClickHouse connection closed")
