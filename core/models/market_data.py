"""
Market data models

Pydantic models for market data structures:
- Candle: OHLCV candlestick
- SymbolInfo: Symbol metadata
- Quote: Latest quote snapshot
- CandleResponse: Candle range query result
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class Candle(BaseModel):
    """
    OHLCV candlestick

    Immutable once persisted. Series are ordered ascending by timestamp.
    """

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    timestamp: int = Field(description="Candle open time (unix seconds)")
    open: float = Field(description="Opening price")
    high: float = Field(description="Highest price in interval")
    low: float = Field(description="Lowest price in interval")
    close: float = Field(description="Closing price")
    volume: int = Field(default=0, description="Total volume traded")


class SymbolInfo(BaseModel):
    """Symbol metadata"""

    symbol: str = Field(description="Ticker symbol (AAPL, BTCUSD)")
    description: str = Field(default="", description="Human readable name")
    display_symbol: str = Field(description="Symbol as shown in the UI")
    type: str = Field(default="", description="Instrument type (Common Stock, Crypto)")
    currency: str = Field(default="USD", description="Quote currency")


class Quote(BaseModel):
    """Latest quote for a symbol"""

    symbol: str
    price: float
    change: float
    change_percent: float
    high: float
    low: float
    open: float
    previous_close: float
    timestamp: int = Field(description="Quote time (unix seconds)")

    @classmethod
    def from_candles(cls, symbol: str, latest: Candle, previous: Candle | None = None) -> "Quote":
        """
        Build a quote from the two most recent candles

        Args:
            symbol: Ticker symbol
            latest: Most recent candle
            previous: Candle before it (change is 0 when missing)

        Returns:
            Quote priced at the latest close

        Example:
            >>> Quote.from_candles("AAPL", today, yesterday).change_percent
            1.67
        """
        previous_close = previous.close if previous else latest.close
        change = latest.close - previous_close
        change_percent = (change / previous_close) * 100 if previous_close else 0.0

        return cls(
            symbol=symbol,
            price=latest.close,
            change=change,
            change_percent=change_percent,
            high=latest.high,
            low=latest.low,
            open=latest.open,
            previous_close=previous_close,
            timestamp=latest.timestamp,
        )


class CandleResponse(BaseModel):
    """Candle range query result for one symbol/resolution"""

    symbol: str
    resolution: str = Field(description="Chart resolution (1, 5, 15, 60, D, W, M)")
    status: Literal["ok", "no_data"] = "ok"
    data: list[Candle] = Field(default_factory=list)
