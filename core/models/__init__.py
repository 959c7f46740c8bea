"""Models module - Pydantic data models"""

from .cache import CacheEntry, CacheStats
from .indicators import (
    BollingerBands,
    BollingerIndicatorResult,
    IndicatorResult,
    IndicatorValue,
    MACDIndicatorResult,
    MACDSeries,
    SeriesIndicatorResult,
)
from .market_data import Candle, CandleResponse, Quote, SymbolInfo

__all__ = [
    "Candle",
    "CandleResponse",
    "Quote",
    "SymbolInfo",
    "IndicatorValue",
    "IndicatorResult",
    "SeriesIndicatorResult",
    "MACDIndicatorResult",
    "MACDSeries",
    "BollingerIndicatorResult",
    "BollingerBands",
    "CacheEntry",
    "CacheStats",
]
