"""
Abstract interface for technical indicators

Pure calculation base class shared by every indicator family
"""

from abc import ABC, abstractmethod
from typing import Any, ClassVar

import numpy as np

from core.models.indicators import IndicatorResult, IndicatorValue, SeriesIndicatorResult
from core.models.market_data import Candle


class BaseIndicator(ABC):
    """
    Indicator interface

    Design principle:
    - Pure calculation logic (no database or cache dependency)
    - Stateless between calls, safe to share across requests
    - Insufficient data yields an empty series, never an exception

    Implementations:
    - SMA, EMA, VolumeMA (domain/indicators/moving_averages.py)
    - RSI, MACD (domain/indicators/momentum.py)
    - BollingerBands (domain/indicators/volatility.py)
    """

    indicator_type: ClassVar[str]

    def __init__(self, period: int, name: str | None = None, **kwargs):
        """
        Initialize indicator

        Args:
            period: Look-back period for calculation (>= 1)
            name: Custom name (e.g. "SMA_20"). Defaults to "<CLASS>_<period>".
            **kwargs: Additional indicator-specific parameters

        Raises:
            ValueError: If period is not a positive integer
        """
        self.period = self._validate_period("period", period)
        self.name = name or f"{self.__class__.__name__}_{period}"
        self.params: dict[str, Any] = {"period": self.period, **kwargs}

    @property
    def min_candles(self) -> int:
        """Smallest series length that produces at least one value"""
        return self.period

    def has_enough_data(self, candles: list[Candle]) -> bool:
        return len(candles) >= self.min_candles

    @abstractmethod
    def calculate(self, candles: list[Candle]) -> Any:
        """
        Calculate indicator series from candle data

        Args:
            candles: Candles ordered by timestamp ASC (oldest first)

        Returns:
            Series (or bundle of series) aligned to candle timestamps.
            Empty when len(candles) < min_candles.
        """

    def get_result(self, candles: list[Candle], name: str | None = None) -> IndicatorResult:
        """
        Calculate and wrap into the result envelope

        Default implementation covers single-series indicators.
        Override for bundle-producing indicators (MACD, Bollinger).
        """
        return SeriesIndicatorResult(
            type=self.indicator_type,
            name=name or self.name,
            parameters=self.params,
            values=self.calculate(candles),
        )

    @staticmethod
    def closes(candles: list[Candle]) -> np.ndarray:
        """Closing prices as float64 array"""
        return np.array([c.close for c in candles], dtype=np.float64)

    @staticmethod
    def to_values(timestamps: list[int], values: np.ndarray) -> list[IndicatorValue]:
        """Pair timestamps with computed values (python floats for JSON)"""
        return [
            IndicatorValue(timestamp=ts, value=float(v))
            for ts, v in zip(timestamps, values, strict=True)
        ]

    @staticmethod
    def _validate_period(label: str, value: int) -> int:
        if isinstance(value, bool) or not isinstance(value, int) or value < 1:
            raise ValueError(f"{label} must be a positive integer, got {value!r}")
        return value

    def __repr__(self) -> str:
        params_str = ", ".join(f"{k}={v}" for k, v in self.params.items())
        return f"{self.__class__.__name__}({params_str})"
