"""
Moving average indicators

Implementations:
- SMA: Simple Moving Average
- EMA: Exponential Moving Average
- VolumeMA: Simple Moving Average of volume

Array helpers (sma_array, ema_array, ema_of_values) are shared with the
momentum and volatility indicators.
"""

import numpy as np
from numpy.lib.stride_tricks import sliding_window_view

from core.interfaces.indicators import BaseIndicator
from core.models.indicators import IndicatorValue
from core.models.market_data import Candle


def sma_array(values: np.ndarray, period: int) -> np.ndarray:
    """
    Trailing mean of every full window

    Returns:
        Array of length len(values) - period + 1 (empty if too short)
    """
    if len(values) < period:
        return np.empty(0, dtype=np.float64)
    return sliding_window_view(values, period).mean(axis=1)


def ema_array(values: np.ndarray, period: int) -> np.ndarray:
    """
    Exponential moving average seeded with the SMA of the first window

    ema_i = (x_i - ema_{i-1}) * k + ema_{i-1}, k = 2 / (period + 1)

    Returns:
        Array of length len(values) - period + 1 (empty if too short)
    """
    if len(values) < period:
        return np.empty(0, dtype=np.float64)

    k = 2.0 / (period + 1)
    out = np.empty(len(values) - period + 1, dtype=np.float64)
    ema = values[:period].mean()
    out[0] = ema

    for j, price in enumerate(values[period:], start=1):
        ema = (price - ema) * k + ema
        out[j] = ema

    return out


def ema_of_values(series: list[IndicatorValue], period: int) -> list[IndicatorValue]:
    """
    EMA over an indicator series instead of candle closes

    Used for the MACD signal line. Timestamps follow the input series.
    """
    if len(series) < period:
        return []

    values = np.array([point.value for point in series], dtype=np.float64)
    ema = ema_array(values, period)
    timestamps = [point.timestamp for point in series[period - 1 :]]
    return BaseIndicator.to_values(timestamps, ema)


class SMA(BaseIndicator):
    """
    Simple Moving Average

    Formula: SMA = SUM(Close) / N

    Example:
        >>> candles = [...]  # 10 candles, closes 10, 12, ..., 28
        >>> [v.value for v in SMA(period=5).calculate(candles)]
        [14.0, 16.0, 18.0, 20.0, 22.0, 24.0]
    """

    indicator_type = "sma"

    def __init__(self, period: int = 20, name: str | None = None):
        super().__init__(period=period, name=name)

    def calculate(self, candles: list[Candle]) -> list[IndicatorValue]:
        """Calculate SMA series"""
        if not self.has_enough_data(candles):
            return []

        sma = sma_array(self.closes(candles), self.period)
        timestamps = [c.timestamp for c in candles[self.period - 1 :]]
        return self.to_values(timestamps, sma)


class EMA(BaseIndicator):
    """
    Exponential Moving Average

    Formula: EMA = α × Price + (1-α) × EMA_prev
    where α = 2 / (period + 1), seeded with SMA of the first window

    Note:
        EMA needs warm-up history. Early values lean on the SMA seed;
        load several multiples of the period for a converged series.

    Example:
        >>> ema = EMA(period=12)
        >>> series = ema.calculate(candles)
        >>> series[0].timestamp == candles[11].timestamp
        True
    """

    indicator_type = "ema"

    def __init__(self, period: int = 20, name: str | None = None):
        super().__init__(period=period, name=name)

    def calculate(self, candles: list[Candle]) -> list[IndicatorValue]:
        """Calculate EMA series"""
        if not self.has_enough_data(candles):
            return []

        ema = ema_array(self.closes(candles), self.period)
        timestamps = [c.timestamp for c in candles[self.period - 1 :]]
        return self.to_values(timestamps, ema)


class VolumeMA(BaseIndicator):
    """
    Volume Moving Average

    Formula: VMA = SUM(Volume) / N
    """

    indicator_type = "volume_ma"

    def __init__(self, period: int = 20, name: str | None = None):
        super().__init__(period=period, name=name)

    def calculate(self, candles: list[Candle]) -> list[IndicatorValue]:
        if not self.has_enough_data(candles):
            return []

        volumes = np.array([c.volume for c in candles], dtype=np.float64)
        vma = sma_array(volumes, self.period)
        timestamps = [c.timestamp for c in candles[self.period - 1 :]]
        return self.to_values(timestamps, vma)
