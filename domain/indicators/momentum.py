"""
Momentum indicators

Implementations:
- RSI: Relative Strength Index (Wilder smoothing)
- MACD: Moving Average Convergence Divergence
"""

from typing import Literal

import numpy as np

from core.interfaces.indicators import BaseIndicator
from core.models.indicators import IndicatorValue, MACDIndicatorResult, MACDSeries
from core.models.market_data import Candle
from domain.indicators.moving_averages import EMA, ema_of_values

RSI_OVERBOUGHT = 70.0
RSI_OVERSOLD = 30.0


def rsi_signal(
    value: float, overbought: float = RSI_OVERBOUGHT, oversold: float = RSI_OVERSOLD
) -> Literal["overbought", "oversold", "neutral"]:
    """
    Classify an RSI reading

    Example:
        >>> rsi_signal(75.2)
        'overbought'
    """
    if value >= overbought:
        return "overbought"
    if value <= oversold:
        return "oversold"
    return "neutral"


class RSI(BaseIndicator):
    """
    Relative Strength Index

    Formula:
        RS = Average Gain / Average Loss (Wilder-smoothed over N periods)
        RSI = 100 - (100 / (1 + RS))
        RSI = 100 when Average Loss is 0

    Interpretation:
        - RSI > 70: Overbought
        - RSI < 30: Oversold
        - RSI = 50: Neutral

    Example:
        >>> candles = [...]  # 100 candles
        >>> rsi = RSI(period=14)
        >>> series = rsi.calculate(candles)
        >>> len(series)
        86
    """

    indicator_type = "rsi"

    def __init__(self, period: int = 14, name: str | None = None):
        """
        Initialize RSI

        Args:
            period: Look-back period (default: 14)
            name: Custom name (default: "RSI_<period>")
        """
        super().__init__(period=period, name=name)

    @property
    def min_candles(self) -> int:
        # One extra candle: N deltas need N + 1 closes
        return self.period + 1

    def calculate(self, candles: list[Candle]) -> list[IndicatorValue]:
        """
        Calculate RSI series

        The first value sits on candle[period] and uses the plain mean of the
        first `period` deltas; each later candle folds in one more delta.
        """
        if not self.has_enough_data(candles):
            return []

        deltas = np.diff(self.closes(candles))
        gains = np.where(deltas > 0, deltas, 0.0)
        losses = np.where(deltas < 0, -deltas, 0.0)

        period = self.period
        avg_gain = gains[:period].mean()
        avg_loss = losses[:period].mean()

        result: list[IndicatorValue] = []
        for i in range(period, len(candles)):
            if i > period:
                avg_gain = (avg_gain * (period - 1) + gains[i - 1]) / period
                avg_loss = (avg_loss * (period - 1) + losses[i - 1]) / period

            result.append(
                IndicatorValue(timestamp=candles[i].timestamp, value=self._rsi(avg_gain, avg_loss))
            )

        return result

    @staticmethod
    def _rsi(avg_gain: float, avg_loss: float) -> float:
        if avg_loss == 0:
            return 100.0
        rs = avg_gain / avg_loss
        return float(100.0 - 100.0 / (1.0 + rs))


class MACD(BaseIndicator):
    """
    Moving Average Convergence Divergence

    Components:
        - MACD Line = EMA(12) - EMA(26)
        - Signal Line = EMA(9) of MACD Line
        - Histogram = MACD Line - Signal Line

    Alignment:
        Series are right-aligned: the MACD line covers the overlap of the two
        EMAs, the histogram covers the overlap of MACD and signal.

    Interpretation:
        - MACD crosses above Signal: Bullish
        - MACD crosses below Signal: Bearish
        - Histogram > 0: Upward momentum
        - Histogram < 0: Downward momentum

    Example:
        >>> candles = [...]  # 200 candles
        >>> series = MACD().calculate(candles)
        >>> series.histogram[-1].value > 0
        True
    """

    indicator_type = "macd"

    def __init__(
        self,
        fast_period: int = 12,
        slow_period: int = 26,
        signal_period: int = 9,
        name: str | None = None,
    ):
        """
        Initialize MACD

        Args:
            fast_period: Fast EMA period (default: 12)
            slow_period: Slow EMA period (default: 26)
            signal_period: Signal line EMA period (default: 9)
            name: Custom name (default: "MACD_<fast>_<slow>_<signal>")
        """
        # slow_period drives the warm-up length
        super().__init__(
            period=slow_period,
            name=name or f"MACD_{fast_period}_{slow_period}_{signal_period}",
        )
        self.fast_period = self._validate_period("fast_period", fast_period)
        self.slow_period = slow_period
        self.signal_period = self._validate_period("signal_period", signal_period)
        self.params = {
            "fastPeriod": self.fast_period,
            "slowPeriod": self.slow_period,
            "signalPeriod": self.signal_period,
        }

    @property
    def min_candles(self) -> int:
        return max(self.fast_period, self.slow_period)

    def calculate(self, candles: list[Candle]) -> MACDSeries:
        """
        Calculate all MACD components

        Returns:
            MACDSeries with macd, signal, histogram
            (all empty if any stage lacks data)
        """
        fast = EMA(self.fast_period).calculate(candles)
        slow = EMA(self.slow_period).calculate(candles)
        if not fast or not slow:
            return MACDSeries()

        overlap = min(len(fast), len(slow))
        macd_line = [
            IndicatorValue(timestamp=f.timestamp, value=f.value - s.value)
            for f, s in zip(fast[-overlap:], slow[-overlap:], strict=True)
        ]

        signal_line = ema_of_values(macd_line, self.signal_period)
        if not signal_line:
            return MACDSeries()

        overlap = min(len(macd_line), len(signal_line))
        histogram = [
            IndicatorValue(timestamp=m.timestamp, value=m.value - s.value)
            for m, s in zip(macd_line[-overlap:], signal_line[-overlap:], strict=True)
        ]

        return MACDSeries(macd=macd_line, signal=signal_line, histogram=histogram)

    def get_result(self, candles: list[Candle], name: str | None = None) -> MACDIndicatorResult:
        """
        Override to expose all MACD components

        `values` carries the MACD line; signal and histogram ride alongside.
        """
        series = self.calculate(candles)
        return MACDIndicatorResult(
            name=name or self.name,
            parameters=self.params,
            values=series.macd,
            signal=series.signal,
            histogram=series.histogram,
        )
