"""
Technical indicators module

Exports:
- BaseIndicator (core/interfaces/indicators.py)
- Moving averages: SMA, EMA, VolumeMA
- Momentum: RSI, MACD, rsi_signal
- Volatility: BollingerBands
- Registry: IndicatorRegistry
"""

from core.interfaces.indicators import BaseIndicator
from domain.indicators.momentum import MACD, RSI, rsi_signal
from domain.indicators.moving_averages import EMA, SMA, VolumeMA, ema_of_values
from domain.indicators.registry import IndicatorRegistry, ParamSpec
from domain.indicators.volatility import BollingerBands

__all__ = [
    "BaseIndicator",
    "SMA",
    "EMA",
    "VolumeMA",
    "ema_of_values",
    "RSI",
    "MACD",
    "rsi_signal",
    "BollingerBands",
    "IndicatorRegistry",
    "ParamSpec",
]
