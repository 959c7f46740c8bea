"""Interfaces module - Abstract base classes for pluggable services"""

from .cache import BaseCacheClient
from .indicators import BaseIndicator
from .repository import BaseMarketDataRepository

__all__ = [
    "BaseCacheClient",
    "BaseIndicator",
    "BaseMarketDataRepository",
]
