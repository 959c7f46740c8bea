"""
Indicator Calculation Service - Dispatch and orchestration

Clean separation of concerns:
- Fetch candles (via MarketDataCacheService, repository fallback on miss)
- Validate the series (via CandleSeriesValidator, warning only)
- Create the calculator (via IndicatorRegistry, defaults per type)
- Wrap the output in the typed result envelope

Architecture:
    MarketDataCacheService → candle range
    IndicatorRegistry      → indicator instance
    BaseIndicator          → IndicatorResult
"""

import logging
from typing import Any

from config.settings import get_settings
from core.interfaces.indicators import BaseIndicator
from core.models.indicators import IndicatorResult
from core.models.market_data import Candle
from core.validators.market_data import CandleSeriesValidator
from domain.indicators.registry import IndicatorRegistry
from services.cache_service.market_data_cache import MarketDataCacheService
from services.indicator_service.indicator_loader import IndicatorLoader

logger = logging.getLogger(__name__)


class IndicatorCalculationService:
    """Calculate technical indicators for candle series"""

    def __init__(
        self,
        cache: MarketDataCacheService | None = None,
        presets: dict[str, BaseIndicator] | None = None,
    ):
        self.cache = cache
        self.settings = get_settings()
        self.validator = CandleSeriesValidator()
        self._presets = presets

    @property
    def presets(self) -> dict[str, BaseIndicator]:
        """Configured indicator presets (loaded on first use)"""
        if self._presets is None:
            self._presets = IndicatorLoader.load_from_settings()
        return self._presets

    def calculate_indicator(
        self,
        indicator_type: str,
        candles: list[Candle],
        parameters: dict[str, Any] | None = None,
        name: str | None = None,
    ) -> IndicatorResult:
        """
        Calculate one indicator - main entry point

        Args:
            indicator_type: sma, ema, rsi, macd, bollinger, volume_ma (case-insensitive)
            candles: Candles ordered by timestamp ASC
            parameters: Loose parameter map; missing keys take per-type defaults
            name: Display name for the result (default: indicator's own name)

        Returns:
            Typed envelope. Empty values mean "not enough history".

        Raises:
            UnsupportedIndicatorTypeError: Unknown indicator type
            ValueError: Out-of-range parameters

        Example:
            >>> service = IndicatorCalculationService()
            >>> result = service.calculate_indicator("sma", candles, {"period": 5}, "SMA 5")
            >>> [v.value for v in result.values]
            [14.0, 16.0, 18.0, 20.0, 22.0, 24.0]
        """
        indicator = IndicatorRegistry.create(indicator_type, parameters, name=name)
        result = indicator.get_result(candles)

        if not indicator.has_enough_data(candles):
            logger.debug(
                f"Insufficient candles for {indicator}: "
                f"{len(candles)}/{indicator.min_candles}"
            )

        return result

    async def calculate_for_symbol(
        self,
        symbol: str,
        resolution: str,
        from_ts: int,
        to_ts: int,
        indicator_type: str,
        parameters: dict[str, Any] | None = None,
        name: str | None = None,
    ) -> IndicatorResult:
        """
        Fetch candles through the cache and calculate one indicator

        Steps:
        1. Read candle range (cache → repository fallback)
        2. Keep the most recent INDICATOR_MAX_CANDLES
        3. Validate series (log only)
        4. Dispatch

        Raises:
            RuntimeError: If the service was built without a cache
            UnsupportedIndicatorTypeError: Unknown indicator type
        """
        candles = await self._load_candles(symbol, resolution, from_ts, to_ts)
        return self.calculate_indicator(indicator_type, candles, parameters, name)

    def calculate_configured(self, candles: list[Candle]) -> dict[str, IndicatorResult]:
        """
        Calculate every configured preset

        A failing preset is logged and left out; the rest still calculate.

        Returns:
            {"SMA_20": SeriesIndicatorResult(...), "MACD": MACDIndicatorResult(...), ...}
        """
        results = {}

        for name, indicator in self.presets.items():
            try:
                results[name] = indicator.get_result(candles, name=name)
            except Exception as e:
                logger.error(f"❌ Error calculating {name}: {e}", exc_info=True)

        return results

    async def calculate_configured_for_symbol(
        self, symbol: str, resolution: str, from_ts: int, to_ts: int
    ) -> dict[str, IndicatorResult]:
        """Fetch candles through the cache and calculate every configured preset"""
        candles = await self._load_candles(symbol, resolution, from_ts, to_ts)
        return self.calculate_configured(candles)

    async def _load_candles(
        self, symbol: str, resolution: str, from_ts: int, to_ts: int
    ) -> list[Candle]:
        if self.cache is None:
            raise RuntimeError("IndicatorCalculationService has no market data cache")

        response = await self.cache.get_candle_data(symbol, resolution, from_ts, to_ts)
        if response is None:
            logger.warning(f"No candles found for {symbol}/{resolution} [{from_ts}, {to_ts}]")
            return []

        candles = response.data[-self.settings.INDICATOR_MAX_CANDLES :]

        is_valid, error = self.validator.validate_series(candles)
        if not is_valid:
            logger.warning(f"⚠️ Suspicious candle series for {symbol}/{resolution}: {error}")

        return candles
