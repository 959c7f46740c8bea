"""
Indicator registry for managing and creating indicators

Factory pattern for indicator creation from loosely validated parameter maps
"""

import math
from typing import Any, NamedTuple

from core.exceptions import UnsupportedIndicatorTypeError
from core.interfaces.indicators import BaseIndicator
from domain.indicators.momentum import MACD, RSI
from domain.indicators.moving_averages import EMA, SMA, VolumeMA
from domain.indicators.volatility import BollingerBands


class ParamSpec(NamedTuple):
    """Maps a wire parameter (camelCase) to a constructor argument"""

    key: str
    argument: str
    default: int | float


class IndicatorRegistry:
    """
    Registry for indicator creation

    Provides factory methods for creating indicators with per-type defaults
    """

    # Registry of available indicators
    _indicators: dict[str, type[BaseIndicator]] = {
        "sma": SMA,
        "ema": EMA,
        "rsi": RSI,
        "macd": MACD,
        "bollinger": BollingerBands,
        "volume_ma": VolumeMA,
    }

    # Defaults applied when a parameter is absent, null, zero or empty
    _defaults: dict[str, tuple[ParamSpec, ...]] = {
        "sma": (ParamSpec("period", "period", 20),),
        "ema": (ParamSpec("period", "period", 20),),
        "rsi": (ParamSpec("period", "period", 14),),
        "macd": (
            ParamSpec("fastPeriod", "fast_period", 12),
            ParamSpec("slowPeriod", "slow_period", 26),
            ParamSpec("signalPeriod", "signal_period", 9),
        ),
        "bollinger": (
            ParamSpec("period", "period", 20),
            ParamSpec("standardDeviations", "std_dev_multiplier", 2.1),
        ),
        "volume_ma": (ParamSpec("period", "period", 20),),
    }

    @classmethod
    def create(
        cls,
        indicator_type: str,
        parameters: dict[str, Any] | None = None,
        name: str | None = None,
    ) -> BaseIndicator:
        """
        Create indicator by type

        Args:
            indicator_type: Indicator type (sma, ema, rsi, macd, bollinger, volume_ma)
            parameters: Free-form parameter map. Unknown keys are ignored,
                missing ones take the type's default. camelCase or snake_case.
            name: Optional custom name for the indicator

        Returns:
            Indicator instance

        Raises:
            UnsupportedIndicatorTypeError: If indicator type is not registered
            ValueError: If a parameter is out of range or not numeric

        Example:
            >>> sma = IndicatorRegistry.create("sma", {"period": 50}, name="SMA_50")
            >>> macd = IndicatorRegistry.create("MACD", {"fastPeriod": 8})
            >>> macd.params
            {'fastPeriod': 8, 'slowPeriod': 26, 'signalPeriod': 9}
        """
        key = indicator_type.lower()
        indicator_class = cls._indicators.get(key)
        if not indicator_class:
            raise UnsupportedIndicatorTypeError(indicator_type, cls.list_indicators())

        kwargs = cls.resolve_parameters(key, parameters or {})
        return indicator_class(**kwargs, name=name)

    @classmethod
    def resolve_parameters(cls, indicator_type: str, parameters: dict[str, Any]) -> dict[str, Any]:
        """
        Build constructor kwargs from a loose parameter map

        Values are coerced to the default's type ("20" -> 20).
        """
        kwargs: dict[str, Any] = {}

        for param in cls._defaults.get(indicator_type, ()):
            raw = parameters.get(param.key)
            if raw is None:
                raw = parameters.get(param.argument)

            if raw is None or raw == "" or raw == 0:
                kwargs[param.argument] = param.default
                continue

            kwargs[param.argument] = cls._coerce(indicator_type, param, raw)

        return kwargs

    @staticmethod
    def _coerce(indicator_type: str, param: ParamSpec, raw: Any) -> int | float:
        """Convert raw to the default's type; integer params reject fractions and bools"""
        if isinstance(raw, bool):
            raise ValueError(f"Invalid {param.key} for {indicator_type}: {raw!r}")

        try:
            number = float(raw)
        except (TypeError, ValueError) as e:
            raise ValueError(f"Invalid {param.key} for {indicator_type}: {raw!r}") from e

        if not math.isfinite(number):
            raise ValueError(f"Invalid {param.key} for {indicator_type}: {raw!r}")

        if isinstance(param.default, int):
            if not number.is_integer():
                raise ValueError(
                    f"Invalid {param.key} for {indicator_type}: {raw!r} is not an integer"
                )
            return int(number)

        return number

    @classmethod
    def register(
        cls,
        name: str,
        indicator_class: type[BaseIndicator],
        defaults: tuple[ParamSpec, ...] = (),
    ) -> None:
        """
        Register a new indicator

        Args:
            name: Indicator type name
            indicator_class: Indicator class (must inherit from BaseIndicator)
            defaults: Parameter specs with defaults

        Example:
            >>> IndicatorRegistry.register("wma", WMA, (ParamSpec("period", "period", 20),))
        """
        cls._indicators[name.lower()] = indicator_class
        cls._defaults[name.lower()] = defaults

    @classmethod
    def is_supported(cls, indicator_type: str) -> bool:
        return indicator_type.lower() in cls._indicators

    @classmethod
    def list_indicators(cls) -> list[str]:
        """
        List all available indicators

        Example:
            >>> IndicatorRegistry.list_indicators()
            ['bollinger', 'ema', 'macd', 'rsi', 'sma', 'volume_ma']
        """
        return sorted(cls._indicators.keys())
