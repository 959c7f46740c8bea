"""
Indicator Loader - Load indicator presets from config

Responsibility: Bridge between config layer and domain layer
- Load preset configs from settings (config layer)
- Use IndicatorRegistry to create instances (domain layer)
- Return ready-to-use indicator instances keyed by preset name
"""

import logging

from config.settings import get_settings
from core.interfaces.indicators import BaseIndicator
from domain.indicators.registry import IndicatorRegistry

logger = logging.getLogger(__name__)


class IndicatorLoader:
    """Load indicators from YAML config using registry"""

    @staticmethod
    def load_from_settings() -> dict[str, BaseIndicator]:
        """
        Load indicators from settings.INDICATORS

        Invalid presets (unknown type, bad params) are logged and skipped.

        Returns:
            Dict of indicator instances: {"SMA_20": SMA(period=20), "RSI_14": RSI(period=14), ...}
        """
        return IndicatorLoader.load(get_settings().INDICATORS)

    @staticmethod
    def load(presets: list[dict]) -> dict[str, BaseIndicator]:
        """
        Build indicators from preset dicts

        Args:
            presets: [{"name": "SMA_20", "type": "sma", "params": {"period": 20}}, ...]
        """
        indicators = {}

        for config in presets:
            name = config.get("name")
            indicator_type = config.get("type")
            if not name or not indicator_type:
                logger.warning(f"  ✗ Skipping preset without name/type: {config}")
                continue

            try:
                indicators[name] = IndicatorRegistry.create(
                    indicator_type, config.get("params") or {}, name=name
                )
                logger.debug(f"  ✓ Loaded {name}: {indicators[name]}")

            except ValueError as e:
                logger.warning(f"  ✗ Skipping {name}: {e}")

        logger.info(f"✓ Loaded {len(indicators)} indicators: {list(indicators.keys())}")
        return indicators
