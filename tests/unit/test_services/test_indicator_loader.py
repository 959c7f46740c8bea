"""
Unit tests for IndicatorLoader
"""

import pytest

from domain.indicators.momentum import MACD
from domain.indicators.moving_averages import SMA
from services.indicator_service.indicator_loader import IndicatorLoader


@pytest.mark.unit
class TestIndicatorLoader:
    """Test preset loading"""

    def test_load_from_settings(self):
        indicators = IndicatorLoader.load_from_settings()

        assert list(indicators) == ["SMA_20", "EMA_12", "RSI_14", "MACD", "BB_20"]
        assert isinstance(indicators["MACD"], MACD)
        assert indicators["BB_20"].params == {"period": 20, "standardDeviations": 2.1}

    def test_preset_name_used(self):
        indicators = IndicatorLoader.load([{"name": "Fast", "type": "sma", "params": {"period": 5}}])

        assert isinstance(indicators["Fast"], SMA)
        assert indicators["Fast"].name == "Fast"

    def test_invalid_presets_skipped(self):
        indicators = IndicatorLoader.load(
            [
                {"name": "Bad", "type": "bogus"},
                {"name": "Negative", "type": "rsi", "params": {"period": -1}},
                {"type": "sma"},
                {"name": "Good", "type": "ema"},
            ]
        )

        assert list(indicators) == ["Good"]
        assert indicators["Good"].period == 20
