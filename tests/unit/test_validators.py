"""
Unit tests for candle series validation
"""

import pytest

from core.models.market_data import Candle
from core.validators.market_data import CandleSeriesValidator


def candle(timestamp: int, open_=100.0, high=105.0, low=95.0, close=101.0, volume=10) -> Candle:
    return Candle(timestamp=timestamp, open=open_, high=high, low=low, close=close, volume=volume)


@pytest.mark.unit
class TestCandleSeriesValidator:
    """Test OHLC and ordering checks"""

    def test_valid_series(self):
        validator = CandleSeriesValidator()

        assert validator.validate_series([candle(1), candle(2), candle(3)]) == (True, None)

    def test_empty_series_is_valid(self):
        assert CandleSeriesValidator().validate_series([]) == (True, None)

    def test_non_positive_price(self):
        is_valid, error = CandleSeriesValidator().validate_candle(candle(1, low=0.0))

        assert not is_valid
        assert "Non-positive price" in error

    def test_negative_volume(self):
        is_valid, error = CandleSeriesValidator().validate_candle(candle(1, volume=-5))

        assert not is_valid
        assert "Negative volume" in error

    def test_low_above_high(self):
        is_valid, error = CandleSeriesValidator().validate_candle(
            candle(1, open_=100, high=99, low=101, close=100)
        )

        assert not is_valid
        assert "Low above high" in error

    def test_close_outside_range(self):
        is_valid, error = CandleSeriesValidator().validate_candle(candle(1, close=110.0))

        assert not is_valid
        assert "outside high-low range" in error

    def test_duplicate_timestamp(self):
        is_valid, error = CandleSeriesValidator().validate_series([candle(1), candle(1)])

        assert not is_valid
        assert "Duplicate timestamp" in error

    def test_descending_timestamps(self):
        is_valid, error = CandleSeriesValidator().validate_series([candle(2), candle(1)])

        assert not is_valid
        assert "not ascending" in error

    def test_stats(self):
        validator = CandleSeriesValidator()
        validator.validate_series([candle(1)])
        validator.validate_series([candle(2), candle(1)])

        assert validator.get_stats() == {"series_checked": 2, "invalid_count": 1}

        validator.reset_stats()
        assert validator.get_stats() == {"series_checked": 0, "invalid_count": 0}
