"""
Unit tests for Pydantic models
"""

import pytest
from pydantic import ValidationError

from core.models.cache import CacheEntry, CacheStats
from core.models.indicators import (
    BollingerIndicatorResult,
    IndicatorValue,
    MACDIndicatorResult,
    SeriesIndicatorResult,
    indicator_result_adapter,
)
from core.models.market_data import Candle, CandleResponse, Quote


@pytest.mark.unit
class TestCandle:
    def test_candle_is_immutable(self):
        candle = Candle(timestamp=1, open=1, high=2, low=0.5, close=1.5, volume=10)

        with pytest.raises(ValidationError):
            candle.close = 3.0

    def test_volume_defaults_to_zero(self):
        assert Candle(timestamp=1, open=1, high=1, low=1, close=1).volume == 0

    @pytest.mark.parametrize("bad", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_prices_rejected(self, bad):
        with pytest.raises(ValidationError):
            Candle(timestamp=1, open=1, high=2, low=0.5, close=bad)

    def test_non_finite_string_rejected(self):
        with pytest.raises(ValidationError):
            Candle.model_validate_json(
                '{"timestamp": 1, "open": "NaN", "high": 2, "low": 1, "close": 1}'
            )


@pytest.mark.unit
class TestQuote:
    def test_from_candles(self):
        previous = Candle(timestamp=100, open=118, high=121, low=117, close=120.0)
        latest = Candle(timestamp=200, open=120, high=123, low=119, close=122.0)

        quote = Quote.from_candles("AAPL", latest, previous)

        assert quote.price == 122.0
        assert quote.change == pytest.approx(2.0)
        assert quote.change_percent == pytest.approx(1.6667, rel=1e-3)
        assert (quote.high, quote.low, quote.open) == (123.0, 119.0, 120.0)
        assert quote.timestamp == 200

    def test_from_single_candle(self):
        latest = Candle(timestamp=200, open=120, high=123, low=119, close=122.0)

        quote = Quote.from_candles("AAPL", latest)

        assert quote.change == 0.0
        assert quote.change_percent == 0.0


@pytest.mark.unit
class TestCandleResponse:
    def test_json_round_trip(self):
        response = CandleResponse(
            symbol="AAPL",
            resolution="D",
            data=[Candle(timestamp=1, open=1, high=2, low=0.5, close=1.5, volume=10)],
        )

        assert CandleResponse.model_validate_json(response.model_dump_json()) == response

    def test_status_restricted(self):
        with pytest.raises(ValidationError):
            CandleResponse(symbol="AAPL", resolution="D", status="error")


@pytest.mark.unit
class TestIndicatorResult:
    """Envelope is a tagged union on type"""

    def test_series_variant(self):
        result = indicator_result_adapter.validate_python(
            {"type": "rsi", "name": "RSI_14", "values": [{"timestamp": 1, "value": 55.0}]}
        )

        assert isinstance(result, SeriesIndicatorResult)
        assert result.values == [IndicatorValue(timestamp=1, value=55.0)]

    def test_macd_variant(self):
        result = indicator_result_adapter.validate_python(
            {"type": "macd", "name": "MACD", "values": [], "signal": [], "histogram": []}
        )

        assert isinstance(result, MACDIndicatorResult)

    def test_bollinger_variant(self):
        result = indicator_result_adapter.validate_python(
            {"type": "bollinger", "name": "BB", "values": {"middle": [{"timestamp": 1, "value": 2.0}]}}
        )

        assert isinstance(result, BollingerIndicatorResult)
        assert len(result.values) == 1

    def test_unknown_type_rejected(self):
        with pytest.raises(ValidationError):
            indicator_result_adapter.validate_python({"type": "bogus", "name": "x"})


@pytest.mark.unit
class TestCacheModels:
    def test_entry_expired_at_boundary(self):
        entry = CacheEntry[str](value="v", expires_at=10.0)

        assert not entry.is_expired(9.999)
        assert entry.is_expired(10.0)

    def test_stats_camel_case(self):
        stats = CacheStats(symbols_count=1, quotes_count=2, candle_data_count=3, memory_usage=4)

        assert stats.to_dict() == {
            "symbolsCount": 1,
            "quotesCount": 2,
            "candleDataCount": 3,
            "memoryUsage": 4,
        }
