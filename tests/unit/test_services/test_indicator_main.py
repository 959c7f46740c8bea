"""
Unit tests for the indicator service entry point

Cache service and logging setup are patched at the module boundary.
"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from core.models.market_data import CandleResponse
from services.indicator_service import main as entry
from tests.unit.indicators.test_moving_averages import create_series


@pytest.fixture
def mock_cache_service():
    """Patched create_cache_service returning a mocked MarketDataCacheService"""
    with patch("services.indicator_service.main.create_cache_service") as factory:
        service = MagicMock()
        service.connect = AsyncMock()
        service.close = AsyncMock()
        service.get_candle_data = AsyncMock(
            return_value=CandleResponse(
                symbol="AAPL",
                resolution="D",
                data=create_series([100 + (i % 7) for i in range(60)]),
            )
        )
        factory.return_value = service
        yield service


@pytest.mark.unit
class TestIndicatorMain:
    """Test CLI wiring"""

    def test_parse_args(self):
        args = entry.parse_args(["AAPL", "D", "100", "200"])

        assert (args.symbol, args.resolution, args.from_ts, args.to_ts) == ("AAPL", "D", 100, 200)

    def test_parse_args_rejects_non_integer_range(self):
        with pytest.raises(SystemExit):
            entry.parse_args(["AAPL", "D", "yesterday", "200"])

    @pytest.mark.asyncio
    async def test_run_calculates_presets_and_closes(self, mock_cache_service):
        results = await entry.run("AAPL", "D", 100, 200)

        mock_cache_service.connect.assert_awaited_once()
        mock_cache_service.get_candle_data.assert_awaited_once_with("AAPL", "D", 100, 200)
        mock_cache_service.close.assert_awaited_once()
        assert set(results) == {"SMA_20", "EMA_12", "RSI_14", "MACD", "BB_20"}

    @pytest.mark.asyncio
    async def test_run_closes_on_failure(self, mock_cache_service):
        mock_cache_service.get_candle_data.side_effect = ConnectionError("store down")

        with pytest.raises(ConnectionError):
            await entry.run("AAPL", "D", 100, 200)

        mock_cache_service.close.assert_awaited_once()

    @patch("services.indicator_service.main.configure_logging")
    def test_main_configures_logging(self, mock_logging, mock_cache_service):
        entry.main(["AAPL", "D", "100", "200"])

        mock_logging.assert_called_once_with("indicator_service")
        mock_cache_service.close.assert_awaited_once()
