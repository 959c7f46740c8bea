"""
Unit tests for settings configuration

Tests YAML config loading for cache, database and indicator settings.
"""

import logging
from datetime import timedelta
from unittest.mock import patch

import pytest

from config.logging_config import configure_logging
from config.settings import Settings, get_settings, reset_settings
from core.utils.config import get_nested, load_yaml, load_yaml_safe


@pytest.mark.unit
class TestCacheSettings:
    """Test cache.yaml values"""

    def test_key_prefix(self):
        assert get_settings().CACHE_KEY_PREFIX == "market:"

    def test_ttl_seconds(self):
        settings = get_settings()

        assert settings.CACHE_SYMBOL_TTL_SECONDS == 86400
        assert settings.CACHE_QUOTE_TTL_SECONDS == 30
        assert settings.CACHE_CANDLE_TTL_SECONDS == 300

    def test_ttl_timedeltas(self):
        settings = get_settings()

        assert settings.symbol_ttl == timedelta(hours=24)
        assert settings.quote_ttl == timedelta(seconds=30)
        assert settings.candle_ttl == timedelta(minutes=5)

    def test_write_through_enabled(self):
        assert get_settings().CACHE_WRITE_THROUGH is True


@pytest.mark.unit
class TestDatabaseSettings:
    """Test databases.yaml values"""

    def test_redis_url_without_password(self):
        settings = Settings(REDIS_PASSWORD=None)

        assert settings.redis_url == "redis://redis:6379/0"

    def test_redis_url_with_password(self):
        settings = Settings(REDIS_PASSWORD="secret")

        assert settings.redis_url == "redis://:secret@redis:6379/0"

    def test_clickhouse(self):
        settings = get_settings()

        assert settings.CLICKHOUSE_HOST == "clickhouse"
        assert settings.CLICKHOUSE_PORT == 9000
        assert settings.CLICKHOUSE_DB == "trading"


@pytest.mark.unit
class TestIndicatorSettings:
    """Test indicators.yaml values"""

    def test_presets(self):
        presets = get_settings().INDICATORS

        assert [p["name"] for p in presets] == ["SMA_20", "EMA_12", "RSI_14", "MACD", "BB_20"]
        assert presets[3]["params"]["fastPeriod"] == 12

    def test_indicator_settings(self):
        settings = get_settings()

        assert settings.INDICATOR_MAX_CANDLES == 1000
        assert settings.QUOTE_RESOLUTION == "D"


@pytest.mark.unit
class TestSettingsSingleton:
    def test_singleton(self):
        assert get_settings() is get_settings()

    def test_reset_settings(self):
        first = get_settings()

        reset_settings()

        assert get_settings() is not first


@pytest.mark.unit
class TestConfigUtils:
    def test_load_yaml(self, tmp_path):
        path = tmp_path / "cache.yaml"
        path.write_text("ttl_seconds:\n  quote: 15\n")

        assert load_yaml(path) == {"ttl_seconds": {"quote": 15}}

    def test_load_empty_yaml(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")

        assert load_yaml(path) == {}

    def test_load_yaml_safe_missing_file(self, tmp_path):
        assert load_yaml_safe(tmp_path / "missing.yaml") == {}

    def test_get_nested(self):
        config = {"redis": {"host": "localhost"}}

        assert get_nested(config, "redis", "host") == "localhost"
        assert get_nested(config, "redis", "port", default=6379) == 6379
        assert get_nested(config, "kafka", "host", default=None) is None


@pytest.mark.unit
class TestConfigureLogging:
    def test_creates_error_log(self, tmp_path):
        log_dir = tmp_path / "logs"

        configure_logging("indicators", log_dir=str(log_dir))
        logging.getLogger("tests").error("✗ boom")

        for handler in logging.getLogger().handlers:
            handler.flush()
        assert "boom" in (log_dir / "indicators_errors.log").read_text()

    @patch("config.logging_config.get_settings")
    def test_level_from_settings(self, mock_settings, tmp_path):
        mock_settings.return_value.LOG_LEVEL = "debug"

        configure_logging(log_dir=str(tmp_path))

        assert logging.getLogger().level == logging.DEBUG
