"""
Application Settings - Load from YAML configs + .env secrets

Design Philosophy:
- Service configs (hosts, ports, TTLs, indicator presets) → YAML files (versioned in git)
- Secrets and deployment switches (passwords, backend choice) → .env file (gitignored)

Uses Pydantic for validation and type safety
"""

from datetime import timedelta
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.utils.config import get_nested, load_yaml_safe

CONFIG_DIR = Path(__file__).parent / "providers"


class Settings(BaseSettings):
    """
    Application settings

    Architecture:
    - Infrastructure configs → config/providers/*.yaml
    - Secrets → .env (gitignored)

    Usage:
        from config.settings import get_settings

        settings = get_settings()
        print(settings.CACHE_QUOTE_TTL_SECONDS)  # From cache.yaml
        print(settings.CLICKHOUSE_PASSWORD)  # From .env
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",  # Ignore extra fields in .env
    )

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        # Load YAML configs from files (cached at class level)
        if not hasattr(Settings, "_yaml_loaded"):
            Settings._cache_config = load_yaml_safe(CONFIG_DIR / "cache.yaml")
            Settings._database_config = load_yaml_safe(CONFIG_DIR / "databases.yaml")
            Settings._indicators_config = load_yaml_safe(CONFIG_DIR / "indicators.yaml")
            Settings._yaml_loaded = True

    # ============================================
    # ENVIRONMENT (.env only)
    # ============================================
    ENVIRONMENT: str = Field(default="local", description="Environment: local, dev, staging, prod")
    LOG_LEVEL: str = Field(default="INFO", description="Logging level")
    LOG_DIR: str = Field(default="data/logs", description="Directory for error log files")

    # ============================================
    # CACHE (backend from .env, the rest from YAML)
    # ============================================
    CACHE_BACKEND: str = Field(
        default="memory",
        description="Cache backend: memory (in-process) or redis (shared)",
    )

    @property
    def CACHE_KEY_PREFIX(self) -> str:
        """Namespace for every cache key from cache.yaml"""
        return get_nested(self._cache_config, "key_prefix", default="market:")

    @property
    def CACHE_WRITE_THROUGH(self) -> bool:
        """Whether set_symbol/set_candle_data also persist to the repository"""
        return get_nested(self._cache_config, "write_through", default=True)

    @property
    def CACHE_SYMBOL_TTL_SECONDS(self) -> int:
        """Symbol metadata TTL (slowest to expire)"""
        return get_nested(self._cache_config, "ttl_seconds", "symbol", default=86400)

    @property
    def CACHE_QUOTE_TTL_SECONDS(self) -> int:
        """Quote TTL (fastest to expire)"""
        return get_nested(self._cache_config, "ttl_seconds", "quote", default=30)

    @property
    def CACHE_CANDLE_TTL_SECONDS(self) -> int:
        """Candle range TTL"""
        return get_nested(self._cache_config, "ttl_seconds", "candles", default=300)

    @property
    def symbol_ttl(self) -> timedelta:
        return timedelta(seconds=self.CACHE_SYMBOL_TTL_SECONDS)

    @property
    def quote_ttl(self) -> timedelta:
        return timedelta(seconds=self.CACHE_QUOTE_TTL_SECONDS)

    @property
    def candle_ttl(self) -> timedelta:
        return timedelta(seconds=self.CACHE_CANDLE_TTL_SECONDS)

    # ============================================
    # REDIS (from YAML + .env)
    # ============================================
    @property
    def REDIS_HOST(self) -> str:
        """Redis host from databases.yaml"""
        return get_nested(self._database_config, "redis", "host", default="redis")

    @property
    def REDIS_PORT(self) -> int:
        """Redis port from databases.yaml"""
        return get_nested(self._database_config, "redis", "port", default=6379)

    @property
    def REDIS_DB(self) -> int:
        """Redis database from databases.yaml"""
        return get_nested(self._database_config, "redis", "db", default=0)

    # Redis password from .env (optional secret)
    REDIS_PASSWORD: str | None = Field(default=None)

    @property
    def redis_url(self) -> str:
        """Redis connection URL"""
        if self.REDIS_PASSWORD:
            return f"redis://:{self.REDIS_PASSWORD}@{self.REDIS_HOST}:{self.REDIS_PORT}/{self.REDIS_DB}"
        return f"redis://{self.REDIS_HOST}:{self.REDIS_PORT}/{self.REDIS_DB}"

    # ============================================
    # CLICKHOUSE (from YAML + .env)
    # ============================================
    @property
    def CLICKHOUSE_HOST(self) -> str:
        """ClickHouse host from databases.yaml"""
        return get_nested(self._database_config, "clickhouse", "host", default="clickhouse")

    @property
    def CLICKHOUSE_PORT(self) -> int:
        """ClickHouse native port from databases.yaml"""
        return get_nested(self._database_config, "clickhouse", "port", default=9000)

    @property
    def CLICKHOUSE_DB(self) -> str:
        """ClickHouse database from databases.yaml"""
        return get_nested(self._database_config, "clickhouse", "database", default="trading")

    @property
    def CLICKHOUSE_USER(self) -> str:
        """ClickHouse user from databases.yaml"""
        return get_nested(self._database_config, "clickhouse", "user", default="trading_user")

    # ClickHouse password from .env (secret)
    CLICKHOUSE_PASSWORD: str = Field(default="trading_pass")

    # ============================================
    # INDICATORS (from YAML)
    # ============================================
    @property
    def INDICATORS(self) -> list:
        """Indicator presets from indicators.yaml"""
        return self._indicators_config.get("indicators", [])

    @property
    def INDICATOR_MAX_CANDLES(self) -> int:
        """Most recent candles fed to a calculation"""
        return get_nested(self._indicators_config, "settings", "max_candles", default=1000)

    @property
    def QUOTE_RESOLUTION(self) -> str:
        """Resolution whose last two candles derive a quote"""
        return get_nested(self._indicators_config, "settings", "quote_resolution", default="D")


# Singleton pattern
_settings_instance: Settings | None = None


def get_settings() -> Settings:
    """
    Get application settings (singleton)

    Example:
        >>> settings = get_settings()
        >>> print(settings.CACHE_QUOTE_TTL_SECONDS)
        30
    """
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance


def reset_settings() -> None:
    """Drop the singleton and cached YAML so the next get_settings() reloads"""
    global _settings_instance
    _settings_instance = None
    if hasattr(Settings, "_yaml_loaded"):
        delattr(Settings, "_yaml_loaded")
