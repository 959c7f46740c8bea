"""
Unit tests for factory pattern

Tests that correct client implementations are created based on config
"""

from unittest.mock import patch

import pytest

from factory.client_factory import (
    create_cache_client,
    create_cache_service,
    create_market_data_repository,
)
from providers.memory.memory_cache import InMemoryCacheClient
from providers.opensource.clickhouse import ClickHouseMarketDataRepository
from providers.opensource.redis_client import RedisClient
from services.cache_service.market_data_cache import MarketDataCacheService


@pytest.mark.unit
class TestCacheClientFactory:
    """Test cache client factory"""

    @patch("factory.client_factory.get_settings")
    def test_memory_backend(self, mock_settings):
        """Test that memory config creates InMemoryCacheClient"""
        mock_settings.return_value.CACHE_BACKEND = "memory"

        assert isinstance(create_cache_client(), InMemoryCacheClient)

    @patch("factory.client_factory.get_settings")
    def test_redis_backend(self, mock_settings):
        """Test that redis config creates RedisClient (case-insensitive)"""
        mock_settings.return_value.CACHE_BACKEND = "Redis"

        assert isinstance(create_cache_client(), RedisClient)

    @patch("factory.client_factory.get_settings")
    def test_unsupported_backend_raises_error(self, mock_settings):
        """Test that unsupported backend raises ValueError"""
        mock_settings.return_value.CACHE_BACKEND = "memcached"

        with pytest.raises(ValueError, match="Unsupported cache backend"):
            create_cache_client()


@pytest.mark.unit
class TestRepositoryFactory:
    def test_create_clickhouse_repository(self):
        """Test that factory creates ClickHouseMarketDataRepository (not connected)"""
        repository = create_market_data_repository()

        assert isinstance(repository, ClickHouseMarketDataRepository)
        assert repository.client is None


@pytest.mark.unit
class TestCacheServiceFactory:
    def test_wires_default_backend(self):
        service = create_cache_service()

        assert isinstance(service, MarketDataCacheService)
        assert isinstance(service.cache, InMemoryCacheClient)
        assert isinstance(service.repository, ClickHouseMarketDataRepository)

    def test_new_instance_per_call(self):
        assert create_cache_service() is not create_cache_service()
