"""Factory package - Dependency injection for backend-agnostic code"""

from .client_factory import (
    create_cache_client,
    create_cache_service,
    create_market_data_repository,
)

__all__ = [
    "create_cache_client",
    "create_market_data_repository",
    "create_cache_service",
]
