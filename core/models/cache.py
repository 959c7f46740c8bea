"""Cache bookkeeping models"""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CacheEntry(BaseModel, Generic[T]):
    """
    Cached value with absolute expiry

    An entry whose expires_at <= now is treated as absent by every read.
    """

    value: T
    expires_at: float = Field(description="Expiry on the cache clock (seconds)")

    def is_expired(self, now: float) -> bool:
        return self.expires_at <= now


class CacheStats(BaseModel):
    """
    Live entry counts per cached kind

    Serialises with camelCase keys: symbolsCount, quotesCount,
    candleDataCount, memoryUsage.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    symbols_count: int = 0
    quotes_count: int = 0
    candle_data_count: int = 0
    memory_usage: int | None = Field(default=None, description="Approximate bytes used")

    def to_dict(self) -> dict:
        """Plain dict with camelCase keys for JSON responses"""
        return self.model_dump(by_alias=True)
