"""
Data quality validator for candle series

Validates:
- Price sanity checks
- Timestamp ordering (ascending, no duplicates)
- OHLC integrity
"""

import logging

from core.models.market_data import Candle

logger = logging.getLogger(__name__)


class CandleSeriesValidator:
    """
    Candle series quality validation

    Calculators assume an ascending, duplicate-free series. The validator
    reports violations; callers decide whether to reject or only log.
    """

    def __init__(self):
        self.invalid_count = 0
        self.series_checked = 0

    def validate_candle(self, candle: Candle) -> tuple[bool, str | None]:
        """
        Validate one candle

        Checks:
        1. Prices > 0
        2. Volume >= 0
        3. low <= open, close <= high

        Returns:
            (is_valid, error_message)
        """
        if min(candle.open, candle.high, candle.low, candle.close) <= 0:
            return False, f"Non-positive price at {candle.timestamp}"

        if candle.volume < 0:
            return False, f"Negative volume at {candle.timestamp}: {candle.volume}"

        if candle.low > candle.high:
            return False, f"Low above high at {candle.timestamp}: {candle.low} > {candle.high}"

        if not (candle.low <= candle.open <= candle.high and candle.low <= candle.close <= candle.high):
            return False, f"Open/close outside high-low range at {candle.timestamp}"

        return True, None

    def validate_series(self, candles: list[Candle]) -> tuple[bool, str | None]:
        """
        Validate a candle series

        Checks every candle, then timestamps strictly ascending.

        Returns:
            (is_valid, error_message) for the first problem found

        Example:
            >>> validator = CandleSeriesValidator()
            >>> is_valid, error = validator.validate_series(candles)
            >>> if not is_valid:
            ...     logger.warning(f"Suspicious series: {error}")
        """
        self.series_checked += 1

        for candle in candles:
            is_valid, error = self.validate_candle(candle)
            if not is_valid:
                self.invalid_count += 1
                return False, error

        for i in range(len(candles) - 1):
            current, following = candles[i].timestamp, candles[i + 1].timestamp
            if following == current:
                self.invalid_count += 1
                return False, f"Duplicate timestamp at index {i + 1}: {following}"
            if following < current:
                self.invalid_count += 1
                return False, (
                    f"Timestamps not ascending at index {i + 1}: {following} < {current}"
                )

        return True, None

    def get_stats(self) -> dict[str, int]:
        """Validation statistics"""
        return {
            "series_checked": self.series_checked,
            "invalid_count": self.invalid_count,
        }

    def reset_stats(self) -> None:
        self.invalid_count = 0
        self.series_checked = 0
