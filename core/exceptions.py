"""
Core exceptions

Insufficient data is not an error (calculators return empty series), so the
only hard failure raised by the indicator core lives here.
"""


class UnsupportedIndicatorTypeError(ValueError):
    """Raised when an indicator type has no registered calculator"""

    def __init__(self, indicator_type: str, available: list[str] | None = None):
        self.indicator_type = indicator_type
        self.available = available or []
        message = f"Unsupported indicator type: {indicator_type}"
        if self.available:
            message += f". Available: {', '.join(self.available)}"
        super().__init__(message)
