"""
Volatility indicators

Implementations:
- BollingerBands: SMA ± multiples of rolling population standard deviation
"""

from numpy.lib.stride_tricks import sliding_window_view

from core.interfaces.indicators import BaseIndicator
from core.models.indicators import BollingerBands as BollingerBandsSeries
from core.models.indicators import BollingerIndicatorResult
from core.models.market_data import Candle


class BollingerBands(BaseIndicator):
    """
    Bollinger Bands with inner and outer envelopes

    Formula:
        middle = SMA(n)
        σ      = population std dev of the same window
        upper2 = middle + k × σ        lower2 = middle − k × σ
        upper1 = middle + (k/2) × σ    lower1 = middle − (k/2) × σ

    Invariant:
        upper2 > upper1 > middle > lower1 > lower2 whenever σ > 0

    Example:
        >>> bands = BollingerBands(period=20, std_dev_multiplier=2.1).calculate(candles)
        >>> bands.upper2[-1].value > bands.middle[-1].value
        True
    """

    indicator_type = "bollinger"

    def __init__(
        self,
        period: int = 20,
        std_dev_multiplier: float = 2.1,
        name: str | None = None,
    ):
        """
        Initialize Bollinger Bands

        Args:
            period: SMA / std dev window (default: 20)
            std_dev_multiplier: Outer band width in σ (default: 2.1)
            name: Custom name (default: "BollingerBands_<period>")

        Raises:
            ValueError: If multiplier is not positive
        """
        if std_dev_multiplier <= 0:
            raise ValueError(f"std_dev_multiplier must be > 0, got {std_dev_multiplier}")

        super().__init__(period=period, name=name)
        self.std_dev_multiplier = float(std_dev_multiplier)
        self.params = {"period": self.period, "standardDeviations": self.std_dev_multiplier}

    def calculate(self, candles: list[Candle]) -> BollingerBandsSeries:
        """Calculate the five band series (empty bundle if insufficient data)"""
        if not self.has_enough_data(candles):
            return BollingerBandsSeries()

        windows = sliding_window_view(self.closes(candles), self.period)
        middle = windows.mean(axis=1)
        std_dev = windows.std(axis=1)  # ddof=0: population

        k = self.std_dev_multiplier
        timestamps = [c.timestamp for c in candles[self.period - 1 :]]

        return BollingerBandsSeries(
            upper2=self.to_values(timestamps, middle + k * std_dev),
            upper1=self.to_values(timestamps, middle + (k / 2) * std_dev),
            middle=self.to_values(timestamps, middle),
            lower1=self.to_values(timestamps, middle - (k / 2) * std_dev),
            lower2=self.to_values(timestamps, middle - k * std_dev),
        )

    def get_result(
        self, candles: list[Candle], name: str | None = None
    ) -> BollingerIndicatorResult:
        """Override to return the five-band bundle as values"""
        return BollingerIndicatorResult(
            name=name or self.name,
            parameters=self.params,
            values=self.calculate(candles),
        )
