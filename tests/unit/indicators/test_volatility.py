"""
Unit tests for Bollinger Bands
"""

import math

import pytest

from domain.indicators.volatility import BollingerBands
from tests.unit.indicators.test_moving_averages import create_series


@pytest.mark.unit
class TestBollingerBands:
    """Test five-band Bollinger envelope"""

    def test_population_std_dev(self):
        """
        Window 1..5: mean 3, population σ = sqrt(2)
        """
        candles = create_series([1, 2, 3, 4, 5])

        bands = BollingerBands(period=5, std_dev_multiplier=2.0).calculate(candles)

        sigma = math.sqrt(2)
        assert bands.middle[0].value == pytest.approx(3.0)
        assert bands.upper2[0].value == pytest.approx(3.0 + 2 * sigma)
        assert bands.upper1[0].value == pytest.approx(3.0 + sigma)
        assert bands.lower1[0].value == pytest.approx(3.0 - sigma)
        assert bands.lower2[0].value == pytest.approx(3.0 - 2 * sigma)

    def test_band_ordering(self):
        """upper2 > upper1 > middle > lower1 > lower2 when prices vary"""
        candles = create_series([100 + (i % 4) * 2.5 for i in range(30)])

        bands = BollingerBands(period=20).calculate(candles)

        for u2, u1, m, l1, l2 in zip(
            bands.upper2, bands.upper1, bands.middle, bands.lower1, bands.lower2
        ):
            assert u2.value > u1.value > m.value > l1.value > l2.value

    def test_constant_prices_collapse(self):
        candles = create_series([50] * 20)

        bands = BollingerBands(period=20).calculate(candles)

        assert bands.upper2[0].value == bands.middle[0].value == bands.lower2[0].value == 50.0

    def test_bands_widen_with_volatility(self):
        calm = BollingerBands(period=5).calculate(create_series([100, 101, 100, 101, 100]))
        wild = BollingerBands(period=5).calculate(create_series([100, 110, 90, 110, 90]))

        calm_width = calm.upper2[0].value - calm.lower2[0].value
        wild_width = wild.upper2[0].value - wild.lower2[0].value
        assert wild_width > calm_width

    def test_larger_multiplier_widens_bands(self):
        """Same candles, larger standardDeviations: strictly wider outer bands"""
        candles = create_series([100 + (i % 5) * 1.7 for i in range(30)])

        narrow = BollingerBands(period=20, std_dev_multiplier=1.0).calculate(candles)
        wide = BollingerBands(period=20, std_dev_multiplier=2.5).calculate(candles)

        for n_u2, n_l2, w_u2, w_l2 in zip(narrow.upper2, narrow.lower2, wide.upper2, wide.lower2):
            assert w_u2.value - w_l2.value > n_u2.value - n_l2.value
        assert [v.value for v in narrow.middle] == [v.value for v in wide.middle]

    def test_alignment_and_length(self):
        candles = create_series([100 + i for i in range(25)])

        bands = BollingerBands(period=20).calculate(candles)

        assert len(bands) == 6
        assert bands.middle[0].timestamp == candles[19].timestamp
        assert all(len(series) == 6 for series in (bands.upper2, bands.upper1, bands.lower1, bands.lower2))

    def test_insufficient_data(self):
        bands = BollingerBands(period=20).calculate(create_series([100] * 19))

        assert len(bands) == 0
        assert bands.upper2 == []

    @pytest.mark.parametrize("multiplier", [0, -1.5])
    def test_non_positive_multiplier_raises(self, multiplier):
        with pytest.raises(ValueError, match="std_dev_multiplier"):
            BollingerBands(std_dev_multiplier=multiplier)

    def test_result_envelope(self):
        candles = create_series([100 + i for i in range(20)])

        result = BollingerBands().get_result(candles, name="BB")

        assert result.type == "bollinger"
        assert result.name == "BB"
        assert result.parameters == {"period": 20, "standardDeviations": 2.1}
        assert len(result.values.middle) == 1
