"""
Indicator Service - Technical Indicator Calculation

Service layer that:
1. Dispatches indicator types to calculators with per-type defaults
2. Reads candle ranges through the market data cache
3. Calculates configured indicator presets
"""

from services.indicator_service.calculator import IndicatorCalculationService
from services.indicator_service.indicator_loader import IndicatorLoader

__all__ = ["IndicatorCalculationService", "IndicatorLoader"]
