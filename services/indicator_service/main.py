"""
Indicator Service - command line entry point

Calculates every configured indicator preset for one symbol range.
Candles come through the market data cache (repository fallback on miss).

Usage:
    python -m services.indicator_service.main AAPL D 1700000000 1702592000
"""

import argparse
import asyncio
import logging

from config.logging_config import configure_logging
from core.models.indicators import IndicatorResult
from factory.client_factory import create_cache_service
from services.indicator_service.calculator import IndicatorCalculationService

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Calculate configured indicators for a symbol")
    parser.add_argument("symbol")
    parser.add_argument("resolution")
    parser.add_argument("from_ts", type=int, help="Range start (unix seconds)")
    parser.add_argument("to_ts", type=int, help="Range end (unix seconds)")
    return parser.parse_args(argv)


async def run(symbol: str, resolution: str, from_ts: int, to_ts: int) -> dict[str, IndicatorResult]:
    """Connect, calculate presets, always close the cache"""
    cache = create_cache_service()
    await cache.connect()

    try:
        calculator = IndicatorCalculationService(cache=cache)
        results = await calculator.calculate_configured_for_symbol(symbol, resolution, from_ts, to_ts)
    finally:
        await cache.close()

    for name, result in results.items():
        logger.info(f"✓ {name}: {len(result.values)} values")

    logger.info(f"✅ Calculated {len(results)} indicators for {symbol}/{resolution}")
    return results


def main(argv: list[str] | None = None) -> None:
    """Main entry point"""
    args = parse_args(argv)
    configure_logging("indicator_service")

    asyncio.run(run(args.symbol, args.resolution, args.from_ts, args.to_ts))


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        logger.info("Goodbye!")
