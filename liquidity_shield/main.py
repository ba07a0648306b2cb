"""Entry point: serve the analytics API or run a one-shot self-check."""

import argparse
import logging
from pathlib import Path

import uvicorn
from dotenv import load_dotenv

from .api import create_app
from .config import Config
from .efficiency import calculate_position_efficiency
from .optimizer import calculate_optimal_position_bounds
from .rebalance import should_rebalance
from .ticks import price_to_tick
from .volatility import calculate_volatility_score, get_recommended_fee

logger = logging.getLogger(__name__)

# Hourly ETH/USDC closes, 18-decimal fixed point
SAMPLE_PRICES = [p * 10**18 for p in (2450, 2462, 2441, 2475, 2490, 2468, 2501, 2487)]


def run_check(config: Config):
    """Run every analytics operation once on a sample series and log the results."""
    logger.info("=== Liquidity Shield self-check ===")

    score = calculate_volatility_score(SAMPLE_PRICES, time_window=3600)
    fee = get_recommended_fee(score, config.base_fee, config.max_fee)
    logger.info(f"Volatility score: {score} -> fee {fee}")

    tick_lower, tick_upper = calculate_optimal_position_bounds(SAMPLE_PRICES, 0)
    logger.info(f"Optimal bounds: [{tick_lower}, {tick_upper}]")

    current_tick = price_to_tick(SAMPLE_PRICES[-1])
    efficiency = calculate_position_efficiency(tick_lower, tick_upper, current_tick)
    logger.info(f"Efficiency at tick {current_tick}: {efficiency}%")

    shifted = should_rebalance(tick_lower + 1200, tick_upper + 1200, SAMPLE_PRICES)
    logger.info(
        f"Rebalance shifted range: {shifted.should_rebalance} "
        f"-> [{shifted.tick_lower}, {shifted.tick_upper}]"
    )

    logger.info("=== Self-check complete ===")


def main():
    """Entry point."""
    # Load .env from project root
    load_dotenv(Path(__file__).parent.parent / ".env")

    parser = argparse.ArgumentParser(description="Liquidity Shield analytics service")
    parser.add_argument("--check", action="store_true", help="Run a one-shot self-check and exit")
    parser.add_argument("--host", default=None, help="API host (overrides .env)")
    parser.add_argument("--port", type=int, default=None, help="API port")
    parser.add_argument("--log-level", default=None, help="Logging level")
    args = parser.parse_args()

    config = Config()
    if args.host:
        config.api_host = args.host
    if args.port:
        config.api_port = args.port
    if args.log_level:
        config.log_level = args.log_level

    logging.basicConfig(
        level=config.log_level.upper(), format="%(asctime)s [%(levelname)s] %(message)s"
    )

    if args.check:
        run_check(config)
        return

    logger.info(f"Liquidity Shield API starting on {config.api_host}:{config.api_port}")
    logger.info(f"  Fee band:   {config.base_fee}-{config.max_fee}")
    logger.info(f"  Max series: {config.max_series_length}")

    uvicorn.run(
        create_app(config),
        host=config.api_host,
        port=config.api_port,
        log_level=config.log_level.lower(),
    )


if __name__ == "__main__":
    main()
