"""Range optimization sized by the volatility regime of recent prices."""

import logging
from collections.abc import Sequence

from . import price_stats
from .errors import InvalidPriceArray
from .fixed_point import scale_percent
from .ticks import DEFAULT_TICK_SPACING, price_to_tick, round_to_spacing
from .types import PositionRange

logger = logging.getLogger(__name__)


# (std-dev % of mean upper bound, tick spacings on each side of the mean)
VOLATILITY_REGIMES = (
    (5, 20),
    (10, 30),
    (20, 50),
)
EXTREME_VOLATILITY_MULTIPLIER = 100

MIN_PRICES_FOR_BOUNDS = 2


def volatility_multiplier(std_dev_percent: int) -> int:
    """Number of tick spacings to extend on each side of the mean tick."""
    for upper_bound, multiplier in VOLATILITY_REGIMES:
        if std_dev_percent < upper_bound:
            return multiplier
    return EXTREME_VOLATILITY_MULTIPLIER


def optimal_bounds(prices: Sequence[int]) -> PositionRange:
    """Compute the recommended tick range around the mean price.

    The half-width is a step function of the standard deviation expressed
    as a percentage of the mean: calm markets get a tight range, volatile
    ones a wide range.

    Args:
        prices: Chronological price series with at least two entries

    Returns:
        PositionRange whose bounds are multiples of DEFAULT_TICK_SPACING
    """
    if len(prices) < MIN_PRICES_FOR_BOUNDS:
        raise InvalidPriceArray(
            f"Need at least {MIN_PRICES_FOR_BOUNDS} prices, got {len(prices)}"
        )

    mean_price = price_stats.mean(prices)
    std_dev = price_stats.standard_deviation(prices, mean_price)
    mean_tick = price_to_tick(mean_price)

    std_dev_percent = scale_percent(std_dev, 100, mean_price)
    tick_range = volatility_multiplier(std_dev_percent) * DEFAULT_TICK_SPACING

    tick_lower = round_to_spacing(mean_tick - tick_range, DEFAULT_TICK_SPACING)
    tick_upper = round_to_spacing(mean_tick + tick_range, DEFAULT_TICK_SPACING)

    logger.debug(
        f"bounds: mean={mean_price} std_dev={std_dev} ({std_dev_percent}%) "
        f"mean_tick={mean_tick} range=[{tick_lower}, {tick_upper}]"
    )
    return PositionRange(tick_lower, tick_upper)


def calculate_optimal_position_bounds(
    prices: Sequence[int],
    liquidity_amount: int = 0,
    token0: str | None = None,
    token1: str | None = None,
) -> tuple[int, int]:
    """Return (tick_lower, tick_upper) for a new position.

    liquidity_amount and the token identifiers are accepted for the
    caller's bookkeeping and do not affect the result.
    """
    bounds = optimal_bounds(prices)
    return bounds.tick_lower, bounds.tick_upper
