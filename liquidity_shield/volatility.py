"""Volatility scoring and the dynamic fee schedule derived from it."""

import logging
from collections.abc import Sequence

from . import price_stats
from .errors import InvalidPriceArray, InvalidTimeWindow
from .fixed_point import saturating_add, saturating_mul, saturating_sub, scale_percent

logger = logging.getLogger(__name__)


# Score is expressed in basis points of "maximal" volatility (10000 = 100%)
SCALING_FACTOR = 10000
MAX_VOLATILITY_SCORE = 10000

# Weighted blend: variance dominates, then range, then movement
VARIANCE_WEIGHT = 6
RANGE_WEIGHT = 3
MOVEMENT_WEIGHT = 1
WEIGHT_TOTAL = VARIANCE_WEIGHT + RANGE_WEIGHT + MOVEMENT_WEIGHT

# Fee schedule breakpoints on the score axis
LOW_VOLATILITY_THRESHOLD = 1000
HIGH_VOLATILITY_THRESHOLD = 9000
FEE_SCALE_SPAN = HIGH_VOLATILITY_THRESHOLD - LOW_VOLATILITY_THRESHOLD

MAX_FEE_RATE = 2**32 - 1


def volatility_score(prices: Sequence[int], base_price: int) -> int:
    """Blend variance, range and movement into a score in [0, 10000].

    Args:
        prices: Chronological price series (must be non-empty)
        base_price: Reference price the min/max range is measured against

    Returns:
        Volatility score, 0 for a flat series, capped at MAX_VOLATILITY_SCORE
    """
    if not prices:
        raise InvalidPriceArray("Price series is empty")

    mean_price = price_stats.mean(prices)
    var = price_stats.variance(prices, mean_price)
    movement = price_stats.movement_intensity(prices)

    variation_coefficient = scale_percent(var, SCALING_FACTOR, mean_price)

    low, high = price_stats.price_range(prices)
    range_percent = scale_percent(high - low, SCALING_FACTOR, base_price)

    weighted = saturating_add(
        saturating_add(
            saturating_mul(variation_coefficient, VARIANCE_WEIGHT),
            saturating_mul(range_percent, RANGE_WEIGHT),
        ),
        saturating_mul(movement, MOVEMENT_WEIGHT),
    )
    score = min(weighted // WEIGHT_TOTAL, MAX_VOLATILITY_SCORE)

    logger.debug(
        f"volatility: mean={mean_price} variance={var} movement={movement} "
        f"cv={variation_coefficient} range_pct={range_percent} score={score}"
    )
    return score


def calculate_volatility_score(
    prices: Sequence[int],
    time_window: int,
    token0: str | None = None,
    token1: str | None = None,
) -> int:
    """Score a price window, using the window mean as the base price.

    token0/token1 identify the pair for the caller's bookkeeping only and
    are never inspected.
    """
    if not prices:
        raise InvalidPriceArray("Price series is empty")
    if time_window <= 0:
        raise InvalidTimeWindow(f"Time window must be positive, got {time_window}")

    return volatility_score(prices, price_stats.mean(prices))


def recommended_fee(score: int, base_fee: int, max_fee: int) -> int:
    """Map a volatility score to a fee between base_fee and max_fee.

    Scores up to LOW_VOLATILITY_THRESHOLD pay base_fee, scores from
    HIGH_VOLATILITY_THRESHOLD up pay max_fee, and the band in between is
    interpolated linearly. An inverted band (base_fee > max_fee) collapses
    to base_fee inside the interpolation band.
    """
    if score <= LOW_VOLATILITY_THRESHOLD:
        return base_fee
    if score >= HIGH_VOLATILITY_THRESHOLD:
        return max_fee

    normalized = score - LOW_VOLATILITY_THRESHOLD
    fee_range = saturating_sub(max_fee, base_fee)
    fee = base_fee + saturating_mul(normalized, fee_range) // FEE_SCALE_SPAN
    return min(fee, MAX_FEE_RATE)


get_recommended_fee = recommended_fee
