"""Rebalance decisions for an existing position."""

import logging
from collections.abc import Sequence

from .errors import InvalidTickSpacing
from .fixed_point import div_toward_zero
from .optimizer import optimal_bounds
from .ticks import price_to_tick
from .types import RebalanceDecision

logger = logging.getLogger(__name__)


# Price closer than this share of the range to an edge triggers a rebalance
EDGE_THRESHOLD_PERCENT = 10
# Optimal bound drifting more than range / DRIFT_DIVISOR triggers a rebalance
DRIFT_DIVISOR = 4


def should_rebalance(
    current_lower: int,
    current_upper: int,
    prices: Sequence[int],
    token0: str | None = None,
    token1: str | None = None,
) -> RebalanceDecision:
    """Decide whether [current_lower, current_upper] should be replaced.

    The current tick is taken from the last price in the series. Rebalancing
    is advised when the price sits on or beyond a bound, within
    EDGE_THRESHOLD_PERCENT of either edge, or when either optimal bound has
    drifted by more than a quarter of the current width. The fresh optimal
    bounds are returned whatever the verdict.
    """
    optimal = optimal_bounds(prices)

    current_range = current_upper - current_lower
    if current_range <= 0:
        raise InvalidTickSpacing(
            f"Upper tick {current_upper} must be above lower tick {current_lower}"
        )

    current_tick = price_to_tick(prices[-1])
    lower_pct = div_toward_zero((current_tick - current_lower) * 100, current_range)
    upper_pct = div_toward_zero((current_upper - current_tick) * 100, current_range)
    max_drift = current_range // DRIFT_DIVISOR

    out_of_range = current_tick <= current_lower or current_tick >= current_upper
    near_edge = lower_pct < EDGE_THRESHOLD_PERCENT or upper_pct < EDGE_THRESHOLD_PERCENT
    drifted = (
        abs(optimal.tick_lower - current_lower) > max_drift
        or abs(optimal.tick_upper - current_upper) > max_drift
    )
    decision = out_of_range or near_edge or drifted

    logger.debug(
        f"rebalance: tick={current_tick} range=[{current_lower}, {current_upper}] "
        f"out={out_of_range} edge={near_edge} drift={drifted} "
        f"optimal=[{optimal.tick_lower}, {optimal.tick_upper}]"
    )
    return RebalanceDecision(decision, optimal.tick_lower, optimal.tick_upper)
