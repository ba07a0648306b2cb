"""Price <-> tick conversion on the 1.0001 geometric grid.

price_to_tick takes a floating-point logarithm, so results are approximate
near tick boundaries and are not bit-exact against a fixed-point TickMath
implementation.
"""

import math

from .errors import InvalidTickSpacing
from .fixed_point import div_toward_zero


MIN_TICK = -887272
DEFAULT_TICK_SPACING = 60

_LOG_BASE = math.log(1.0001)


def price_to_tick(price: int) -> int:
    """Convert a price magnitude to floor(log_1.0001(price)).

    A zero price has no logarithm and maps to MIN_TICK.
    """
    if price < 0:
        raise ValueError("Price must be non-negative")
    if price == 0:
        return MIN_TICK
    # math.log accepts ints beyond float range without overflowing
    return math.floor(math.log(price) / _LOG_BASE)


def tick_to_price(tick: int) -> float:
    """Convert a tick to a price."""
    return 1.0001**tick


def round_to_spacing(tick: int, tick_spacing: int = DEFAULT_TICK_SPACING) -> int:
    """Round a tick to a multiple of tick_spacing, truncating toward zero.

    Negative ticks move up (toward zero), unlike floor-based rounding, so
    ranges below tick 0 are not mirror images of ranges above it.
    """
    if tick_spacing <= 0:
        raise InvalidTickSpacing(f"Tick spacing must be positive, got {tick_spacing}")
    return div_toward_zero(tick, tick_spacing) * tick_spacing
