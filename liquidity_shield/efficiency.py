"""Capital efficiency of a position: how centered the price is in its range."""

from .errors import InvalidTickSpacing
from .types import PositionRange


MAX_EFFICIENCY = 100


def calculate_position_efficiency(tick_lower: int, tick_upper: int, current_tick: int) -> int:
    """Score 0-100: 100 at the exact middle, 0 at an edge or out of range.

    A range one tick wide has no half-width and scores 100 whenever the
    tick is inside it.
    """
    if tick_upper <= tick_lower:
        raise InvalidTickSpacing(
            f"Upper tick {tick_upper} must be above lower tick {tick_lower}"
        )

    position = PositionRange(tick_lower, tick_upper)
    if not position.contains(current_tick):
        return 0

    range_size = position.width
    half_range = range_size // 2
    if half_range == 0:
        return MAX_EFFICIENCY

    distance_from_middle = abs(current_tick - tick_lower - half_range)
    # odd widths can put the far edge one tick past the truncated half-range
    return max(0, MAX_EFFICIENCY - distance_from_middle * MAX_EFFICIENCY // half_range)
