"""Statistics over chronological price series.

All functions are O(n) single passes with saturating accumulation. Prices
are non-negative integers in the caller's decimal convention.
"""

from collections.abc import Sequence

from .errors import InvalidPriceArray
from .fixed_point import abs_diff, integer_sqrt, saturating_add, saturating_mul


def mean(prices: Sequence[int]) -> int:
    """Integer mean of the series; 0 for an empty series."""
    if not prices:
        return 0

    total = 0
    for price in prices:
        total = saturating_add(total, price)
    return total // len(prices)


def variance(prices: Sequence[int], mean_price: int) -> int:
    """Population variance around mean_price; 0 for fewer than two prices."""
    if len(prices) <= 1:
        return 0

    sum_squared_diff = 0
    for price in prices:
        diff = abs_diff(price, mean_price)
        sum_squared_diff = saturating_add(sum_squared_diff, saturating_mul(diff, diff))
    return sum_squared_diff // len(prices)


def standard_deviation(prices: Sequence[int], mean_price: int) -> int:
    return integer_sqrt(variance(prices, mean_price))


def movement_intensity(prices: Sequence[int]) -> int:
    """Average absolute move between consecutive prices.

    Order matters: an unordered series gives a meaningless value.
    """
    if len(prices) <= 1:
        return 0

    total_movement = 0
    for i in range(1, len(prices)):
        total_movement = saturating_add(total_movement, abs_diff(prices[i], prices[i - 1]))
    return total_movement // (len(prices) - 1)


def price_range(prices: Sequence[int]) -> tuple[int, int]:
    """Return (min, max) of a non-empty series in one pass."""
    if not prices:
        raise InvalidPriceArray("Cannot take the range of an empty price series")

    low = high = prices[0]
    for price in prices[1:]:
        if price < low:
            low = price
        if price > high:
            high = price
    return low, high
