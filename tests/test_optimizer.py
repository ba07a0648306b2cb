"""Tests for range optimizer."""

import pytest

from liquidity_shield.errors import InvalidPriceArray
from liquidity_shield.optimizer import (
    calculate_optimal_position_bounds,
    optimal_bounds,
    volatility_multiplier,
)
from liquidity_shield.ticks import price_to_tick, tick_to_price


def test_volatility_multiplier_regimes():
    """Step function over std-dev percentage with exclusive upper bounds."""
    assert volatility_multiplier(0) == 20
    assert volatility_multiplier(4) == 20
    assert volatility_multiplier(5) == 30
    assert volatility_multiplier(9) == 30
    assert volatility_multiplier(10) == 50
    assert volatility_multiplier(19) == 50
    assert volatility_multiplier(20) == 100
    assert volatility_multiplier(500) == 100


def test_flat_series_tight_range():
    """Zero deviation gives 20 spacings either side of the mean tick."""
    bounds = optimal_bounds([100, 100, 100, 100])
    center_tick = price_to_tick(100)

    assert bounds.width == 2 * 20 * 60
    assert bounds.tick_lower < center_tick < bounds.tick_upper
    assert bounds.tick_lower % 60 == 0
    assert bounds.tick_upper % 60 == 0


def test_range_widens_with_volatility():
    """Each regime maps to its own fixed width."""
    # std dev 3%, 5%, 10%, 50% of a mean of 100
    assert optimal_bounds([97, 103]).width == 2 * 20 * 60
    assert optimal_bounds([95, 105]).width == 2 * 30 * 60
    assert optimal_bounds([90, 110]).width == 2 * 50 * 60
    assert optimal_bounds([50, 150]).width == 2 * 100 * 60


def test_range_covers_mean_price():
    prices = [p * 10**18 for p in (2450, 2462, 2441, 2475, 2490, 2468, 2501, 2487)]
    bounds = optimal_bounds(prices)

    assert tick_to_price(bounds.tick_lower) < 2450 * 10**18
    assert tick_to_price(bounds.tick_upper) > 2501 * 10**18


def test_bounds_invariants():
    """lower < upper and both multiples of 60 for any valid series."""
    series = [
        [1, 1],
        [1, 2],
        [0, 0],
        [0, 10**18],
        [100, 100, 100, 100],
        [2450, 2462, 2441, 2475],
        [10**30, 10**30 + 10**28],
        [10**60, 1],
    ]
    for prices in series:
        bounds = optimal_bounds(prices)
        assert bounds.tick_lower < bounds.tick_upper, prices
        assert bounds.tick_lower % 60 == 0, prices
        assert bounds.tick_upper % 60 == 0, prices


def test_zero_prices_truncate_toward_zero():
    """Negative ticks round toward zero on both sides."""
    bounds = optimal_bounds([0, 0])
    assert bounds.tick_lower == -888420  # MIN_TICK - 1200 = -888472
    assert bounds.tick_upper == -886020


def test_too_few_prices_rejected():
    with pytest.raises(InvalidPriceArray):
        optimal_bounds([])
    with pytest.raises(InvalidPriceArray):
        optimal_bounds([2450])


def test_calculate_optimal_position_bounds():
    """Entry point returns a plain tuple and ignores liquidity and tokens."""
    prices = [2450, 2462, 2441, 2475]
    expected = optimal_bounds(prices)

    result = calculate_optimal_position_bounds(prices, 100 * 10**18, "0xA0b8", "0xdAC1")
    assert result == (expected.tick_lower, expected.tick_upper)
    assert calculate_optimal_position_bounds(prices, 0) == result


def test_calculate_optimal_position_bounds_single_price():
    with pytest.raises(InvalidPriceArray):
        calculate_optimal_position_bounds([2450], 10**18)
