"""Tests for price/tick conversion and spacing rounding."""

import pytest

from liquidity_shield.errors import InvalidTickSpacing
from liquidity_shield.ticks import (
    DEFAULT_TICK_SPACING,
    MIN_TICK,
    price_to_tick,
    round_to_spacing,
    tick_to_price,
)


def test_price_to_tick_and_back():
    """Price -> tick -> price roundtrip is approximately correct."""
    price = 2450
    tick = price_to_tick(price)
    recovered = tick_to_price(tick)
    assert abs(recovered - price) / price < 0.001  # within 0.1%
    assert recovered <= price


def test_price_to_tick_unit_price():
    assert price_to_tick(1) == 0


def test_price_to_tick_is_monotonic():
    prices = [1, 2, 10, 100, 2450, 10**6, 10**18, 2450 * 10**18]
    ticks = [price_to_tick(p) for p in prices]
    assert ticks == sorted(ticks)


def test_price_to_tick_huge_magnitudes():
    """Integers beyond float range still convert."""
    tick = price_to_tick(10**400)
    assert tick > price_to_tick(10**300) > 0


def test_price_to_tick_zero_maps_to_min_tick():
    assert price_to_tick(0) == MIN_TICK


def test_price_to_tick_negative_rejected():
    with pytest.raises(ValueError):
        price_to_tick(-1)


def test_round_to_spacing():
    """Ticks are truncated toward zero to a multiple of spacing."""
    assert round_to_spacing(100, 60) == 60
    assert round_to_spacing(119, 60) == 60
    assert round_to_spacing(120, 60) == 120
    assert round_to_spacing(0, 60) == 0
    assert round_to_spacing(-59, 60) == 0
    assert round_to_spacing(-100, 60) == -60
    assert round_to_spacing(-120, 60) == -120


def test_round_to_spacing_default():
    assert DEFAULT_TICK_SPACING == 60
    assert round_to_spacing(179) == 120


def test_round_to_spacing_properties():
    """Result is a multiple of spacing and never moves away from zero."""
    for spacing in (1, 10, 60, 200):
        for tick in range(-1000, 1000, 7):
            rounded = round_to_spacing(tick, spacing)
            assert rounded % spacing == 0
            assert abs(rounded) <= abs(tick)
            if tick >= 0:
                assert rounded <= tick


def test_round_to_spacing_rejects_bad_spacing():
    with pytest.raises(InvalidTickSpacing):
        round_to_spacing(100, 0)
    with pytest.raises(InvalidTickSpacing):
        round_to_spacing(100, -60)
