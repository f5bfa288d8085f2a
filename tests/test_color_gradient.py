"""Tests for color tiers and display heights."""

from __future__ import annotations

import pytest

from bandscope.visualizer.gradient import (
    DISPLAY_CAP,
    TIER_COLORS,
    TIER_ORDER,
    color_tier,
    display_height,
    percent,
    tier_color,
)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (0.0, "green"),
        (0.2499, "green"),
        (0.25, "yellow-green"),
        (0.30, "yellow-green"),
        (0.4999, "yellow-green"),
        (0.50, "yellow"),
        (0.6499, "yellow"),
        (0.65, "orange"),
        (0.7499, "orange"),
        (0.75, "red"),
        (0.90, "red"),
        (1.0, "red"),
    ],
)
def test_color_tier_boundaries(value: float, expected: str) -> None:
    assert color_tier(value) == expected


def test_color_tier_accepts_out_of_range_values() -> None:
    assert color_tier(1.4) == "red"
    assert color_tier(-0.3) == "green"


def test_color_tier_is_monotonic() -> None:
    ranks = [TIER_ORDER.index(color_tier(step / 200)) for step in range(0, 201)]
    assert ranks == sorted(ranks)
    assert set(ranks) == set(range(len(TIER_ORDER)))


def test_every_tier_has_a_distinct_color() -> None:
    assert set(TIER_COLORS) == set(TIER_ORDER)
    assert len(set(TIER_COLORS.values())) == len(TIER_ORDER)
    assert tier_color("red") == "#FF3200"


def test_display_height_scales_and_caps() -> None:
    assert display_height(0.0) == 0
    assert display_height(0.30) == 300
    assert display_height(0.75) == 750
    assert display_height(0.90) == DISPLAY_CAP
    assert display_height(1.0) == 800
    assert all(display_height(step / 100) <= DISPLAY_CAP for step in range(101))


def test_percent_rounds_and_stays_in_range() -> None:
    assert percent(0.873) == 87
    assert percent(0.875) == 88
    assert percent(1.0) == 100
    assert percent(0.0) == 0


def test_height_and_percent_tolerate_non_finite_input() -> None:
    assert display_height(float("nan")) == 0
    assert display_height(float("inf")) == 0
    assert display_height(1.4) == DISPLAY_CAP
    assert display_height(-0.5) == 0
    assert percent(float("nan")) == 0
    assert percent(float("inf")) == 0
    assert percent(1.4) == 100
    assert percent(-0.2) == 0
