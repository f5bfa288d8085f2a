"""Magnitude-to-color tiers and bar display heights."""

from __future__ import annotations

from typing import Literal

from .base import clamp_unit

ColorTier = Literal["green", "yellow-green", "yellow", "orange", "red"]

CHART_CEILING = 1000
DISPLAY_CAP = 800

# Ascending lower bounds; the last bound not exceeding the value wins.
_TIER_THRESHOLDS: tuple[tuple[float, ColorTier], ...] = (
    (0.75, "red"),
    (0.65, "orange"),
    (0.50, "yellow"),
    (0.25, "yellow-green"),
)

TIER_ORDER: tuple[ColorTier, ...] = ("green", "yellow-green", "yellow", "orange", "red")

TIER_COLORS: dict[ColorTier, str] = {
    "green": "#00C800",
    "yellow-green": "#B4C800",
    "yellow": "#FFC800",
    "orange": "#FF8C00",
    "red": "#FF3200",
}


def color_tier(value: float) -> ColorTier:
    """Map a magnitude to its tier. Out-of-range input is never rejected."""
    for bound, tier in _TIER_THRESHOLDS:
        if value >= bound:
            return tier
    return "green"


def tier_color(tier: ColorTier) -> str:
    return TIER_COLORS[tier]


def display_height(value: float) -> int:
    """Scale a magnitude onto the 0-1000 chart, capped below the ceiling."""
    scaled = int((clamp_unit(value) * CHART_CEILING) + 0.5)
    return min(DISPLAY_CAP, scaled)


def percent(value: float) -> int:
    """Whole-number percentage of a unit magnitude, within 0..100."""
    return int((clamp_unit(value) * 100) + 0.5)
