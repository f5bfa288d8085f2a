"""Band layout: fit a fixed band count into a variable-width region."""

from __future__ import annotations

from .base import BAND_COUNT

MIN_BAR_WIDTH = 3
BAR_GAP = 1


def bar_width(available_width: int, band_count: int = BAND_COUNT) -> int:
    """Return per-bar width; never below `MIN_BAR_WIDTH`.

    One extra slot is reserved in the divisor for breathing room. Narrow
    regions get legibility-floored bars that may clip rather than an error.
    """
    slots = max(1, band_count + 1)
    return max(MIN_BAR_WIDTH, max(0, available_width) // slots)


def chart_span(width: int, band_count: int = BAND_COUNT) -> int:
    """Total cells used by `band_count` bars of `width` plus their gaps."""
    if band_count <= 0:
        return 0
    return (band_count * width) + ((band_count - 1) * BAR_GAP)


def bars_that_fit(
    available_width: int, width: int, band_count: int = BAND_COUNT
) -> int:
    """Number of whole bars of `width` that fit in `available_width` cells."""
    if available_width < width:
        return 0
    fit = (available_width + BAR_GAP) // (width + BAR_GAP)
    return min(band_count, fit)
