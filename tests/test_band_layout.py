"""Tests for band layout sizing."""

from __future__ import annotations

from bandscope.visualizer.layout import (
    MIN_BAR_WIDTH,
    bar_width,
    bars_that_fit,
    chart_span,
)


def test_bar_width_for_48_columns_hits_floor() -> None:
    assert bar_width(48) == 3


def test_bar_width_scales_with_region() -> None:
    assert bar_width(100) == 7
    assert bar_width(130) == 10
    assert bar_width(200, band_count=12) == 15


def test_bar_width_never_below_floor() -> None:
    for width in range(0, 60):
        assert bar_width(width) >= MIN_BAR_WIDTH
    assert bar_width(-5) == MIN_BAR_WIDTH


def test_chart_span_counts_gaps_between_bars() -> None:
    assert chart_span(3) == 12 * 3 + 11
    assert chart_span(5, band_count=1) == 5
    assert chart_span(5, band_count=0) == 0


def test_bars_that_fit_counts_only_whole_bars() -> None:
    assert bars_that_fit(46, 3) == 11
    assert bars_that_fit(78, 6) == 11
    assert bars_that_fit(98, 7) == 12
    assert bars_that_fit(500, 7) == 12
    assert bars_that_fit(2, 3) == 0
    assert bars_that_fit(3, 3) == 1
