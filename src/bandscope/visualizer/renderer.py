"""Mode-aware spectrum renderer.

`render` is the per-tick entry point. It branches on the capture state
(capturing, paused or no signal), lays out an info panel above a bar-chart
panel, and returns a fully padded `Frame`. It keeps no state between calls
and never holds on to the snapshot it was given.
"""

from __future__ import annotations

from rich.text import Text

from ..runtime_config import fps_hint
from .base import (
    BAND_COUNT,
    BAND_LABELS,
    Capturing,
    CaptureState,
    Frame,
    NoSignal,
    Paused,
    RenderConfig,
    RenderRegion,
)
from .gradient import CHART_CEILING, color_tier, display_height, percent, tier_color
from .hints import remediation_hint
from .layout import BAR_GAP, bar_width, bars_that_fit

INFO_TITLE = "Audio Visualization"
CAPTURING_TEXT = "[>] Capturing audio"
PAUSED_TEXT = "[||] Paused"
NO_CAPTURE_TEXT = "No audio capture available"
WAITING_TEXT = "Waiting for audio input..."
VALUE_STYLE_FG = "#FFFFFF"

_EIGHTHS = " ▁▂▃▄▅▆▇█"


def render(region: RenderRegion, state: CaptureState, config: RenderConfig) -> Frame:
    """Render one frame for `state` into `region`."""
    if isinstance(state, (Capturing, Paused)):
        return _render_active(region, state, config)
    return _render_no_signal(region, state, config)


def chart_title(tick_interval_ms: int) -> str:
    return f"Spectrum | {fps_hint(tick_interval_ms)} FPS | Press q to exit"


def _render_active(
    region: RenderRegion, state: Capturing | Paused, config: RenderConfig
) -> Frame:
    theme = config.theme
    bands = state.snapshot.bands[:BAND_COUNT]
    paused = isinstance(state, Paused)
    status = PAUSED_TEXT if paused else CAPTURING_TEXT
    peak_text = f"Peak: {percent(state.snapshot.peak)}%"

    info_line = Text()
    info_line.append(status, style=theme.text)
    info_line.append("  ")
    info_line.append(peak_text, style=theme.inactive)

    width = bar_width(region.width)
    heights = tuple(display_height(value) for value in bands)
    tiers = tuple(color_tier(value) for value in bands)

    info_height = min(region.height, 3)
    chart_height = region.height - info_height
    inner_width = max(0, region.width - 2)
    inner_height = max(0, chart_height - 2)
    visible = bars_that_fit(inner_width, width, len(bands)) if inner_height else 0

    lines = _panel(INFO_TITLE, [info_line], region.width, info_height, theme.inactive)
    chart_body = _bar_chart(bands[:visible], width, inner_height, theme.text)
    lines.extend(
        _panel(
            chart_title(config.tick_interval_ms),
            chart_body,
            region.width,
            chart_height,
            theme.inactive,
        )
    )
    return Frame(
        lines=_fit_lines(lines, region),
        mode="paused" if paused else "active",
        status_text=f"{status}  {peak_text}",
        bar_width=width,
        bars_drawn=visible,
        bar_heights=heights,
        tiers=tiers,
    )


def _render_no_signal(
    region: RenderRegion, state: NoSignal, config: RenderConfig
) -> Frame:
    del state
    theme = config.theme
    hint = remediation_hint(config.platform)
    info_body = [Text(NO_CAPTURE_TEXT, style=theme.text), Text(hint, style=theme.text)]
    info_height = min(region.height, len(info_body) + 2)
    chart_height = region.height - info_height

    lines = _panel(INFO_TITLE, info_body, region.width, info_height, theme.inactive)
    lines.extend(
        _panel(
            chart_title(config.tick_interval_ms),
            [Text(WAITING_TEXT, style=theme.text)],
            region.width,
            chart_height,
            theme.inactive,
        )
    )
    return Frame(
        lines=_fit_lines(lines, region),
        mode="no_signal",
        status_text=NO_CAPTURE_TEXT,
        hint=hint,
    )


def _bar_chart(
    bands: tuple[float, ...],
    width: int,
    inner_height: int,
    label_style: str,
) -> list[Text]:
    """Draw whole bars bottom-up above a label row."""
    if inner_height <= 0 or not bands:
        return []
    bar_rows = inner_height - 1
    rows = [Text() for _ in range(bar_rows)]
    labels = Text()
    for index, value in enumerate(bands):
        if index:
            for row in rows:
                row.append(" " * BAR_GAP)
            labels.append(" " * BAR_GAP)
        color = tier_color(color_tier(value))
        height = display_height(value)
        fill = (height / CHART_CEILING) * bar_rows
        for row_idx, row in enumerate(rows):
            from_bottom = bar_rows - 1 - row_idx
            amount = max(0.0, min(1.0, fill - from_bottom))
            if from_bottom == 0 and amount >= 1.0 and len(str(height)) <= width:
                row.append(
                    str(height).center(width), style=f"{VALUE_STYLE_FG} on {color}"
                )
                continue
            glyph = _EIGHTHS[int(amount * 8)]
            row.append(glyph * width, style=color)
        labels.append(BAND_LABELS[index][:width].center(width), style=label_style)
    return rows + [labels]


def _panel(
    title: str, body: list[Text], width: int, height: int, border_style: str
) -> list[Text]:
    """Draw a titled box of `width` x `height` around `body`."""
    if height <= 0:
        return []
    inner_width = max(0, width - 2)
    shown_title = title[:inner_width]
    top = Text("┌", style=border_style)
    top.append(shown_title, style=border_style)
    top.append("─" * (inner_width - len(shown_title)), style=border_style)
    top.append("┐", style=border_style)
    lines = [top]
    for idx in range(max(0, height - 2)):
        content = body[idx].copy() if idx < len(body) else Text()
        content.truncate(inner_width, pad=True)
        line = Text("│", style=border_style)
        line.append_text(content)
        line.append("│", style=border_style)
        lines.append(line)
    if height >= 2:
        lines.append(Text(f"└{'─' * inner_width}┘", style=border_style))
    return lines


def _fit_lines(lines: list[Text], region: RenderRegion) -> tuple[Text, ...]:
    clipped: list[Text] = []
    for line in lines[: region.height]:
        line.truncate(region.width, pad=True)
        clipped.append(line)
    while len(clipped) < region.height:
        clipped.append(Text(" " * region.width))
    return tuple(clipped)
