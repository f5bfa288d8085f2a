"""Core spectrum-renderer contracts and per-frame payloads.

These dataclasses define the boundary between the audio-analysis producer,
the renderer, and the host UI loop. Everything here is immutable so one
frame's inputs can never leak into the next.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Literal, Union

from rich.text import Text

from .hints import TargetPlatform

logger = logging.getLogger(__name__)

BAND_LABELS: tuple[str, ...] = (
    "Sub",
    "Bass",
    "Low",
    "LMid",
    "Mid",
    "UMid",
    "High",
    "HiMd",
    "Pres",
    "Bril",
    "Air",
    "Ultra",
)
BAND_COUNT = 12

RenderMode = Literal["active", "paused", "no_signal"]


def clamp_unit(value: float) -> float:
    """Clamp a magnitude to [0, 1], mapping non-finite input to 0."""
    try:
        normalized = float(value)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(normalized):
        return 0.0
    return max(0.0, min(1.0, normalized))


@dataclass(frozen=True)
class SpectrumSnapshot:
    """Band magnitudes (lowest frequency first) plus peak for one frame."""

    bands: tuple[float, ...]
    peak: float

    def __post_init__(self) -> None:
        """Clamp every value and truncate/pad bands to `BAND_COUNT`."""
        values = [clamp_unit(value) for value in self.bands]
        if len(values) != BAND_COUNT:
            logger.warning(
                "Spectrum producer sent %d bands; expected %d",
                len(values),
                BAND_COUNT,
                extra={
                    "event": "spectrum_band_count_mismatch",
                    "received": len(values),
                    "expected": BAND_COUNT,
                },
            )
            values = values[:BAND_COUNT]
            values.extend([0.0] * (BAND_COUNT - len(values)))
        object.__setattr__(self, "bands", tuple(values))
        object.__setattr__(self, "peak", clamp_unit(self.peak))

    @classmethod
    def from_values(cls, bands: Iterable[float], peak: float) -> SpectrumSnapshot:
        return cls(bands=tuple(bands), peak=peak)


@dataclass(frozen=True)
class Capturing:
    """Live capture with a fresh snapshot."""

    snapshot: SpectrumSnapshot


@dataclass(frozen=True)
class Paused:
    """Capture is suspended but the producer still exposes its last snapshot."""

    snapshot: SpectrumSnapshot


@dataclass(frozen=True)
class NoSignal:
    """No spectrum is available this frame."""


CaptureState = Union[Capturing, Paused, NoSignal]


@dataclass(frozen=True)
class RenderRegion:
    """Character-cell area available for the current frame."""

    width: int
    height: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "width", max(1, int(self.width)))
        object.__setattr__(self, "height", max(1, int(self.height)))


@dataclass(frozen=True)
class Theme:
    text: str = "#FFFFFF"
    inactive: str = "#808080"


@dataclass(frozen=True)
class RenderConfig:
    """Read-only process-wide settings consulted at render time."""

    theme: Theme = field(default_factory=Theme)
    tick_interval_ms: int = 250
    platform: TargetPlatform = TargetPlatform.OTHER


@dataclass(frozen=True)
class Frame:
    """One fully laid-out frame plus the values it was drawn from."""

    lines: tuple[Text, ...]
    mode: RenderMode
    status_text: str
    bar_width: int = 0
    bars_drawn: int = 0
    bar_heights: tuple[int, ...] = ()
    tiers: tuple[str, ...] = ()
    hint: str | None = None

    def plain(self) -> str:
        return "\n".join(line.plain for line in self.lines)
