"""Spectrum rendering subsystem."""

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
    SpectrumSnapshot,
    Theme,
)
from .hints import TargetPlatform
from .renderer import render

__all__ = [
    "BAND_COUNT",
    "BAND_LABELS",
    "Capturing",
    "CaptureState",
    "Frame",
    "NoSignal",
    "Paused",
    "RenderConfig",
    "RenderRegion",
    "SpectrumSnapshot",
    "TargetPlatform",
    "Theme",
    "render",
]
