"""Spectrum producer boundary.

Sources expose two independently sampled signals: the latest snapshot and
whether capture is active. `resolve_capture_state` collapses them into one
`CaptureState` per tick so the renderer never has to reconcile them.
"""

from __future__ import annotations

import logging
import math
import time
from collections.abc import Callable
from typing import Protocol

from ..visualizer.base import (
    BAND_COUNT,
    Capturing,
    CaptureState,
    NoSignal,
    Paused,
    SpectrumSnapshot,
)

logger = logging.getLogger(__name__)


class SpectrumSource(Protocol):
    """Protocol every spectrum producer must satisfy."""

    def get_spectrum_snapshot(self) -> SpectrumSnapshot | None: ...
    def is_capture_active(self) -> bool: ...


def resolve_capture_state(source: SpectrumSource) -> CaptureState:
    """Sample `source` once and return the authoritative capture state.

    Snapshot absence always means no signal; the active flag only chooses
    between capturing and paused. A faulting source is treated as silent.
    """
    try:
        snapshot = source.get_spectrum_snapshot()
        if snapshot is None:
            return NoSignal()
        active = bool(source.is_capture_active())
    except Exception as exc:
        logger.exception("Spectrum source failed: %s", exc)
        return NoSignal()
    if active:
        return Capturing(snapshot)
    return Paused(snapshot)


class NullSpectrumSource:
    """Source with no capture device; always reports no signal."""

    def get_spectrum_snapshot(self) -> SpectrumSnapshot | None:
        return None

    def is_capture_active(self) -> bool:
        return False


class SimulatedSpectrumSource:
    """Deterministic synthetic spectrum for demos and tests.

    Bands follow phase-shifted sine waves with a gentle low-frequency tilt.
    Pausing freezes the last snapshot rather than dropping it.
    """

    def __init__(self, *, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._origin = clock()
        self._active = True
        self._frozen: SpectrumSnapshot | None = None

    def pause(self) -> None:
        if self._active:
            self._frozen = self.sample()
            self._active = False
            logger.info("Simulated capture paused")

    def resume(self) -> None:
        if not self._active:
            self._active = True
            self._frozen = None
            logger.info("Simulated capture resumed")

    def toggle(self) -> bool:
        """Flip pause state; return whether capture is now active."""
        if self._active:
            self.pause()
        else:
            self.resume()
        return self._active

    def get_spectrum_snapshot(self) -> SpectrumSnapshot | None:
        if not self._active and self._frozen is not None:
            return self._frozen
        return self.sample()

    def is_capture_active(self) -> bool:
        return self._active

    def sample(self) -> SpectrumSnapshot:
        """Synthesize the spectrum for the current clock reading."""
        t = self._clock() - self._origin
        bands = []
        for idx in range(BAND_COUNT):
            tilt = 1.0 - (idx / (BAND_COUNT * 1.6))
            wave = 0.5 + 0.5 * math.sin((t * (2.1 + idx * 0.37)) + idx * 0.9)
            bands.append(0.08 + 0.82 * tilt * wave)
        return SpectrumSnapshot.from_values(bands, peak=max(bands))


def build_source(name: str) -> SpectrumSource:
    logger.info("Spectrum source selected: %s", name)
    if name == "none":
        return NullSpectrumSource()
    return SimulatedSpectrumSource()
