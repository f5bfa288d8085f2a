"""Runtime configuration normalization helpers.

These helpers keep CLI flag and persisted-setting interpretation
deterministic across entrypoints.
"""

from __future__ import annotations

DEFAULT_TICK_INTERVAL_MS = 250
MIN_TICK_INTERVAL_MS = 10
MAX_TICK_INTERVAL_MS = 1000
SPECTRUM_SOURCES = ("simulated", "none")


def resolve_log_level(*, verbose: bool, quiet: bool) -> str:
    """Resolve effective log level from CLI flags.

    Precedence is deterministic: --quiet overrides --verbose.
    """
    if quiet:
        return "WARNING"
    if verbose:
        return "DEBUG"
    return "INFO"


def normalize_tick_interval_ms(value: object) -> int:
    """Clamp a tick interval to the supported range, defaulting bad input."""
    if isinstance(value, bool) or not isinstance(value, int):
        return DEFAULT_TICK_INTERVAL_MS
    return max(MIN_TICK_INTERVAL_MS, min(value, MAX_TICK_INTERVAL_MS))


def fps_hint(tick_interval_ms: int) -> int:
    """Informational frames-per-second figure shown in the chart title."""
    return 1000 // max(1, tick_interval_ms)


def normalize_spectrum_source(value: str) -> str:
    normalized = value.strip().lower()
    if normalized in SPECTRUM_SOURCES:
        return normalized
    return "simulated"
