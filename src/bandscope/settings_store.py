"""JSON persistence for user-facing display settings.

The store is tolerant of invalid/missing values so upgrades and
partial/corrupt writes degrade to safe defaults instead of aborting startup.
"""

from __future__ import annotations

import json
import logging
from contextlib import suppress
from dataclasses import asdict, dataclass, replace
from pathlib import Path
from typing import Any
from uuid import uuid4

from .runtime_config import (
    DEFAULT_TICK_INTERVAL_MS,
    normalize_spectrum_source,
    normalize_tick_interval_ms,
)
from .visualizer.base import RenderConfig, Theme
from .visualizer.hints import PLATFORM_CHOICES, resolve_target_platform

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Settings:
    """Persisted settings loaded at startup; CLI flags override them."""

    tick_interval_ms: int = DEFAULT_TICK_INTERVAL_MS
    theme_text: str = "#FFFFFF"
    theme_inactive: str = "#808080"
    source: str = "simulated"
    platform: str = "auto"
    log_level: str = "INFO"

    def render_config(self) -> RenderConfig:
        """Freeze these settings into the renderer's read-only config."""
        return RenderConfig(
            theme=Theme(text=self.theme_text, inactive=self.theme_inactive),
            tick_interval_ms=normalize_tick_interval_ms(self.tick_interval_ms),
            platform=resolve_target_platform(self.platform),
        )


def _coerce_settings(data: dict[str, Any]) -> Settings:
    def _str_or_default(value: Any, default: str) -> str:
        if isinstance(value, str) and value.strip():
            return value
        return default

    platform_value = _str_or_default(data.get("platform"), "auto").lower()
    return Settings(
        tick_interval_ms=normalize_tick_interval_ms(data.get("tick_interval_ms")),
        theme_text=_str_or_default(data.get("theme_text"), "#FFFFFF"),
        theme_inactive=_str_or_default(data.get("theme_inactive"), "#808080"),
        source=normalize_spectrum_source(
            _str_or_default(data.get("source"), "simulated")
        ),
        platform=platform_value if platform_value in PLATFORM_CHOICES else "auto",
        log_level=_str_or_default(data.get("log_level"), "INFO"),
    )


def load_settings(path: Path) -> Settings:
    """Load settings from disk, falling back to defaults."""
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        logger.info("Settings file missing at %s; using defaults.", path)
        return Settings()
    except OSError as exc:
        logger.warning("Failed to read settings file %s: %s; using defaults.", path, exc)
        return Settings()

    try:
        data = json.loads(raw)
    except json.JSONDecodeError:
        logger.warning("Settings file at %s is invalid JSON; using defaults.", path)
        return Settings()

    if not isinstance(data, dict):
        logger.warning("Settings file at %s is not a JSON object; using defaults.", path)
        return Settings()

    return _coerce_settings(data)


def save_settings(path: Path, settings: Settings) -> None:
    """Persist settings atomically to disk via write-then-replace."""
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = path.with_name(f"{path.name}.{uuid4().hex}.tmp")
    payload = json.dumps(asdict(settings), indent=2, sort_keys=True)
    try:
        tmp_path.write_text(payload, encoding="utf-8")
        tmp_path.replace(path)
    finally:
        with suppress(OSError):
            tmp_path.unlink()


def apply_overrides(
    settings: Settings,
    *,
    tick_interval_ms: int | None = None,
    source: str | None = None,
    platform: str | None = None,
) -> Settings:
    """Layer explicit CLI values over persisted settings."""
    changes: dict[str, Any] = {}
    if tick_interval_ms is not None:
        changes["tick_interval_ms"] = normalize_tick_interval_ms(tick_interval_ms)
    if source is not None:
        changes["source"] = normalize_spectrum_source(source)
    if platform is not None and platform.lower() in PLATFORM_CHOICES:
        changes["platform"] = platform.lower()
    return replace(settings, **changes) if changes else settings
