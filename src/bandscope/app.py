"""Textual TUI app for bandscope."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from textual.app import App, ComposeResult
from textual.timer import Timer
from textual.widgets import Footer

from . import __version__
from .events import CaptureModeChanged
from .logging_utils import setup_logging
from .paths import log_dir, settings_path
from .runtime_config import SPECTRUM_SOURCES, resolve_log_level
from .services.spectrum_source import (
    SimulatedSpectrumSource,
    SpectrumSource,
    build_source,
    resolve_capture_state,
)
from .settings_store import apply_overrides, load_settings, save_settings
from .ui.spectrum_pane import SpectrumPane
from .version import build_help_epilog
from .visualizer.base import RenderConfig
from .visualizer.hints import PLATFORM_CHOICES
from .visualizer.renderer import render

logger = logging.getLogger(__name__)
_SUB_TITLES = {"paused": "paused", "no_signal": "no signal"}


class BandscopeApp(App):
    TITLE = "bandscope"
    CSS = """
    Screen {
        layout: vertical;
    }

    #spectrum-pane {
        height: 1fr;
    }
    """
    BINDINGS = [
        ("space", "toggle_capture", "Pause/Resume"),
        ("q", "quit", "Quit"),
    ]

    def __init__(
        self,
        *,
        config: RenderConfig | None = None,
        source: SpectrumSource | None = None,
    ) -> None:
        super().__init__()
        self.render_config = config or RenderConfig()
        self.source: SpectrumSource = source or SimulatedSpectrumSource()
        self._tick_timer: Timer | None = None

    def compose(self) -> ComposeResult:
        yield SpectrumPane(id="spectrum-pane")
        yield Footer()

    def on_mount(self) -> None:
        interval = self.render_config.tick_interval_ms / 1000.0
        logger.info(
            "Spectrum refresh started",
            extra={
                "event": "refresh_started",
                "tick_interval_ms": self.render_config.tick_interval_ms,
                "platform": self.render_config.platform.value,
            },
        )
        self.render_tick()
        self._tick_timer = self.set_interval(interval, self.render_tick)

    def on_unmount(self) -> None:
        if self._tick_timer is not None:
            self._tick_timer.stop()
            self._tick_timer = None

    def render_tick(self) -> None:
        """Sample the source once and redraw the pane for this tick."""
        pane = self.query_one(SpectrumPane)
        state = resolve_capture_state(self.source)
        try:
            frame = render(pane.render_region(), state, self.render_config)
        except Exception as exc:
            logger.exception("Spectrum render failed: %s", exc)
            pane.show_error("Visualizer unavailable")
            return
        pane.show_frame(frame)

    def on_capture_mode_changed(self, event: CaptureModeChanged) -> None:
        logger.info(
            "Capture mode changed",
            extra={
                "event": "capture_mode_changed",
                "previous": event.previous,
                "current": event.current,
            },
        )
        self.sub_title = _SUB_TITLES.get(event.current, "")

    def action_toggle_capture(self) -> None:
        toggle = getattr(self.source, "toggle", None)
        if not callable(toggle):
            self.notify("This source cannot be paused.")
            return
        active = toggle()
        logger.info("Capture %s by user", "resumed" if active else "paused")
        self.render_tick()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bandscope",
        description="Live terminal audio spectrum display.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=build_help_epilog(),
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument("--verbose", action="store_true", help="Enable verbose output")
    parser.add_argument(
        "--quiet", action="store_true", help="Only show warnings and errors"
    )
    parser.add_argument("--log-file", help="Write logs to a file path")
    parser.add_argument(
        "--tick-ms",
        type=int,
        help="Redraw interval in milliseconds (clamped to 10-1000).",
    )
    parser.add_argument(
        "--source",
        choices=SPECTRUM_SOURCES,
        help="Spectrum source to display (simulated or none).",
    )
    parser.add_argument(
        "--platform",
        choices=PLATFORM_CHOICES,
        help="Platform used for the no-signal hint (default: auto-detect).",
    )
    parser.add_argument(
        "--save-settings",
        action="store_true",
        help="Persist the effective settings for future runs.",
    )
    return parser


def main() -> int:
    parser = build_parser()
    args = parser.parse_args()
    try:
        level = resolve_log_level(verbose=args.verbose, quiet=args.quiet)
        setup_logging(
            log_dir=log_dir(),
            level=level,
            log_file=Path(args.log_file) if args.log_file else None,
            console=False,
        )
        logger.info("Starting bandscope TUI")
        path = settings_path()
        settings = apply_overrides(
            load_settings(path),
            tick_interval_ms=args.tick_ms,
            source=args.source,
            platform=args.platform,
        )
        if args.save_settings:
            save_settings(path, settings)
            logger.info("Settings saved to %s", path)
        BandscopeApp(
            config=settings.render_config(),
            source=build_source(settings.source),
        ).run()
        return 0
    except Exception as exc:  # pragma: no cover - top-level safety net
        logger.exception("Fatal startup error: %s", exc)
        print(
            "Startup failed. Verify settings/log paths and re-run with --verbose.",
            file=sys.stderr,
        )
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
