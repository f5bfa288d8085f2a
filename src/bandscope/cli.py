"""Command-line interface that prints a single rendered spectrum frame."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.text import Text

from . import __version__
from .logging_utils import setup_logging
from .paths import log_dir, settings_path
from .runtime_config import resolve_log_level
from .services.spectrum_source import SimulatedSpectrumSource
from .settings_store import apply_overrides, load_settings
from .version import build_help_epilog
from .visualizer.base import (
    Capturing,
    CaptureState,
    NoSignal,
    Paused,
    RenderRegion,
    SpectrumSnapshot,
)
from .visualizer.hints import PLATFORM_CHOICES
from .visualizer.renderer import render

CAPTURE_STATES = ("capturing", "paused", "none")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bandscope-frame",
        description="Render one spectrum frame to stdout.",
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
    parser.add_argument("--width", type=int, default=80, help="Frame width in cells.")
    parser.add_argument("--height", type=int, default=20, help="Frame height in cells.")
    parser.add_argument(
        "--state",
        choices=CAPTURE_STATES,
        default="capturing",
        help="Capture state to render.",
    )
    parser.add_argument(
        "--bands",
        type=_parse_bands,
        help="Comma-separated band magnitudes (default: simulated).",
    )
    parser.add_argument("--peak", type=float, help="Peak magnitude for the status line.")
    parser.add_argument("--tick-ms", type=int, help="Tick interval for the FPS hint.")
    parser.add_argument(
        "--platform",
        choices=PLATFORM_CHOICES,
        help="Platform used for the no-signal hint (default: auto-detect).",
    )
    parser.add_argument(
        "--plain", action="store_true", help="Print without colors or styles."
    )
    return parser


def _parse_bands(value: str) -> list[float]:
    try:
        return [float(part) for part in value.split(",") if part.strip()]
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid band list: {value!r}") from exc


def build_state(
    state: str, bands: list[float] | None, peak: float | None
) -> CaptureState:
    """Build the capture state a one-shot render should show."""
    if state == "none":
        return NoSignal()
    if bands is None:
        snapshot = SimulatedSpectrumSource().sample()
        if peak is not None:
            snapshot = SpectrumSnapshot.from_values(snapshot.bands, peak)
    else:
        snapshot = SpectrumSnapshot.from_values(
            bands, peak if peak is not None else max(bands, default=0.0)
        )
    if state == "paused":
        return Paused(snapshot)
    return Capturing(snapshot)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logger = logging.getLogger(__name__)
    try:
        level = resolve_log_level(verbose=args.verbose, quiet=args.quiet)
        setup_logging(
            log_dir=log_dir(),
            level=level,
            log_file=Path(args.log_file) if args.log_file else None,
            console=False,
        )
        settings = apply_overrides(
            load_settings(settings_path()),
            tick_interval_ms=args.tick_ms,
            platform=args.platform,
        )
        frame = render(
            RenderRegion(width=args.width, height=args.height),
            build_state(args.state, args.bands, args.peak),
            settings.render_config(),
        )
        logger.debug("Rendered one-shot frame", extra={"mode": frame.mode})
        if args.plain:
            print(frame.plain())
        else:
            Console(highlight=False).print(
                Text("\n").join(frame.lines), soft_wrap=True
            )
        return 0
    except Exception as exc:  # pragma: no cover - top-level safety net
        logger.exception("Unhandled error: %s", exc)
        print("Unexpected error. Re-run with --verbose for details.", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
