"""Tests for runtime config precedence behavior."""

from __future__ import annotations

from bandscope.app import build_parser as app_build_parser
from bandscope.cli import build_parser as cli_build_parser
from bandscope.runtime_config import (
    DEFAULT_TICK_INTERVAL_MS,
    fps_hint,
    normalize_spectrum_source,
    normalize_tick_interval_ms,
    resolve_log_level,
)


def test_resolve_log_level_precedence_matrix() -> None:
    assert resolve_log_level(verbose=False, quiet=False) == "INFO"
    assert resolve_log_level(verbose=True, quiet=False) == "DEBUG"
    assert resolve_log_level(verbose=False, quiet=True) == "WARNING"
    assert resolve_log_level(verbose=True, quiet=True) == "WARNING"


def test_log_resolution_consistent_across_entrypoints() -> None:
    for parser in (app_build_parser(), cli_build_parser()):
        args = parser.parse_args(["--tick-ms", "100", "--verbose", "--quiet"])
        assert args.tick_ms == 100
        assert resolve_log_level(verbose=args.verbose, quiet=args.quiet) == "WARNING"


def test_tick_interval_normalization() -> None:
    assert normalize_tick_interval_ms(100) == 100
    assert normalize_tick_interval_ms(0) == 10
    assert normalize_tick_interval_ms(5000) == 1000
    assert normalize_tick_interval_ms("fast") == DEFAULT_TICK_INTERVAL_MS
    assert normalize_tick_interval_ms(None) == DEFAULT_TICK_INTERVAL_MS
    assert normalize_tick_interval_ms(True) == DEFAULT_TICK_INTERVAL_MS


def test_fps_hint_is_integer_division() -> None:
    assert fps_hint(250) == 4
    assert fps_hint(100) == 10
    assert fps_hint(30) == 33
    assert fps_hint(0) == 1000


def test_spectrum_source_normalization() -> None:
    assert normalize_spectrum_source(" NONE ") == "none"
    assert normalize_spectrum_source("simulated") == "simulated"
    assert normalize_spectrum_source("pulse") == "simulated"
