"""Tests for target platform resolution and remediation hints."""

from __future__ import annotations

import pytest

from bandscope.visualizer.hints import (
    PLATFORM_CHOICES,
    TargetPlatform,
    remediation_hint,
    resolve_target_platform,
)


@pytest.mark.parametrize(
    ("system", "expected"),
    [
        ("Linux", TargetPlatform.LINUX),
        ("Windows", TargetPlatform.WINDOWS),
        ("Darwin", TargetPlatform.MACOS),
        ("FreeBSD", TargetPlatform.OTHER),
        ("", TargetPlatform.OTHER),
    ],
)
def test_resolve_target_platform_from_system_name(
    system: str, expected: TargetPlatform
) -> None:
    assert resolve_target_platform(system=system) is expected


def test_explicit_override_wins_over_detection() -> None:
    assert resolve_target_platform("macos", system="Linux") is TargetPlatform.MACOS
    assert resolve_target_platform("OTHER", system="Windows") is TargetPlatform.OTHER


def test_auto_and_unknown_override_fall_back_to_detection(caplog) -> None:
    assert resolve_target_platform("auto", system="Windows") is TargetPlatform.WINDOWS
    assert resolve_target_platform("amiga", system="Linux") is TargetPlatform.LINUX
    assert any("Unknown platform override" in r.getMessage() for r in caplog.records)


def test_each_platform_has_its_own_hint() -> None:
    hints = {target: remediation_hint(target) for target in TargetPlatform}
    assert len(set(hints.values())) == len(TargetPlatform)
    assert "monitor device" in hints[TargetPlatform.LINUX]
    assert "automatically on Windows" in hints[TargetPlatform.WINDOWS]
    assert "BlackHole" in hints[TargetPlatform.MACOS]
    assert "may not be supported" in hints[TargetPlatform.OTHER]
    assert all(hint.startswith("Hint: ") for hint in hints.values())


def test_platform_choices_include_auto() -> None:
    assert PLATFORM_CHOICES == ("auto", "linux", "windows", "macos", "other")
