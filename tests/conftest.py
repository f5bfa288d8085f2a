"""Test configuration."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

import bandscope.paths as paths  # noqa: E402


class FakeAppDirs:
    """Minimal AppDirs stand-in used to control path roots during tests."""

    def __init__(self, data_dir: Path, config_dir: Path) -> None:
        self.user_data_dir = str(data_dir)
        self.user_config_dir = str(config_dir)


@pytest.fixture(autouse=True)
def isolated_app_dirs(tmp_path, monkeypatch: pytest.MonkeyPatch):
    """Keep per-user data/config writes inside the test's tmp directory."""
    data_dir = tmp_path / "user-data"
    config_dir = tmp_path / "user-config"

    def fake_app_dirs(app_name: str, appauthor: bool | None = None) -> FakeAppDirs:
        del app_name, appauthor
        return FakeAppDirs(data_dir, config_dir)

    monkeypatch.setattr(paths, "AppDirs", fake_app_dirs)
    paths.get_app_dirs.cache_clear()
    yield
    paths.get_app_dirs.cache_clear()
