"""Target-platform resolution and no-signal remediation hints."""

from __future__ import annotations

import logging
import platform
from enum import Enum

logger = logging.getLogger(__name__)


class TargetPlatform(str, Enum):
    LINUX = "linux"
    WINDOWS = "windows"
    MACOS = "macos"
    OTHER = "other"


PLATFORM_CHOICES = ("auto",) + tuple(item.value for item in TargetPlatform)

_REMEDIATION_HINTS = {
    TargetPlatform.LINUX: (
        "Hint: Ensure PipeWire or PulseAudio is running with a monitor device"
    ),
    TargetPlatform.WINDOWS: "Hint: Audio loopback should work automatically on Windows",
    TargetPlatform.MACOS: "Hint: macOS requires a virtual audio device like BlackHole",
    TargetPlatform.OTHER: "Hint: Audio capture may not be supported on this platform",
}

_SYSTEM_NAMES = {
    "linux": TargetPlatform.LINUX,
    "windows": TargetPlatform.WINDOWS,
    "darwin": TargetPlatform.MACOS,
}


def resolve_target_platform(
    override: str | None = None, *, system: str | None = None
) -> TargetPlatform:
    """Resolve the target platform once at startup.

    An explicit override (other than ``auto``) wins; otherwise the host's
    ``platform.system()`` name is mapped. Unknown names resolve to OTHER.
    """
    if override is not None:
        normalized = override.strip().lower()
        if normalized and normalized != "auto":
            try:
                return TargetPlatform(normalized)
            except ValueError:
                logger.warning("Unknown platform override '%s'; detecting.", override)
    name = (system if system is not None else platform.system()).strip().lower()
    resolved = _SYSTEM_NAMES.get(name, TargetPlatform.OTHER)
    logger.debug("Target platform resolved: %s", resolved.value)
    return resolved


def remediation_hint(target: TargetPlatform) -> str:
    return _REMEDIATION_HINTS[target]
