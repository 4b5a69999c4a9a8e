"""Host platform detection."""

from __future__ import annotations

import os
import platform
import sys
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

_64BIT_MACHINES = frozenset({"x86_64", "amd64", "aarch64", "arm64", "ppc64le", "s390x"})


def _avisynth_installed() -> bool:
    """Check for the AviSynth frameserver library in the Windows system folder."""
    system_root = os.environ.get("SystemRoot", r"C:\Windows")
    candidates = (
        Path(system_root) / "System32" / "avisynth.dll",
        Path(system_root) / "SysWOW64" / "avisynth.dll",
    )
    return any(candidate.is_file() for candidate in candidates)


@dataclass(frozen=True)
class HostPlatform:
    """Facts about the host that influence executable resolution and probing."""

    is_windows: bool = False
    is_linux: bool = False
    is_64bit: bool = False
    avisynth_check: Callable[[], bool] = field(
        default=lambda: False, compare=False, repr=False
    )

    def has_avisynth(self) -> bool:
        """Return True if AviSynth is installed. Always False off Windows."""
        return self.is_windows and self.avisynth_check()

    @classmethod
    def current(cls) -> HostPlatform:
        """Detect the platform this process runs on."""
        is_windows = sys.platform.startswith("win")
        return cls(
            is_windows=is_windows,
            is_linux=sys.platform.startswith("linux"),
            is_64bit=platform.machine().lower() in _64BIT_MACHINES,
            avisynth_check=_avisynth_installed if is_windows else (lambda: False),
        )
