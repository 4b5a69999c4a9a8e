"""Resolution of configured executable paths to concrete files."""

from __future__ import annotations

import logging
import os
from pathlib import Path, PurePosixPath, PureWindowsPath

from engineroom.engines.base import Engine
from engineroom.errors import (
    ExecutableNotDefinedError,
    ExecutableNotFoundError,
    ExecutablePermissionError,
    PlatformIncompatibleError,
)
from engineroom.host import HostPlatform

logger = logging.getLogger(__name__)

WINDOWS_EXTENSIONS = frozenset({"exe", "com", "bat"})
WINDOWS_DEFAULT_EXTENSION = ".exe"


def resolve_executable(
    configured: str | None, engine: Engine, host: HostPlatform
) -> str:
    """Turn a configured executable path into the path to probe and run.

    Bare file names are returned as they are and left to the PATH lookup at
    execution time. Anything with a directory component is made absolute
    and checked with `check_executable`.

    Raises:
        ExecutableNotDefinedError: No path is configured.
        PlatformIncompatibleError: The engine needs AviSynth and the host is
            not Windows.
        ExecutableNotFoundError: The resolved file does not exist.
        ExecutablePermissionError: The resolved file is not executable.
    """
    if not configured:
        raise ExecutableNotDefinedError(engine)

    if engine.requires_avisynth and not host.is_windows:
        raise PlatformIncompatibleError(engine)

    executable = configured
    pure: PurePosixPath | PureWindowsPath
    if host.is_windows:
        pure = PureWindowsPath(executable)
        if pure.suffix[1:].lower() not in WINDOWS_EXTENSIONS:
            executable += WINDOWS_DEFAULT_EXTENSION
            pure = PureWindowsPath(executable)
    else:
        pure = PurePosixPath(executable)

    if pure.name == executable:
        return executable

    absolute = Path(executable).absolute()
    check_executable(absolute, engine)
    return str(absolute)


def check_executable(path: Path, engine: Engine) -> None:
    """Verify that `path` exists and may be executed.

    Raises:
        ExecutableNotFoundError: `path` does not exist.
        ExecutablePermissionError: `path` is not an executable file.
    """
    if not path.exists():
        raise ExecutableNotFoundError(path, engine)
    if not path.is_file() or not os.access(path, os.X_OK):
        raise ExecutablePermissionError(path, engine)
