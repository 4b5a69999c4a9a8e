"""Errors raised while verifying transcoding engines.

Every subclass of EngineUnavailableError describes one reason an executable
cannot be used. The registry absorbs them into the engine's availability
record, so none of them escape registration.
"""

from __future__ import annotations

from pathlib import Path

from engineroom import messages


class EngineUnavailableError(Exception):
    """Base class for conditions that make an engine executable unusable."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(reason)


class ExecutableNotDefinedError(EngineUnavailableError):
    """No path is configured for the executable."""

    def __init__(self, engine: object) -> None:
        self.engine = engine
        super().__init__(messages.EXECUTABLE_NOT_DEFINED.format(engine=engine))


class PlatformIncompatibleError(EngineUnavailableError):
    """The engine needs a capability the host platform does not offer."""

    def __init__(self, engine: object) -> None:
        self.engine = engine
        super().__init__(messages.PLATFORM_INCOMPATIBLE.format(engine=engine))


class ExecutableNotFoundError(EngineUnavailableError):
    """The resolved executable path does not exist."""

    def __init__(self, path: Path, engine: object) -> None:
        self.path = path
        self.engine = engine
        super().__init__(messages.EXECUTABLE_NOT_FOUND.format(path=path, engine=engine))


class ExecutablePermissionError(EngineUnavailableError):
    """The executable exists but may not be executed."""

    def __init__(self, path: Path, engine: object) -> None:
        self.path = path
        self.engine = engine
        super().__init__(
            messages.MISSING_EXECUTE_PERMISSION.format(path=path, engine=engine)
        )


class AviSynthMissingError(EngineUnavailableError):
    """An AviSynth engine is registered on a Windows host without AviSynth."""

    def __init__(self, engine: object) -> None:
        self.engine = engine
        super().__init__(messages.AVISYNTH_NOT_FOUND.format(engine=engine))


class ProbeLaunchError(EngineUnavailableError):
    """The probe process could not be started."""


class ProbeRejectedError(EngineUnavailableError):
    """The probe process ran but signalled failure."""
