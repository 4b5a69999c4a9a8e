"""Base engine definition."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Protocol


class EngineFamily(str, Enum):
    """Backing tool of an engine. Selects how its executable is probed."""

    FFMPEG = "ffmpeg"
    MENCODER = "mencoder"
    TSMUXER = "tsmuxer"
    DCRAW = "dcraw"
    VLC = "vlc"


class ExecutableRole(str, Enum):
    """Variant of an engine's backing executable."""

    BUNDLED = "bundled"
    INSTALLED = "installed"
    CUSTOM = "custom"


class Resource(Protocol):
    """A media resource an engine may be asked to transcode."""

    name: str

    def is_compatible(self, engine: Engine) -> bool:
        """Return True if `engine` can handle this resource."""
        ...


@dataclass(frozen=True)
class Engine:
    """Definition of a transcoding engine."""

    id: str
    name: str
    family: EngineFamily
    program: str  # Default executable name, looked up in PATH
    purpose: str = "video"
    roles: tuple[ExecutableRole, ...] = (ExecutableRole.INSTALLED,)
    default_role: ExecutableRole = ExecutableRole.INSTALLED
    requires_avisynth: bool = False

    def __str__(self) -> str:
        return self.name

    def default_path(self, role: ExecutableRole) -> str | None:
        """Return the executable used for `role` when none is configured."""
        if role == ExecutableRole.INSTALLED:
            return self.program
        return None

    def is_compatible(self, resource: Resource) -> bool:
        """Check whether this engine can handle `resource`."""
        return resource.is_compatible(self)
