"""Configuration schema and validation for engineroom."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any

from engineroom.engines.base import ExecutableRole

_ROLE_VALUES = frozenset(role.value for role in ExecutableRole)

# Default engine priority, highest first.
DEFAULT_PRIORITY: tuple[str, ...] = (
    "ffmpeg_video",
    "avisynth_ffmpeg",
    "mencoder_video",
    "avisynth_mencoder",
    "tsmuxer_video",
    "ffmpeg_audio",
    "tsmuxer_audio",
    "ffmpeg_web_video",
    "vlc_web_video",
    "vlc_video",
    "mencoder_web_video",
    "vlc_audio_streaming",
    "vlc_video_streaming",
    "ffmpeg_dvrms_remux",
    "dcraw_thumbnailer",
)


def _str_tuple(value: Any) -> tuple[str, ...] | None:
    """Coerce a YAML list (or comma separated string) to a tuple of ids."""
    if value is None:
        return None
    if isinstance(value, str):
        value = value.split(",")
    if not isinstance(value, (list, tuple)):
        return None
    return tuple(str(item).strip() for item in value if str(item).strip())


def _executables(value: Any) -> dict[str, dict[str, str | None]] | None:
    """Coerce `{engine_id: {role: path}}`, dropping unknown roles."""
    if not isinstance(value, dict):
        return None
    result: dict[str, dict[str, str | None]] = {}
    for engine_id, paths in value.items():
        if not isinstance(paths, dict):
            continue
        result[str(engine_id)] = {
            str(role): (str(path) if path is not None else None)
            for role, path in paths.items()
            if str(role) in _ROLE_VALUES
        }
    return result


def _executable_roles(value: Any) -> dict[str, str] | None:
    if not isinstance(value, dict):
        return None
    return {
        str(engine_id): str(role)
        for engine_id, role in value.items()
        if str(role) in _ROLE_VALUES
    }


@dataclass
class EngineroomConfig:
    """Engineroom configuration schema.

    None values indicate "not set" and are inherited when merging.
    """

    # Engine ids, highest priority first
    priority: tuple[str, ...] | None = None
    disabled: tuple[str, ...] | None = None

    # engine id -> role -> path; an explicit None marks the role as undefined
    executables: dict[str, dict[str, str | None]] | None = None
    # engine id -> selected role
    executable_roles: dict[str, str] | None = None

    def merge(self, other: EngineroomConfig) -> EngineroomConfig:
        """Merge another config into this one.

        Values from `other` take precedence when they are not None. Executable
        paths are merged per engine and role. Returns a new instance.
        """
        executables: dict[str, dict[str, str | None]] | None = None
        if self.executables is not None or other.executables is not None:
            executables = {
                engine_id: dict(paths)
                for engine_id, paths in (self.executables or {}).items()
            }
            for engine_id, paths in (other.executables or {}).items():
                executables.setdefault(engine_id, {}).update(paths)

        executable_roles: dict[str, str] | None = None
        if self.executable_roles is not None or other.executable_roles is not None:
            executable_roles = {
                **(self.executable_roles or {}),
                **(other.executable_roles or {}),
            }

        return EngineroomConfig(
            priority=other.priority if other.priority is not None else self.priority,
            disabled=other.disabled if other.disabled is not None else self.disabled,
            executables=executables,
            executable_roles=executable_roles,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary, excluding None values."""
        result: dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None:
                continue
            result[f.name] = list(value) if isinstance(value, tuple) else value
        return result

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> EngineroomConfig:
        """Create an EngineroomConfig from a dictionary.

        Unknown keys are ignored. Type validation is performed.
        """
        return cls(
            priority=_str_tuple(data.get("priority")),
            disabled=_str_tuple(data.get("disabled")),
            executables=_executables(data.get("executables")),
            executable_roles=_executable_roles(data.get("executable_roles")),
        )


# Default configuration values (used when not specified anywhere)
DEFAULT_CONFIG = EngineroomConfig(
    priority=DEFAULT_PRIORITY,
    disabled=(),
    executables={},
    executable_roles={},
)
