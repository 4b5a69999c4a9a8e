"""Transcoding engine definitions and the built-in catalogue."""

from __future__ import annotations

from typing import TYPE_CHECKING

from engineroom.engines.base import Engine, EngineFamily, ExecutableRole, Resource
from engineroom.engines.dcraw import DCRAW_THUMBNAILER
from engineroom.engines.ffmpeg import (
    AVISYNTH_FFMPEG,
    FFMPEG_AUDIO,
    FFMPEG_DVRMS_REMUX,
    FFMPEG_VIDEO,
    FFMPEG_WEB_VIDEO,
)
from engineroom.engines.mencoder import (
    AVISYNTH_MENCODER,
    MENCODER_VIDEO,
    MENCODER_WEB_VIDEO,
)
from engineroom.engines.state import (
    Availability,
    AvailabilityStatus,
    EngineState,
    ExecutableStates,
)
from engineroom.engines.tsmuxer import TSMUXER_AUDIO, TSMUXER_VIDEO
from engineroom.engines.vlc import (
    VLC_AUDIO_STREAMING,
    VLC_VIDEO,
    VLC_VIDEO_STREAMING,
    VLC_WEB_VIDEO,
)
from engineroom.host import HostPlatform

if TYPE_CHECKING:
    from engineroom.registry import EngineRegistry

__all__ = [
    "Availability",
    "AvailabilityStatus",
    "BUILTIN_ENGINES",
    "Engine",
    "EngineFamily",
    "EngineState",
    "ExecutableRole",
    "ExecutableStates",
    "Resource",
    "WINDOWS_ENGINES",
    "builtin_engines",
    "get_engine_by_id",
    "register_builtin_engines",
]

WINDOWS_ENGINES: tuple[Engine, ...] = (
    AVISYNTH_FFMPEG,
    AVISYNTH_MENCODER,
    FFMPEG_DVRMS_REMUX,
)

BUILTIN_ENGINES: tuple[Engine, ...] = (
    FFMPEG_AUDIO,
    MENCODER_VIDEO,
    FFMPEG_VIDEO,
    VLC_VIDEO,
    FFMPEG_WEB_VIDEO,
    MENCODER_WEB_VIDEO,
    VLC_WEB_VIDEO,
    TSMUXER_VIDEO,
    TSMUXER_AUDIO,
    VLC_AUDIO_STREAMING,
    VLC_VIDEO_STREAMING,
    DCRAW_THUMBNAILER,
)


def builtin_engines(host: HostPlatform) -> list[Engine]:
    """Return the built-in engines in registration order for `host`."""
    engines = list(WINDOWS_ENGINES) if host.is_windows else []
    engines.extend(BUILTIN_ENGINES)
    return engines


def get_engine_by_id(engine_id: str) -> Engine | None:
    """Find a built-in engine by id or display name (case-insensitive)."""
    wanted = engine_id.lower()
    for engine in (*WINDOWS_ENGINES, *BUILTIN_ENGINES):
        if engine.id == wanted or engine.name.lower() == wanted:
            return engine
    return None


def register_builtin_engines(registry: EngineRegistry) -> None:
    """Register every built-in engine supported on the registry's host."""
    for engine in builtin_engines(registry.host):
        registry.register(engine)
