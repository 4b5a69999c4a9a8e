"""FFmpeg engine definitions."""

from engineroom.engines.base import Engine, EngineFamily, ExecutableRole

_ROLES = (ExecutableRole.INSTALLED, ExecutableRole.BUNDLED, ExecutableRole.CUSTOM)

FFMPEG_VIDEO = Engine(
    id="ffmpeg_video",
    name="FFmpeg",
    family=EngineFamily.FFMPEG,
    program="ffmpeg",
    roles=_ROLES,
)

FFMPEG_AUDIO = Engine(
    id="ffmpeg_audio",
    name="FFmpeg Audio",
    family=EngineFamily.FFMPEG,
    program="ffmpeg",
    purpose="audio",
    roles=_ROLES,
)

FFMPEG_WEB_VIDEO = Engine(
    id="ffmpeg_web_video",
    name="FFmpeg Web Video",
    family=EngineFamily.FFMPEG,
    program="ffmpeg",
    purpose="web",
    roles=_ROLES,
)

# Windows only
FFMPEG_DVRMS_REMUX = Engine(
    id="ffmpeg_dvrms_remux",
    name="FFmpeg DVR-MS Remux",
    family=EngineFamily.FFMPEG,
    program="ffmpeg",
    roles=_ROLES,
)

AVISYNTH_FFMPEG = Engine(
    id="avisynth_ffmpeg",
    name="AviSynth/FFmpeg",
    family=EngineFamily.FFMPEG,
    program="ffmpeg",
    roles=_ROLES,
    requires_avisynth=True,
)
