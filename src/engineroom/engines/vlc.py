"""VLC engine definitions.

VLC gives no usable feedback on stdout, so these engines are never probed.
"""

from engineroom.engines.base import Engine, EngineFamily, ExecutableRole

_ROLES = (ExecutableRole.INSTALLED, ExecutableRole.CUSTOM)

VLC_VIDEO = Engine(
    id="vlc_video",
    name="VLC",
    family=EngineFamily.VLC,
    program="vlc",
    roles=_ROLES,
)

VLC_WEB_VIDEO = Engine(
    id="vlc_web_video",
    name="VLC Web Video",
    family=EngineFamily.VLC,
    program="vlc",
    purpose="web",
    roles=_ROLES,
)

VLC_AUDIO_STREAMING = Engine(
    id="vlc_audio_streaming",
    name="VLC Audio Streaming",
    family=EngineFamily.VLC,
    program="vlc",
    purpose="audio",
    roles=_ROLES,
)

VLC_VIDEO_STREAMING = Engine(
    id="vlc_video_streaming",
    name="VLC Video Streaming",
    family=EngineFamily.VLC,
    program="vlc",
    purpose="web",
    roles=_ROLES,
)
