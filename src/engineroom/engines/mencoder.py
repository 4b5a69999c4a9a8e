"""MEncoder engine definitions."""

from engineroom.engines.base import Engine, EngineFamily, ExecutableRole

_ROLES = (ExecutableRole.INSTALLED, ExecutableRole.BUNDLED, ExecutableRole.CUSTOM)

MENCODER_VIDEO = Engine(
    id="mencoder_video",
    name="MEncoder",
    family=EngineFamily.MENCODER,
    program="mencoder",
    roles=_ROLES,
)

MENCODER_WEB_VIDEO = Engine(
    id="mencoder_web_video",
    name="MEncoder Web Video",
    family=EngineFamily.MENCODER,
    program="mencoder",
    purpose="web",
    roles=_ROLES,
)

AVISYNTH_MENCODER = Engine(
    id="avisynth_mencoder",
    name="AviSynth/MEncoder",
    family=EngineFamily.MENCODER,
    program="mencoder",
    roles=_ROLES,
    requires_avisynth=True,
)
