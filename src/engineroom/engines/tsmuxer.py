"""tsMuxeR engine definitions."""

from engineroom.engines.base import Engine, EngineFamily, ExecutableRole

_ROLES = (ExecutableRole.INSTALLED, ExecutableRole.BUNDLED, ExecutableRole.CUSTOM)

TSMUXER_VIDEO = Engine(
    id="tsmuxer_video",
    name="tsMuxeR",
    family=EngineFamily.TSMUXER,
    program="tsMuxeR",
    roles=_ROLES,
)

TSMUXER_AUDIO = Engine(
    id="tsmuxer_audio",
    name="tsMuxeR Audio",
    family=EngineFamily.TSMUXER,
    program="tsMuxeR",
    purpose="audio",
    roles=_ROLES,
)
