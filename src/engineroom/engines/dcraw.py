"""dcraw thumbnailer definition."""

from engineroom.engines.base import Engine, EngineFamily, ExecutableRole

DCRAW_THUMBNAILER = Engine(
    id="dcraw_thumbnailer",
    name="dcraw Thumbnailer",
    family=EngineFamily.DCRAW,
    program="dcraw",
    purpose="thumbnail",
    roles=(ExecutableRole.INSTALLED, ExecutableRole.BUNDLED, ExecutableRole.CUSTOM),
)
