"""Creation of starter configuration files."""

from pathlib import Path

from engineroom.config.loader import get_home_config_path, get_local_config_path, save_config
from engineroom.config.schema import DEFAULT_PRIORITY, EngineroomConfig


def write_default_config(local: bool = False, force: bool = False) -> Path | None:
    """Write a config file containing the default priority table.

    Args:
        local: If True, write ./.engineroom/config.yaml (project-local).
               If False, write ~/.engineroom/config.yaml (global, default).
        force: Overwrite an existing file.

    Returns:
        The path written, or None if a file already existed.
    """
    path = get_local_config_path() if local else get_home_config_path()
    if path.exists() and not force:
        return None
    save_config(EngineroomConfig(priority=DEFAULT_PRIORITY, disabled=()), path)
    return path
