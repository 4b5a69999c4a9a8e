"""Configuration for engineroom."""

from engineroom.config.loader import (
    ConfigError,
    get_home_config_path,
    get_local_config_path,
    load_config,
    save_config,
)
from engineroom.config.schema import DEFAULT_CONFIG, DEFAULT_PRIORITY, EngineroomConfig
from engineroom.config.settings import ConfigEngineSettings, EngineSettings

__all__ = [
    "ConfigEngineSettings",
    "ConfigError",
    "DEFAULT_CONFIG",
    "DEFAULT_PRIORITY",
    "EngineSettings",
    "EngineroomConfig",
    "get_home_config_path",
    "get_local_config_path",
    "load_config",
    "save_config",
]
