"""Configuration file loading and merging."""

import logging
import os
from pathlib import Path

import yaml

from engineroom.config.schema import DEFAULT_CONFIG, EngineroomConfig

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "config.yaml"
PRIORITY_ENV = "ENGINEROOM_PRIORITY"


class ConfigError(Exception):
    """Raised when a config file cannot be parsed."""


def get_home_config_path() -> Path:
    """Get path to global config: ~/.engineroom/config.yaml."""
    return Path.home() / ".engineroom" / CONFIG_FILENAME


def get_local_config_path() -> Path:
    """Get path to local config: ./.engineroom/config.yaml."""
    return Path.cwd() / ".engineroom" / CONFIG_FILENAME


def home_config_exists() -> bool:
    """Check if the global home config exists."""
    return get_home_config_path().exists()


def local_config_exists() -> bool:
    """Check if the local project config exists."""
    return get_local_config_path().exists()


def load_yaml_config(path: Path, strict: bool = False) -> dict[str, object] | None:
    """Load a YAML config file, return None if not found or empty.

    Invalid YAML is logged and ignored unless `strict` is set, in which case
    ConfigError is raised.
    """
    if not path.exists():
        return None
    try:
        with path.open() as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        if strict:
            raise ConfigError(f"Invalid YAML in {path}: {e}") from e
        logger.warning("Ignoring invalid config file %s", path)
        return None
    if data is None:
        return None
    if not isinstance(data, dict):
        if strict:
            raise ConfigError(f"{path} must contain a mapping")
        return None
    result: dict[str, object] = data
    return result


def load_config(strict: bool = False) -> EngineroomConfig:
    """Load merged configuration.

    Precedence (lowest to highest):
    1. Built-in defaults
    2. Global config (~/.engineroom/config.yaml)
    3. Local config (./.engineroom/config.yaml)
    4. ENGINEROOM_PRIORITY environment variable (comma separated ids)

    Returns merged EngineroomConfig.
    """
    config = DEFAULT_CONFIG

    for path in (get_home_config_path(), get_local_config_path()):
        data = load_yaml_config(path, strict=strict)
        if data:
            config = config.merge(EngineroomConfig.from_dict(data))

    priority = os.environ.get(PRIORITY_ENV)
    if priority:
        config = config.merge(EngineroomConfig.from_dict({"priority": priority}))

    return config


def save_config(config: EngineroomConfig, path: Path) -> None:
    """Save config to a YAML file.

    Creates parent directories if needed.
    Only saves non-None values.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    data = config.to_dict()
    with path.open("w") as f:
        yaml.safe_dump(data, f, default_flow_style=False, sort_keys=False)
