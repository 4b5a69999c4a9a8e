"""Tests for configuration loading, merging and engine settings."""

from pathlib import Path
from unittest.mock import patch

import pytest
import yaml

from engineroom.config.init import write_default_config
from engineroom.config.loader import (
    PRIORITY_ENV,
    ConfigError,
    get_home_config_path,
    get_local_config_path,
    home_config_exists,
    load_config,
    load_yaml_config,
    save_config,
)
from engineroom.config.schema import DEFAULT_CONFIG, DEFAULT_PRIORITY, EngineroomConfig
from engineroom.config.settings import ConfigEngineSettings
from engineroom.engines.base import ExecutableRole


class TestEngineroomConfig:
    """Tests for EngineroomConfig dataclass."""

    def test_default_config_values(self) -> None:
        """Test that DEFAULT_CONFIG has expected values."""
        assert DEFAULT_CONFIG.priority == DEFAULT_PRIORITY
        assert DEFAULT_CONFIG.priority[0] == "ffmpeg_video"
        assert DEFAULT_CONFIG.disabled == ()
        assert DEFAULT_CONFIG.executables == {}

    def test_merge_prefers_other_values(self) -> None:
        """Test that merge prefers values from 'other' when set."""
        base = EngineroomConfig(priority=("a", "b"), disabled=("c",))
        override = EngineroomConfig(priority=("b",))
        merged = base.merge(override)

        assert merged.priority == ("b",)
        assert merged.disabled == ("c",)

    def test_merge_executables_per_role(self) -> None:
        """Test executable paths are merged per engine and role."""
        base = EngineroomConfig(
            executables={"ffmpeg_video": {"installed": "ffmpeg", "custom": "/opt/ffmpeg"}}
        )
        override = EngineroomConfig(
            executables={"ffmpeg_video": {"installed": None}, "vlc_video": {"custom": "/x/vlc"}}
        )
        merged = base.merge(override)

        assert merged.executables == {
            "ffmpeg_video": {"installed": None, "custom": "/opt/ffmpeg"},
            "vlc_video": {"custom": "/x/vlc"},
        }
        assert base.executables == {
            "ffmpeg_video": {"installed": "ffmpeg", "custom": "/opt/ffmpeg"}
        }

    def test_merge_returns_new_instance(self) -> None:
        """Test that merge returns a new instance, not mutating originals."""
        base = EngineroomConfig(priority=("a",))
        override = EngineroomConfig(disabled=("b",))
        merged = base.merge(override)

        assert merged is not base
        assert merged is not override
        assert base.disabled is None
        assert override.priority is None

    def test_to_dict_excludes_none(self) -> None:
        """Test that to_dict excludes None values and emits lists."""
        data = EngineroomConfig(priority=("a", "b")).to_dict()
        assert data == {"priority": ["a", "b"]}

    def test_from_dict_coerces_types(self) -> None:
        """Test that from_dict coerces lists, strings and roles."""
        config = EngineroomConfig.from_dict(
            {
                "priority": "ffmpeg_video, vlc_video",
                "disabled": ["tsmuxer_video"],
                "executables": {
                    "ffmpeg_video": {"installed": "/usr/bin/ffmpeg", "weird": "x"},
                    "vlc_video": "not a mapping",
                },
                "executable_roles": {"ffmpeg_video": "custom", "vlc_video": "nope"},
                "unknown_key": "value",
            }
        )

        assert config.priority == ("ffmpeg_video", "vlc_video")
        assert config.disabled == ("tsmuxer_video",)
        assert config.executables == {"ffmpeg_video": {"installed": "/usr/bin/ffmpeg"}}
        assert config.executable_roles == {"ffmpeg_video": "custom"}

    def test_from_dict_keeps_explicit_null_path(self) -> None:
        """Test a null path survives parsing so it can undefine a role."""
        config = EngineroomConfig.from_dict({"executables": {"vlc_video": {"installed": None}}})
        assert config.executables == {"vlc_video": {"installed": None}}


class TestConfigPaths:
    """Tests for config path functions."""

    def test_get_home_config_path(self) -> None:
        """Test that home config path is in the user's home directory."""
        path = get_home_config_path()
        assert path == Path.home() / ".engineroom" / "config.yaml"

    def test_get_local_config_path(self, tmp_path: Path) -> None:
        """Test that local config path is in the current directory."""
        with patch("engineroom.config.loader.Path.cwd", return_value=tmp_path):
            path = get_local_config_path()
            assert path == tmp_path / ".engineroom" / "config.yaml"

    def test_home_config_exists(self, tmp_path: Path) -> None:
        """Test home_config_exists follows the file."""
        config_path = tmp_path / "config.yaml"
        with patch("engineroom.config.loader.get_home_config_path", return_value=config_path):
            assert home_config_exists() is False
            config_path.write_text("priority: []\n")
            assert home_config_exists() is True


class TestConfigLoading:
    """Tests for YAML loading."""

    def test_load_yaml_config_returns_dict(self, tmp_path: Path) -> None:
        """Test loading a valid YAML file."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("priority:\n  - vlc_video\n")
        assert load_yaml_config(config_file) == {"priority": ["vlc_video"]}

    def test_load_yaml_config_returns_none_for_missing_file(self, tmp_path: Path) -> None:
        """Test that missing files return None."""
        assert load_yaml_config(tmp_path / "missing.yaml") is None

    def test_load_yaml_config_returns_none_for_empty_file(self, tmp_path: Path) -> None:
        """Test that empty files return None."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("")
        assert load_yaml_config(config_file) is None

    def test_load_yaml_config_invalid_yaml(self, tmp_path: Path) -> None:
        """Test invalid YAML is ignored, or raises in strict mode."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("priority: [unclosed\n")

        assert load_yaml_config(config_file) is None
        with pytest.raises(ConfigError):
            load_yaml_config(config_file, strict=True)

    def test_load_yaml_config_non_mapping(self, tmp_path: Path) -> None:
        """Test a top-level list is not a config."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("- a\n- b\n")

        assert load_yaml_config(config_file) is None
        with pytest.raises(ConfigError):
            load_yaml_config(config_file, strict=True)


class TestConfigMerging:
    """Tests for layered configuration."""

    @pytest.fixture
    def config_paths(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        home_config = tmp_path / "home" / ".engineroom" / "config.yaml"
        local_config = tmp_path / "project" / ".engineroom" / "config.yaml"
        monkeypatch.delenv(PRIORITY_ENV, raising=False)
        with (
            patch("engineroom.config.loader.get_home_config_path", return_value=home_config),
            patch("engineroom.config.loader.get_local_config_path", return_value=local_config),
        ):
            yield home_config, local_config

    def test_load_config_uses_defaults_when_no_files(self, config_paths) -> None:
        """Test that defaults apply without config files."""
        assert load_config() == DEFAULT_CONFIG

    def test_load_config_local_overrides_home(self, config_paths) -> None:
        """Test that local config takes precedence over home config."""
        home_config, local_config = config_paths
        home_config.parent.mkdir(parents=True)
        home_config.write_text(
            "priority: [vlc_video, ffmpeg_video]\ndisabled: [tsmuxer_video]\n"
        )
        local_config.parent.mkdir(parents=True)
        local_config.write_text("priority: [ffmpeg_video]\n")

        config = load_config()

        assert config.priority == ("ffmpeg_video",)
        assert config.disabled == ("tsmuxer_video",)

    def test_priority_env_overrides_files(
        self, config_paths, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test ENGINEROOM_PRIORITY has the last word on priority."""
        home_config, _ = config_paths
        home_config.parent.mkdir(parents=True)
        home_config.write_text("priority: [vlc_video]\n")
        monkeypatch.setenv(PRIORITY_ENV, "tsmuxer_video,ffmpeg_video")

        assert load_config().priority == ("tsmuxer_video", "ffmpeg_video")

    def test_strict_load_raises(self, config_paths) -> None:
        """Test strict loading surfaces broken files."""
        home_config, _ = config_paths
        home_config.parent.mkdir(parents=True)
        home_config.write_text("priority: [\n")

        assert load_config() == DEFAULT_CONFIG
        with pytest.raises(ConfigError):
            load_config(strict=True)


class TestConfigSaving:
    """Tests for saving and creating config files."""

    def test_save_config_creates_file(self, tmp_path: Path) -> None:
        """Test that save_config writes YAML with parent dirs."""
        config_path = tmp_path / "nested" / "config.yaml"
        save_config(EngineroomConfig(priority=("vlc_video",), disabled=()), config_path)

        assert yaml.safe_load(config_path.read_text()) == {
            "priority": ["vlc_video"],
            "disabled": [],
        }

    def test_write_default_config(self, tmp_path: Path) -> None:
        """Test init writes the default priority and refuses to overwrite."""
        config_path = tmp_path / ".engineroom" / "config.yaml"
        with patch("engineroom.config.init.get_home_config_path", return_value=config_path):
            assert write_default_config() == config_path
            data = yaml.safe_load(config_path.read_text())
            assert data["priority"] == list(DEFAULT_PRIORITY)

            assert write_default_config() is None
            assert write_default_config(force=True) == config_path

    def test_write_default_config_local(self, tmp_path: Path) -> None:
        """Test --local writes the project config."""
        config_path = tmp_path / "project" / ".engineroom" / "config.yaml"
        with patch("engineroom.config.init.get_local_config_path", return_value=config_path):
            assert write_default_config(local=True) == config_path
        assert config_path.exists()


class TestConfigEngineSettings:
    """Tests for the settings provider used by the registry."""

    def test_enabled_and_rank(self) -> None:
        """Test enabled flags and ranks come from the config."""
        settings = ConfigEngineSettings(
            EngineroomConfig(priority=("a", "b"), disabled=("b",))
        )
        assert settings.is_engine_enabled("a") is True
        assert settings.is_engine_enabled("b") is False
        assert settings.priority_rank("b") == 1
        assert settings.priority_rank("zzz") is None

    def test_defaults_apply(self) -> None:
        """Test unset values fall back to the default config."""
        settings = ConfigEngineSettings()
        assert settings.priority_rank("ffmpeg_video") == 0
        assert settings.is_engine_enabled("ffmpeg_video") is True

    def test_executable_path(self) -> None:
        """Test configured, missing and explicitly null paths."""
        settings = ConfigEngineSettings(
            EngineroomConfig(
                executables={"a": {"installed": None, "custom": "/opt/a"}},
            )
        )
        assert settings.executable_path("a", ExecutableRole.CUSTOM, "a") == "/opt/a"
        assert settings.executable_path("a", ExecutableRole.INSTALLED, "a") is None
        assert settings.executable_path("a", ExecutableRole.BUNDLED, "dflt") == "dflt"
        assert settings.executable_path("b", ExecutableRole.INSTALLED, "b") == "b"

    def test_executable_role(self) -> None:
        """Test the configured role is returned as an ExecutableRole."""
        settings = ConfigEngineSettings(EngineroomConfig(executable_roles={"a": "bundled"}))
        assert settings.executable_role("a") == ExecutableRole.BUNDLED
        assert settings.executable_role("b") is None

    def test_mutators_notify_listeners(self) -> None:
        """Test every change notifies listeners after updating the config."""
        settings = ConfigEngineSettings(EngineroomConfig(priority=("a",)))
        seen: list[tuple[int | None, bool]] = []
        settings.add_listener(
            lambda: seen.append((settings.priority_rank("b"), settings.is_engine_enabled("a")))
        )

        settings.set_priority(["b", "a"])
        settings.set_enabled("a", False)
        settings.reload(EngineroomConfig(priority=("x",)))

        assert seen == [(0, True), (0, False), (None, True)]

    def test_remove_listener(self) -> None:
        """Test removed listeners are no longer notified."""
        settings = ConfigEngineSettings()
        calls: list[str] = []

        def listener() -> None:
            calls.append("changed")

        settings.add_listener(listener)
        settings.set_priority(["a"])
        settings.remove_listener(listener)
        settings.remove_listener(listener)
        settings.set_priority(["b"])

        assert calls == ["changed"]
