"""Shared fixtures for engineroom tests."""

from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import pytest

from engineroom.config.schema import EngineroomConfig
from engineroom.config.settings import ConfigEngineSettings
from engineroom.engines.base import Engine, EngineFamily
from engineroom.host import HostPlatform
from engineroom.process import ProcessResult
from engineroom.registry import EngineRegistry


class StubRunner:
    """Process runner returning canned results and counting invocations."""

    def __init__(
        self,
        results: dict[str, ProcessResult | BaseException] | None = None,
        default: ProcessResult = ProcessResult(0, []),
    ) -> None:
        self.results = results or {}
        self.default = default
        self.calls: list[tuple[str, ...]] = []

    def __call__(self, executable: str, *args: str, **kwargs: object) -> ProcessResult:
        self.calls.append((executable, *args))
        result = self.results.get(executable, self.default)
        if isinstance(result, BaseException):
            raise result
        return result

    def count(self, executable: str) -> int:
        return sum(1 for call in self.calls if call[0] == executable)


@dataclass
class FakeResource:
    """Resource compatible with a fixed set of engine ids."""

    name: str
    compatible: set[str] = field(default_factory=set)

    def is_compatible(self, engine: Engine) -> bool:
        return engine.id in self.compatible


def make_engine(
    engine_id: str,
    family: EngineFamily = EngineFamily.VLC,
    program: str | None = None,
    **kwargs: Any,
) -> Engine:
    """Create a test engine; VLC family engines are never probed."""
    return Engine(
        id=engine_id,
        name=engine_id.capitalize(),
        family=family,
        program=program or engine_id,
        **kwargs,
    )


@pytest.fixture
def linux_host() -> HostPlatform:
    """A 64-bit Linux host."""
    return HostPlatform(is_linux=True, is_64bit=True)


@pytest.fixture
def runner() -> StubRunner:
    """A runner reporting success with no output for every executable."""
    return StubRunner()


@pytest.fixture
def make_executable(tmp_path: Path) -> Callable[..., Path]:
    """Factory creating files under tmp_path, executable by default."""

    def _make(name: str, executable: bool = True) -> Path:
        path = tmp_path / name
        path.write_text("#!/bin/sh\nexit 0\n")
        path.chmod(0o755 if executable else 0o644)
        return path

    return _make


@pytest.fixture
def make_registry(
    linux_host: HostPlatform, runner: StubRunner
) -> Callable[..., EngineRegistry]:
    """Factory creating a registry over an EngineroomConfig."""

    def _make(config: EngineroomConfig | None = None, **kwargs: Any) -> EngineRegistry:
        settings = ConfigEngineSettings(config or EngineroomConfig(priority=()))
        kwargs.setdefault("host", linux_host)
        kwargs.setdefault("runner", runner)
        return EngineRegistry(settings, **kwargs)

    return _make
