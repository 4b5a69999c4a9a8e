"""Engine settings provider backed by the configuration."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from dataclasses import replace
from typing import Protocol

from engineroom.config.schema import DEFAULT_CONFIG, EngineroomConfig
from engineroom.engines.base import ExecutableRole

logger = logging.getLogger(__name__)

Listener = Callable[[], None]


class EngineSettings(Protocol):
    """What the registry needs to know about the configuration."""

    def is_engine_enabled(self, engine_id: str) -> bool: ...

    def priority_rank(self, engine_id: str) -> int | None: ...

    def executable_path(
        self, engine_id: str, role: ExecutableRole, default: str | None = None
    ) -> str | None: ...

    def executable_role(self, engine_id: str) -> ExecutableRole | None: ...

    def add_listener(self, listener: Listener) -> None: ...

    def remove_listener(self, listener: Listener) -> None: ...


class ConfigEngineSettings:
    """EngineSettings over an EngineroomConfig.

    Mutators replace the underlying config and then notify listeners, which
    the registry uses to refresh enabled flags and re-sort.
    """

    def __init__(self, config: EngineroomConfig | None = None) -> None:
        self._config = DEFAULT_CONFIG.merge(config) if config is not None else DEFAULT_CONFIG
        self._lock = threading.Lock()
        self._listeners: list[Listener] = []

    @property
    def config(self) -> EngineroomConfig:
        return self._config

    def is_engine_enabled(self, engine_id: str) -> bool:
        return engine_id not in (self._config.disabled or ())

    def priority_rank(self, engine_id: str) -> int | None:
        """Return the engine's index in the priority table, None if absent."""
        try:
            return (self._config.priority or ()).index(engine_id)
        except ValueError:
            return None

    def executable_path(
        self, engine_id: str, role: ExecutableRole, default: str | None = None
    ) -> str | None:
        """Return the configured path for `role`, or `default` when not set.

        A role configured with an explicit null has no executable at all.
        """
        paths = (self._config.executables or {}).get(engine_id, {})
        if role.value in paths:
            return paths[role.value]
        return default

    def executable_role(self, engine_id: str) -> ExecutableRole | None:
        value = (self._config.executable_roles or {}).get(engine_id)
        return ExecutableRole(value) if value is not None else None

    def add_listener(self, listener: Listener) -> None:
        with self._lock:
            self._listeners.append(listener)

    def remove_listener(self, listener: Listener) -> None:
        """Stop notifying `listener`. Unknown listeners are ignored."""
        with self._lock:
            if listener in self._listeners:
                self._listeners.remove(listener)

    def set_priority(self, engine_ids: list[str] | tuple[str, ...]) -> None:
        """Replace the priority table."""
        self._update(replace(self._config, priority=tuple(engine_ids)))

    def set_enabled(self, engine_id: str, enabled: bool) -> None:
        """Enable or disable an engine."""
        disabled = [e for e in (self._config.disabled or ()) if e != engine_id]
        if not enabled:
            disabled.append(engine_id)
        self._update(replace(self._config, disabled=tuple(disabled)))

    def reload(self, config: EngineroomConfig) -> None:
        """Swap in a freshly loaded configuration."""
        self._update(DEFAULT_CONFIG.merge(config))

    def _update(self, config: EngineroomConfig) -> None:
        with self._lock:
            self._config = config
            listeners = list(self._listeners)
        logger.debug("Engine settings changed, notifying %d listener(s)", len(listeners))
        for listener in listeners:
            listener()
