"""Registry of transcoding engines.

The registry owns the list of known engines and their verified state. It is
created once at start-up and shared by reference. A readers-writer lock
guards the list: registration and sorting are exclusive, every query is
shared. Queries return fresh lists of immutable EngineState values.
"""

from __future__ import annotations

import logging
from dataclasses import replace

from engineroom import messages
from engineroom.config.settings import EngineSettings
from engineroom.engines.base import Engine, ExecutableRole, Resource
from engineroom.engines.state import Availability, EngineState, ExecutableStates
from engineroom.errors import (
    AviSynthMissingError,
    EngineUnavailableError,
    ExecutableNotDefinedError,
    PlatformIncompatibleError,
    ProbeRejectedError,
)
from engineroom.host import HostPlatform
from engineroom.locks import ReadWriteLock
from engineroom.matching import all_compatible, first_compatible
from engineroom.priority import sort_by_priority
from engineroom.probes.cache import ProbeCache
from engineroom.probes.prober import Prober
from engineroom.process import ProcessRunner, run_process
from engineroom.resolver import resolve_executable

logger = logging.getLogger(__name__)


class EngineRegistry:
    """Registered engines ordered by configured priority."""

    def __init__(
        self,
        settings: EngineSettings,
        host: HostPlatform | None = None,
        runner: ProcessRunner = run_process,
        cache: ProbeCache | None = None,
    ) -> None:
        """Initialize an empty registry.

        Args:
            settings: Source of enabled flags, priorities and executable paths.
                The registry re-sorts whenever it reports a change.
            host: Platform to resolve executables for. Detected if omitted.
            runner: Runs probe processes.
            cache: Probe cache, shared with other registries if given.
        """
        self.settings = settings
        self.host = host if host is not None else HostPlatform.current()
        self._prober = Prober(runner=runner, cache=cache, host=self.host)
        self._lock = ReadWriteLock()
        self._states: list[EngineState] = []
        settings.add_listener(self._settings_changed)

    @property
    def probe_cache(self) -> ProbeCache:
        return self._prober.cache

    def register(self, engine: Engine) -> None:
        """Verify `engine` and add it to the registry.

        Registering an id twice is a no-op. Verification failures never
        raise: they leave the engine registered but unavailable.
        """
        with self._lock.write_locked():
            if self._find(engine.id) is not None:
                logger.info(
                    "Transcoding engine %s already exists, skipping registration...", engine
                )
                return

            logger.info("Checking transcoding engine: %s", engine)
            self._states.append(
                EngineState(engine=engine, enabled=self.settings.is_engine_enabled(engine.id))
            )
            try:
                self._verify(len(self._states) - 1)
            finally:
                # Keep the list ordered even when verification is interrupted
                self._sort_locked()

    def _verify(self, index: int) -> None:
        """Verify every executable role of the engine at `index`.

        Must be called with the write lock held. Each verified role is
        committed right away, so an interrupt leaves the rest UNKNOWN.
        """
        state = self._states[index]
        engine = state.engine
        for role in engine.roles:
            executables = self._verify_role(engine, role, state.executables)
            state = replace(state, executables=executables)
            self._states[index] = state

        current = self._select_role(engine, state.executables)
        state = replace(state, executables=state.executables.with_current(current))
        self._states[index] = state

        if state.available:
            logger.info('Transcoding engine "%s" is available', engine)
        else:
            logger.warning('Transcoding engine "%s" is not available', engine)

    def _verify_role(
        self, engine: Engine, role: ExecutableRole, executables: ExecutableStates
    ) -> ExecutableStates:
        """Resolve, check and probe one executable role."""
        configured = self.settings.executable_path(engine.id, role, engine.default_path(role))
        executable: str | None = None
        try:
            executable = resolve_executable(configured, engine, self.host)
            if engine.requires_avisynth and not self.host.has_avisynth():
                raise AviSynthMissingError(engine)
            outcome = self._prober.probe(engine, executable)
            if outcome is not None and not outcome.passed:
                raise ProbeRejectedError(outcome.detail or messages.engine_error(engine))
        except ExecutableNotDefinedError as e:
            logger.info("%s executable of transcoding engine %s is undefined", role.value, engine)
            return executables.with_record(role, Availability.unavailable(e.reason))
        except (PlatformIncompatibleError, AviSynthMissingError) as e:
            logger.debug("Skipping transcoding engine %s (%s): %s", engine, role.value, e.reason)
            return executables.with_record(role, Availability.unavailable(e.reason), executable)
        except EngineUnavailableError as e:
            logger.warning(
                "%s executable of transcoding engine %s is unusable: %s",
                role.value,
                engine,
                e.reason,
            )
            return executables.with_record(role, Availability.unavailable(e.reason), executable)

        # Families without a probe are available unless something failed above
        version = outcome.detail if outcome is not None else None
        return executables.with_record(role, Availability.available(version), executable)

    def _select_role(self, engine: Engine, executables: ExecutableStates) -> ExecutableRole:
        """Pick the role to use: configured, platform default, then any available."""
        configured = self.settings.executable_role(engine.id) or engine.default_role
        if executables.is_available(configured):
            return configured
        if executables.is_available(engine.default_role):
            return engine.default_role
        for role in engine.roles:
            if executables.is_available(role):
                return role
        return configured

    def select_role(self, engine_id: str, role: ExecutableRole) -> None:
        """Switch the executable role used by a registered engine.

        Raises:
            KeyError: No engine with `engine_id` is registered.
            ValueError: The engine does not support `role`.
        """
        with self._lock.write_locked():
            index = self._find(engine_id)
            if index is None:
                raise KeyError(f"Engine {engine_id} is not registered")
            state = self._states[index]
            if role not in state.engine.roles:
                raise ValueError(f"Engine {engine_id} has no {role.value} executable")
            self._states[index] = replace(
                state, executables=state.executables.with_current(role)
            )

    def sort(self) -> None:
        """Re-sort the engines by the current priority table."""
        with self._lock.write_locked():
            self._sort_locked()

    def _sort_locked(self) -> None:
        self._states = sort_by_priority(self._states, self.settings.priority_rank)

    def _settings_changed(self) -> None:
        """Refresh enabled flags and ordering after a configuration change."""
        with self._lock.write_locked():
            self._states = [
                replace(state, enabled=self.settings.is_engine_enabled(state.id))
                for state in self._states
            ]
            self._sort_locked()

    def close(self) -> None:
        """Stop following settings changes. Queries keep working."""
        self.settings.remove_listener(self._settings_changed)

    def reset(self) -> None:
        """Forget every registered engine. Probe results are kept."""
        with self._lock.write_locked():
            self._states = []

    def _find(self, engine_id: str) -> int | None:
        for index, state in enumerate(self._states):
            if state.id == engine_id:
                return index
        return None

    def all_engines(self) -> list[EngineState]:
        """Return every registered engine, including unusable ones."""
        with self._lock.read_locked():
            return list(self._states)

    def engines(
        self, only_enabled: bool = True, only_available: bool = True
    ) -> list[EngineState]:
        """Return the registered engines matching the filters, by priority."""
        with self._lock.read_locked():
            return [
                state
                for state in self._states
                if (not only_available or state.available)
                and (not only_enabled or state.enabled)
            ]

    def is_active(self, engine_id: str) -> bool:
        """Check whether an engine is registered, enabled and available.

        Raises:
            ValueError: `engine_id` is None.
        """
        if engine_id is None:
            raise ValueError("engine_id cannot be None")
        with self._lock.read_locked():
            index = self._find(engine_id)
            return index is not None and self._states[index].active

    def lookup(self, engine_id: str | None) -> EngineState | None:
        """Return the registered engine with `engine_id`, or None."""
        if engine_id is None:
            return None
        with self._lock.read_locked():
            index = self._find(engine_id)
            return self._states[index] if index is not None else None

    def executable(self, engine_id: str | None) -> str | None:
        """Return the resolved executable of an engine's current role."""
        state = self.lookup(engine_id)
        return state.executable if state is not None else None

    def engine_for(self, resource: Resource | None) -> EngineState | None:
        """Return the highest priority active engine compatible with `resource`."""
        if resource is None:
            logger.warning("Invalid resource (None): no engine found")
            return None
        logger.debug('Getting engine for resource "%s"', resource.name)
        # is_compatible may call back into the registry; no lock held while matching
        return first_compatible(self.all_engines(), resource)

    def engines_for(self, resource: Resource | None) -> list[EngineState]:
        """Return every active engine compatible with `resource`, by priority."""
        if resource is None:
            return []
        return all_compatible(self.all_engines(), resource)

    def __len__(self) -> int:
        with self._lock.read_locked():
            return len(self._states)

    def __contains__(self, engine_id: object) -> bool:
        if not isinstance(engine_id, str):
            return False
        return self.lookup(engine_id) is not None
