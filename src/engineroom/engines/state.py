"""Availability state of registered engines.

Values in this module are immutable. The registry replaces them wholesale
whenever something changes, so snapshots handed to callers never move
underneath them.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from enum import Enum
from types import MappingProxyType

from engineroom.engines.base import Engine, ExecutableRole, Resource


class AvailabilityStatus(str, Enum):
    """Outcome of verifying one executable role."""

    UNKNOWN = "unknown"
    AVAILABLE = "available"
    UNAVAILABLE = "unavailable"


@dataclass(frozen=True)
class Availability:
    """Availability of one executable role.

    `detail` holds the version string for available executables and the
    reason for unavailable ones.
    """

    status: AvailabilityStatus = AvailabilityStatus.UNKNOWN
    detail: str | None = None

    @classmethod
    def available(cls, version: str | None = None) -> Availability:
        return cls(AvailabilityStatus.AVAILABLE, version)

    @classmethod
    def unavailable(cls, reason: str) -> Availability:
        return cls(AvailabilityStatus.UNAVAILABLE, reason)

    @property
    def is_available(self) -> bool:
        return self.status == AvailabilityStatus.AVAILABLE

    @property
    def version(self) -> str | None:
        return self.detail if self.is_available else None

    @property
    def reason(self) -> str | None:
        return self.detail if self.status == AvailabilityStatus.UNAVAILABLE else None


UNKNOWN = Availability()


@dataclass(frozen=True)
class ExecutableStates:
    """Per-role availability together with the currently selected role."""

    records: Mapping[ExecutableRole, Availability] = field(default_factory=dict)
    paths: Mapping[ExecutableRole, str] = field(default_factory=dict)
    current: ExecutableRole | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "records", MappingProxyType(dict(self.records)))
        object.__setattr__(self, "paths", MappingProxyType(dict(self.paths)))

    def record(self, role: ExecutableRole) -> Availability:
        """Return the availability of `role`, UNKNOWN if it was never checked."""
        return self.records.get(role, UNKNOWN)

    def is_available(self, role: ExecutableRole | None) -> bool:
        return role is not None and self.record(role).is_available

    @property
    def available(self) -> bool:
        """True iff the currently selected role is available."""
        return self.is_available(self.current)

    @property
    def current_record(self) -> Availability:
        if self.current is None:
            return UNKNOWN
        return self.record(self.current)

    @property
    def current_path(self) -> str | None:
        if self.current is None:
            return None
        return self.paths.get(self.current)

    def with_record(
        self,
        role: ExecutableRole,
        availability: Availability,
        path: str | None = None,
    ) -> ExecutableStates:
        """Return a copy with `role` set to `availability`."""
        records = dict(self.records)
        records[role] = availability
        paths = dict(self.paths)
        if path is not None:
            paths[role] = path
        return replace(self, records=records, paths=paths)

    def with_current(self, role: ExecutableRole | None) -> ExecutableStates:
        """Return a copy with `role` selected."""
        return replace(self, current=role)


@dataclass(frozen=True)
class EngineState:
    """Snapshot of a registered engine."""

    engine: Engine
    enabled: bool = False
    executables: ExecutableStates = field(default_factory=ExecutableStates)

    @property
    def id(self) -> str:
        return self.engine.id

    @property
    def name(self) -> str:
        return self.engine.name

    @property
    def available(self) -> bool:
        return self.executables.available

    @property
    def active(self) -> bool:
        """Enabled and available."""
        return self.enabled and self.available

    @property
    def version(self) -> str | None:
        return self.executables.current_record.version

    @property
    def reason(self) -> str | None:
        return self.executables.current_record.reason

    @property
    def executable(self) -> str | None:
        """Resolved path of the current role's executable."""
        return self.executables.current_path

    def is_compatible(self, resource: Resource) -> bool:
        return self.engine.is_compatible(resource)
