"""Memoized probe outcomes keyed by resolved executable path."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ProbeRecord:
    """Outcome of probing one executable."""

    executable: str
    passed: bool
    detail: str | None = None


class ProbeCache:
    """Probe records for every executable tested so far.

    Not synchronized: the registry only touches it while holding its
    write lock.
    """

    def __init__(self) -> None:
        self._records: dict[str, ProbeRecord] = {}

    def get(self, executable: str) -> ProbeRecord | None:
        return self._records.get(executable)

    def put(self, record: ProbeRecord) -> None:
        """Store `record` unless its executable already has one."""
        self._records.setdefault(record.executable, record)

    def __contains__(self, executable: object) -> bool:
        return executable in self._records

    def __len__(self) -> int:
        return len(self._records)
