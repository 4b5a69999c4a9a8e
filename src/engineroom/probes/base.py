"""Declarative description of how an engine family is probed."""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass

from engineroom.engines.base import Engine
from engineroom.host import HostPlatform
from engineroom.process import ProcessResult

FailureRule = Callable[[ProcessResult, Engine, HostPlatform], str]
SuccessRule = Callable[[ProcessResult], bool]


@dataclass(frozen=True)
class ProbeOutcome:
    """Verdict of a probe. `detail` is a version on success, a reason otherwise."""

    passed: bool
    detail: str | None = None


def exited_cleanly(result: ProcessResult) -> bool:
    """Default success rule: the process exited with code 0."""
    return result.exit_code == 0


@dataclass(frozen=True)
class ProbeSpec:
    """How to invoke an executable and read its verdict from the output.

    Attributes:
        args: Arguments passed to the executable.
        version_pattern: Regex whose first group is the version; searched in
            the output line at `version_line`.
        describe_failure: Builds the unavailability reason for a failed run.
        succeeded: Decides from the finished process whether it works.
        version_line: Index of the output line holding the version.
    """

    args: tuple[str, ...]
    version_pattern: re.Pattern[str]
    describe_failure: FailureRule
    succeeded: SuccessRule = exited_cleanly
    version_line: int = 0

    def parse_version(self, output: list[str]) -> str | None:
        """Extract the version, or None when the output shape is not recognized."""
        if len(output) <= self.version_line:
            return None
        match = self.version_pattern.search(output[self.version_line])
        return match.group(1) if match else None

    def evaluate(
        self, result: ProcessResult, engine: Engine, host: HostPlatform
    ) -> ProbeOutcome:
        """Turn a finished probe process into an outcome."""
        if not self.succeeded(result):
            return ProbeOutcome(False, self.describe_failure(result, engine, host))
        return ProbeOutcome(True, self.parse_version(result.output))
