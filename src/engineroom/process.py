"""Synchronous execution of probe processes."""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Callable
from dataclasses import dataclass, field

from engineroom.errors import ProbeLaunchError

logger = logging.getLogger(__name__)

PROBE_TIMEOUT = 30.0


@dataclass(frozen=True)
class ProcessResult:
    """Exit code and captured output lines of a finished process."""

    exit_code: int
    output: list[str] = field(default_factory=list)


ProcessRunner = Callable[..., ProcessResult]


def run_process(executable: str, *args: str, timeout: float = PROBE_TIMEOUT) -> ProcessResult:
    """Run an executable and capture its output line by line.

    Standard error is folded into the captured output since most tools
    print their diagnostics there.

    Raises:
        ProbeLaunchError: The process could not be started or did not
            finish within `timeout` seconds.
    """
    cmd = [executable, *args]
    logger.debug("Running %s", " ".join(cmd))
    try:
        result = subprocess.run(
            cmd,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            stdin=subprocess.DEVNULL,
            text=True,
            errors="replace",
            timeout=timeout,
        )
    except subprocess.TimeoutExpired as e:
        raise ProbeLaunchError(f"{executable} did not finish within {e.timeout:g}s") from e
    except OSError as e:
        raise ProbeLaunchError(e.strerror or str(e)) from e

    return ProcessResult(exit_code=result.returncode, output=result.stdout.splitlines())
