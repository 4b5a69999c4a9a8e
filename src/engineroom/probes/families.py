"""Probe descriptors for each engine family that can be probed."""

from __future__ import annotations

import re

from engineroom import messages
from engineroom.engines.base import Engine, EngineFamily
from engineroom.host import HostPlatform
from engineroom.probes.base import ProbeSpec
from engineroom.process import ProcessResult


def _has_value(line: str) -> bool:
    return bool(line.strip())


def describe_tail(result: ProcessResult, engine: Engine, host: HostPlatform) -> str:
    """Report the last two output lines, or the last one, or nothing."""
    lines = result.output
    if len(lines) > 2:
        return messages.engine_error(engine, f"{lines[-2]} {lines[-1]}")
    if len(lines) > 1:
        return messages.engine_error(engine, lines[-1])
    return messages.engine_error(engine)


def describe_mencoder(result: ProcessResult, engine: Engine, host: HostPlatform) -> str:
    """Report the message MEncoder prints before its trailing blank line.

    A failing MEncoder ends its output with: message, blank line, a final
    non-blank line. Only that shape yields a useful detail.
    """
    lines = result.output
    if (
        len(lines) > 3
        and _has_value(lines[-1])
        and not _has_value(lines[-2])
        and _has_value(lines[-3])
    ):
        return messages.engine_error(engine, lines[-3])
    return messages.engine_error(engine)


def describe_exit_code(result: ProcessResult, engine: Engine, host: HostPlatform) -> str:
    """Report the exit code, with a hint for the known 64-bit Linux failure."""
    reason = messages.EXIT_CODE.format(engine=engine, exit_code=result.exit_code)
    if host.is_linux and host.is_64bit:
        reason += ". \n" + messages.TSMUXER_LINUX_HINT
    return reason


def describe_first_line(result: ProcessResult, engine: Engine, host: HostPlatform) -> str:
    """Report the first output line, if there is one."""
    if result.output:
        return messages.engine_error(engine, result.output[0])
    return messages.engine_error(engine)


def starts_with_blank_line(result: ProcessResult) -> bool:
    """dcraw run without arguments prints a blank line, then its banner."""
    return bool(result.output) and not _has_value(result.output[0])


FFMPEG_PROBE = ProbeSpec(
    args=("-version",),
    version_pattern=re.compile(r"^ffmpeg version\s+(.*?)\s+Copyright", re.IGNORECASE),
    describe_failure=describe_tail,
)

MENCODER_PROBE = ProbeSpec(
    args=("-info:help",),
    version_pattern=re.compile(r"^MEncoder\s+(.*?)\s+\(C\)", re.IGNORECASE),
    describe_failure=describe_mencoder,
)

TSMUXER_PROBE = ProbeSpec(
    args=("-v",),
    version_pattern=re.compile(r"tsMuxeR\.\s+Version\s(\S+)\s+", re.IGNORECASE),
    describe_failure=describe_exit_code,
)

DCRAW_PROBE = ProbeSpec(
    args=(),
    version_pattern=re.compile(r'decoder\s"dcraw"\s(\S+)', re.IGNORECASE),
    describe_failure=describe_first_line,
    succeeded=starts_with_blank_line,
    version_line=1,
)

# Families missing here (VLC) cannot be probed.
PROBE_SPECS: dict[EngineFamily, ProbeSpec] = {
    EngineFamily.FFMPEG: FFMPEG_PROBE,
    EngineFamily.MENCODER: MENCODER_PROBE,
    EngineFamily.TSMUXER: TSMUXER_PROBE,
    EngineFamily.DCRAW: DCRAW_PROBE,
}


def get_probe_spec(family: EngineFamily) -> ProbeSpec | None:
    """Return the probe descriptor for `family`, or None if it has none."""
    return PROBE_SPECS.get(family)
