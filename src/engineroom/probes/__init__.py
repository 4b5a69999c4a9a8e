"""Executable probing for transcoding engines."""

from engineroom.probes.base import ProbeOutcome, ProbeSpec
from engineroom.probes.cache import ProbeCache, ProbeRecord
from engineroom.probes.families import PROBE_SPECS, get_probe_spec
from engineroom.probes.prober import Prober

__all__ = [
    "PROBE_SPECS",
    "ProbeCache",
    "ProbeOutcome",
    "ProbeRecord",
    "ProbeSpec",
    "Prober",
    "get_probe_spec",
]
