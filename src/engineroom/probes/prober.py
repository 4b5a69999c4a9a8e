"""Functional probing of engine executables."""

from __future__ import annotations

import logging

from engineroom import messages
from engineroom.engines.base import Engine
from engineroom.errors import ProbeLaunchError
from engineroom.host import HostPlatform
from engineroom.probes.base import ProbeOutcome
from engineroom.probes.cache import ProbeCache, ProbeRecord
from engineroom.probes.families import get_probe_spec
from engineroom.process import ProcessRunner, run_process

logger = logging.getLogger(__name__)


class Prober:
    """Runs family probes and remembers their outcome per executable."""

    def __init__(
        self,
        runner: ProcessRunner = run_process,
        cache: ProbeCache | None = None,
        host: HostPlatform | None = None,
    ) -> None:
        self._runner = runner
        self.cache = cache if cache is not None else ProbeCache()
        self._host = host if host is not None else HostPlatform.current()

    def probe(self, engine: Engine, executable: str) -> ProbeOutcome | None:
        """Probe `executable` on behalf of `engine`.

        An executable that was probed before is never run again; its cached
        outcome is returned instead.

        Returns:
            The outcome, or None if the engine's family has no probe and no
            cached outcome exists.
        """
        record = self.cache.get(executable)
        if record is not None:
            logger.debug("Reusing probe result of %s for %s", executable, engine)
            return ProbeOutcome(record.passed, record.detail)

        spec = get_probe_spec(engine.family)
        if spec is None:
            return None

        try:
            result = self._runner(executable, *spec.args)
        except ProbeLaunchError as e:
            logger.debug(
                '"%s %s" (%s) failed with error: %s',
                executable,
                " ".join(spec.args),
                engine,
                e.reason,
            )
            outcome = ProbeOutcome(False, messages.engine_error(engine, e.reason))
        else:
            outcome = spec.evaluate(result, engine, self._host)

        self.cache.put(ProbeRecord(executable, outcome.passed, outcome.detail))
        return outcome
