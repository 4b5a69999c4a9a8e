"""Matching of resources to engines."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from engineroom.engines.base import Resource
from engineroom.engines.state import EngineState

logger = logging.getLogger(__name__)


def _candidates(states: Iterable[EngineState], resource: Resource) -> Iterator[EngineState]:
    """Yield active engines compatible with `resource`, in the given order."""
    for state in states:
        if not state.active:
            if state.available:
                logger.debug('Engine "%s" is disabled', state.name)
            elif state.enabled:
                logger.debug('Engine "%s" isn\'t available', state.name)
            else:
                logger.debug('Engine "%s" is neither available nor enabled', state.name)
            continue
        if state.is_compatible(resource):
            yield state
        else:
            logger.debug('Engine "%s" is incompatible with "%s"', state.name, resource.name)


def first_compatible(
    states: Iterable[EngineState], resource: Resource | None
) -> EngineState | None:
    """Return the first active engine compatible with `resource`."""
    if resource is None:
        logger.warning("Invalid resource (None): no engine found")
        return None
    for state in _candidates(states, resource):
        logger.debug('Returning compatible engine "%s"', state.name)
        return state
    logger.debug('No engine found for "%s"', resource.name)
    return None


def all_compatible(
    states: Iterable[EngineState], resource: Resource | None
) -> list[EngineState]:
    """Return every active engine compatible with `resource`, in order."""
    if resource is None:
        return []
    return list(_candidates(states, resource))
