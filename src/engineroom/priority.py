"""Ordering of engines by configured priority."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from engineroom.engines.state import EngineState

# Rank of engines missing from the priority table.
UNRANKED = 999

RankLookup = Callable[[str], int | None]


def effective_rank(rank: int | None) -> int:
    """Map a missing or negative rank to UNRANKED."""
    if rank is None or rank < 0:
        return UNRANKED
    return rank


def sort_by_priority(states: Iterable[EngineState], rank_of: RankLookup) -> list[EngineState]:
    """Return `states` ordered by ascending rank.

    The sort is stable: engines sharing a rank keep their relative order.
    """
    return sorted(states, key=lambda state: effective_rank(rank_of(state.id)))
