"""Tests for priority ordering and resource matching."""

import pytest
from conftest import FakeResource, make_engine

from engineroom.engines.base import ExecutableRole
from engineroom.engines.state import Availability, EngineState, ExecutableStates
from engineroom.matching import all_compatible, first_compatible
from engineroom.priority import UNRANKED, effective_rank, sort_by_priority


def make_state(engine_id: str, enabled: bool = True, available: bool = True) -> EngineState:
    availability = Availability.available() if available else Availability.unavailable("no")
    executables = ExecutableStates().with_record(ExecutableRole.INSTALLED, availability)
    return EngineState(
        engine=make_engine(engine_id),
        enabled=enabled,
        executables=executables.with_current(ExecutableRole.INSTALLED),
    )


@pytest.mark.parametrize(("rank", "expected"), [(0, 0), (7, 7), (None, UNRANKED), (-1, UNRANKED)])
def test_effective_rank(rank: int | None, expected: int) -> None:
    """Test missing and negative ranks sort last."""
    assert effective_rank(rank) == expected


def test_sort_by_priority_is_stable() -> None:
    """Test engines with equal rank keep their relative order."""
    states = [make_state(engine_id) for engine_id in ("a", "b", "c", "d", "e")]
    ranks = {"d": 0, "b": 1}

    ordered = sort_by_priority(states, ranks.get)

    assert [state.id for state in ordered] == ["d", "b", "a", "c", "e"]
    assert [state.id for state in states] == ["a", "b", "c", "d", "e"]


def test_sort_by_priority_ties() -> None:
    """Test engines sharing a rank stay in input order."""
    states = [make_state(engine_id) for engine_id in ("x", "y", "z")]

    ordered = sort_by_priority(states, lambda engine_id: 5)

    assert [state.id for state in ordered] == ["x", "y", "z"]


def test_first_compatible_skips_inactive() -> None:
    """Test disabled and unavailable engines are skipped."""
    states = [
        make_state("off", enabled=False),
        make_state("broken", available=False),
        make_state("on"),
        make_state("later"),
    ]
    resource = FakeResource("movie.mkv", {"off", "broken", "on", "later"})

    state = first_compatible(states, resource)

    assert state is not None and state.id == "on"
    assert [s.id for s in all_compatible(states, resource)] == ["on", "later"]


def test_first_compatible_none() -> None:
    """Test no match and a None resource both give None."""
    states = [make_state("a")]
    assert first_compatible(states, FakeResource("x")) is None
    assert first_compatible(states, None) is None
    assert all_compatible(states, None) == []
