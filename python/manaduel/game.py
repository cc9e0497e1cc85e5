"""Weighted game protocol and helpers."""

from __future__ import annotations
from typing import Protocol, Hashable, Any, runtime_checkable


@runtime_checkable
class WeightedGame(Protocol):
    """Protocol that searchable game definitions must implement.

    A game is defined by:
    - A hashable, totally ordered State type
    - An initial_state(...) class method
    - An is_goal(state) class method (the searching side has won)
    - An is_dead_end(state) class method (the searching side has lost)
    - A get_transitions(state, config) class method returning
      [(cost, move, next_state), ...] with non-negative costs
    - A tostr(state) class method for display
    """

    @staticmethod
    def initial_state(*args: Any) -> Hashable: ...

    @staticmethod
    def is_goal(state: Hashable) -> bool: ...

    @staticmethod
    def is_dead_end(state: Hashable) -> bool: ...

    @staticmethod
    def get_transitions(state: Hashable, config: Any = None) -> list[tuple[int, Any, Hashable]]: ...

    @staticmethod
    def tostr(state: Hashable) -> str: ...


def cheapest_transitions(transitions: list[tuple[int, Any, Any]]) -> list[tuple[int, Any, Any]]:
    """Collapse edges leading to the same state, keeping the cheapest.

    On equal cost the earliest edge wins, so move order stays deterministic.
    """
    best: dict[Any, tuple[int, Any, Any]] = {}
    for edge in transitions:
        cost, _, next_state = edge
        kept = best.get(next_state)
        if kept is None or cost < kept[0]:
            best[next_state] = edge
    return list(best.values())
