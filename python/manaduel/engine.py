"""Core search engine: uniform-cost (Dijkstra) search over game states."""

from __future__ import annotations
import heapq
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Hashable

from .errors import SearchCancelled

logger = logging.getLogger(__name__)

PROGRESS_LOG_INTERVAL = 10_000


@dataclass(frozen=True, order=True)
class FrontierEntry:
    """Heap entry ordered by ascending cost, ties broken by the state itself."""
    cost: int
    state: Any


@dataclass
class SearchResult:
    """Outcome of a search.

    `cost` is None when no goal state is reachable, which is distinct from a
    goal reachable for free (cost 0).
    """
    cost: int | None
    path: list = field(default_factory=list)
    final_state: Any = None
    expanded: int = 0
    discovered: int = 0

    @property
    def solved(self) -> bool:
        return self.cost is not None


def _reconstruct_path(came_from: dict, state: Hashable) -> list:
    """Walk parent links back from `state` to the initial state."""
    path = []
    while state in came_from:
        state, move = came_from[state]
        path.append(move)
    path.reverse()
    return path


def search(
    *,
    initial_state: Hashable,
    is_goal: Callable[[Hashable], bool],
    get_transitions: Callable[[Hashable, Any], list[tuple[int, Any, Hashable]]],
    is_dead_end: Callable[[Hashable], bool] | None = None,
    config: Any = None,
    max_cost: int | None = None,
    should_stop: Callable[[], bool] | None = None,
) -> SearchResult:
    """Find the cheapest path from `initial_state` to any goal state.

    Args:
        initial_state: The starting state. Must be hashable and ordered.
        is_goal: Predicate for winning states.
        get_transitions: Returns [(cost, move, next_state), ...] for a state.
            Costs must be non-negative.
        is_dead_end: Optional predicate for losing states; these are never
            pushed onto the frontier.
        config: Optional game configuration passed to get_transitions.
        max_cost: Optional upper bound; paths costing more are discarded.
        should_stop: Optional zero-argument callable checked once per
            iteration. Returning True raises SearchCancelled.

    Returns:
        SearchResult with the minimum cost, one cheapest move sequence and
        the goal state it reaches, or cost None if no goal is reachable.
    """
    best_cost: dict[Hashable, int] = {initial_state: 0}
    came_from: dict[Hashable, tuple[Hashable, Any]] = {}
    frontier = [FrontierEntry(0, initial_state)]

    # Cheapest goal discovered so far; nothing costlier is worth pushing.
    bound = max_cost
    expanded = 0

    while frontier:
        if should_stop is not None and should_stop():
            raise SearchCancelled(expanded)

        entry = heapq.heappop(frontier)
        state = entry.state

        if is_goal(state):
            logger.info("goal reached at cost %d after expanding %d states", entry.cost, expanded)
            return SearchResult(
                cost=entry.cost,
                path=_reconstruct_path(came_from, state),
                final_state=state,
                expanded=expanded,
                discovered=len(best_cost),
            )

        if best_cost[state] < entry.cost:
            continue  # stale: a cheaper path to this state was already queued

        if is_dead_end is not None and is_dead_end(state):
            continue

        expanded += 1
        if expanded % PROGRESS_LOG_INTERVAL == 0:
            logger.debug(
                "expanded %d states, frontier %d, current cost %d",
                expanded, len(frontier), entry.cost,
            )

        for cost, move, next_state in get_transitions(state, config):
            if cost < 0:
                raise ValueError(f"negative edge cost {cost} for move {move!r}")
            if is_dead_end is not None and is_dead_end(next_state):
                continue

            next_cost = entry.cost + cost
            if bound is not None and next_cost > bound:
                continue
            if next_cost >= best_cost.get(next_state, next_cost + 1):
                continue

            best_cost[next_state] = next_cost
            came_from[next_state] = (state, move)
            heapq.heappush(frontier, FrontierEntry(next_cost, next_state))
            if is_goal(next_state) and (bound is None or next_cost < bound):
                bound = next_cost

    logger.info("no goal reachable after expanding %d states", expanded)
    return SearchResult(cost=None, expanded=expanded, discovered=len(best_cost))
