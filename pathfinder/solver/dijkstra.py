"""
Dijkstra — single-source shortest paths over any Graph contract.

An instance is bound to one start node and keeps its distance and
predecessor maps between calls, acting as a memoizing single-source
shortest-path cache: a second query answered by an already finalized
node returns at once, otherwise the search resumes where it stopped.

Two independent search states exist per instance: one for ``search``
(single predecessor per node) and one for ``search_all`` (every
predecessor lying on an equal-cost shortest path).
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Collection, Hashable
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from pathfinder.core.priority_queue import MinPriorityQueue, min_priority_queue_of
from pathfinder.core.results import MultiSolutionSearchResult, SearchResult

logger = logging.getLogger(__name__)

N = TypeVar("N", bound=Hashable)

NeighborsFn = Callable[[Any], Collection[Any]]
CostFn = Callable[[Any, Any], Any]
SolutionPredicate = Callable[[Any], bool]


def unit_cost(from_node: Any, to_node: Any) -> int:
    """Default edge cost: every edge costs 1."""
    return 1


@dataclass
class _SearchState(Generic[N]):
    """Per-variant bookkeeping. ``settled`` keeps finalization order."""

    dist: dict[N, Any]
    prev: dict[N, Any] = field(default_factory=dict)
    queue: MinPriorityQueue[N, Any] = field(default_factory=MinPriorityQueue)
    settled: dict[N, None] = field(default_factory=dict)
    # finalized to answer a single-path query, neighbors not yet relaxed
    pending: list[N] = field(default_factory=list)

    @classmethod
    def starting_at(cls, start_node: N) -> _SearchState[N]:
        return cls(
            dist={start_node: 0},
            queue=min_priority_queue_of([(start_node, 0)]),
        )


class Dijkstra(Generic[N]):
    """
    Dijkstra's algorithm from a fixed *start_node*.

    Parameters
    ----------
    start_node : N
        The source of every query on this instance.
    neighbors_of : callable
        ``neighbors_of(node) -> Collection[N]``.
    cost : callable, optional
        ``cost(from_node, to_node)``, non-negative. Defaults to 1 per edge.
    """

    def __init__(
        self,
        start_node: N,
        neighbors_of: NeighborsFn,
        cost: CostFn = unit_cost,
    ) -> None:
        self.start_node = start_node
        self.neighbors_of = neighbors_of
        self.cost = cost
        self._single: _SearchState[N] = _SearchState.starting_at(start_node)
        self._multi: _SearchState[N] = _SearchState.starting_at(start_node)

    # ── Single solution ────────────────────────────────────────────

    def search(
        self,
        destination: N | None = None,
        *,
        predicate: SolutionPredicate | None = None,
    ) -> SearchResult[N]:
        """
        Find the closest node equal to *destination* or matching
        *predicate*.

        With neither given, the whole reachable graph is explored and the
        result carries every distance but no solution.
        """
        is_goal = _goal_test(destination, predicate)
        state = self._single

        if predicate is None:
            if destination is not None and destination in state.settled:
                return self._single_result(destination)
        else:
            # settled in ascending distance, so the first match is closest
            for node in state.settled:
                if predicate(node):
                    return self._single_result(node)

        while state.pending:
            self._relax(state, state.pending.pop(0))
        while state.queue:
            u = state.queue.extract_min()
            state.settled[u] = None
            if is_goal(u):
                state.pending.append(u)
                logger.debug(
                    "Dijkstra found %r at distance %s (%d settled)",
                    u, state.dist[u], len(state.settled),
                )
                return self._single_result(u)
            self._relax(state, u)

        logger.debug(
            "Dijkstra exhausted the reachable graph (%d settled)",
            len(state.settled),
        )
        return self._single_result(None)

    def _relax(self, state: _SearchState[N], u: N) -> None:
        dist_u = state.dist[u]
        for v in self.neighbors_of(u):
            alt = dist_u + self.cost(u, v)
            if alt < state.dist.get(v, math.inf):
                state.dist[v] = alt
                state.prev[v] = u
                state.queue.insert_or_update(v, alt)

    def _single_result(self, solution: N | None) -> SearchResult[N]:
        state = self._single
        return SearchResult(solution, dict(state.dist), dict(state.prev))

    # ── All solutions, all paths ───────────────────────────────────

    def search_all(
        self,
        destination: N | None = None,
        *,
        predicate: SolutionPredicate | None = None,
    ) -> MultiSolutionSearchResult[N]:
        """
        Find every closest node equal to *destination* or matching
        *predicate*, keeping every predecessor on an equal-cost path so
        that all shortest paths can be enumerated.
        """
        is_goal = _goal_test(destination, predicate)
        state = self._multi

        if predicate is None:
            if destination is not None and destination in state.settled:
                return self._multi_result(frozenset({destination}))
        else:
            matches = [node for node in state.settled if predicate(node)]
            if matches:
                best = min(state.dist[node] for node in matches)
                return self._multi_result(
                    frozenset(node for node in matches if state.dist[node] == best)
                )

        while state.queue:
            u, priority = state.queue.extract_min_with_priority()
            state.settled[u] = None
            if is_goal(u):
                solutions = self._settle_level(state, u, priority, is_goal)
                logger.debug(
                    "Dijkstra found %d solution(s) at distance %s",
                    len(solutions), priority,
                )
                return self._multi_result(solutions)
            self._relax_all(state, u)

        return self._multi_result(frozenset())

    def _settle_level(
        self,
        state: _SearchState[N],
        goal: N,
        priority: Any,
        is_goal: SolutionPredicate,
    ) -> frozenset[N]:
        """
        Settle and relax every node at *priority*, including those reached
        over zero-cost edges, and return the ones matching *is_goal*.

        Predecessor lists of the whole level are complete afterwards, so a
        later memoized answer at this distance is complete as well.
        """
        solutions = {goal}
        level = [goal]
        while level:
            for node in level:
                self._relax_all(state, node)
            if not state.queue or state.queue.min_priority != priority:
                break
            level = list(state.queue.extract_all_min())
            for node in level:
                state.settled[node] = None
                if is_goal(node):
                    solutions.add(node)
        return frozenset(solutions)

    def _relax_all(self, state: _SearchState[N], u: N) -> None:
        dist_u = state.dist[u]
        for v in self.neighbors_of(u):
            alt = dist_u + self.cost(u, v)
            known = state.dist.get(v, math.inf)
            if alt < known:
                state.dist[v] = alt
                state.prev[v] = [u]
                state.queue.insert_or_update(v, alt)
            elif alt == known and v in state.prev:
                # v may already be settled when the edge costs zero
                state.prev[v].append(u)

    def _multi_result(self, solutions: frozenset[N]) -> MultiSolutionSearchResult[N]:
        state = self._multi
        return MultiSolutionSearchResult(
            solutions,
            dict(state.dist),
            {node: list(preds) for node, preds in state.prev.items()},
        )


def _goal_test(
    destination: Any, predicate: SolutionPredicate | None
) -> SolutionPredicate:
    if predicate is not None:
        if destination is not None:
            raise TypeError("Pass either a destination or a predicate, not both.")
        return predicate
    if destination is None:
        return lambda node: False
    return lambda node: node == destination
