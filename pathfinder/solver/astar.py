"""
A* — heuristic-guided shortest path from one or more start nodes.

The open list is a MinPriorityQueue keyed by ``f = g + h``; the closed
list is the set of finalized nodes. Optimality requires an admissible
``cost_estimation`` (it never overstates the remaining cost). This is a
caller contract and is not verified: an inadmissible estimate yields
valid but possibly longer paths.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Collection, Hashable
from typing import Any, Generic, TypeVar

from pathfinder.core.priority_queue import min_priority_queue_of
from pathfinder.core.results import SearchResult
from pathfinder.solver.dijkstra import CostFn, NeighborsFn, SolutionPredicate, unit_cost

logger = logging.getLogger(__name__)

N = TypeVar("N", bound=Hashable)

CostEstimationFn = Callable[[Any, Any], Any]

_NOT_ESTIMATED = object()


class SearchState(Generic[N]):
    """Read-only view of a running A* search, handed to ``on_expand``."""

    def __init__(self, search: AStarSearch[N]) -> None:
        self._search = search

    @property
    def next(self) -> N | None:
        """The node the open list would yield next."""
        return self._search._open_list.peek_or_none()

    @property
    def dist(self) -> dict[N, Any]:
        return self._search._dist

    @property
    def prev(self) -> dict[N, N]:
        return self._search._prev


ExpandHook = Callable[[SearchState, Any], None]


class AStarSearch(Generic[N]):
    """
    A* search engine.

    Parameters
    ----------
    start_nodes : collection of N
        Every start node, all at distance 0. Use ``from_start`` for a
        single start; a node may itself be a tuple.
    neighbors_of : callable
        ``neighbors_of(node) -> Collection[N]``.
    cost : callable
        ``cost(from_node, to_node)``, non-negative. Defaults to 1.
    cost_estimation : callable
        ``cost_estimation(node, destination)``. For predicate searches the
        destination is ``None``.
    on_expand : callable, optional
        ``on_expand(state, node)`` invoked before each node is expanded.
    """

    def __init__(
        self,
        start_nodes: Collection[N],
        neighbors_of: NeighborsFn,
        cost: CostFn = unit_cost,
        cost_estimation: CostEstimationFn = lambda node, destination: 0,
        on_expand: ExpandHook | None = None,
    ) -> None:
        self.neighbors_of = neighbors_of
        self.cost = cost
        self.cost_estimation = cost_estimation
        self.on_expand = on_expand

        self._dist: dict[N, Any] = {node: 0 for node in start_nodes}
        self._prev: dict[N, N] = {}
        self._open_list = min_priority_queue_of((node, 0) for node in start_nodes)
        # insertion order is closing order
        self._closed_list: dict[N, None] = {}
        # closed to answer a query, successors not yet examined
        self._pending: list[N] = []
        self._estimated_for: Any = _NOT_ESTIMATED
        self.state: SearchState[N] = SearchState(self)

    @classmethod
    def from_start(
        cls,
        start_node: N,
        neighbors_of: NeighborsFn,
        cost: CostFn = unit_cost,
        cost_estimation: CostEstimationFn = lambda node, destination: 0,
        on_expand: ExpandHook | None = None,
    ) -> AStarSearch[N]:
        """Search from the single node *start_node*."""
        return cls([start_node], neighbors_of, cost, cost_estimation, on_expand)

    # ── Public API ─────────────────────────────────────────────────

    def search(self, destination: N, limit_steps: int | None = None) -> SearchResult[N]:
        """
        Search for *destination*.

        *limit_steps* caps the number of open-list pops; when it runs out
        the result has no solution, and the instance can be asked again
        to continue.
        """
        if destination in self._closed_list:
            return self._result(destination)

        if self._estimated_for != destination:
            self._rekey_open_list(destination)

        return self._run(
            lambda node: node == destination, destination, limit_steps
        )

    def search_matching(
        self, predicate: SolutionPredicate, limit_steps: int | None = None
    ) -> SearchResult[N]:
        """
        Search for the first node matching *predicate*.

        The heuristic is evaluated against ``None``; use an estimate that
        is admissible for every goal (zero degrades to Dijkstra).
        """
        for node in self._closed_list:
            if predicate(node):
                return self._result(node)

        if self._estimated_for is not None:
            self._rekey_open_list(None)
        return self._run(predicate, None, limit_steps)

    # ── Internals ──────────────────────────────────────────────────

    def _run(
        self,
        is_goal: SolutionPredicate,
        destination: N | None,
        limit_steps: int | None,
    ) -> SearchResult[N]:
        while self._pending:
            self._expand(self._pending.pop(), destination)

        steps = 0
        while self._open_list:
            if limit_steps is not None and steps >= limit_steps:
                logger.warning(
                    "A* stopped after %d steps without reaching the goal",
                    limit_steps,
                )
                return self._result(None)
            steps += 1

            current = self._open_list.extract_min()
            if is_goal(current):
                logger.debug(
                    "A* reached %r at distance %s after %d steps",
                    current, self._dist[current], steps,
                )
                self._closed_list[current] = None
                self._pending.append(current)
                return self._result(current)

            self._closed_list[current] = None
            self._expand(current, destination)

        return self._result(None)

    def _expand(self, current: N, destination: N | None) -> None:
        if self.on_expand is not None:
            self.on_expand(self.state, current)
        for successor in self.neighbors_of(current):
            if successor in self._closed_list:
                continue

            tentative = self._dist[current] + self.cost(current, successor)
            if successor in self._open_list and tentative >= self._dist[successor]:
                continue

            self._prev[successor] = current
            self._dist[successor] = tentative
            f = tentative + self.cost_estimation(successor, destination)
            self._open_list.insert_or_update(successor, f)

    def _rekey_open_list(self, destination: N | None) -> None:
        for node in list(self._open_list):
            self._open_list.insert_or_update(
                node, self._dist[node] + self.cost_estimation(node, destination)
            )
        self._estimated_for = destination

    def _result(self, solution: N | None) -> SearchResult[N]:
        return SearchResult(solution, dict(self._dist), dict(self._prev))
