"""
Concrete solver strategies — one per search algorithm.
"""

from __future__ import annotations

import logging
from collections.abc import Hashable

from pathfinder.core.graph import Graph, GraphWithCostEstimation
from pathfinder.core.results import MultiSolutionSearchResult, SearchResult
from pathfinder.solver.interface import SolverInterface

logger = logging.getLogger(__name__)


class DijkstraSolver(SolverInterface):
    """Single shortest path with Dijkstra's algorithm."""

    def solve(self, graph: Graph, start: Hashable, goal: Hashable | None) -> SearchResult:
        return graph.dijkstra_search(start, goal)


class DijkstraAllSolver(SolverInterface):
    """Every shortest path with the multi-solution Dijkstra variant."""

    multi_solution = True

    def solve(
        self, graph: Graph, start: Hashable, goal: Hashable | None
    ) -> MultiSolutionSearchResult:
        return graph.dijkstra_search_all(start, goal)


class AStarSolver(SolverInterface):
    """
    A* search.

    Params
    ------
    limit_steps : int, optional
        Expansion cap; the search reports no solution once it is hit.
    """

    def __init__(self, limit_steps: int | None = None) -> None:
        self.limit_steps = limit_steps

    def solve(self, graph: Graph, start: Hashable, goal: Hashable | None) -> SearchResult:
        if not isinstance(graph, GraphWithCostEstimation):
            raise TypeError(
                f"A* needs a graph with cost estimation, got {type(graph).__name__}."
            )
        if goal is None:
            raise ValueError("A* needs a goal node.")
        return graph.a_star_search(start, goal, self.limit_steps)


class BreadthFirstSolver(SolverInterface):
    """Fewest-edges path with a level-synchronous BFS. Ignores edge costs."""

    def solve(self, graph: Graph, start: Hashable, goal: Hashable | None) -> SearchResult:
        bfs = graph.breadth_first_search(start, lambda node: node == goal)
        path = bfs.path()
        logger.debug(
            "BFS visited %d node(s), solution=%r", len(bfs.nodes_visited), bfs.solution
        )
        return SearchResult(
            bfs.solution,
            {node: steps for steps, node in enumerate(path)},
            dict(bfs.nodes_discovered_through),
        )


class DepthFirstSolver(SolverInterface):
    """Any path with an iterative DFS. Ignores edge costs."""

    def solve(self, graph: Graph, start: Hashable, goal: Hashable | None) -> SearchResult:
        path = graph.depth_first_search(start, goal)
        return SearchResult(
            path[-1] if path else None,
            {node: steps for steps, node in enumerate(path)},
            {node: previous for previous, node in zip(path, path[1:])},
        )
