"""
Graph contract — what every search algorithm is generic over.

A graph is nothing but a neighbor function, an edge cost (1 unless
overridden) and, for A*, a cost estimation. Graphs may be explicit
(adjacency mapping, NetworkX) or computed on demand; implicit and even
infinite graphs are fine as long as ``neighbors_of`` terminates.

Design: the search engines themselves take plain callables; the methods
on ``Graph`` are thin conveniences that wire a graph into them.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Collection, Hashable, Iterator, Mapping
from typing import Any, Generic, TypeVar

import networkx as nx

from pathfinder.core.results import MultiSolutionSearchResult, SearchResult
from pathfinder.solver.astar import AStarSearch
from pathfinder.solver.dijkstra import Dijkstra
from pathfinder.solver.uninformed import (
    AcyclicTraverseLevel,
    BfsSearch,
    SearchEngineWithNodes,
    SolutionPredicate,
)

N = TypeVar("N", bound=Hashable)


class Graph(ABC, Generic[N]):
    """A graph described by the neighborhood of its nodes."""

    @abstractmethod
    def neighbors_of(self, node: N) -> Collection[N]:
        """Return the direct successors of *node*."""
        ...

    def cost(self, from_node: N, to_node: N) -> Any:
        """Cost of the edge *from_node* → *to_node*. Must be non-negative."""
        return 1

    # ── Search conveniences ────────────────────────────────────────

    def dijkstra_search(
        self,
        start: N,
        destination: N | None = None,
        *,
        predicate: SolutionPredicate | None = None,
    ) -> SearchResult[N]:
        return Dijkstra(start, self.neighbors_of, self.cost).search(
            destination, predicate=predicate
        )

    def dijkstra_search_all(
        self,
        start: N,
        destination: N | None = None,
        *,
        predicate: SolutionPredicate | None = None,
    ) -> MultiSolutionSearchResult[N]:
        return Dijkstra(start, self.neighbors_of, self.cost).search_all(
            destination, predicate=predicate
        )

    def breadth_first_search(self, start: N, predicate: SolutionPredicate) -> BfsSearch[N]:
        return SearchEngineWithNodes(self.neighbors_of).bfs_search(start, predicate)

    def depth_first_search(
        self,
        start: N,
        destination: N | None = None,
        *,
        predicate: SolutionPredicate | None = None,
    ) -> list[N]:
        if predicate is None:
            predicate = lambda node: node == destination  # noqa: E731
        return SearchEngineWithNodes(self.neighbors_of).depth_first_search(start, predicate)

    def complete_acyclic_traverse(self, start: N) -> Iterator[AcyclicTraverseLevel[N]]:
        return SearchEngineWithNodes(self.neighbors_of).complete_acyclic_traverse(start)


class GraphWithCostEstimation(Graph[N]):
    """A graph that can also estimate the remaining cost, for A*."""

    @abstractmethod
    def cost_estimation(self, from_node: N, to_node: N | None) -> Any:
        """Admissible estimate of the cost *from_node* → *to_node*."""
        ...

    def a_star_search(
        self, start: N, destination: N, limit_steps: int | None = None
    ) -> SearchResult[N]:
        return AStarSearch.from_start(
            start,
            neighbors_of=self.neighbors_of,
            cost=self.cost,
            cost_estimation=self.cost_estimation,
        ).search(destination, limit_steps)


# ── Adapters ───────────────────────────────────────────────────────

class FunctionGraph(GraphWithCostEstimation[N]):
    """Graph backed by plain callables."""

    def __init__(
        self,
        neighbors_of: Callable[[N], Collection[N]],
        cost: Callable[[N, N], Any] | None = None,
        cost_estimation: Callable[[N, N | None], Any] | None = None,
    ) -> None:
        self._neighbors_of = neighbors_of
        self._cost = cost
        self._cost_estimation = cost_estimation

    def neighbors_of(self, node: N) -> Collection[N]:
        return self._neighbors_of(node)

    def cost(self, from_node: N, to_node: N) -> Any:
        if self._cost is None:
            return 1
        return self._cost(from_node, to_node)

    def cost_estimation(self, from_node: N, to_node: N | None) -> Any:
        if self._cost_estimation is None:
            return 0
        return self._cost_estimation(from_node, to_node)


def graph(
    neighbors_of: Callable[[N], Collection[N]],
    cost: Callable[[N, N], Any] | None = None,
    cost_estimation: Callable[[N, N | None], Any] | None = None,
) -> FunctionGraph[N]:
    """
    Build a graph from callables.

    Without *cost* every edge costs 1; without *cost_estimation* the
    estimate is 0, which makes A* behave like Dijkstra.
    """
    return FunctionGraph(neighbors_of, cost, cost_estimation)


def with_cost_estimation(
    base: Graph[N], cost_estimation: Callable[[N, N | None], Any]
) -> FunctionGraph[N]:
    """Wrap *base* so that it also offers *cost_estimation*."""
    return FunctionGraph(base.neighbors_of, base.cost, cost_estimation)


class AdjacencyGraph(Graph[N]):
    """
    Graph over an adjacency mapping ``node -> iterable of neighbors``.

    Nodes missing from the mapping have no neighbors.
    """

    def __init__(self, adjacency: Mapping[N, Collection[N]]) -> None:
        self.adjacency = adjacency

    def neighbors_of(self, node: N) -> Collection[N]:
        return self.adjacency.get(node, ())


class NetworkXGraph(GraphWithCostEstimation[N]):
    """
    Adapter over a NetworkX graph.

    Directed graphs expose successors, undirected graphs all adjacent
    nodes. Edge costs come from the *weight* attribute (1 when absent).
    """

    def __init__(
        self,
        nx_graph: nx.Graph,
        weight: str = "weight",
        cost_estimation: Callable[[N, N | None], Any] | None = None,
    ) -> None:
        self.nx_graph = nx_graph
        self.weight = weight
        self._cost_estimation = cost_estimation

    def neighbors_of(self, node: N) -> Collection[N]:
        if node not in self.nx_graph:
            return ()
        return list(self.nx_graph.neighbors(node))

    def cost(self, from_node: N, to_node: N) -> Any:
        return self.nx_graph.edges[from_node, to_node].get(self.weight, 1)

    def cost_estimation(self, from_node: N, to_node: N | None) -> Any:
        if self._cost_estimation is None:
            return 0
        return self._cost_estimation(from_node, to_node)

    def __contains__(self, node: object) -> bool:
        return node in self.nx_graph

    def __len__(self) -> int:
        return self.nx_graph.number_of_nodes()
