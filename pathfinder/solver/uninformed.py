"""
Uninformed traversal — BFS, DFS and level-synchronous strata.

The engines work on graphs described either by neighbors
(``neighbors_of(node)``) or by edges (``edges_of(node)`` plus
``walk_edge(node, edge) -> node``). None of them needs edge costs or a
priority queue.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Callable, Collection, Hashable, Iterable, Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, TypeVar

from pathfinder.core.priority_queue import UniqueQueue

logger = logging.getLogger(__name__)

N = TypeVar("N", bound=Hashable)
E = TypeVar("E")

SolutionPredicate = Callable[[Any], bool]


class SearchControl(Enum):
    STOP = "stop"
    CONTINUE = "continue"


# (level, nodes on this level, nodes visited so far) -> SearchControl
DebugHandler = Callable[[int, Collection[Any], Collection[Any]], SearchControl]


def logging_debugger(level: int = logging.INFO) -> DebugHandler:
    """Return a debug handler that logs BFS progress once per level."""

    def handler(
        search_level: int, nodes_on_level: Collection[Any], nodes_visited: Collection[Any]
    ) -> SearchControl:
        logger.log(
            level,
            "BFS level %d: searching through %d node(s), visited so far: %d",
            search_level,
            len(nodes_on_level),
            len(nodes_visited),
        )
        return SearchControl.CONTINUE

    return handler


@dataclass(frozen=True)
class AcyclicTraverseLevel(Generic[N]):
    """One stratum of a complete acyclic traversal; iterates its own nodes."""

    level: int
    nodes_on_level: frozenset[N]
    nodes_on_previous_level: frozenset[N]

    def __iter__(self) -> Iterator[N]:
        return iter(self.nodes_on_level)

    def __len__(self) -> int:
        return len(self.nodes_on_level)

    def __contains__(self, node: object) -> bool:
        return node in self.nodes_on_level


# ── BFS ────────────────────────────────────────────────────────────

class BfsSearch(Generic[N]):
    """
    Level-synchronous breadth-first search, run on construction.

    Attributes
    ----------
    solution : N or None
        First node found that satisfies the predicate.
    nodes_visited : set
        Nodes whose neighbors have been examined.
    nodes_discovered_through : dict
        First-discovery predecessor of every discovered node.
    """

    def __init__(
        self,
        start_node: N,
        neighbors_of: Callable[[N], Iterable[N]],
        is_solution: SolutionPredicate,
        debug_handler: DebugHandler | None = None,
    ) -> None:
        self.start_node = start_node
        self.nodes_visited: set[N] = set()
        self.nodes_discovered_through: dict[N, N] = {}
        self._neighbors_of = neighbors_of
        self._is_solution = is_solution
        self._debug_handler = debug_handler

        if is_solution(start_node):
            self.solution: N | None = start_node
        else:
            self.solution = self._search_levels({start_node})

    def _search_levels(self, nodes_on_level: set[N]) -> N | None:
        level = 0
        while nodes_on_level:
            if (
                self._debug_handler is not None
                and self._debug_handler(level, nodes_on_level, self.nodes_visited)
                is SearchControl.STOP
            ):
                logger.debug("BFS stopped by debug handler on level %d", level)
                return None

            nodes_on_next_level: set[N] = set()
            for current in nodes_on_level:
                self.nodes_visited.add(current)
                for node in self._neighbors_of(current):
                    if (
                        node in self.nodes_visited
                        or node in nodes_on_level
                        or node in nodes_on_next_level
                    ):
                        continue
                    self.nodes_discovered_through[node] = current
                    if self._is_solution(node):
                        return node
                    nodes_on_next_level.add(node)

            nodes_on_level = nodes_on_next_level
            level += 1
        return None

    @property
    def success(self) -> bool:
        return self.solution is not None

    def path(self) -> list[N]:
        """Path start → solution, empty when the search failed."""
        return _walk_back(self.solution, self.nodes_discovered_through)


# ── Engines ────────────────────────────────────────────────────────

class SearchEngineWithEdges(Generic[N, E]):
    """
    Uninformed searches over a graph given by ``edges_of(node)`` and
    ``walk_edge(node, edge)``.

    ``debug_handler`` is passed to every BFS started from this engine.
    """

    def __init__(
        self,
        edges_of: Callable[[N], Iterable[E]],
        walk_edge: Callable[[N, E], N],
    ) -> None:
        self.edges_of = edges_of
        self.walk_edge = walk_edge
        self.debug_handler: DebugHandler | None = None

    def neighbors_of(self, node: N) -> list[N]:
        return [self.walk_edge(node, edge) for edge in self.edges_of(node)]

    # ── Searches ───────────────────────────────────────────────────

    def bfs_search(self, start_node: N, is_solution: SolutionPredicate) -> BfsSearch[N]:
        return BfsSearch(start_node, self.neighbors_of, is_solution, self.debug_handler)

    def depth_first_search(self, start_node: N, is_solution: SolutionPredicate) -> list[N]:
        """Path start → first solution found depth-first, or ``[]``."""
        return self.depth_first_search_with_nodes(start_node, is_solution)[0]

    def depth_first_search_with_nodes(
        self, start_node: N, is_solution: SolutionPredicate
    ) -> tuple[list[N], set[N]]:
        """
        Depth-first search returning ``(path, visited)``.

        Neighbors are explored in the order ``neighbors_of`` yields them,
        exactly like a recursive DFS, but with an explicit stack of
        neighbor iterators so deep graphs cannot exhaust the call stack.
        """
        visited: set[N] = set()
        discovered_through: dict[N, N] = {}
        solution: N | None = None

        if is_solution(start_node):
            solution = start_node
        else:
            visited.add(start_node)
            stack: list[tuple[N, Iterator[N]]] = [
                (start_node, iter(self.neighbors_of(start_node)))
            ]
            while stack and solution is None:
                node, successors = stack[-1]
                for successor in successors:
                    if successor in visited:
                        continue
                    discovered_through[successor] = node
                    if is_solution(successor):
                        solution = successor
                    else:
                        visited.add(successor)
                        stack.append((successor, iter(self.neighbors_of(successor))))
                    break
                else:
                    stack.pop()

        return _walk_back(solution, discovered_through), visited

    # ── Traversals ─────────────────────────────────────────────────

    def complete_acyclic_traverse(self, start_node: N) -> Iterator[AcyclicTraverseLevel[N]]:
        """
        Yield the graph level by level, starting with ``{start_node}``.

        A neighbor is left out of the next level only if it lies on the
        current or the previous level. Older levels are not remembered, so
        on graphs with longer cycles nodes can show up again and the
        traversal may not end.
        """
        nodes_on_level: frozenset[N] = frozenset()
        nodes_on_next_level: frozenset[N] = frozenset({start_node})
        level = 0

        while nodes_on_next_level:
            nodes_on_previous_level = nodes_on_level
            nodes_on_level = nodes_on_next_level
            yield AcyclicTraverseLevel(level, nodes_on_level, nodes_on_previous_level)
            level += 1

            nodes_on_next_level = frozenset(
                neighbor
                for node in nodes_on_level
                for neighbor in self.neighbors_of(node)
                if neighbor not in nodes_on_level
                and neighbor not in nodes_on_previous_level
            )

    def breadth_first_traverse(self, start_node: N) -> Iterator[N]:
        """Yield every reachable node once, in breadth-first discovery order."""
        queue: UniqueQueue[N] = UniqueQueue([start_node])
        visited: set[N] = set()
        yield start_node
        while queue:
            current = queue.remove_first()
            visited.add(current)
            for neighbor in self.neighbors_of(current):
                if neighbor not in visited and queue.add(neighbor):
                    yield neighbor


class SearchEngineWithNodes(SearchEngineWithEdges[N, N]):
    """Uninformed searches over a graph given by ``neighbors_of(node)``."""

    def __init__(self, neighbors_of: Callable[[N], Iterable[N]]) -> None:
        super().__init__(neighbors_of, lambda node, edge: edge)


# ── Convenience functions ──────────────────────────────────────────

def breadth_first_search(
    start_node: N,
    neighbors_of: Callable[[N], Iterable[N]],
    is_solution: SolutionPredicate,
) -> BfsSearch[N]:
    return SearchEngineWithNodes(neighbors_of).bfs_search(start_node, is_solution)


def breadth_first_search_edges(
    start_node: N,
    edges_of: Callable[[N], Iterable[E]],
    walk_edge: Callable[[N, E], N],
    is_solution: SolutionPredicate,
) -> BfsSearch[N]:
    return SearchEngineWithEdges(edges_of, walk_edge).bfs_search(start_node, is_solution)


def depth_first_search(
    start_node: N,
    neighbors_of: Callable[[N], Iterable[N]],
    is_solution: SolutionPredicate,
) -> list[N]:
    return SearchEngineWithNodes(neighbors_of).depth_first_search(start_node, is_solution)


def _walk_back(node: N | None, discovered_through: dict[N, N]) -> list[N]:
    path: deque[N] = deque()
    while node is not None:
        path.appendleft(node)
        node = discovered_through.get(node)
    return list(path)
