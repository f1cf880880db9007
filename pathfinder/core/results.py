"""
Search results — distances, predecessor links and path reconstruction.

Engines hand out copies of their internal maps, so a result stays valid
when the engine that produced it keeps searching.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Hashable
from dataclasses import dataclass, field
from functools import cached_property
from typing import Any, Generic, TypeVar

N = TypeVar("N", bound=Hashable)


@dataclass
class SearchResult(Generic[N]):
    """
    Outcome of a single-solution search.

    Attributes
    ----------
    solution : N or None
        The node that satisfied the goal, ``None`` if none was found.
    distance : dict
        Best known distance from the start for every discovered node.
    prev : dict
        Predecessor of each discovered node on a shortest known path.
    """

    solution: N | None
    distance: dict[N, Any] = field(default_factory=dict)
    prev: dict[N, N] = field(default_factory=dict)

    @property
    def success(self) -> bool:
        return self.solution is not None

    @property
    def distance_to_start(self) -> Any | None:
        """Distance of the solution from the start, ``None`` on failure."""
        if self.solution is None:
            return None
        return self.distance.get(self.solution)

    @cached_property
    def path(self) -> list[N]:
        return self.path_to(self.solution)

    @property
    def steps(self) -> int | None:
        """Number of edges on the solution path, ``None`` without a path."""
        return len(self.path) - 1 if self.path else None

    def path_to(self, destination: N | None) -> list[N]:
        """
        Walk the predecessor links back from *destination*.

        Returns the path start → destination, or an empty list when the
        destination was never discovered.
        """
        if destination is None or destination not in self.distance:
            return []
        path: deque[N] = deque()
        node: N | None = destination
        while node is not None:
            path.appendleft(node)
            node = self.prev.get(node)
        return list(path)

    def distance_to(self, destination: N | None) -> Any | None:
        return self.distance.get(destination) if destination is not None else None


@dataclass
class MultiSolutionSearchResult(Generic[N]):
    """
    Outcome of a search that keeps every optimal predecessor.

    ``prev`` maps a node to *all* of its predecessors on equal-cost
    shortest paths, so ``paths`` enumerates every shortest path to every
    solution. The number of paths can grow exponentially with the graph.
    """

    solutions: frozenset[N]
    distance: dict[N, Any] = field(default_factory=dict)
    prev: dict[N, list[N]] = field(default_factory=dict)

    @property
    def success(self) -> bool:
        return bool(self.solutions)

    @property
    def distance_to_start(self) -> Any | None:
        for solution in self.solutions:
            return self.distance.get(solution)
        return None

    @cached_property
    def paths(self) -> list[list[N]]:
        return [path for solution in self.solutions for path in self.paths_to(solution)]

    def paths_to(self, destination: N | None) -> list[list[N]]:
        """
        Enumerate every shortest path start → *destination*.

        Uses an explicit stack of (node, suffix) pairs where *suffix* is
        the already-walked tail of the path ending at *destination*.
        Zero-cost edges can make ``prev`` cyclic; only simple paths are
        produced.
        """
        if destination is None or destination not in self.distance:
            return []

        paths: list[list[N]] = []
        stack: list[tuple[N, tuple[N, ...]]] = [(destination, ())]
        while stack:
            node, suffix = stack.pop()
            walked = (node, *suffix)
            predecessors = self.prev.get(node)
            if not predecessors:
                paths.append(list(walked))
                continue
            for predecessor in reversed(predecessors):
                if predecessor not in walked:
                    stack.append((predecessor, walked))
        return paths

    def distance_to(self, destination: N | None) -> Any | None:
        return self.distance.get(destination) if destination is not None else None
