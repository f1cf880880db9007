"""
Solver Interface — abstract base for all search strategies.

Design: Strategy pattern. The SearchEngine delegates to whichever
SolverInterface implementation a request names, so new algorithms can be
registered without touching the rest of the code.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Hashable

from pathfinder.core.graph import Graph
from pathfinder.core.results import MultiSolutionSearchResult, SearchResult


class SolverInterface(ABC):
    """
    Abstract solver that searches a graph from a start node.
    """

    #: True if the solver reports every shortest path, not just one.
    multi_solution: bool = False

    @abstractmethod
    def solve(
        self,
        graph: Graph,
        start: Hashable,
        goal: Hashable | None,
    ) -> SearchResult | MultiSolutionSearchResult:
        """
        Search *graph* from *start* for *goal*.

        Parameters
        ----------
        graph : the Graph to search
        start : node to start from
        goal : node to reach; ``None`` explores everything reachable

        Returns
        -------
        SearchResult or MultiSolutionSearchResult
            "No path" is reported through the result, never raised.
        """
        ...
