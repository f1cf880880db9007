"""
SearchEngine — Top-level orchestrator.

Accepts graph JSON, builds a NetworkX graph behind the Graph contract,
delegates to the requested solver strategy, and serializes the result.
Also exposes the level strata of the acyclic traversal.
"""

from __future__ import annotations

import logging
from itertools import islice
from typing import Any

import networkx as nx

from pathfinder import config
from pathfinder.core.graph import NetworkXGraph
from pathfinder.core.heuristics import from_positions, get_metric
from pathfinder.solver.registry import get_solver_class
from pathfinder.solver.strategies import AStarSolver

logger = logging.getLogger(__name__)


class SearchEngine:
    """
    Main entry-point for searches on explicit graphs.

    Usage
    -----
    >>> engine = SearchEngine()
    >>> result = engine.run(graph_json, start="a", goal="d")
    >>> print(result["paths"])
    """

    def __init__(self, default_algorithm: str = config.DEFAULT_ALGORITHM) -> None:
        self.default_algorithm = default_algorithm

    # ── Public API ─────────────────────────────────────────────────

    def run(
        self,
        graph_json: dict[str, Any],
        start: str,
        goal: str | None = None,
        algorithm: str | None = None,
        heuristic: str = config.DEFAULT_HEURISTIC,
        limit_steps: int | None = None,
    ) -> dict[str, Any]:
        """
        Parse a graph payload, search it, and return the outcome.

        Parameters
        ----------
        graph_json : dict
            Must contain "nodes" and "edges"; see ``_parse_graph``.
        start : str
            Id of the start node.
        goal : str, optional
            Id of the goal node. Without one, every reachable node is
            explored and only ``distances`` is meaningful.
        algorithm : str, optional
            Registered algorithm name (default from config).
        heuristic : str
            Metric for A* over node positions ("zero" needs none); other
            algorithms ignore it and need no positions.
        limit_steps : int, optional
            A* expansion cap.

        Returns
        -------
        dict with keys: algorithm, success, solutions, distance, distances,
        paths, node_count, edge_count
        """
        algorithm = algorithm or self.default_algorithm
        solver_cls = get_solver_class(algorithm)
        metric = get_metric(heuristic)
        guided = issubclass(solver_cls, AStarSolver)

        # only A* reads positions
        graph = self._parse_graph(graph_json, heuristic if guided else "zero")
        for label, node in (("start", start), ("goal", goal)):
            if node is not None and node not in graph:
                raise ValueError(f"{label.capitalize()} node {node!r} is not in the graph.")

        if guided:
            solver = solver_cls(
                limit_steps=limit_steps if limit_steps is not None else config.ASTAR_MAX_STEPS
            )
        else:
            solver = solver_cls()

        logger.info(
            "Running %s from %r to %r (heuristic=%s)",
            algorithm, start, goal, metric.__name__,
        )
        result = solver.solve(graph, start, goal)

        if solver.multi_solution:
            solutions = sorted(result.solutions)
            paths = result.paths
        else:
            solutions = [result.solution] if result.success else []
            paths = [result.path] if result.success else []

        return {
            "algorithm": algorithm,
            "success": result.success,
            "solutions": solutions,
            "distance": result.distance_to_start,
            "distances": dict(result.distance),
            "paths": paths,
            "node_count": len(graph),
            "edge_count": graph.nx_graph.number_of_edges(),
        }

    def traverse(
        self,
        graph_json: dict[str, Any],
        start: str,
        max_levels: int = config.MAX_TRAVERSE_LEVELS,
    ) -> list[dict[str, Any]]:
        """
        Return the strata of a complete acyclic traversal from *start*.

        At most *max_levels* strata are produced, since the traversal only
        excludes the two most recent levels and can cycle forever on
        directed cycles.
        """
        graph = self._parse_graph(graph_json)
        if start not in graph:
            raise ValueError(f"Start node {start!r} is not in the graph.")

        levels = [
            {
                "level": stratum.level,
                "nodes": sorted(stratum.nodes_on_level),
                "previous": sorted(stratum.nodes_on_previous_level),
            }
            for stratum in islice(graph.complete_acyclic_traverse(start), max_levels)
        ]
        if len(levels) == max_levels:
            logger.warning("Traversal truncated at %d levels", max_levels)
        return levels

    # ── JSON parsing ───────────────────────────────────────────────

    def _parse_graph(
        self,
        graph_json: dict[str, Any],
        heuristic: str = config.DEFAULT_HEURISTIC,
    ) -> NetworkXGraph:
        """
        Convert graph JSON into a NetworkX-backed Graph.

        Expected JSON format:
        {
          "directed": true,
          "nodes": [
            { "id": "a", "x": 0.0, "y": 0.0 },
            ...
          ],
          "edges": [
            { "source": "a", "target": "b", "cost": 2.5 },
            ...
          ]
        }

        "x"/"y" are only needed for position-based heuristics; "cost"
        defaults to 1 and must be non-negative.
        """
        directed = graph_json.get("directed", True)
        g: nx.Graph = nx.DiGraph() if directed else nx.Graph()

        positions: dict[str, tuple[float, float]] = {}
        for rn in graph_json.get("nodes", []):
            node_id = rn["id"]
            g.add_node(node_id)
            if rn.get("x") is not None and rn.get("y") is not None:
                positions[node_id] = (float(rn["x"]), float(rn["y"]))

        for re_ in graph_json.get("edges", []):
            source = re_["source"]
            target = re_["target"]
            for endpoint in (source, target):
                if endpoint not in g:
                    raise ValueError(f"Edge endpoint {endpoint!r} is not a declared node.")
            cost = re_.get("cost")
            cost = config.DEFAULT_EDGE_COST if cost is None else cost
            if cost < 0:
                raise ValueError(
                    f"Edge {source!r} -> {target!r} has negative cost {cost}."
                )
            g.add_edge(source, target, weight=cost)

        cost_estimation = None
        if heuristic != "zero":
            missing = [n for n in g.nodes if n not in positions]
            if missing:
                raise ValueError(
                    f"Heuristic {heuristic!r} needs x/y for every node; missing: {missing}"
                )
            cost_estimation = from_positions(positions, heuristic)

        logger.info(
            "Parsed graph: %d nodes, %d edges (directed=%s)",
            g.number_of_nodes(),
            g.number_of_edges(),
            directed,
        )
        return NetworkXGraph(g, weight="weight", cost_estimation=cost_estimation)
