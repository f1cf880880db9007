"""
Heuristics — distance metrics usable as A* cost estimations.

Each metric compares two coordinate vectors. ``from_positions`` turns a
node → coordinates mapping into a ``cost_estimation(node, destination)``
callable.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Mapping, Sequence
from typing import Any

import numpy as np

Metric = Callable[[np.ndarray, np.ndarray], float]


def manhattan_distance(a: np.ndarray, b: np.ndarray) -> float:
    """L1 distance. Admissible on 4-neighbor grids with unit costs."""
    return float(np.abs(a - b).sum())


def euclidean_distance(a: np.ndarray, b: np.ndarray) -> float:
    """Euclidean (L2) distance between two vectors."""
    return float(np.linalg.norm(a - b))


def chebyshev_distance(a: np.ndarray, b: np.ndarray) -> float:
    """L∞ distance. Admissible on 8-neighbor grids with unit costs."""
    return float(np.max(np.abs(a - b))) if a.size else 0.0


def zero_distance(a: np.ndarray, b: np.ndarray) -> float:
    """Always 0; turns A* into Dijkstra."""
    return 0.0


METRICS: dict[str, Metric] = {
    "manhattan": manhattan_distance,
    "euclidean": euclidean_distance,
    "chebyshev": chebyshev_distance,
    "zero": zero_distance,
}


def get_metric(name: str) -> Metric:
    """Look up a metric by name. Raises KeyError for unknown names."""
    if name not in METRICS:
        raise KeyError(
            f"Unknown heuristic {name!r}. "
            f"Available heuristics: {list(METRICS.keys())}"
        )
    return METRICS[name]


def from_positions(
    positions: Mapping[Hashable, Sequence[float]],
    metric: Metric | str = euclidean_distance,
    scale: float = 1.0,
) -> Callable[[Any, Any], float]:
    """
    Build an A* cost estimation from node coordinates.

    Parameters
    ----------
    positions : mapping
        Node → coordinates. Every node the search can reach, and the
        destination, must be present.
    metric : callable or str
        A metric function or the name of one in ``METRICS``.
    scale : float
        Multiplier applied to the metric, e.g. the cheapest cost per
        unit of distance. Keep it small enough to stay admissible.

    A ``None`` destination (predicate searches) is estimated as 0.
    """
    fn = get_metric(metric) if isinstance(metric, str) else metric
    vectors = {
        node: np.asarray(coords, dtype=np.float64) for node, coords in positions.items()
    }

    def estimate(node: Any, destination: Any) -> float:
        if destination is None:
            return 0.0
        try:
            return scale * fn(vectors[node], vectors[destination])
        except KeyError as exc:
            raise KeyError(f"No position for node {exc.args[0]!r}.") from exc

    return estimate


def grid_estimation(metric: Metric | str = manhattan_distance) -> Callable[[Any, Any], float]:
    """Cost estimation for nodes that *are* coordinates, e.g. ``(row, col)``."""
    fn = get_metric(metric) if isinstance(metric, str) else metric

    def estimate(node: Any, destination: Any) -> float:
        if destination is None:
            return 0.0
        return fn(np.asarray(node, dtype=np.float64), np.asarray(destination, dtype=np.float64))

    return estimate
