"""
Solver Registry — maps algorithm names to solver classes.

This is the single extensibility point for adding new algorithms.
"""

from __future__ import annotations

from typing import Any, Type

from pathfinder.solver.interface import SolverInterface
from pathfinder.solver.strategies import (
    AStarSolver,
    BreadthFirstSolver,
    DepthFirstSolver,
    DijkstraAllSolver,
    DijkstraSolver,
)

# ── Default registry ───────────────────────────────────────────────

_REGISTRY: dict[str, Type[SolverInterface]] = {
    "dijkstra": DijkstraSolver,
    "dijkstra-all": DijkstraAllSolver,
    "astar": AStarSolver,
    "bfs": BreadthFirstSolver,
    "dfs": DepthFirstSolver,
}


def register_solver(name: str, cls: Type[SolverInterface]) -> None:
    """Register a new algorithm (or override an existing one)."""
    _REGISTRY[name] = cls


def get_solver_class(name: str) -> Type[SolverInterface]:
    """
    Look up the solver class for an algorithm name.

    Raises KeyError if the name is not registered.
    """
    if name not in _REGISTRY:
        raise KeyError(
            f"Unknown algorithm {name!r}. "
            f"Registered algorithms: {list(_REGISTRY.keys())}"
        )
    return _REGISTRY[name]


def list_solvers() -> list[str]:
    """Return all registered algorithm names."""
    return list(_REGISTRY.keys())


def create_solver(name: str, **options: Any) -> SolverInterface:
    """
    Factory: instantiate a solver by its algorithm name.
    """
    cls = get_solver_class(name)
    return cls(**options)
