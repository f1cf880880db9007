"""Tests for the solver registry and strategies."""

import pytest

from pathfinder.core.graph import AdjacencyGraph
from pathfinder.solver.interface import SolverInterface
from pathfinder.solver.registry import (
    create_solver,
    get_solver_class,
    list_solvers,
    register_solver,
)
from pathfinder.solver.strategies import AStarSolver, DijkstraAllSolver, DijkstraSolver


def test_default_algorithms_registered():
    assert set(list_solvers()) >= {"dijkstra", "dijkstra-all", "astar", "bfs", "dfs"}
    assert get_solver_class("dijkstra") is DijkstraSolver


def test_unknown_algorithm_raises():
    with pytest.raises(KeyError, match="teleport"):
        get_solver_class("teleport")


def test_create_solver_with_options():
    solver = create_solver("astar", limit_steps=3)
    assert isinstance(solver, AStarSolver)
    assert solver.limit_steps == 3


def test_register_custom_solver(diamond):
    class FirstNeighborSolver(SolverInterface):
        def solve(self, graph, start, goal):
            return DijkstraSolver().solve(graph, start, goal)

    register_solver("first-neighbor", FirstNeighborSolver)
    assert "first-neighbor" in list_solvers()
    result = create_solver("first-neighbor").solve(AdjacencyGraph(diamond), "a", "d")
    assert result.distance_to_start == 2


@pytest.mark.parametrize("name", ["dijkstra", "bfs", "dfs"])
def test_single_path_strategies(diamond, name):
    result = create_solver(name).solve(AdjacencyGraph(diamond), "a", "e")
    assert result.success
    assert result.path[0] == "a" and result.path[-1] == "e"
    assert len(result.path) == 4


def test_dijkstra_all_strategy(diamond):
    solver = create_solver("dijkstra-all")
    assert isinstance(solver, DijkstraAllSolver)
    assert solver.multi_solution
    assert len(solver.solve(AdjacencyGraph(diamond), "a", "e").paths) == 2


def test_astar_needs_cost_estimation(diamond):
    with pytest.raises(TypeError):
        AStarSolver().solve(AdjacencyGraph(diamond), "a", "e")
