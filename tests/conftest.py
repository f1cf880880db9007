"""
Pytest configuration and shared fixtures.

The maze has a start S, an end E and a far node Z. The only short way to Z
crosses the teleporter cell ``*``, which costs 10 to enter instead of 1,
so the cheapest route to Z takes the long way round.
"""

import random
from pathlib import Path

import networkx as nx
import pytest

from pathfinder.core.graph import FunctionGraph, NetworkXGraph, graph

MAZE = """\
#####
#..E#   #####
#...#   #...#
#.#.#####.#.#####
#S#.......*....Z#
#################"""

Point = tuple[int, int]


def parse_maze(text: str) -> dict[Point, str]:
    return {
        (row, col): char
        for row, line in enumerate(text.splitlines())
        for col, char in enumerate(line)
    }


def find(maze: dict[Point, str], char: str) -> Point:
    return next(p for p, c in maze.items() if c == char)


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def maze() -> dict[Point, str]:
    return parse_maze(MAZE)


@pytest.fixture
def maze_points(maze: dict[Point, str]) -> dict[str, Point]:
    """Positions of S, E and Z."""
    return {char: find(maze, char) for char in "SEZ"}


@pytest.fixture
def maze_graph(maze: dict[Point, str]) -> FunctionGraph[Point]:
    """4-neighbor maze graph; entering ``*`` costs 10, everything else 1."""

    def neighbors_of(p: Point) -> list[Point]:
        row, col = p
        candidates = [(row - 1, col), (row + 1, col), (row, col - 1), (row, col + 1)]
        return [q for q in candidates if maze.get(q, "#") != "#"]

    def cost(from_node: Point, to_node: Point) -> int:
        return 10 if maze[to_node] == "*" else 1

    return graph(neighbors_of, cost)


@pytest.fixture
def diamond() -> dict[str, list[str]]:
    """a → {b, c} → d → e: two equally short paths from a to e."""
    return {"a": ["b", "c"], "b": ["d"], "c": ["d"], "d": ["e"], "e": []}


def random_weighted_digraph(seed: int, n: int = 8, p: float = 0.35) -> nx.DiGraph:
    """Small random digraph with integer weights 1..3 (plenty of ties)."""
    g = nx.gnp_random_graph(n, p, seed=seed, directed=True)
    rng = random.Random(seed)
    for u, v in g.edges:
        g.edges[u, v]["weight"] = rng.randint(1, 3)
    return g


@pytest.fixture(params=range(12))
def random_graph(request) -> NetworkXGraph:
    return NetworkXGraph(random_weighted_digraph(request.param))
