"""Tests for the Dijkstra engine — maze example, memoization, optimality."""

import math

import networkx as nx
import pytest

from pathfinder.solver.dijkstra import Dijkstra


def _path_cost(graph, path):
    return sum(graph.cost(u, v) for u, v in zip(path, path[1:]))


# ── Maze example ───────────────────────────────────────────────────

def test_shortest_path_from_s_to_e(maze_graph, maze_points):
    start, end, z = maze_points["S"], maze_points["E"], maze_points["Z"]

    forward = maze_graph.dijkstra_search(start, end)
    backward = maze_graph.dijkstra_search(end, start)

    assert forward.success
    assert forward.distance_to_start == 5
    assert len(forward.path) == 6
    assert forward.path[0] == start and forward.path[-1] == end
    assert forward.path_to(start) == [start]
    assert forward.path_to(z) == []

    assert backward.success
    assert backward.distance_to_start == 5
    assert len(backward.path) == 6


def test_search_without_destination_computes_all_distances(maze_graph, maze_points):
    start, end, z = maze_points["S"], maze_points["E"], maze_points["Z"]

    result = maze_graph.dijkstra_search(start, None)

    assert not result.success
    assert result.distance_to_start is None
    assert result.path == []
    assert len(result.path_to(end)) == 6
    assert len(result.path_to(z)) == 23
    assert result.distance_to(z) == 22


def test_predicate_search_avoids_expensive_shortcut(maze_graph, maze_points, maze):
    z = maze_points["Z"]
    result = maze_graph.dijkstra_search(maze_points["S"], predicate=lambda p: p == z)

    assert result.solution == z
    assert result.distance_to_start == 22
    assert len(result.path) == 23
    assert all(maze[p] != "*" for p in result.path)


def test_all_shortest_paths_from_s_to_e(maze_graph, maze_points):
    start, end = maze_points["S"], maze_points["E"]

    forward = maze_graph.dijkstra_search_all(start, end)
    backward = maze_graph.dijkstra_search_all(end, start)

    assert forward.success
    assert forward.distance_to_start == 5
    assert len(forward.paths) == 3
    assert all(len(path) == 6 for path in forward.paths)
    assert len({tuple(path) for path in forward.paths}) == 3

    assert backward.success
    assert backward.distance_to_start == 5
    assert all(len(path) == 6 for path in backward.paths)


def test_search_all_returns_every_tied_solution(diamond):
    engine = Dijkstra("a", lambda n: diamond[n])
    result = engine.search_all(predicate=lambda n: n in {"b", "c"})

    assert result.solutions == frozenset({"b", "c"})
    assert result.distance_to_start == 1
    assert sorted(result.paths) == [["a", "b"], ["a", "c"]]


# ── Degenerate cases ───────────────────────────────────────────────

def test_start_satisfies_goal():
    engine = Dijkstra("s", lambda n: ["t"])
    result = engine.search("s")
    assert result.solution == "s"
    assert result.distance_to_start == 0
    assert result.path == ["s"]

    multi = Dijkstra("s", lambda n: ["t"]).search_all(predicate=lambda n: n == "s")
    assert multi.solutions == frozenset({"s"})
    assert multi.paths == [["s"]]


def test_isolated_start_has_no_solution():
    engine = Dijkstra("alone", lambda n: [])
    result = engine.search("elsewhere")
    assert result.solution is None
    assert result.path == []
    assert result.distance == {"alone": 0}

    multi = Dijkstra("alone", lambda n: []).search_all("elsewhere")
    assert multi.solutions == frozenset()
    assert multi.paths == []


def test_destination_and_predicate_are_exclusive():
    engine = Dijkstra("a", lambda n: [])
    with pytest.raises(TypeError):
        engine.search("a", predicate=lambda n: True)


def test_errors_from_neighbors_propagate():
    def neighbors_of(node):
        raise RuntimeError("boom")

    engine = Dijkstra("a", neighbors_of)
    with pytest.raises(RuntimeError, match="boom"):
        engine.search("b")


# ── Memoization across queries ─────────────────────────────────────

def test_repeated_queries_reuse_finalized_nodes(maze_graph, maze_points):
    calls = []

    def counting_neighbors(p):
        calls.append(p)
        return maze_graph.neighbors_of(p)

    engine = Dijkstra(maze_points["S"], counting_neighbors, maze_graph.cost)

    first = engine.search(maze_points["E"])
    assert first.distance_to_start == 5

    far = engine.search(maze_points["Z"])
    assert far.distance_to_start == 22
    assert len(far.path) == 23

    calls_before = len(calls)
    again = engine.search(maze_points["E"])
    assert again.distance_to_start == 5
    assert engine.search(maze_points["S"]).path == [maze_points["S"]]
    assert engine.search(predicate=lambda p: p == maze_points["E"]).distance_to_start == 5
    assert len(calls) == calls_before


def test_resumed_search_continues_past_previous_goal():
    chain = {"a": ["b"], "b": ["c"], "c": ["d"], "d": []}
    engine = Dijkstra("a", lambda n: chain[n])

    assert engine.search("b").distance_to_start == 1
    assert engine.search("d").path == ["a", "b", "c", "d"]

    multi_chain = Dijkstra("a", lambda n: chain[n])
    assert multi_chain.search_all("b").paths == [["a", "b"]]
    assert multi_chain.search_all("d").paths == [["a", "b", "c", "d"]]


def test_search_all_predicate_answered_from_settled_nodes(diamond):
    calls = []

    def counting_neighbors(n):
        calls.append(n)
        return diamond[n]

    engine = Dijkstra("a", counting_neighbors)
    assert engine.search_all("e").distance_to_start == 3
    calls_before = len(calls)

    # b, c and d are all settled; only the closest matches are solutions
    result = engine.search_all(predicate=lambda n: n in {"b", "c", "d"})
    assert result.solutions == frozenset({"b", "c"})
    assert result.distance_to_start == 1
    assert sorted(result.paths) == [["a", "b"], ["a", "c"]]

    assert sorted(engine.search_all("d").paths) == [["a", "b", "d"], ["a", "c", "d"]]
    assert len(calls) == calls_before


def test_results_are_snapshots():
    chain = {"a": ["b"], "b": ["c"], "c": []}
    engine = Dijkstra("a", lambda n: chain[n])
    first = engine.search("b")
    engine.search(None)
    assert "c" not in first.distance
    assert first.path == ["a", "b"]


# ── Optimality against brute force ─────────────────────────────────

def test_distances_match_brute_force(random_graph):
    g = random_graph.nx_graph
    result = Dijkstra(0, random_graph.neighbors_of, random_graph.cost).search(None)

    for target in g.nodes:
        costs = [
            _path_cost(random_graph, path)
            for path in nx.all_simple_paths(g, 0, target)
        ]
        if target == 0:
            costs.append(0)
        expected = min(costs, default=math.inf)
        assert result.distance.get(target, math.inf) == expected


def test_predecessors_are_consistent(random_graph):
    result = Dijkstra(0, random_graph.neighbors_of, random_graph.cost).search(None)

    assert result.distance[0] == 0
    for node, previous in result.prev.items():
        assert result.distance[node] == result.distance[previous] + random_graph.cost(previous, node)
        path = result.path_to(node)
        assert path[0] == 0
        assert _path_cost(random_graph, path) == result.distance[node]


def test_all_shortest_paths_match_networkx(random_graph):
    g = random_graph.nx_graph
    reachable = nx.single_source_dijkstra_path_length(g, 0, weight="weight")

    for target, distance in reachable.items():
        result = Dijkstra(0, random_graph.neighbors_of, random_graph.cost).search_all(target)
        expected = sorted(nx.all_shortest_paths(g, 0, target, weight="weight"))
        assert result.distance_to_start == distance
        assert sorted(result.paths) == expected


# ── Zero-cost edges ────────────────────────────────────────────────

def _weighted(edges):
    g = nx.DiGraph()
    g.add_weighted_edges_from(edges)
    return g, (lambda n: list(g.successors(n))), (lambda u, v: g.edges[u, v]["weight"])


def test_zero_cost_edge_into_settled_tie():
    g, neighbors_of, cost = _weighted([(0, 1, 0), (0, 2, 0), (2, 1, 0)])
    expected = sorted(nx.all_shortest_paths(g, 0, 1, weight="weight"))
    assert expected == [[0, 1], [0, 2, 1]]

    fresh = Dijkstra(0, neighbors_of, cost).search_all(1)
    assert sorted(fresh.paths) == expected

    explored = Dijkstra(0, neighbors_of, cost)
    explored.search_all(None)
    assert sorted(explored.search_all(1).paths) == expected


def test_zero_cost_cycle_keeps_simple_paths():
    g, neighbors_of, cost = _weighted(
        [("s", "a", 1), ("s", "b", 1), ("a", "b", 0), ("b", "a", 0), ("a", "t", 1)]
    )
    result = Dijkstra("s", neighbors_of, cost).search_all("t")

    assert result.distance_to_start == 2
    assert sorted(result.paths) == sorted(nx.all_shortest_paths(g, "s", "t", weight="weight"))
    assert sorted(result.paths) == [["s", "a", "t"], ["s", "b", "a", "t"]]
