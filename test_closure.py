import random

import numpy as np

from closure import new_edges, transitive_closure
from graph import Graph
from loader import load_edges


def triple_loop_closure(graph):
    n = graph.num_vertices()
    reach = [[bool(graph.matrix[i, j]) for j in range(n)] for i in range(n)]
    for k in range(n):
        for i in range(n):
            for j in range(n):
                if i != k and j != k:
                    reach[i][j] = reach[i][j] or (reach[i][k] and reach[k][j])
    return np.array(reach, dtype=bool)


def random_graph(rng, n, n_edges):
    edges = [(v, (v + 1) % n) for v in range(0, n, 2)]
    edges += [(rng.randrange(n), rng.randrange(n)) for _ in range(n_edges)]
    used = sorted({v for edge in edges for v in edge})
    index = {v: i for i, v in enumerate(used)}
    return Graph.from_edges(len(used), [(index[a], index[b]) for a, b in edges])


def test_chain_of_two():
    graph = load_edges(["0 1", "1 2"])
    assert new_edges(graph) == [(0, 2)]


def test_longer_chain():
    graph = load_edges(["0 1", "1 2", "2 3"])
    assert new_edges(graph) == [(0, 2), (0, 3), (1, 3)]


def test_no_new_edges():
    assert new_edges(load_edges(["0 1"])) == []
    assert new_edges(load_edges(["0 1", "0 2", "1 2"])) == []


def test_cycle_reaches_itself():
    graph = load_edges(["0 1", "1 0"])
    assert new_edges(graph) == [(0, 0), (1, 1)]


def test_closure_leaves_graph_untouched():
    graph = load_edges(["0 1", "1 2"])
    before = graph.matrix.copy()
    transitive_closure(graph)
    assert np.array_equal(graph.matrix, before)


def test_matches_triple_loop():
    rng = random.Random(1464)
    for _ in range(25):
        graph = random_graph(rng, rng.randint(2, 12), rng.randint(0, 30))
        assert np.array_equal(transitive_closure(graph), triple_loop_closure(graph))


def test_direct_edges_never_reported():
    rng = random.Random(7)
    for _ in range(25):
        graph = random_graph(rng, rng.randint(2, 12), rng.randint(0, 30))
        added = new_edges(graph)
        assert added == sorted(added)
        for i, j in added:
            assert not graph.has_edge(i, j)
            assert j in graph.reachable_from(i)


def test_progress_bar_gives_same_answer(capsys):
    graph = load_edges(["0 1", "1 2", "2 3"])
    assert new_edges(graph, progress=True) == new_edges(graph)
    assert capsys.readouterr().out == ""
