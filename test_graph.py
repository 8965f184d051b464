import numpy as np
import pytest

from graph import Color, Graph
from loader import load_edges


def test_from_edges_sorts_successors():
    graph = Graph.from_edges(4, [(0, 3), (0, 1), (2, 0), (0, 2)])
    assert graph.neighbors(0) == [1, 2, 3]
    assert graph.neighbors(1) == []
    assert graph.neighbors(2) == [0]


def test_list_and_matrix_agree():
    graph = load_edges(["0 4", "4 1", "1 1", "3 2", "2 0", "0 1"])
    for i in graph.V:
        for j in graph.V:
            assert (j in graph.neighbors(i)) == graph.has_edge(i, j)


def test_duplicate_edges_collapse():
    once = load_edges(["1 3", "0 2"])
    twice = load_edges(["1 3", "1 3", "0 2"])
    assert once == twice
    assert twice.neighbors(1) == [3]
    assert twice.num_edges() == 2


def test_edges_are_ascending():
    graph = load_edges(["2 0", "0 2", "0 1", "1 0"])
    assert graph.edges() == [(0, 1), (0, 2), (1, 0), (2, 0)]


def test_matrix_is_read_only():
    graph = load_edges(["0 1"])
    with pytest.raises(ValueError):
        graph.matrix[1, 0] = True
    assert graph.matrix.dtype == np.bool_


def test_fresh_colors_are_independent():
    graph = load_edges(["0 1", "1 2"])
    colors = graph.fresh_colors()
    colors[1] = Color.GREY
    assert graph.fresh_colors() == [Color.WHITE] * 3


def test_reachable_from():
    graph = load_edges(["0 1", "1 2", "3 0", "2 1"])
    assert graph.reachable_from(0) == {0, 1, 2}
    assert graph.reachable_from(3) == {0, 1, 2, 3}
    assert graph.reachable_from(2) == {1, 2}


def test_is_vertex():
    graph = load_edges(["0 1"])
    assert graph.is_vertex(0)
    assert graph.is_vertex(1)
    assert not graph.is_vertex(2)
    assert not graph.is_vertex(-1)
