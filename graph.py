from enum import Enum
from typing import Dict, Iterable, List, Tuple

import numpy as np


class Color(Enum):
    """
    Traversal state of a vertex. Colors are never stored on the graph itself;
    each traversal asks for a fresh buffer via `Graph.fresh_colors`.
    """
    WHITE = 0   # not yet discovered
    GREY = 1    # on the active DFS stack
    BLACK = 2   # finished


class Graph():
    """
    Represents a directed graph whose vertices are the dense integer ids
    0..N-1. Edges are kept twice: as an adjacency list (E, successors sorted
    ascending) for traversal, and as an N x N boolean numpy matrix for O(1)
    edge lookups and the closure computation.

    The structure is fixed once built; use `Graph.from_edges`.
    """
    def __init__(self, num_vertices):
        self.V = range(num_vertices)
        self.E: Dict[int, List[int]] = {v: [] for v in self.V}
        self.matrix = np.zeros((num_vertices, num_vertices), dtype=bool)

    @classmethod
    def from_edges(cls, num_vertices, edges: Iterable[Tuple[int, int]]):
        """
        Builds the graph on vertices 0..`num_vertices`-1 from (from, to)
        pairs. Duplicate pairs collapse into a single edge. Endpoints are
        assumed to already lie in range.
        """
        graph = cls(num_vertices)
        for from_node, to_node in edges:
            graph.matrix[from_node, to_node] = True
        # Deriving the lists from the matrix keeps both views in agreement
        for v in graph.V:
            graph.E[v] = [int(n) for n in np.flatnonzero(graph.matrix[v])]
        graph.matrix.flags.writeable = False
        return graph

    def num_vertices(self):
        return len(self.V)

    def num_edges(self):
        return int(self.matrix.sum())

    def is_vertex(self, v):
        return v in self.V

    def neighbors(self, v):
        return self.E[v]

    def has_edge(self, from_node, to_node):
        return bool(self.matrix[from_node, to_node])

    def edges(self):
        """
        All edges as (from, to) pairs, ascending by from then to.
        """
        return [(v, n) for v in self.V for n in self.E[v]]

    def fresh_colors(self):
        return [Color.WHITE] * len(self.V)

    def reachable_from(self, start):
        """
        Set of vertices reachable from `start`, `start` included.
        """
        visited = {start}
        to_explore = [start]
        while to_explore:
            v = to_explore.pop()
            for n in self.neighbors(v):
                if n not in visited:
                    visited.add(n)
                    to_explore.append(n)
        return visited

    def __eq__(self, other):
        if not isinstance(other, Graph):
            return False
        return self.V == other.V and np.array_equal(self.matrix, other.matrix)

    def __repr__(self):
        return f"Graph({self.num_vertices()} vertices, {self.num_edges()} edges)"
