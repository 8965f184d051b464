import sys
from typing import List, Tuple

import numpy as np
from tqdm import tqdm

from graph import Graph


def transitive_closure(graph: Graph, progress=False) -> np.ndarray:
    """
    Boolean Floyd-Warshall. reach[i, j] ends up True iff there is a path of
    one or more edges from i to j; the diagonal is True only for vertices on
    a cycle (or with a self-loop).

    For a fixed intermediate vertex k, row k and column k never change during
    that round, so every row i != k that reaches k can be OR-ed with row k in
    one numpy operation. Column k is left out, as is row k itself.
    """
    reach = graph.matrix.copy()
    intermediates = range(graph.num_vertices())
    if progress:
        intermediates = tqdm(intermediates, desc='Transitive closure', file=sys.stderr)
    for k in intermediates:
        through_k = reach[:, k].copy()
        through_k[k] = False
        from_k = reach[k].copy()
        from_k[k] = False
        reach[through_k] |= from_k
    return reach


def new_edges(graph: Graph, progress=False) -> List[Tuple[int, int]]:
    """
    Pairs (i, j), ascending by i then j, that the closure adds on top of the
    edges already in `graph`.
    """
    reach = transitive_closure(graph, progress)
    added = reach & ~graph.matrix
    return [(int(i), int(j)) for i, j in np.argwhere(added)]
