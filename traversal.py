from typing import List, NamedTuple, Optional

from graph import Color, Graph


class DfsResult(NamedTuple):
    """
    `discovered` is the order in which vertices were first seen, ending with
    the destination. `path` runs from the source to the destination. When the
    destination is never reached `path` is None and `discovered` is empty.
    """
    discovered: List[int]
    path: Optional[List[int]]

    @property
    def found(self):
        return self.path is not None


def dfs_search(graph: Graph, source: int, destination: int) -> DfsResult:
    """
    Depth-first search from `source` that stops the first time `destination`
    is discovered. Successors are examined in ascending order and the search
    descends into the first undiscovered one right away, so the discovery
    order and path are fully determined by the graph.

    The source itself is discovered before the search starts and is never
    rediscovered, so source == destination always comes back not found.
    """
    colors = graph.fresh_colors()
    discovered = [source]
    colors[source] = Color.BLACK
    stack = [source]

    while stack:
        top = stack[-1]
        for n in graph.neighbors(top):
            if colors[n] is not Color.WHITE:
                continue
            discovered.append(n)
            if n == destination:
                return DfsResult(discovered, stack + [n])
            colors[n] = Color.BLACK
            stack.append(n)
            break
        else:
            stack.pop()

    return DfsResult([], None)
