from typing import List, Tuple

from traversal import DfsResult

TC_LABEL = "[TC: New Edges] "
# Continuation lines of the closure report line up under the first pair
TC_INDENT = " " * len(TC_LABEL)


def format_discovered(source, destination, discovered):
    """
    >>> format_discovered(0, 2, [0, 1, 2])
    '[DFS Discovered Vertices: 0, 2] 0, 1, 2'
    """
    return f"[DFS Discovered Vertices: {source}, {destination}] " + ", ".join(str(v) for v in discovered)


def format_path(source, destination, path):
    """
    >>> format_path(0, 2, [0, 1, 2])
    '[DFS Path: 0, 2] 0 -> 1 -> 2'
    >>> format_path(0, 2, None)
    '[DFS Path: 0, 2] Not Found'
    """
    if path is None:
        return f"[DFS Path: {source}, {destination}] Not Found"
    return f"[DFS Path: {source}, {destination}] " + " -> ".join(str(v) for v in path)


def format_new_edges(edges: List[Tuple[int, int]]):
    pairs = ["%d %d" % edge for edge in edges]
    return TC_LABEL + ("\n" + TC_INDENT).join(pairs)


def format_cycle(cycle_exists):
    if cycle_exists:
        return "[Cycle]: Cycle Exists"
    return "[Cycle]: Cycle Does Not Exist"


def render(source, destination, result: DfsResult, edges, cycle_exists):
    """
    The report, one entry per output line. The discovery order is left out
    when the destination was not found.
    """
    lines = []
    if result.found:
        lines.append(format_discovered(source, destination, result.discovered))
    lines.append(format_path(source, destination, result.path))
    lines.append(format_new_edges(edges))
    lines.append(format_cycle(cycle_exists))
    return lines
