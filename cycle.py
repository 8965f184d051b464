from graph import Color, Graph

"""
Directed cycle detection with the three-color DFS. A GREY vertex is on the
current DFS stack, so reaching one again means a back-edge, hence a cycle.
"""


def _explore(graph: Graph, root, colors):
    """
    Runs the DFS from `root`, updating `colors` in place. Returns True as soon
    as a back-edge is found.
    """
    colors[root] = Color.GREY
    stack = [root]
    while stack:
        top = stack[-1]
        for n in graph.neighbors(top):
            if colors[n] is Color.WHITE:
                colors[n] = Color.GREY
                stack.append(n)
                break
            elif colors[n] is Color.GREY:
                return True
        else:
            colors[top] = Color.BLACK
            stack.pop()
    return False


def has_cycle(graph: Graph, root=0, every_root=False):
    """
    By default only searches from `root` (vertex 0), so a cycle that cannot be
    reached from it goes unnoticed. With `every_root` the search is restarted
    from each vertex left WHITE, in ascending order, which covers the whole
    graph.
    """
    colors = graph.fresh_colors()
    if _explore(graph, root, colors):
        return True
    if every_root:
        for v in graph.V:
            if colors[v] is Color.WHITE and _explore(graph, v, colors):
                return True
    return False
