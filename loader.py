from typing import Iterable, List, Tuple

from lark import Lark
from lark.exceptions import UnexpectedInput

from errors import MalformedEdge, UnreadableSource, IOFailure, InvalidSourceOrDestination
from graph import Graph

"""
Reads the edge-list format into a Graph. Each line is `<from> <to>`: two
integers separated by blanks. The same two-integer grammar is used for the
source/destination query typed by the user.
"""

PAIR_GRAMMAR = r"""
start: _WS? SIGNED_INT _WS SIGNED_INT _WS?

_WS: /[ \t]+/
%import common.SIGNED_INT
"""

pair_parser = Lark(PAIR_GRAMMAR, parser='lalr')


def parse_pair(line: str) -> Tuple[int, int]:
    """
    Returns the two integers on `line`. Raises lark's UnexpectedInput when the
    line does not hold exactly two integers.
    """
    tree = pair_parser.parse(line)
    first, second = tree.children
    return int(first), int(second)


def parse_edge(line: str, lineno=None) -> Tuple[int, int]:
    """
    >>> parse_edge("1 3")
    (1, 3)
    >>> parse_edge("  4\\t5 ")
    (4, 5)
    """
    try:
        return parse_pair(line)
    except UnexpectedInput as e:
        raise MalformedEdge("expected two integers", lineno=lineno, line=line) from e


def check_dense(vertex_ids: List[int]):
    """
    `vertex_ids` is sorted and distinct. Ids must be exactly 0..N-1 so they
    can be used as array indices.
    """
    if not vertex_ids:
        raise MalformedEdge("The graph file contains no edges.")
    highest_id = len(vertex_ids) - 1
    if vertex_ids[0] != 0 or vertex_ids[-1] != highest_id:
        raise MalformedEdge(f"Vertex ids {vertex_ids[0]}..{vertex_ids[-1]} are not the dense range 0..{highest_id}.")


def load_edges(lines: Iterable[str]) -> Graph:
    edges = []
    for lineno, line in enumerate(lines, start=1):
        edges.append(parse_edge(line, lineno))

    vertex_ids = sorted({v for edge in edges for v in edge})
    check_dense(vertex_ids)
    return Graph.from_edges(len(vertex_ids), edges)


def load_graph(file_name) -> Graph:
    """
    Loads the graph stored in `file_name`. A missing or unopenable file raises
    UnreadableSource; any other I/O problem raises IOFailure.
    """
    try:
        with open(file_name, 'r', encoding='utf-8') as f:
            lines = f.read().splitlines()
    except (FileNotFoundError, IsADirectoryError, PermissionError, UnicodeDecodeError) as e:
        raise UnreadableSource(str(e)) from e
    except OSError as e:
        raise IOFailure(str(e)) from e
    return load_edges(lines)


def parse_query(line: str, graph: Graph) -> Tuple[int, int]:
    """
    Parses the `<source> <destination>` query line and checks that both are
    vertices of `graph`.
    """
    try:
        source, destination = parse_pair(line.rstrip('\r\n'))
    except UnexpectedInput as e:
        raise InvalidSourceOrDestination(f"Got: {line.strip()!r}") from e
    for v in (source, destination):
        if not graph.is_vertex(v):
            raise InvalidSourceOrDestination(f"Vertex {v} is not between 0 and {graph.num_vertices() - 1}.")
    return source, destination
