import argparse
import sys

from closure import new_edges
from cycle import has_cycle
from errors import GraphSearchError, InvalidArgumentCount, InvalidSourceOrDestination, IOFailure
from loader import load_graph, parse_query
from report import render
from traversal import dfs_search

"""
Command line to load a graph file, ask for a source and destination vertex,
and print the DFS discovery order and path, the transitive closure edges and
whether the graph has a cycle.

See __main__ dispatch at the bottom for usage.
"""

# Progress and counts on stderr; stdout only ever holds the prompt and report
VERBOSE = False
# Restart cycle detection from every unvisited vertex instead of only vertex 0
CYCLE_SEARCH_ALL_ROOTS = False

PROMPT = "Enter a source vertex and a destination vertex: "


class ArgumentParser(argparse.ArgumentParser):
    """
    argparse exits with status 2 on bad arguments, which is the code for an
    unreadable graph file here. Raise instead so the usual exit code applies.
    """
    def error(self, message):
        raise InvalidArgumentCount(message)


def read_query(graph, stdin=None):
    """
    Prompts once for `<source> <destination>` and validates it against `graph`.
    """
    stdin = sys.stdin if stdin is None else stdin
    print(PROMPT, end='', flush=True)
    try:
        line = stdin.readline()
    except OSError as e:
        raise IOFailure(str(e)) from e
    if not line:
        raise InvalidSourceOrDestination("No source and destination were entered.")
    return parse_query(line, graph)


def main(graph_file_name, verbose=False, all_roots=False, stdin=None):
    graph = load_graph(graph_file_name)
    if verbose:
        print(f'Loaded {graph_file_name}: {graph.num_vertices()} vertices, {graph.num_edges()} edges', file=sys.stderr)

    source, destination = read_query(graph, stdin)

    if verbose:
        print(f'Searching for a path from {source} to {destination}...', file=sys.stderr)
    result = dfs_search(graph, source, destination)

    if verbose:
        print('Computing the transitive closure...', file=sys.stderr)
    edges = new_edges(graph, progress=verbose)

    if verbose:
        roots = 'every unvisited vertex' if all_roots else 'vertex 0'
        print(f'Searching for a cycle from {roots}...', file=sys.stderr)
    cycle_exists = has_cycle(graph, every_root=all_roots)

    for line in render(source, destination, result, edges, cycle_exists):
        print(line)


def build_arg_parser():
    parser = ArgumentParser(prog='graphsearch', description='Depth-first search, transitive closure and cycle detection on a directed graph.')
    parser.add_argument('graph_file', help='text file with one `<from> <to>` edge per line; vertex ids must be 0..N-1', type=str)
    parser.add_argument('--all-roots', help='look for cycles from every vertex, not only from vertex 0', action='store_true', dest='all_roots', default=CYCLE_SEARCH_ALL_ROOTS)
    parser.add_argument('-v', '--verbose', help='print progress to stderr', action='store_true', default=VERBOSE)
    return parser


def run(argv=None, stdin=None):
    """
    Entry point. Returns the process exit code.
    """
    try:
        args = build_arg_parser().parse_args(argv)
        main(args.graph_file, verbose=args.verbose, all_roots=args.all_roots, stdin=stdin)
    except GraphSearchError as e:
        print(e, file=sys.stderr)
        return e.exit_code
    return 0


def cli():
    sys.exit(run())


if __name__ == '__main__':
    cli()
