"""
Exceptions raised while loading a graph file or reading a query. Each one
knows the exit code the command line should terminate with.
"""

USAGE_MESSAGE = "Usage: graphsearch <graph_file_path>"

EDGE_FORMAT_MESSAGE = (
    "The format of at least one edge, represented within the specified graph file, is invalid.\n"
    "The following is an example of the valid format:\n"
    "1 3\n"
    "2 0\n"
    "4 5\n"
    "Each vertex ID must be an integer between 0 and (the number of vertices - 1).")

QUERY_FORMAT_MESSAGE = (
    "You specified an invalid source vertex or an invalid destination vertex.\n"
    "Both vertices must be integers between 0 and (the number of vertices - 1).\n"
    "Ensure that the format is correct before entering the source and destination vertices.\n"
    "The valid format: <source_vertex> <destination_vertex>")


class GraphSearchError(Exception):
    """
    Base class for every user-facing failure. `detail`, if given, is appended
    to the default message on its own line.
    """
    exit_code = 1
    message = ""

    def __init__(self, detail=None):
        self.detail = detail
        if detail:
            super().__init__(f"{self.message}\n{detail}")
        else:
            super().__init__(self.message)


class InvalidArgumentCount(GraphSearchError):
    exit_code = 1
    message = "You specified an invalid number of command line arguments.\n" + USAGE_MESSAGE


class UnreadableSource(GraphSearchError):
    exit_code = 2
    message = "The specified graph file cannot be read."


class MalformedEdge(GraphSearchError):
    exit_code = 3
    message = EDGE_FORMAT_MESSAGE

    def __init__(self, detail=None, lineno=None, line=None):
        self.lineno = lineno
        self.line = line
        if lineno is not None:
            where = f"Line {lineno}: {line!r}"
            detail = f"{where} ({detail})" if detail else where
        super().__init__(detail)


class InvalidSourceOrDestination(GraphSearchError):
    exit_code = 4
    message = QUERY_FORMAT_MESSAGE


class IOFailure(GraphSearchError):
    exit_code = 6
    message = "An I/O error disrupted the search."
