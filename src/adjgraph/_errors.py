"""Exception hierarchy for graph operations."""

from enum import StrEnum


class ErrorKind(StrEnum):
    """Category of a failed graph operation."""

    INVALID_INDEX = "invalid_index"
    NOT_FOUND = "not_found"
    FILE_ERROR = "file_error"
    PARSE_ERROR = "parse_error"
    INVALID_ARGUMENT = "invalid_argument"
    EMPTY = "empty"


class GraphError(Exception):
    """Base class for all errors raised by adjgraph."""

    kind: ErrorKind


class IndexOutOfRangeError(GraphError, IndexError):
    """Raised when a vertex index is outside ``[0, n_vertices)``."""

    kind = ErrorKind.INVALID_INDEX

    def __init__(self, index: int, n_vertices: int) -> None:
        self.index = index
        self.n_vertices = n_vertices
        super().__init__(f"Vertex index {index} out of range for graph with {n_vertices} vertices")


class NotFoundError(GraphError, LookupError):
    """Raised when a label or vertex reference does not resolve to a vertex."""

    kind = ErrorKind.NOT_FOUND


class GraphFileError(GraphError, OSError):
    """Raised when a graph file cannot be opened, read or written."""

    kind = ErrorKind.FILE_ERROR


class ParseError(GraphError, ValueError):
    """Raised when a graph description cannot be parsed."""

    kind = ErrorKind.PARSE_ERROR

    def __init__(self, message: str, line_number: int | None = None) -> None:
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


class InvalidArgumentError(GraphError, ValueError):
    """Raised when an argument has an unusable value (e.g. zero vertices)."""

    kind = ErrorKind.INVALID_ARGUMENT


class EmptyListError(GraphError, IndexError):
    """Raised when removing from or peeking into an empty VertexList."""

    kind = ErrorKind.EMPTY
