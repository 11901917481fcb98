"""
Error taxonomy for the graph engine.

Graph and algorithm functions raise these and never catch them; the caller
decides how to present them.
"""


class GraphError(Exception):
    """Base class for all graph engine errors."""

    pass


class UnsupportedOperation(GraphError):
    """Raised when an algorithm is invoked on an incompatible graph shape."""

    pass


# Alternate name used by callers that think in terms of preconditions.
PreconditionViolation = UnsupportedOperation


class CycleDetected(GraphError):
    """Raised when topological sort finds the graph is not a DAG."""

    pass


class VertexNotFound(GraphError, KeyError):
    """Raised at the command boundary when a vertex id does not exist."""

    def __init__(self, vertex: int):
        super().__init__(vertex)
        self.vertex = vertex

    def __str__(self) -> str:
        return f"Vertex {self.vertex} does not exist"


class VertexExists(GraphError):
    """Raised at the command boundary when adding a vertex twice."""

    def __init__(self, vertex: int):
        super().__init__(f"Vertex {vertex} already exists")
        self.vertex = vertex


class InvalidWeight(GraphError, ValueError):
    """Raised when an edge weight is negative or not a finite number."""

    pass


class SnapshotError(GraphError):
    """Raised when a snapshot or persisted document cannot be restored."""

    pass


class EdgeExists(GraphError):
    """Raised at the command boundary when adding a parallel edge is refused."""

    def __init__(self, source: int, destination: int):
        super().__init__(f"Edge from {source} to {destination} already exists")
        self.source = source
        self.destination = destination


class EdgeNotFound(GraphError, KeyError):
    """Raised at the command boundary when removing an edge that is absent."""

    def __init__(self, source: int, destination: int):
        super().__init__((source, destination))
        self.source = source
        self.destination = destination

    def __str__(self) -> str:
        return f"Edge from {self.source} to {self.destination} does not exist"
