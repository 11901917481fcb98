"""
algograph - graph engine for an algorithm visualizer

A mutable directed/undirected, weighted/unweighted graph, its traversal and
path-finding algorithms, and a snapshot-based undo/redo history.

Example:
    >>> from algograph import GraphEditor
    >>> editor = GraphEditor(directed=True, weighted=True)
    >>> for vertex in (1, 2, 3):
    ...     editor.add_vertex(vertex)
    >>> editor.add_edge(1, 2, 4)
    >>> editor.add_edge(2, 3, 3)
    >>> editor.add_edge(1, 3, 10)
    >>> editor.run("DIJKSTRA", 1, 3).order
    [1, 2, 3]

Tracing Example:
    >>> trace = AlgorithmTrace()
    >>> editor.run("BFS", 1, trace=trace)
    >>> print(trace.summary())
"""

from .algorithms import (
    a_star,
    bfs,
    connected_components,
    dfs,
    dijkstra,
    euclidean_heuristic,
    find_all_paths,
    has_cycle,
    has_path,
    shortest_path,
    topological_sort,
    vertex_id_heuristic,
)
from .editor import Algorithm, AlgorithmOutcome, EditorConfig, GraphEditor
from .errors import (
    CycleDetected,
    EdgeExists,
    EdgeNotFound,
    GraphError,
    InvalidWeight,
    PreconditionViolation,
    SnapshotError,
    UnsupportedOperation,
    VertexExists,
    VertexNotFound,
)
from .export import (
    load_snapshot,
    save_snapshot,
    snapshot_from_dict,
    snapshot_to_dict,
    to_networkx,
)
from .graph import Graph, GraphView, create_graph
from .models import (
    DijkstraResult,
    EdgeAttributes,
    GraphStatistics,
    PathResult,
    VertexAttributes,
)
from .paths import path_weight, reconstruct_path
from .presentation import Presentation
from .snapshot import Snapshot, SnapshotHistory, capture_snapshot, restore_snapshot
from .tracer import AlgorithmTrace, TraceStep

__version__ = "0.1.0"

__all__ = [
    # Main API
    "GraphEditor",
    "EditorConfig",
    "Algorithm",
    "AlgorithmOutcome",
    # Graph
    "Graph",
    "GraphView",
    "create_graph",
    # Algorithms
    "bfs",
    "dfs",
    "shortest_path",
    "has_path",
    "dijkstra",
    "a_star",
    "vertex_id_heuristic",
    "euclidean_heuristic",
    "topological_sort",
    "has_cycle",
    "connected_components",
    "find_all_paths",
    # Paths
    "reconstruct_path",
    "path_weight",
    # Models
    "DijkstraResult",
    "PathResult",
    "GraphStatistics",
    "VertexAttributes",
    "EdgeAttributes",
    # Snapshots
    "Presentation",
    "Snapshot",
    "SnapshotHistory",
    "capture_snapshot",
    "restore_snapshot",
    # Persistence
    "snapshot_to_dict",
    "snapshot_from_dict",
    "save_snapshot",
    "load_snapshot",
    "to_networkx",
    # Errors
    "GraphError",
    "UnsupportedOperation",
    "PreconditionViolation",
    "CycleDetected",
    "VertexNotFound",
    "VertexExists",
    "EdgeExists",
    "EdgeNotFound",
    "InvalidWeight",
    "SnapshotError",
    # Tracing (for step-by-step animation)
    "AlgorithmTrace",
    "TraceStep",
]
