"""
Snapshots and the undo/redo history.

A ``Snapshot`` is an immutable value holding everything needed to rebuild a
graph and its presentation: the mode flags, every vertex's attributes and
every edge's attributes, tagged with a label describing the operation that
was about to run when it was captured.

``SnapshotHistory`` keeps two stacks of snapshots. The undo stack is bounded
(oldest evicted first); the redo stack is discarded whenever a new edit is
pushed, giving a standard linear history.
"""

import logging
import math
from collections import deque
from dataclasses import dataclass, replace
from typing import Deque, List, Optional, Tuple

from .errors import SnapshotError
from .graph import Graph
from .models import EdgeAttributes, GraphStatistics, VertexAttributes
from .presentation import Presentation

logger = logging.getLogger(__name__)

DEFAULT_HISTORY_CAPACITY = 50


@dataclass(frozen=True)
class Snapshot:
    """
    Immutable capture of a graph and its presentation.

    Attributes:
        directed: Whether the captured graph was directed
        weighted: Whether the captured graph was weighted
        vertices: Vertex attributes in graph insertion order
        edges: Edge attributes in drawing order
        label: Description of the operation the snapshot precedes
            (e.g., "ADD_EDGE_1_2")
        statistics: Vertex count, edge count and density at capture time
    """

    directed: bool
    weighted: bool
    vertices: Tuple[VertexAttributes, ...] = ()
    edges: Tuple[EdgeAttributes, ...] = ()
    label: str = ""
    statistics: GraphStatistics = GraphStatistics()

    def with_label(self, label: str) -> "Snapshot":
        return replace(self, label=label)

    def vertex_ids(self) -> List[int]:
        return [vertex.id for vertex in self.vertices]


def capture_snapshot(
    graph: Graph, presentation: Optional[Presentation] = None, label: str = ""
) -> Snapshot:
    """
    Capture the current graph and presentation as a Snapshot.

    Args:
        graph: Graph to capture
        presentation: Presentation attributes; when omitted (or missing a
            vertex) default attributes are used and edges come from the graph
        label: Description of the operation about to run

    Returns:
        A Snapshot sharing no mutable state with graph or presentation
    """
    known = presentation.vertices if presentation is not None else {}
    vertices = tuple(
        known.get(vertex) or VertexAttributes(id=vertex, label_text=str(vertex))
        for vertex in graph.vertices()
    )

    if presentation is not None:
        edges = tuple(presentation.edges)
    else:
        edges = tuple(
            EdgeAttributes(source=source, destination=destination, weight=weight)
            for source, destination, weight in graph.edges()
        )

    return Snapshot(
        directed=graph.directed,
        weighted=graph.weighted,
        vertices=vertices,
        edges=edges,
        label=label,
        statistics=graph.statistics(),
    )


def restore_snapshot(snapshot: Snapshot) -> Tuple[Graph, Presentation]:
    """
    Rebuild a fresh Graph and Presentation from a snapshot.

    Nothing is shared with any live state, so the caller can swap the
    returned pair in as a whole; if validation fails no object is built.

    Raises:
        SnapshotError: If the snapshot is malformed (duplicate vertex ids,
            edges referencing unknown vertices, non-numeric weights, or on a
            weighted graph weights that are not positive and finite)
    """
    vertex_ids = snapshot.vertex_ids()
    known = set(vertex_ids)
    if len(known) != len(vertex_ids):
        raise SnapshotError(f"Snapshot '{snapshot.label}' has duplicate vertex ids")

    for edge in snapshot.edges:
        if edge.source not in known or edge.destination not in known:
            raise SnapshotError(
                f"Snapshot '{snapshot.label}' has edge {edge.source} -> "
                f"{edge.destination} referencing an unknown vertex"
            )
        if not _valid_weight(edge.weight, snapshot.weighted):
            raise SnapshotError(
                f"Snapshot '{snapshot.label}' has invalid weight {edge.weight!r} "
                f"on edge {edge.source} -> {edge.destination}"
            )

    graph = Graph(directed=snapshot.directed, weighted=snapshot.weighted)
    for vertex in vertex_ids:
        graph.add_vertex(vertex)
    for edge in snapshot.edges:
        graph.add_edge(edge.source, edge.destination, edge.weight)

    return graph, Presentation(snapshot.vertices, snapshot.edges)


def _valid_weight(weight: object, weighted: bool) -> bool:
    if not isinstance(weight, (int, float)) or math.isnan(weight):
        return False
    # Weighted edges follow the same rule as GraphEditor.add_edge
    return not weighted or (math.isfinite(weight) and weight > 0)


class SnapshotHistory:
    """
    Bounded undo stack plus redo stack.

    Example:
        >>> history = SnapshotHistory(capacity=50)
        >>> history.push(capture_snapshot(graph, presentation, "ADD_VERTEX_1"))
        >>> previous = history.undo(capture_snapshot(graph, presentation))
    """

    def __init__(self, capacity: int = DEFAULT_HISTORY_CAPACITY):
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self.undo_stack: Deque[Snapshot] = deque(maxlen=capacity)
        self.redo_stack: List[Snapshot] = []

    def push(self, snapshot: Snapshot) -> None:
        """Record a new edit: push onto undo (evicting the oldest) and drop redo."""
        self.undo_stack.append(snapshot)
        self.redo_stack.clear()
        logger.debug("Pushed snapshot %s (%d on undo)", snapshot.label, len(self.undo_stack))

    def peek_undo(self) -> Optional[Snapshot]:
        return self.undo_stack[-1] if self.undo_stack else None

    def peek_redo(self) -> Optional[Snapshot]:
        return self.redo_stack[-1] if self.redo_stack else None

    def undo(self, current: Snapshot) -> Optional[Snapshot]:
        """
        Step back one edit.

        Args:
            current: Snapshot of the live state, kept for redo

        Returns:
            The snapshot to restore, or None when there is nothing to undo
        """
        if not self.undo_stack:
            return None
        self.redo_stack.append(current)
        return self.undo_stack.pop()

    def redo(self, current: Snapshot) -> Optional[Snapshot]:
        """
        Step forward one undone edit.

        Args:
            current: Snapshot of the live state, kept for undo

        Returns:
            The snapshot to restore, or None when there is nothing to redo
        """
        if not self.redo_stack:
            return None
        self.undo_stack.append(current)
        return self.redo_stack.pop()

    @property
    def can_undo(self) -> bool:
        return bool(self.undo_stack)

    @property
    def can_redo(self) -> bool:
        return bool(self.redo_stack)

    def undo_labels(self) -> List[str]:
        """Labels on the undo stack, oldest first."""
        return [snapshot.label for snapshot in self.undo_stack]

    def redo_labels(self) -> List[str]:
        """Labels on the redo stack, oldest first."""
        return [snapshot.label for snapshot in self.redo_stack]

    def clear(self) -> None:
        self.undo_stack.clear()
        self.redo_stack.clear()

    def __len__(self) -> int:
        return len(self.undo_stack)
