"""
Presentation attributes owned by the host UI.

The core never draws anything, but snapshots must capture and restore how
each vertex and edge looks (position, style strings, label text) so that an
undo brings back exactly what the user saw. ``Presentation`` is the mutable
store of those attributes; it holds immutable ``VertexAttributes`` and
``EdgeAttributes`` values and replaces them on change.
"""

import logging
from dataclasses import replace
from typing import Dict, Iterable, List, Optional, Tuple

import networkx as nx

from .models import EdgeAttributes, VertexAttributes

logger = logging.getLogger(__name__)

WEIGHT_LABEL_STYLE = "-fx-fill: #dc2626; -fx-font-weight: bold; -fx-font-size: 12px;"

# Where a new vertex lands before any layout runs
DEFAULT_ORIGIN = 200.0
DEFAULT_STEP_X = 40.0
DEFAULT_STEP_Y = 25.0


def format_weight(weight: float) -> str:
    """Weight label text, one decimal place."""
    return f"{weight:.1f}"


class Presentation:
    """
    Per-vertex and per-edge presentation attributes.

    Vertices are kept in insertion order. Edges are kept in the order they
    were drawn, which is also the order used to rebuild the graph when a
    snapshot is restored or a mode is toggled.
    """

    def __init__(
        self,
        vertices: Iterable[VertexAttributes] = (),
        edges: Iterable[EdgeAttributes] = (),
    ):
        self.vertices: Dict[int, VertexAttributes] = {v.id: v for v in vertices}
        self.edges: List[EdgeAttributes] = list(edges)

    def add_vertex(
        self,
        vertex: int,
        x: Optional[float] = None,
        y: Optional[float] = None,
        label_text: Optional[str] = None,
    ) -> VertexAttributes:
        """Add a vertex, placing it on the default diagonal if no position is given."""
        offset = len(self.vertices)
        attributes = VertexAttributes(
            id=vertex,
            x=DEFAULT_ORIGIN + offset * DEFAULT_STEP_X if x is None else x,
            y=DEFAULT_ORIGIN + offset * DEFAULT_STEP_Y if y is None else y,
            label_text=str(vertex) if label_text is None else label_text,
        )
        self.vertices[vertex] = attributes
        return attributes

    def remove_vertex(self, vertex: int) -> None:
        """Remove a vertex and every edge drawn to or from it."""
        self.vertices.pop(vertex, None)
        self.edges = [
            edge
            for edge in self.edges
            if edge.source != vertex and edge.destination != vertex
        ]

    def add_edge(
        self, source: int, destination: int, weight: float = 1.0, show_weight: bool = False
    ) -> EdgeAttributes:
        """Add an edge; weighted graphs get a weight label."""
        attributes = EdgeAttributes(
            source=source,
            destination=destination,
            weight=weight,
            weight_text=format_weight(weight) if show_weight else None,
            weight_style=WEIGHT_LABEL_STYLE if show_weight else None,
        )
        self.edges.append(attributes)
        return attributes

    def remove_edge(self, source: int, destination: int, directed: bool = True) -> None:
        """Remove the first edge drawn between the two vertices."""
        for index, edge in enumerate(self.edges):
            if self._matches(edge, source, destination, directed):
                del self.edges[index]
                return

    def find_edge(
        self, source: int, destination: int, directed: bool = True
    ) -> Optional[EdgeAttributes]:
        for edge in self.edges:
            if self._matches(edge, source, destination, directed):
                return edge
        return None

    @staticmethod
    def _matches(edge: EdgeAttributes, source: int, destination: int, directed: bool) -> bool:
        if edge.source == source and edge.destination == destination:
            return True
        return (
            not directed and edge.source == destination and edge.destination == source
        )

    def move_vertex(self, vertex: int, x: float, y: float) -> None:
        self.vertices[vertex] = replace(self.vertices[vertex], x=x, y=y)

    def set_vertex_style(
        self,
        vertex: int,
        circle_style: Optional[str] = None,
        label_style: Optional[str] = None,
    ) -> None:
        """Change a vertex's style strings; None keeps the current value."""
        current = self.vertices[vertex]
        self.vertices[vertex] = replace(
            current,
            circle_style=circle_style or current.circle_style,
            label_style=label_style or current.label_style,
        )

    def set_weight_labels(self, show: bool) -> None:
        """Add or drop the weight label on every edge."""
        self.edges = [
            replace(
                edge,
                weight_text=format_weight(edge.weight) if show else None,
                weight_style=WEIGHT_LABEL_STYLE if show else None,
            )
            for edge in self.edges
        ]

    def positions(self) -> Dict[int, Tuple[float, float]]:
        """Map of vertex id to (x, y)."""
        return {vertex: (a.x, a.y) for vertex, a in self.vertices.items()}

    def clear(self) -> None:
        self.vertices.clear()
        self.edges.clear()

    def apply_circular_layout(
        self, width: float, height: float, margin: float = 100.0
    ) -> None:
        """
        Place every vertex evenly on a circle centred on the canvas.

        Args:
            width: Canvas width
            height: Canvas height
            margin: Gap kept between the circle and the nearest canvas edge
        """
        if not self.vertices:
            return

        center_x, center_y = width / 2, height / 2
        radius = max(min(center_x, center_y) - margin, 0.0)

        layout_graph = nx.Graph()
        layout_graph.add_nodes_from(self.vertices)
        layout = nx.circular_layout(
            layout_graph, scale=radius, center=(center_x, center_y)
        )

        for vertex, (x, y) in layout.items():
            self.move_vertex(vertex, float(x), float(y))
        logger.debug("Applied circular layout to %d vertices", len(self.vertices))
