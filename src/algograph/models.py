"""
Data models for the graph engine.

This module contains dataclasses for algorithm results and for the
presentation attributes that snapshots capture alongside the graph.

Classes:
    GraphStatistics: Vertex count, edge count and density of a graph.
    DijkstraResult: Path, total distance and the full distance/predecessor maps.
    PathResult: Path and total distance from A* search.
    VertexAttributes: Captured position, styles and label of one vertex.
    EdgeAttributes: Captured endpoints, weight, styles and weight label of one edge.
"""

import math
from dataclasses import dataclass, field
from typing import Dict, List, Optional

DEFAULT_CIRCLE_STYLE = "-fx-fill: #3b82f6; -fx-stroke: #1d4ed8; -fx-stroke-width: 2;"
DEFAULT_LABEL_STYLE = "-fx-fill: white; -fx-font-weight: bold;"
DEFAULT_LINE_STYLE = "-fx-stroke: #64748b; -fx-stroke-width: 2;"


@dataclass(frozen=True)
class GraphStatistics:
    """Summary numbers for a graph, captured with each snapshot."""

    vertex_count: int = 0
    edge_count: int = 0
    density: float = 0.0


@dataclass
class DijkstraResult:
    """
    Result of Dijkstra's algorithm.

    Attributes:
        path: Vertices from start to end, empty if end is unreachable.
        distance: Total weight of the path (infinity if unreachable).
        distances: Best known distance for every vertex when the search stopped.
        previous: Predecessor of each settled or relaxed vertex.
    """

    path: List[int] = field(default_factory=list)
    distance: float = math.inf
    distances: Dict[int, float] = field(default_factory=dict)
    previous: Dict[int, int] = field(default_factory=dict)

    @property
    def found(self) -> bool:
        return bool(self.path)


@dataclass
class PathResult:
    """Path and total distance from a heuristic search."""

    path: List[int] = field(default_factory=list)
    distance: float = math.inf

    @property
    def found(self) -> bool:
        return bool(self.path)


@dataclass(frozen=True)
class VertexAttributes:
    """
    Presentation attributes of a vertex.

    Missing styles fall back to the documented defaults and a missing label
    falls back to an empty string.

    Attributes:
        id: Vertex identifier.
        x: Horizontal canvas position.
        y: Vertical canvas position.
        circle_style: Style string of the vertex shape.
        label_text: Text drawn on the vertex.
        label_style: Style string of the label.
    """

    id: int
    x: float = 0.0
    y: float = 0.0
    circle_style: Optional[str] = DEFAULT_CIRCLE_STYLE
    label_text: Optional[str] = ""
    label_style: Optional[str] = DEFAULT_LABEL_STYLE

    def __post_init__(self):
        if self.circle_style is None:
            object.__setattr__(self, "circle_style", DEFAULT_CIRCLE_STYLE)
        if self.label_text is None:
            object.__setattr__(self, "label_text", "")
        if self.label_style is None:
            object.__setattr__(self, "label_style", DEFAULT_LABEL_STYLE)


@dataclass(frozen=True)
class EdgeAttributes:
    """
    Presentation attributes of an edge.

    Attributes:
        source: Source vertex id.
        destination: Destination vertex id.
        weight: Edge weight (1.0 for unweighted graphs).
        line_style: Style string of the edge line.
        weight_text: Text of the weight label, None when no label is shown.
        weight_style: Style string of the weight label, None when no label.
    """

    source: int
    destination: int
    weight: float = 1.0
    line_style: Optional[str] = DEFAULT_LINE_STYLE
    weight_text: Optional[str] = None
    weight_style: Optional[str] = None

    def __post_init__(self):
        if self.line_style is None:
            object.__setattr__(self, "line_style", DEFAULT_LINE_STYLE)
