"""
Graph editor: the command surface the presentation layer talks to.

Combines the graph, its presentation attributes and the snapshot history.
Every mutating command validates its input, captures a labelled snapshot of
the current state, and only then applies the change. Algorithm requests are
dispatched by name and return plain data for the UI to animate.
"""

import logging
import math
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Union

from . import algorithms
from .errors import (
    EdgeExists,
    EdgeNotFound,
    InvalidWeight,
    VertexExists,
    VertexNotFound,
)
from .graph import Graph, create_graph
from .models import GraphStatistics
from .paths import path_weight
from .presentation import Presentation
from .snapshot import (
    DEFAULT_HISTORY_CAPACITY,
    Snapshot,
    SnapshotHistory,
    capture_snapshot,
    restore_snapshot,
)
from .tracer import AlgorithmTrace

logger = logging.getLogger(__name__)

HEURISTICS = ("vertex_id", "euclidean", "none")


class Algorithm(Enum):
    """Algorithms the editor can run, valued by their display names."""

    BFS = "BFS (Breadth-First Search)"
    DFS = "DFS (Depth-First Search)"
    SHORTEST_PATH = "Shortest Path"
    DIJKSTRA = "Dijkstra's Algorithm"
    A_STAR = "A* Pathfinding"
    TOPOLOGICAL_SORT = "Topological Sort"

    @classmethod
    def parse(cls, name: Union[str, "Algorithm"]) -> "Algorithm":
        """Accept an Algorithm, its member name or its display name."""
        if isinstance(name, cls):
            return name
        for algorithm in cls:
            if name in (algorithm.name, algorithm.value):
                return algorithm
        raise ValueError(f"Unknown algorithm: {name}")

    @property
    def needs_end(self) -> bool:
        return self in (Algorithm.SHORTEST_PATH, Algorithm.DIJKSTRA, Algorithm.A_STAR)


@dataclass
class AlgorithmOutcome:
    """
    Result of an algorithm request.

    Attributes:
        algorithm: Which algorithm ran
        order: Visitation order (traversals, topological sort) or path
            (path-finding); an empty path means no path was found
        distance: Total path weight for path-finding, None for traversals
    """

    algorithm: Algorithm
    order: List[int] = field(default_factory=list)
    distance: Optional[float] = None

    @property
    def found(self) -> bool:
        return bool(self.order)


@dataclass
class EditorConfig:
    """
    Editor settings passed in by the host rather than read from UI globals.

    Attributes:
        history_capacity: Maximum number of snapshots on the undo stack
        canvas_width: Canvas width used by the circular layout
        canvas_height: Canvas height used by the circular layout
        layout_margin: Gap between the layout circle and the canvas edge
        allow_parallel_edges: Accept an edge that already exists
        show_weight_labels: Draw weight labels on weighted graphs
        heuristic: A* heuristic - "vertex_id" (best-effort), "euclidean"
            (vertex positions) or "none" (zero estimate, always shortest)
        random_seed: Seed for random graph generation, None for system entropy
    """

    history_capacity: int = DEFAULT_HISTORY_CAPACITY
    canvas_width: float = 800.0
    canvas_height: float = 600.0
    layout_margin: float = 100.0
    allow_parallel_edges: bool = False
    show_weight_labels: bool = True
    heuristic: str = "vertex_id"
    random_seed: Optional[int] = None

    def __post_init__(self):
        if self.history_capacity < 1:
            raise ValueError("history_capacity must be at least 1")
        if self.canvas_width <= 0 or self.canvas_height <= 0:
            raise ValueError("canvas_width and canvas_height must be positive")
        if self.layout_margin < 0:
            raise ValueError("layout_margin must not be negative")
        if self.heuristic not in HEURISTICS:
            raise ValueError(f"heuristic must be one of {', '.join(HEURISTICS)}")


class GraphEditor:
    """
    Undoable editing and algorithm dispatch over one graph.

    Example:
        >>> editor = GraphEditor(directed=True, weighted=True)
        >>> editor.add_vertex(1)
        >>> editor.add_vertex(2)
        >>> editor.add_edge(1, 2, 4.0)
        >>> editor.run("DIJKSTRA", 1, 2).distance
        4.0
        >>> editor.undo()
    """

    def __init__(
        self,
        directed: bool = False,
        weighted: bool = False,
        config: Optional[EditorConfig] = None,
    ):
        self.config = config or EditorConfig()
        self.graph = Graph(directed=directed, weighted=weighted)
        self.presentation = Presentation()
        self.history = SnapshotHistory(self.config.history_capacity)

    # Snapshots and history

    def snapshot(self, label: str = "") -> Snapshot:
        """Capture the current state without touching the history."""
        return capture_snapshot(self.graph, self.presentation, label)

    def capture_and_push(self, label: str) -> Snapshot:
        """Push the current state onto the undo stack and drop the redo stack."""
        snapshot = self.snapshot(label)
        self.history.push(snapshot)
        return snapshot

    def undo(self) -> Optional[Snapshot]:
        """
        Revert to the state before the most recent edit.

        Returns:
            The restored snapshot, or None if there was nothing to undo
        """
        target = self.history.peek_undo()
        if target is None:
            return None

        graph, presentation = restore_snapshot(target)
        self.history.undo(self.snapshot(target.label))
        self.graph, self.presentation = graph, presentation
        logger.info("UNDO | Reverted to: %s", target.label)
        return target

    def redo(self) -> Optional[Snapshot]:
        """
        Re-apply the most recently undone edit.

        Returns:
            The restored snapshot, or None if there was nothing to redo
        """
        target = self.history.peek_redo()
        if target is None:
            return None

        graph, presentation = restore_snapshot(target)
        self.history.redo(self.snapshot(target.label))
        self.graph, self.presentation = graph, presentation
        logger.info("REDO | Applied: %s", target.label)
        return target

    def restore(self, snapshot: Snapshot) -> None:
        """Replace the live graph and presentation with a snapshot's contents."""
        self.graph, self.presentation = restore_snapshot(snapshot)

    @property
    def can_undo(self) -> bool:
        return self.history.can_undo

    @property
    def can_redo(self) -> bool:
        return self.history.can_redo

    # Vertex and edge commands

    def add_vertex(
        self, vertex: int, x: Optional[float] = None, y: Optional[float] = None
    ) -> None:
        if self.graph.contains_vertex(vertex):
            raise VertexExists(vertex)

        self.capture_and_push(f"ADD_VERTEX_{vertex}")
        self.graph.add_vertex(vertex)
        self.presentation.add_vertex(vertex, x, y)
        logger.info("ADD_VERTEX | Added vertex %s", vertex)

    def remove_vertex(self, vertex: int) -> None:
        self._require_vertex(vertex)

        self.capture_and_push(f"REMOVE_VERTEX_{vertex}")
        self.graph.remove_vertex(vertex)
        self.presentation.remove_vertex(vertex)
        logger.info("REMOVE_VERTEX | Removed vertex %s", vertex)

    def add_edge(
        self, source: int, destination: int, weight: Optional[float] = None
    ) -> None:
        """
        Add an edge between two existing vertices.

        Args:
            source: Source vertex
            destination: Destination vertex
            weight: Edge weight; must be positive and finite. Ignored (1.0)
                on unweighted graphs.

        Raises:
            VertexNotFound: If either vertex does not exist
            InvalidWeight: If the weight is not a positive finite number
            EdgeExists: If the edge exists and parallel edges are not allowed
        """
        self._require_vertex(source)
        self._require_vertex(destination)
        weight = self._validate_weight(weight) if self.graph.weighted else 1.0
        if not self.config.allow_parallel_edges and self.graph.contains_edge(
            source, destination
        ):
            raise EdgeExists(source, destination)

        self.capture_and_push(f"ADD_EDGE_{source}_{destination}")
        self.graph.add_edge(source, destination, weight)
        self.presentation.add_edge(
            source, destination, weight, show_weight=self._show_weights()
        )
        logger.info(
            "ADD_EDGE | Added edge %s -> %s%s",
            source,
            destination,
            f" (weight: {weight})" if self.graph.weighted else "",
        )

    def remove_edge(self, source: int, destination: int) -> None:
        if not self.graph.contains_edge(source, destination):
            raise EdgeNotFound(source, destination)

        self.capture_and_push(f"REMOVE_EDGE_{source}_{destination}")
        self.graph.remove_edge(source, destination)
        self.presentation.remove_edge(source, destination, self.graph.directed)
        logger.info("REMOVE_EDGE | Removed edge %s -> %s", source, destination)

    def move_vertex(self, vertex: int, x: float, y: float) -> None:
        self._require_vertex(vertex)

        self.capture_and_push(f"MOVE_VERTEX_{vertex}")
        self.presentation.move_vertex(vertex, x, y)
        logger.info("MOVE_VERTEX | Moved vertex %s to (%s, %s)", vertex, x, y)

    def clear(self) -> None:
        self.capture_and_push("CLEAR_ALL")
        self.graph.clear()
        self.presentation.clear()
        logger.info("CLEAR_ALL | Graph cleared")

    # Mode toggles

    def set_directed(self, directed: bool) -> None:
        """Switch between directed and undirected, re-adding every edge."""
        if directed == self.graph.directed:
            return

        self.capture_and_push("TOGGLE_DIRECTED")
        self.graph = self._rebuild(directed, self.graph.weighted)
        logger.info(
            "GRAPH_TYPE changed to %s", "DIRECTED" if directed else "UNDIRECTED"
        )

    def set_weighted(self, weighted: bool) -> None:
        """Switch weight support on or off, re-adding every edge."""
        if weighted == self.graph.weighted:
            return

        self.capture_and_push("TOGGLE_WEIGHTED")
        self.graph = self._rebuild(self.graph.directed, weighted)
        self.presentation.set_weight_labels(self._show_weights())
        logger.info("WEIGHT_SUPPORT %s", "ENABLED" if weighted else "DISABLED")

    def _rebuild(self, directed: bool, weighted: bool) -> Graph:
        # Edges are re-added as drawn so direction survives a round trip
        return create_graph(
            [(e.source, e.destination, e.weight) for e in self.presentation.edges],
            directed=directed,
            weighted=weighted,
            vertices=self.graph.vertices(),
        )

    # Whole-graph commands

    def generate_random(self, seed: Optional[int] = None) -> None:
        """
        Replace the graph with a random one and lay it out on a circle.

        Builds 6 to 10 vertices numbered from 1, then makes n + rand(n)
        attempts at joining a random pair; self-loops and repeated pairs are
        skipped. Weighted graphs get integer weights from 1 to 9.
        """
        rng = random.Random(seed if seed is not None else self.config.random_seed)
        self.capture_and_push("GENERATE_RANDOM")

        graph = Graph(directed=self.graph.directed, weighted=self.graph.weighted)
        presentation = Presentation()
        vertex_count = 6 + rng.randrange(5)
        for vertex in range(1, vertex_count + 1):
            graph.add_vertex(vertex)
            presentation.add_vertex(vertex)

        joined = set()
        for _ in range(vertex_count + rng.randrange(vertex_count)):
            source = rng.randint(1, vertex_count)
            destination = rng.randint(1, vertex_count)
            pair = (min(source, destination), max(source, destination))
            if source == destination or pair in joined:
                continue
            weight = float(rng.randint(1, 9)) if graph.weighted else 1.0
            graph.add_edge(source, destination, weight)
            presentation.add_edge(
                source, destination, weight, show_weight=self._show_weights()
            )
            joined.add(pair)

        presentation.apply_circular_layout(
            self.config.canvas_width, self.config.canvas_height, self.config.layout_margin
        )
        self.graph, self.presentation = graph, presentation
        logger.info(
            "GENERATE_RANDOM | Generated %d vertices, %d edges",
            vertex_count,
            len(joined),
        )

    def load(self, snapshot: Snapshot, relayout: bool = False) -> None:
        """
        Replace the current state with a loaded snapshot (undoable).

        Args:
            snapshot: Snapshot produced by the persistence layer
            relayout: Re-place the vertices on a circle after loading
        """
        graph, presentation = restore_snapshot(snapshot)
        if relayout:
            presentation.apply_circular_layout(
                self.config.canvas_width,
                self.config.canvas_height,
                self.config.layout_margin,
            )

        self.capture_and_push("LOAD_GRAPH")
        self.graph, self.presentation = graph, presentation
        logger.info("LOAD_GRAPH | Loaded %s", snapshot.label or "snapshot")

    def apply_circular_layout(self) -> None:
        self.capture_and_push("LAYOUT_CIRCULAR")
        self.presentation.apply_circular_layout(
            self.config.canvas_width, self.config.canvas_height, self.config.layout_margin
        )

    # Algorithms

    def run(
        self,
        algorithm: Union[str, Algorithm],
        start: Optional[int] = None,
        end: Optional[int] = None,
        trace: Optional[AlgorithmTrace] = None,
    ) -> AlgorithmOutcome:
        """
        Run an algorithm on the current graph.

        Args:
            algorithm: Algorithm or its name ("BFS", "Dijkstra's Algorithm", ...)
            start: Start vertex (not needed for topological sort)
            end: End vertex for path-finding algorithms
            trace: Optional trace to record the algorithm's steps into

        Returns:
            AlgorithmOutcome with the order or path and, for path-finding,
            the total distance (infinity when no path exists)

        Raises:
            VertexNotFound: If start or end is not in the graph
            ValueError: If a required vertex argument is missing
            UnsupportedOperation: If the graph has the wrong shape
            CycleDetected: If topological sort meets a cycle
        """
        algorithm = Algorithm.parse(algorithm)
        if trace is not None and not trace.algorithm:
            trace.algorithm = algorithm.value

        if algorithm is Algorithm.TOPOLOGICAL_SORT:
            order = algorithms.topological_sort(self.graph, trace=trace)
            return AlgorithmOutcome(algorithm, order)

        if start is None:
            raise ValueError(f"{algorithm.value} requires a start vertex")
        self._require_vertex(start)

        if algorithm is Algorithm.BFS:
            return AlgorithmOutcome(algorithm, algorithms.bfs(self.graph, start, trace))
        if algorithm is Algorithm.DFS:
            return AlgorithmOutcome(algorithm, algorithms.dfs(self.graph, start, trace))

        if end is None:
            raise ValueError(f"{algorithm.value} requires an end vertex")
        self._require_vertex(end)

        if algorithm is Algorithm.SHORTEST_PATH:
            path = algorithms.shortest_path(self.graph, start, end, trace)
            distance = path_weight(self.graph, path) if path else math.inf
            return AlgorithmOutcome(algorithm, path, distance)
        if algorithm is Algorithm.DIJKSTRA:
            result = algorithms.dijkstra(self.graph, start, end, trace)
            return AlgorithmOutcome(algorithm, result.path, result.distance)

        result = algorithms.a_star(
            self.graph, start, end, heuristic=self._heuristic(), trace=trace
        )
        return AlgorithmOutcome(algorithm, result.path, result.distance)

    def _heuristic(self) -> Optional[algorithms.Heuristic]:
        if self.config.heuristic == "euclidean":
            return algorithms.euclidean_heuristic(self.presentation.positions())
        if self.config.heuristic == "none":
            return lambda vertex, goal: 0.0
        return algorithms.vertex_id_heuristic

    # Queries

    def statistics(self) -> GraphStatistics:
        return self.graph.statistics()

    def _require_vertex(self, vertex: int) -> None:
        if not self.graph.contains_vertex(vertex):
            raise VertexNotFound(vertex)

    def _validate_weight(self, weight: Optional[float]) -> float:
        if weight is None:
            return 1.0
        try:
            weight = float(weight)
        except (TypeError, ValueError):
            raise InvalidWeight(f"Weight must be a number, got {weight!r}")
        if not math.isfinite(weight) or weight <= 0:
            raise InvalidWeight(f"Weight must be positive, got {weight}")
        return weight

    def _show_weights(self) -> bool:
        return self.graph.weighted and self.config.show_weight_labels
