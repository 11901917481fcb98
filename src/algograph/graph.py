"""
Graph module for the graph engine.

Provides the mutable adjacency-list graph and the read-only view that the
algorithms operate on.
"""

import logging
import math
from typing import Dict, Iterable, List, Optional, Protocol, Sequence, Tuple

from .models import GraphStatistics

logger = logging.getLogger(__name__)

Edge = Tuple[int, int, float]


class GraphView(Protocol):
    """Read-only queries the algorithms need from a graph."""

    directed: bool
    weighted: bool

    def vertices(self) -> List[int]: ...

    def neighbors(self, vertex: int) -> List[int]: ...

    def edge_weight(self, source: int, destination: int) -> float: ...

    def contains_vertex(self, vertex: int) -> bool: ...

    def vertex_count(self) -> int: ...


class Graph:
    """
    Directed or undirected, weighted or unweighted adjacency-list graph.

    The directed and weighted flags are fixed at construction; switching
    modes means building a new graph with ``rebuilt``.

    Parallel edges are kept: adding the same edge twice stores two entries
    in the adjacency list.
    """

    def __init__(self, directed: bool = False, weighted: bool = False):
        self.directed = directed
        self.weighted = weighted
        self.adjacency: Dict[int, List[int]] = {}
        self.edge_weights: Dict[Tuple[int, int], float] = {}

    # Mutation

    def add_vertex(self, vertex: int) -> None:
        """Add a vertex; does nothing if it already exists."""
        if vertex not in self.adjacency:
            self.adjacency[vertex] = []
            logger.debug("Added vertex %s", vertex)

    def add_edge(self, source: int, destination: int, weight: float = 1.0) -> None:
        """Add an edge, creating missing endpoints."""
        self.add_vertex(source)
        self.add_vertex(destination)

        self.adjacency[source].append(destination)
        if not self.directed:
            self.adjacency[destination].append(source)

        if self.weighted:
            self.edge_weights[(source, destination)] = weight
            if not self.directed:
                self.edge_weights[(destination, source)] = weight

        logger.debug(
            "Added edge %s -> %s%s",
            source,
            destination,
            f" (weight: {weight})" if self.weighted else "",
        )

    def remove_vertex(self, vertex: int) -> None:
        """Remove a vertex and every edge touching it."""
        if vertex not in self.adjacency:
            return

        del self.adjacency[vertex]
        for vertex_id, targets in self.adjacency.items():
            if vertex in targets:
                self.adjacency[vertex_id] = [t for t in targets if t != vertex]

        self.edge_weights = {
            key: weight
            for key, weight in self.edge_weights.items()
            if vertex not in key
        }
        logger.debug("Removed vertex %s", vertex)

    def remove_edge(self, source: int, destination: int) -> None:
        """Remove one occurrence of an edge; does nothing if it is absent."""
        self._remove_first(source, destination)
        if not self.directed:
            self._remove_first(destination, source)

        # Weights stay while a parallel copy of the edge survives
        if not self.contains_edge(source, destination):
            self.edge_weights.pop((source, destination), None)
            if not self.directed:
                self.edge_weights.pop((destination, source), None)

        logger.debug("Removed edge %s -> %s", source, destination)

    def _remove_first(self, source: int, destination: int) -> None:
        targets = self.adjacency.get(source)
        if targets and destination in targets:
            targets.remove(destination)

    def clear(self) -> None:
        """Remove all vertices and edges."""
        self.adjacency.clear()
        self.edge_weights.clear()
        logger.debug("Graph cleared")

    # Queries

    def vertices(self) -> List[int]:
        """Return all vertices in insertion order."""
        return list(self.adjacency)

    def edges(self) -> List[Edge]:
        """
        Return all edges as (source, destination, weight) tuples.

        Undirected edges appear once, with the smaller id as the source.
        """
        result: List[Edge] = []
        for source, targets in self.adjacency.items():
            if self.directed:
                result.extend(
                    (source, target, self.edge_weight(source, target))
                    for target in targets
                )
                continue

            loops = 0
            for target in targets:
                if target == source:
                    loops += 1
                    # Undirected self-loops are stored twice
                    if loops % 2 == 0:
                        result.append((source, target, self.edge_weight(source, target)))
                elif source < target:
                    result.append((source, target, self.edge_weight(source, target)))
        return result

    def neighbors(self, vertex: int) -> List[int]:
        """Get the vertices directly reachable from this vertex."""
        return list(self.adjacency.get(vertex, []))

    def degree(self, vertex: int) -> int:
        """Length of the vertex's adjacency list (out-degree when directed)."""
        return len(self.adjacency.get(vertex, []))

    def contains_vertex(self, vertex: int) -> bool:
        return vertex in self.adjacency

    def contains_edge(self, source: int, destination: int) -> bool:
        return destination in self.adjacency.get(source, [])

    def edge_weight(self, source: int, destination: int) -> float:
        """
        Weight of the edge from source to destination.

        Unweighted graphs give every edge an implicit weight of 1.0. Weighted
        graphs return infinity for a pair with no recorded weight.
        """
        if not self.weighted:
            return 1.0
        return self.edge_weights.get((source, destination), math.inf)

    def vertex_count(self) -> int:
        return len(self.adjacency)

    def edge_count(self) -> int:
        """Number of edges; undirected edges are counted once."""
        count = sum(len(targets) for targets in self.adjacency.values())
        return count if self.directed else count // 2

    def density(self) -> float:
        """Fraction of the possible edges (without self-loops) that exist."""
        n = len(self.adjacency)
        max_edges = n * (n - 1) if self.directed else n * (n - 1) // 2
        if max_edges == 0:
            return 0.0
        return self.edge_count() / max_edges

    def is_empty(self) -> bool:
        return not self.adjacency

    def statistics(self) -> GraphStatistics:
        return GraphStatistics(
            vertex_count=self.vertex_count(),
            edge_count=self.edge_count(),
            density=self.density(),
        )

    def rebuilt(
        self, directed: Optional[bool] = None, weighted: Optional[bool] = None
    ) -> "Graph":
        """
        Build a new graph holding the same vertices and edges under new modes.

        Args:
            directed: New directed flag (defaults to the current one)
            weighted: New weighted flag (defaults to the current one)

        Returns:
            A fresh Graph; this graph is left unchanged
        """
        return create_graph(
            self.edges(),
            directed=self.directed if directed is None else directed,
            weighted=self.weighted if weighted is None else weighted,
            vertices=self.vertices(),
        )

    def __repr__(self) -> str:
        return (
            f"Graph(directed={self.directed}, weighted={self.weighted}, "
            f"vertices={self.vertex_count()}, edges={self.edge_count()})"
        )

    def __str__(self) -> str:
        kind = "Directed" if self.directed else "Undirected"
        weighting = "Weighted" if self.weighted else "Unweighted"
        lines = [f"Graph ({kind}, {weighting}):"]
        for vertex, targets in self.adjacency.items():
            lines.append(f"Vertex {vertex}: {targets}")
        if self.weighted and self.edge_weights:
            lines.append("")
            lines.append("Edge Weights:")
            for (source, destination), weight in self.edge_weights.items():
                lines.append(f"{source}-{destination} -> {weight}")
        return "\n".join(lines)


def create_graph(
    connections: Iterable[Sequence],
    directed: bool = False,
    weighted: bool = False,
    vertices: Iterable[int] = (),
) -> Graph:
    """
    Create a Graph from a list of connections.

    Args:
        connections: (source, destination) or (source, destination, weight)
            tuples
        directed: Whether the graph is directed
        weighted: Whether edge weights are recorded
        vertices: Extra vertices to add first (keeps isolated vertices and
            insertion order)

    Returns:
        Graph object
    """
    graph = Graph(directed=directed, weighted=weighted)
    for vertex in vertices:
        graph.add_vertex(vertex)
    for connection in connections:
        if len(connection) == 3:
            source, destination, weight = connection
            graph.add_edge(source, destination, weight)
        else:
            source, destination = connection
            graph.add_edge(source, destination)
    return graph
