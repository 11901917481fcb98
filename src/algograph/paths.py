"""
Path reconstruction helpers.

BFS, Dijkstra and A* all record, for each vertex they reach, the vertex it
was reached from. These helpers turn that predecessor map back into an
ordered path.
"""

from typing import TYPE_CHECKING, Dict, List, Sequence

if TYPE_CHECKING:
    from .graph import GraphView


def reconstruct_path(
    predecessors: Dict[int, int], source: int, destination: int
) -> List[int]:
    """
    Walk the predecessor chain back from destination to source.

    Args:
        predecessors: Maps each reached vertex to the vertex it was reached
            from. The source itself may be absent or map to None.
        source: Start of the search
        destination: Vertex to reconstruct the path to

    Returns:
        Vertices from source to destination, or an empty list when the chain
        never leads back to source (destination unreached)
    """
    if destination == source:
        return [source]
    if destination not in predecessors:
        return []

    path = [destination]
    current = destination
    # A chain longer than the map has looped and cannot reach source
    for _ in range(len(predecessors)):
        current = predecessors.get(current)
        if current is None:
            return []
        path.append(current)
        if current == source:
            path.reverse()
            return path
    return []


def path_weight(graph: "GraphView", path: Sequence[int]) -> float:
    """Sum of edge weights along consecutive vertices of a path."""
    return sum(
        graph.edge_weight(source, destination)
        for source, destination in zip(path, path[1:])
    )
