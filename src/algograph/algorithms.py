"""
Graph algorithms.

Every algorithm is a free function over a read-only ``GraphView``; none of
them mutate the graph. Each accepts an optional ``AlgorithmTrace`` that
records the individual steps for step-by-step animation.

Algorithms that need a particular graph shape raise ``UnsupportedOperation``
rather than coercing the graph. Lookups involving vertices that are not in
the graph return an empty result.
"""

import heapq
import math
from collections import deque
from typing import Callable, Dict, Iterator, List, Mapping, Optional, Set, Tuple

from .errors import CycleDetected, UnsupportedOperation
from .graph import GraphView
from .models import DijkstraResult, PathResult
from .paths import reconstruct_path
from .tracer import AlgorithmTrace

Heuristic = Callable[[int, int], float]


# Traversals


def bfs(
    graph: GraphView, start: int, trace: Optional[AlgorithmTrace] = None
) -> List[int]:
    """
    Breadth-first traversal from start.

    Args:
        graph: Graph to traverse
        start: Start vertex
        trace: Optional trace to record visit/discover steps into

    Returns:
        Reachable vertices in visitation order, empty if start is absent
    """
    if not graph.contains_vertex(start):
        return []

    result = []
    visited = {start}
    queue = deque([start])

    while queue:
        current = queue.popleft()
        result.append(current)
        if trace is not None:
            trace.record("visit", current)

        for neighbor in graph.neighbors(current):
            if neighbor not in visited:
                visited.add(neighbor)
                queue.append(neighbor)
                if trace is not None:
                    trace.record("discover", neighbor, current)

    return result


def dfs(
    graph: GraphView, start: int, trace: Optional[AlgorithmTrace] = None
) -> List[int]:
    """
    Pre-order depth-first traversal; empty if start is absent.

    Neighbors are explored in adjacency order, as a recursive DFS would, but
    an explicit stack of neighbor iterators keeps long chains within
    Python's recursion limit.
    """
    if not graph.contains_vertex(start):
        return []

    result: List[int] = []
    visited: Set[int] = set()

    def visit(vertex: int, parent: Optional[int]) -> None:
        visited.add(vertex)
        result.append(vertex)
        if trace is not None:
            trace.record("visit", vertex, parent)

    visit(start, None)
    stack = [(start, iter(graph.neighbors(start)))]
    while stack:
        vertex, neighbors = stack[-1]
        for neighbor in neighbors:
            if neighbor not in visited:
                visit(neighbor, vertex)
                stack.append((neighbor, iter(graph.neighbors(neighbor))))
                break
        else:
            stack.pop()

    return result


def shortest_path(
    graph: GraphView,
    source: int,
    destination: int,
    trace: Optional[AlgorithmTrace] = None,
) -> List[int]:
    """
    Fewest-edges path between two vertices, ignoring weights.

    Runs BFS from source and stops as soon as destination is dequeued.

    Returns:
        Vertices from source to destination, empty if unreachable or if
        either endpoint is absent
    """
    if not graph.contains_vertex(source) or not graph.contains_vertex(destination):
        return []

    parent: Dict[int, int] = {}
    visited = {source}
    queue = deque([source])

    while queue:
        current = queue.popleft()
        if trace is not None:
            trace.record("visit", current)

        if current == destination:
            return reconstruct_path(parent, source, destination)

        for neighbor in graph.neighbors(current):
            if neighbor not in visited:
                visited.add(neighbor)
                parent[neighbor] = current
                queue.append(neighbor)
                if trace is not None:
                    trace.record("discover", neighbor, current)

    return []


def has_path(graph: GraphView, source: int, destination: int) -> bool:
    """Check whether destination is reachable from source."""
    if not graph.contains_vertex(source) or not graph.contains_vertex(destination):
        return False

    visited: Set[int] = set()
    stack = [source]
    while stack:
        current = stack.pop()
        if current == destination:
            return True
        if current in visited:
            continue
        visited.add(current)
        stack.extend(n for n in graph.neighbors(current) if n not in visited)
    return False


# Weighted path-finding


def dijkstra(
    graph: GraphView,
    start: int,
    end: int,
    trace: Optional[AlgorithmTrace] = None,
) -> DijkstraResult:
    """
    Dijkstra's shortest path on a weighted graph.

    Uses a binary heap as the priority queue. The search stops once end is
    settled or when every remaining vertex is unreachable.

    Args:
        graph: Weighted graph with non-negative weights
        start: Start vertex
        end: Target vertex
        trace: Optional trace to record settle/relax steps into

    Returns:
        DijkstraResult with the path, its total distance and the full
        distance and predecessor maps at the time the search stopped

    Raises:
        UnsupportedOperation: If the graph is not weighted
    """
    if not graph.weighted:
        raise UnsupportedOperation("Dijkstra requires a weighted graph")

    distances: Dict[int, float] = {vertex: math.inf for vertex in graph.vertices()}
    previous: Dict[int, int] = {}
    if start not in distances:
        return DijkstraResult(distances=distances, previous=previous)

    distances[start] = 0.0
    settled: Set[int] = set()
    heap: List[Tuple[float, int]] = [(0.0, start)]

    while heap:
        distance, current = heapq.heappop(heap)
        if current in settled:
            continue
        settled.add(current)
        if trace is not None:
            trace.record("settle", current, previous.get(current), distance=distance)

        if current == end:
            break

        for neighbor in graph.neighbors(current):
            if neighbor in settled:
                continue
            candidate = distance + graph.edge_weight(current, neighbor)
            if candidate < distances[neighbor]:
                distances[neighbor] = candidate
                previous[neighbor] = current
                heapq.heappush(heap, (candidate, neighbor))
                if trace is not None:
                    trace.record("relax", neighbor, current, distance=candidate)

    total = distances.get(end, math.inf)
    path = reconstruct_path(previous, start, end) if total < math.inf else []
    return DijkstraResult(path, total, distances, previous)


def vertex_id_heuristic(vertex: int, goal: int) -> float:
    """
    Absolute difference of the vertex ids.

    Vertex numbering carries no geometric meaning, so this estimate can
    overestimate the true remaining cost. A* run with it is a best-effort
    search and may return a path that is not the shortest.
    """
    return float(abs(vertex - goal))


def euclidean_heuristic(
    positions: Mapping[int, Tuple[float, float]], scale: float = 1.0
) -> Heuristic:
    """
    Build a straight-line distance heuristic from vertex positions.

    The estimate is admissible when every edge weight is at least ``scale``
    times the distance between its endpoints.

    Args:
        positions: Maps vertex id to its (x, y) position
        scale: Multiplier converting position distance into weight units

    Returns:
        A heuristic callable for ``a_star``; vertices without a position
        get an estimate of 0
    """

    def heuristic(vertex: int, goal: int) -> float:
        if vertex not in positions or goal not in positions:
            return 0.0
        (x1, y1), (x2, y2) = positions[vertex], positions[goal]
        return scale * math.hypot(x1 - x2, y1 - y2)

    return heuristic


def a_star(
    graph: GraphView,
    start: int,
    end: int,
    heuristic: Optional[Heuristic] = None,
    trace: Optional[AlgorithmTrace] = None,
) -> PathResult:
    """
    A* search from start to end.

    Edge costs come from ``edge_weight``, so unweighted graphs use 1.0 per
    edge. The result is only guaranteed shortest when the heuristic never
    overestimates; the default ``vertex_id_heuristic`` gives no such
    guarantee.

    Args:
        graph: Graph to search
        start: Start vertex
        end: Goal vertex
        heuristic: Estimate of remaining cost, called as heuristic(vertex, end)
        trace: Optional trace to record settle/relax steps into

    Returns:
        PathResult with the path and its cost; empty path and infinite cost
        when end is unreachable or either endpoint is absent
    """
    if not graph.contains_vertex(start) or not graph.contains_vertex(end):
        return PathResult()

    estimate = heuristic or vertex_id_heuristic
    g_score: Dict[int, float] = {start: 0.0}
    previous: Dict[int, int] = {}
    closed: Set[int] = set()
    open_heap: List[Tuple[float, int]] = [(estimate(start, end), start)]

    while open_heap:
        _, current = heapq.heappop(open_heap)
        if current in closed:
            continue
        if trace is not None:
            trace.record(
                "settle", current, previous.get(current), distance=g_score[current]
            )

        if current == end:
            return PathResult(reconstruct_path(previous, start, end), g_score[end])

        closed.add(current)
        for neighbor in graph.neighbors(current):
            if neighbor in closed:
                continue
            tentative = g_score[current] + graph.edge_weight(current, neighbor)
            if tentative < g_score.get(neighbor, math.inf):
                previous[neighbor] = current
                g_score[neighbor] = tentative
                heapq.heappush(open_heap, (tentative + estimate(neighbor, end), neighbor))
                if trace is not None:
                    trace.record("relax", neighbor, current, distance=tentative)

    return PathResult()


# Ordering and structure


def topological_sort(
    graph: GraphView, trace: Optional[AlgorithmTrace] = None
) -> List[int]:
    """
    Return vertices in topological order using Kahn's algorithm.

    Raises:
        UnsupportedOperation: If the graph is undirected
        CycleDetected: If the graph contains a cycle
    """
    if not graph.directed:
        raise UnsupportedOperation("Topological sort requires a directed graph")

    vertices = graph.vertices()
    in_degree = {vertex: 0 for vertex in vertices}
    for vertex in vertices:
        for neighbor in graph.neighbors(vertex):
            in_degree[neighbor] += 1

    queue = deque(vertex for vertex in vertices if in_degree[vertex] == 0)
    result = []

    while queue:
        current = queue.popleft()
        result.append(current)
        if trace is not None:
            trace.record("visit", current)

        for neighbor in graph.neighbors(current):
            in_degree[neighbor] -= 1
            if in_degree[neighbor] == 0:
                queue.append(neighbor)

    # If not all vertices were processed, the rest sit on or behind a cycle
    if len(result) != len(vertices):
        raise CycleDetected(
            "Graph contains a cycle - topological sort not possible"
        )

    return result


def has_cycle(graph: GraphView) -> bool:
    """Check if the graph contains a cycle (self-loops included)."""
    if graph.directed:
        return _has_directed_cycle(graph)
    return _has_undirected_cycle(graph)


def _has_directed_cycle(graph: GraphView) -> bool:
    visited: Set[int] = set()
    # Vertices on the current DFS path
    rec_stack: Set[int] = set()

    for root in graph.vertices():
        if root in visited:
            continue

        visited.add(root)
        rec_stack.add(root)
        stack = [(root, iter(graph.neighbors(root)))]
        while stack:
            vertex, neighbors = stack[-1]
            for neighbor in neighbors:
                if neighbor in rec_stack:
                    return True
                if neighbor not in visited:
                    visited.add(neighbor)
                    rec_stack.add(neighbor)
                    stack.append((neighbor, iter(graph.neighbors(neighbor))))
                    break
            else:
                stack.pop()
                rec_stack.remove(vertex)

    return False


def _has_undirected_cycle(graph: GraphView) -> bool:
    visited: Set[int] = set()

    for root in graph.vertices():
        if root in visited:
            continue

        visited.add(root)
        stack: List[Tuple[int, Optional[int], Iterator[int]]] = [
            (root, None, iter(graph.neighbors(root)))
        ]
        while stack:
            vertex, parent, neighbors = stack[-1]
            for neighbor in neighbors:
                if neighbor not in visited:
                    visited.add(neighbor)
                    stack.append((neighbor, vertex, iter(graph.neighbors(neighbor))))
                    break
                if neighbor != parent:
                    return True
            else:
                stack.pop()

    return False


def connected_components(graph: GraphView) -> List[List[int]]:
    """
    Group vertices into connected components.

    Each component lists its vertices in DFS discovery order; components
    appear in the order of their first vertex.

    Raises:
        UnsupportedOperation: If the graph is directed
    """
    if graph.directed:
        raise UnsupportedOperation(
            "Connected components are only defined for undirected graphs"
        )

    components: List[List[int]] = []
    visited: Set[int] = set()

    for root in graph.vertices():
        if root in visited:
            continue

        visited.add(root)
        component = [root]
        stack = [iter(graph.neighbors(root))]
        while stack:
            for neighbor in stack[-1]:
                if neighbor not in visited:
                    visited.add(neighbor)
                    component.append(neighbor)
                    stack.append(iter(graph.neighbors(neighbor)))
                    break
            else:
                stack.pop()
        components.append(component)

    return components


def find_all_paths(
    graph: GraphView,
    source: int,
    destination: int,
    trace: Optional[AlgorithmTrace] = None,
) -> List[List[int]]:
    """
    Find every simple path (no repeated vertex) between two vertices.

    This is an exhaustive backtracking search: the number of simple paths,
    and so the running time, grows exponentially with graph size. Use it on
    small teaching graphs only.

    Returns:
        All simple paths in DFS discovery order; empty if either endpoint
        is absent
    """
    if not graph.contains_vertex(source) or not graph.contains_vertex(destination):
        return []

    paths: List[List[int]] = []
    current_path: List[int] = []
    on_path: Set[int] = set()
    stack: List[Iterator[int]] = []

    def extend(vertex: int) -> None:
        on_path.add(vertex)
        current_path.append(vertex)
        if trace is not None:
            trace.record("visit", vertex)

        if vertex == destination:
            paths.append(list(current_path))
            # A path never continues past the destination
            stack.append(iter(()))
        else:
            stack.append(iter(graph.neighbors(vertex)))

    extend(source)
    while stack:
        for neighbor in stack[-1]:
            if neighbor not in on_path:
                extend(neighbor)
                break
        else:
            stack.pop()
            vertex = current_path.pop()
            on_path.remove(vertex)
            if trace is not None:
                trace.record("backtrack", vertex)

    return paths
