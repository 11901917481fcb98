"""Integration tests checking the algorithms against networkx.

Random graphs are built with a fixed seed and every algorithm result is
compared with what networkx computes on the converted graph.
"""

import math
import random

import networkx as nx
import pytest

from algograph import (
    CycleDetected,
    Graph,
    bfs,
    connected_components,
    dfs,
    dijkstra,
    find_all_paths,
    has_cycle,
    path_weight,
    shortest_path,
    to_networkx,
    topological_sort,
)

SEEDS = range(8)


def random_graph(seed: int, directed: bool, weighted: bool, vertex_count: int = 9) -> Graph:
    rng = random.Random(seed)
    graph = Graph(directed=directed, weighted=weighted)
    for vertex in range(vertex_count):
        graph.add_vertex(vertex)
    seen = set()
    for _ in range(vertex_count * 2):
        source, destination = rng.sample(range(vertex_count), 2)
        key = (source, destination) if directed else frozenset((source, destination))
        if key in seen:
            continue
        seen.add(key)
        graph.add_edge(source, destination, float(rng.randint(1, 20)))
    return graph


class TestTraversals:
    """BFS and DFS reach exactly the networkx descendants."""

    @pytest.mark.parametrize("seed", SEEDS)
    @pytest.mark.parametrize("directed", [True, False])
    def test_reachable_sets(self, seed, directed):
        graph = random_graph(seed, directed, weighted=False)
        reference = to_networkx(graph)
        if directed:
            expected = nx.descendants(reference, 0) | {0}
        else:
            expected = nx.node_connected_component(reference, 0)

        for order in (bfs(graph, 0), dfs(graph, 0)):
            assert set(order) == expected
            assert len(order) == len(expected)

    @pytest.mark.parametrize("seed", SEEDS)
    def test_bfs_shortest_path_length(self, seed):
        graph = random_graph(seed, directed=True, weighted=False)
        reference = to_networkx(graph)
        for target in graph.vertices():
            path = shortest_path(graph, 0, target)
            if nx.has_path(reference, 0, target):
                assert len(path) - 1 == nx.shortest_path_length(reference, 0, target)
            else:
                assert path == []


class TestDijkstra:
    """Dijkstra distances match networkx."""

    @pytest.mark.parametrize("seed", SEEDS)
    @pytest.mark.parametrize("directed", [True, False])
    def test_distances(self, seed, directed):
        graph = random_graph(seed, directed, weighted=True)
        reference = to_networkx(graph)
        lengths = nx.single_source_dijkstra_path_length(reference, 0)

        for target in graph.vertices():
            result = dijkstra(graph, 0, target)
            assert result.distances[0] == 0.0
            if target in lengths:
                assert math.isclose(result.distance, lengths[target])
                assert math.isclose(path_weight(graph, result.path), result.distance)
            else:
                assert result.path == []
                assert result.distance == math.inf


class TestStructure:
    """Cycle detection, topological order and components match networkx."""

    @pytest.mark.parametrize("seed", SEEDS)
    def test_directed_cycles_and_order(self, seed):
        graph = random_graph(seed, directed=True, weighted=False, vertex_count=7)
        reference = to_networkx(graph)
        acyclic = nx.is_directed_acyclic_graph(reference)
        assert has_cycle(graph) is not acyclic

        if acyclic:
            order = topological_sort(graph)
            for source, destination in reference.edges:
                assert order.index(source) < order.index(destination)
        else:
            with pytest.raises(CycleDetected):
                topological_sort(graph)

    @pytest.mark.parametrize("seed", SEEDS)
    def test_undirected_cycles_and_components(self, seed):
        graph = random_graph(seed, directed=False, weighted=False, vertex_count=8)
        reference = to_networkx(graph)
        assert has_cycle(graph) is not nx.is_forest(reference)

        components = sorted(sorted(c) for c in connected_components(graph))
        expected = sorted(sorted(c) for c in nx.connected_components(reference))
        assert components == expected

    @pytest.mark.parametrize("seed", SEEDS)
    def test_all_simple_paths(self, seed):
        graph = random_graph(seed, directed=True, weighted=False, vertex_count=6)
        reference = to_networkx(graph)
        ours = sorted(find_all_paths(graph, 0, 5))
        expected = sorted(nx.all_simple_paths(reference, 0, 5))
        assert ours == expected
