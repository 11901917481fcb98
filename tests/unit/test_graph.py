"""Unit tests for the graph module."""

import math

from algograph import Graph, GraphStatistics, create_graph


class TestAddVertex:
    """Tests for adding vertices."""

    def test_add_vertex(self):
        """Added vertex is contained and has no neighbors."""
        graph = Graph()
        graph.add_vertex(1)
        assert graph.contains_vertex(1)
        assert graph.neighbors(1) == []

    def test_add_vertex_idempotent(self):
        """Adding an existing vertex keeps its edges."""
        graph = create_graph([(1, 2)])
        graph.add_vertex(1)
        assert graph.neighbors(1) == [2]
        assert graph.vertex_count() == 2

    def test_vertices_keep_insertion_order(self):
        """Vertices come back in insertion order, not sorted."""
        graph = Graph()
        for vertex in (5, -3, 12, 0):
            graph.add_vertex(vertex)
        assert graph.vertices() == [5, -3, 12, 0]


class TestAddEdge:
    """Tests for adding edges."""

    def test_add_edge_creates_vertices(self):
        """Endpoints are created on edge insertion."""
        graph = Graph(directed=True)
        graph.add_edge(1, 2)
        assert graph.contains_vertex(1)
        assert graph.contains_vertex(2)

    def test_directed_edge_one_way(self):
        """Directed edges are not mirrored."""
        graph = Graph(directed=True)
        graph.add_edge(1, 2)
        assert graph.contains_edge(1, 2)
        assert not graph.contains_edge(2, 1)

    def test_undirected_edge_mirrored(self):
        """Undirected edges appear in both adjacency lists."""
        graph = Graph()
        graph.add_edge(1, 2)
        assert graph.contains_edge(1, 2)
        assert graph.contains_edge(2, 1)

    def test_weights_recorded_both_ways_when_undirected(self):
        """Undirected weighted edges store the weight in both directions."""
        graph = Graph(weighted=True)
        graph.add_edge(1, 2, 2.5)
        assert graph.edge_weights == {(1, 2): 2.5, (2, 1): 2.5}

    def test_weights_not_recorded_when_unweighted(self):
        """Unweighted graphs keep no weight map and report 1.0."""
        graph = Graph()
        graph.add_edge(1, 2, 7.0)
        assert graph.edge_weights == {}
        assert graph.edge_weight(1, 2) == 1.0

    def test_missing_weight_is_infinite(self):
        """Weighted graphs report infinity for a pair with no edge."""
        graph = create_graph([(1, 2, 3.0)], directed=True, weighted=True)
        assert graph.edge_weight(2, 1) == math.inf

    def test_parallel_edges_kept(self):
        """Adding the same edge twice stores two entries."""
        graph = Graph(directed=True)
        graph.add_edge(1, 2)
        graph.add_edge(1, 2)
        assert graph.neighbors(1) == [2, 2]
        assert graph.edge_count() == 2


class TestRemoveVertex:
    """Tests for removing vertices."""

    def test_remove_vertex(self):
        """Removed vertex disappears from every adjacency list."""
        graph = create_graph([(1, 2), (2, 3), (3, 1)], directed=True)
        graph.remove_vertex(2)
        assert not graph.contains_vertex(2)
        assert all(2 not in graph.neighbors(v) for v in graph.vertices())

    def test_remove_vertex_drops_parallel_references(self):
        """Every occurrence is removed, not only the first."""
        graph = Graph(directed=True)
        graph.add_edge(1, 2)
        graph.add_edge(1, 2)
        graph.remove_vertex(2)
        assert graph.neighbors(1) == []

    def test_remove_vertex_purges_weights(self):
        """Weights touching the vertex are dropped."""
        graph = create_graph(
            [(1, 2, 1.0), (2, 3, 2.0), (1, 3, 4.0)], weighted=True
        )
        graph.remove_vertex(2)
        assert graph.edge_weights == {(1, 3): 4.0, (3, 1): 4.0}

    def test_remove_absent_vertex(self):
        """Removing an absent vertex is a no-op."""
        graph = create_graph([(1, 2)])
        graph.remove_vertex(99)
        assert graph.vertices() == [1, 2]


class TestRemoveEdge:
    """Tests for removing edges."""

    def test_remove_undirected_edge(self):
        """Both directions go when an undirected edge is removed."""
        graph = create_graph([(1, 2)], weighted=True)
        graph.remove_edge(2, 1)
        assert not graph.contains_edge(1, 2)
        assert not graph.contains_edge(2, 1)
        assert graph.edge_weights == {}

    def test_remove_directed_edge_keeps_reverse(self):
        """Removing u -> v leaves v -> u in a directed graph."""
        graph = create_graph([(1, 2), (2, 1)], directed=True)
        graph.remove_edge(1, 2)
        assert not graph.contains_edge(1, 2)
        assert graph.contains_edge(2, 1)

    def test_remove_one_parallel_edge(self):
        """Only the first occurrence goes; the weight stays for the survivor."""
        graph = Graph(directed=True, weighted=True)
        graph.add_edge(1, 2, 5.0)
        graph.add_edge(1, 2, 5.0)
        graph.remove_edge(1, 2)
        assert graph.neighbors(1) == [2]
        assert graph.edge_weight(1, 2) == 5.0

    def test_remove_absent_edge(self):
        """Removing an edge that does not exist changes nothing."""
        graph = create_graph([(1, 2)], directed=True)
        graph.remove_edge(2, 1)
        graph.remove_edge(7, 8)
        assert graph.neighbors(1) == [2]


class TestQueries:
    """Tests for counts, degree and density."""

    def test_edge_count_undirected_halved(self):
        graph = create_graph([(1, 2), (2, 3)])
        assert graph.edge_count() == 2

    def test_edge_count_directed(self):
        graph = create_graph([(1, 2), (2, 1)], directed=True)
        assert graph.edge_count() == 2

    def test_degree(self):
        graph = create_graph([(1, 2), (1, 3)])
        assert graph.degree(1) == 2
        assert graph.degree(2) == 1
        assert graph.degree(42) == 0

    def test_density_complete_undirected(self):
        """Triangle is fully dense."""
        graph = create_graph([(1, 2), (2, 3), (3, 1)])
        assert graph.density() == 1.0

    def test_density_directed(self):
        """Three directed edges out of six possible."""
        graph = create_graph([(1, 2), (2, 3), (3, 1)], directed=True)
        assert graph.density() == 0.5

    def test_density_small_graphs(self):
        """Empty and single-vertex graphs have zero density."""
        graph = Graph()
        assert graph.density() == 0.0
        graph.add_vertex(1)
        assert graph.density() == 0.0

    def test_statistics(self):
        graph = create_graph([(1, 2), (2, 3)])
        assert graph.statistics() == GraphStatistics(3, 2, 2 / 3)

    def test_neighbors_is_a_copy(self):
        """Mutating the returned list leaves the graph intact."""
        graph = create_graph([(1, 2)])
        graph.neighbors(1).append(99)
        assert graph.neighbors(1) == [2]

    def test_is_empty_and_clear(self):
        graph = create_graph([(1, 2)], weighted=True)
        assert not graph.is_empty()
        graph.clear()
        assert graph.is_empty()
        assert graph.edge_weights == {}


class TestEdges:
    """Tests for edge listing."""

    def test_undirected_edges_listed_once(self):
        graph = create_graph([(2, 1, 3.0), (2, 3, 1.5)], weighted=True)
        assert graph.edges() == [(2, 3, 1.5), (1, 2, 3.0)]

    def test_directed_edges_keep_direction(self):
        graph = create_graph([(2, 1), (1, 3)], directed=True)
        assert graph.edges() == [(2, 1, 1.0), (1, 3, 1.0)]

    def test_undirected_self_loop_listed_once(self):
        graph = create_graph([(1, 1)])
        assert graph.edges() == [(1, 1, 1.0)]
        assert graph.edge_count() == 1


class TestRebuilt:
    """Tests for switching graph modes."""

    def test_rebuilt_to_directed(self):
        """An undirected graph rebuilt as directed keeps one direction per edge."""
        graph = create_graph([(1, 2), (2, 3)])
        directed = graph.rebuilt(directed=True)
        assert directed.directed is True
        assert directed.contains_edge(1, 2)
        assert not directed.contains_edge(2, 1)

    def test_rebuilt_keeps_isolated_vertices(self):
        graph = create_graph([(1, 2)], vertices=[7])
        assert set(graph.rebuilt(weighted=True).vertices()) == {1, 2, 7}

    def test_rebuilt_leaves_original(self):
        graph = create_graph([(1, 2)])
        graph.rebuilt(directed=True)
        assert graph.directed is False
        assert graph.contains_edge(2, 1)


class TestCreateGraphFunction:
    """Tests for the create_graph convenience function."""

    def test_create_graph_simple(self):
        graph = create_graph([(1, 2), (2, 3)], directed=True)
        assert graph.vertices() == [1, 2, 3]
        assert graph.edge_count() == 2

    def test_create_graph_with_weights(self):
        graph = create_graph([(1, 2, 4.0)], directed=True, weighted=True)
        assert graph.edge_weight(1, 2) == 4.0

    def test_create_graph_empty(self):
        graph = create_graph([])
        assert graph.vertex_count() == 0
        assert graph.edge_count() == 0

    def test_str_lists_weights(self):
        graph = create_graph([(1, 2, 4.0)], directed=True, weighted=True)
        text = str(graph)
        assert text.startswith("Graph (Directed, Weighted):")
        assert "1-2 -> 4.0" in text
