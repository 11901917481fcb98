"""Unit tests for path reconstruction."""

from algograph import create_graph, path_weight, reconstruct_path


class TestReconstructPath:
    """Tests for reconstruct_path."""

    def test_simple_chain(self):
        predecessors = {2: 1, 3: 2, 4: 3}
        assert reconstruct_path(predecessors, 1, 4) == [1, 2, 3, 4]

    def test_source_equals_destination(self):
        assert reconstruct_path({}, 7, 7) == [7]

    def test_unreached_destination(self):
        assert reconstruct_path({2: 1}, 1, 3) == []

    def test_chain_not_leading_to_source(self):
        """A chain ending at another root is not a path."""
        assert reconstruct_path({3: 2}, 1, 3) == []

    def test_source_mapped_to_none(self):
        """BFS-style maps may record the source with no predecessor."""
        predecessors = {1: None, 2: 1}
        assert reconstruct_path(predecessors, 1, 2) == [1, 2]

    def test_looping_chain(self):
        """A corrupt map that loops gives an empty path instead of hanging."""
        assert reconstruct_path({2: 3, 3: 2}, 1, 2) == []

    def test_zero_and_negative_ids(self):
        predecessors = {0: -1, 5: 0}
        assert reconstruct_path(predecessors, -1, 5) == [-1, 0, 5]


class TestPathWeight:
    """Tests for path_weight."""

    def test_weighted(self):
        graph = create_graph(
            [(1, 2, 4.0), (2, 3, 3.0)], directed=True, weighted=True
        )
        assert path_weight(graph, [1, 2, 3]) == 7.0

    def test_unweighted_counts_edges(self):
        graph = create_graph([(1, 2), (2, 3)])
        assert path_weight(graph, [3, 2, 1]) == 2.0

    def test_single_vertex(self):
        graph = create_graph([(1, 2)])
        assert path_weight(graph, [1]) == 0
