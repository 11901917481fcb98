"""Pytest configuration and shared fixtures for algograph tests."""

import pytest

from algograph import GraphEditor, create_graph


@pytest.fixture
def weighted_digraph():
    """Weighted directed triangle where the two-hop path is shortest."""
    return create_graph(
        [(1, 2, 4.0), (2, 3, 3.0), (1, 3, 10.0)], directed=True, weighted=True
    )


@pytest.fixture
def cyclic_digraph():
    """Directed cycle 1 -> 2 -> 3 -> 1."""
    return create_graph([(1, 2), (2, 3), (3, 1)], directed=True)


@pytest.fixture
def dag():
    """Diamond-shaped DAG with a tail."""
    return create_graph([(1, 2), (1, 3), (2, 4), (3, 4), (4, 5)], directed=True)


@pytest.fixture
def two_components():
    """Undirected graph with components {1, 2} and {3, 4}."""
    return create_graph([(1, 2), (3, 4)])


@pytest.fixture
def undirected_graph():
    """Undirected graph with a cycle 1-2-3 and a tail 3-4-5."""
    return create_graph([(1, 2), (2, 3), (3, 1), (3, 4), (4, 5)])


@pytest.fixture
def editor():
    """Editor holding an undirected, unweighted path 1 - 2 - 3."""
    editor = GraphEditor()
    for vertex in (1, 2, 3):
        editor.add_vertex(vertex)
    editor.add_edge(1, 2)
    editor.add_edge(2, 3)
    return editor


@pytest.fixture
def weighted_editor():
    """Editor holding the weighted directed triangle."""
    editor = GraphEditor(directed=True, weighted=True)
    for vertex in (1, 2, 3):
        editor.add_vertex(vertex)
    editor.add_edge(1, 2, 4)
    editor.add_edge(2, 3, 3)
    editor.add_edge(1, 3, 10)
    return editor
