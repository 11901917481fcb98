"""Unit tests for the presentation module."""

import math

import pytest

from algograph import EdgeAttributes, Presentation, VertexAttributes
from algograph.models import DEFAULT_CIRCLE_STYLE, DEFAULT_LABEL_STYLE, DEFAULT_LINE_STYLE
from algograph.presentation import WEIGHT_LABEL_STYLE, format_weight


class TestAttributes:
    """Tests for the attribute value types."""

    def test_vertex_defaults(self):
        vertex = VertexAttributes(id=1)
        assert vertex.circle_style == DEFAULT_CIRCLE_STYLE
        assert vertex.label_style == DEFAULT_LABEL_STYLE
        assert vertex.label_text == ""

    def test_vertex_none_falls_back(self):
        vertex = VertexAttributes(id=1, circle_style=None, label_text=None, label_style=None)
        assert vertex.circle_style == DEFAULT_CIRCLE_STYLE
        assert vertex.label_text == ""
        assert vertex.label_style == DEFAULT_LABEL_STYLE

    def test_edge_none_falls_back(self):
        edge = EdgeAttributes(source=1, destination=2, line_style=None)
        assert edge.line_style == DEFAULT_LINE_STYLE
        assert edge.weight_text is None

    def test_attributes_are_frozen(self):
        vertex = VertexAttributes(id=1)
        with pytest.raises(AttributeError):
            vertex.x = 5.0


class TestPresentation:
    """Tests for Presentation."""

    def test_add_vertex_default_positions(self):
        presentation = Presentation()
        first = presentation.add_vertex(1)
        second = presentation.add_vertex(2)
        assert (first.x, first.y) == (200.0, 200.0)
        assert (second.x, second.y) == (240.0, 225.0)
        assert first.label_text == "1"

    def test_add_vertex_explicit_position(self):
        presentation = Presentation()
        vertex = presentation.add_vertex(1, x=10.0, y=20.0, label_text="A")
        assert (vertex.x, vertex.y, vertex.label_text) == (10.0, 20.0, "A")

    def test_remove_vertex_drops_edges(self):
        presentation = Presentation()
        for vertex in (1, 2, 3):
            presentation.add_vertex(vertex)
        presentation.add_edge(1, 2)
        presentation.add_edge(2, 3)
        presentation.add_edge(1, 3)
        presentation.remove_vertex(2)
        assert list(presentation.vertices) == [1, 3]
        assert [(e.source, e.destination) for e in presentation.edges] == [(1, 3)]

    def test_weight_label(self):
        presentation = Presentation()
        edge = presentation.add_edge(1, 2, 4.0, show_weight=True)
        assert edge.weight_text == "4.0"
        assert edge.weight_style == WEIGHT_LABEL_STYLE

    def test_remove_edge_undirected_matches_reverse(self):
        presentation = Presentation()
        presentation.add_edge(1, 2)
        presentation.remove_edge(2, 1, directed=True)
        assert len(presentation.edges) == 1
        presentation.remove_edge(2, 1, directed=False)
        assert presentation.edges == []

    def test_find_edge(self):
        presentation = Presentation()
        presentation.add_edge(1, 2, 3.0)
        assert presentation.find_edge(1, 2).weight == 3.0
        assert presentation.find_edge(2, 1) is None

    def test_move_vertex_replaces_value(self):
        presentation = Presentation()
        before = presentation.add_vertex(1)
        presentation.move_vertex(1, 50.0, 60.0)
        assert presentation.positions() == {1: (50.0, 60.0)}
        assert (before.x, before.y) == (200.0, 200.0)

    def test_set_vertex_style(self):
        presentation = Presentation()
        presentation.add_vertex(1)
        presentation.set_vertex_style(1, circle_style="-fx-fill: red;")
        vertex = presentation.vertices[1]
        assert vertex.circle_style == "-fx-fill: red;"
        assert vertex.label_style == DEFAULT_LABEL_STYLE

    def test_set_weight_labels(self):
        presentation = Presentation()
        presentation.add_edge(1, 2, 2.5)
        presentation.set_weight_labels(True)
        assert presentation.edges[0].weight_text == "2.5"
        presentation.set_weight_labels(False)
        assert presentation.edges[0].weight_text is None
        assert presentation.edges[0].weight == 2.5

    def test_format_weight(self):
        assert format_weight(3) == "3.0"
        assert format_weight(2.26) == "2.3"

    def test_circular_layout(self):
        presentation = Presentation()
        for vertex in (1, 2, 3, 4):
            presentation.add_vertex(vertex)
        presentation.apply_circular_layout(800, 600, margin=100)

        positions = presentation.positions()
        for x, y in positions.values():
            assert math.isclose(math.hypot(x - 400, y - 300), 200, abs_tol=1e-3)
        assert math.isclose(positions[1][0], 600, abs_tol=1e-3)
        assert math.isclose(positions[1][1], 300, abs_tol=1e-3)

    def test_circular_layout_empty(self):
        presentation = Presentation()
        presentation.apply_circular_layout(800, 600)
        assert presentation.positions() == {}

    def test_clear(self):
        presentation = Presentation()
        presentation.add_vertex(1)
        presentation.add_edge(1, 1)
        presentation.clear()
        assert presentation.vertices == {}
        assert presentation.edges == []
