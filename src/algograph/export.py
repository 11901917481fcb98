"""
Persistence and interchange for graphs and snapshots.

This module handles getting graph state out of (and back into) the engine:
- JSON documents (.json) - vertex list, mode flags and edge list with weights
- networkx graphs - for analysis with the wider networkx ecosystem

The on-disk layout is deliberately simple; loading validates the document
and raises SnapshotError instead of building a partial graph.
"""

import json
from pathlib import Path
from typing import Any, Dict, Union

import networkx as nx

from .errors import SnapshotError
from .graph import Graph
from .models import EdgeAttributes, VertexAttributes
from .snapshot import Snapshot, restore_snapshot

FORMAT_VERSION = 1


def snapshot_to_dict(snapshot: Snapshot) -> Dict[str, Any]:
    """
    Convert a snapshot into a JSON-ready dictionary.

    Returns:
        {"version", "label", "directed", "weighted", "vertices": [...],
        "edges": [...]}
    """
    return {
        "version": FORMAT_VERSION,
        "label": snapshot.label,
        "directed": snapshot.directed,
        "weighted": snapshot.weighted,
        "vertices": [
            {
                "id": vertex.id,
                "x": vertex.x,
                "y": vertex.y,
                "circle_style": vertex.circle_style,
                "label_text": vertex.label_text,
                "label_style": vertex.label_style,
            }
            for vertex in snapshot.vertices
        ],
        "edges": [
            {
                "source": edge.source,
                "destination": edge.destination,
                "weight": edge.weight,
                "line_style": edge.line_style,
                "weight_text": edge.weight_text,
                "weight_style": edge.weight_style,
            }
            for edge in snapshot.edges
        ],
    }


def snapshot_from_dict(data: Dict[str, Any]) -> Snapshot:
    """
    Build a snapshot from a dictionary produced by ``snapshot_to_dict``.

    Only vertex ids and edge endpoints are required; positions, styles and
    weights fall back to defaults. Plain integers are accepted as vertices.

    Raises:
        SnapshotError: If the document is malformed
    """
    if not isinstance(data, dict):
        raise SnapshotError("Graph document must be a JSON object")

    try:
        vertices = tuple(_vertex_from_dict(item) for item in data.get("vertices", []))
        edges = tuple(_edge_from_dict(item) for item in data.get("edges", []))
    except (KeyError, TypeError, ValueError) as e:
        raise SnapshotError(f"Malformed graph document: {e}") from e

    snapshot = Snapshot(
        directed=_flag(data, "directed"),
        weighted=_flag(data, "weighted"),
        vertices=vertices,
        edges=edges,
        label=str(data.get("label", "")),
    )
    # Validates references and fills in statistics
    graph, _ = restore_snapshot(snapshot)
    return Snapshot(
        directed=snapshot.directed,
        weighted=snapshot.weighted,
        vertices=vertices,
        edges=edges,
        label=snapshot.label,
        statistics=graph.statistics(),
    )


def _flag(data: Dict[str, Any], name: str) -> bool:
    value = data.get(name, False)
    if not isinstance(value, bool):
        raise SnapshotError(f"Malformed graph document: {name} must be true or false")
    return value


def _vertex_from_dict(item: Any) -> VertexAttributes:
    if isinstance(item, int):
        return VertexAttributes(id=item, label_text=str(item))
    vertex = int(item["id"])
    return VertexAttributes(
        id=vertex,
        x=float(item.get("x", 0.0)),
        y=float(item.get("y", 0.0)),
        circle_style=item.get("circle_style"),
        label_text=item.get("label_text", str(vertex)),
        label_style=item.get("label_style"),
    )


def _edge_from_dict(item: Dict[str, Any]) -> EdgeAttributes:
    return EdgeAttributes(
        source=int(item["source"]),
        destination=int(item["destination"]),
        weight=float(item.get("weight", 1.0)),
        line_style=item.get("line_style"),
        weight_text=item.get("weight_text"),
        weight_style=item.get("weight_style"),
    )


def save_snapshot(snapshot: Snapshot, filename: Union[str, Path]) -> None:
    """Save a snapshot to a JSON file."""
    output_path = Path(filename)
    output_path.write_text(
        json.dumps(snapshot_to_dict(snapshot), indent=2), encoding="utf-8"
    )


def load_snapshot(filename: Union[str, Path]) -> Snapshot:
    """
    Load a snapshot from a JSON file.

    Raises:
        SnapshotError: If the file is not valid JSON or not a graph document
    """
    text = Path(filename).read_text(encoding="utf-8")
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise SnapshotError(f"{filename} is not valid JSON: {e}") from e
    return snapshot_from_dict(data)


def to_networkx(graph: Graph) -> nx.Graph:
    """
    Convert a Graph into the matching networkx graph.

    Directed graphs become DiGraph, undirected ones Graph; the multigraph
    variants are used when parallel edges exist. Every edge carries a
    ``weight`` attribute.
    """
    edges = graph.edges()
    pairs = [(s, d) if graph.directed else (min(s, d), max(s, d)) for s, d, _ in edges]
    multi = len(set(pairs)) != len(pairs)

    if graph.directed:
        result = nx.MultiDiGraph() if multi else nx.DiGraph()
    else:
        result = nx.MultiGraph() if multi else nx.Graph()

    result.add_nodes_from(graph.vertices())
    for source, destination, weight in edges:
        result.add_edge(source, destination, weight=weight)
    return result
