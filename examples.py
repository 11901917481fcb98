#!/usr/bin/env python3
"""
Examples of using the graph engine.

Run this file to print example algorithm runs and an undo/redo session.
"""

import logging

from algograph import (
    AlgorithmTrace,
    CycleDetected,
    GraphEditor,
    connected_components,
    create_graph,
    find_all_paths,
    has_cycle,
    save_snapshot,
)


def example_dijkstra():
    """Weighted shortest path: 1 -> 2 -> 3 beats the direct 1 -> 3 edge"""
    print("Example 1: Dijkstra")

    editor = GraphEditor(directed=True, weighted=True)
    for vertex in (1, 2, 3):
        editor.add_vertex(vertex)
    editor.add_edge(1, 2, 4)
    editor.add_edge(2, 3, 3)
    editor.add_edge(1, 3, 10)

    trace = AlgorithmTrace()
    outcome = editor.run("DIJKSTRA", 1, 3, trace=trace)
    print(f"  Path: {outcome.order}, distance: {outcome.distance}")
    print(trace.summary())
    print()


def example_topological_sort():
    """Course prerequisites as a DAG, then a cycle"""
    print("Example 2: Topological Sort")

    editor = GraphEditor(directed=True)
    for vertex in (101, 102, 201, 202, 301):
        editor.add_vertex(vertex)
    for source, destination in [(101, 201), (102, 201), (201, 301), (202, 301)]:
        editor.add_edge(source, destination)
    print(f"  Order: {editor.run('TOPOLOGICAL_SORT').order}")

    editor.add_edge(301, 101)
    try:
        editor.run("TOPOLOGICAL_SORT")
    except CycleDetected as e:
        print(f"  After adding 301 -> 101: {e}")
    print()


def example_structure():
    """Components, cycles and all simple paths"""
    print("Example 3: Structure")

    graph = create_graph([(1, 2), (2, 3), (3, 1), (4, 5)])
    print(f"  Components: {connected_components(graph)}")
    print(f"  Has cycle: {has_cycle(graph)}")
    print(f"  Paths 1 -> 3: {find_all_paths(graph, 1, 3)}")
    print()


def example_undo_redo():
    """Edit, undo, redo and save"""
    print("Example 4: Undo / Redo")

    editor = GraphEditor(weighted=True)
    editor.generate_random(seed=7)
    print(f"  Random graph: {editor.statistics()}")

    editor.remove_vertex(1)
    print(f"  After removing 1: {editor.statistics()}")

    editor.undo()
    print(f"  After undo: {editor.statistics()}")

    editor.redo()
    print(f"  After redo: {editor.statistics()}")
    print(f"  Undo history: {editor.history.undo_labels()}")

    save_snapshot(editor.snapshot("EXAMPLE"), "example_graph.json")
    print("  Saved: example_graph.json\n")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(name)s: %(message)s")

    print("=" * 60)
    print("algograph examples")
    print("=" * 60 + "\n")

    example_dijkstra()
    example_topological_sort()
    example_structure()
    example_undo_redo()
