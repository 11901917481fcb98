"""
Step tracing for graph algorithms.

This module provides data structures for capturing a step-by-step record of
an algorithm run. The presentation layer replays the steps to animate a
traversal or a shortest-path search one vertex or edge at a time.

This is primarily useful for:
1. Animating algorithms (which vertex is visited, which edge is relaxed)
2. Teaching (showing the distance table after every step of Dijkstra)
3. Writing targeted tests (verifying specific algorithm decisions)

Usage:
    >>> trace = AlgorithmTrace(algorithm="BFS")
    >>> order = bfs(graph, 1, trace=trace)
    >>> print(trace.summary())
    >>> trace.dump_to_file("bfs_trace.txt")

Actions recorded by the algorithms:
- visit: a vertex is appended to a traversal order
- discover: a vertex is queued or pushed for the first time
- settle: Dijkstra/A* finalises a vertex's distance
- relax: a shorter distance to a vertex was found through an edge
- backtrack: a path search leaves a vertex
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class TraceStep:
    """
    Record of a single algorithm step.

    Attributes:
        index: Position of the step in the trace (0-based)
        action: What happened (e.g., "visit", "relax", "settle")
        vertex: The vertex the step is about
        source: The vertex the step came from, when the step follows an edge
        data: Extra values at this step (e.g., {"distance": 7.0})
    """

    index: int
    action: str
    vertex: int
    source: Optional[int] = None
    data: Dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        edge = f"{self.source} -> {self.vertex}" if self.source is not None else (
            f"{self.vertex}"
        )
        extra = ""
        if self.data:
            extra = " " + ", ".join(f"{k}={v}" for k, v in self.data.items())
        return f"#{self.index} {self.action}: {edge}{extra}"


@dataclass
class AlgorithmTrace:
    """
    Complete trace of an algorithm run.

    Attributes:
        algorithm: Name of the traced algorithm
        steps: All recorded steps in order
    """

    algorithm: str = ""
    steps: List[TraceStep] = field(default_factory=list)

    def record(
        self,
        action: str,
        vertex: int,
        source: Optional[int] = None,
        **data: Any,
    ) -> None:
        """
        Record one step.

        Args:
            action: What happened
            vertex: The vertex the step is about
            source: The vertex the step came from, if any
            **data: Extra values to keep with the step
        """
        self.steps.append(TraceStep(len(self.steps), action, vertex, source, data))

    def get_steps(self, action: str) -> List[TraceStep]:
        """Get all steps with a specific action."""
        return [step for step in self.steps if step.action == action]

    def get_steps_for(self, vertex: int) -> List[TraceStep]:
        """Get all steps about a specific vertex."""
        return [step for step in self.steps if step.vertex == vertex]

    def visited_order(self) -> List[int]:
        """Vertices in the order they were visited or settled."""
        return [
            step.vertex for step in self.steps if step.action in ("visit", "settle")
        ]

    def summary(self) -> str:
        """
        Generate a human-readable summary of the trace.

        Returns a string with the algorithm name, the step count and the
        number of steps per action.
        """
        lines = [
            "=" * 60,
            "ALGORITHM TRACE SUMMARY",
            "=" * 60,
            "",
            f"Algorithm: {self.algorithm}",
            f"Total steps: {len(self.steps)}",
            "",
        ]

        action_counts: Dict[str, int] = {}
        for step in self.steps:
            action_counts[step.action] = action_counts.get(step.action, 0) + 1

        lines.append("Steps by action:")
        for action, count in sorted(action_counts.items(), key=lambda x: -x[1]):
            lines.append(f"  {action}: {count}")

        return "\n".join(lines)

    def dump(self) -> str:
        """Generate the summary followed by every step."""
        lines = [self.summary(), "", "STEPS:", "-" * 40]
        lines.extend(str(step) for step in self.steps)
        return "\n".join(lines)

    def dump_to_file(self, filename: str) -> None:
        """Write the complete trace dump to a file."""
        with open(filename, "w", encoding="utf-8") as f:
            f.write(self.dump())
