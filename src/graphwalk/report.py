"""Run every graph query once and format the results.

analyze() runs the three algorithms in a fixed order -- search, then
closure, then cycle detection -- and collects what they return into a
GraphReport.  format_report() turns that into the labelled text blocks
the CLI prints.
"""
from __future__ import annotations

from dataclasses import dataclass, field

from graphwalk.graph.adjacency import Graph
from graphwalk.graph.closure import transitive_closure
from graphwalk.graph.cycle_detector import detect_cycle, has_cycle
from graphwalk.graph.search import depth_first_search
from graphwalk.graph.vertex import Vertex


@dataclass(slots=True)
class GraphReport:
    """Everything one analysis run produces."""
    discovered: list[Vertex] = field(default_factory=list)
    path: list[Vertex] = field(default_factory=list)
    new_edges: list[tuple[int, int]] = field(default_factory=list)
    has_cycle: bool = False


def analyze(
    graph: Graph,
    src: int,
    dest: int,
    *,
    sync_closure: bool = True,
    fast_cycle: bool = False,
) -> GraphReport:
    """Search src -> dest, close the graph, then look for a cycle.

    The closure changes the graph in place.  Closing a graph never
    creates or removes a cycle, so running it before cycle detection
    does not change the verdict.
    """
    graph.reset_colors()
    found = depth_first_search(graph, src, dest)
    new_edges = transitive_closure(graph, sync_adjacency=sync_closure)
    if fast_cycle:
        cyclic = detect_cycle(graph).has_cycle
    else:
        cyclic = has_cycle(graph)
    return GraphReport(
        discovered=found.discovered,
        path=found.path,
        new_edges=new_edges,
        has_cycle=cyclic,
    )


def _ids(vertices: list[Vertex]) -> list[int]:
    return [v.id for v in vertices]


def format_report(report: GraphReport) -> str:
    """Format a GraphReport as the labelled text blocks shown to users."""
    lines: list[str] = []

    if report.path:
        disc = _ids(report.discovered)
        path = _ids(report.path)
        lines.append(
            f"[DFS Discovered Vertices: {disc[0]}, {disc[-1]}] "
            + ", ".join(f"Vertex {v}" for v in disc)
        )
        lines.append("")
        lines.append(
            f"[DFS Path: {path[0]}, {path[-1]}] "
            + " -> ".join(f"Vertex {v}" for v in path)
        )
    else:
        lines.append("[DFS Not Found]")

    for i, (row, col) in enumerate(report.new_edges):
        if i == 0:
            lines.append("")
            lines.append(f"[TC: New Edges] {row} \t {col}")
        else:
            # right-align under the first row's source column
            lines.append(f"{row:17d} \t {col}")

    lines.append("")
    if report.has_cycle:
        lines.append("[Cycle]: Cycle detected")
    else:
        lines.append("[Cycle]: No Cycle detected")
    return "\n".join(lines)
