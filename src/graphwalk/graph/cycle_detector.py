"""Cycle detection in directed graphs.

Two implementations answer the same yes/no question:

has_cycle()
    Runs a fresh lowest-ID-first DFS from every vertex in turn,
    resetting all colors before each root.  While expanding the top of
    the stack it looks at every successor; a successor that is already
    VISITING sits on the current stack, so the edge to it closes a
    cycle.  This is O(V * (V + E)) -- one full traversal per root --
    and matches the visiting order of depth_first_search().

detect_cycle()
    The single-pass three-color version: one DFS forest over the whole
    graph, O(V + E).  It also reconstructs the cycle from the parent
    links so callers can see which vertices form the loop.
"""
from __future__ import annotations

from dataclasses import dataclass

from graphwalk.graph.adjacency import Graph
from graphwalk.graph.search import lowest_unvisited
from graphwalk.graph.vertex import Color, Vertex


@dataclass(slots=True)
class CycleResult:
    """Result of cycle detection."""
    has_cycle: bool
    cycle_path: list[int] | None = None


def has_cycle(graph: Graph) -> bool:
    """Return True if any root's traversal meets a VISITING successor.

    Resets colors before each root, so it does not need a clean graph
    to start with, but it leaves the last traversal's colors behind.
    """
    for root in graph.vertices:
        graph.reset_colors()
        root.color = Color.VISITING
        stack: list[Vertex] = [root]
        while stack:
            top = stack[-1].id
            for succ in graph.adjacency[top]:
                if graph.vertices[succ].color is Color.VISITING:
                    return True
            nxt = lowest_unvisited(graph, top)
            if nxt is None:
                stack.pop().color = Color.DONE
            else:
                nxt.color = Color.VISITING
                stack.append(nxt)
    return False


def detect_cycle(graph: Graph) -> CycleResult:
    """Detect a directed cycle in one pass and report it.

    The cycle path is a list [v0, v1, ..., vk, v0] where each
    consecutive pair is an edge.  Uses the vertex colors, so it resets
    them first and leaves them set afterwards.
    """
    graph.reset_colors()
    parent: dict[int, int | None] = {}

    for root in graph.vertices:
        if root.color is not Color.UNVISITED:
            continue
        root.color = Color.VISITING
        parent[root.id] = None
        # stack of (vertex id, index of next successor to look at)
        stack: list[tuple[int, int]] = [(root.id, 0)]
        while stack:
            node, idx = stack[-1]
            succs = graph.adjacency[node]
            if idx == len(succs):
                graph.vertices[node].color = Color.DONE
                stack.pop()
                continue
            stack[-1] = (node, idx + 1)
            succ = succs[idx]
            color = graph.vertices[succ].color
            if color is Color.VISITING:
                # back edge -> walk parents from node back to succ
                path = [succ, node]
                cur: int | None = node
                while cur != succ:
                    cur = parent[cur]  # type: ignore[index]
                    if cur is None:
                        break
                    path.append(cur)
                path.reverse()
                return CycleResult(has_cycle=True, cycle_path=path)
            if color is Color.UNVISITED:
                graph.vertices[succ].color = Color.VISITING
                parent[succ] = node
                stack.append((succ, 0))

    return CycleResult(has_cycle=False, cycle_path=None)
