"""Depth-first search between a source and a destination vertex.

The search uses an explicit stack instead of recursion and always
expands the lowest-numbered UNVISITED successor of the vertex on top
of the stack.  That tie-break is what makes the visiting order
reproducible: the same graph and the same query always give the same
``discovered`` and ``path`` lists.

  1.  Mark the source VISITING and push it.
  2.  Look at the top of the stack.  If it has an UNVISITED successor,
      take the smallest one, mark it VISITING, push it, and record it
      in both ``discovered`` and ``path``.  Stop if it is the target.
  3.  Otherwise mark the top DONE, pop it, and drop it from ``path``.
  4.  An empty stack means the target is unreachable.

``discovered`` keeps every vertex ever pushed, including the ones the
search later backed out of.  ``path`` mirrors the stack, so on success
it is the route from source to target.
"""
from __future__ import annotations

from dataclasses import dataclass, field

from graphwalk.graph.adjacency import Graph
from graphwalk.graph.vertex import Color, Vertex


class TraversalStateError(RuntimeError):
    """Raised when a traversal starts on a graph with leftover colors."""

    def __init__(self) -> None:
        super().__init__(
            "Graph still carries colors from a previous traversal; "
            "call reset_colors() first"
        )


@dataclass(slots=True)
class DFSResult:
    """Vertices discovered by a search and the path it found."""
    discovered: list[Vertex] = field(default_factory=list)
    path: list[Vertex] = field(default_factory=list)

    @property
    def found(self) -> bool:
        return bool(self.path)


def lowest_unvisited(graph: Graph, vid: int) -> Vertex | None:
    """Smallest-ID UNVISITED successor of *vid*, or None."""
    best: Vertex | None = None
    for succ in graph.adjacency[vid]:
        v = graph.vertices[succ]
        if v.color is Color.UNVISITED and (best is None or v.id < best.id):
            best = v
    return best


def depth_first_search(graph: Graph, src: int, dest: int) -> DFSResult:
    """Search from *src* until *dest* is reached or the stack runs dry.

    Raises VertexNotFoundError if either ID is not in the graph and
    TraversalStateError if the graph was not reset since the last
    traversal.  Leaves its colors on the graph.
    """
    graph.find_vertices_by_id(src, dest)
    if not graph.is_clean():
        raise TraversalStateError()

    start = graph.vertices[src]
    start.color = Color.VISITING
    stack: list[Vertex] = [start]
    result = DFSResult(discovered=[start], path=[start])
    if src == dest:
        return result

    while stack:
        nxt = lowest_unvisited(graph, stack[-1].id)
        if nxt is None:
            # dead end -> backtrack
            stack.pop().color = Color.DONE
            result.path.pop()
            continue
        nxt.color = Color.VISITING
        stack.append(nxt)
        result.discovered.append(nxt)
        result.path.append(nxt)
        if nxt.id == dest:
            return result

    result.path = []
    return result
