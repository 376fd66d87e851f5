"""Transitive closure over the adjacency matrix (Warshall's algorithm).

For each intermediate vertex k, every row that reaches k gains an edge
to every column k reaches.  The loops run k outermost, then row, then
col; the order decides which freshly added edges later iterations of
the same k can already see, so it also fixes the order in which new
edges are reported.  The final reachability relation does not depend
on it.

Edges that already exist are not reported, so a second run on the same
graph returns an empty list.
"""
from __future__ import annotations

from graphwalk.graph.adjacency import Graph


def transitive_closure(
    graph: Graph, *, sync_adjacency: bool = True
) -> list[tuple[int, int]]:
    """Close *graph* under reachability and return the edges added.

    With sync_adjacency=True (the default) every new edge is also
    appended to the adjacency list, so later traversals see it.  With
    sync_adjacency=False only the matrix changes and the adjacency
    list keeps the input edges.
    """
    m = graph.matrix
    n = graph.vertex_count
    new_edges: list[tuple[int, int]] = []

    for k in range(n):
        for row in range(n):
            if not m[row][k]:
                continue
            for col in range(n):
                if m[k][col] and not m[row][col]:
                    m[row][col] = True
                    new_edges.append((row, col))

    if sync_adjacency:
        for row, col in new_edges:
            graph.adjacency[row].append(col)
    return new_edges
