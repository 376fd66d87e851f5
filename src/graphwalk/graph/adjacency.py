"""Directed graph over a dense integer ID space.

The graph keeps three views of the same vertex set:

  vertices   -- list[Vertex], index is the vertex ID
  adjacency  -- list[list[int]], successor IDs in edge-stream order
  matrix     -- list[list[bool]], matrix[u][v] is True iff u -> v exists

Adjacency entries are indices into ``vertices`` rather than references
to the Vertex objects, so the vertex list stays the single owner of
traversal state.  Parallel edges show up twice in the adjacency list
but only once in the matrix.

IDs come straight from the input: the integers in the edge stream are
used as list indices with no remapping, so they must cover exactly
0..N-1.
"""
from __future__ import annotations

import re
from typing import Iterable, Iterator, Sequence

from graphwalk.graph.vertex import Color, Vertex

# optional sign and ASCII digits, nothing else
_INT_TOKEN = re.compile(r"[+-]?[0-9]+")


class InvalidInputError(ValueError):
    """Raised when an edge-token stream cannot be turned into a graph."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Invalid input: {reason}")


class VertexNotFoundError(LookupError):
    """Raised when a requested vertex ID is not part of the graph."""

    def __init__(self, missing: list[int]) -> None:
        self.missing = missing
        ids = ", ".join(str(v) for v in missing)
        super().__init__(f"Vertex {ids} not found in graph")


def _parse_tokens(tokens: Sequence[str]) -> list[tuple[int, int]]:
    if len(tokens) % 2 != 0:
        raise InvalidInputError(
            f"dangling vertex: {len(tokens)} tokens cannot form "
            f"(source, destination) pairs"
        )
    ids: list[int] = []
    for tok in tokens:
        if not isinstance(tok, str) or _INT_TOKEN.fullmatch(tok) is None:
            raise InvalidInputError(f"vertex {tok!r} is not an integer")
        ids.append(int(tok))
    return list(zip(ids[0::2], ids[1::2]))


def _check_dense(ids: set[int]) -> None:
    negative = sorted(v for v in ids if v < 0)
    if negative:
        raise InvalidInputError(f"negative vertex ID {negative[0]}")
    if ids and max(ids) != len(ids) - 1:
        # n non-negative IDs with max > n-1 leave a hole below n
        gap = next(i for i in range(len(ids)) if i not in ids)
        raise InvalidInputError(
            f"vertex IDs must cover 0..{max(ids)} without gaps "
            f"(missing {gap})"
        )


class Graph:
    """Directed graph with an adjacency list and an adjacency matrix.

    Build one with Graph.build(tokens) or Graph.from_edges(pairs).  The
    vertex count is fixed once the graph exists; edges can be added
    later with add_edge(), which keeps the list and matrix in step.
    """

    __slots__ = ("_vertices", "_adj", "_matrix")

    def __init__(self, vertex_count: int = 0) -> None:
        self._vertices: list[Vertex] = [Vertex(i) for i in range(vertex_count)]
        self._adj: list[list[int]] = [[] for _ in range(vertex_count)]
        self._matrix: list[list[bool]] = [
            [False] * vertex_count for _ in range(vertex_count)
        ]

    # ---- construction ----------------------------------------------------

    @classmethod
    def build(cls, tokens: Sequence[str]) -> Graph:
        """Build a graph from alternating (source, destination) tokens.

        Raises InvalidInputError if a token is not an integer, if the
        token count is odd, or if the IDs are negative or leave gaps
        in 0..N-1.
        """
        return cls.from_edges(_parse_tokens(tokens))

    @classmethod
    def from_edges(cls, edges: Iterable[tuple[int, int]]) -> Graph:
        """Build a graph from (source, destination) integer pairs."""
        pairs = list(edges)
        ids = {v for pair in pairs for v in pair}
        _check_dense(ids)

        g = cls(len(ids))
        for src, dst in pairs:
            g._adj[src].append(dst)
        for row, succs in enumerate(g._adj):
            for col in succs:
                g._matrix[row][col] = True
        return g

    # ---- mutation --------------------------------------------------------

    def add_edge(self, src: int, dst: int) -> None:
        """Add a directed edge src -> dst to both the list and the matrix."""
        self._require(src, dst)
        self._adj[src].append(dst)
        self._matrix[src][dst] = True

    def reset_colors(self) -> None:
        """Mark every vertex UNVISITED.

        Required between independent traversals; search functions
        leave their colors behind.
        """
        for v in self._vertices:
            v.reset()

    # ---- queries ---------------------------------------------------------

    def find_vertices_by_id(self, src: int, dest: int) -> tuple[int, int]:
        """Validate a (source, destination) query pair.

        Raises VertexNotFoundError naming every ID that is absent.
        """
        self._require(src, dest)
        return src, dest

    def vertex(self, vid: int) -> Vertex:
        self._require(vid)
        return self._vertices[vid]

    def successors(self, vid: int) -> list[int]:
        """Successor IDs of *vid* in insertion order, duplicates included."""
        self._require(vid)
        return list(self._adj[vid])

    def has_vertex(self, vid: int) -> bool:
        return 0 <= vid < len(self._vertices)

    def has_edge(self, src: int, dst: int) -> bool:
        return (
            self.has_vertex(src)
            and self.has_vertex(dst)
            and self._matrix[src][dst]
        )

    def is_clean(self) -> bool:
        """True if no vertex carries traversal state."""
        return all(v.color is Color.UNVISITED for v in self._vertices)

    def edges(self) -> Iterator[tuple[int, int]]:
        """Edges from the adjacency list, parallel edges repeated."""
        for src, succs in enumerate(self._adj):
            for dst in succs:
                yield src, dst

    @property
    def vertices(self) -> list[Vertex]:
        return self._vertices

    @property
    def adjacency(self) -> list[list[int]]:
        return self._adj

    @property
    def matrix(self) -> list[list[bool]]:
        return self._matrix

    @property
    def vertex_count(self) -> int:
        return len(self._vertices)

    @property
    def edge_count(self) -> int:
        return sum(len(succs) for succs in self._adj)

    def _require(self, *ids: int) -> None:
        missing = [v for v in dict.fromkeys(ids) if not self.has_vertex(v)]
        if missing:
            raise VertexNotFoundError(missing)

    # ---- dunder ----------------------------------------------------------

    def __contains__(self, vid: object) -> bool:
        return isinstance(vid, int) and self.has_vertex(vid)

    def __len__(self) -> int:
        return self.vertex_count

    def __repr__(self) -> str:
        return f"Graph(vertices={self.vertex_count}, edges={self.edge_count})"
