"""Graph store and the search, cycle and closure algorithms over it."""

from graphwalk.graph.adjacency import Graph, InvalidInputError, VertexNotFoundError
from graphwalk.graph.closure import transitive_closure
from graphwalk.graph.cycle_detector import CycleResult, detect_cycle, has_cycle
from graphwalk.graph.search import DFSResult, TraversalStateError, depth_first_search
from graphwalk.graph.vertex import Color, Vertex

__all__ = [
    "Color",
    "CycleResult",
    "DFSResult",
    "Graph",
    "InvalidInputError",
    "TraversalStateError",
    "Vertex",
    "VertexNotFoundError",
    "depth_first_search",
    "detect_cycle",
    "has_cycle",
    "transitive_closure",
]
