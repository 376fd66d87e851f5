"""Shared fixtures for graph tests."""
from __future__ import annotations

import random
from typing import Callable

import pytest

from graphwalk.graph.adjacency import Graph

Edges = list[tuple[int, int]]


def _tokens_for(edges: Edges) -> list[str]:
    """Flatten (src, dst) pairs into the token stream Graph.build reads."""
    return [str(v) for pair in edges for v in pair]


@pytest.fixture
def make_graph() -> Callable[[Edges], Graph]:
    """Factory: build a graph through the token parser from edge pairs."""
    def _make(edges: Edges) -> Graph:
        return Graph.build(_tokens_for(edges))
    return _make


@pytest.fixture
def make_dag() -> Callable[[random.Random, int, float], Graph]:
    """Factory: chain 0 -> ... -> n-1 plus random forward edges i -> j, i < j."""
    def _make(rng: random.Random, n: int, p: float) -> Graph:
        edges = [(i, i + 1) for i in range(n - 1)]
        for i in range(n):
            for j in range(i + 2, n):
                if rng.random() < p:
                    edges.append((i, j))
        return Graph.from_edges(edges)
    return _make


@pytest.fixture
def empty_graph() -> Graph:
    return Graph.build([])


@pytest.fixture
def chain_graph() -> Graph:
    """0 -> 1 -> 2"""
    return Graph.build(["0", "1", "1", "2"])


@pytest.fixture
def triangle_graph() -> Graph:
    """0 -> 1 -> 2 -> 0"""
    return Graph.build(_tokens_for([(0, 1), (1, 2), (2, 0)]))


@pytest.fixture
def branching_graph() -> Graph:
    """
    0 -> 3 -> 5
    0 -> 1 -> 4
    1 -> 2
    (successors of 0 listed out of ID order on purpose)
    """
    return Graph.build(_tokens_for([(0, 3), (0, 1), (1, 4), (1, 2), (3, 5)]))
