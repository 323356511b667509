"""Shared fixtures for modscore tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from modscore.graph import RustworkxGraph

if TYPE_CHECKING:
    from collections.abc import Callable


def _barbell(n: int) -> RustworkxGraph:
    """Two ``n``-cliques on nodes ``0..n-1`` and ``n..2n-1`` joined by one edge."""
    g = RustworkxGraph()
    for offset in (0, n):
        for i in range(n):
            for j in range(i + 1, n):
                g.add_edge(offset + i, offset + j)
    g.add_edge(n - 1, n)
    return g


def _two_cycles(n: int) -> RustworkxGraph:
    """Two directed ``n``-cycles joined by one edge in each direction."""
    g = RustworkxGraph(directed=True)
    for i in range(2 * n):
        g.add_node(i)
    for i in range(n):
        j = (i + 1) % n
        g.add_edge(i, j)
        g.add_edge(n + i, n + j)
    g.add_edge(0, n)
    g.add_edge(n + 1, 1)
    return g


@pytest.fixture
def barbell() -> Callable[[int], RustworkxGraph]:
    return _barbell


@pytest.fixture
def two_cycles() -> Callable[[int], RustworkxGraph]:
    return _two_cycles


@pytest.fixture
def square() -> RustworkxGraph:
    """Undirected 4-cycle a-b-c-d with unit weights."""
    g = RustworkxGraph()
    g.add_edge("a", "b")
    g.add_edge("b", "c")
    g.add_edge("c", "d")
    g.add_edge("d", "a")
    return g


@pytest.fixture
def weighted_digraph() -> RustworkxGraph:
    """Small directed graph with mixed weights and a self-loop."""
    g = RustworkxGraph(directed=True)
    g.add_edge("a", "b", 2.0)
    g.add_edge("b", "a", 0.5)
    g.add_edge("b", "c", 1.5)
    g.add_edge("c", "d", 3.0)
    g.add_edge("d", "d", 1.0)
    g.add_edge("d", "a", 0.25)
    return g
