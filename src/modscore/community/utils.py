"""Shared helpers for community quality metrics."""

from __future__ import annotations

from typing import TYPE_CHECKING

from modscore.graph.protocols import SupportsTotalWeight

if TYPE_CHECKING:
    from modscore.graph.protocols import ModularityGraph

DEFAULT_RESOLUTION = 1.0


def total_edge_weight(graph: ModularityGraph) -> float:
    """Sum of all edge weights, each edge counted once regardless of direction.

    Defers to ``graph.total_weight()`` when the graph supports it.
    """
    if isinstance(graph, SupportsTotalWeight):
        return float(graph.total_weight())
    return sum((float(weight) for _, _, weight in graph.edges()), 0.0)
