"""Graph layer: protocol-based read-only graph API consumed by the scorer."""

from __future__ import annotations

from typing import Any

import networkx as nx
import rustworkx

from modscore.graph._networkx import NetworkXGraph
from modscore.graph._rustworkx import RustworkxGraph
from modscore.graph.protocols import ModularityGraph, SupportsTotalWeight
from modscore.graph.types import WeightedEdge, default_weight


def as_modularity_graph(obj: Any) -> ModularityGraph:
    """Return *obj* as a ``ModularityGraph``, wrapping known graph types.

    Objects already satisfying the protocol are returned unchanged.
    ``rustworkx.PyGraph``/``PyDiGraph`` and ``networkx.Graph`` (and
    subclasses) are wrapped in their adapters.  Raises ``TypeError`` otherwise.
    """
    if isinstance(obj, ModularityGraph):
        return obj
    if isinstance(obj, (rustworkx.PyGraph, rustworkx.PyDiGraph)):
        return RustworkxGraph.from_rustworkx(obj)
    if isinstance(obj, nx.Graph):
        return NetworkXGraph(obj)
    msg = f"Cannot score a {type(obj).__name__!r}: it does not implement ModularityGraph"
    raise TypeError(msg)


__all__ = [
    "ModularityGraph",
    "NetworkXGraph",
    "RustworkxGraph",
    "SupportsTotalWeight",
    "WeightedEdge",
    "as_modularity_graph",
    "default_weight",
]
