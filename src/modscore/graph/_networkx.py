"""NetworkXGraph: read-only ModularityGraph view over a NetworkX graph."""

from __future__ import annotations

from typing import TYPE_CHECKING

import networkx as nx

from modscore.graph.types import WeightedEdge

if TYPE_CHECKING:
    from collections.abc import Hashable


class NetworkXGraph:
    """Adapter exposing a ``networkx`` graph through ``ModularityGraph``.

    Works for ``Graph``, ``DiGraph`` and their multigraph variants.  Edge
    weights are read from the *weight* attribute, falling back to *default*.
    The wrapped graph may change between scoring calls: the dense index map
    is rebuilt whenever ``nodes()`` or ``node_count`` sees a different node
    set, or ``to_index`` meets a node it has not indexed yet.
    """

    def __init__(self, graph: nx.Graph, *, weight: str = "weight", default: float = 1.0) -> None:
        self._graph = graph
        self._weight = weight
        self._default = default
        self._index: dict[Hashable, int] = {}
        self._refresh_index()

    @property
    def graph(self) -> nx.Graph:
        """The wrapped NetworkX graph."""
        return self._graph

    def nodes(self) -> list[Hashable]:
        self._refresh_index()
        return list(self._graph.nodes)

    def edges(self) -> list[WeightedEdge]:
        """Return all edges as ``(source, target, weight)`` records."""
        return [
            WeightedEdge(u, v, float(w))
            for u, v, w in self._graph.edges(data=self._weight, default=self._default)
        ]

    @property
    def node_count(self) -> int:
        self._refresh_index()
        return self._graph.number_of_nodes()

    def to_index(self, node: Hashable) -> int:
        """Dense index of *node* in ``[0, node_count)``.  Raises ``KeyError``."""
        idx = self._index.get(node)
        if idx is None and node in self._graph:
            self._refresh_index(force=True)
            idx = self._index.get(node)
        if idx is None:
            msg = f"Node not found: {node!r}"
            raise KeyError(msg)
        return idx

    def is_directed(self) -> bool:
        return self._graph.is_directed()

    def total_weight(self) -> float:
        """Sum of all edge weights, each edge counted once."""
        return sum(
            (float(w) for _, _, w in self._graph.edges(data=self._weight, default=self._default)),
            0.0,
        )

    def __repr__(self) -> str:
        return f"NetworkXGraph({type(self._graph).__name__}, nodes={self.node_count})"

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _refresh_index(self, *, force: bool = False) -> None:
        """Rebuild the dense index map if the node set no longer matches it."""
        if (
            not force
            and len(self._index) == self._graph.number_of_nodes()
            and all(node in self._index for node in self._graph)
        ):
            return
        self._index = {node: pos for pos, node in enumerate(self._graph.nodes)}
