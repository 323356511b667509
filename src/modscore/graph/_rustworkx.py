"""RustworkxGraph: rustworkx-backed graph implementing ModularityGraph."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import rustworkx

from modscore.graph.types import WeightedEdge, default_weight

if TYPE_CHECKING:
    from collections.abc import Callable, Hashable


class RustworkxGraph:
    """Weighted graph keyed by arbitrary hashable node labels.

    Wraps a ``rustworkx.PyGraph`` (or ``PyDiGraph`` when *directed*) and keeps
    a label-to-index map so callers never see rustworkx indices.  rustworkx
    leaves holes in its index space after removals, so the dense indices
    handed to the scorer are computed separately and rebuilt lazily.

    Implements the ``ModularityGraph`` and ``SupportsTotalWeight`` protocols.
    """

    def __init__(
        self,
        *,
        directed: bool = False,
        multigraph: bool = False,
        weight_fn: Callable[[Any], float] = default_weight,
    ) -> None:
        self._directed = directed
        self._weight_fn = weight_fn
        if directed:
            self._graph: rustworkx.PyGraph | rustworkx.PyDiGraph = rustworkx.PyDiGraph(
                multigraph=multigraph
            )
        else:
            self._graph = rustworkx.PyGraph(multigraph=multigraph)
        self._key_to_idx: dict[Hashable, int] = {}
        self._idx_to_key: dict[int, Hashable] = {}
        self._dense: dict[int, int] | None = None

    @classmethod
    def from_rustworkx(
        cls,
        graph: rustworkx.PyGraph | rustworkx.PyDiGraph,
        *,
        weight_fn: Callable[[Any], float] = default_weight,
    ) -> RustworkxGraph:
        """Wrap an existing rustworkx graph.

        Node labels are the rustworkx node indices.  The wrapped graph is
        shared, not copied, so it must not be mutated while scoring.
        """
        wrapped = cls(directed=isinstance(graph, rustworkx.PyDiGraph), weight_fn=weight_fn)
        wrapped._graph = graph
        wrapped._key_to_idx = {idx: idx for idx in graph.node_indices()}
        wrapped._idx_to_key = dict(wrapped._key_to_idx)
        return wrapped

    # ------------------------------------------------------------------
    # Node operations
    # ------------------------------------------------------------------

    def add_node(self, key: Hashable, **attrs: Any) -> None:
        """Add or update a node.  Merges *attrs* if the node already exists."""
        if key in self._key_to_idx:
            existing = self._graph[self._key_to_idx[key]]
            if isinstance(existing, dict):
                existing.update(attrs)
            return
        idx = self._graph.add_node({"key": key, **attrs})
        self._key_to_idx[key] = idx
        self._idx_to_key[idx] = key
        self._dense = None

    def remove_node(self, key: Hashable) -> None:
        """Remove a node and all incident edges.  Raises ``KeyError`` if missing."""
        idx = self._require_node(key)
        self._graph.remove_node(idx)
        del self._key_to_idx[key]
        del self._idx_to_key[idx]
        self._dense = None

    def has_node(self, key: Hashable) -> bool:
        return key in self._key_to_idx

    def nodes(self) -> list[Hashable]:
        """Return all node labels in insertion order."""
        return [self._idx_to_key[idx] for idx in self._graph.node_indices()]

    # ------------------------------------------------------------------
    # Edge operations
    # ------------------------------------------------------------------

    def add_edge(
        self, source: Hashable, target: Hashable, weight: float = 1.0, **attrs: Any
    ) -> None:
        """Add an edge, auto-creating missing endpoints.

        On a simple graph a repeated ``(source, target)`` pair replaces the
        existing edge's data; on a multigraph it adds a parallel edge.
        """
        if not self.has_node(source):
            self.add_node(source)
        if not self.has_node(target):
            self.add_node(target)
        data = {"weight": weight, **attrs}
        self._graph.add_edge(self._key_to_idx[source], self._key_to_idx[target], data)

    def edges(self) -> list[WeightedEdge]:
        """Return all edges as ``(source, target, weight)`` records."""
        return [
            WeightedEdge(self._idx_to_key[src], self._idx_to_key[tgt], self._weight_fn(data))
            for src, tgt, data in self._graph.weighted_edge_list()
        ]

    # ------------------------------------------------------------------
    # Graph-level
    # ------------------------------------------------------------------

    @property
    def node_count(self) -> int:
        """Number of nodes in the graph."""
        return self._graph.num_nodes()

    @property
    def edge_count(self) -> int:
        """Number of edges in the graph."""
        return self._graph.num_edges()

    def is_directed(self) -> bool:
        return self._directed

    def to_index(self, node: Hashable) -> int:
        """Dense index of *node* in ``[0, node_count)``.  Raises ``KeyError``."""
        if self._dense is None:
            self._dense = {idx: pos for pos, idx in enumerate(self._graph.node_indices())}
        return self._dense[self._require_node(node)]

    def total_weight(self) -> float:
        """Sum of all edge weights, each edge counted once."""
        return sum((self._weight_fn(data) for data in self._graph.edges()), 0.0)

    def __repr__(self) -> str:
        kind = "directed" if self._directed else "undirected"
        return f"RustworkxGraph({kind}, nodes={self.node_count}, edges={self.edge_count})"

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _require_node(self, key: Hashable) -> int:
        """Return the rustworkx index for *key*, or raise ``KeyError``."""
        try:
            return self._key_to_idx[key]
        except KeyError:
            msg = f"Node not found: {key!r}"
            raise KeyError(msg) from None
