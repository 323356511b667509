"""Partition: a validated assignment of every graph node to one community."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from modscore.community.utils import DEFAULT_RESOLUTION
from modscore.exceptions import NotAPartitionError

if TYPE_CHECKING:
    from collections.abc import Hashable, Iterable, Mapping

    from modscore.community.metrics import PartitionEdgeWeights
    from modscore.graph.protocols import ModularityGraph

logger = logging.getLogger(__name__)


class Partition:
    """Disjoint cover of a graph's nodes by ``n_subsets`` communities.

    Community ``i`` is the ``i``-th set passed to the constructor.  The
    assignment is stored densely: ``node_to_subset[graph.to_index(node)]``
    is the community of ``node``.  Construction either fully succeeds or
    raises ``NotAPartitionError``; instances are immutable afterwards.

    The graph is borrowed, not copied, and must not change while the
    partition is in use.
    """

    __slots__ = ("_graph", "_n_subsets", "_node_to_subset")

    def __init__(self, graph: ModularityGraph, subsets: Iterable[Iterable[Hashable]]) -> None:
        node_count = graph.node_count
        seen = [False] * node_count
        node_to_subset = [0] * node_count
        n_subsets = 0

        for ii, subset in enumerate(subsets):
            for node in subset:
                idx = graph.to_index(node)
                if seen[idx]:
                    msg = (
                        f"Node {node!r} appears in subset {node_to_subset[idx]} "
                        f"and again in subset {ii}"
                    )
                    raise NotAPartitionError(msg)
                node_to_subset[idx] = ii
                seen[idx] = True
            n_subsets = ii + 1

        missing = seen.count(False)
        if missing:
            msg = f"{missing} of {node_count} nodes are not assigned to any subset"
            raise NotAPartitionError(msg)

        self._graph = graph
        self._n_subsets = n_subsets
        self._node_to_subset = node_to_subset
        logger.debug("Built partition of %d nodes into %d subsets", node_count, self._n_subsets)

    @classmethod
    def from_membership(
        cls, graph: ModularityGraph, membership: Mapping[Hashable, Hashable]
    ) -> Partition:
        """Build a partition from a ``{node: community_label}`` mapping.

        Community indices follow the order in which labels are first met
        while walking ``graph.nodes()``.  Raises ``NotAPartitionError`` if any
        node has no label and ``KeyError`` for a key that is not a node of
        *graph*, the same as the constructor does for unknown nodes.
        """
        for node in membership:
            graph.to_index(node)

        label_to_subset: dict[Hashable, int] = {}
        subsets: list[set[Hashable]] = []
        for node in graph.nodes():
            try:
                label = membership[node]
            except KeyError:
                msg = f"Node {node!r} has no community label"
                raise NotAPartitionError(msg) from None
            if label not in label_to_subset:
                label_to_subset[label] = len(subsets)
                subsets.append(set())
            subsets[label_to_subset[label]].add(node)
        return cls(graph, subsets)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def graph(self) -> ModularityGraph:
        """The graph this partition was validated against."""
        return self._graph

    @property
    def n_subsets(self) -> int:
        """Number of communities, including empty ones."""
        return self._n_subsets

    @property
    def node_to_subset(self) -> tuple[int, ...]:
        """Community index per dense node index."""
        return tuple(self._node_to_subset)

    def get_subset_id(self, node: Hashable) -> int:
        """Community index of *node*.  No validation beyond the graph's own lookup."""
        return self._node_to_subset[self._graph.to_index(node)]

    def subsets(self) -> list[set[Hashable]]:
        """Node sets per community, in community-index order."""
        result: list[set[Hashable]] = [set() for _ in range(self._n_subsets)]
        for node in self._graph.nodes():
            result[self.get_subset_id(node)].add(node)
        return result

    # ------------------------------------------------------------------
    # Scoring
    # ------------------------------------------------------------------

    def edge_weights(self) -> PartitionEdgeWeights:
        """Aggregate internal/outgoing/incoming edge weight per community."""
        from modscore.community.metrics import partition_edge_weights

        return partition_edge_weights(self)

    def modularity(self, resolution: float = DEFAULT_RESOLUTION) -> float:
        """Modularity of this partition.

        Higher *resolution* penalizes large communities more.  Returns NaN
        for a graph with zero total edge weight.
        """
        from modscore.community.metrics import score
        from modscore.community.utils import total_edge_weight

        return score(self.edge_weights(), total_edge_weight(self._graph), resolution)

    def __len__(self) -> int:
        return self._n_subsets

    def __repr__(self) -> str:
        return f"Partition(nodes={len(self._node_to_subset)}, subsets={self._n_subsets})"
