"""Modularity: partition quality against a configuration-model null.

For a partition into communities ``c`` of a graph with total edge weight
``m``::

    Q = sum_c L_c / m - resolution * sum_c (out_c * in_c) / m**2

where ``L_c`` is the weight of edges inside ``c`` and ``out_c``/``in_c`` the
weight of edges leaving/entering it.  In an undirected graph every edge
leaves both endpoints' communities, so ``out_c`` is the community degree,
which sums to ``2m``; the null term then becomes ``sum_c out_c**2 / 4``.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from modscore.community.partition import Partition
from modscore.community.utils import DEFAULT_RESOLUTION
from modscore.graph import as_modularity_graph

if TYPE_CHECKING:
    from collections.abc import Hashable, Iterable

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class PartitionEdgeWeights:
    """Per-community edge weight sums, indexed by community id.

    ``incoming`` is ``None`` for undirected graphs, where ``outgoing``
    already counts each edge at both endpoints.
    """

    internal: tuple[float, ...]
    outgoing: tuple[float, ...]
    incoming: tuple[float, ...] | None = None

    @property
    def directed(self) -> bool:
        return self.incoming is not None


def partition_edge_weights_result(
    internal: list[float],
    outgoing: list[float],
    incoming: list[float] | None = None,
) -> PartitionEdgeWeights:
    """Convenience factory: converts mutable inputs to immutable result."""
    return PartitionEdgeWeights(
        internal=tuple(internal),
        outgoing=tuple(outgoing),
        incoming=tuple(incoming) if incoming is not None else None,
    )


def partition_edge_weights(partition: Partition) -> PartitionEdgeWeights:
    """Sum edge weights per community in a single pass over the edges."""
    graph = partition.graph
    k = partition.n_subsets
    internal = [0.0] * k
    outgoing = [0.0] * k
    incoming: list[float] | None = [0.0] * k if graph.is_directed() else None

    n_edges = 0
    for source, target, weight in graph.edges():
        c_a = partition.get_subset_id(source)
        c_b = partition.get_subset_id(target)
        w = float(weight)
        if c_a == c_b:
            internal[c_a] += w
        outgoing[c_a] += w
        if incoming is not None:
            incoming[c_b] += w
        else:
            outgoing[c_b] += w
        n_edges += 1

    logger.debug("Aggregated %d edges over %d communities", n_edges, k)
    return partition_edge_weights_result(internal, outgoing, incoming)


def score(
    weights: PartitionEdgeWeights, m: float, resolution: float = DEFAULT_RESOLUTION
) -> float:
    """Reduce per-community sums and total weight *m* to the modularity value.

    Returns NaN when *m* is zero: with no edges every sum is zero and the
    quotient is undefined.
    """
    if m == 0:
        logger.warning("Total edge weight is zero; modularity is undefined")
        return math.nan

    sigma_internal = math.fsum(weights.internal)
    if weights.incoming is not None:
        sigma_total_squared = math.fsum(
            out_c * in_c for out_c, in_c in zip(weights.outgoing, weights.incoming, strict=True)
        )
    else:
        sigma_total_squared = math.fsum(out_c * out_c for out_c in weights.outgoing) / 4.0

    return sigma_internal / m - resolution * sigma_total_squared / (m * m)


def modularity(
    graph: Any,
    communities: Iterable[Iterable[Hashable]],
    resolution: float = DEFAULT_RESOLUTION,
) -> float:
    """Modularity of *communities* as a partition of *graph*.

    *graph* may be any ``ModularityGraph`` or a raw rustworkx/NetworkX graph.
    Raises ``NotAPartitionError`` if *communities* is not a partition of the
    graph's nodes.

    Example::

        >>> from modscore import RustworkxGraph
        >>> g = RustworkxGraph()
        >>> g.add_edge("a", "b")
        >>> g.add_edge("c", "d")
        >>> modularity(g, [{"a", "b"}, {"c", "d"}])
        0.5
    """
    partition = Partition(as_modularity_graph(graph), communities)
    return partition.modularity(resolution)
