"""Community quality metrics over ModularityGraph partitions."""

from modscore.community.metrics import (
    DEFAULT_RESOLUTION,
    PartitionEdgeWeights,
    modularity,
    partition_edge_weights,
    score,
)
from modscore.community.partition import Partition
from modscore.community.utils import total_edge_weight

__all__ = [
    "DEFAULT_RESOLUTION",
    "Partition",
    "PartitionEdgeWeights",
    "modularity",
    "partition_edge_weights",
    "score",
    "total_edge_weight",
]
