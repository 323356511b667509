"""modscore: modularity scoring for graph partitions.

Validates a node-to-community assignment and scores it against any graph
that implements the small ``ModularityGraph`` protocol.
"""

__version__ = "0.1.0"

from modscore.community import (
    Partition,
    PartitionEdgeWeights,
    modularity,
    partition_edge_weights,
    total_edge_weight,
)
from modscore.exceptions import ModscoreError, NotAPartitionError
from modscore.graph import (
    ModularityGraph,
    NetworkXGraph,
    RustworkxGraph,
    SupportsTotalWeight,
    WeightedEdge,
    as_modularity_graph,
)

__all__ = [
    "ModscoreError",
    "ModularityGraph",
    "NetworkXGraph",
    "NotAPartitionError",
    "Partition",
    "PartitionEdgeWeights",
    "RustworkxGraph",
    "SupportsTotalWeight",
    "WeightedEdge",
    "__version__",
    "as_modularity_graph",
    "modularity",
    "partition_edge_weights",
    "total_edge_weight",
]
