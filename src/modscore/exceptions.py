"""Custom exception hierarchy for modscore."""


class ModscoreError(Exception):
    """Base exception for all modscore errors."""


class NotAPartitionError(ModscoreError, ValueError):
    """Raised when a list of node sets is not a partition of the graph's nodes.

    Either a node appears in more than one set, or some node appears in none.
    """
