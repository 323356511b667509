"""Graph value types: immutable edge records and weight conversion."""

from __future__ import annotations

from collections.abc import Hashable, Iterator, Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class WeightedEdge:
    """A single edge as seen by the scorer.

    Unpacks like a ``(source, target, weight)`` tuple.
    """

    source: Hashable
    target: Hashable
    weight: float

    def __iter__(self) -> Iterator[Any]:
        yield self.source
        yield self.target
        yield self.weight


def default_weight(payload: Any) -> float:
    """Convert an edge payload to a float weight.

    ``None`` counts as ``1.0``, mappings use their ``"weight"`` key (default
    ``1.0``), anything else must be accepted by ``float()``.
    """
    if payload is None:
        return 1.0
    if isinstance(payload, Mapping):
        return float(payload.get("weight", 1.0))
    return float(payload)
