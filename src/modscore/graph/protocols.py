"""Graph protocols: runtime-checkable interfaces the scorer consumes.

Split into a core protocol and opt-in capability protocols so that any graph
backend (rustworkx, NetworkX, CSR arrays, etc.) can be scored by implementing
just the core.  Capability protocols are detected via ``isinstance()``.

The scorer never mutates a graph, so nothing here exposes mutation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Hashable, Iterable


@runtime_checkable
class ModularityGraph(Protocol):
    """Core read-only graph interface required for modularity scoring.

    ``to_index`` must map every node returned by ``nodes()`` to a distinct
    integer in ``[0, node_count)``, stable for as long as the graph is not
    mutated.
    """

    def nodes(self) -> list[Hashable]: ...

    def edges(self) -> Iterable[tuple[Hashable, Hashable, Any]]:
        """Every edge as ``(source, target, weight)``; weight must accept ``float()``."""
        ...

    @property
    def node_count(self) -> int: ...

    def to_index(self, node: Hashable) -> int: ...

    def is_directed(self) -> bool: ...


@runtime_checkable
class SupportsTotalWeight(Protocol):
    """Opt-in: the graph knows its own total edge weight."""

    def total_weight(self) -> float: ...
