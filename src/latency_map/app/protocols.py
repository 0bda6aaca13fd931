from typing import Protocol, runtime_checkable

from latency_map.domain.entities.analysis import Connection, Route


# ------------- Mechanics --------------------
@runtime_checkable
class FallbackCost(Protocol):
    """
    Synthetic latency for pairs with no edge in the static graph.
    Must return an integer within [low, high] inclusive.
    """

    low: int
    high: int

    def cost(self, a: str, b: str) -> int: ...


@runtime_checkable
class CostResolver(Protocol):
    """
    Responsibilities:
      • Return the direct edge cost a->b exactly when the edge exists.
      • Otherwise fall back to a synthetic cost; never raise for a missing edge.
    """

    def resolve_direct_cost(self, a: str, b: str) -> float: ...
    def direct_connection(self, a: str, b: str) -> Connection: ...


@runtime_checkable
class RoutePlanner(Protocol):
    """
    Responsibilities:
      • Compute the minimum-cost directed path between two nodes.
      • Return None when the destination is unreachable.
    Ties are broken by declared node order so results are reproducible.
    """

    def shortest_path(self, source: str, destination: str) -> Route | None: ...
