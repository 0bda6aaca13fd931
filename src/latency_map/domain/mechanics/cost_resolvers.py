# latency_map/domain/mechanics/cost_resolvers.py
from latency_map.app.protocols import CostResolver, FallbackCost
from latency_map.domain.entities.analysis import Connection
from latency_map.domain.graph import GraphStore
from latency_map.engine.rng import RNGRegistry


class PairSeededFallback(FallbackCost):
    """Same ordered pair => same synthetic cost, for a given seed and scenario."""

    def __init__(self, rng_registry: RNGRegistry, low: int = 100, high: int = 300):
        self.rng_registry, self.low, self.high = rng_registry, low, high

    def cost(self, a: str, b: str) -> int:
        g = self.rng_registry.fresh("fallback_cost", a, b)
        return int(g.integers(self.low, self.high, endpoint=True))


class RandomFallback(FallbackCost):
    """Draws from one run-wide stream; repeated calls for a pair can differ."""

    def __init__(self, rng, low: int = 100, high: int = 300):
        self.rng, self.low, self.high = rng, low, high

    def cost(self, a: str, b: str) -> int:
        return int(self.rng.integers(self.low, self.high, endpoint=True))


class GraphCostResolver(CostResolver):
    def __init__(self, graph: GraphStore, fallback: FallbackCost):
        self.G, self.fallback = graph, fallback

    def resolve_direct_cost(self, a: str, b: str) -> float:
        return self.direct_connection(a, b).cost

    def direct_connection(self, a: str, b: str) -> Connection:
        self.G.require(a, b)
        c = self.G.cost(a, b)
        if c is None:
            return Connection(a, b, self.fallback.cost(a, b), synthetic=True)
        return Connection(a, b, c)
