# latency_map/domain/mechanics/mechanics_core.py
from dataclasses import dataclass

from latency_map.app.protocols import CostResolver, RoutePlanner
from latency_map.domain.entities.analysis import Connection, Route
from latency_map.domain.graph import GraphStore


@dataclass
class Mechanics:
    graph: GraphStore
    cost_resolver: CostResolver
    route_planner: RoutePlanner

    def resolve_direct_cost(self, a: str, b: str) -> float:
        return self.cost_resolver.resolve_direct_cost(a, b)

    def direct_connection(self, a: str, b: str) -> Connection:
        return self.cost_resolver.direct_connection(a, b)

    def shortest_path(self, source: str, destination: str) -> Route | None:
        return self.route_planner.shortest_path(source, destination)
