# latency_map/domain/mechanics/mechanics_factory.py

from latency_map.config.models import AppModel
from latency_map.domain.graph import GraphStore
from latency_map.domain.mechanics.cost_resolvers import GraphCostResolver
from latency_map.domain.mechanics.mechanics_core import Mechanics
from latency_map.engine.rng import RNGRegistry
from latency_map.runtime.registries import make_fallback, make_route_planner


def build_mechanics(cfg: AppModel, rng_registry: RNGRegistry) -> Mechanics:
    graph = GraphStore.from_config(cfg.graph)
    fallback = make_fallback(cfg.fallback, deps={"rng_registry": rng_registry})
    route_planner = make_route_planner(cfg.route_planner, deps={"graph": graph})
    return Mechanics(
        graph=graph,
        cost_resolver=GraphCostResolver(graph, fallback),
        route_planner=route_planner,
    )
