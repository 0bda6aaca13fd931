# runtime/registries.py
from collections.abc import Callable

from latency_map.app.protocols import FallbackCost, RoutePlanner
from latency_map.config.models import (
    FallbackCostUnion,
    FallbackPairSeededModel,
    FallbackRandomModel,
    RoutePlannerHeapModel,
    RoutePlannerLinearScanModel,
    RoutePlannerUnion,
)
from latency_map.domain.mechanics.cost_resolvers import PairSeededFallback, RandomFallback
from latency_map.domain.mechanics.route_planners import HeapRouter, LinearScanRouter

FallbackFactory = Callable[[FallbackCostUnion, dict], FallbackCost]
RoutePlannerFactory = Callable[[RoutePlannerUnion, dict], RoutePlanner]

_fallback_registry: dict[str, FallbackFactory] = {}
_route_planner_registry: dict[str, RoutePlannerFactory] = {}


# ------------------- Fallback costs ---------------------------


def register_fallback(kind: str):
    def deco(fn: FallbackFactory):
        _fallback_registry[kind] = fn
        return fn

    return deco


def make_fallback(cfg: FallbackCostUnion, *, deps: dict) -> FallbackCost:
    try:
        factory = _fallback_registry[cfg.kind]
    except KeyError:
        raise ValueError(f"Unknown fallback kind {cfg.kind!r}") from None
    return factory(cfg, deps)


@register_fallback("pair_seeded")
def _make_pair_seeded(cfg: FallbackPairSeededModel, deps):
    return PairSeededFallback(deps["rng_registry"], low=cfg.low, high=cfg.high)


@register_fallback("random")
def _make_random(cfg: FallbackRandomModel, deps):
    return RandomFallback(deps["rng_registry"].stream("fallback_cost"), low=cfg.low, high=cfg.high)


# --------------------- Route Planners  ---------------------


def register_route_planner(kind: str):
    def deco(fn: RoutePlannerFactory):
        _route_planner_registry[kind] = fn
        return fn

    return deco


def make_route_planner(cfg: RoutePlannerUnion, *, deps: dict) -> RoutePlanner:
    try:
        factory = _route_planner_registry[cfg.kind]
    except KeyError:
        raise ValueError(f"Unknown route planner kind {cfg.kind!r}") from None
    return factory(cfg, deps)


@register_route_planner("linear_scan")
def _make_linear_scan(cfg: RoutePlannerLinearScanModel, deps):
    return LinearScanRouter(deps["graph"])


@register_route_planner("heap")
def _make_heap(cfg: RoutePlannerHeapModel, deps):
    return HeapRouter(deps["graph"])
