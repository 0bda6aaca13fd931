import pytest
from pydantic import ValidationError

from latency_map.config.models import (
    AppModel,
    FallbackPairSeededModel,
    FallbackRandomModel,
    GraphModel,
    RoutePlannerHeapModel,
    reference_graph,
)
from latency_map.domain.mechanics.mechanics_factory import build_mechanics
from latency_map.domain.mechanics.route_planners import HeapRouter, LinearScanRouter
from latency_map.engine.rng import RNGRegistry
from latency_map.runtime.registries import make_fallback, make_route_planner

NODES = [{"name": "A", "coordinates": (0, 0)}, {"name": "B", "coordinates": (1, 1)}]


def test_defaults():
    m = AppModel()
    assert m.session.mode == "single"
    assert m.fallback.kind == "pair_seeded"
    assert (m.fallback.low, m.fallback.high) == (100, 300)
    assert m.route_planner.kind == "linear_scan"
    assert [n.name for n in m.graph.nodes][0] == "Ciudad de México"


def test_reference_costs_stay_integral():
    g = reference_graph()
    assert g.edges["Lima"]["Buenos Aires"] == 77
    assert isinstance(g.edges["Lima"]["Buenos Aires"], int)


@pytest.mark.parametrize(
    "edges",
    [
        {"A": {"A": 1}},
        {"A": {"C": 1}},
        {"C": {"A": 1}},
        {"A": {"B": 0}},
        {"A": {"B": -1.5}},
        {"A": {"B": float("inf")}},
    ],
)
def test_graph_model_rejects_malformed_edges(edges):
    with pytest.raises(ValidationError):
        GraphModel.model_validate({"nodes": NODES, "edges": edges})


def test_graph_model_rejects_duplicates_and_bad_coordinates():
    with pytest.raises(ValidationError):
        GraphModel.model_validate({"nodes": NODES + NODES[:1]})
    with pytest.raises(ValidationError):
        GraphModel.model_validate({"nodes": [{"name": "X", "coordinates": (200, 0)}]})
    with pytest.raises(ValidationError):
        GraphModel.model_validate({"nodes": []})


def test_fallback_range_checked():
    with pytest.raises(ValidationError):
        FallbackPairSeededModel(low=300, high=100)
    with pytest.raises(ValidationError):
        FallbackRandomModel(low=0, high=10)


def test_unknown_kinds_and_fields_rejected():
    with pytest.raises(ValidationError):
        AppModel.model_validate({"route_planner": {"kind": "bellman_ford"}})
    with pytest.raises(ValidationError):
        AppModel.model_validate({"session": {"mode": "single", "extra": 1}})


def test_registries_build_configured_components():
    reg = RNGRegistry(0)
    g = build_mechanics(AppModel(), rng_registry=reg).graph
    assert isinstance(make_route_planner(RoutePlannerHeapModel(), deps={"graph": g}), HeapRouter)
    fb = make_fallback(FallbackRandomModel(low=5, high=5), deps={"rng_registry": reg})
    assert fb.cost("A", "B") == 5


def test_build_mechanics_wires_defaults():
    m = build_mechanics(AppModel(), rng_registry=RNGRegistry(0))
    assert isinstance(m.route_planner, LinearScanRouter)
    assert m.resolve_direct_cost("Lima", "Buenos Aires") == 77
    assert m.shortest_path("Lima", "Buenos Aires").cost == 53
