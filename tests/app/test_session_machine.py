from types import SimpleNamespace

import pytest

from latency_map.app import machine
from latency_map.config.models import reference_graph
from latency_map.domain.entities.analysis import Connection, Route, Verdict
from latency_map.domain.entities.geography import Node
from latency_map.domain.graph import GraphStore
from latency_map.domain.mechanics.cost_resolvers import GraphCostResolver, PairSeededFallback
from latency_map.domain.mechanics.route_planners import LinearScanRouter
from latency_map.domain.state import IDLE, Idle, SessionState, SourceChosen
from latency_map.engine.rng import RNGRegistry

LIM, BUE, SCL, MEX = "Lima", "Buenos Aires", "Santiago de Chile", "Ciudad de México"


@pytest.fixture
def graph() -> GraphStore:
    return GraphStore.from_config(reference_graph())


@pytest.fixture
def resolver(graph):
    return GraphCostResolver(graph, PairSeededFallback(RNGRegistry(0)))


@pytest.fixture
def planner(graph):
    return LinearScanRouter(graph)


def _run(picks, resolver, mode="single", state=None):
    state = state or SessionState()
    outcomes = []
    for n in picks:
        t = machine.pick_node(state, n, resolver, mode)
        state = t.state
        outcomes.append(t.outcome)
    return state, outcomes


# ------------------ selection ------------------


def test_first_pick_chooses_source(resolver):
    state, outcomes = _run([LIM], resolver)
    assert state.selection == SourceChosen(LIM)
    assert state.source == LIM
    assert state.active_connection is None
    assert outcomes == ["source_selected"]


def test_picking_source_twice_cancels(resolver):
    state, outcomes = _run([LIM, LIM], resolver)
    assert isinstance(state.selection, Idle)
    assert state.source is None
    assert state.active_connection is None
    assert outcomes == ["source_selected", "selection_cancelled"]


def test_two_distinct_picks_form_direct_connection(resolver):
    state, outcomes = _run([LIM, BUE], resolver)
    assert state.selection == IDLE
    assert state.connections == (Connection(LIM, BUE, 77),)
    assert state.active_connection.kind == "direct"
    assert state.route is None
    assert outcomes[-1] == "connection_formed"


def test_new_source_discards_previous_analysis(resolver, planner):
    state, _ = _run([LIM, BUE], resolver)
    state = machine.optimize(state, planner).state
    assert state.route is not None

    state, _ = _run([SCL], resolver, state=state)
    assert state.selection == SourceChosen(SCL)
    assert state.connections == ()
    assert state.route is None


def test_new_connection_replaces_old_one(resolver):
    state, _ = _run([LIM, BUE, BUE, LIM], resolver)
    assert state.connections == (Connection(BUE, LIM, 78),)


def test_transitions_do_not_mutate_input(resolver):
    start = SessionState()
    machine.pick_node(start, LIM, resolver)
    assert start == SessionState()


# ------------------ optimize ------------------


def test_optimize_stores_route_and_comparison(resolver, planner):
    state, _ = _run([LIM, BUE], resolver)
    t = machine.optimize(state, planner)
    assert t.outcome == "route_optimized"
    assert t.state.route == Route((LIM, SCL, BUE), 53)
    cmp = t.state.comparison
    assert cmp.verdict is Verdict.OPTIMIZED_BETTER
    assert cmp.verdict.value == "optimized-route-better"
    assert cmp.difference == 24
    assert t.state.optimized_connection == Connection(LIM, BUE, 53, kind="optimized")


def test_optimize_when_direct_is_optimal(resolver, planner):
    state, _ = _run([MEX, BUE], resolver)
    t = machine.optimize(state, planner)
    assert t.state.route.nodes == (MEX, BUE)
    assert t.state.comparison.verdict is Verdict.DIRECT_OPTIMAL
    assert t.state.comparison.difference == 0


def test_optimize_without_connection_is_ignored(resolver, planner):
    state, _ = _run([LIM], resolver)
    t = machine.optimize(state, planner)
    assert t.outcome == "optimize_ignored"
    assert t.state is state


def test_optimize_with_no_path_keeps_direct_connection(resolver):
    g = GraphStore([Node("A", 0, 0), Node("B", 1, 1)], {"B": {"A": 4}})
    r = GraphCostResolver(g, PairSeededFallback(RNGRegistry(0)))
    state, _ = _run(["A", "B"], r)
    assert state.active_connection.synthetic

    t = machine.optimize(state, LinearScanRouter(g))
    assert t.outcome == "route_unavailable"
    assert t.state.route is None
    assert t.state.active_connection == state.active_connection
    assert t.state.comparison is None


def test_optimize_uses_the_given_planner(resolver):
    stub = SimpleNamespace(shortest_path=lambda a, b: Route((a, b), 1))
    state, _ = _run([LIM, BUE], resolver)
    t = machine.optimize(state, stub)
    assert t.state.route == Route((LIM, BUE), 1)


# ------------------ clear ------------------


def test_clear_drops_analysis_but_not_selection(resolver, planner):
    state, _ = _run([LIM, BUE], resolver)
    state = machine.optimize(state, planner).state
    state = machine.pick_node(state, SCL, resolver, "accumulate").state  # keep the analysis
    t = machine.clear(state)
    assert t.outcome == "analysis_cleared"
    assert t.state.connections == ()
    assert t.state.route is None
    assert t.state.selection == SourceChosen(SCL)


def test_pick_pick_optimize_clear_sequence(resolver, planner):
    state, _ = _run([LIM, BUE], resolver)
    state = machine.optimize(state, planner).state
    state = machine.clear(state).state
    assert state.active_connection is None
    assert state.route is None
    assert state.selection == IDLE


# ------------------ accumulate mode ------------------


def test_accumulate_keeps_previous_connections(resolver):
    state, _ = _run([LIM, BUE, BUE, SCL], resolver, mode="accumulate")
    assert [c.pair for c in state.connections] == [(LIM, BUE), (BUE, SCL)]
    assert state.active_connection.pair == (BUE, SCL)


def test_accumulate_deduplicates_directed_pairs(resolver):
    state, _ = _run([LIM, BUE, SCL, MEX, LIM, BUE], resolver, mode="accumulate")
    assert [c.pair for c in state.connections] == [(SCL, MEX), (LIM, BUE)]

    state, _ = _run([BUE, LIM], resolver, mode="accumulate", state=state)
    assert [c.pair for c in state.connections] == [(SCL, MEX), (LIM, BUE), (BUE, LIM)]


def test_accumulate_new_connection_drops_stale_route(resolver, planner):
    state, _ = _run([LIM, BUE], resolver, mode="accumulate")
    state = machine.optimize(state, planner).state
    state, _ = _run([SCL, MEX], resolver, mode="accumulate", state=state)
    assert state.route is None
    assert len(state.connections) == 2
