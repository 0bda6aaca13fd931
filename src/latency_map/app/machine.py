# app/machine.py
"""
Selection/analysis transitions as pure functions: (state, input) -> Transition.

Selection:  Idle --pick N--> SourceChosen(N)
            SourceChosen(S) --pick S--> Idle               (cancel)
            SourceChosen(S) --pick N--> Idle + Connection  (N != S)
Analysis:   optimize stores a Route for the active direct connection;
            clear drops connections and route but leaves the selection alone.
"""

from dataclasses import dataclass, replace
from typing import Literal

from latency_map.app.protocols import CostResolver, RoutePlanner
from latency_map.domain.state import IDLE, SessionState, SourceChosen

Outcome = Literal[
    "source_selected",
    "selection_cancelled",
    "connection_formed",
    "route_optimized",
    "route_unavailable",
    "optimize_ignored",
    "analysis_cleared",
]
Mode = Literal["single", "accumulate"]


@dataclass(frozen=True)
class Transition:
    state: SessionState
    outcome: Outcome


def pick_node(
    state: SessionState, node: str, resolver: CostResolver, mode: Mode = "single"
) -> Transition:
    sel = state.selection
    if not isinstance(sel, SourceChosen):
        if mode == "single":
            # starting a new analysis discards the previous one
            return Transition(SessionState(selection=SourceChosen(node)), "source_selected")
        return Transition(replace(state, selection=SourceChosen(node)), "source_selected")

    if node == sel.node:
        return Transition(replace(state, selection=IDLE), "selection_cancelled")

    pair = (sel.node, node)
    if mode == "single":
        connections = (resolver.direct_connection(*pair),)
    else:
        existing = next((c for c in state.connections if c.pair == pair), None)
        kept = tuple(c for c in state.connections if c.pair != pair)
        # an existing directed pair keeps its first-drawn cost and becomes active again
        connections = (*kept, existing or resolver.direct_connection(*pair))
    return Transition(
        SessionState(selection=IDLE, connections=connections, route=None), "connection_formed"
    )


def optimize(state: SessionState, planner: RoutePlanner) -> Transition:
    conn = state.active_connection
    if conn is None or conn.kind != "direct":
        return Transition(state, "optimize_ignored")
    route = planner.shortest_path(conn.source, conn.target)
    if route is None:
        return Transition(state, "route_unavailable")
    return Transition(replace(state, route=route), "route_optimized")


def clear(state: SessionState) -> Transition:
    return Transition(replace(state, connections=(), route=None), "analysis_cleared")
