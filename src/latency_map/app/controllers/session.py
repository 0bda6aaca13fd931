# latency_map/app/controllers/session.py
from collections.abc import Callable

from latency_map.app import machine
from latency_map.app.events import ClearRequested, NodePicked, OptimizeRequested
from latency_map.domain.mechanics.mechanics_core import Mechanics
from latency_map.domain.state import SessionState
from latency_map.io.business_events import (
    AnalysisCleared,
    BizEvent,
    ConnectionFormed,
    OptimizeIgnored,
    RouteOptimized,
    RouteUnavailable,
    SelectionCancelled,
    SourceSelected,
)


class SessionHandler:
    """
    Sole owner of the SessionState value. Each handler runs one transition,
    swaps in the new state, and reports what happened.
    """

    def __init__(
        self,
        mechanics: Mechanics,
        mode: machine.Mode = "single",
        run_id: str = "local",
        report: Callable[[BizEvent], None] | None = None,
    ):
        self.mechanics = mechanics
        self.mode = mode
        self.run_id = run_id
        self.report = report or (lambda ev: None)
        self._state = SessionState()
        self._seq = 0

    @property
    def state(self) -> SessionState:
        return self._state

    def _commit(self, t: machine.Transition, biz: BizEvent) -> None:
        self._state = t.state
        self.report(biz)

    def _biz(self, cls, **fields) -> BizEvent:
        self._seq += 1
        return cls(run_id=self.run_id, seq=self._seq, name=cls.__name__, **fields)

    # ---------------------- handlers --------------------------

    def on_node_picked(self, ev: NodePicked):
        self.mechanics.graph.require(ev.node)
        t = machine.pick_node(self._state, ev.node, self.mechanics.cost_resolver, self.mode)
        if t.outcome == "source_selected":
            biz = self._biz(SourceSelected, node=ev.node)
        elif t.outcome == "selection_cancelled":
            biz = self._biz(SelectionCancelled, node=ev.node)
        else:
            conn = t.state.active_connection
            biz = self._biz(
                ConnectionFormed,
                source=conn.source,
                target=conn.target,
                cost=conn.cost,
                synthetic=conn.synthetic,
            )
        self._commit(t, biz)
        return []

    def on_optimize_requested(self, ev: OptimizeRequested):
        t = machine.optimize(self._state, self.mechanics.route_planner)
        conn = t.state.active_connection
        if t.outcome == "optimize_ignored":
            biz = self._biz(OptimizeIgnored, reason="no active direct connection")
        elif t.outcome == "route_unavailable":
            biz = self._biz(RouteUnavailable, source=conn.source, target=conn.target)
        else:
            route, cmp = t.state.route, t.state.comparison
            biz = self._biz(
                RouteOptimized,
                source=route.source,
                target=route.target,
                path=list(route.nodes),
                cost=route.cost,
                direct_cost=conn.cost,
                verdict=cmp.verdict.value,
                difference=cmp.difference,
            )
        self._commit(t, biz)
        return []

    def on_clear_requested(self, ev: ClearRequested):
        removed = len(self._state.connections)
        self._commit(machine.clear(self._state), self._biz(AnalysisCleared, removed=removed))
        return []
