# latency_map/app/wiring.py
from latency_map.app.controllers.session import SessionHandler
from latency_map.app.events import ClearRequested, NodePicked, OptimizeRequested
from latency_map.engine.kernel import Kernel


def wire(kernel: Kernel, *, session: SessionHandler) -> None:
    k = kernel

    # selection
    k.on(NodePicked, session.on_node_picked)

    # analysis controls
    k.on(OptimizeRequested, session.on_optimize_requested)
    k.on(ClearRequested, session.on_clear_requested)
