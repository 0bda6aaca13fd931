# latency_map/app/build.py
from collections.abc import Mapping
from dataclasses import dataclass

from latency_map.app.controllers.session import SessionHandler
from latency_map.app.events import ClearRequested, NodePicked, OptimizeRequested
from latency_map.app.view import render_view
from latency_map.app.wiring import wire
from latency_map.config.models import AppModel
from latency_map.domain.mechanics.mechanics_core import Mechanics
from latency_map.domain.mechanics.mechanics_factory import build_mechanics
from latency_map.domain.state import SessionState
from latency_map.engine.hooks import NoopHooks
from latency_map.engine.kernel import Kernel
from latency_map.engine.rng import RNGRegistry
from latency_map.io.kernel_logging import KernelLogging  # JSON logs
from latency_map.io.recorder import JsonlSink, MemorySink, Recorder


@dataclass
class App:
    kernel: Kernel
    rng: RNGRegistry
    mechanics: Mechanics
    session: SessionHandler
    events: MemorySink | None = None

    @property
    def state(self) -> SessionState:
        return self.session.state

    # thin input surface for the map layer
    def pick(self, node: str) -> SessionState:
        self.kernel.dispatch(NodePicked(node))
        return self.state

    def optimize(self) -> SessionState:
        self.kernel.dispatch(OptimizeRequested())
        return self.state

    def clear(self) -> SessionState:
        self.kernel.dispatch(ClearRequested())
        return self.state

    def view(self) -> dict:
        return render_view(self.state, self.mechanics.graph)


def build(cfg: AppModel | Mapping | None = None, *, use_logging: bool = True) -> App:
    # 0) Validate config
    if cfg is None:
        model = AppModel()
    else:
        model = cfg if isinstance(cfg, AppModel) else AppModel.model_validate(cfg)

    # 1) RNG & mechanics
    rng_registry = RNGRegistry(model.seed, scenario=model.name)
    mechanics = build_mechanics(model, rng_registry=rng_registry)

    # 2) Kernel (with hooks)
    memory = None
    if model.log.events == "memory":
        memory = MemorySink()
        recorder = Recorder(memory)
    elif model.log.events == "jsonl":
        recorder = Recorder(JsonlSink())
    else:
        recorder = None

    hooks = (
        KernelLogging(
            run_id=model.run_id,
            recorder=recorder,
            level=model.log.level,
            debug=model.log.debug,
        )
        if use_logging
        else NoopHooks()
    )
    kernel = Kernel(hooks=hooks)

    # without logging, analysis events still reach the recorder
    if use_logging:
        report = hooks.biz
    else:
        report = recorder.emit if recorder else None

    # 3) Handlers (inject deps explicitly)
    session = SessionHandler(mechanics, mode=model.session.mode, run_id=model.run_id, report=report)

    # 4) Wiring
    wire(kernel, session=session)

    return App(kernel, rng_registry, mechanics, session, events=memory)
