# engine/hooks.py
from typing import Protocol

from latency_map.engine.event import BaseEvent


class KernelHooks(Protocol):
    def run_start(self, *, qsize): ...
    def run_end(self, *, processed, qsize, wall_ms): ...
    def post(self, ev: BaseEvent, *, qsize): ...
    def dispatch_start(self, ev: BaseEvent, *, seq, qsize, handlers): ...
    def dispatch_end(self, ev: BaseEvent, *, out_events, ms): ...
    def error(self, ev: BaseEvent, *, exc: BaseException, **kw): ...
    def biz(self, ev): ...


class NoopHooks:
    def run_start(self, **_):
        pass

    def run_end(self, **_):
        pass

    def post(self, *_, **__):
        pass

    def dispatch_start(self, *_, **__):
        pass

    def dispatch_end(self, *_, **__):
        pass

    def error(self, *_, **__):
        pass

    def biz(self, *_):
        pass
