# engine/kernel.py

import time
from collections import deque
from collections.abc import Callable, Iterable

from .event import BaseEvent
from .hooks import KernelHooks, NoopHooks

Handler = Callable[[BaseEvent], Iterable[BaseEvent] | None]


class Kernel:
    """
    Synchronous FIFO dispatcher. Each event runs through all of its handlers
    before the next one is taken; follow-up events queue behind pending ones.
    """

    def __init__(self, hooks: KernelHooks | None = None):
        self._q: deque[BaseEvent] = deque()
        self._seq = 0
        self._subs: dict[type[BaseEvent], list[Handler]] = {}
        self._hooks = hooks or NoopHooks()

    @property
    def pending(self) -> int:
        return len(self._q)

    def on(self, etype: type[BaseEvent], handler: Handler) -> None:
        self._subs.setdefault(etype, []).append(handler)

    def post(self, ev: BaseEvent) -> None:
        self._q.append(ev)
        self._hooks.post(ev, qsize=len(self._q))

    def dispatch(self, ev: BaseEvent) -> int:
        self.post(ev)
        return self.run()

    def run(self, max_events: int | None = None) -> int:
        t0 = time.perf_counter()
        self._hooks.run_start(qsize=len(self._q))
        processed = 0
        try:
            while self._q:
                ev = self._q.popleft()
                self._seq += 1
                handlers = self._subs.get(type(ev), ())
                t1 = time.perf_counter()
                self._hooks.dispatch_start(
                    ev, seq=self._seq, qsize=len(self._q), handlers=len(handlers)
                )
                total_out = 0
                for h in handlers:
                    try:
                        out = h(ev) or ()
                    except Exception as exc:
                        # events queued behind a failed one are dropped, not replayed later
                        dropped = len(self._q)
                        self._q.clear()
                        self._hooks.error(ev, exc=exc, seq=self._seq, dropped=dropped)
                        raise
                    for nxt in out:
                        total_out += 1
                        self.post(nxt)
                ms = (time.perf_counter() - t1) * 1000
                self._hooks.dispatch_end(ev, out_events=total_out, ms=ms)
                processed += 1
                if max_events and processed >= max_events:
                    break
        finally:
            self._hooks.run_end(
                processed=processed,
                qsize=len(self._q),
                wall_ms=(time.perf_counter() - t0) * 1000,
            )
        return processed
