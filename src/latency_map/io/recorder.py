# io/recorder.py
import json
import logging
import sys
from dataclasses import asdict
from typing import Protocol

log = logging.getLogger("latency_map.recorder")


class Sink(Protocol):
    def write(self, ev) -> None: ...


class JsonlSink:
    def __init__(self, fp=None):
        self.fp = fp  # None => whatever sys.stdout is at write time

    def write(self, ev) -> None:
        (self.fp or sys.stdout).write(json.dumps(asdict(ev), ensure_ascii=False) + "\n")


class MemorySink:
    def __init__(self):
        self.events: list = []

    def write(self, ev) -> None:
        self.events.append(ev)

    def names(self) -> list[str]:
        return [ev.name for ev in self.events]


class Recorder:
    def __init__(self, *sinks: Sink):
        self.sinks = sinks or (JsonlSink(),)

    def emit(self, ev):
        for s in self.sinks:
            try:
                s.write(ev)
            except (OSError, TypeError, ValueError):
                # a broken sink must not break the session
                log.exception("sink %s failed on %s", type(s).__name__, ev.name)
