# app/events.py
from dataclasses import dataclass

from latency_map.engine.event import BaseEvent


# Pointer input, already resolved to a node by the map layer
@dataclass(frozen=True)
class NodePicked(BaseEvent):
    node: str


# Analysis controls
@dataclass(frozen=True)
class OptimizeRequested(BaseEvent):
    pass


@dataclass(frozen=True)
class ClearRequested(BaseEvent):
    pass
