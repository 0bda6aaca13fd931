# latency_map/io/business_events.py

from dataclasses import dataclass


# Base type for analysis events (reported, never dispatched by the kernel)
@dataclass
class BizEvent:
    run_id: str
    seq: int  # per-session report sequence from SessionHandler (for total ordering)
    name: str  # stable event name


@dataclass
class SourceSelected(BizEvent):
    node: str


@dataclass
class SelectionCancelled(BizEvent):
    node: str


@dataclass
class ConnectionFormed(BizEvent):
    source: str
    target: str
    cost: float
    synthetic: bool = False


@dataclass
class RouteOptimized(BizEvent):
    source: str
    target: str
    path: list[str]
    cost: float
    direct_cost: float
    verdict: str
    difference: float


@dataclass
class RouteUnavailable(BizEvent):
    source: str
    target: str


@dataclass
class OptimizeIgnored(BizEvent):
    reason: str


@dataclass
class AnalysisCleared(BizEvent):
    removed: int  # connections dropped
