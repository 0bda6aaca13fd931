from dataclasses import dataclass
from enum import Enum
from typing import Literal

ConnectionKind = Literal["direct", "optimized"]


@dataclass(frozen=True)
class Connection:
    source: str
    target: str
    cost: float
    kind: ConnectionKind = "direct"
    synthetic: bool = False  # True => cost came from the fallback, not an edge

    @property
    def pair(self) -> tuple[str, str]:
        return (self.source, self.target)


@dataclass(frozen=True)
class Route:
    nodes: tuple[str, ...]
    cost: float

    @property
    def source(self) -> str:
        return self.nodes[0]

    @property
    def target(self) -> str:
        return self.nodes[-1]

    @property
    def hops(self) -> int:
        return len(self.nodes) - 1

    def as_connection(self) -> Connection:
        return Connection(self.source, self.target, self.cost, kind="optimized")


class Verdict(Enum):
    OPTIMIZED_BETTER = "optimized-route-better"
    DIRECT_OPTIMAL = "direct-already-optimal"


@dataclass(frozen=True)
class Comparison:
    verdict: Verdict
    difference: float  # direct cost - route cost

    @classmethod
    def between(cls, direct: Connection, route: Route) -> "Comparison":
        if route.cost < direct.cost:
            verdict = Verdict.OPTIMIZED_BETTER
        else:
            verdict = Verdict.DIRECT_OPTIMAL
        return cls(verdict, direct.cost - route.cost)
