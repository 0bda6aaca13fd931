# latency_map/domain/state.py
from dataclasses import dataclass

from latency_map.domain.entities.analysis import Comparison, Connection, Route


@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class SourceChosen:
    node: str


Selection = Idle | SourceChosen

IDLE = Idle()


@dataclass(frozen=True)
class SessionState:
    """
    Everything the read model needs, as one immutable value.
    In single mode `connections` holds at most one entry; the active one is always last.
    `route` belongs to the active connection and is dropped whenever that changes.
    """

    selection: Selection = IDLE
    connections: tuple[Connection, ...] = ()
    route: Route | None = None

    @property
    def source(self) -> str | None:
        return self.selection.node if isinstance(self.selection, SourceChosen) else None

    @property
    def active_connection(self) -> Connection | None:
        return self.connections[-1] if self.connections else None

    @property
    def optimized_connection(self) -> Connection | None:
        return self.route.as_connection() if self.route else None

    @property
    def comparison(self) -> Comparison | None:
        conn = self.active_connection
        if conn is None or self.route is None:
            return None
        return Comparison.between(conn, self.route)
