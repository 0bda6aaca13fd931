# latency_map/app/view.py
"""Renderable read model: plain dicts a map layer can draw without touching core logic."""

from enum import Enum

from latency_map.domain.entities.analysis import Connection
from latency_map.domain.entities.geography import midpoint
from latency_map.domain.graph import GraphStore
from latency_map.domain.state import SessionState

RGB = tuple[int, int, int]

SOURCE_FILL: RGB = (255, 255, 255)
NODE_FILL: RGB = (59, 130, 246)


class LatencyBand(Enum):
    LOW = ("low", (74, 222, 128))  # green, < 50 ms
    MEDIUM = ("medium", (250, 204, 21))  # yellow, 50..150 ms
    HIGH = ("high", (248, 113, 113))  # red, > 150 ms

    @property
    def label(self) -> str:
        return self.value[0]

    @property
    def color(self) -> RGB:
        return self.value[1]

    @classmethod
    def of(cls, latency_ms: float) -> "LatencyBand":
        if latency_ms < 50:
            return cls.LOW
        if latency_ms <= 150:
            return cls.MEDIUM
        return cls.HIGH


def format_ms(cost: float) -> str:
    value = round(float(cost), 2)
    return f"{int(value)}ms" if value.is_integer() else f"{value}ms"


def _arc(conn: Connection, graph: GraphStore) -> dict:
    a, b = graph.node(conn.source), graph.node(conn.target)
    band = LatencyBand.of(conn.cost)
    return {
        "source": conn.source,
        "target": conn.target,
        "kind": conn.kind,
        "synthetic": conn.synthetic,
        "source_position": a.position,
        "target_position": b.position,
        "color": band.color,
        "band": band.label,
        "label": format_ms(conn.cost),
        "label_position": midpoint(a, b),
        "tooltip": f"{conn.source} -> {conn.target}: {format_ms(conn.cost)}",
    }


def render_view(state: SessionState, graph: GraphStore) -> dict:
    nodes = [
        {
            "name": n.name,
            "position": n.position,
            "fill_color": SOURCE_FILL if n.name == state.source else NODE_FILL,
        }
        for n in graph.nodes
    ]

    route = None
    if state.route is not None:
        route = {
            "path": list(state.route.nodes),
            "positions": [graph.node(name).position for name in state.route.nodes],
            "label": format_ms(state.route.cost),
            "arc": _arc(state.route.as_connection(), graph),
        }

    cmp = state.comparison
    return {
        "nodes": nodes,
        "arcs": [_arc(c, graph) for c in state.connections],
        "route": route,
        "summary": {
            "source": state.source,
            "active_links": len(state.connections),
            "verdict": cmp.verdict.value if cmp else None,
            "difference": cmp.difference if cmp else None,
        },
    }
