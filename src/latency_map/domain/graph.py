# latency_map/domain/graph.py
import numbers
from collections.abc import Iterator, Mapping, Sequence
from math import isfinite
from types import MappingProxyType

from latency_map.domain.entities.geography import Edge, Node
from latency_map.errors import GraphConfigError, UnknownNodeError


def validate_graph(names: Sequence[str], edges: Mapping[str, Mapping[str, float]]) -> None:
    """
    Fail fast on malformed static graph data:
      • node names unique
      • every edge endpoint declared
      • no self-loops
      • every cost finite and > 0
    """
    declared = set(names)
    if len(declared) != len(names):
        dupes = sorted({n for n in names if names.count(n) > 1})
        raise GraphConfigError(f"duplicate node names: {dupes}")
    for a, nbrs in edges.items():
        if a not in declared:
            raise GraphConfigError(f"edge source {a!r} is not a declared node")
        for b, c in nbrs.items():
            if b not in declared:
                raise GraphConfigError(f"edge {a!r}->{b!r} targets an undeclared node")
            if a == b:
                raise GraphConfigError(f"self-loop on {a!r}")
            if isinstance(c, bool) or not isinstance(c, numbers.Real):
                raise GraphConfigError(f"edge {a!r}->{b!r} cost must be a number, got {c!r}")
            if not isfinite(c) or c <= 0:
                raise GraphConfigError(f"edge {a!r}->{b!r} cost must be finite and > 0, got {c}")


class GraphStore:
    """Static directed weighted graph. Node order is the declared order."""

    def __init__(self, nodes: Sequence[Node], edges: Mapping[str, Mapping[str, float]]):
        names = [n.name for n in nodes]
        validate_graph(names, edges)
        self._nodes: dict[str, Node] = {n.name: n for n in nodes}
        self._index = {name: i for i, name in enumerate(names)}
        # copy so later changes to the caller's mappings can't leak in
        self._adj: dict[str, Mapping[str, float]] = {
            name: MappingProxyType(dict(edges.get(name, {}))) for name in names
        }

    @classmethod
    def from_config(cls, cfg) -> "GraphStore":
        nodes = [Node(n.name, *n.coordinates) for n in cfg.nodes]
        return cls(nodes, cfg.edges)

    # --------------- nodes -----------------------------

    @property
    def nodes(self) -> tuple[Node, ...]:
        return tuple(self._nodes.values())

    @property
    def node_ids(self) -> tuple[str, ...]:
        return tuple(self._nodes)

    def __contains__(self, name: object) -> bool:
        return name in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    def node(self, name: str) -> Node:
        try:
            return self._nodes[name]
        except KeyError:
            raise UnknownNodeError(name) from None

    def require(self, *names: str) -> None:
        for name in names:
            if name not in self._nodes:
                raise UnknownNodeError(name)

    def index(self, name: str) -> int:
        self.require(name)
        return self._index[name]

    # --------------- edges -----------------------------

    def cost(self, a: str, b: str) -> float | None:
        return self._adj.get(a, {}).get(b)

    def has_edge(self, a: str, b: str) -> bool:
        return self.cost(a, b) is not None

    def neighbors(self, name: str) -> Mapping[str, float]:
        self.require(name)
        return self._adj[name]

    def iter_edges(self) -> Iterator[Edge]:
        for a, nbrs in self._adj.items():
            for b, c in nbrs.items():
                yield Edge(a, b, c)
