import heapq
from math import inf

from latency_map.app.protocols import RoutePlanner
from latency_map.domain.entities.analysis import Route
from latency_map.domain.graph import GraphStore


def _walk_back(prev: dict[str, str], source: str, destination: str) -> tuple[str, ...] | None:
    path = [destination]
    while path[-1] != source:
        p = prev.get(path[-1])
        if p is None:
            return None
        path.append(p)
    return tuple(reversed(path))


class LinearScanRouter(RoutePlanner):
    """Dijkstra with an O(V) minimum scan per step. O(V^2) per query."""

    def __init__(self, graph: GraphStore):
        self.G = graph

    def shortest_path(self, source, destination):
        self.G.require(source, destination)
        if source == destination:
            return Route((source,), 0)

        order = self.G.node_ids
        cost = dict.fromkeys(order, inf)
        cost[source] = 0
        prev: dict[str, str] = {}
        visited: set[str] = set()

        while True:
            u = None
            for n in order:  # first encountered wins on ties
                if n not in visited and cost[n] < inf and (u is None or cost[n] < cost[u]):
                    u = n
            if u is None:
                return None
            if u == destination:
                break
            visited.add(u)
            for v, c in self.G.neighbors(u).items():
                alt = cost[u] + c
                if alt < cost[v]:
                    cost[v], prev[v] = alt, u

        nodes = _walk_back(prev, source, destination)
        return None if nodes is None else Route(nodes, cost[destination])


class HeapRouter(RoutePlanner):
    """
    Dijkstra over a binary heap keyed by (cost, declared index).
    Same selection order as LinearScanRouter, so same routes under ties.
    """

    def __init__(self, graph: GraphStore):
        self.G = graph

    def shortest_path(self, source, destination):
        self.G.require(source, destination)
        if source == destination:
            return Route((source,), 0)

        cost: dict[str, float] = {source: 0}
        prev: dict[str, str] = {}
        visited: set[str] = set()
        q = [(0, self.G.index(source), source)]

        while q:
            d, _, u = heapq.heappop(q)
            if u in visited or d > cost[u]:
                continue  # stale entry
            if u == destination:
                nodes = _walk_back(prev, source, destination)
                return None if nodes is None else Route(nodes, d)
            visited.add(u)
            for v, c in self.G.neighbors(u).items():
                alt = d + c
                if alt < cost.get(v, inf):
                    cost[v], prev[v] = alt, u
                    heapq.heappush(q, (alt, self.G.index(v), v))
        return None
