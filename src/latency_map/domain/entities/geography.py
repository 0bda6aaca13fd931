from dataclasses import dataclass


# Core geographic types used by the graph and the read model
@dataclass(frozen=True)
class Node:
    name: str
    lon: float  # degrees
    lat: float

    @property
    def position(self) -> tuple[float, float]:
        return (self.lon, self.lat)


@dataclass(frozen=True)
class Edge:
    source: str
    target: str
    cost: float  # milliseconds


def midpoint(a: Node, b: Node) -> tuple[float, float]:
    # plain lon/lat average; fine for label placement at these distances
    return ((a.lon + b.lon) / 2, (a.lat + b.lat) / 2)
