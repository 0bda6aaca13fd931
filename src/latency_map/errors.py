# latency_map/errors.py


class LatencyMapError(Exception):
    """Base class for errors raised by latency_map."""


class GraphConfigError(LatencyMapError, ValueError):
    """Static graph data violates a structural invariant."""


class UnknownNodeError(LatencyMapError, KeyError):
    def __init__(self, name: str):
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"unknown node {self.name!r}"
