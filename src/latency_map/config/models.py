from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from latency_map.config.reference import REFERENCE_EDGES, REFERENCE_NODES
from latency_map.domain.graph import validate_graph

Cost = int | float  # keeps integer latencies integral


class LogModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    debug: bool = False
    events: Literal["jsonl", "memory", "off"] = "jsonl"


# ----------------- GRAPH ---------------------


class NodeModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str = Field(min_length=1)
    coordinates: tuple[float, float]  # (lon, lat) degrees

    @field_validator("coordinates")
    @classmethod
    def _in_range(cls, v: tuple[float, float]) -> tuple[float, float]:
        lon, lat = v
        if not -180.0 <= lon <= 180.0:
            raise ValueError(f"longitude must be within [-180, 180], got {lon}")
        if not -90.0 <= lat <= 90.0:
            raise ValueError(f"latitude must be within [-90, 90], got {lat}")
        return v


class GraphModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    nodes: list[NodeModel] = Field(min_length=1)
    edges: dict[str, dict[str, Cost]] = Field(default_factory=dict)  # from -> {to: cost}

    @model_validator(mode="after")
    def _check_graph(self):
        # GraphConfigError is a ValueError, so pydantic reports it as a ValidationError
        validate_graph([n.name for n in self.nodes], self.edges)
        return self


def reference_graph() -> GraphModel:
    return GraphModel.model_validate({"nodes": REFERENCE_NODES, "edges": REFERENCE_EDGES})


# ----------------- FALLBACK COSTS ---------------------


class _FallbackRangeModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    low: int = Field(default=100, gt=0)
    high: int = Field(default=300, gt=0)

    @model_validator(mode="after")
    def _check_range(self):
        if self.low > self.high:
            raise ValueError(f"fallback low ({self.low}) must be <= high ({self.high})")
        return self


class FallbackPairSeededModel(_FallbackRangeModel):
    kind: Literal["pair_seeded"] = "pair_seeded"


class FallbackRandomModel(_FallbackRangeModel):
    kind: Literal["random"] = "random"


FallbackCostUnion = Annotated[
    FallbackPairSeededModel | FallbackRandomModel,
    Field(discriminator="kind"),
]

# ----------------- ROUTE PLANNERS ---------------------


class RoutePlannerLinearScanModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["linear_scan"] = "linear_scan"


class RoutePlannerHeapModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["heap"] = "heap"


RoutePlannerUnion = Annotated[
    RoutePlannerLinearScanModel | RoutePlannerHeapModel,
    Field(discriminator="kind"),
]

# ------------------ SESSION -----------------------------


class SessionModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    # single: one active connection, replaced on each selection
    # accumulate: connections pile up, directed pairs deduplicated
    mode: Literal["single", "accumulate"] = "single"


# ------------------------------------------------------------------


class AppModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str = "latency-map"
    run_id: str = "local"
    seed: int = 0
    log: LogModel = LogModel()
    graph: GraphModel = Field(default_factory=reference_graph)
    fallback: FallbackCostUnion = Field(default_factory=FallbackPairSeededModel)
    route_planner: RoutePlannerUnion = Field(default_factory=RoutePlannerLinearScanModel)
    session: SessionModel = SessionModel()
