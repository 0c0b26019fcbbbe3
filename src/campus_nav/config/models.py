import os
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from campus_nav.domain.entities.geography import Edge, Node


class LogModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    debug: bool = False
    sample_every: int = Field(default=1, ge=1)


# ----------------- GRAPH DATA ---------------------


class NodeModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    id: str = Field(min_length=1)
    name: str | None = None
    x: float | None = None
    y: float | None = None
    category: str | None = None

    def to_node(self) -> Node:
        return Node(self.id, self.name or self.id, self.x, self.y, self.category)


class EdgeModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    source: str
    target: str
    weight: float = Field(ge=0, allow_inf_nan=False)
    secondary_weight: int | None = Field(default=None, ge=0)  # minutes
    category: str | None = None

    def to_edge(self) -> Edge:
        return Edge(self.source, self.target, self.weight, self.secondary_weight, self.category)


class GraphDataModel(BaseModel):
    """
    Nodes and undirected edges as plain data (inline config or a JSON file).
    Edge endpoints are not cross-checked here: the graph rejects and logs dangling edges.
    """

    model_config = ConfigDict(extra="forbid")
    nodes: list[NodeModel] = Field(default_factory=list)
    edges: list[EdgeModel] = Field(default_factory=list)


# ----------------- SOURCES ---------------------


class SourceStaticModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["static"] = "static"
    dataset: Literal["landmarks", "network"] = "landmarks"


class SourceInlineModel(GraphDataModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["inline"] = "inline"


class SourceFileModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["file"] = "file"
    file: str
    fmt: Literal["json"] = "json"
    must_exist: bool = True

    @field_validator("file")
    @classmethod
    def _expand(cls, v: str) -> str:
        return os.path.expandvars(os.path.expanduser(v))


SourceUnion = Annotated[
    SourceStaticModel | SourceInlineModel | SourceFileModel,
    Field(discriminator="kind"),
]

# ----------------- ROUTERS ---------------------

MetricName = Literal["distance", "time"]


class RouterAStarModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["astar"] = "astar"
    metric: MetricName = "distance"
    heuristic: Literal["euclidean", "haversine", "zero"] = "euclidean"
    vmax: float = Field(default=1.0, gt=0)  # coordinate units per unit of cost
    check_consistency: bool = True


class RouterDijkstraModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["dijkstra"] = "dijkstra"
    metric: MetricName = "distance"


class RouterFloydWarshallModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["floyd_warshall"] = "floyd_warshall"
    metric: MetricName = "distance"


RouterUnion = Annotated[
    RouterAStarModel | RouterDijkstraModel | RouterFloydWarshallModel,
    Field(discriminator="kind"),
]


# ------------------------------------------------------------------


class NavigatorModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str = "campus"
    session_id: str = "local"
    strict: bool = False
    log: LogModel = LogModel()
    source: SourceUnion = Field(default_factory=SourceStaticModel)
    routers: list[RouterUnion] = Field(default_factory=lambda: [RouterAStarModel()])

    @model_validator(mode="after")
    def _check_routers(self):
        if not self.routers:
            raise ValueError("at least one router is required")
        kinds = [r.kind for r in self.routers]
        dupes = sorted({k for k in kinds if kinds.count(k) > 1})
        if dupes:
            raise ValueError(f"duplicate router kinds: {dupes}")
        return self
