import math
from dataclasses import dataclass, field, replace
from enum import Enum


@dataclass(frozen=True)
class Point:
    x: float
    y: float


class Metric(Enum):
    DISTANCE = "distance"  # primary weight, metres
    TIME = "time"  # secondary weight, minutes


@dataclass(frozen=True)
class Node:
    """A campus location. Identity is the id alone; coordinates never take part in eq/hash."""

    id: str
    name: str = field(default="", compare=False)
    x: float | None = field(default=None, compare=False)
    y: float | None = field(default=None, compare=False)
    category: str | None = field(default=None, compare=False)

    def __post_init__(self):
        if not self.name:
            object.__setattr__(self, "name", self.id)

    @classmethod
    def named(cls, name: str, x: float | None = None, y: float | None = None, **kw) -> "Node":
        return cls(id=name, name=name, x=x, y=y, **kw)

    @property
    def point(self) -> Point | None:
        if self.x is None or self.y is None:
            return None
        return Point(self.x, self.y)


@dataclass(frozen=True)
class Edge:
    source: str
    target: str
    weight: float
    secondary_weight: int | None = None
    category: str | None = None  # path type, e.g. "paved_walkway"

    def reversed(self) -> "Edge":
        return replace(self, source=self.target, target=self.source)

    def cost(self, metric: Metric = Metric.DISTANCE) -> float:
        if metric is Metric.TIME:
            # no recorded time => not traversable when routing by time
            return math.inf if self.secondary_weight is None else float(self.secondary_weight)
        return self.weight
