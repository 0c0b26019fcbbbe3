from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum


class RouteStatus(Enum):
    FOUND = "found"
    NOT_FOUND = "not_found"
    UNKNOWN_NODE = "unknown_node"


@dataclass(frozen=True)
class PathResult:
    """
    Uniform answer of every router.

    FOUND        node_sequence non-empty, path[0] == start, path[-1] == goal.
                 A single node with cost 0 means start == goal.
    NOT_FOUND    empty sequence, total_cost == inf. A normal outcome, never raised.
    UNKNOWN_NODE empty sequence, total_cost == inf, offending ids in `missing`.
    """

    status: RouteStatus
    node_sequence: tuple[str, ...] = ()
    total_cost: float = math.inf
    missing: tuple[str, ...] = ()

    @classmethod
    def of(cls, nodes: Iterable[str], cost: float) -> PathResult:
        return cls(RouteStatus.FOUND, tuple(nodes), float(cost))

    @classmethod
    def not_found(cls) -> PathResult:
        return cls(RouteStatus.NOT_FOUND)

    @classmethod
    def unknown(cls, *ids: str) -> PathResult:
        return cls(RouteStatus.UNKNOWN_NODE, missing=tuple(ids))

    @property
    def found(self) -> bool:
        return self.status is RouteStatus.FOUND

    @property
    def start(self) -> str | None:
        return self.node_sequence[0] if self.node_sequence else None

    @property
    def goal(self) -> str | None:
        return self.node_sequence[-1] if self.node_sequence else None

    @property
    def hops(self) -> int:
        return max(0, len(self.node_sequence) - 1)
