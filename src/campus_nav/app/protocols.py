from collections.abc import Iterable
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from campus_nav.domain.entities.geography import Edge, Node
from campus_nav.domain.results import PathResult

if TYPE_CHECKING:
    from campus_nav.domain.graph import CampusGraph


@runtime_checkable
class GraphSource(Protocol):
    """
    Responsibilities:
      • Supply the locations and undirected paths a graph is built from.
    Edges may reference unknown ids; the graph rejects and logs those.
    """

    def nodes(self) -> Iterable[Node]: ...
    def edges(self) -> Iterable[Edge]: ...


@runtime_checkable
class Router(Protocol):
    """
    Responsibilities:
      • Compute the cheapest path between two locations of `graph`.
      • Compute the cheapest cost between two locations (inf when unreachable).
    Node arguments may be ids or Node instances.
    """

    algo: str
    graph: "CampusGraph"

    def shortest_path(self, start, goal) -> PathResult: ...
    def distance(self, start, goal) -> float: ...
