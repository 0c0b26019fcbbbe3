# domain/analysis.py
import math
from dataclasses import dataclass
from typing import Literal

from campus_nav.domain.entities.geography import Edge, Node, Point
from campus_nav.domain.errors import InvalidThreshold
from campus_nav.domain.graph import CampusGraph
from campus_nav.domain.routing.routing_heuristics import euclidean, haversine_m


# ---------------- lookup ----------------


def find_by_name(graph: CampusGraph, term: str) -> list[Node]:
    t = term.lower()
    return [n for n in graph.nodes() if t in n.name.lower()]


def nodes_by_category(graph: CampusGraph, category: str) -> list[Node]:
    c = category.lower()
    return [n for n in graph.nodes() if n.category is not None and n.category.lower() == c]


def categories(graph: CampusGraph) -> list[str]:
    return list(dict.fromkeys(n.category for n in graph.nodes() if n.category is not None))


def nodes_near(
    graph: CampusGraph,
    p: Point,
    radius: float,
    metric: Literal["euclidean", "haversine"] = "euclidean",
) -> list[Node]:
    """Nodes with coordinates within `radius` of p (haversine: p and nodes as lon/lat, metres)."""
    if math.isnan(radius) or radius < 0:
        raise InvalidThreshold(f"radius must be >= 0, got {radius!r}")
    measure = haversine_m if metric == "haversine" else euclidean
    probe = Node("__probe__", x=p.x, y=p.y)
    return [n for n in graph.nodes() if n.point is not None and measure(probe, n) <= radius]


# ---------------- structure ----------------


def node_degrees(graph: CampusGraph) -> dict[str, int]:
    return {nid: len(graph.neighbors(nid)) for nid in graph.node_ids()}


def most_connected(graph: CampusGraph, limit: int) -> list[Node]:
    if limit <= 0:
        return []
    deg = node_degrees(graph)
    ranked = sorted(graph.node_ids(), key=lambda nid: -deg[nid])  # stable on ties
    return [graph.node(nid) for nid in ranked[:limit]]


def orphaned_nodes(graph: CampusGraph) -> list[str]:
    return [nid for nid, d in node_degrees(graph).items() if d == 0]


def connected_components(graph: CampusGraph) -> list[set[str]]:
    seen: set[str] = set()
    out = []
    for root in graph.node_ids():
        if root in seen:
            continue
        comp, stack = set(), [root]
        seen.add(root)
        while stack:
            cur = stack.pop()
            comp.add(cur)
            for e in graph.neighbors(cur):
                if e.target not in seen:
                    seen.add(e.target)
                    stack.append(e.target)
        out.append(comp)
    return out


# ---------------- statistics ----------------


def edges_by_category(graph: CampusGraph) -> dict[str, list[Edge]]:
    out: dict[str, list[Edge]] = {}
    for e in graph.edges():
        out.setdefault(e.category or "uncategorized", []).append(e)
    return out


@dataclass(frozen=True)
class NetworkSummary:
    nodes: int
    edges: int
    total_weight: float
    mean_weight: float | None
    longest: Edge | None
    shortest: Edge | None


def network_summary(graph: CampusGraph) -> NetworkSummary:
    edges = graph.edges()
    total = sum(e.weight for e in edges)
    return NetworkSummary(
        nodes=len(graph),
        edges=len(edges),
        total_weight=total,
        mean_weight=total / len(edges) if edges else None,
        longest=max(edges, key=lambda e: e.weight, default=None),
        shortest=min(edges, key=lambda e: e.weight, default=None),
    )
