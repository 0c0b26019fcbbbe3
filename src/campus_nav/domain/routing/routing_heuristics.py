import math
from collections.abc import Callable

from campus_nav.domain.entities.geography import Edge, Metric, Node

Heuristic = Callable[[Node, Node], float]

EARTH_RADIUS_M = 6_371_000


def zero(a: Node, b: Node) -> float:
    return 0.0


def euclidean(a: Node, b: Node) -> float:
    pa, pb = a.point, b.point
    if pa is None or pb is None:
        return 0.0  # no coordinates: fall back to an uninformed estimate
    return math.hypot(pb.x - pa.x, pb.y - pa.y)


def haversine_m(a: Node, b: Node) -> float:
    """Great-circle metres between nodes whose x/y hold longitude/latitude in degrees."""
    pa, pb = a.point, b.point
    if pa is None or pb is None:
        return 0.0
    lat1, lat2 = math.radians(pa.y), math.radians(pb.y)
    dlat = lat2 - lat1
    dlon = math.radians(pb.x - pa.x)
    h = math.sin(dlat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2
    return 2 * EARTH_RADIUS_M * math.atan2(math.sqrt(h), math.sqrt(1 - h))


def scaled(h: Heuristic, vmax: float) -> Heuristic:
    """Turn a distance estimate into a cost estimate: units covered per unit of cost."""
    if vmax == 1.0:
        return h
    v = max(vmax, 1e-9)
    return lambda a, b: h(a, b) / v


def heuristic_violations(
    graph, h: Heuristic, metric: Metric = Metric.DISTANCE, *, tol: float = 1e-9
) -> list[tuple[Edge, float, float]]:
    """
    Edges whose cost is below the heuristic's estimate between their own endpoints.

    For metric estimates (straight line, great circle) h(a, c) <= cost(a, c) on every edge
    is exactly the consistency condition h(a, g) <= cost(a, c) + h(c, g), and consistency
    implies admissibility. Returns (edge, estimate, cost) triples, one per undirected edge.
    """
    out = []
    for e in graph.edges():
        cost = e.cost(metric)
        if math.isinf(cost):
            continue
        est = h(graph.node(e.source), graph.node(e.target))
        if est > cost + tol:
            out.append((e, est, cost))
    return out
