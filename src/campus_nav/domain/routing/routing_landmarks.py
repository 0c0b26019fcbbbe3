import math
from collections.abc import Iterable

from campus_nav.app.protocols import Router
from campus_nav.domain.graph import NodeRef, node_key
from campus_nav.domain.results import PathResult


def _nearest(router: Router, current: str, pending: list[str]) -> str | None:
    best, best_d = None, math.inf
    for lm in pending:  # strict < keeps the earliest landmark on ties
        d = router.distance(current, lm)
        if d < best_d:
            best, best_d = lm, d
    return best


def route_via_landmarks(
    router: Router, start: NodeRef, goal: NodeRef, landmarks: Iterable[NodeRef]
) -> PathResult:
    """
    Route from start to goal passing every landmark, visiting landmarks in greedy
    nearest-neighbour order.

    This is a heuristic: the visiting order is not guaranteed to minimise the total cost.
    Consecutive legs share their endpoint, which appears once in the returned sequence.
    """
    s, t = node_key(start), node_key(goal)
    pending = list(dict.fromkeys(node_key(lm) for lm in landmarks))
    missing = tuple(dict.fromkeys(n for n in (s, t, *pending) if n not in router.graph))
    if missing:
        return PathResult.unknown(*missing)

    route, total, current = [s], 0.0, s
    while pending:
        nxt = _nearest(router, current, pending)
        if nxt is None:
            return PathResult.not_found()
        leg = router.shortest_path(current, nxt)
        route.extend(leg.node_sequence[1:])
        total += leg.total_cost
        current = nxt
        pending.remove(nxt)

    leg = router.shortest_path(current, t)
    if not leg.found:
        return PathResult.not_found()
    route.extend(leg.node_sequence[1:])
    return PathResult.of(route, total + leg.total_cost)
