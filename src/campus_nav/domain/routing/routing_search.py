import heapq
import math
import time

from campus_nav.app.protocols import Router
from campus_nav.domain.entities.geography import Metric
from campus_nav.domain.graph import CampusGraph, NodeRef, node_key
from campus_nav.domain.results import PathResult
from campus_nav.domain.routing.routing_heuristics import (
    Heuristic,
    euclidean,
    heuristic_violations,
    scaled,
    zero,
)
from campus_nav.engine.hooks import NoopHooks, RouterHooks


def reconstruct(came_from: dict[str, str], current: str) -> list[str]:
    path = [current]
    while current in came_from:
        current = came_from[current]
        path.append(current)
    path.reverse()
    return path


class _BestFirstRouter(Router):
    """
    Label-setting search shared by Dijkstra and A*.

    The frontier is a heap of (priority, seq, node_id); seq grows with every push so equal
    priorities pop in insertion order. Improved nodes are pushed again instead of being
    decreased in place: stale entries stay in the heap and are dropped when popped by the
    closed-set check (lazy deletion).
    """

    algo = "best_first"

    def __init__(
        self,
        graph: CampusGraph,
        *,
        metric: Metric = Metric.DISTANCE,
        hooks: RouterHooks | None = None,
    ):
        self.graph, self.metric = graph, metric
        self._hooks = hooks or NoopHooks()

    def _priority(self, g: float, node_id: str, goal: str) -> float:
        return g

    def shortest_path(self, start: NodeRef, goal: NodeRef) -> PathResult:
        s, t = node_key(start), node_key(goal)
        missing = tuple(dict.fromkeys(n for n in (s, t) if n not in self.graph))
        if missing:
            return PathResult.unknown(*missing)
        t0 = time.perf_counter()
        self._hooks.search_start(algo=self.algo, start=s, goal=t)
        result, expanded = self._search(s, t)
        self._hooks.search_end(
            algo=self.algo,
            start=s,
            goal=t,
            status=result.status.value,
            cost=result.total_cost,
            expanded=expanded,
            ms=(time.perf_counter() - t0) * 1000,
        )
        return result

    def distance(self, start: NodeRef, goal: NodeRef) -> float:
        for n in (start, goal):
            self.graph.node(n)  # raises UnknownLocation
        return self.shortest_path(start, goal).total_cost

    def _search(self, start: str, goal: str) -> tuple[PathResult, int]:
        g_score: dict[str, float] = {start: 0.0}
        came_from: dict[str, str] = {}
        closed: set[str] = set()
        seq = 0
        frontier = [(self._priority(0.0, start, goal), seq, start)]

        while frontier:
            _, _, current = heapq.heappop(frontier)
            if current in closed:
                continue
            closed.add(current)
            g = g_score[current]
            self._hooks.settle(current, algo=self.algo, g=g, frontier=len(frontier))
            if current == goal:
                return PathResult.of(reconstruct(came_from, current), g), len(closed)

            for edge in self.graph.neighbors(current):
                nb = edge.target
                if nb in closed:
                    continue
                w = edge.cost(self.metric)
                if math.isinf(w):
                    continue
                tentative = g + w
                if tentative < g_score.get(nb, math.inf):
                    g_score[nb] = tentative
                    came_from[nb] = current
                    seq += 1
                    heapq.heappush(frontier, (self._priority(tentative, nb, goal), seq, nb))

        return PathResult.not_found(), len(closed)


class DijkstraRouter(_BestFirstRouter):
    algo = "dijkstra"


class AStarRouter(_BestFirstRouter):
    """
    A*: priority = g + h(node, goal).

    Optimal only while h never overestimates the remaining cost. With the straight-line
    default that holds when every edge cost is at least the distance between its endpoints
    divided by `vmax`; pass a `vmax` (coordinate units per unit of cost) when routing by a
    non-geometric cost such as time. Offending edges are collected in `violations` at
    construction and reported to the hooks, then `vmax` is raised until every edge
    satisfies the bound again (the zero estimate if an offending edge is free), so the
    search stays optimal. With `check_consistency=False` the estimate is used as given.
    """

    algo = "astar"

    def __init__(
        self,
        graph: CampusGraph,
        *,
        heuristic: Heuristic = euclidean,
        vmax: float = 1.0,
        metric: Metric = Metric.DISTANCE,
        check_consistency: bool = True,
        hooks: RouterHooks | None = None,
    ):
        super().__init__(graph, metric=metric, hooks=hooks)
        self.vmax = vmax
        self.h = scaled(heuristic, vmax)
        self.violations = []
        if check_consistency:
            self.violations = heuristic_violations(graph, self.h, metric)
            for edge, est, cost in self.violations:
                self._hooks.heuristic_violation(edge, algo=self.algo, estimate=est, cost=cost)
        if self.violations:
            shrink = min(cost / est for _, est, cost in self.violations)
            if shrink > 0:
                self.vmax = vmax / shrink * (1 + 1e-9)
                self.h = scaled(heuristic, self.vmax)
            else:
                self.vmax, self.h = math.inf, zero

    def _priority(self, g: float, node_id: str, goal: str) -> float:
        return g + self.h(self.graph.node(node_id), self.graph.node(goal))
