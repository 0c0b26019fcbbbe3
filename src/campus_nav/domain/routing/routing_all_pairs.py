import math
import time

import numpy as np

from campus_nav.app.protocols import Router
from campus_nav.domain.entities.geography import Metric
from campus_nav.domain.errors import InvalidThreshold
from campus_nav.domain.graph import CampusGraph, NodeRef, node_key
from campus_nav.domain.results import PathResult
from campus_nav.domain.routing.routing_landmarks import route_via_landmarks
from campus_nav.engine.hooks import NoopHooks, RouterHooks

NO_NEXT = -1


class FloydWarshallRouter(Router):
    """
    All-pairs shortest paths over a snapshot of the graph.

    `dist[i, j]` holds the cheapest cost (np.inf when unreachable) and `next_hop[i, j]` the
    index of the first step from i towards j (NO_NEXT when there is none). Indices follow
    `graph.node_ids()` at construction; build a new router after mutating the graph.
    """

    algo = "floyd_warshall"

    def __init__(
        self,
        graph: CampusGraph,
        *,
        metric: Metric = Metric.DISTANCE,
        hooks: RouterHooks | None = None,
    ):
        self.graph, self.metric = graph, metric
        self._hooks = hooks or NoopHooks()
        self.ids = tuple(graph.node_ids())
        self.index = {nid: i for i, nid in enumerate(self.ids)}
        t0 = time.perf_counter()
        self.dist, self.next_hop = self._build()
        self._hooks.matrix_built(
            algo=self.algo, nodes=len(self.ids), ms=(time.perf_counter() - t0) * 1000
        )

    def _build(self) -> tuple[np.ndarray, np.ndarray]:
        n = len(self.ids)
        dist = np.full((n, n), np.inf)
        nxt = np.full((n, n), NO_NEXT, dtype=np.int64)
        np.fill_diagonal(dist, 0.0)

        for i, nid in enumerate(self.ids):
            for e in self.graph.neighbors(nid):
                j, w = self.index[e.target], e.cost(self.metric)
                if w < dist[i, j]:  # keeps the cheapest of parallel edges
                    dist[i, j] = w
                    nxt[i, j] = j

        # k must stay outermost; the (i, j) sweep for one k is done in a single broadcast
        for k in range(n):
            via = dist[:, k : k + 1] + dist[k : k + 1, :]
            better = via < dist
            if better.any():
                dist = np.where(better, via, dist)
                nxt = np.where(better, nxt[:, k : k + 1], nxt)
        return dist, nxt

    def _idx(self, n: NodeRef) -> int:
        return self.index[self.graph.node(n).id]

    # ---------------- point queries ----------------

    def path(self, i: int, j: int) -> list[str]:
        if i == j:
            return [self.ids[i]]
        if self.next_hop[i, j] == NO_NEXT:
            return []
        out = [self.ids[i]]
        while i != j:
            i = int(self.next_hop[i, j])
            out.append(self.ids[i])
        return out

    def shortest_path(self, start: NodeRef, goal: NodeRef) -> PathResult:
        s, t = node_key(start), node_key(goal)
        missing = tuple(dict.fromkeys(n for n in (s, t) if n not in self.index))
        if missing:
            return PathResult.unknown(*missing)
        i, j = self.index[s], self.index[t]
        nodes = self.path(i, j)
        result = PathResult.of(nodes, self.dist[i, j]) if nodes else PathResult.not_found()
        self._hooks.search_end(
            algo=self.algo,
            start=s,
            goal=t,
            status=result.status.value,
            cost=result.total_cost,
            expanded=0,
            ms=0.0,
        )
        return result

    def distance(self, start: NodeRef, goal: NodeRef) -> float:
        return float(self.dist[self._idx(start), self._idx(goal)])

    # ---------------- derived queries ----------------

    def within_radius(self, source: NodeRef, threshold: float) -> dict[str, float]:
        """Locations reachable from `source` at cost <= threshold, nearest first, source excluded."""
        if math.isnan(threshold) or threshold < 0:
            raise InvalidThreshold(f"threshold must be >= 0, got {threshold!r}")
        i = self._idx(source)
        row = self.dist[i]
        hits = [
            j for j in np.argsort(row, kind="stable") if j != i and np.isfinite(row[j])
        ]
        return {self.ids[j]: float(row[j]) for j in hits if row[j] <= threshold}

    def route_via_landmarks(self, start: NodeRef, goal: NodeRef, landmarks) -> PathResult:
        return route_via_landmarks(self, start, goal, landmarks)

    def matrix(self) -> tuple[tuple[str, ...], np.ndarray]:
        return self.ids, self.dist.copy()
