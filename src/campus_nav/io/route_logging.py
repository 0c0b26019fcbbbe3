# io/route_logging.py
import json
import logging
import math
import sys

from campus_nav.engine.hooks import NoopHooks


def _default_json_logger(name="campus_nav", level="INFO"):
    logger = logging.getLogger(name)
    if not logger.handlers:
        h = logging.StreamHandler(sys.stdout)

        class _JsonFormatter(logging.Formatter):
            def format(self, record: logging.LogRecord) -> str:
                payload = {
                    "level": record.levelname,
                    "msg": record.getMessage(),
                    "logger": record.name,
                }
                extra = getattr(record, "extra", None)
                if isinstance(extra, dict):
                    payload.update(extra)
                return json.dumps(payload)

        h.setFormatter(_JsonFormatter())
        logger.addHandler(h)
        logger.setLevel(level)
    return logger


def _cost(c: float) -> float | None:
    return c if math.isfinite(c) else None


class RouteLogging(NoopHooks):
    """
    Structured logs for graph construction and route queries.
    """

    def __init__(
        self,
        session_id: str = "local",
        level: str = "INFO",
        debug: bool = False,
        sample_every: int = 1,
        logger: logging.Logger | None = None,
    ):
        self.session_id, self.debug, self.sample_every = session_id, debug, max(1, sample_every)
        self.log = logger or _default_json_logger(level=level)
        self._settled = 0

    def _emit(self, level: str, msg: str, **extra):
        payload = {"session_id": self.session_id}
        self.log.log(getattr(logging, level), msg, extra={"extra": {**payload, **extra}})

    # graph lifecycle

    def graph_built(self, *, nodes, edges, rejected):
        self._emit("INFO", "graph_built", nodes=nodes, edges=edges, rejected=rejected)

    def edge_rejected(self, edge, *, reason):
        self._emit(
            "WARNING", "edge_rejected", source=edge.source, target=edge.target, reason=reason
        )

    def heuristic_violation(self, edge, *, algo, estimate, cost):
        self._emit(
            "WARNING",
            "heuristic_violation",
            algo=algo,
            source=edge.source,
            target=edge.target,
            estimate=estimate,
            cost=_cost(cost),
        )

    def matrix_built(self, *, algo, nodes, ms):
        self._emit("INFO", "matrix_built", algo=algo, nodes=nodes, ms=ms)

    # queries

    def search_start(self, *, algo, start, goal):
        if self.debug:
            self._emit("DEBUG", "search_start", algo=algo, start=start, goal=goal)

    def settle(self, node_id, *, algo, g, frontier):
        self._settled += 1
        if self.debug and (self._settled % self.sample_every) == 0:
            self._emit("DEBUG", "settle", algo=algo, node=node_id, g=g, frontier=frontier)

    def search_end(self, *, algo, start, goal, status, cost, expanded, ms):
        self._emit(
            "INFO",
            "search_end",
            algo=algo,
            start=start,
            goal=goal,
            status=status,
            cost=_cost(cost),
            expanded=expanded,
            ms=ms,
        )
