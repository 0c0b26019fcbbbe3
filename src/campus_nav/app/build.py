# campus_nav/app/build.py
from collections.abc import Mapping
from dataclasses import dataclass

from campus_nav.app.protocols import GraphSource, Router
from campus_nav.config.models import NavigatorModel
from campus_nav.domain.graph import CampusGraph, NodeRef
from campus_nav.domain.results import PathResult
from campus_nav.engine.hooks import NoopHooks, RouterHooks
from campus_nav.io.route_logging import RouteLogging  # JSON logs
from campus_nav.runtime.registries import make_router, make_source


@dataclass
class App:
    graph: CampusGraph
    routers: dict[str, Router]
    hooks: RouterHooks

    def router(self, kind: str | None = None) -> Router:
        if kind is None:
            return next(iter(self.routers.values()))
        try:
            return self.routers[kind]
        except KeyError:
            raise ValueError(f"Router {kind!r} not configured; have {list(self.routers)}") from None

    def route(self, start: NodeRef, goal: NodeRef, *, kind: str | None = None) -> PathResult:
        return self.router(kind).shortest_path(start, goal)

    def compare(self, start: NodeRef, goal: NodeRef) -> dict[str, PathResult]:
        return {k: r.shortest_path(start, goal) for k, r in self.routers.items()}


def build(
    cfg: NavigatorModel | Mapping,
    *,
    use_logging: bool = True,
    source: GraphSource | None = None,
) -> App:
    # 0) Validate config
    model = cfg if isinstance(cfg, NavigatorModel) else NavigatorModel.model_validate(cfg)

    # 1) Hooks
    hooks = (
        RouteLogging(
            session_id=model.session_id,
            level=model.log.level,
            debug=model.log.debug,
            sample_every=model.log.sample_every,
        )
        if use_logging
        else NoopHooks()
    )

    # 2) Graph from the injected source, else the configured one
    src = source if source is not None else make_source(model.source)
    graph = CampusGraph.from_source(src, hooks=hooks, strict=model.strict)

    # 3) Routers share the graph read-only
    routers = {r.kind: make_router(r, graph=graph, deps={"hooks": hooks}) for r in model.routers}

    return App(graph, routers, hooks)
