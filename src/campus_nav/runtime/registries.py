# runtime/registries.py
from collections.abc import Callable
from typing import Any

from campus_nav.app.protocols import GraphSource, Router
from campus_nav.config.models import (
    GraphDataModel,
    RouterAStarModel,
    RouterDijkstraModel,
    RouterFloydWarshallModel,
    RouterUnion,
    SourceFileModel,
    SourceInlineModel,
    SourceStaticModel,
    SourceUnion,
)
from campus_nav.data.campus import DATASETS, TableSource
from campus_nav.domain.entities.geography import Metric
from campus_nav.domain.graph import CampusGraph
from campus_nav.domain.routing.routing_all_pairs import FloydWarshallRouter
from campus_nav.domain.routing.routing_heuristics import Heuristic, euclidean, haversine_m, zero
from campus_nav.domain.routing.routing_search import AStarRouter, DijkstraRouter
from campus_nav.runtime.resources import load_graph_data_from_path

RouterFactory = Callable[[RouterUnion, CampusGraph, dict], Router]
SourceFactory = Callable[[SourceUnion, dict], GraphSource]

_router_registry: dict[str, RouterFactory] = {}
_source_registry: dict[str, SourceFactory] = {}
_heuristic_registry: dict[str, Heuristic] = {
    "euclidean": euclidean,
    "haversine": haversine_m,
    "zero": zero,
}


# ------------------- Graph sources ---------------------------


def register_source(kind: str):
    def deco(fn: SourceFactory):
        _source_registry[kind] = fn
        return fn

    return deco


def make_source(cfg: SourceUnion, *, deps: dict[str, Any] | None = None) -> GraphSource:
    try:
        factory = _source_registry[cfg.kind]
    except KeyError:
        raise ValueError(f"Unknown source kind {cfg.kind!r}") from None
    return factory(cfg, deps or {})


def _table(data: GraphDataModel) -> TableSource:
    return TableSource(
        tuple(n.to_node() for n in data.nodes),
        tuple(e.to_edge() for e in data.edges),
    )


@register_source("static")
def _make_static(cfg: SourceStaticModel, deps):
    return DATASETS[cfg.dataset]()


@register_source("inline")
def _make_inline(cfg: SourceInlineModel, deps):
    return _table(cfg)


@register_source("file")
def _make_file(cfg: SourceFileModel, deps):
    data = load_graph_data_from_path(cfg.file, cfg.fmt)
    if data is None:
        if cfg.must_exist:
            raise FileNotFoundError(cfg.file)
        return TableSource((), ())
    return _table(data)


# --------------------- Routers ---------------------


def register_router(kind: str):
    def deco(fn: RouterFactory):
        _router_registry[kind] = fn
        return fn

    return deco


def make_router(
    cfg: RouterUnion, *, graph: CampusGraph, deps: dict[str, Any] | None = None
) -> Router:
    try:
        factory = _router_registry[cfg.kind]
    except KeyError:
        raise ValueError(f"Unknown router kind {cfg.kind!r}") from None
    return factory(cfg, graph, deps or {})


@register_router("astar")
def _make_astar(cfg: RouterAStarModel, graph, deps):
    return AStarRouter(
        graph,
        heuristic=_heuristic_registry[cfg.heuristic],
        vmax=cfg.vmax,
        metric=Metric(cfg.metric),
        check_consistency=cfg.check_consistency,
        hooks=deps.get("hooks"),
    )


@register_router("dijkstra")
def _make_dijkstra(cfg: RouterDijkstraModel, graph, deps):
    return DijkstraRouter(graph, metric=Metric(cfg.metric), hooks=deps.get("hooks"))


@register_router("floyd_warshall")
def _make_floyd_warshall(cfg: RouterFloydWarshallModel, graph, deps):
    return FloydWarshallRouter(graph, metric=Metric(cfg.metric), hooks=deps.get("hooks"))
