# tests/runtime/test_registries_and_resources.py
import json

import pytest

from campus_nav.config.models import (
    RouterAStarModel,
    RouterDijkstraModel,
    SourceFileModel,
    SourceInlineModel,
    SourceStaticModel,
)
from campus_nav.domain.entities.geography import Metric
from campus_nav.domain.graph import CampusGraph
from campus_nav.domain.routing.routing_heuristics import haversine_m, heuristic_violations
from campus_nav.domain.routing.routing_search import AStarRouter
from campus_nav.engine.hooks import NoopHooks
from campus_nav.runtime.registries import make_router, make_source, register_router
from campus_nav.runtime.resources import load_graph_data_from_path

GRAPH = {
    "nodes": [
        {"id": "gate", "x": 0.0, "y": 0.0},
        {"id": "hall", "x": 3.0, "y": 4.0},
        {"id": "lib", "x": 6.0, "y": 8.0},
    ],
    "edges": [
        {"source": "gate", "target": "hall", "weight": 5, "secondary_weight": 2},
        {"source": "hall", "target": "lib", "weight": 5, "secondary_weight": 2},
        {"source": "gate", "target": "lib", "weight": 12, "secondary_weight": 1},
    ],
}


@pytest.fixture
def graph_file(tmp_path):
    p = tmp_path / "graph.json"
    p.write_text(json.dumps(GRAPH), encoding="utf-8")
    return str(p)


def test_load_graph_data_from_path(graph_file):
    data = load_graph_data_from_path(graph_file)
    assert [n.id for n in data.nodes] == ["gate", "hall", "lib"]
    assert load_graph_data_from_path(graph_file) is data  # cached


def test_load_missing_file_and_bad_format(tmp_path):
    assert load_graph_data_from_path(str(tmp_path / "nope.json")) is None
    with pytest.raises(ValueError, match="Unsupported"):
        load_graph_data_from_path(str(tmp_path / "g.pkl"), "pickle")


def test_missing_file_is_not_cached(tmp_path):
    p = tmp_path / "late.json"
    cfg = SourceFileModel(file=str(p), must_exist=False)
    assert list(make_source(cfg).nodes()) == []

    p.write_text(json.dumps(GRAPH), encoding="utf-8")
    assert [n.id for n in make_source(cfg).nodes()] == ["gate", "hall", "lib"]


def test_file_source_builds_graph(graph_file):
    g = CampusGraph.from_source(make_source(SourceFileModel(file=graph_file)))
    assert len(g) == 3 and g.edge_count() == 3
    assert g.node("lib").point.y == 8.0


def test_file_source_must_exist(tmp_path):
    missing = str(tmp_path / "missing.json")
    with pytest.raises(FileNotFoundError):
        make_source(SourceFileModel(file=missing))
    src = make_source(SourceFileModel(file=missing, must_exist=False))
    assert list(src.nodes()) == [] and list(src.edges()) == []


def test_static_and_inline_sources():
    assert len(list(make_source(SourceStaticModel(dataset="network")).nodes())) == 58
    inline = SourceInlineModel.model_validate(GRAPH)
    assert [e.target for e in make_source(inline).edges()] == ["hall", "lib", "lib"]


def test_unknown_kinds_raise():
    class _Odd:
        kind = "carrier_pigeon"

    with pytest.raises(ValueError, match="Unknown source kind"):
        make_source(_Odd())
    with pytest.raises(ValueError, match="Unknown router kind"):
        make_router(_Odd(), graph=CampusGraph())


def test_router_factories_pass_config_through(graph_file):
    g = CampusGraph.from_source(make_source(SourceFileModel(file=graph_file)))
    hooks = NoopHooks()
    astar = make_router(
        RouterAStarModel(heuristic="haversine", metric="time"), graph=g, deps={"hooks": hooks}
    )
    assert isinstance(astar, AStarRouter)
    assert astar.metric is Metric.TIME
    assert astar._hooks is hooks
    # great-circle metres against minutes: every edge breaks the bound, vmax is raised
    assert len(astar.violations) == 3 and astar.vmax > 1.0
    assert heuristic_violations(g, astar.h, Metric.TIME) == []
    assert astar.shortest_path("gate", "lib").total_cost == 1.0

    raw = make_router(
        RouterAStarModel(heuristic="haversine", check_consistency=False), graph=g
    )
    assert raw.h is haversine_m and raw.violations == []

    d = make_router(RouterDijkstraModel(metric="time"), graph=g)
    r = d.shortest_path("gate", "lib")
    assert r.node_sequence == ("gate", "lib") and r.total_cost == 1.0


def test_register_router_extends_registry():
    @register_router("always_stub")
    def _make(cfg, graph, deps):
        return ("stub", graph)

    class _Cfg:
        kind = "always_stub"

    g = CampusGraph()
    assert make_router(_Cfg(), graph=g) == ("stub", g)
