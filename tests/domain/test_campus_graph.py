# tests/domain/test_campus_graph.py
import math

import pytest

from campus_nav.data.campus import TableSource
from campus_nav.domain.entities.geography import Edge, Metric, Node
from campus_nav.domain.errors import MalformedEdge, UnknownLocation
from campus_nav.domain.graph import CampusGraph
from campus_nav.engine.hooks import NoopHooks


class _RecordingHooks(NoopHooks):
    def __init__(self):
        self.rejected = []
        self.built = None

    def edge_rejected(self, edge, *, reason):
        self.rejected.append((edge.source, edge.target, reason))

    def graph_built(self, *, nodes, edges, rejected):
        self.built = (nodes, edges, rejected)


# ---------- Node / Edge


def test_node_identity_ignores_coordinates_and_name():
    a = Node("lib1", "Balme Library", 1.0, 2.0)
    b = Node("lib1", "Somewhere else", 9.0, 9.0)
    assert a == b
    assert hash(a) == hash(b)
    assert len({a, b}) == 1
    assert Node("lib1") != Node("lib2")


def test_node_named_uses_name_as_id_and_point_needs_both_coords():
    n = Node.named("Great Hall", 3.0, 4.0)
    assert n.id == n.name == "Great Hall"
    assert n.point is not None and n.point.x == 3.0
    assert Node("x", x=1.0).point is None
    assert Node("x").name == "x"


def test_edge_cost_by_metric():
    e = Edge("a", "b", 120.0, 2, "paved_walkway")
    assert e.cost() == 120.0
    assert e.cost(Metric.TIME) == 2.0
    assert math.isinf(Edge("a", "b", 5.0).cost(Metric.TIME))
    r = e.reversed()
    assert (r.source, r.target, r.weight, r.secondary_weight) == ("b", "a", 120.0, 2)


# ---------- CampusGraph contract


def test_add_node_is_idempotent_and_keeps_adjacency(bank_graph: CampusGraph):
    before = bank_graph.neighbors("Bank")
    stored = bank_graph.add_node(Node.named("Bank", 100, 100))
    assert stored.x == 2  # first one wins
    assert len(bank_graph) == 3
    assert bank_graph.neighbors("Bank") == before


def test_add_edge_is_undirected(bank_graph: CampusGraph):
    out_bank = {(e.target, e.weight) for e in bank_graph.neighbors("Bank")}
    out_lib = {(e.target, e.weight) for e in bank_graph.neighbors("Library")}
    assert out_bank == {("Library", 2.0), ("Cafeteria", 10.0)}
    assert ("Bank", 2.0) in out_lib
    assert bank_graph.edge_count() == 3


def test_self_loop_stored_once():
    g = CampusGraph()
    g.add_node(Node("a"))
    assert g.add_edge("a", "a", 1.0)
    assert len(g.neighbors("a")) == 1


def test_neighbors_of_unknown_or_isolated_is_empty(split_graph: CampusGraph):
    assert split_graph.neighbors("A") == ()
    assert split_graph.neighbors("nowhere") == ()


def test_lookup_and_membership(bank_graph: CampusGraph):
    assert "Bank" in bank_graph
    assert Node("Library") in bank_graph
    assert "Atlantis" not in bank_graph
    assert 42 not in bank_graph
    assert bank_graph.get("Atlantis") is None
    with pytest.raises(UnknownLocation) as ei:
        bank_graph.node("Atlantis")
    assert ei.value.location_id == "Atlantis"
    assert isinstance(ei.value, KeyError)


def test_all_nodes_and_stable_order(bank_graph: CampusGraph):
    assert bank_graph.all_nodes() == frozenset(
        {Node("Bank"), Node("Library"), Node("Cafeteria")}
    )
    assert bank_graph.node_ids() == ["Bank", "Library", "Cafeteria"]


# ---------- Malformed edges


def test_edge_to_unknown_node_is_skipped_and_reported():
    hooks = _RecordingHooks()
    g = CampusGraph(hooks=hooks)
    g.add_node(Node("a"))
    assert g.add_edge("a", "ghost", 10) is False
    assert g.add_edge("ghost", "a", 10) is False
    assert g.neighbors("a") == ()
    assert "ghost" not in g
    assert [r.reason for r in g.rejected] == ["unknown_target", "unknown_source"]
    assert hooks.rejected == [("a", "ghost", "unknown_target"), ("ghost", "a", "unknown_source")]


@pytest.mark.parametrize(
    "edge, reason",
    [
        (Edge("a", "b", -1.0), "negative_weight"),
        (Edge("a", "b", math.inf), "non_finite_weight"),
        (Edge("a", "b", math.nan), "non_finite_weight"),
        (Edge("a", "b", 1.0, -3), "negative_secondary_weight"),
    ],
)
def test_bad_weights_are_rejected(edge, reason):
    g = CampusGraph()
    g.add_node(Node("a"))
    g.add_node(Node("b"))
    assert g.add_edge_record(edge) is False
    assert g.rejected[0].reason == reason
    assert g.edge_count() == 0


def test_strict_graph_raises():
    g = CampusGraph(strict=True)
    g.add_node(Node("a"))
    with pytest.raises(MalformedEdge) as ei:
        g.add_edge("a", "ghost", 1)
    assert ei.value.reason == "unknown_target"
    assert g.neighbors("a") == ()


def test_from_source_builds_and_reports():
    hooks = _RecordingHooks()
    src = TableSource(
        (Node("a"), Node("b"), Node("a", "duplicate")),
        (Edge("a", "b", 4.0), Edge("b", "zzz", 1.0)),
    )
    g = CampusGraph.from_source(src, hooks=hooks)
    assert g.node_ids() == ["a", "b"]
    assert g.node("a").name == "a"
    assert g.edge_count() == 1
    assert hooks.built == (2, 1, 1)
