# tests/conftest.py
import pytest

from campus_nav.domain.entities.geography import Node
from campus_nav.domain.graph import CampusGraph

UG_PATHS = [
    ("Main Gate", "Administration", 200),
    ("Main Gate", "Bus Terminal", 150),
    ("Administration", "Library", 300),
    ("Library", "Science Block", 250),
    ("Science Block", "Engineering Block", 400),
    ("Engineering Block", "Computing Center", 200),
    ("Library", "JQB", 350),
    ("JQB", "Great Hall", 300),
    ("Great Hall", "Sports Complex", 500),
    ("Administration", "Medical Center", 400),
    ("Medical Center", "Bank", 150),
    ("Bank", "Bus Terminal", 100),
    ("Computing Center", "Bank", 300),
]

UG_LOCATIONS = [
    "Main Gate",
    "Library",
    "Science Block",
    "Engineering Block",
    "Great Hall",
    "JQB",
    "Administration",
    "Sports Complex",
    "Medical Center",
    "Bus Terminal",
    "Computing Center",
    "Bank",
]


@pytest.fixture
def bank_graph() -> CampusGraph:
    g = CampusGraph()
    bank, library, cafeteria = (
        Node.named("Bank", 2, 4),
        Node.named("Library", 5, 7),
        Node.named("Cafeteria", 6, 1),
    )
    for n in (bank, library, cafeteria):
        g.add_node(n)
    g.add_edge(bank, library, 2)
    g.add_edge(library, cafeteria, 2)
    g.add_edge(bank, cafeteria, 10)
    return g


@pytest.fixture
def direct_graph() -> CampusGraph:
    g = CampusGraph()
    a, b, c = Node.named("A", 0, 0), Node.named("B", 1, 1), Node.named("C", 2, 2)
    for n in (a, b, c):
        g.add_node(n)
    g.add_edge(a, c, 3)
    g.add_edge(a, b, 5)
    g.add_edge(b, c, 5)
    return g


@pytest.fixture
def split_graph() -> CampusGraph:
    g = CampusGraph()
    g.add_node(Node.named("A", 0, 0))
    g.add_node(Node.named("B", 1, 1))
    return g


@pytest.fixture
def ug_graph() -> CampusGraph:
    g = CampusGraph()
    for name in UG_LOCATIONS:
        g.add_node(Node.named(name))
    for a, b, w in UG_PATHS:
        assert g.add_edge(a, b, w)
    return g
