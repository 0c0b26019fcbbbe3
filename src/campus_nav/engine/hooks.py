# engine/hooks.py
from typing import Protocol

from campus_nav.domain.entities.geography import Edge


class RouterHooks(Protocol):
    def graph_built(self, *, nodes, edges, rejected): ...
    def edge_rejected(self, edge: Edge, *, reason: str): ...
    def heuristic_violation(self, edge: Edge, *, algo, estimate, cost): ...
    def search_start(self, *, algo, start, goal): ...
    def settle(self, node_id: str, *, algo, g, frontier):
        """Called on every frontier pop; raising here aborts the search (deadline seam)."""

    def search_end(self, *, algo, start, goal, status, cost, expanded, ms): ...
    def matrix_built(self, *, algo, nodes, ms): ...


class NoopHooks:
    def graph_built(self, **_):
        pass

    def edge_rejected(self, *_, **__):
        pass

    def heuristic_violation(self, *_, **__):
        pass

    def search_start(self, **_):
        pass

    def settle(self, *_, **__):
        pass

    def search_end(self, **_):
        pass

    def matrix_built(self, **_):
        pass
