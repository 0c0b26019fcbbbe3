# domain/graph.py
import math

from campus_nav.app.protocols import GraphSource
from campus_nav.domain.entities.geography import Edge, Node
from campus_nav.domain.errors import MalformedEdge, UnknownLocation
from campus_nav.engine.hooks import NoopHooks, RouterHooks

NodeRef = str | Node


def node_key(n: NodeRef) -> str:
    return n.id if isinstance(n, Node) else n


class CampusGraph:
    """
    Undirected weighted graph over campus locations.

    Owns two maps: id -> Node and id -> outgoing edges (both directions of every accepted
    path). Edges naming unknown locations are rejected, recorded in `rejected` and
    reported to the hooks; with `strict=True` they raise MalformedEdge instead.
    Routers treat the graph as read-only.
    """

    def __init__(self, *, hooks: RouterHooks | None = None, strict: bool = False):
        self._nodes: dict[str, Node] = {}
        self._adj: dict[str, list[Edge]] = {}
        self._edges: list[Edge] = []
        self._hooks = hooks or NoopHooks()
        self.strict = strict
        self.rejected: list[MalformedEdge] = []

    @classmethod
    def from_source(
        cls, source: GraphSource, *, hooks: RouterHooks | None = None, strict: bool = False
    ) -> "CampusGraph":
        g = cls(hooks=hooks, strict=strict)
        for n in source.nodes():
            g.add_node(n)
        for e in source.edges():
            g.add_edge_record(e)
        g._hooks.graph_built(nodes=len(g), edges=g.edge_count(), rejected=len(g.rejected))
        return g

    # ---------------- construction ----------------

    def add_node(self, node: Node) -> Node:
        existing = self._nodes.get(node.id)
        if existing is not None:
            return existing
        self._nodes[node.id] = node
        self._adj[node.id] = []
        return node

    def add_edge(
        self,
        a: NodeRef,
        b: NodeRef,
        weight: float,
        *,
        secondary_weight: int | None = None,
        category: str | None = None,
    ) -> bool:
        return self.add_edge_record(
            Edge(node_key(a), node_key(b), float(weight), secondary_weight, category)
        )

    def add_edge_record(self, edge: Edge) -> bool:
        try:
            self._check(edge)
        except MalformedEdge as exc:
            if self.strict:
                raise
            self.rejected.append(exc)
            self._hooks.edge_rejected(edge, reason=exc.reason)
            return False
        self._adj[edge.source].append(edge)
        if edge.target != edge.source:
            self._adj[edge.target].append(edge.reversed())
        self._edges.append(edge)
        return True

    def _check(self, edge: Edge) -> None:
        if edge.source not in self._nodes:
            raise MalformedEdge(edge, "unknown_source")
        if edge.target not in self._nodes:
            raise MalformedEdge(edge, "unknown_target")
        if not math.isfinite(edge.weight):
            raise MalformedEdge(edge, "non_finite_weight")
        if edge.weight < 0:
            raise MalformedEdge(edge, "negative_weight")
        if edge.secondary_weight is not None and edge.secondary_weight < 0:
            raise MalformedEdge(edge, "negative_secondary_weight")

    # ---------------- queries ----------------

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, n) -> bool:
        return isinstance(n, (str, Node)) and node_key(n) in self._nodes

    def node(self, node_id: NodeRef) -> Node:
        try:
            return self._nodes[node_key(node_id)]
        except KeyError:
            raise UnknownLocation(node_key(node_id)) from None

    def get(self, node_id: NodeRef) -> Node | None:
        return self._nodes.get(node_key(node_id))

    def neighbors(self, node_id: NodeRef) -> tuple[Edge, ...]:
        return tuple(self._adj.get(node_key(node_id), ()))

    def all_nodes(self) -> frozenset[Node]:
        return frozenset(self._nodes.values())

    def nodes(self) -> tuple[Node, ...]:
        return tuple(self._nodes.values())

    def node_ids(self) -> list[str]:
        # insertion order; the all-pairs engine indexes by this
        return list(self._nodes)

    def edges(self) -> tuple[Edge, ...]:
        return tuple(self._edges)

    def edge_count(self) -> int:
        return len(self._edges)
