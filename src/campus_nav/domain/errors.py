# domain/errors.py


class RoutingError(Exception):
    pass


class UnknownLocation(RoutingError, KeyError):
    def __init__(self, location_id: str):
        super().__init__(location_id)
        self.location_id = location_id

    def __str__(self) -> str:
        return f"unknown location {self.location_id!r}"


class MalformedEdge(RoutingError, ValueError):
    """Edge rejected at graph construction time; `reason` is a stable short code."""

    def __init__(self, edge, reason: str):
        super().__init__(f"{reason}: {edge.source!r} -> {edge.target!r}")
        self.edge = edge
        self.reason = reason


class InvalidThreshold(RoutingError, ValueError):
    pass
