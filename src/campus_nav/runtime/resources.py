# campus_nav/runtime/resources.py
import os
from functools import lru_cache

from campus_nav.config.models import GraphDataModel


def load_graph_data_from_path(file: str, fmt: str = "json") -> GraphDataModel | None:
    """Parse and validate a graph data file; None when the file does not exist."""
    if fmt != "json":
        raise ValueError(f"Unsupported graph fmt {fmt!r}")
    if not os.path.exists(file):
        return None  # not cached: the file may appear later
    return _parse_graph_data(file, fmt)


@lru_cache(maxsize=8)
def _parse_graph_data(file: str, fmt: str) -> GraphDataModel:
    with open(file, encoding="utf-8") as f:
        return GraphDataModel.model_validate_json(f.read())
