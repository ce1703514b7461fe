"""Dependency graph files — ``name -> [dependencies]`` in JSON or TOML.

The format is a flat table, e.g. ``graph.toml``::

    Carthage = ["Commandant", "ReactiveTask"]
    Commandant = ["Result"]
    Result = []
"""

from __future__ import annotations

import json
import tomllib
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

_GRAPH_ADAPTER: TypeAdapter[dict[str, frozenset[str]]] = TypeAdapter(dict[str, frozenset[str]])


class GraphFileError(ValueError):
    """A graph file that is missing, unparsable, or of the wrong shape."""


def load_graph(path: Path) -> dict[str, frozenset[str]]:
    """Read a graph file; the suffix selects TOML (``.toml``) or JSON."""
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        msg = f"Cannot read graph file {path}: {exc.strerror or exc}"
        raise GraphFileError(msg) from exc

    try:
        data = tomllib.loads(raw) if path.suffix == ".toml" else json.loads(raw)
    except (tomllib.TOMLDecodeError, json.JSONDecodeError) as exc:
        msg = f"Invalid graph file {path}: {exc}"
        raise GraphFileError(msg) from exc

    try:
        return _GRAPH_ADAPTER.validate_python(data)
    except ValidationError as exc:
        msg = f"Graph file {path} must map names to lists of names ({exc.error_count()} errors)"
        raise GraphFileError(msg) from exc
