"""OrderService — build order for a resolved dependency graph.

Wraps :func:`framedeps.domain.graph.sort_graph` in the ServiceResult
contract. A cyclic or malformed graph blocks the build: it is reported
as a failure naming the condition, never as a partial order.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from framedeps.domain.graph import CyclicGraphError, DependencyGraph, MalformedGraphError, sort_graph
from framedeps.infrastructure.graph_file import GraphFileError, load_graph
from framedeps.services.base import BaseService
from framedeps.services.result import ServiceResult

logger = logging.getLogger(__name__)


class OrderService(BaseService):
    """Computes the order in which dependencies must be built."""

    def order(self, graph: DependencyGraph, nodes: Iterable[str] | None = None) -> ServiceResult:
        """Sort *graph*, restricted to the closure of *nodes* when given."""
        requested = sorted(set(nodes or ()))
        try:
            ordered = sort_graph(graph, requested)
        except CyclicGraphError as exc:
            return ServiceResult.failure(
                "order",
                "CYCLIC_GRAPH",
                f"Unsatisfiable build order. {exc}",
                cycle=exc.cycle,
            )
        except MalformedGraphError as exc:
            return ServiceResult.failure(
                "order",
                "MALFORMED_GRAPH",
                f"Malformed dependency graph: {exc}",
                missing=exc.missing,
                dependent=exc.dependent,
            )

        logger.debug("Ordered %d of %d nodes", len(ordered), len(graph))
        return ServiceResult(
            ok=True,
            op="order",
            data={"nodes": requested, "count": len(ordered), "items": ordered},
        )

    def order_file(self, path: str | Path, nodes: Iterable[str] | None = None) -> ServiceResult:
        """Load a graph file and sort it."""
        graph_path = Path(path)
        try:
            graph = load_graph(graph_path)
        except GraphFileError as exc:
            return ServiceResult.failure("order", "INVALID_GRAPH_FILE", str(exc), path=str(graph_path))
        return self.order(graph, nodes)
