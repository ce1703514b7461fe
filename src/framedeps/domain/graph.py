"""Build ordering — deterministic topological sort of a dependency graph.

Pure functions, no infrastructure dependencies. A graph maps every node to
the set of nodes it depends on directly; every dependency must itself be a
key of the graph. Consumed by the ordering service and the ``order`` command.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from enum import Enum
from typing import TypeAlias

import networkx as nx

DependencyGraph: TypeAlias = Mapping[str, Iterable[str]]


class GraphSortError(ValueError):
    """A graph that cannot be put into build order (cyclic or malformed)."""


class CyclicGraphError(GraphSortError):
    """A node is reachable from itself."""

    def __init__(self, cycle: list[str]) -> None:
        self.cycle = cycle
        super().__init__(f"Dependency cycle: {' -> '.join(cycle)}")


class MalformedGraphError(GraphSortError):
    """An identifier is referenced but is not a key of the graph."""

    def __init__(self, missing: str, *, dependent: str | None = None) -> None:
        self.missing = missing
        self.dependent = dependent
        if dependent is None:
            msg = f"'{missing}' is not defined in the graph"
        else:
            msg = f"'{dependent}' depends on '{missing}', which is not defined in the graph"
        super().__init__(msg)


class _Mark(Enum):
    IN_PROGRESS = 1
    DONE = 2


def transitive_closure(graph: DependencyGraph, nodes: Iterable[str] | None = None) -> set[str]:
    """Validate the graph below *nodes* and return their transitive closure.

    Walks depth-first from each root in ascending order, marking nodes
    in-progress on entry and done once every dependency is processed.
    With no *nodes* (or an empty set) every key is a root.

    Raises:
        CyclicGraphError: a dependency edge leads back to an in-progress node.
        MalformedGraphError: an identifier is not a key of *graph*.
    """
    roots = sorted(set(nodes or ())) or sorted(graph)
    marks: dict[str, _Mark] = {}

    for root in roots:
        if root not in graph:
            raise MalformedGraphError(root)
        if root in marks:
            continue

        # Explicit stack so deep graphs never hit the recursion limit.
        marks[root] = _Mark.IN_PROGRESS
        path = [root]
        pending = [iter(sorted(graph[root]))]
        while pending:
            dependency = next(pending[-1], None)
            if dependency is None:
                pending.pop()
                marks[path.pop()] = _Mark.DONE
                continue
            if dependency not in graph:
                raise MalformedGraphError(dependency, dependent=path[-1])

            mark = marks.get(dependency)
            if mark is _Mark.IN_PROGRESS:
                start = path.index(dependency)
                raise CyclicGraphError([*path[start:], dependency])
            if mark is None:
                marks[dependency] = _Mark.IN_PROGRESS
                path.append(dependency)
                pending.append(iter(sorted(graph[dependency])))

    return set(marks)


def sort_graph(graph: DependencyGraph, nodes: Iterable[str] | None = None) -> list[str]:
    """Return the closure of *nodes* in build order (dependencies first).

    Nodes that are free to go next are emitted in ascending identifier
    order, so the result depends only on the graph's content::

        >>> sort_graph({"B": {"A"}, "A": set(), "C": set()})
        ['A', 'B', 'C']

    Raises:
        GraphSortError: the closure is cyclic or references an undefined node.
    """
    closure = transitive_closure(graph, nodes)

    dag: nx.DiGraph[str] = nx.DiGraph()
    dag.add_nodes_from(closure)
    dag.add_edges_from((dependency, node) for node in closure for dependency in graph[node])
    return list(nx.lexicographical_topological_sort(dag))
