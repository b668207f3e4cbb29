"""Longest route search in a RestrictedGraph."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, NamedTuple, Optional

from routefinder.graph import RestrictedGraph, Vertex


class RouteStop(NamedTuple):

    """One vertex on a route: its identifier and payload."""

    id: str
    payload: Any


def find_longest_route(graph: RestrictedGraph[Any]) -> List[RouteStop]:
    """Find the longest chain of vertices in the graph.

    The graph is traversed backwards starting from the leaves. A vertex's
    length is the number of vertices from it to its leaf, so each vertex is
    computed from its successor, which is always resolved first. An explicit
    stack replaces recursion, and each vertex is pushed exactly once because it
    has a single successor.

    Returns the stops from head to leaf, or an empty list for an empty graph.
    When several routes share the maximum length, the first one found wins.
    """
    if graph.is_empty():
        return []

    max_length = 0
    best_head: Optional[Vertex[Any]] = None
    lengths: Dict[str, int] = {}
    stack: List[Vertex[Any]] = []

    for leaf in graph.leaves():
        lengths[leaf.id] = 1
        if leaf.is_head and max_length < 1:
            max_length = 1
            best_head = leaf
        stack.extend(graph.vertices[p] for p in leaf.predecessors)
        while stack:
            current = stack.pop()
            # Popped vertices have a successor whose length is already known.
            length = lengths[current.successor] + 1  # type: ignore[index]
            lengths[current.id] = length
            if current.is_head:
                if length > max_length:
                    max_length = length
                    best_head = current
            else:
                stack.extend(graph.vertices[p] for p in current.predecessors)

    logging.debug("computed %d route lengths, longest is %d", len(lengths), max_length)
    return collect_route(graph, best_head)


def collect_route(
    graph: RestrictedGraph[Any], head: Optional[Vertex[Any]]
) -> List[RouteStop]:
    """Walk forward from head to its leaf, collecting the stops."""
    route = []
    vertex = head
    while vertex is not None:
        route.append(RouteStop(vertex.id, vertex.payload))
        vertex = (
            graph.vertex(vertex.successor) if vertex.successor is not None else None
        )
    return route
