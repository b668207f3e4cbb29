"""Directed graph in which every vertex has at most one successor."""

from __future__ import annotations

import sys
from typing import Dict, Generic, Iterator, List, Optional, TextIO, TypeVar

from routefinder.errors import CycleDetected, InvalidIdentifier


T = TypeVar("T")


class Vertex(Generic[T]):

    """A vertex in a RestrictedGraph.

    Links to other vertices are stored as identifiers. The predecessors are
    kept in a dict (used as an ordered set) so that iteration follows the order
    in which edges were added.
    """

    def __init__(self, id: str):
        self.id = id
        self.payload: Optional[T] = None
        self.successor: Optional[str] = None
        self.predecessors: Dict[str, None] = {}

    def __repr__(self) -> str:
        return (
            f"Vertex(id={self.id!r}, payload={self.payload!r}, "
            f"successor={self.successor!r})"
        )

    @property
    def is_leaf(self) -> bool:
        return self.successor is None

    @property
    def is_head(self) -> bool:
        return not self.predecessors


class RestrictedGraph(Generic[T]):

    """A directed acyclic graph where out-degree is at most one.

    Many vertices may lead into the same vertex, but no vertex leads to more
    than one. Vertices are identified by strings and carry an optional payload
    of type T. They are created on first mention and never removed.

    The graph keeps the set of leaves (vertices without a successor) up to date
    after every mutation, so the search can start from them directly.
    """

    def __init__(self):
        self.vertices: Dict[str, Vertex[T]] = {}
        self._leaves: Dict[str, None] = {}

    def __repr__(self) -> str:
        return f"RestrictedGraph(N={len(self.vertices)}, leaves={len(self._leaves)})"

    def __len__(self) -> int:
        return len(self.vertices)

    def __contains__(self, id: object) -> bool:
        return id in self.vertices

    def __iter__(self) -> Iterator[Vertex[T]]:
        return iter(self.vertices.values())

    def dump(self, out: TextIO = sys.stdout):
        """Dump a textual representation of this graph to out."""
        for vertex in self.vertices.values():
            payload = ""
            if vertex.payload is not None:
                payload = f" = {vertex.payload!r}"
            arrow = f" -> {vertex.successor}" if vertex.successor is not None else ""
            print(f"{vertex.id}{payload}{arrow}", file=out)

    def add_or_update_vertex(self, id: str, data: Optional[T]):
        """Add the vertex if it is new, then set its payload to data."""
        self._find_or_add(id).payload = data

    def add_vertex(self, id: str):
        """Add the vertex if it is new. Existing vertices are left untouched."""
        self._find_or_add(id)

    def add_edge(self, id_from: str, id_to: str) -> bool:
        """Add the edge id_from -> id_to, creating vertices as needed.

        Returns False without changing anything if id_from already has a
        successor; the existing edge is never replaced. In that case id_to is
        not created either.

        Raises InvalidIdentifier if either id is None, and CycleDetected if the
        edge is a self-loop or would close a cycle.
        """
        if id_from is None or id_to is None:
            raise InvalidIdentifier(f"cannot add edge {id_from} -> {id_to}: missing id")
        if id_from == id_to:
            raise CycleDetected(f"cannot add edge {id_from} -> {id_to}: self-loop")
        source = self._find_or_add(id_from)
        if source.successor is not None:
            return False
        if self._creates_cycle(id_from, id_to):
            raise CycleDetected(f"adding edge {id_from} -> {id_to} creates a cycle")
        self._find_or_add(id_to)
        self._commit_edge(id_from, id_to)
        return True

    def is_empty(self) -> bool:
        return not self.vertices

    def size(self) -> int:
        return len(self.vertices)

    def contains(self, id: str) -> bool:
        return id in self.vertices

    def vertex(self, id: str) -> Optional[Vertex[T]]:
        """Get the vertex with the given id, or None if it does not exist."""
        return self.vertices.get(id)

    def get_payload(self, id: str) -> Optional[T]:
        """Get the vertex payload, or None if the vertex does not exist."""
        vertex = self.vertices.get(id)
        return vertex.payload if vertex else None

    def edge_exists(self, id_from: str, id_to: str) -> bool:
        """Check that id_from -> id_to is linked in both directions."""
        if id_from is None or id_to is None:
            return False
        source = self.vertices.get(id_from)
        dest = self.vertices.get(id_to)
        if source is None or dest is None:
            return False
        return source.successor == id_to and id_from in dest.predecessors

    def is_leaf(self, id: str) -> bool:
        return id is not None and id in self._leaves

    def leaves(self) -> List[Vertex[T]]:
        """Return a snapshot of the current leaf vertices."""
        return [self.vertices[id] for id in self._leaves]

    def heads(self) -> List[Vertex[T]]:
        """Return the vertices that have no predecessors."""
        return [v for v in self.vertices.values() if v.is_head]

    def _find_or_add(self, id: str) -> Vertex[T]:
        if id is None:
            raise InvalidIdentifier("cannot add vertex with a missing id")
        vertex = self.vertices.get(id)
        if vertex is None:
            vertex = Vertex(id)
            self.vertices[id] = vertex
            self._leaves[id] = None
        return vertex

    def _creates_cycle(self, id_from: str, id_to: str) -> bool:
        """Check whether id_from is reachable by following id_to's successors."""
        current: Optional[str] = id_to
        while current is not None:
            if current == id_from:
                return True
            vertex = self.vertices.get(current)
            current = vertex.successor if vertex else None
        return False

    def _commit_edge(self, id_from: str, id_to: str):
        # Both endpoints exist and id_from has no successor at this point.
        self.vertices[id_from].successor = id_to
        self.vertices[id_to].predecessors[id_from] = None
        del self._leaves[id_from]
