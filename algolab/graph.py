"""A small directed graph with bidirectional edge access and edge properties."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator


@dataclass(eq=False)
class Edge:
    """A directed edge with the properties used by the graph algorithms."""

    source: int
    target: int
    distance: float = 0.0
    flow: int = 0
    capacity: int = 0
    cost: int = 0


class Graph:
    """Directed graph whose vertices are consecutive integers.

    Out-edges of a vertex are kept in insertion order, so traversals visit
    children in the order their edges were added.
    """

    def __init__(self) -> None:
        self._names: list[str] = []
        self._out: list[list[Edge]] = []
        self._in: list[list[Edge]] = []

    def __len__(self) -> int:
        return len(self._names)

    def __contains__(self, vertex: object) -> bool:
        return (
            isinstance(vertex, int)
            and not isinstance(vertex, bool)
            and 0 <= vertex < len(self._names)
        )

    def _check(self, vertex: int) -> None:
        if vertex not in self:
            raise IndexError(f"no such vertex: {vertex!r}")

    def add_vertex(self, name: str) -> int:
        """Add a named vertex and return its descriptor."""
        self._names.append(name)
        self._out.append([])
        self._in.append([])
        return len(self._names) - 1

    def add_edge(self, source: int, target: int, **kwargs) -> Edge:
        """Add an edge from source to target with the given properties."""
        self._check(source)
        self._check(target)
        edge = Edge(source, target, **kwargs)
        self._out[source].append(edge)
        self._in[target].append(edge)
        return edge

    def vertices(self) -> range:
        """All vertex descriptors, in insertion order."""
        return range(len(self._names))

    def edges(self) -> Iterator[Edge]:
        """All edges, grouped by source vertex, in insertion order."""
        for out in self._out:
            yield from out

    def out_edges(self, vertex: int) -> list[Edge]:
        """The edges leaving a vertex."""
        self._check(vertex)
        return list(self._out[vertex])

    def adjacent_vertices(self, vertex: int) -> list[int]:
        """Targets of the edges leaving a vertex, in edge order."""
        return [edge.target for edge in self.out_edges(vertex)]

    def edge(self, source: int, target: int) -> Edge | None:
        """The first edge from source to target, or None if there is none."""
        self._check(source)
        self._check(target)
        return next((e for e in self._out[source] if e.target == target), None)

    def name(self, vertex: int) -> str:
        """The name a vertex was given."""
        self._check(vertex)
        return self._names[vertex]