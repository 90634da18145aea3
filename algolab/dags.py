"""A predefined directed acyclic graph with known traversal and path results."""

from __future__ import annotations

from algolab.graph import Graph


class BenchDagOne:
    """Six-vertex DAG::

        A  -->  B  -->  C
        |       |    ^  ^
        V       V   /   |
        D  -->  E  -->  F
    """

    def __init__(self) -> None:
        g = Graph()
        self.a = g.add_vertex("A")
        self.b = g.add_vertex("B")
        self.c = g.add_vertex("C")
        self.d = g.add_vertex("D")
        self.e = g.add_vertex("E")
        self.f = g.add_vertex("F")

        g.add_edge(self.a, self.b, distance=1.0)
        g.add_edge(self.a, self.d, distance=2.0)
        g.add_edge(self.b, self.c, distance=4.0)
        g.add_edge(self.b, self.e, distance=2.0)
        g.add_edge(self.d, self.e, distance=1.0)
        g.add_edge(self.e, self.c, distance=2.0)
        g.add_edge(self.e, self.f, distance=1.0)
        g.add_edge(self.f, self.c, distance=1.0)
        self.graph = g

        a, b, c, d, e, f = self.a, self.b, self.c, self.d, self.e, self.f
        self._dfs = {
            a: [b, c, e, f, d],
            b: [c, e, f],
            c: [],
            d: [e, c, f],
            e: [c, f],
            f: [c],
        }
        self._bfs = {
            a: [b, d, c, e, f],
            b: [c, e, f],
            c: [],
            d: [e, c, f],
            e: [c, f],
            f: [c],
        }
        self._shortest = {
            (a, e): [[b, e], [d, e]],
            (a, c): [[b, c], [b, e, c], [b, e, f, c], [d, e, c], [d, e, f, c]],
        }

    def bfs_from_gold(self, vertex: int) -> list[int]:
        """Expected breadth-first visiting order from a vertex, start excluded."""
        return list(self._bfs[vertex])

    def dfs_from_gold(self, vertex: int) -> list[int]:
        """Expected depth-first visiting order from a vertex, start excluded."""
        return list(self._dfs[vertex])

    def shortest_paths_gold(self, source: int, target: int) -> list[list[int]]:
        """Expected shortest paths between a known pair, source excluded."""
        return [list(p) for p in self._shortest[(source, target)]]