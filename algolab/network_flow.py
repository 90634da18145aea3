"""Maximum flow by augmenting paths in a residual network."""

from __future__ import annotations

from collections import deque

from algolab.graph import Graph


def _build_residual(graph: Graph) -> list[dict[int, int]]:
    """Residual capacities indexed as residual[u][v], in edge insertion order."""
    residual: list[dict[int, int]] = [{} for _ in graph.vertices()]
    for edge in graph.edges():
        u, v = edge.source, edge.target
        residual[u][v] = residual[u].get(v, 0) + edge.capacity - edge.flow
        residual[v][u] = residual[v].get(u, 0) + edge.flow
    return residual


def _augmenting_path(
    residual: list[dict[int, int]], source: int, sink: int
) -> list[int] | None:
    """Shortest path with positive residual capacity from source to sink."""
    predecessors: dict[int, int] = {}
    visited = {source}
    queue = deque([source])
    while queue:
        u = queue.popleft()
        for v, capacity in residual[u].items():
            if v in visited or capacity <= 0:
                continue
            predecessors[v] = u
            if v == sink:
                path = [sink]
                while path[-1] != source:
                    path.append(predecessors[path[-1]])
                path.reverse()
                return path
            visited.add(v)
            queue.append(v)
    return None


def max_flow(graph: Graph, source: int, sink: int) -> int:
    """Push the maximum flow from source to sink and return its value.

    The flow already present on the edges is taken as the starting flow and
    is augmented in place; afterwards each edge's ``flow`` holds the final
    flow. The value returned is the total flow leaving ``source``.
    """
    for vertex in (source, sink):
        if vertex not in graph:
            raise IndexError(f"no such vertex: {vertex!r}")
    if source == sink:
        raise ValueError("source and sink must be different vertices")

    residual = _build_residual(graph)

    while (path := _augmenting_path(residual, source, sink)) is not None:
        steps = list(zip(path, path[1:]))
        delta = min(residual[u][v] for u, v in steps)
        for u, v in steps:
            forward = graph.edge(u, v)
            if forward is not None:
                forward.flow += delta
            else:
                backward = graph.edge(v, u)
                if backward is not None:
                    backward.flow -= delta
            residual[u][v] -= delta
            residual[v][u] = residual[v].get(u, 0) + delta

    return sum(edge.flow for edge in graph.out_edges(source))