"""Graph traversal."""

from __future__ import annotations

from collections import deque

from algolab.graph import Graph


def breadth_first_search(graph: Graph, start: int) -> list[int]:
    """Vertices reachable from start, in breadth-first order, start excluded."""
    visited = {start}
    queue = deque([start])
    order: list[int] = []
    while queue:
        u = queue.popleft()
        if u != start:
            order.append(u)
        for v in graph.adjacent_vertices(u):
            if v not in visited:
                visited.add(v)
                queue.append(v)
    return order