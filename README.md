# algolab

A small collection of classic algorithms in plain Python. It needs only the
standard library.

## Modules

### `algolab.sorting`

- `binary_sort(items, key=None, less=None)` sorts a mutable sequence in place.
  Each item is placed by binary search into an ordered list, so the sort is
  stable. `key` projects an item before it is compared. `less` is a strict
  "less than" on the projected values; when it is left out, the projected
  values are compared with `<`.
- `counting_sort(items)` sorts a mutable sequence of non-negative integers in
  place by counting how often each value occurs. If a value is negative it
  raises `ValueError`.

Both functions do nothing to sequences with fewer than two items.

### `algolab.graph`

- `Graph` is a directed graph. Vertices are the integers `0, 1, 2, ...`, given
  out in the order `add_vertex(name)` is called. Each vertex has a name, which
  `name(vertex)` returns.
- `add_edge(source, target, **kwargs)` adds an `Edge` and returns it. The
  keyword arguments set the edge's fields: `distance`, `flow`, `capacity` and
  `cost`. Each field defaults to zero.
- `vertices()`, `edges()`, `out_edges(vertex)` and
  `adjacent_vertices(vertex)` list what is in the graph, in the order it was
  added. `edge(source, target)` returns the first edge between two vertices,
  or `None` if there is none.
- `len(graph)` is the number of vertices, and `v in graph` checks that a
  vertex exists. If a vertex does not exist, the methods raise `IndexError`.

### `algolab.traversal`

- `breadth_first_search(graph, start)` returns the vertices that can be
  reached from `start`, in breadth-first order, with `start` itself left out.
  The children of a vertex are visited in the order their edges were added.

### `algolab.dags`

- `BenchDagOne` is a ready-made six-vertex example DAG. Its vertices are
  `a` to `f`, and `graph` holds the graph itself. It also gives the expected
  results for that graph:
  - `bfs_from_gold(vertex)`: the breadth-first order from a vertex.
  - `dfs_from_gold(vertex)`: the depth-first order from a vertex.
  - `shortest_paths_gold(source, target)`: the expected paths for the pairs
    A–E and A–C, with the source left out.

### `algolab.subset_sum`

- `subset_sum(values, target)` tries every include/exclude decision for every
  element and returns each candidate subset whose sum equals `target`. Within
  a subset, elements keep the order they have in `values`. A subset is
  returned once for each time the search produces it, so the same subset can
  appear more than once. An empty input gives an empty result.

  ```python
  subset_sum([1, 2, 3], 3)   # [[3], [1, 2], [1, 2]]
  ```

### `algolab.network_flow`

- `max_flow(graph, source, sink)` computes the maximum flow from `source` to
  `sink`. Each step follows the shortest augmenting path in the residual
  network (Edmonds–Karp). The flow already on the edges is where it starts.
  Each edge's `flow` field is updated in place, and the function returns the
  total flow leaving `source`. It raises `IndexError` if either vertex does
  not exist, and `ValueError` if `source` and `sink` are the same vertex.

## Example

```python
from algolab.graph import Graph
from algolab.network_flow import max_flow
from algolab.traversal import breadth_first_search

g = Graph()
s = g.add_vertex("S")
a = g.add_vertex("A")
t = g.add_vertex("T")
g.add_edge(s, a, capacity=5)
g.add_edge(a, t, capacity=3)

print(breadth_first_search(g, s))   # [1, 2]
print(max_flow(g, s, t))            # 3
```

## What it does not do

- There is no depth-first search and no shortest-path search.
  `BenchDagOne` only gives the expected results for those.
- There is no minimum-cost flow. Edges have a `cost` field, but nothing uses
  it.
- There is no command-line tool and no benchmark runner. The package is a
  library only.

## Running the tests

```
pip install -e .[test]
pytest
```