"""In-place sorting algorithms."""

from __future__ import annotations

import operator
from bisect import bisect_right
from functools import cmp_to_key
from typing import Any, Callable, MutableSequence


def binary_sort(
    items: MutableSequence[Any],
    key: Callable[[Any], Any] | None = None,
    less: Callable[[Any, Any], bool] | None = None,
) -> None:
    """Sort items in place by binary insertion into an ordered sequence.

    ``key`` projects each item before comparison; ``less`` is a strict
    ordering on projected values. Equal elements keep their relative order.
    """
    if len(items) <= 1:
        return

    project = key if key is not None else (lambda x: x)
    if less is None:
        sort_key = project
    else:
        def compare(x: Any, y: Any) -> int:
            if less(x, y):
                return -1
            if less(y, x):
                return 1
            return 0

        wrap = cmp_to_key(compare)

        def sort_key(item: Any) -> Any:
            return wrap(project(item))

    keys: list[Any] = []
    ordered: list[Any] = []
    for item in items:
        k = sort_key(item)
        position = bisect_right(keys, k)
        keys.insert(position, k)
        ordered.insert(position, item)
    items[:] = ordered


def counting_sort(items: MutableSequence[int]) -> None:
    """Sort non-negative integers in place by counting occurrences."""
    if len(items) <= 1:
        return
    values = [operator.index(v) for v in items]
    if min(values) < 0:
        raise ValueError("counting_sort requires non-negative integers")
    counts = [0] * (max(values) + 1)
    for v in values:
        counts[v] += 1
    items[:] = [value for value, n in enumerate(counts) for _ in range(n)]