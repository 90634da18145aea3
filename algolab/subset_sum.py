"""Subset sum by exhaustive include/exclude decisions."""

from __future__ import annotations

from typing import Iterator, Sequence, TypeVar

T = TypeVar("T")


def _candidates(values: Sequence[T], start: int, chosen: list[T]) -> Iterator[list[T]]:
    """Yield candidate subsets, deciding on values[start:] one element at a time.

    At each element the branch that leaves it out is yielded and explored
    first, then the branch that takes it in. A subset can therefore appear
    more than once.
    """
    if start == len(values):
        return
    yield chosen
    yield from _candidates(values, start + 1, chosen)
    included = [*chosen, values[start]]
    yield included
    yield from _candidates(values, start + 1, included)


def subset_sum(values: Sequence[T], target: T) -> list[list[T]]:
    """Every candidate subset of values whose elements add up to target.

    Subsets keep the order of ``values``. Candidates are produced in
    decision order, and repeated candidates are reported each time they
    are produced. An empty input yields no candidates at all.
    """
    items = list(values)
    return [list(subset) for subset in _candidates(items, 0, []) if sum(subset) == target]