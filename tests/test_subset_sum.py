import pytest

from algolab.subset_sum import subset_sum


def _is_subsequence(sub, values):
    it = iter(values)
    return all(any(x == y for y in it) for x in sub)


def test_empty_input_has_no_candidates():
    assert subset_sum([], 0) == []


def test_two_elements_full_sum():
    assert subset_sum([1, 2], 3) == [[1, 2]]


def test_repeated_candidates_are_reported():
    assert subset_sum([1, 2], 1) == [[1], [1]]


def test_unreachable_target_gives_nothing():
    assert subset_sum([3, 5, 7], 1) == []


@pytest.mark.parametrize(
    "values, target",
    [
        ([3, 34, 4, 12, 5, 2], 9),
        ([1, 2, 3, 4, 5], 7),
        ([2.5, 1.5, 4.0], 4.0),
        ([10, -3, 7, 3], 7),
    ],
)
def test_results_sum_to_target_and_keep_order(values, target):
    result = subset_sum(values, target)
    assert result
    for subset in result:
        assert sum(subset) == target
        assert _is_subsequence(subset, values)


def test_full_set_found_when_target_is_total():
    values = [4, 8, 15, 16]
    result = subset_sum(values, sum(values))
    assert values in result


def test_result_lists_are_independent():
    result = subset_sum([1, 1], 1)
    assert len(result) >= 2
    result[0].append(99)
    assert all(99 not in subset for subset in result[1:])


def test_accepts_any_iterable_sequence():
    assert subset_sum((1, 2), 3) == subset_sum([1, 2], 3)