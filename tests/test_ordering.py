"""reverse, sort and slice."""

from __future__ import annotations

import operator

import pytest

from jsarray import Sequence
from jsarray.core.slicing import normalize_bounds


def test_reverse(digits):
    digits.reverse()
    assert digits == list(range(9, -1, -1))


def test_reverse_twice_restores_order(digits):
    digits.reverse()
    digits.reverse()
    assert digits == list(range(10))


def test_reverse_empty(empty):
    empty.reverse()
    assert empty.length == 0


def test_sort_default_less_than():
    seq = Sequence([3, 1, 2, 5, 4])
    seq.sort()
    assert seq == [1, 2, 3, 4, 5]


def test_sort_with_comparator(digits):
    digits.sort(operator.gt)
    assert digits == list(range(9, -1, -1))


def test_sort_with_key():
    seq = Sequence([-3, 1, -2])
    seq.sort(key=abs)
    assert seq == [1, -2, -3]


def test_sort_rejects_comparator_and_key(digits):
    with pytest.raises(ValueError):
        digits.sort(operator.lt, key=abs)


def test_sort_typed_buffer_in_place():
    seq = Sequence([3, 1, 2], dtype="int64")
    seq.sort()
    assert seq == [1, 2, 3]


def test_sort_strings_after_head_growth():
    seq = Sequence(["m", "c"])
    seq.unshift("x")
    seq.unshift("a")
    seq.sort()
    assert seq == ["a", "c", "m", "x"]


@pytest.mark.parametrize(
    ("args", "expected"),
    [
        ((5,), [5, 6, 7, 8, 9]),
        ((-3,), [7, 8, 9]),
        ((1, -1), [1, 2, 3, 4, 5, 6, 7, 8]),
        ((-7, 7), [3, 4, 5, 6]),
        ((6, 5), []),
        ((-1, 1), []),
        ((3, 3), []),
        ((), list(range(10))),
    ],
)
def test_slice(digits, args, expected):
    assert digits.slice(*args) == expected


@pytest.mark.parametrize("args", [(10,), (-11,), (0, 10), (0, -11), (20, 30)])
def test_slice_out_of_range_is_empty(digits, args):
    result = digits.slice(*args)
    assert result.length == 0


def test_slice_does_not_mutate_source(digits):
    digits.slice(2, 6)
    digits.slice(-4)
    assert digits == list(range(10))


def test_slice_result_is_independent(digits):
    part = digits.slice(2, 4)
    part[0] = "changed"
    part.push("more")

    assert digits[2] == 2
    assert digits.length == 10


def test_slice_of_empty(empty):
    assert empty.slice(0).length == 0
    assert empty.slice(0, 0).length == 0


def test_slice_keeps_config():
    seq = Sequence(range(5), dtype="int32")
    assert seq.slice(1).config is seq.config


def test_normalize_bounds():
    assert normalize_bounds(1, -1, 10) == range(1, 9)
    assert normalize_bounds(-3, None, 10) == range(7, 10)
    assert normalize_bounds(-1, 1, 10) == range(0)
    assert normalize_bounds(0, None, 0) == range(0)
