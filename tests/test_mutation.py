"""Double-ended mutation."""

from __future__ import annotations

import copy

import pytest

from jsarray import EmptyContainerError, Sequence


def test_pop_push(digits):
    assert digits.pop() == 9
    assert digits.length == 9

    digits.push(10)

    assert digits[digits.length - 1] == 10
    assert digits.length == 10


def test_shift_unshift(digits):
    assert digits.shift() == 0
    assert digits.length == 9

    digits.unshift(10)

    assert digits[0] == 10
    assert digits.length == 10


def test_push_and_unshift_return_new_length(empty):
    assert empty.push("a") == 1
    assert empty.unshift("b") == 2
    assert empty == ["b", "a"]


@pytest.mark.parametrize("value", [0, "x", None, (1, 2), [3]])
def test_push_pop_is_left_inverse(digits, value):
    before = digits.to_list()
    digits.push(value)
    assert digits.length == 11
    assert digits.pop() == value
    assert digits == before


@pytest.mark.parametrize("value", [0, "x", None, (1, 2), [3]])
def test_unshift_shift_is_left_inverse(digits, value):
    before = digits.to_list()
    digits.unshift(value)
    assert digits.length == 11
    assert digits.shift() == value
    assert digits == before


def test_empty_removals_fail(empty):
    with pytest.raises(EmptyContainerError):
        empty.pop()
    with pytest.raises(EmptyContainerError):
        empty.shift()
    assert empty.length == 0


def test_empty_container_error_is_index_error(empty):
    with pytest.raises(IndexError):
        empty.pop()


def test_drained_sequence_can_be_reused(digits):
    while digits.length:
        digits.shift()
    digits.push("again")
    assert digits == ["again"]


def test_interleaved_ends_keep_order():
    seq = Sequence()
    for value in range(50):
        seq.push(value)
        seq.unshift(-value - 1)

    assert seq.to_list() == list(range(-50, 50))
    assert seq.head_slack + seq.length + seq.tail_slack == seq.capacity


def test_clear(digits):
    digits.clear()
    assert digits.length == 0
    assert digits.to_list() == []


def test_copy_is_independent(digits):
    clone = copy.copy(digits)
    clone.push(10)
    clone[0] = "zero"

    assert digits.length == 10
    assert digits[0] == 0
    assert clone.length == 11


class TestTypedBuffers:
    """Mutation on numpy-typed sequences."""

    def test_unshift_and_shift(self):
        seq = Sequence([1, 2, 3], dtype="int64")
        assert seq.unshift(0) == 4
        assert seq == [0, 1, 2, 3]
        assert seq.shift() == 0

    def test_rejected_unshift_keeps_contents(self):
        seq = Sequence([1, 2, 3], dtype="int64")

        with pytest.raises(ValueError):
            seq.unshift("x")

        assert seq.to_list() == [1, 2, 3]
        assert seq.length == 3
        assert seq.head_slack + seq.length + seq.tail_slack == seq.capacity

    def test_rejected_push_keeps_contents(self):
        seq = Sequence([1, 2, 3], dtype="int64")

        with pytest.raises(ValueError):
            seq.push("x")

        assert seq.to_list() == [1, 2, 3]
        assert seq.pop() == 3
