"""Shared test fixtures for jsarray tests."""

import pytest

from jsarray import Sequence


@pytest.fixture
def digits():
    """Sequence holding 0..9, filled the way callers typically seed one."""
    seq = Sequence(10)
    count = iter(range(10))

    def fill(ref):
        ref.value = next(count)

    seq.for_each(fill)
    return seq


@pytest.fixture
def empty():
    return Sequence()
