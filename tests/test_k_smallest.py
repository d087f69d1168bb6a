import pytest
from hypothesis import given, strategies as st

from iterkit.k_smallest import (
    k_smallest_general,
    k_smallest_relaxed_general,
    key_to_cmp,
)

natural = key_to_cmp(lambda x: x)

FUNCTIONS = [k_smallest_general, k_smallest_relaxed_general]


@pytest.mark.parametrize("func", FUNCTIONS)
@given(data=st.lists(st.integers(-1000, 1000)), k=st.integers(0, 40))
def test_matches_sorted_prefix(func, data, k):
    assert func(data, k, natural) == sorted(data)[:k]


@pytest.mark.parametrize("func", FUNCTIONS)
@given(data=st.lists(st.integers(-1000, 1000)), k=st.integers(0, 40))
def test_reversed_key_gives_largest(func, data, k):
    result = func(iter(data), k, key_to_cmp(lambda x: -x))
    assert result == sorted(data, reverse=True)[:k]


@pytest.mark.parametrize("func", FUNCTIONS)
@given(data=st.lists(st.integers()), k=st.integers(0, 10))
def test_result_length(func, data, k):
    assert len(func(data, k, natural)) == min(k, len(data))


@pytest.mark.parametrize("func", FUNCTIONS)
def test_zero_consumes_iterator(func):
    it = iter(range(10))
    assert func(it, 0, natural) == []
    assert next(it, None) is None


@pytest.mark.parametrize("func", FUNCTIONS)
def test_negative_k_rejected(func):
    assert func([3, 1, 2], 1, natural) == [1]
    with pytest.raises(ValueError) as excinfo:
        func([1, 2, 3], -1, natural)
    assert excinfo.type is ValueError


def test_k_one_picks_first_minimum():
    items = [(3, "a"), (1, "b"), (1, "c"), (2, "d")]
    result = k_smallest_general(items, 1, key_to_cmp(lambda p: p[0]))
    assert result == [items[1]]


def test_k_one_empty():
    assert k_smallest_general([], 1, natural) == []


@given(a=st.integers(), b=st.integers())
def test_key_to_cmp_sign(a, b):
    result = natural(a, b)
    assert (result < 0) == (a < b)
    assert (result > 0) == (a > b)
    assert (result == 0) == (a == b)