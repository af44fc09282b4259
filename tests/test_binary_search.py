import pytest

from stlkit.binary_search import binary_search, lower_bound, upper_bound
from stlkit.functor import greater, less

A = [1, 2, 4, 5, 5, 6]


@pytest.mark.parametrize("cmp", [None, less])
def test_lower_bound(cmp):
    assert lower_bound(A, 1, cmp) == 0
    assert lower_bound(A, 5, cmp) == 3
    assert lower_bound(A, 7, cmp) == len(A)


@pytest.mark.parametrize("cmp", [None, less])
def test_upper_bound(cmp):
    assert upper_bound(A, 1, cmp) == 1
    assert upper_bound(A, 5, cmp) == 5
    assert upper_bound(A, 7, cmp) == len(A)


@pytest.mark.parametrize("cmp", [None, less])
def test_binary_search(cmp):
    assert binary_search(A, 4, cmp) == 2
    assert binary_search(A, 5, cmp) == 3
    assert binary_search(A, 3, cmp) is None


@pytest.mark.parametrize("cmp", [None, less])
def test_empty_sequence(cmp):
    assert lower_bound([], 1, cmp) == 0
    assert upper_bound([], 1, cmp) == 0
    assert binary_search([], 1, cmp) is None


def test_descending_with_greater():
    desc = list(reversed(A))
    assert lower_bound(desc, 5, greater) == desc.index(5)
    assert upper_bound(desc, 5, greater) == desc.index(5) + 2
    assert binary_search(desc, 4, greater) == desc.index(4)
    assert binary_search(desc, 3, greater) is None


@pytest.mark.parametrize("value", range(0, 8))
def test_bounds_invariant(value):
    lo = lower_bound(A, value, less)
    hi = upper_bound(A, value, less)
    assert all(x < value for x in A[:lo])
    assert all(x >= value for x in A[lo:])
    assert all(x > value for x in A[hi:])
    assert hi - lo == A.count(value)