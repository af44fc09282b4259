import pytest

from stlkit.lookup import (
    all_of,
    any_of,
    find,
    find_if,
    index,
    max_n,
    max_value,
    min_max,
    min_max_n,
    min_n,
    min_value,
    none_of,
)

POS = [1, 2, 3, 4, 5]
NEG = [-1, -2, -3, -4, -5]
MIX = [1, -2, 3, -4, 5]


def is_negative(n):
    return n < 0


def test_min_value():
    assert min_value(1, 2) == 1
    assert min_value(2, 1) == 1
    assert min_value(1, 1) == 1
    assert min_value("hello", "world") == "hello"


def test_max_value():
    assert max_value(1, 2) == 2
    assert max_value(2, 1) == 2
    assert max_value(2, 2) == 2
    assert max_value("hello", "world") == "world"


def test_min_n():
    assert min_n(1, 2, 3) == 1
    assert min_n(2, 1, 3) == 1
    assert min_n(1, 1, 1) == 1
    assert min_n("hello", "world") == "hello"
    with pytest.raises(ValueError):
        min_n()


def test_max_n():
    assert max_n(1, 2) == 2
    assert max_n(2, 1) == 2
    assert max_n(2, 2) == 2
    assert max_n("hello", "world") == "world"
    with pytest.raises(ValueError):
        max_n()


def test_min_max():
    assert min_max(1, 2) == (1, 2)
    assert min_max(2, 1) == (1, 2)


def test_min_max_n():
    assert min_max_n(3, 4, 1, 2) == (1, 4)
    with pytest.raises(ValueError):
        min_max_n()


def test_find():
    a = [1, 2, 3, 4, 3]
    assert find(a, 3) == 2
    assert find(a, 5) is None


def test_find_if():
    a = [1, 2, -3, 4, 3]
    assert find_if(a, is_negative) == 2
    assert find_if([1, 2, 3, 4, 3], is_negative) is None


def test_index():
    a = [1, 2, 3, 4, 3]
    assert index(a, 3) == 2
    assert index(a, 5) == -1


def test_all_of():
    assert all_of(POS, is_negative) is False
    assert all_of(NEG, is_negative) is True
    assert all_of(MIX, is_negative) is False


def test_any_of():
    assert any_of(POS, is_negative) is False
    assert any_of(NEG, is_negative) is True
    assert any_of(MIX, is_negative) is True


def test_none_of():
    assert none_of(POS, is_negative) is True
    assert none_of(NEG, is_negative) is False
    assert none_of(MIX, is_negative) is False