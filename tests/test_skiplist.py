import math
from collections import namedtuple

import pytest

from stlkit.compute import average
from stlkit.functor import ordered_compare
from stlkit.skiplist import SkipList, skip_list_from_map
from stlkit.sorting import is_sorted


def new_skip_list_n(n, seed=0):
    sl = SkipList(seed=0 if seed is None else seed)
    for i in range(n):
        sl.insert(i, i)
    return sl


def test_string_keys():
    sl = SkipList()
    sl.insert("hello", 1)
    assert sl.has("hello")
    assert sl.find("hello") == 1
    assert not sl.has("world")
    assert sl.find("world") is None


@pytest.mark.parametrize("n", [1, 1.0, 1.5])
def test_numeric_keys(n):
    sl = SkipList()
    sl.insert(n, 1)
    assert sl.has(n)
    assert sl.find(n) == 1
    assert not sl.has(n + 1)
    assert sl.find(n + 1) is None


Person = namedtuple("Person", "name age")


def person_cmp(a, b):
    r = ordered_compare(a.age, b.age)
    if r != 0:
        return r
    return ordered_compare(a.name, b.name)


def test_compare_function():
    sl = SkipList(person_cmp)
    sl.insert(Person("zhangsan", 20), 1)
    sl.insert(Person("lisi", 20), 1)
    sl.insert(Person("wangwu", 30), 1)
    assert sl.has(Person("zhangsan", 20))
    assert not sl.has(Person("zhangsan", 30))
    assert len(sl) == 3

    sl.insert(Person("zhangsan", 20), 1)
    assert len(sl) == 3

    assert [p.name for p in sl] == ["lisi", "zhangsan", "wangwu"]

    sl.remove(Person("zhangsan", 20))
    assert len(sl) == 2
    sl.remove(Person("zhaoliu", 40))
    assert len(sl) == 2


def test_from_map():
    m = {1: -1, 2: -2, 3: -3}
    sl = skip_list_from_map(m)
    for k, v in m.items():
        assert sl.has(k)
        assert sl.find(k) == v


def test_iterate():
    sl = new_skip_list_n(10)
    assert list(sl.items()) == [(i, i) for i in range(10)]
    assert list(sl.keys()) == list(range(10))
    assert list(sl.values()) == list(range(10))


def _check_bounds(sl):
    assert next(sl.lower_bound(1))[0] == 1
    assert next(sl.lower_bound(3))[0] == 4
    assert next(sl.lower_bound(4))[0] == 4
    assert list(sl.lower_bound(5)) == []

    assert next(sl.upper_bound(0))[0] == 1
    assert next(sl.upper_bound(1))[0] == 2
    assert next(sl.upper_bound(3))[0] == 4
    assert list(sl.upper_bound(4)) == []
    assert list(sl.upper_bound(5)) == []

    assert [k for k, _ in sl.find_range(1, 3)] == [1, 2]


def test_bounds_ordered():
    _check_bounds(skip_list_from_map({1: 1, 2: 2, 4: 4}))


def test_bounds_func():
    sl = SkipList(ordered_compare)
    for k, v in {1: 1, 2: 2, 4: 4}.items():
        sl.insert(k, v)
    _check_bounds(sl)


def test_insert():
    sl = SkipList()
    for i in range(100):
        assert len(sl) == i
        sl.insert(i, i)
        assert len(sl) == i + 1


def test_insert_reverse():
    sl = SkipList()
    for i in range(100, 0, -1):
        old = len(sl)
        sl.insert(i, i)
        assert len(sl) == old + 1
    assert list(sl) == list(range(1, 101))


def test_insert_dup():
    sl = SkipList()
    sl.insert(1, 1)
    assert len(sl) == 1
    sl.insert(1, 2)
    assert len(sl) == 1
    assert sl.find(1) == 2


def test_remove():
    sl = new_skip_list_n(100)
    for i in range(100):
        assert sl.remove(i)
    assert sl.is_empty()
    assert len(sl) == 0


def test_remove_nonexistent():
    sl = SkipList()
    sl.insert(1, 1)
    sl.insert(2, 2)
    assert not sl.remove(0)
    assert not sl.remove(3)
    assert len(sl) == 2


def test_remove_level():
    sl = new_skip_list_n(100)
    assert sl.level() >= 4
    for i in range(100):
        sl.remove(i)
    assert sl.level() == 1


def test_clear():
    sl = SkipList()
    for i in range(100):
        sl.insert(i, i)
    sl.clear()
    assert sl.is_empty()
    assert len(sl) == 0
    assert sl.level() == 1
    assert list(sl) == []


def test_level_tracks_log2_of_length():
    diffs = []
    for seed in range(50):
        size = 1
        while size < 10000:
            sl = new_skip_list_n(size, seed)
            log2_len = int(math.ceil(math.log2(len(sl))))
            diffs.append(log2_len - sl.level())
            size *= 10
    assert abs(average(diffs)) < 2


def test_find():
    sl = new_skip_list_n(100)
    for i in range(100):
        assert sl.find(i) == i
    assert sl.find(100) is None
    assert sl.find(100, -1) == -1


def test_has_and_contains():
    sl = SkipList()
    assert not sl.has(1)
    assert 1 not in sl
    sl.insert(1, 2)
    assert sl.has(1)
    assert 1 in sl


def test_for_each_sorted():
    sl = new_skip_list_n(100)
    keys = list(sl)
    assert len(keys) == 100
    assert is_sorted(keys)


def test_early_stop_iteration():
    sl = new_skip_list_n(100)
    seen = []
    for k, _ in sl.items():
        if k >= 50:
            break
        seen.append(k)
    assert max(seen) < 50


def test_apply():
    sl = new_skip_list_n(100)
    sl.apply(lambda k, v: -v)
    for i in range(len(sl)):
        assert sl.find(i) == -i


def test_apply_uses_key():
    sl = new_skip_list_n(100)
    sl.apply(lambda k, v: 0 if k > 50 else v)
    assert sl.find(51) == 0
    assert sl.find(50) == 50


def test_random_keys_stay_sorted():
    sl = SkipList(seed=7)
    keys = [37, 5, 91, 12, 64, 5, 0, 88, 23, 12]
    for k in keys:
        sl.insert(k, str(k))
    assert list(sl) == sorted(set(keys))
    assert dict(sl.items()) == {k: str(k) for k in keys}