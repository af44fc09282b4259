# stlkit

Generic containers and sequence algorithms for Python, with no dependencies
beyond the standard library.

## Install

    pip install stlkit

## Containers

Every container supports `len()`, `is_empty()` and `clear()`.

- `stlkit.vector.Vector` – growable list with a tracked capacity (`cap`,
  `reserve`, `shrink`), `push_back`, `pop_back`, `try_pop_back`, `insert`,
  `remove`, `remove_range`, `remove_length`, `remove_if`, `apply` and
  `iterate_range`. Built with `vector_of`, `make_vector_cap` or `as_vector`
  (which shares the given list).
- `stlkit.dlist.DList` – doubly linked list with `push_front`/`push_back`,
  `pop_front`/`pop_back`, `try_pop_front`/`try_pop_back` and `apply`
  (`dlist_of`).
- `stlkit.dlist_queue.DListQueue` – double-ended queue built on `DList`.
- `stlkit.slist.SList` – singly linked list with `push_front`, `push_back`,
  `pop_front`, `reverse`, `values` and `apply` (`slist_of`).
- `stlkit.stack.Stack` – LIFO stack with `push`, `pop`, `try_pop`, `top` and
  a tracked capacity.
- `stlkit.priority_queue.PriorityQueue` – min-heap queue ordered by `<` or by
  an optional `less` function; `PriorityQueue.on(items)` heapifies and uses
  the given list as its storage.
- `stlkit.builtin_set.BuiltinSet` – hash set with `union`, `intersection`,
  `difference`, `is_disjoint_of`, `is_subset_of` and `is_superset_of`
  (`set_of`).
- `stlkit.skiplist.SkipList` – sorted map ordered by `<` or a three-way
  `cmp` function, with an optional `seed`. `find(key, default)`, `insert`,
  `remove`, and `lower_bound`, `upper_bound` and `find_range(first, last)`
  which yield `(key, value)` pairs; `find_range` includes `last`.
  `skip_list_from_map` builds one from a mapping.
- `stlkit.skiplist_set.SkipListSet` – sorted set on a skip list, with the
  same bound and range queries yielding elements (`skip_list_set_of`).
- `stlkit.pool.Pool` – thread-safe free list of reusable objects
  (`make_pool`, `make_pool_with_new`); `get` returns None when the pool is
  empty and has no factory.
- `stlkit.container` – the abstract bases `Container`, `Map`, `Set`,
  `SortedMap`, `SortedSet`, `Queue` and `Deque`.

Empty-container accesses such as `front`, `back`, `pop` and `top` raise
`IndexError`; the `try_pop*` methods return a default instead.

```python
from stlkit.skiplist import SkipList
from stlkit.priority_queue import PriorityQueue

sl = SkipList()
sl.insert(3, "c")
sl.insert(1, "a")
print(list(sl.keys()))        # [1, 3]

pq = PriorityQueue([3, 2, 1, 5])
print(pq.top())               # 1
```

## Algorithms

- `stlkit.functor`: `less`, `greater`, `ordered_compare`
- `stlkit.binary_search`: `lower_bound`, `upper_bound`, `binary_search`
  (returns an index or None), each with an optional `less`
- `stlkit.compare`: `equal`, `compare`
- `stlkit.compute`: `sum_of`, `sum_as`, `average`, `average_as`, `count`,
  `count_if`; `sum_as` and `average_as` convert to a fixed-width `NumKind`
  such as `NumKind.UINT8` or `NumKind.FLOAT64`, wrapping integers
- `stlkit.generate`: `range_of`, `generate`
- `stlkit.lookup`: `min_value`, `max_value`, `min_n`, `max_n`, `min_max`,
  `min_max_n`, `find`, `find_if`, `index`, `all_of`, `any_of`, `none_of`
- `stlkit.transform`: `copy`, `copy_to`, `fill`, `fill_zero`,
  `fill_pattern`, `transform`, `transform_to`, `transform_copy`, `replace`,
  `replace_if`, `unique`, `unique_copy`, `remove`, `remove_copy`,
  `remove_if`, `remove_if_copy`, `shuffle`, `reverse`, `reverse_copy`
- `stlkit.sorting`: `sort`, `stable_sort`, `desc_sort`, `desc_stable_sort`,
  `sort_func`, `stable_sort_func`, `is_sorted`, `is_desc_sorted`
- `stlkit.heap`: `make_min_heap`, `is_min_heap`, `push_min_heap`,
  `pop_min_heap`, `remove_min_heap`, and the `*_heap_func` versions taking
  a `less` function

```python
from stlkit.binary_search import lower_bound, upper_bound

a = [1, 2, 4, 5, 5, 6]
print(lower_bound(a, 5), upper_bound(a, 5))   # 3 5
```

## Tests

    pip install -e .[test]
    pytest