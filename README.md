# iterkit

Small, dependency-free iterator helpers.

- `iterkit.kmerge`: lazy **k-way merge** of any number of sorted iterables, using a heap.
- `iterkit.k_smallest`: the **k smallest** items of an iterable under a comparator, in ascending order.
- `iterkit.lazy_buffer`: `LazyBuffer`, a buffer that pulls items from an iterator only when asked.

## Installation

```
pip install iterkit
```

## Merging sorted iterables

```python
from iterkit.kmerge import kmerge, kmerge_by

list(kmerge([[0, 2, 4], [1, 3, 5], [6, 7]]))
# [0, 1, 2, 3, 4, 5, 6, 7]

# Merge descending inputs with a custom "comes first" predicate.
list(kmerge_by([[5, 3, 1], [4, 2]], lambda a, b: a > b))
# [5, 4, 3, 2, 1]
```

`kmerge` orders items with `<`; `kmerge_by` takes a `less_than(a, b)`
predicate. Both return a `KMergeBy` iterator. If each input is sorted according
to the predicate, the output is sorted too. The first item of every input is
read when the merger is built; everything else is read on demand. Empty inputs
are simply skipped.

## Selecting the k smallest items

```python
from iterkit.k_smallest import k_smallest_general, k_smallest_relaxed_general, key_to_cmp

def cmp(a, b):
    return (a > b) - (a < b)

k_smallest_general([5, 1, 4, 2, 3], 3, cmp)                 # [1, 2, 3]
k_smallest_relaxed_general([5, 1, 4, 2, 3], 2, cmp)         # [1, 2]
k_smallest_general(["ccc", "a", "bb"], 2, key_to_cmp(len))  # ["a", "bb"]
```

A comparator returns a negative number, zero or a positive number, like the
classic `cmp`; `key_to_cmp` builds one from a key function.

- `k_smallest_general` keeps at most `k` items in a heap.
- `k_smallest_relaxed_general` keeps a buffer of up to `2 * k` items and
  trims it back to `k` whenever it fills.

Both consume the whole input, even when `k` is 0, return fewer than `k` items
when the input is shorter, and raise `ValueError` for a negative `k`.

## LazyBuffer

```python
from iterkit.lazy_buffer import LazyBuffer

buf = LazyBuffer(iter("abcdef"))
buf.prefill(3)
len(buf)            # 3
buf[1]              # "b"
buf.get_next()      # True, buffer now holds "abcd"
buf.get_at([3, 0])  # ["d", "a"]
buf.count()         # 6, consumes the rest of the iterator
```

`len()` and indexing see only the items buffered so far. Once the source is
exhausted it is never asked for more items.

## Running the tests

```
pip install -e ".[test]"
pytest
```