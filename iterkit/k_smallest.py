"""Selection of the ``k`` smallest items of an iterable under a comparator."""

from __future__ import annotations

from functools import cmp_to_key
from typing import Any, Callable, Iterable, List, TypeVar

T = TypeVar("T")
K = TypeVar("K")

Comparator = Callable[[Any, Any], int]

_MISSING = object()


def _check_k(k: int) -> None:
    if k < 0:
        raise ValueError(f"k must be non-negative, got {k}")


def _exhaust(iterator) -> None:
    for _ in iterator:
        pass


def _sift_down(
    heap: list, end: int, is_less: Callable[[Any, Any], bool], origin: int
) -> None:
    """Move ``heap[origin]`` away from the root, keeping larger items on top.

    Only the first ``end`` slots of ``heap`` are treated as the heap.
    """
    while origin < end:
        left = 2 * origin + 1
        right = left + 1
        if left >= end:
            return
        if right < end and is_less(heap[left], heap[right]):
            replacement = right
        else:
            replacement = left
        if is_less(heap[origin], heap[replacement]):
            heap[origin], heap[replacement] = heap[replacement], heap[origin]
            origin = replacement
        else:
            return


def k_smallest_general(
    iterable: Iterable[T], k: int, comparator: Comparator
) -> List[T]:
    """Consume ``iterable`` and return its ``k`` smallest items in ascending order.

    ``comparator(a, b)`` returns a negative number, zero or a positive number
    when ``a`` is less than, equal to or greater than ``b``.
    """
    _check_k(k)
    iterator = iter(iterable)
    if k == 0:
        _exhaust(iterator)
        return []
    if k == 1:
        best: Any = _MISSING
        for item in iterator:
            if best is _MISSING or comparator(item, best) < 0:
                best = item
        return [] if best is _MISSING else [best]

    storage: list = []
    for item in iterator:
        storage.append(item)
        if len(storage) == k:
            break

    def is_less(a: Any, b: Any) -> bool:
        return comparator(a, b) < 0

    size = len(storage)
    # Build a max-heap from the second-bottom layer up to the root.
    for i in range(size // 2, -1, -1):
        _sift_down(storage, size, is_less, i)

    for item in iterator:
        if is_less(item, storage[0]):
            storage[0] = item
            _sift_down(storage, size, is_less, 0)

    # Repeatedly move the largest item to the tail to obtain ascending order.
    end = size
    while end > 1:
        last = end - 1
        storage[0], storage[last] = storage[last], storage[0]
        end = last
        _sift_down(storage, end, is_less, 0)

    return storage


def k_smallest_relaxed_general(
    iterable: Iterable[T], k: int, comparator: Comparator
) -> List[T]:
    """Return the ``k`` smallest items in ascending order using a buffer of ``2 * k``.

    Uses more memory than :func:`k_smallest_general` but fewer comparisons
    on large inputs.
    """
    _check_k(k)
    iterator = iter(iterable)
    if k == 0:
        _exhaust(iterator)
        return []

    sort_key = cmp_to_key(comparator)
    buf: list = []
    for item in iterator:
        buf.append(item)
        if len(buf) == 2 * k:
            break

    if len(buf) < k:
        buf.sort(key=sort_key)
        return buf

    buf.sort(key=sort_key)
    del buf[k:]

    for item in iterator:
        if comparator(item, buf[k - 1]) >= 0:
            continue
        buf.append(item)
        if len(buf) == 2 * k:
            buf.sort(key=sort_key)
            del buf[k:]

    buf.sort(key=sort_key)
    del buf[k:]
    return buf


def key_to_cmp(key: Callable[[T], K]) -> Callable[[T, T], int]:
    """Turn a key function into a three-way comparator on the keys."""

    def compare(a: T, b: T) -> int:
        ka = key(a)
        kb = key(b)
        if ka < kb:
            return -1
        if kb < ka:
            return 1
        return 0

    return compare