"""Merging of any number of sorted iterables into one ascending stream."""

from __future__ import annotations

import operator
from typing import Any, Callable, Iterable, Iterator, List

LessThan = Callable[[Any, Any], bool]

_MISSING = object()


class _HeadTail:
    """The next item of a source together with the rest of that source."""

    __slots__ = ("head", "tail")

    def __init__(self, head: Any, tail: Iterator[Any]) -> None:
        self.head = head
        self.tail = tail

    def __repr__(self) -> str:
        return f"_HeadTail(head={self.head!r})"


class KMergeBy:
    """Iterator merging several iterables by a ``less_than`` predicate.

    The first item of every source is pulled when the merger is created.
    If each source is sorted by the predicate, the output is sorted too.
    """

    def __init__(self, iterables: Iterable[Iterable[Any]], less_than: LessThan) -> None:
        self._less_than = less_than
        heap: List[_HeadTail] = []
        for iterable in iterables:
            tail = iter(iterable)
            head = next(tail, _MISSING)
            if head is not _MISSING:
                heap.append(_HeadTail(head, tail))
        self._heap = heap
        for i in range(len(heap) // 2 - 1, -1, -1):
            self._sift_down(i)

    def _less(self, a: _HeadTail, b: _HeadTail) -> bool:
        return bool(self._less_than(a.head, b.head))

    def _sift_down(self, index: int) -> None:
        heap = self._heap
        size = len(heap)
        pos = index
        child = 2 * pos + 1
        while child + 1 < size:
            if self._less(heap[child + 1], heap[child]):
                child += 1
            if not self._less(heap[child], heap[pos]):
                return
            heap[pos], heap[child] = heap[child], heap[pos]
            pos = child
            child = 2 * pos + 1
        if child + 1 == size and self._less(heap[child], heap[pos]):
            heap[pos], heap[child] = heap[child], heap[pos]

    def __iter__(self) -> "KMergeBy":
        return self

    def __next__(self) -> Any:
        heap = self._heap
        if not heap:
            raise StopIteration
        top = heap[0]
        following = next(top.tail, _MISSING)
        if following is _MISSING:
            result = top.head
            last = heap.pop()
            if heap:
                heap[0] = last
        else:
            result = top.head
            top.head = following
        self._sift_down(0)
        return result

    def __repr__(self) -> str:
        return f"KMergeBy(heap={self._heap!r})"


def kmerge(iterables: Iterable[Iterable[Any]]) -> KMergeBy:
    """Merge the given iterables in ascending order using ``<``."""
    return KMergeBy(iterables, operator.lt)


def kmerge_by(iterables: Iterable[Iterable[Any]], less_than: LessThan) -> KMergeBy:
    """Merge the given iterables using ``less_than(a, b)`` as the ordering."""
    return KMergeBy(iterables, less_than)