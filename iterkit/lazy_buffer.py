"""A buffer that pulls items from an iterator only when asked to."""

from __future__ import annotations

from typing import Any, Iterable, List, Sequence


class LazyBuffer:
    """Items drawn so far from an iterator, filled on demand.

    The source is treated as fused: once it is exhausted it is never
    asked for more items.
    """

    def __init__(self, iterable: Iterable[Any]) -> None:
        self._it = iter(iterable)
        self._done = False
        self._buffer: List[Any] = []

    def _pull(self):
        if self._done:
            raise StopIteration
        try:
            return next(self._it)
        except StopIteration:
            self._done = True
            raise

    def __len__(self) -> int:
        return len(self._buffer)

    def __getitem__(self, index):
        return self._buffer[index]

    def __repr__(self) -> str:
        return f"LazyBuffer(buffer={self._buffer!r}, exhausted={self._done})"

    def count(self) -> int:
        """Number of buffered items plus those still in the source; drains the source."""
        remaining = 0
        while True:
            try:
                self._pull()
            except StopIteration:
                break
            remaining += 1
        return len(self._buffer) + remaining

    def get_next(self) -> bool:
        """Buffer one more item; return whether one was available."""
        try:
            item = self._pull()
        except StopIteration:
            return False
        self._buffer.append(item)
        return True

    def prefill(self, length: int) -> None:
        """Pull items until the buffer holds ``length`` or the source ends."""
        while len(self._buffer) < length:
            if not self.get_next():
                return

    def get_at(self, indices: Sequence[int]) -> List[Any]:
        """Return the buffered items at ``indices``, in that order."""
        return [self._buffer[i] for i in indices]