"""FIFO queue on a flat resizing array.

Unlike a circular buffer, indices never wrap around. When the tail reaches the
end of the buffer the live region is copied to the front of a new buffer of
size 2n + 1, and the same recentering shrinks the buffer once it drops below a
quarter full.

Not thread-safe. Mutating the queue while iterating over it is undefined: an
iterator keeps reading its snapshot range of the buffer it was created on, so
dequeued slots show up as None and items enqueued later are not seen.
"""

from typing import TypeVar, Generic, List, Iterator, Optional

T = TypeVar('T')


class AlwaysResizeQueue(Generic[T]):
    INITIAL_CAPACITY = 2
    SHRINK_FLOOR = 4
    SHRINK_RATIO = 4

    class _Iterator(Iterator[T]):
        """Read-only, single-pass view over [first, last) at creation time.

        There is no remove(); removal only goes through dequeue().
        """

        def __init__(self, data: List[Optional[T]], first: int, last: int) -> None:
            self._data = data
            self._index = first
            self._stop = last

        def __iter__(self) -> 'AlwaysResizeQueue._Iterator':
            return self

        def __next__(self) -> T:
            if self._index >= self._stop:
                raise StopIteration
            item = self._data[self._index]
            self._index += 1
            return item

        def __length_hint__(self) -> int:
            return self._stop - self._index

    def __init__(self) -> None:
        self._data: List[Optional[T]] = [None] * self.INITIAL_CAPACITY
        self._first: int = 0
        self._last: int = 0

    def enqueue(self, item: T) -> None:
        if self._last == len(self._data):
            self._resize()
        self._data[self._last] = item
        self._last += 1

    def dequeue(self) -> T:
        if self.is_empty():
            raise IndexError("dequeue from empty queue")
        item = self._data[self._first]
        self._data[self._first] = None
        self._first += 1
        n = self._last - self._first
        if n > self.SHRINK_FLOOR and n < len(self._data) // self.SHRINK_RATIO:
            self._resize()
        return item

    def peek(self) -> T:
        if self.is_empty():
            raise IndexError("peek from empty queue")
        return self._data[self._first]

    def size(self) -> int:
        return self._last - self._first

    def is_empty(self) -> bool:
        return self._first == self._last

    def capacity(self) -> int:
        return len(self._data)

    def clear(self) -> None:
        self._data = [None] * self.INITIAL_CAPACITY
        self._first = 0
        self._last = 0

    def copy(self) -> 'AlwaysResizeQueue[T]':
        """Return a shallow copy with the same items and capacity."""
        clone: AlwaysResizeQueue[T] = AlwaysResizeQueue()
        clone._data = self._data.copy()
        clone._first = self._first
        clone._last = self._last
        return clone

    def _resize(self) -> None:
        # Recenter the live region at index 0 of a buffer sized 2n + 1.
        n = self._last - self._first
        new_data: List[Optional[T]] = [None] * (2 * n + 1)
        for i in range(n):
            new_data[i] = self._data[self._first + i]
        self._data = new_data
        self._first = 0
        self._last = n

    def __iter__(self) -> Iterator[T]:
        return AlwaysResizeQueue._Iterator(self._data, self._first, self._last)

    def __len__(self) -> int:
        return self.size()

    def __bool__(self) -> bool:
        return not self.is_empty()

    def __repr__(self) -> str:
        return f"AlwaysResizeQueue({list(self)})"
