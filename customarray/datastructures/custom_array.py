from __future__ import annotations
from typing import Any, Callable, Generic, Iterable, Iterator, List, Optional, TypeVar, overload

T = TypeVar("T")
U = TypeVar("U")


def natural_order(a: Any, b: Any) -> int:
    """Three-way comparison using ``<`` / ``>``: negative, zero or positive."""
    return (a > b) - (a < b)


class CustomArray(Generic[T]):
    """A resizable array that tracks its own length.

    Implementation notes
    --------------------
    • Storage is a plain Python list, but only slot assignment and truncation
      are used on it; every operation is written out by hand against
      ``_length`` instead of delegating to list methods.
    • Removing elements truncates the store, so it never keeps stale items.
    • Empty removals return an absent-value marker (``None`` by default)
      instead of raising.
    • Every scan re-reads ``_length`` on each step, so callbacks that mutate
      the array cannot push an index past the live store.
    """

    __slots__ = ("_data", "_length")

    def __init__(self, it: Optional[Iterable[T]] = None) -> None:
        self._data: List[Any] = []
        self._length = 0

        if it is not None:
            for v in it:
                self.push(v)

    # ------------------------------- internals -------------------------------

    def _reserve(self, size: int) -> None:
        """Grow the store with placeholder slots until it holds `size` slots."""
        while len(self._data) < size:
            self._data += [None]

    def _truncate(self) -> None:
        """Drop every physical slot at or beyond the logical length."""
        del self._data[self._length:]

    @staticmethod
    def _normalize_index(idx: int, size: int) -> int:
        """Map negative indices and validate bounds.

        Returns the non-negative index in [0, size).
        Raises IndexError if out of range.
        """
        if idx < 0:
            idx += size
        if idx < 0 or idx >= size:
            raise IndexError("array index out of range")
        return idx

    # --------------------------------- API -----------------------------------

    @property
    def length(self) -> int:
        """Number of logically present elements."""
        return self._length

    @property
    def data(self) -> List[T]:
        """Snapshot of the physical store (a copy; edits do not write back)."""
        return self._data[:]

    def push(self, *elements: T) -> int:
        """Append `elements` in order and return the new length."""
        for element in elements:
            self._reserve(self._length + 1)
            self._data[self._length] = element
            self._length += 1
        return self._length

    @overload
    def pop(self) -> Optional[T]: ...
    @overload
    def pop(self, default: U) -> T | U: ...

    def pop(self, default: U | None = None) -> T | U | None:
        """Remove and return the last element, or `default` when empty."""
        if self._length == 0:
            return default

        last = self._length - 1
        removed = self._data[last]
        self._length -= 1
        self._truncate()
        return removed

    @overload
    def shift(self) -> Optional[T]: ...
    @overload
    def shift(self, default: U) -> T | U: ...

    def shift(self, default: U | None = None) -> T | U | None:
        """Remove and return the first element, or `default` when empty.

        Complexity: O(n), every remaining element moves one slot left.
        """
        if self._length == 0:
            return default

        first = self._data[0]
        for i in range(1, self._length):
            self._data[i - 1] = self._data[i]

        self._length -= 1
        self._truncate()
        return first

    def unshift(self, *elements: T) -> int:
        """Insert `elements` at the front, keeping their order. Returns the new length.

        Existing elements are moved right starting from the last one so
        that no slot is overwritten before it has been copied.
        """
        k = len(elements)
        if k == 0:
            return self._length

        self._reserve(self._length + k)
        for i in range(self._length - 1, -1, -1):
            self._data[i + k] = self._data[i]

        for offset, element in enumerate(elements):
            self._data[offset] = element

        self._length += k
        return self._length

    def includes(self, value: Any) -> bool:
        """Return True if some element is `value` or compares equal to it.

        Same rule as Python's built-in containers: identity first, then ``==``.
        """
        i = 0
        while i < self._length:
            element = self._data[i]
            if element is value or element == value:
                return True
            i += 1
        return False

    @overload
    def find(self, predicate: Callable[[T], Any]) -> Optional[T]: ...
    @overload
    def find(self, predicate: Callable[[T], Any], default: U) -> T | U: ...

    def find(self, predicate: Callable[[T], Any], default: U | None = None) -> T | U | None:
        """Return the first element satisfying `predicate`, else `default`.

        The predicate runs once per visited element and the scan stops at
        the first match.
        """
        i = 0
        while i < self._length:
            element = self._data[i]
            if predicate(element):
                return element
            i += 1
        return default

    def for_each(self, callback: Callable[[T, int, "CustomArray[T]"], Any]) -> None:
        """Call ``callback(element, index, self)`` for every element in order."""
        i = 0
        while i < self._length:
            callback(self._data[i], i, self)
            i += 1

    def sort(self, compare: Optional[Callable[[T, T], int]] = None) -> None:
        """Sort in place with an exchange (bubble) sort. O(n^2), not stable.

        Adjacent elements ``a, b`` are swapped whenever ``compare(a, b) > 0``.
        Without `compare`, elements are ordered with ``<`` / ``>``.
        """
        cmp = compare if compare is not None else natural_order
        data = self._data

        i = 0
        while i < self._length - 1:
            j = 0
            while j < self._length - i - 1:
                # The comparator may have shrunk the array; recheck before swapping.
                if cmp(data[j], data[j + 1]) > 0 and j + 1 < self._length:
                    data[j], data[j + 1] = data[j + 1], data[j]
                j += 1
            i += 1

    def to_string(self) -> str:
        """Join the elements' ``str()`` forms with ``", "``."""
        result = ""
        i = 0
        while i < self._length:
            result += str(self._data[i])
            if i < self._length - 1:
                result += ", "
            i += 1
        return result

    def clear(self) -> None:
        """Remove all elements."""
        self._length = 0
        self._truncate()

    @overload
    def get(self, idx: int) -> Optional[T]: ...
    @overload
    def get(self, idx: int, default: U) -> T | U: ...

    def get(self, idx: int, default: U | None = None) -> T | U | None:
        """Safe accessor: return the element at `idx` or `default` if out of range."""
        try:
            i = self._normalize_index(idx, self._length)
        except IndexError:
            return default
        return self._data[i]

    def to_list(self) -> List[T]:
        """Return the live elements as a plain Python list."""
        out: List[T] = []
        i = 0
        while i < self._length:
            out += [self._data[i]]
            i += 1
        return out

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[T]:
        i = 0
        while i < self._length:
            yield self._data[i]
            i += 1

    def __getitem__(self, idx: int) -> T:
        """Return the element at `idx` (supports negative indices)."""
        i = self._normalize_index(idx, self._length)
        return self._data[i]

    def __contains__(self, value: Any) -> bool:
        return self.includes(value)

    def __bool__(self) -> bool:
        return self._length != 0

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"CustomArray({self.to_list()!r})"
