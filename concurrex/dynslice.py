"""A small growable sequence with bounds-checked operations."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, Generic, TypeVar

T = TypeVar("T")


def _format(values) -> str:
    return "[" + " ".join(str(v) for v in values) + "]"


class Slice(Generic[T]):
    """A sequence that starts with ``max(length, 1)`` empty (``None``) slots."""

    def __init__(self, length: int) -> None:
        self._items: list[Any] = [None] * max(length, 1)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Slice({self._items!r})"

    def _check(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            raise IndexError("index out of bounds")

    def __getitem__(self, index: int) -> T:
        self._check(index)
        return self._items[index]

    def append(self, value: T) -> None:
        """Add ``value`` at the end."""
        self._items.append(value)

    def insert_at(self, index: int, value: T) -> None:
        """Store ``value`` at an existing ``index``, replacing what was there."""
        self._check(index)
        self._items[index] = value

    def pop(self) -> T:
        """Remove and return the last element."""
        if not self._items:
            raise IndexError("cannot pop from a empty slice")
        return self._items.pop()

    def remove_at(self, index: int) -> None:
        """Delete the element at ``index``."""
        self._check(index)
        del self._items[index]

    def swap(self, i: int, j: int) -> None:
        """Exchange the elements at ``i`` and ``j``."""
        self._check(i)
        self._check(j)
        self._items[i], self._items[j] = self._items[j], self._items[i]

    def slice(self, start: int, stop: int) -> list[T]:
        """Return the elements from ``start`` up to, not including, ``stop``."""
        self._check(start)
        if stop < start or stop > len(self._items):
            raise IndexError("index out of bounds")
        return self._items[start:stop]

    def to_list(self) -> list[T]:
        """Return the elements as a new list."""
        return list(self._items)


def simple_array() -> None:
    """Show a fixed array of five integers with one element set."""
    values = [0] * 5
    values[0] = 1
    print(values[0])
    print(_format(values))


def custom_slice_driver() -> None:
    """Exercise a Slice and print what is left of it."""
    s: Slice[str] = Slice(2)
    s.append("foo")
    s.insert_at(0, "bas")
    s.insert_at(1, "boo")
    s.remove_at(1)
    print(s.pop())
    print(_format(s.to_list()))


def main(argv: list[str] | None = None) -> int:
    simple_array()
    custom_slice_driver()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())