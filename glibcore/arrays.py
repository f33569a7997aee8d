"""Growable arrays: element arrays, byte arrays and pointer arrays."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


class Array:
    """A growable array of elements.

    When the array grows through ``set_size``, new slots hold zero if the
    array was created with ``clear`` or ``zero_terminated``; otherwise they
    hold ``None``, standing for contents that were never set.
    """

    def __init__(self, zero_terminated: bool = False, clear: bool = False) -> None:
        self.zero_terminated = bool(zero_terminated)
        self.clear = bool(clear)
        self._items: list[Any] = []

    @property
    def _fill(self) -> Any:
        return 0 if (self.clear or self.zero_terminated) else None

    def _check(self, values: Iterable[Any]) -> list[Any]:
        return list(values)

    def append_vals(self, data: Iterable[Any]) -> "Array":
        """Add elements at the end."""
        self._items.extend(self._check(data))
        return self

    def prepend_vals(self, data: Iterable[Any]) -> "Array":
        """Add elements at the start, keeping their order."""
        self._items[:0] = self._check(data)
        return self

    def insert_vals(self, index: int, data: Iterable[Any]) -> "Array":
        """Insert elements before position ``index``."""
        if not 0 <= index <= len(self._items):
            raise IndexError(f"insert position {index} out of range")
        self._items[index:index] = self._check(data)
        return self

    def set_size(self, length: int) -> "Array":
        """Grow or shrink the array to ``length`` elements."""
        if length < 0:
            raise ValueError("length must not be negative")
        current = len(self._items)
        if length > current:
            self._items.extend([self._fill] * (length - current))
        else:
            del self._items[length:]
        return self

    def _valid_index(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            raise IndexError(f"index {index} out of range")

    def remove_index(self, index: int) -> Any:
        """Remove the element at ``index``, shifting later ones down; return it."""
        self._valid_index(index)
        return self._items.pop(index)

    def remove_index_fast(self, index: int) -> Any:
        """Remove the element at ``index`` by moving the last one into its place."""
        self._valid_index(index)
        last = self._items.pop()
        if index == len(self._items):
            return last
        removed = self._items[index]
        self._items[index] = last
        return removed

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> Any:
        return self._items[index]

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"


class ByteArray(Array):
    """An array of byte values (0-255)."""

    def __init__(self) -> None:
        super().__init__(zero_terminated=False, clear=False)

    @property
    def _fill(self) -> int:
        return 0

    def _check(self, values: Iterable[int]) -> list[int]:
        result = list(values)
        for value in result:
            if not isinstance(value, int) or not 0 <= value <= 255:
                raise ValueError(f"not a byte value: {value!r}")
        return result

    def append(self, data: Iterable[int]) -> "ByteArray":
        """Add bytes at the end."""
        self.append_vals(data)
        return self

    def prepend(self, data: Iterable[int]) -> "ByteArray":
        """Add bytes at the start."""
        self.prepend_vals(data)
        return self

    def __bytes__(self) -> bytes:
        return bytes(self._items)


class PtrArray:
    """A growable array of object references."""

    def __init__(self) -> None:
        self._items: list[Any] = []

    def add(self, item: Any) -> None:
        """Append a reference."""
        self._items.append(item)

    def set_size(self, length: int) -> None:
        """Grow (filling with ``None``) or shrink to ``length`` entries."""
        if length < 0:
            raise ValueError("length must not be negative")
        current = len(self._items)
        if length > current:
            self._items.extend([None] * (length - current))
        else:
            del self._items[length:]

    def _valid_index(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            raise IndexError(f"index {index} out of range")

    def remove_index(self, index: int) -> Any:
        """Remove the entry at ``index`` preserving order; return it."""
        self._valid_index(index)
        return self._items.pop(index)

    def remove_index_fast(self, index: int) -> Any:
        """Remove the entry at ``index``, moving the last entry into its place."""
        self._valid_index(index)
        last = self._items.pop()
        if index == len(self._items):
            return last
        removed = self._items[index]
        self._items[index] = last
        return removed

    def _find(self, item: Any) -> int | None:
        return next(
            (i for i, held in enumerate(self._items) if held is item or held == item),
            None,
        )

    def remove(self, item: Any) -> bool:
        """Remove the first occurrence of ``item``; report whether one was found."""
        position = self._find(item)
        if position is None:
            return False
        self.remove_index(position)
        return True

    def remove_fast(self, item: Any) -> bool:
        """Like ``remove`` but does not preserve order."""
        position = self._find(item)
        if position is None:
            return False
        self.remove_index_fast(position)
        return True

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> Any:
        return self._items[index]

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"PtrArray({self._items!r})"