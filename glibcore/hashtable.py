"""A hash table with pluggable hashing and key equality."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any


class _Key:
    __slots__ = ("key", "_table")

    def __init__(self, key: Any, table: "HashTable") -> None:
        self.key = key
        self._table = table

    def __hash__(self) -> int:
        return self._table.hash_func(self.key)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, _Key):
            return NotImplemented
        return bool(self._table.key_equal(self.key, other.key))


def _identity_equal(a: Any, b: Any) -> bool:
    return a is b


class HashTable:
    """Maps keys to values using ``hash_func`` and ``key_equal``.

    Without ``hash_func`` the built-in ``hash`` is used; without
    ``key_equal`` keys are compared with ``==``. Replacing the value of an
    existing key keeps the key object that was stored first.
    """

    def __init__(
        self,
        hash_func: Callable[[Any], int] | None = None,
        key_equal: Callable[[Any, Any], bool] | None = None,
        *,
        identity: bool = False,
    ) -> None:
        self.hash_func = hash_func if hash_func is not None else (id if identity else hash)
        if key_equal is not None:
            self.key_equal = key_equal
        else:
            self.key_equal = _identity_equal if identity else (lambda a, b: a == b)
        self._nodes: dict[_Key, Any] = {}
        self._frozen = 0

    def _wrap(self, key: Any) -> _Key:
        return _Key(key, self)

    def lookup(self, key: Any) -> Any:
        """Return the value for ``key``, or ``None`` when absent."""
        return self._nodes.get(self._wrap(key))

    def lookup_extended(self, key: Any) -> tuple[Any, Any] | None:
        """Return ``(stored_key, value)`` for ``key``, or ``None`` when absent."""
        wrapped = self._wrap(key)
        for stored in self._nodes.keys() & {wrapped}:
            return stored.key, self._nodes[stored]
        return None

    def insert(self, key: Any, value: Any) -> None:
        """Insert or replace; an existing key object is kept."""
        self._nodes[self._wrap(key)] = value

    def remove(self, key: Any) -> None:
        """Remove ``key`` if present."""
        self._nodes.pop(self._wrap(key), None)

    @property
    def frozen(self) -> bool:
        return self._frozen > 0

    def freeze(self) -> None:
        """Suspend internal reorganisation; calls nest."""
        self._frozen += 1

    def thaw(self) -> None:
        """Undo one ``freeze``; extra calls are ignored."""
        if self._frozen:
            self._frozen -= 1

    def foreach(self, func: Callable[[Any, Any], Any]) -> None:
        """Call ``func(key, value)`` for every entry."""
        for stored, value in list(self._nodes.items()):
            func(stored.key, value)

    def foreach_remove(self, func: Callable[[Any, Any], Any]) -> int:
        """Remove entries for which ``func(key, value)`` is true; return how many."""
        doomed = [stored for stored, value in list(self._nodes.items()) if func(stored.key, value)]
        for stored in doomed:
            del self._nodes[stored]
        return len(doomed)

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, key: Any) -> bool:
        return self._wrap(key) in self._nodes

    def __iter__(self) -> Iterator[Any]:
        return (stored.key for stored in list(self._nodes))