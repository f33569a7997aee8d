"""A reference-counted cache that creates values from keys on demand."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from glibcore.hashtable import HashTable


@dataclass(eq=False)
class _Node:
    value: Any
    ref_count: int = 1


class Cache:
    """Shares one value per key, creating and destroying values as needed.

    ``insert`` returns the value for a key, creating it with
    ``value_new_func`` from a duplicate of the key the first time; every
    ``insert`` must be balanced by a ``remove`` of the returned value.
    """

    def __init__(
        self,
        value_new_func: Callable[[Any], Any],
        value_destroy_func: Callable[[Any], Any],
        key_dup_func: Callable[[Any], Any],
        key_destroy_func: Callable[[Any], Any],
        hash_key_func: Callable[[Any], int] | None = None,
        hash_value_func: Callable[[Any], int] | None = None,
        key_equal: Callable[[Any, Any], bool] | None = None,
    ) -> None:
        for name, func in (
            ("value_new_func", value_new_func),
            ("value_destroy_func", value_destroy_func),
            ("key_dup_func", key_dup_func),
            ("key_destroy_func", key_destroy_func),
        ):
            if func is None:
                raise TypeError(f"{name} must not be None")
        self.value_new_func = value_new_func
        self.value_destroy_func = value_destroy_func
        self.key_dup_func = key_dup_func
        self.key_destroy_func = key_destroy_func
        self._key_table = HashTable(hash_key_func, key_equal)
        self._value_table = HashTable(hash_value_func, identity=True)

    def insert(self, key: Any) -> Any:
        """Return the value for ``key``, creating it if needed, and take a reference."""
        node = self._key_table.lookup(key)
        if node is not None:
            node.ref_count += 1
            return node.value
        key = self.key_dup_func(key)
        value = self.value_new_func(key)
        node = _Node(value)
        self._key_table.insert(key, node)
        self._value_table.insert(value, key)
        return value

    def remove(self, value: Any) -> None:
        """Drop a reference to ``value``; destroy it and its key on the last one."""
        found = self._value_table.lookup_extended(value)
        if found is None:
            raise KeyError("value is not in the cache")
        _, key = found
        node = self._key_table.lookup(key)
        if node is None:
            raise KeyError("value is not in the cache")
        node.ref_count -= 1
        if node.ref_count == 0:
            self._value_table.remove(value)
            self._key_table.remove(key)
            self.key_destroy_func(key)
            self.value_destroy_func(node.value)

    def key_foreach(self, func: Callable[[Any, Any], Any]) -> None:
        """Call ``func(value, key)`` for every cached entry."""
        if func is None:
            raise TypeError("func must not be None")
        self._value_table.foreach(func)

    def value_foreach(self, func: Callable[[Any, Any], Any]) -> None:
        """Call ``func(key, value)`` for every cached entry."""
        if func is None:
            raise TypeError("func must not be None")
        self._key_table.foreach(lambda key, node: func(key, node.value))

    def __len__(self) -> int:
        return len(self._key_table)