"""Prefix completion over a set of items."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterable, Sequence
from typing import Any


def _common_prefix(strings: Iterable[str]) -> str:
    iterator = iter(strings)
    common = next(iterator, "")
    for text in iterator:
        length = 0
        for a, b in zip(common, text):
            if a != b:
                break
            length += 1
        common = common[:length]
        if not common:
            break
    return common


class Completion:
    """Finds the items whose string form starts with a given prefix.

    ``func`` maps an item to the string used for matching; without it the
    items are strings themselves. Results of the last completion are kept
    and reused when the next prefix extends the previous one.
    """

    def __init__(self, func: Callable[[Any], str] | None = None) -> None:
        self.func = func
        self.items: list[Any] = []
        self.cache: list[Any] = []
        self.prefix: str | None = None

    def _key(self, item: Any) -> str:
        return self.func(item) if self.func is not None else item

    @staticmethod
    def _remove_one(target: list[Any], item: Any) -> None:
        for position, held in enumerate(target):
            if held is item or held == item:
                del target[position]
                return

    def add_items(self, items: Iterable[Any]) -> None:
        """Add items; the cached completion is discarded."""
        self.cache = []
        self.prefix = None
        for item in items:
            self.items.insert(0, item)

    def remove_items(self, items: Iterable[Any]) -> None:
        """Remove the first occurrence of each item from the items and the cache."""
        items = list(items)
        for item in items:
            self._remove_one(self.items, item)
        for item in items:
            self._remove_one(self.cache, item)

    def clear_items(self) -> None:
        """Remove every item."""
        self.items = []
        self.cache = []
        self.prefix = None

    def _longest_prefix(self) -> str | None:
        if not self.cache:
            return None
        assert self.prefix is not None
        start = len(self.prefix)
        return self.prefix + _common_prefix(self._key(item)[start:] for item in self.cache)

    def complete(self, prefix: str) -> tuple[list[Any], str | None]:
        """Return the matching items and the longest prefix they all share.

        An empty prefix yields every item; the shared prefix is ``None``
        when nothing matches.
        """
        if prefix is None:
            raise TypeError("prefix must be a string")
        reused = False
        if self.prefix is not None and self.cache:
            if len(self.prefix) <= len(prefix) and prefix.startswith(self.prefix):
                self.cache = [item for item in self.cache if self._key(item).startswith(prefix)]
                reused = True
        if not reused:
            self.cache = []
            if prefix:
                for item in self.items:
                    if self._key(item).startswith(prefix):
                        self.cache.insert(0, item)
        self.prefix = prefix if self.cache else None
        longest = self._longest_prefix()
        return (list(self.cache) if prefix else list(self.items)), longest


def main(argv: Sequence[str] | None = None) -> int:
    """Complete each prefix against the lines of a file."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 2:
        print("Usage: completion filename prefix1 [prefix2 ...]", file=sys.stderr)
        return 1
    filename, prefixes = args[0], args[1:]
    try:
        with open(filename, encoding="utf-8") as handle:
            lines = list(handle)
    except OSError:
        print(f"Cannot open {filename}", file=sys.stderr)
        return 1
    completion = Completion()
    for line in lines:
        completion.add_items([line])
    for prefix in prefixes:
        print(f"COMPLETING: {prefix}")
        matches, longest = completion.complete(prefix)
        for match in matches:
            print(match, end="")
        print(f"LONG MATCH: {longest if longest is not None else '(null)'}")
    return 0