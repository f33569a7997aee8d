"""A doubly linked list with explicit nodes."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any

CompareFunc = Callable[[Any, Any], int]


@dataclass(eq=False)
class ListNode:
    """One link of a :class:`LinkedList`."""

    data: Any = None
    prev: ListNode | None = field(default=None, repr=False)
    next: ListNode | None = field(default=None, repr=False)


def _same(held: Any, data: Any) -> bool:
    return held is data or held == data


def _merge(left: list[ListNode], right: list[ListNode], compare: CompareFunc) -> list[ListNode]:
    # Ties take the element from the right-hand run.
    merged: list[ListNode] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if compare(left[i].data, right[j].data) < 0:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def _merge_sort(nodes: list[ListNode], compare: CompareFunc) -> list[ListNode]:
    if len(nodes) <= 1:
        return nodes
    middle = len(nodes) // 2
    return _merge(
        _merge_sort(nodes[:middle], compare),
        _merge_sort(nodes[middle:], compare),
        compare,
    )


class LinkedList:
    """A doubly linked list whose nodes can be held and manipulated directly."""

    def __init__(self, items: Iterable[Any] | None = None) -> None:
        self._head: ListNode | None = None
        self._tail: ListNode | None = None
        self._length = 0
        for item in items or ():
            self.append(item)

    def nodes(self) -> Iterator[ListNode]:
        """Iterate over the nodes from first to last."""
        node = self._head
        while node is not None:
            following = node.next
            yield node
            node = following

    def _relink(self, nodes: list[ListNode]) -> None:
        previous: ListNode | None = None
        for node in nodes:
            node.prev = previous
            node.next = None
            if previous is not None:
                previous.next = node
            previous = node
        self._head = nodes[0] if nodes else None
        self._tail = previous
        self._length = len(nodes)

    def _link_before(self, sibling: ListNode, node: ListNode) -> None:
        node.prev = sibling.prev
        node.next = sibling
        if sibling.prev is not None:
            sibling.prev.next = node
        else:
            self._head = node
        sibling.prev = node
        self._length += 1

    def append(self, data: Any) -> ListNode:
        """Add ``data`` at the end; return its node."""
        node = ListNode(data)
        if self._tail is None:
            self._head = self._tail = node
        else:
            node.prev = self._tail
            self._tail.next = node
            self._tail = node
        self._length += 1
        return node

    def prepend(self, data: Any) -> ListNode:
        """Add ``data`` at the start; return its node."""
        if self._head is None:
            return self.append(data)
        node = ListNode(data)
        self._link_before(self._head, node)
        return node

    def insert(self, data: Any, position: int) -> ListNode:
        """Insert before ``position``; negative or past-the-end positions append."""
        if position < 0:
            return self.append(data)
        if position == 0:
            return self.prepend(data)
        sibling = self.nth(position)
        if sibling is None:
            return self.append(data)
        node = ListNode(data)
        self._link_before(sibling, node)
        return node

    def concat(self, other: LinkedList) -> LinkedList:
        """Move every node of ``other`` to the end of this list."""
        if other is self:
            raise ValueError("cannot concatenate a list with itself")
        if other._head is None:
            return self
        if self._tail is None:
            self._head = other._head
        else:
            self._tail.next = other._head
            other._head.prev = self._tail
        self._tail = other._tail
        self._length += other._length
        other._head = other._tail = None
        other._length = 0
        return self

    def _unlink(self, node: ListNode) -> None:
        if node.prev is not None:
            node.prev.next = node.next
        else:
            self._head = node.next
        if node.next is not None:
            node.next.prev = node.prev
        else:
            self._tail = node.prev
        node.prev = node.next = None
        self._length -= 1

    def remove(self, data: Any) -> bool:
        """Remove the first element equal to ``data``; report whether one was found."""
        node = self.find(data)
        if node is None:
            return False
        self._unlink(node)
        return True

    def remove_link(self, node: ListNode) -> ListNode:
        """Detach ``node`` from the list without discarding it; return it."""
        if self.position(node) < 0:
            raise ValueError("node is not part of this list")
        self._unlink(node)
        return node

    def copy(self) -> LinkedList:
        """Return a new list holding the same elements."""
        return LinkedList(self)

    def reverse(self) -> LinkedList:
        """Reverse the list in place."""
        node = self._head
        self._head, self._tail = self._tail, self._head
        while node is not None:
            node.prev, node.next = node.next, node.prev
            node = node.prev
        return self

    def nth(self, n: int) -> ListNode | None:
        """Return the node at position ``n``, or ``None``."""
        if n < 0:
            return None
        return next((node for i, node in enumerate(self.nodes()) if i == n), None)

    def nth_data(self, n: int) -> Any:
        """Return the element at position ``n``, or ``None``."""
        node = self.nth(n)
        return node.data if node is not None else None

    def find(self, data: Any) -> ListNode | None:
        """Return the first node holding ``data``, or ``None``."""
        return next((node for node in self.nodes() if _same(node.data, data)), None)

    def find_custom(self, data: Any, func: CompareFunc) -> ListNode | None:
        """Return the first node for which ``func(element, data)`` is zero."""
        return next((node for node in self.nodes() if not func(node.data, data)), None)

    def position(self, node: ListNode) -> int:
        """Return the position of ``node``, or -1 when it is not in the list."""
        return next((i for i, held in enumerate(self.nodes()) if held is node), -1)

    def index(self, data: Any) -> int:
        """Return the position of the first element equal to ``data``, or -1."""
        return next((i for i, held in enumerate(self) if _same(held, data)), -1)

    def first(self) -> ListNode | None:
        return self._head

    def last(self) -> ListNode | None:
        return self._tail

    def foreach(self, func: Callable[[Any, Any], Any], user_data: Any = None) -> None:
        """Call ``func(element, user_data)`` for every element."""
        for data in list(self):
            func(data, user_data)

    def insert_sorted(self, data: Any, func: CompareFunc) -> ListNode:
        """Insert ``data`` before the first element it does not compare greater than."""
        sibling = next((node for node in self.nodes() if func(data, node.data) <= 0), None)
        if sibling is None:
            return self.append(data)
        node = ListNode(data)
        self._link_before(sibling, node)
        return node

    def sort(self, compare: CompareFunc) -> LinkedList:
        """Sort in place with a top-down merge sort."""
        self._relink(_merge_sort(list(self.nodes()), compare))
        return self

    def sort_runs(self, compare: CompareFunc) -> LinkedList:
        """Sort in place by merging the list's ascending runs pairwise."""
        runs: list[list[ListNode]] = []
        for node in self.nodes():
            if runs and compare(runs[-1][-1].data, node.data) <= 0:
                runs[-1].append(node)
            else:
                runs.append([node])
        while len(runs) > 1:
            merged = [_merge(runs[i], runs[i + 1], compare) for i in range(0, len(runs) - 1, 2)]
            if len(runs) % 2:
                merged.append(runs[-1])
            runs = merged
        self._relink(runs[0] if runs else [])
        return self

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in self.nodes())

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"