"""Singly linked lists: a node type, a list wrapper and classic list algorithms."""

from __future__ import annotations

import heapq
from dataclasses import dataclass
from itertools import chain
from typing import Iterable, Iterator, List, Optional


@dataclass(eq=False)
class ListNode:
    """A singly linked list node; nodes compare by identity."""

    val: int = 0
    next: Optional["ListNode"] = None


def list_from_values(values: Iterable[int]) -> Optional[ListNode]:
    """Chain ``values`` into new nodes and return the head, or None if empty."""
    head: Optional[ListNode] = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def _nodes(head: Optional[ListNode]) -> Iterator[ListNode]:
    node = head
    while node is not None:
        yield node
        node = node.next


def values_of(head: Optional[ListNode]) -> List[int]:
    """Values of the chain starting at ``head``, in order."""
    return [node.val for node in _nodes(head)]


def merge_k_lists(lists: Iterable[Optional[ListNode]]) -> Optional[ListNode]:
    """A new sorted list holding every value of every input list."""
    values = list(chain.from_iterable(values_of(head) for head in lists))
    heapq.heapify(values)
    return list_from_values(heapq.heappop(values) for _ in range(len(values)))


def merge_two_lists(
    list1: Optional[ListNode], list2: Optional[ListNode]
) -> Optional[ListNode]:
    """Splice two sorted lists into one; on equal values ``list2`` goes first."""
    dummy = ListNode()
    tail = dummy
    while list1 is not None and list2 is not None:
        if list1.val < list2.val:
            tail.next, list1 = list1, list1.next
        else:
            tail.next, list2 = list2, list2.next
        tail = tail.next
    tail.next = list1 if list1 is not None else list2
    return dummy.next


def reverse_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse the chain in place and return its new head."""
    previous: Optional[ListNode] = None
    while head is not None:
        head.next, previous, head = previous, head, head.next
    return previous


class LinkedList:
    """A singly linked list with 1-based positional operations."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.head: Optional[ListNode] = list_from_values(values)

    def __iter__(self) -> Iterator[int]:
        return (node.val for node in _nodes(self.head))

    def __len__(self) -> int:
        return sum(1 for _ in _nodes(self.head))

    def __str__(self) -> str:
        return "".join(f"{value}->" for value in self) + "NULL"

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def _node_at(self, position: int) -> ListNode:
        if position >= 1:
            for index, node in enumerate(_nodes(self.head), 1):
                if index == position:
                    return node
        raise IndexError(f"no node at position {position}")

    def append(self, value: int) -> None:
        """Add ``value`` at the end."""
        node = ListNode(value)
        if self.head is None:
            self.head = node
            return
        tail = self.head
        while tail.next is not None:
            tail = tail.next
        tail.next = node

    def prepend(self, value: int) -> None:
        """Add ``value`` at the front."""
        self.head = ListNode(value, self.head)

    def insert_at(self, position: int, value: int) -> None:
        """Insert ``value`` so that it ends up at 1-based ``position``."""
        if position == 1:
            self.prepend(value)
            return
        before = self._node_at(position - 1)
        before.next = ListNode(value, before.next)

    def pop_front(self) -> int:
        """Remove and return the first value."""
        if self.head is None:
            raise IndexError("pop from an empty linked list")
        value = self.head.val
        self.head = self.head.next
        return value

    def pop_back(self) -> int:
        """Remove and return the last value."""
        if self.head is None:
            raise IndexError("pop from an empty linked list")
        if self.head.next is None:
            value = self.head.val
            self.head = None
            return value
        before = self.head
        while before.next.next is not None:
            before = before.next
        value = before.next.val
        before.next = None
        return value

    def delete_at(self, position: int) -> int:
        """Remove and return the value at 1-based ``position``."""
        if position == 1:
            return self.pop_front()
        before = self._node_at(position - 1)
        if before.next is None:
            raise IndexError(f"no node at position {position}")
        value = before.next.val
        before.next = before.next.next
        return value

    def clear(self) -> None:
        """Drop every node."""
        self.head = None

    def reverse(self) -> None:
        """Reverse the list in place."""
        self.head = reverse_list(self.head)