"""Singly linked lists and classic list algorithms: merging, reordering and sorting."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    val: int = 0
    next: Optional["ListNode"] = None


def from_values(values: Iterable[int]) -> Optional[ListNode]:
    """Build a linked list holding ``values`` in order and return its head."""
    dummy = ListNode()
    tail = dummy
    for value in values:
        tail.next = ListNode(value)
        tail = tail.next
    return dummy.next


def _nodes(head: Optional[ListNode]) -> Iterator[ListNode]:
    while head is not None:
        yield head
        head = head.next


def to_values(head: Optional[ListNode]) -> list[int]:
    """Return the values of the list starting at ``head``."""
    return [node.val for node in _nodes(head)]


class SinglyLinkedList:
    """A mutable singly linked list of values."""

    def __init__(self) -> None:
        self.head: Optional[ListNode] = None
        self._size = 0

    def insert_at_beginning(self, data: int) -> None:
        self.head = ListNode(data, self.head)
        self._size += 1

    def insert_at_end(self, data: int) -> None:
        node = ListNode(data)
        if self.head is None:
            self.head = node
        else:
            tail = self.head
            while tail.next is not None:
                tail = tail.next
            tail.next = node
        self._size += 1

    def insert_at_position(self, data: int, pos: int) -> None:
        """Insert ``data`` so that it becomes the ``pos``-th element (1-based)."""
        if pos < 1 or pos > self._size + 1:
            raise IndexError(f"position {pos} is outside 1..{self._size + 1}")
        if pos == 1:
            self.insert_at_beginning(data)
            return
        previous = self.head
        for _ in range(pos - 2):
            previous = previous.next
        previous.next = ListNode(data, previous.next)
        self._size += 1

    def delete_beginning(self) -> Optional[int]:
        """Remove the first element and return it, or None if the list is empty."""
        if self.head is None:
            return None
        removed = self.head
        self.head = removed.next
        self._size -= 1
        return removed.val

    def __iter__(self) -> Iterator[int]:
        return (node.val for node in _nodes(self.head))

    def __len__(self) -> int:
        return self._size


def merge_two(a: Optional[ListNode], b: Optional[ListNode]) -> Optional[ListNode]:
    """Merge two sorted lists by relinking their nodes; ties take from ``b`` first."""
    dummy = ListNode()
    tail = dummy
    while a is not None and b is not None:
        if a.val < b.val:
            tail.next, a = a, a.next
        else:
            tail.next, b = b, b.next
        tail = tail.next
    tail.next = a if a is not None else b
    return dummy.next


def merge_k_lists(lists: Iterable[Optional[ListNode]]) -> Optional[ListNode]:
    """Merge any number of sorted lists into one sorted list."""
    result: Optional[ListNode] = None
    for head in lists:
        result = merge_two(result, head)
    return result


def _reverse(head: Optional[ListNode]) -> Optional[ListNode]:
    previous = None
    while head is not None:
        head.next, previous, head = previous, head, head.next
    return previous


def _middle(head: ListNode) -> ListNode:
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
    return slow


def reorder_list(head: Optional[ListNode]) -> None:
    """Reorder ``L0 L1 .. Ln`` into ``L0 Ln L1 Ln-1 ..`` in place."""
    if head is None or head.next is None:
        return
    mid = _middle(head)
    second = _reverse(mid.next)
    mid.next = None
    first = head
    while second is not None:
        first_next, second_next = first.next, second.next
        first.next = second
        second.next = first_next
        first, second = first_next, second_next


def _split(head: ListNode) -> ListNode:
    slow, fast = head, head.next
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
    mid = slow.next
    slow.next = None
    return mid


def sort_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Sort a linked list with merge sort and return the new head."""
    if head is None or head.next is None:
        return head
    mid = _split(head)
    return merge_two(sort_list(head), sort_list(mid))