"""Singly linked lists and the usual operations on them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(eq=False, repr=False)
class ListNode:
    """A node of a singly linked list; nodes compare by identity."""

    val: int = 0
    next: ListNode | None = None

    def __iter__(self) -> Iterator[int]:
        node: ListNode | None = self
        while node is not None:
            yield node.val
            node = node.next

    def __repr__(self) -> str:
        return f"ListNode({list(self)!r})"


def _nodes(head: ListNode | None) -> Iterator[ListNode]:
    while head is not None:
        yield head
        head = head.next


def build_list(values: Iterable[int]) -> ListNode | None:
    """Build a linked list holding ``values`` in order."""
    head: ListNode | None = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def list_values(head: ListNode | None) -> list[int]:
    """Return the values of the list starting at ``head``."""
    return [node.val for node in _nodes(head)]


def merge_two_lists(list1: ListNode | None, list2: ListNode | None) -> ListNode | None:
    """Splice two sorted lists into one sorted list.

    On equal values the node from ``list2`` comes first.
    """
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


def swap_pairs(head: ListNode | None) -> ListNode | None:
    """Swap every two adjacent nodes and return the new head."""
    dummy = ListNode(0, head)
    prev = dummy
    while (first := prev.next) is not None and (second := first.next) is not None:
        first.next = second.next
        second.next = first
        prev.next = second
        prev = first
    return dummy.next


def delete_duplicates(head: ListNode | None) -> ListNode | None:
    """Drop repeated values from a sorted list, keeping the first of each run."""
    node = head
    while node is not None and node.next is not None:
        if node.val == node.next.val:
            node.next = node.next.next
        else:
            node = node.next
    return head


def _split_middle(head: ListNode) -> ListNode:
    """Cut the list in two and return the head of the second half."""
    slow = fast = head
    prev = head
    while fast is not None and fast.next is not None:
        prev = slow
        slow = slow.next
        fast = fast.next.next
    prev.next = None
    return slow


def sort_list(head: ListNode | None) -> ListNode | None:
    """Sort a linked list with merge sort."""
    if head is None or head.next is None:
        return head
    second = _split_middle(head)
    return merge_two_lists(sort_list(head), sort_list(second))


def get_intersection_node(
    head_a: ListNode | None, head_b: ListNode | None
) -> ListNode | None:
    """Return the first node of ``head_a`` that is also a node of ``head_b``."""
    shared = set(_nodes(head_b))
    return next((node for node in _nodes(head_a) if node in shared), None)


def reverse_list(head: ListNode | None) -> ListNode | None:
    """Reverse a list in place and return the new head."""
    prev: ListNode | None = None
    while head is not None:
        head.next, prev, head = prev, head, head.next
    return prev


def delete_node(node: ListNode) -> None:
    """Remove ``node`` from its list given only the node itself."""
    if node.next is None:
        raise ValueError("cannot delete the tail node of a list")
    node.val, node.next = node.next.val, node.next.next