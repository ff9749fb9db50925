"""Singly linked list nodes and the classic operations on them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any

__all__ = [
    "Node",
    "from_iterable",
    "to_list",
    "insert_at_head",
    "insert_at",
    "delete_node",
    "contains",
    "reverse_recursive",
    "reverse_iterative",
    "reverse_k_groups",
    "merge_sorted",
    "midpoint",
    "merge_sort",
    "break_chain",
]


@dataclass(eq=False)
class Node:
    """A node of a singly linked list."""

    data: Any
    next: Node | None = field(default=None, repr=False)


def _nodes(head: Node | None) -> Iterator[Node]:
    seen: set[int] = set()
    node = head
    while node is not None:
        if id(node) in seen:
            raise ValueError("linked list contains a cycle")
        seen.add(id(node))
        yield node
        node = node.next


def from_iterable(values: Iterable[Any]) -> Node | None:
    """Build a linked list holding values in order; return its head."""
    head: Node | None = None
    for value in reversed(list(values)):
        head = Node(value, head)
    return head


def to_list(head: Node | None) -> list[Any]:
    """Return the data of every node from head onwards."""
    return [node.data for node in _nodes(head)]


def insert_at_head(head: Node | None, data: Any) -> Node:
    """Put data in front of the list; return the new head."""
    return Node(data, head)


def insert_at(head: Node | None, data: Any, pos: int) -> Node:
    """Insert data at position pos, appending when pos is past the end.

    Returns the head of the resulting list.
    """
    if pos < 0:
        raise ValueError("pos must be non-negative")
    if pos == 0 or head is None:
        return Node(data, head)
    node = head
    for _ in range(pos - 1):
        if node.next is None:
            break
        node = node.next
    node.next = Node(data, node.next)
    return head


def delete_node(head: Node | None, key: Any) -> Node | None:
    """Unlink the first node holding key; return the head of the result."""
    if head is None:
        return None
    if head.data == key:
        return head.next
    prev = head
    while prev.next is not None:
        if prev.next.data == key:
            prev.next = prev.next.next
            break
        prev = prev.next
    return head


def contains(head: Node | None, key: Any) -> bool:
    """Tell whether some node holds key."""
    return any(node.data == key for node in _nodes(head))


def reverse_recursive(head: Node | None) -> Node | None:
    """Reverse the list in place by recursion; return the new head."""
    if head is None or head.next is None:
        return head
    new_head = reverse_recursive(head.next)
    head.next.next = head
    head.next = None
    return new_head


def reverse_iterative(head: Node | None) -> Node | None:
    """Reverse the list in place; return the new head."""
    prev: Node | None = None
    cur = head
    while cur is not None:
        cur.next, prev, cur = prev, cur, cur.next
    return prev


def reverse_k_groups(head: Node | None, k: int) -> Node | None:
    """Reverse every run of k nodes, the shorter last run included."""
    if k < 1:
        raise ValueError("k must be positive")
    new_head: Node | None = None
    previous_tail: Node | None = None
    cur = head
    while cur is not None:
        group_head = cur
        prev: Node | None = None
        for _ in range(k):
            if cur is None:
                break
            cur.next, prev, cur = prev, cur, cur.next
        if previous_tail is None:
            new_head = prev
        else:
            previous_tail.next = prev
        previous_tail = group_head
    return new_head


def merge_sorted(a: Node | None, b: Node | None) -> Node | None:
    """Splice two sorted lists into one sorted list; return its head."""
    dummy = Node(None)
    tail = dummy
    while a is not None and b is not None:
        if a.data < b.data:
            tail.next, a = a, a.next
        else:
            tail.next, b = b, b.next
        tail = tail.next
    tail.next = a if a is not None else b
    return dummy.next


def midpoint(head: Node | None) -> Node:
    """Return the middle node; the first of the two middles for even lengths."""
    if head is None:
        raise ValueError("an empty list has no midpoint")
    slow = head
    fast = head.next
    while fast is not None and fast.next is not None:
        slow = slow.next  # type: ignore[assignment]
        fast = fast.next.next
    return slow


def merge_sort(head: Node | None) -> Node | None:
    """Sort the list by merge sort, relinking its nodes; return the new head."""
    if head is None or head.next is None:
        return head
    mid = midpoint(head)
    second = mid.next
    mid.next = None
    return merge_sorted(merge_sort(head), merge_sort(second))


def break_chain(head: Node | None) -> Node | None:
    """Cut the link that closes a cycle, if there is one; return head."""
    seen: set[int] = set()
    node = head
    while node is not None:
        seen.add(id(node))
        if node.next is None:
            return head
        if id(node.next) in seen:
            node.next = None
            return head
        node = node.next
    return head