"""Binary tree nodes, traversals and the classic tree problems."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import Any

__all__ = [
    "TreeNode",
    "inorder",
    "preorder",
    "postorder",
    "height",
    "nodes_at_distance",
    "breadth_first",
    "level_order",
    "size",
    "maximum",
    "left_view",
    "children_sum_property",
    "is_balanced",
    "maximum_width",
    "build_from_inorder_preorder",
    "spiral_order",
    "diameter",
    "lowest_common_ancestor",
    "count_complete_nodes",
    "serialize",
    "deserialize",
    "iterative_inorder",
    "iterative_preorder",
    "iterative_postorder",
]


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    key: Any
    left: TreeNode | None = None
    right: TreeNode | None = None


def _levels(root: TreeNode | None) -> Iterator[list[TreeNode]]:
    level = [root] if root is not None else []
    while level:
        yield level
        level = [
            child
            for node in level
            for child in (node.left, node.right)
            if child is not None
        ]


def _inorder(node: TreeNode | None) -> Iterator[Any]:
    if node is not None:
        yield from _inorder(node.left)
        yield node.key
        yield from _inorder(node.right)


def _preorder(node: TreeNode | None) -> Iterator[Any]:
    if node is not None:
        yield node.key
        yield from _preorder(node.left)
        yield from _preorder(node.right)


def _postorder(node: TreeNode | None) -> Iterator[Any]:
    if node is not None:
        yield from _postorder(node.left)
        yield from _postorder(node.right)
        yield node.key


def inorder(root: TreeNode | None) -> list[Any]:
    """Return the keys in left-root-right order."""
    return list(_inorder(root))


def preorder(root: TreeNode | None) -> list[Any]:
    """Return the keys in root-left-right order."""
    return list(_preorder(root))


def postorder(root: TreeNode | None) -> list[Any]:
    """Return the keys in left-right-root order."""
    return list(_postorder(root))


def height(root: TreeNode | None) -> int:
    """Return the number of levels; 0 for an empty tree."""
    return sum(1 for _ in _levels(root))


def nodes_at_distance(root: TreeNode | None, k: int) -> list[Any]:
    """Return the keys k edges below the root, left to right."""
    if k < 0:
        return []
    for depth, level in enumerate(_levels(root)):
        if depth == k:
            return [node.key for node in level]
    return []


def breadth_first(root: TreeNode | None) -> list[Any]:
    """Return the keys level by level, left to right."""
    return [node.key for level in _levels(root) for node in level]


def level_order(root: TreeNode | None) -> list[list[Any]]:
    """Return the keys grouped by level."""
    return [[node.key for node in level] for level in _levels(root)]


def size(root: TreeNode | None) -> int:
    """Return the number of nodes."""
    return sum(len(level) for level in _levels(root))


def maximum(root: TreeNode | None) -> Any:
    """Return the largest key; raises ValueError for an empty tree."""
    if root is None:
        raise ValueError("an empty tree has no maximum")
    return max(breadth_first(root))


def left_view(root: TreeNode | None) -> list[Any]:
    """Return the first key seen on each level from the left."""
    return [level[0].key for level in _levels(root)]


def children_sum_property(root: TreeNode | None) -> bool:
    """Tell whether every inner node's key equals the sum of its children's keys."""
    for level in _levels(root):
        for node in level:
            children = [c for c in (node.left, node.right) if c is not None]
            if children and node.key != sum(c.key for c in children):
                return False
    return True


def _balanced_height(node: TreeNode | None) -> int:
    if node is None:
        return 0
    left = _balanced_height(node.left)
    if left < 0:
        return -1
    right = _balanced_height(node.right)
    if right < 0 or abs(left - right) > 1:
        return -1
    return max(left, right) + 1


def is_balanced(root: TreeNode | None) -> bool:
    """Tell whether subtree heights differ by at most one at every node."""
    return _balanced_height(root) >= 0


def maximum_width(root: TreeNode | None) -> int:
    """Return the largest number of nodes on one level."""
    return max((len(level) for level in _levels(root)), default=0)


def build_from_inorder_preorder(
    inorder_keys: Sequence[Any], preorder_keys: Sequence[Any]
) -> TreeNode | None:
    """Rebuild a tree with distinct keys from its inorder and preorder traversals."""
    if len(inorder_keys) != len(preorder_keys):
        raise ValueError("traversals must have the same length")
    position = {key: i for i, key in enumerate(inorder_keys)}
    if len(position) != len(inorder_keys):
        raise ValueError("keys must be distinct")
    if set(preorder_keys) != set(position):
        raise ValueError("traversals must hold the same keys")
    pending = iter(preorder_keys)

    def build(low: int, high: int) -> TreeNode | None:
        if low > high:
            return None
        key = next(pending)
        index = position[key]
        if not low <= index <= high:
            raise ValueError("traversals do not describe one tree")
        node = TreeNode(key)
        node.left = build(low, index - 1)
        node.right = build(index + 1, high)
        return node

    return build(0, len(inorder_keys) - 1)


def spiral_order(root: TreeNode | None) -> list[list[Any]]:
    """Return the levels, every second one read right to left."""
    return [
        keys if depth % 2 == 0 else keys[::-1]
        for depth, keys in enumerate(level_order(root))
    ]


def diameter(root: TreeNode | None) -> int:
    """Return the number of nodes on the longest path between two nodes."""
    best = 0

    def depth(node: TreeNode | None) -> int:
        nonlocal best
        if node is None:
            return 0
        left = depth(node.left)
        right = depth(node.right)
        best = max(best, 1 + left + right)
        return 1 + max(left, right)

    depth(root)
    return best


def _find_path(node: TreeNode | None, key: Any, path: list[TreeNode]) -> bool:
    if node is None:
        return False
    path.append(node)
    if node.key == key:
        return True
    if _find_path(node.left, key, path) or _find_path(node.right, key, path):
        return True
    path.pop()
    return False


def lowest_common_ancestor(root: TreeNode | None, a: Any, b: Any) -> TreeNode | None:
    """Return the deepest node above both keys, or None if either is missing."""
    path_a: list[TreeNode] = []
    path_b: list[TreeNode] = []
    if not _find_path(root, a, path_a) or not _find_path(root, b, path_b):
        return None
    common: TreeNode | None = None
    for x, y in zip(path_a, path_b):
        if x is not y:
            break
        common = x
    return common


def count_complete_nodes(root: TreeNode | None) -> int:
    """Count the nodes of a complete binary tree in O(log^2 n) time."""
    if root is None:
        return 0
    left_height = right_height = 0
    node: TreeNode | None = root
    while node is not None:
        left_height += 1
        node = node.left
    node = root
    while node is not None:
        right_height += 1
        node = node.right
    if left_height == right_height:
        return 2**left_height - 1
    return 1 + count_complete_nodes(root.left) + count_complete_nodes(root.right)


def serialize(root: TreeNode | None) -> list[Any]:
    """Return the preorder keys with None marking every missing child."""
    out: list[Any] = []
    stack: list[TreeNode | None] = [root]
    while stack:
        node = stack.pop()
        if node is None:
            out.append(None)
            continue
        out.append(node.key)
        stack.append(node.right)
        stack.append(node.left)
    return out


def deserialize(values: Iterable[Any]) -> TreeNode | None:
    """Rebuild a tree from the output of serialize."""
    pending = iter(values)

    def build() -> TreeNode | None:
        key = next(pending, None)
        if key is None:
            return None
        node = TreeNode(key)
        node.left = build()
        node.right = build()
        return node

    return build()


def iterative_inorder(root: TreeNode | None) -> list[Any]:
    """Return the inorder keys using an explicit stack."""
    out: list[Any] = []
    stack: list[TreeNode] = []
    node = root
    while node is not None or stack:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        out.append(node.key)
        node = node.right
    return out


def iterative_preorder(root: TreeNode | None) -> list[Any]:
    """Return the preorder keys using an explicit stack."""
    if root is None:
        return []
    out: list[Any] = []
    stack = [root]
    while stack:
        node = stack.pop()
        out.append(node.key)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return out


def iterative_postorder(root: TreeNode | None) -> list[Any]:
    """Return the postorder keys using one stack and a last-visited marker."""
    out: list[Any] = []
    stack: list[TreeNode] = []
    previous: TreeNode | None = None
    node = root
    while stack or node is not None:
        if node is not None:
            stack.append(node)
            node = node.left
            continue
        top = stack[-1]
        if top.right is None or top.right is previous:
            out.append(top.key)
            stack.pop()
            previous = top
        else:
            node = top.right
    return out