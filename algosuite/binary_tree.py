"""Binary trees: traversals, comparisons and reconstruction."""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass

_TRAVERSAL = re.compile(r"(?:[0-9]+(?:-+[0-9]+)*)?")
_ENTRY = re.compile(r"(-*)([0-9]+)")


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree; nodes compare by identity."""

    val: int = 0
    left: TreeNode | None = None
    right: TreeNode | None = None


def inorder_traversal(root: TreeNode | None) -> list[int]:
    """Return the values of the tree in in-order."""
    result: list[int] = []
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        result.append(node.val)
        node = node.right
    return result


def is_same_tree(p: TreeNode | None, q: TreeNode | None) -> bool:
    """Whether two trees have the same shape and values."""
    if p is None or q is None:
        return p is q
    return p.val == q.val and is_same_tree(p.left, q.left) and is_same_tree(p.right, q.right)


def _mirrors(a: TreeNode | None, b: TreeNode | None) -> bool:
    if a is None or b is None:
        return a is b
    return a.val == b.val and _mirrors(a.left, b.right) and _mirrors(a.right, b.left)


def is_symmetric(root: TreeNode | None) -> bool:
    """Whether the tree is a mirror image of itself."""
    return root is None or _mirrors(root.left, root.right)


def level_order(root: TreeNode | None) -> list[list[int]]:
    """Return the values of the tree level by level, left to right."""
    levels: list[list[int]] = []
    current = [root] if root is not None else []
    while current:
        levels.append([node.val for node in current])
        current = [
            child
            for node in current
            for child in (node.left, node.right)
            if child is not None
        ]
    return levels


def build_tree(preorder: Sequence[int], inorder: Sequence[int]) -> TreeNode | None:
    """Rebuild a tree from its preorder and inorder traversals."""
    if len(preorder) != len(inorder):
        raise ValueError("traversals differ in length")
    values = iter(preorder)

    def build(low: int, high: int) -> TreeNode | None:
        if low > high:
            return None
        value = next(values)
        position = next(
            (i for i in range(high, low - 1, -1) if inorder[i] == value), None
        )
        if position is None:
            raise ValueError(f"value {value!r} is missing from the inorder traversal")
        node = TreeNode(value)
        node.left = build(low, position - 1)
        node.right = build(position + 1, high)
        return node

    return build(0, len(inorder) - 1)


def construct_from_pre_post(pre: Sequence[int], post: Sequence[int]) -> TreeNode | None:
    """Rebuild a tree from its preorder and postorder traversals.

    Where the traversals leave a single child ambiguous it becomes a left child.
    """
    if len(pre) != len(post):
        raise ValueError("traversals differ in length")
    index = 0

    def construct(low: int, high: int) -> TreeNode | None:
        nonlocal index
        if index >= len(pre) or low > high:
            return None
        root = TreeNode(pre[index])
        index += 1
        if low == high or index >= len(pre):
            return root
        following = pre[index]
        split = next((i for i in range(low, high + 1) if post[i] == following), None)
        if split is not None:
            root.left = construct(low, split)
            root.right = construct(split + 1, high - 1)
        return root

    return construct(0, len(pre) - 1)


def recover_from_preorder(traversal: str) -> TreeNode | None:
    """Rebuild a tree from a dash-depth preorder string such as ``"1-2--3"``."""
    if _TRAVERSAL.fullmatch(traversal) is None:
        raise ValueError(f"malformed traversal: {traversal!r}")
    root: TreeNode | None = None
    path: list[TreeNode] = []
    for match in _ENTRY.finditer(traversal):
        depth = len(match[1])
        node = TreeNode(int(match[2]))
        del path[depth:]
        if depth != len(path):
            raise ValueError(f"node {node.val} is deeper than its parent allows")
        if not path:
            if root is not None:
                raise ValueError("traversal holds more than one root")
            root = node
        else:
            parent = path[-1]
            if parent.left is None:
                parent.left = node
            elif parent.right is None:
                parent.right = node
            else:
                raise ValueError(f"node {parent.val} has more than two children")
        path.append(node)
    return root


class FindElements:
    """Recovers a contaminated tree and answers membership queries on it.

    The root becomes 0, and each left child ``2*v + 1`` and right child
    ``2*v + 2`` of a parent with value ``v``.
    """

    def __init__(self, root: TreeNode | None) -> None:
        self._values: set[int] = set()
        if root is None:
            return
        root.val = 0
        stack = [root]
        while stack:
            node = stack.pop()
            self._values.add(node.val)
            for child, offset in ((node.left, 1), (node.right, 2)):
                if child is not None:
                    child.val = 2 * node.val + offset
                    stack.append(child)

    def find(self, target: int) -> bool:
        """Whether ``target`` is a value of the recovered tree."""
        return target in self._values

    def __contains__(self, target: object) -> bool:
        return target in self._values