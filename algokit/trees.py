"""Binary trees filled in level order, with the usual traversals."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class TreeNode:
    """A binary tree node."""

    data: int
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


def insert_level_order(root: Optional[TreeNode], data: int) -> TreeNode:
    """Place ``data`` at the first free slot in level order and return the root."""
    node = TreeNode(data)
    if root is None:
        return node
    queue = deque([root])
    while queue:
        current = queue.popleft()
        if current.left is None:
            current.left = node
            return root
        queue.append(current.left)
        if current.right is None:
            current.right = node
            return root
        queue.append(current.right)
    return root


def _inorder(node: Optional[TreeNode]) -> Iterator[int]:
    if node is not None:
        yield from _inorder(node.left)
        yield node.data
        yield from _inorder(node.right)


def _preorder(node: Optional[TreeNode]) -> Iterator[int]:
    if node is not None:
        yield node.data
        yield from _preorder(node.left)
        yield from _preorder(node.right)


def _postorder(node: Optional[TreeNode]) -> Iterator[int]:
    if node is not None:
        yield from _postorder(node.left)
        yield from _postorder(node.right)
        yield node.data


def _leaves(node: Optional[TreeNode]) -> Iterator[int]:
    if node is None:
        return
    if node.is_leaf:
        yield node.data
        return
    yield from _leaves(node.left)
    yield from _leaves(node.right)


def inorder(root: Optional[TreeNode]) -> list[int]:
    return list(_inorder(root))


def preorder(root: Optional[TreeNode]) -> list[int]:
    return list(_preorder(root))


def postorder(root: Optional[TreeNode]) -> list[int]:
    return list(_postorder(root))


def level_order(root: Optional[TreeNode]) -> list[int]:
    if root is None:
        return []
    order: list[int] = []
    queue = deque([root])
    while queue:
        current = queue.popleft()
        order.append(current.data)
        queue.extend(child for child in (current.left, current.right) if child is not None)
    return order


def leaves(root: Optional[TreeNode]) -> list[int]:
    """Return the leaf values from left to right."""
    return list(_leaves(root))


def _left_boundary(node: Optional[TreeNode]) -> Iterator[int]:
    while node is not None and not node.is_leaf:
        yield node.data
        node = node.left if node.left is not None else node.right


def _right_boundary(node: Optional[TreeNode]) -> list[int]:
    path: list[int] = []
    while node is not None and not node.is_leaf:
        path.append(node.data)
        node = node.right if node.right is not None else node.left
    return path[::-1]


def boundary(root: Optional[TreeNode]) -> list[int]:
    """Return the anticlockwise boundary: root, left edge, leaves, right edge bottom-up."""
    if root is None:
        return []
    return [
        root.data,
        *_left_boundary(root.left),
        *_leaves(root.left),
        *_leaves(root.right),
        *_right_boundary(root.right),
    ]


def flatten(root: Optional[TreeNode]) -> None:
    """Flatten the tree in place into a right-leaning chain in preorder."""
    if root is None:
        return
    flatten(root.left)
    flatten(root.right)
    if root.left is not None:
        rest = root.right
        root.right, root.left = root.left, None
        tail = root.right
        while tail.right is not None:
            tail = tail.right
        tail.right = rest