"""Binary tree nodes and the classic ways of walking them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass, field

__all__ = [
    "Node",
    "ThreadedNode",
    "preorder",
    "inorder",
    "postorder",
    "preorder_iterative",
    "inorder_iterative",
    "postorder_iterative",
    "inorder_morris",
    "preorder_morris",
    "level_order",
    "reverse_level_order",
    "spiral_order",
    "root_to_leaf_paths",
    "size",
    "depth",
    "height_iterative",
    "identical",
    "threaded_inorder",
]


@dataclass(eq=False)
class Node:
    """A binary tree node holding an integer."""

    data: int
    left: Node | None = field(default=None, repr=False)
    right: Node | None = field(default=None, repr=False)

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


@dataclass(eq=False)
class ThreadedNode:
    """A node whose right link may be a thread to its inorder successor."""

    data: int
    left: ThreadedNode | None = field(default=None, repr=False)
    right: ThreadedNode | None = field(default=None, repr=False)
    threaded: bool = False

    def __post_init__(self) -> None:
        if self.right is not None and not self.threaded:
            self.threaded = True


def _preorder(root: Node | None) -> Iterator[int]:
    if root is not None:
        yield root.data
        yield from _preorder(root.left)
        yield from _preorder(root.right)


def _inorder(root: Node | None) -> Iterator[int]:
    if root is not None:
        yield from _inorder(root.left)
        yield root.data
        yield from _inorder(root.right)


def _postorder(root: Node | None) -> Iterator[int]:
    if root is not None:
        yield from _postorder(root.left)
        yield from _postorder(root.right)
        yield root.data


def preorder(root):
    """Values in node-left-right order."""
    return list(_preorder(root))


def inorder(root):
    """Values in left-node-right order."""
    return list(_inorder(root))


def postorder(root):
    """Values in left-right-node order."""
    return list(_postorder(root))


def preorder_iterative(root):
    """Preorder walk using an explicit stack."""
    result: list[int] = []
    stack: list[Node] = []
    current = root
    while current is not None or stack:
        if current is not None:
            result.append(current.data)
            stack.append(current)
            current = current.left
        else:
            current = stack.pop().right
    return result


def inorder_iterative(root):
    """Inorder walk using an explicit stack."""
    result: list[int] = []
    stack: list[Node] = []
    current = root
    while current is not None or stack:
        if current is not None:
            stack.append(current)
            current = current.left
        else:
            current = stack.pop()
            result.append(current.data)
            current = current.right
    return result


def postorder_iterative(root):
    """Postorder walk using two stacks."""
    if root is None:
        return []
    pending = [root]
    visited: list[Node] = []
    while pending:
        node = pending.pop()
        visited.append(node)
        if node.left is not None:
            pending.append(node.left)
        if node.right is not None:
            pending.append(node.right)
    return [node.data for node in reversed(visited)]


def _rightmost_before(current: Node) -> Node:
    pre = current.left
    while pre.right is not None and pre.right is not current:
        pre = pre.right
    return pre


def inorder_morris(root):
    """Inorder walk without stack or recursion; the tree is restored afterwards."""
    result: list[int] = []
    current = root
    while current is not None:
        if current.left is None:
            result.append(current.data)
            current = current.right
            continue
        pre = _rightmost_before(current)
        if pre.right is None:
            pre.right = current
            current = current.left
        else:
            pre.right = None
            result.append(current.data)
            current = current.right
    return result


def preorder_morris(root):
    """Preorder walk without stack or recursion; the tree is restored afterwards."""
    result: list[int] = []
    current = root
    while current is not None:
        if current.left is None:
            result.append(current.data)
            current = current.right
            continue
        pre = _rightmost_before(current)
        if pre.right is None:
            result.append(current.data)
            pre.right = current
            current = current.left
        else:
            pre.right = None
            current = current.right
    return result


def _children(node: Node) -> Iterator[Node]:
    if node.left is not None:
        yield node.left
    if node.right is not None:
        yield node.right


def level_order(root):
    """Values level by level, left to right."""
    if root is None:
        return []
    result: list[int] = []
    queue = deque([root])
    while queue:
        node = queue.popleft()
        result.append(node.data)
        queue.extend(_children(node))
    return result


def reverse_level_order(root):
    """Values from the deepest level up, each level left to right."""
    if root is None:
        return []
    visited: list[Node] = []
    queue = deque([root])
    while queue:
        node = queue.popleft()
        visited.append(node)
        if node.right is not None:
            queue.append(node.right)
        if node.left is not None:
            queue.append(node.left)
    return [node.data for node in reversed(visited)]


def spiral_order(root):
    """Level order whose direction alternates, starting right to left below the root."""
    if root is None:
        return []
    result: list[int] = []
    current: list[Node] = [root]
    following: list[Node] = []
    while current or following:
        while current:
            node = current.pop()
            result.append(node.data)
            if node.right is not None:
                following.append(node.right)
            if node.left is not None:
                following.append(node.left)
        while following:
            node = following.pop()
            result.append(node.data)
            if node.left is not None:
                current.append(node.left)
            if node.right is not None:
                current.append(node.right)
    return result


def root_to_leaf_paths(root):
    """Every path from the root down to a leaf, left to right."""
    paths: list[list[int]] = []

    def walk(node: Node | None, path: list[int]) -> None:
        if node is None:
            return
        path = path + [node.data]
        if node.is_leaf:
            paths.append(path)
        else:
            walk(node.left, path)
            walk(node.right, path)

    walk(root, [])
    return paths


def size(root):
    """Number of nodes in the tree."""
    if root is None:
        return 0
    return size(root.left) + size(root.right) + 1


def depth(root):
    """Number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return max(depth(root.left), depth(root.right)) + 1


def height_iterative(root):
    """Height of the tree, counted level by level with a queue."""
    if root is None:
        return 0
    height = 0
    level = [root]
    while level:
        height += 1
        level = [child for node in level for child in _children(node)]
    return height


def identical(first, second):
    """True when both trees have the same shape and values."""
    if first is None and second is None:
        return True
    if first is None or second is None:
        return False
    return (
        first.data == second.data
        and identical(first.left, second.left)
        and identical(first.right, second.right)
    )


def _leftmost(node: ThreadedNode | None) -> ThreadedNode | None:
    if node is None:
        return None
    while node.left is not None:
        node = node.left
    return node


def threaded_inorder(root):
    """Inorder walk of a right-threaded tree, following threads instead of a stack."""
    result: list[int] = []
    current = _leftmost(root)
    while current is not None:
        result.append(current.data)
        current = current.right if current.threaded else _leftmost(current.right)
    return result