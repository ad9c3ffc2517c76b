"""A self-balancing AVL search tree."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

__all__ = ["AVLNode", "AVLTree"]


@dataclass(eq=False)
class AVLNode:
    """A node of an AVL tree; a leaf has height 1."""

    value: int
    height: int = 1
    left: AVLNode | None = field(default=None, repr=False)
    right: AVLNode | None = field(default=None, repr=False)


def _height(node: AVLNode | None) -> int:
    return node.height if node is not None else 0


def _balance(node: AVLNode | None) -> int:
    return _height(node.left) - _height(node.right) if node is not None else 0


def _update(node: AVLNode) -> None:
    node.height = max(_height(node.left), _height(node.right)) + 1


def _rotate_right(node: AVLNode) -> AVLNode:
    pivot = node.left
    node.left = pivot.right
    pivot.right = node
    _update(node)
    _update(pivot)
    return pivot


def _rotate_left(node: AVLNode) -> AVLNode:
    pivot = node.right
    node.right = pivot.left
    pivot.left = node
    _update(node)
    _update(pivot)
    return pivot


def _rebalance(node: AVLNode) -> AVLNode:
    _update(node)
    balance = _balance(node)
    if balance > 1:
        if _balance(node.left) < 0:
            node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if balance < -1:
        if _balance(node.right) > 0:
            node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


def _insert(node: AVLNode | None, value: int) -> AVLNode:
    if node is None:
        return AVLNode(value)
    if value < node.value:
        node.left = _insert(node.left, value)
    else:
        node.right = _insert(node.right, value)
    return _rebalance(node)


def _delete(node: AVLNode | None, value: int) -> AVLNode | None:
    if node is None:
        return None
    if value < node.value:
        node.left = _delete(node.left, value)
    elif value > node.value:
        node.right = _delete(node.right, value)
    else:
        if node.left is None:
            return node.right
        if node.right is None:
            return node.left
        successor = node.right
        while successor.left is not None:
            successor = successor.left
        node.value = successor.value
        node.right = _delete(node.right, successor.value)
    return _rebalance(node)


def _preorder(node: AVLNode | None) -> Iterator[int]:
    if node is not None:
        yield node.value
        yield from _preorder(node.left)
        yield from _preorder(node.right)


class AVLTree:
    """A search tree kept balanced by rotations; equal values go to the right."""

    def __init__(self):
        self.root: AVLNode | None = None

    def insert(self, value):
        self.root = _insert(self.root, value)

    def delete(self, value):
        """Remove one occurrence of value; absent values are ignored."""
        self.root = _delete(self.root, value)

    def preorder(self):
        return list(_preorder(self.root))

    def __contains__(self, value):
        node = self.root
        while node is not None:
            if value == node.value:
                return True
            node = node.left if value < node.value else node.right
        return False