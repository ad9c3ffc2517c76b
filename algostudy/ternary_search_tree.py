"""A ternary search tree of words."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

__all__ = ["TernarySearchTree"]


@dataclass(eq=False)
class _TSTNode:
    char: str
    is_end: bool = False
    left: _TSTNode | None = field(default=None, repr=False)
    middle: _TSTNode | None = field(default=None, repr=False)
    right: _TSTNode | None = field(default=None, repr=False)


class TernarySearchTree:
    """A set of non-empty words stored one character per node."""

    def __init__(self):
        self._root: _TSTNode | None = None

    def insert(self, word):
        if not word:
            raise ValueError("cannot insert an empty word")
        self._root = self._insert(self._root, word, 0)

    def _insert(self, node: _TSTNode | None, word: str, index: int) -> _TSTNode:
        char = word[index]
        if node is None:
            node = _TSTNode(char)
        if char < node.char:
            node.left = self._insert(node.left, word, index)
        elif char > node.char:
            node.right = self._insert(node.right, word, index)
        elif index + 1 < len(word):
            node.middle = self._insert(node.middle, word, index + 1)
        else:
            node.is_end = True
        return node

    def __contains__(self, word):
        if not isinstance(word, str) or not word:
            return False
        node = self._root
        index = 0
        while node is not None:
            char = word[index]
            if char < node.char:
                node = node.left
            elif char > node.char:
                node = node.right
            elif index + 1 == len(word):
                return node.is_end
            else:
                index += 1
                node = node.middle
        return False

    def words(self):
        """All stored words in lexicographic order."""
        return list(self._walk(self._root, ""))

    def _walk(self, node: _TSTNode | None, prefix: str) -> Iterator[str]:
        if node is None:
            return
        yield from self._walk(node.left, prefix)
        current = prefix + node.char
        if node.is_end:
            yield current
        yield from self._walk(node.middle, current)
        yield from self._walk(node.right, prefix)