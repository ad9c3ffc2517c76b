"""Questions about the shape and values of a binary tree."""

from __future__ import annotations

from collections import defaultdict, deque
from collections.abc import Iterator

from algostudy.binary_tree import Node, identical

__all__ = [
    "has_children_sum_property",
    "adjust_to_children_sum",
    "diameter",
    "is_balanced",
    "has_path_sum",
    "is_foldable",
    "level_of",
    "ancestors",
    "is_sum_tree",
    "is_subtree",
    "to_sum_tree",
    "vertical_sums",
    "is_complete",
    "boundary",
    "largest_independent_set",
    "max_odd_leaf_depth",
    "leaves_at_same_level",
    "left_view",
    "prune",
    "deepest_left_leaf_level",
    "find_lca",
    "find_level",
    "distance_between",
]


def _child_sum(node: Node) -> int:
    return sum(child.data for child in (node.left, node.right) if child is not None)


def has_children_sum_property(root):
    """True when every inner node equals the sum of its children's values."""
    if root is None or root.is_leaf:
        return True
    return (
        root.data == _child_sum(root)
        and has_children_sum_property(root.left)
        and has_children_sum_property(root.right)
    )


def _push_down(node: Node, amount: int) -> None:
    while not node.is_leaf:
        node = node.left if node.left is not None else node.right
        node.data += amount


def adjust_to_children_sum(root):
    """Raise values, never lower them, until every inner node equals its children's sum."""
    if root is None or root.is_leaf:
        return
    adjust_to_children_sum(root.left)
    adjust_to_children_sum(root.right)
    difference = _child_sum(root) - root.data
    if difference > 0:
        root.data += difference
    elif difference < 0:
        _push_down(root, -difference)


def diameter(root):
    """Number of nodes on the longest path between any two nodes."""

    def walk(node: Node | None) -> tuple[int, int]:
        if node is None:
            return 0, 0
        left_height, left_best = walk(node.left)
        right_height, right_best = walk(node.right)
        through = left_height + right_height + 1
        return max(left_height, right_height) + 1, max(through, left_best, right_best)

    return walk(root)[1]


def is_balanced(root):
    """True when the heights of the two subtrees of every node differ by at most one."""

    def height(node: Node | None) -> int | None:
        if node is None:
            return 0
        left = height(node.left)
        if left is None:
            return None
        right = height(node.right)
        if right is None or abs(left - right) > 1:
            return None
        return max(left, right) + 1

    return height(root) is not None


def has_path_sum(root, total):
    """True when some path from the root down to a missing child sums to total."""

    def walk(node: Node | None, running: int) -> bool:
        if node is None:
            return running == total
        running += node.data
        return walk(node.left, running) or walk(node.right, running)

    return walk(root, 0)


def _mirrored(first: Node | None, second: Node | None) -> bool:
    if first is None and second is None:
        return True
    if first is None or second is None:
        return False
    return _mirrored(first.left, second.right) and _mirrored(first.right, second.left)


def is_foldable(root):
    """True when the left and right subtrees are mirror images in shape."""
    return root is None or _mirrored(root.left, root.right)


def _level(node: Node | None, value: int, level: int) -> int:
    if node is None:
        return 0
    if node.data == value:
        return level
    return _level(node.left, value, level + 1) or _level(node.right, value, level + 1)


def level_of(root, value):
    """Level of the first node holding value, the root being level 1; 0 if absent."""
    return _level(root, value, 1)


def ancestors(root, value):
    """Values on the way from the node holding value up to the root, nearest first."""
    found: list[int] = []

    def walk(node: Node | None) -> bool:
        if node is None:
            return False
        if node.data == value:
            return True
        if walk(node.left) or walk(node.right):
            found.append(node.data)
            return True
        return False

    walk(root)
    return found


def _subtree_sum_of(child: Node | None) -> int:
    if child is None:
        return 0
    if child.is_leaf:
        return child.data
    return 2 * child.data


def is_sum_tree(root):
    """True when every inner node equals the sum of all values below it."""
    if root is None or root.is_leaf:
        return True
    if not (is_sum_tree(root.left) and is_sum_tree(root.right)):
        return False
    return root.data == _subtree_sum_of(root.left) + _subtree_sum_of(root.right)


def is_subtree(root, sub):
    """True when sub appears somewhere in root with the same shape and values."""
    if root is None:
        return False
    if sub is None:
        return True
    return identical(root, sub) or is_subtree(root.left, sub) or is_subtree(root.right, sub)


def to_sum_tree(root):
    """Replace each value by the sum of the values below it; return the old total."""
    if root is None:
        return 0
    below = to_sum_tree(root.left) + to_sum_tree(root.right)
    original = root.data
    root.data = below
    return original + below


def vertical_sums(root):
    """Sum of values on each vertical line, keyed by horizontal distance from the root."""
    sums: defaultdict[int, int] = defaultdict(int)

    def walk(node: Node | None, distance: int) -> None:
        if node is None:
            return
        walk(node.left, distance - 1)
        sums[distance] += node.data
        walk(node.right, distance + 1)

    walk(root, 0)
    return dict(sorted(sums.items()))


def is_complete(root):
    """True when every level is full except the last, which is filled from the left."""
    queue: deque[Node | None] = deque([root])
    gap = False
    while queue:
        node = queue.popleft()
        if node is None:
            gap = True
            continue
        if gap:
            return False
        queue.append(node.left)
        queue.append(node.right)
    return True


def _leaves(node: Node | None) -> Iterator[int]:
    if node is None:
        return
    if node.is_leaf:
        yield node.data
        return
    yield from _leaves(node.left)
    yield from _leaves(node.right)


def boundary(root):
    """Values around the tree anticlockwise: root, left edge, leaves, right edge upwards."""
    if root is None:
        return []
    if root.is_leaf:
        return [root.data]
    result = [root.data]
    node = root.left
    while node is not None and not node.is_leaf:
        result.append(node.data)
        node = node.left if node.left is not None else node.right
    result.extend(_leaves(root))
    right_edge: list[int] = []
    node = root.right
    while node is not None and not node.is_leaf:
        right_edge.append(node.data)
        node = node.right if node.right is not None else node.left
    result.extend(reversed(right_edge))
    return result


def largest_independent_set(root):
    """Size of the largest set of nodes no two of which are parent and child."""

    def walk(node: Node | None) -> tuple[int, int]:
        if node is None:
            return 0, 0
        left_with, left_without = walk(node.left)
        right_with, right_without = walk(node.right)
        with_node = 1 + left_without + right_without
        without_node = max(left_with, left_without) + max(right_with, right_without)
        return with_node, without_node

    return max(walk(root))


def max_odd_leaf_depth(root):
    """Deepest odd level holding a leaf, the root being level 1; None if there is none."""

    def walk(node: Node | None, level: int) -> Iterator[int]:
        if node is None:
            return
        if node.is_leaf and level % 2 == 1:
            yield level
            return
        yield from walk(node.left, level + 1)
        yield from walk(node.right, level + 1)

    return max(walk(root, 1), default=None)


def leaves_at_same_level(root):
    """True when all leaves lie on one level."""
    levels: set[int] = set()

    def walk(node: Node | None, level: int) -> None:
        if node is None:
            return
        if node.is_leaf:
            levels.add(level)
            return
        walk(node.left, level + 1)
        walk(node.right, level + 1)

    walk(root, 1)
    return len(levels) <= 1


def left_view(root):
    """The first value seen on each level when looking from the left."""
    view: list[int] = []

    def walk(node: Node | None, level: int) -> None:
        if node is None:
            return
        if level > len(view):
            view.append(node.data)
        walk(node.left, level + 1)
        walk(node.right, level + 1)

    walk(root, 1)
    return view


def prune(root, k):
    """Drop every node all of whose downward paths sum to less than k; return the new root."""

    def walk(node: Node | None, prefix: int) -> tuple[Node | None, int]:
        if node is None:
            return None, prefix
        running = prefix + node.data
        node.left, left_best = walk(node.left, running)
        node.right, right_best = walk(node.right, running)
        best = max(left_best, right_best)
        return (None if best < k else node), best

    return walk(root, 0)[0]


def deepest_left_leaf_level(root):
    """Level of the deepest leaf that is a left child (a lone root counts); 0 if none."""

    def walk(node: Node | None, is_left: bool, level: int) -> Iterator[int]:
        if node is None:
            return
        if node.is_leaf and is_left:
            yield level
            return
        yield from walk(node.left, True, level + 1)
        yield from walk(node.right, False, level + 1)

    return max(walk(root, True, 1), default=0)


def find_lca(root, n1, n2):
    """Lowest node that has both values below or at it, or the node holding either."""
    if root is None:
        return None
    if root.data in (n1, n2):
        return root
    left = find_lca(root.left, n1, n2)
    right = find_lca(root.right, n1, n2)
    if left is not None and right is not None:
        return root
    return left if left is not None else right


def find_level(root, value):
    """Level of the node holding value, the root being level 1; 0 if absent."""
    return _level(root, value, 1)


def distance_between(root, n1, n2):
    """Number of edges on the path between the nodes holding n1 and n2."""
    first = find_level(root, n1)
    second = find_level(root, n2)
    if not first or not second:
        raise ValueError("both values must be present in the tree")
    lca = find_lca(root, n1, n2)
    return first + second - 2 * find_level(root, lca.data)