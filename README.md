# algostudy

Classic algorithms and data structures written as plain, self-contained
Python with no third-party dependencies.

## What is inside

- `algostudy.stacks`
  - `ArrayStack(capacity)`: a bounded stack with `push`, `pop`, `peek`,
    `is_empty`, `is_full` and `len()`.
  - `DualStack(capacity)`: two stacks sharing one fixed block, with
    `push1`/`pop1`, `push2`/`pop2`, `is_empty1`, `is_empty2` and `is_full`.
  - `MinStack`: a stack whose `get_min` answers in constant time.
  - `StackEmptyError` (an `IndexError`) and `StackFullError` (an
    `OverflowError`) are raised on an empty or full stack.
  - `precedence`, `is_operand`, `infix_to_postfix`, `evaluate_postfix`
    (single-digit operands; `/` truncates toward zero, `^` is bitwise
    exclusive or), `is_balanced`, `next_greater_elements`,
    `insert_at_bottom`, `reverse_stack` and `stock_span`.
- `algostudy.strings`: `reverse(text)` and `reversed_chars(text)`.
- `algostudy.three_sum`: `three_sum(nums)` returns every distinct triplet
  that sums to zero, each in ascending order.
- `algostudy.binary_tree`: `Node` and `ThreadedNode`; recursive, iterative
  and Morris traversals (`preorder`, `inorder`, `postorder`,
  `preorder_iterative`, `inorder_iterative`, `postorder_iterative`,
  `inorder_morris`, `preorder_morris`), `level_order`,
  `reverse_level_order`, `spiral_order`, `root_to_leaf_paths`, `size`,
  `depth`, `height_iterative`, `identical` and `threaded_inorder`.
- `algostudy.tree_properties`: children-sum and sum-tree checks and
  adjustments, `diameter`, `is_balanced`, `has_path_sum`, `is_foldable`,
  `level_of`, `ancestors`, `is_subtree`, `to_sum_tree`, `vertical_sums`,
  `is_complete`, `boundary`, `largest_independent_set`,
  `max_odd_leaf_depth`, `leaves_at_same_level`, `left_view`, `prune`,
  `deepest_left_leaf_level`, `find_lca`, `find_level` and
  `distance_between`.
- `algostudy.avl`: `AVLTree` with `insert`, `delete`, `preorder` and
  membership tests (`in`); nodes are `AVLNode`.
- `algostudy.ternary_search_tree`: `TernarySearchTree` with `insert`,
  membership tests and `words()` in lexicographic order.
- `algostudy.array_trees`: `letter_decodings(digits)` (every reading with
  1 = a ... 26 = z) and `max_weight_increasing(values, weights)`.

## Install

```
pip install .
```

## Examples

```python
from algostudy.stacks import infix_to_postfix, is_balanced, stock_span
from algostudy.three_sum import three_sum
from algostudy.binary_tree import Node, inorder
from algostudy.ternary_search_tree import TernarySearchTree

infix_to_postfix("a+b*c")        # "abc*+"
is_balanced("{[()]}")            # True
stock_span([100, 80, 60, 70])    # [1, 1, 1, 2]
three_sum([-2, -2, 2, 0, 5, 5])  # [[-2, 0, 2]]

root = Node(1, Node(2), Node(3))
inorder(root)                    # [2, 1, 3]

words = TernarySearchTree()
for word in ("cat", "cats", "up", "bug"):
    words.insert(word)
"cats" in words                  # True
words.words()                    # ["bug", "cat", "cats", "up"]
```

## Interactive stack menu

The stack exercises can be driven from a numbered menu:

```
algostudy-stacks
```

It reads whitespace-separated numbers and expressions from standard input
and stops when the input runs out. `algostudy.stack_menu.run_menu(lines, out)`
runs the same menu over any iterable of lines, writing to any text stream.

## What it does not do

There is no menu or command for the tree modules; they are used from Python
only. The package has no plain (unbalanced) binary search tree helpers, no
segment trees, and no functions that build a tree from traversal arrays,
link nodes to their right neighbours or turn a tree into a linked list.

## Tests

```
pip install .[test]
pytest
```