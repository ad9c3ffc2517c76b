"""Array, dual and minimum-tracking stacks, and classic stack algorithms."""

from __future__ import annotations

import operator
import string
from collections.abc import Callable, Iterable, MutableSequence, Sequence

__all__ = [
    "StackEmptyError",
    "StackFullError",
    "ArrayStack",
    "DualStack",
    "MinStack",
    "precedence",
    "is_operand",
    "infix_to_postfix",
    "evaluate_postfix",
    "is_balanced",
    "next_greater_elements",
    "insert_at_bottom",
    "reverse_stack",
    "stock_span",
]


class StackEmptyError(IndexError):
    """Raised when taking a value from an empty stack."""


class StackFullError(OverflowError):
    """Raised when pushing onto a stack that has no room left."""


class ArrayStack:
    """A stack with a fixed capacity."""

    def __init__(self, capacity):
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list = []

    def is_empty(self):
        return not self._items

    def is_full(self):
        return len(self._items) >= self.capacity

    def push(self, value):
        if self.is_full():
            raise StackFullError("stack is full")
        self._items.append(value)

    def pop(self):
        if self.is_empty():
            raise StackEmptyError("stack is empty")
        return self._items.pop()

    def peek(self):
        if self.is_empty():
            raise StackEmptyError("stack is empty")
        return self._items[-1]

    def __len__(self):
        return len(self._items)


class DualStack:
    """Two stacks sharing one fixed block: the first grows up, the second down."""

    def __init__(self, capacity):
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._slots: list = [None] * capacity
        self._top1 = -1
        self._top2 = capacity

    def is_full(self):
        return self._top1 >= self._top2 - 1

    def is_empty1(self):
        return self._top1 == -1

    def is_empty2(self):
        return self._top2 == self.capacity

    def push1(self, value):
        if self.is_full():
            raise StackFullError("stack 1 is full")
        self._top1 += 1
        self._slots[self._top1] = value

    def push2(self, value):
        if self.is_full():
            raise StackFullError("stack 2 is full")
        self._top2 -= 1
        self._slots[self._top2] = value

    def pop1(self):
        if self.is_empty1():
            raise StackEmptyError("stack 1 is empty")
        value = self._slots[self._top1]
        self._slots[self._top1] = None
        self._top1 -= 1
        return value

    def pop2(self):
        if self.is_empty2():
            raise StackEmptyError("stack 2 is empty")
        value = self._slots[self._top2]
        self._slots[self._top2] = None
        self._top2 += 1
        return value


class MinStack:
    """A stack that reports its smallest value in constant time."""

    def __init__(self):
        self._items: list = []
        self._minimums: list = []

    def push(self, value):
        self._items.append(value)
        if not self._minimums or value <= self._minimums[-1]:
            self._minimums.append(value)

    def pop(self):
        if not self._items:
            raise StackEmptyError("special stack is empty")
        value = self._items.pop()
        if value == self._minimums[-1]:
            self._minimums.pop()
        return value

    def get_min(self):
        if not self._items:
            raise StackEmptyError("special stack is empty")
        return self._minimums[-1]

    def __len__(self):
        return len(self._items)


_PRECEDENCE = {"+": 1, "-": 1, "*": 2, "/": 2, "^": 3}


def precedence(operator):
    """Binding strength of an operator; -1 for anything else."""
    return _PRECEDENCE.get(operator, -1)


def is_operand(char):
    """True for an ASCII letter."""
    return len(char) == 1 and char in string.ascii_letters


def infix_to_postfix(expression):
    """Convert an infix expression over single-letter operands to postfix."""
    output: list[str] = []
    stack: list[str] = []
    for ch in expression:
        if is_operand(ch):
            output.append(ch)
        elif not stack or ch == "(":
            stack.append(ch)
        elif ch == ")":
            while stack and stack[-1] != "(":
                output.append(stack.pop())
            if stack:
                stack.pop()
        elif precedence(ch) >= precedence(stack[-1]):
            stack.append(ch)
        else:
            while stack and precedence(ch) <= precedence(stack[-1]):
                output.append(stack.pop())
            stack.append(ch)
    output.extend(reversed(stack))
    return "".join(output)


def _truncating_divide(left: int, right: int) -> int:
    if right == 0:
        raise ZeroDivisionError("division by zero in expression")
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


_OPERATIONS: dict[str, Callable[[int, int], int]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": _truncating_divide,
    "^": operator.xor,
}


def evaluate_postfix(expression):
    """Evaluate a postfix expression of single-digit operands.

    Division truncates toward zero and ``^`` is bitwise exclusive or.
    A missing operand counts as zero.
    """
    stack: list[int] = []
    for ch in expression:
        if ch in string.digits:
            stack.append(int(ch))
            continue
        try:
            operation = _OPERATIONS[ch]
        except KeyError:
            raise ValueError(f"unknown operator {ch!r}") from None
        right = stack.pop() if stack else 0
        left = stack.pop() if stack else 0
        stack.append(operation(left, right))
    if not stack:
        raise ValueError("empty expression")
    return stack.pop()


_OPENING_FOR = {")": "(", "]": "[", "}": "{"}


def is_balanced(expression):
    """True when every bracket in the expression is properly matched."""
    stack: list[str] = []
    for ch in expression:
        if ch in "([{":
            stack.append(ch)
        elif ch in _OPENING_FOR:
            if not stack or stack.pop() != _OPENING_FOR[ch]:
                return False
    return not stack


def next_greater_elements(values: Iterable[int]) -> list[tuple[int, int]]:
    """Pair each value with the next greater value after it, or -1.

    Pairs come in the order they are resolved; unresolved values follow,
    most recent first.
    """
    result: list[tuple[int, int]] = []
    pending: list[int] = []
    for value in values:
        while pending and pending[-1] < value:
            result.append((pending.pop(), value))
        pending.append(value)
    result.extend((value, -1) for value in reversed(pending))
    return result


def insert_at_bottom(stack: MutableSequence, value) -> None:
    """Put a value beneath everything on a list used as a stack (top is last)."""
    if not stack:
        stack.append(value)
        return
    top = stack.pop()
    insert_at_bottom(stack, value)
    stack.append(top)


def reverse_stack(stack: MutableSequence) -> None:
    """Reverse a list used as a stack, in place, using only stack operations."""
    if stack:
        top = stack.pop()
        reverse_stack(stack)
        insert_at_bottom(stack, top)


def stock_span(prices: Sequence[int]) -> list[int]:
    """For each day, the number of consecutive days up to it with price <= its price."""
    prices = list(prices)
    spans: list[int] = []
    stack: list[int] = []
    for day, price in enumerate(prices):
        while stack and prices[stack[-1]] <= price:
            stack.pop()
        spans.append(day + 1 if not stack else day - stack[-1])
        stack.append(day)
    return spans