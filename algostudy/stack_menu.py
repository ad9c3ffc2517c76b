"""Interactive menu exercising the stack structures and algorithms."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import TextIO

from algostudy.stacks import (
    ArrayStack,
    DualStack,
    MinStack,
    StackEmptyError,
    StackFullError,
    evaluate_postfix,
    infix_to_postfix,
    is_balanced,
    next_greater_elements,
    reverse_stack,
    stock_span,
)

__all__ = ["run_menu", "main"]

MENU = """MENU
****
1.Create a stack using array
2.push to array stack
3.Pop from array stack
4.Peek to array stack
5.Create a stack
6.Pop from stack
7.Peek into a stack
8.Infix to postfix conversion of an expression
9.Postfix evaluation
10.Create a dstack and do pop and push
11.Check if an expression is balanced or not
12.Check next greatest element in an array
13.Reverse a stack
14.Calculate span of a stock
15.Create special stack which supports getMin
"""


def _tokens(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        yield from line.split()


@dataclass
class _Session:
    tokens: Iterator[str]
    out: TextIO
    array_stack: ArrayStack | None = None
    stack: list[int] = field(default_factory=list)
    min_stack: MinStack = field(default_factory=MinStack)

    def say(self, *parts) -> None:
        print(*parts, file=self.out)

    def word(self) -> str:
        return next(self.tokens)

    def number(self) -> int:
        return int(self.word())

    def numbers(self, prompt: str) -> list[int]:
        count = self.number()
        values = []
        for _ in range(count):
            self.say(prompt)
            values.append(self.number())
        return values

    def report(self, action) -> None:
        try:
            self.say(action())
        except StackEmptyError as error:
            self.say(error)

    def need_array_stack(self) -> ArrayStack | None:
        if self.array_stack is None:
            self.say("Create the array stack first")
        return self.array_stack

    def create_array_stack(self) -> None:
        self.array_stack = ArrayStack(5)
        for value in range(1, 7):
            try:
                self.array_stack.push(value)
            except StackFullError as error:
                self.say(error)

    def push_array(self) -> None:
        stack = self.need_array_stack()
        if stack is None:
            return
        self.say("Enter value : ")
        try:
            stack.push(self.number())
        except StackFullError as error:
            self.say(error)

    def pop_array(self) -> None:
        stack = self.need_array_stack()
        if stack is None:
            return
        self.say("Popping 3 items, Expecting 5 4 3")
        for _ in range(3):
            self.report(stack.pop)

    def peek_array(self) -> None:
        stack = self.need_array_stack()
        if stack is None:
            return
        self.say("Peeking item")
        self.report(stack.peek)

    def create_stack(self) -> None:
        self.say("Enter number of elements you want to push to stack")
        self.stack.extend(self.numbers("Enter value : "))

    def pop_stack(self) -> None:
        self.say("Pop top of stack")
        self.say(self.stack.pop() if self.stack else "stack is empty")

    def peek_stack(self) -> None:
        self.say("Peeking top of stack")
        self.say(self.stack[-1] if self.stack else "stack is empty")

    def infix(self) -> None:
        self.say("Enter the expression")
        self.say(infix_to_postfix(self.word()))

    def postfix(self) -> None:
        self.say("Enter the expression")
        expression = self.word()
        try:
            value = evaluate_postfix(expression)
        except (ValueError, ZeroDivisionError) as error:
            self.say(error)
            return
        self.say(f"Final result of expression {expression} is {value}")

    def dual(self) -> None:
        self.say("Enter the total size Dual stack you want to create")
        stacks = DualStack(self.number())
        self.say("How many elements you want to push to stack1")
        for value in self.numbers("Enter value:"):
            try:
                stacks.push1(value)
            except StackFullError as error:
                self.say(error)
        self.say("How many elements you want to push to stack2")
        for value in self.numbers("Enter value:"):
            try:
                stacks.push2(value)
            except StackFullError as error:
                self.say(error)
        for label, pop in (("Stack1", stacks.pop1), ("Stack2", stacks.pop2)):
            self.say(f"How many elements you want to pop out of {label.lower()}")
            for _ in range(self.number()):
                try:
                    self.say(f"{label}:{pop()}")
                except StackEmptyError as error:
                    self.say(error)

    def balanced(self) -> None:
        self.say("Enter the expression")
        expression = self.word()
        if is_balanced(expression):
            self.say(f"{expression} is balanced expression")
        else:
            self.say("Not balanced")

    def greater(self) -> None:
        self.say("Enter the number of elements in the array")
        values = self.numbers("Enter value:")
        for value, greater in next_greater_elements(values):
            self.say(f"NGE for {value} is {greater}")

    def reverse(self) -> None:
        self.say("Enter number of elements you want to push to stack")
        self.stack = self.numbers("Enter value : ")
        self.say("Original Stack")
        for value in reversed(self.stack):
            self.say(value)
        reverse_stack(self.stack)
        self.say("Reversed Stack")
        for value in reversed(self.stack):
            self.say(value)

    def span(self) -> None:
        self.say("Enter the number of days")
        prices = self.numbers("Enter stock price")
        self.say("Calculating span...")
        self.say(" ".join(str(span) for span in stock_span(prices)))

    def special(self) -> None:
        self.say("Enter number of elements you want to push to stack")
        for value in self.numbers("Enter value : "):
            self.min_stack.push(value)
        self.report(lambda: f"Minimum of stack:{self.min_stack.get_min()}")
        self.say("Pop stack twice")
        self.report(self.min_stack.pop)
        self.report(self.min_stack.pop)
        self.report(lambda: f"Minimum of stack:{self.min_stack.get_min()}")


_ACTIONS = {
    1: _Session.create_array_stack,
    2: _Session.push_array,
    3: _Session.pop_array,
    4: _Session.peek_array,
    5: _Session.create_stack,
    6: _Session.pop_stack,
    7: _Session.peek_stack,
    8: _Session.infix,
    9: _Session.postfix,
    10: _Session.dual,
    11: _Session.balanced,
    12: _Session.greater,
    13: _Session.reverse,
    14: _Session.span,
    15: _Session.special,
}


def run_menu(lines, out):
    """Run the menu over whitespace-separated input until it runs out."""
    session = _Session(_tokens(lines), out)
    while True:
        out.write(MENU)
        try:
            choice = session.number()
            action = _ACTIONS.get(choice)
            if action is not None:
                action(session)
        except StopIteration:
            return
        except ValueError:
            session.say("Invalid input")


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Menu-driven demonstrations of stack algorithms."
    )
    parser.parse_args(argv)
    run_menu(sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())