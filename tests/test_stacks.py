import pytest

from algostudy.stacks import (
    ArrayStack,
    DualStack,
    MinStack,
    StackEmptyError,
    StackFullError,
    evaluate_postfix,
    infix_to_postfix,
    insert_at_bottom,
    is_balanced,
    is_operand,
    next_greater_elements,
    precedence,
    reverse_stack,
    stock_span,
)


def test_array_stack_is_lifo():
    stack = ArrayStack(5)
    for value in (1, 2, 3):
        stack.push(value)
    assert len(stack) == 3
    assert stack.peek() == 3
    assert [stack.pop(), stack.pop(), stack.pop()] == [3, 2, 1]
    assert stack.is_empty()


def test_array_stack_full():
    stack = ArrayStack(2)
    stack.push(1)
    stack.push(2)
    assert stack.is_full()
    with pytest.raises(StackFullError):
        stack.push(3)
    assert len(stack) == 2


def test_array_stack_empty_errors():
    stack = ArrayStack(1)
    with pytest.raises(StackEmptyError):
        stack.pop()
    with pytest.raises(StackEmptyError):
        stack.peek()


def test_dual_stack_shares_capacity():
    stacks = DualStack(4)
    stacks.push1(1)
    stacks.push1(2)
    stacks.push2(3)
    stacks.push2(4)
    assert stacks.is_full()
    with pytest.raises(StackFullError):
        stacks.push1(5)
    with pytest.raises(StackFullError):
        stacks.push2(5)
    assert stacks.pop1() == 2
    assert stacks.pop2() == 4
    assert stacks.pop1() == 1
    assert stacks.pop2() == 3
    assert stacks.is_empty1() and stacks.is_empty2()


def test_dual_stack_empty_errors():
    stacks = DualStack(3)
    with pytest.raises(StackEmptyError):
        stacks.pop1()
    with pytest.raises(StackEmptyError):
        stacks.pop2()


def test_min_stack_tracks_minimum():
    stack = MinStack()
    for value in (5, 3, 7, 3):
        stack.push(value)
    assert stack.get_min() == 3
    assert stack.pop() == 3
    assert stack.get_min() == 3
    assert stack.pop() == 7
    assert stack.pop() == 3
    assert stack.get_min() == 5
    assert len(stack) == 1


def test_min_stack_empty_errors():
    stack = MinStack()
    with pytest.raises(StackEmptyError):
        stack.get_min()
    with pytest.raises(StackEmptyError):
        stack.pop()


def test_precedence_order():
    assert precedence("+") == precedence("-")
    assert precedence("*") == precedence("/")
    assert precedence("+") < precedence("*") < precedence("^")
    assert precedence("x") == -1


def test_is_operand():
    assert is_operand("a") and is_operand("Z")
    assert not is_operand("+")
    assert not is_operand("1")


def test_infix_to_postfix_precedence():
    assert infix_to_postfix("a+b*c") == "abc*+"


def test_infix_to_postfix_keeps_operands_and_drops_parentheses():
    result = infix_to_postfix("(a+b)*(c-d)")
    assert "".join(ch for ch in result if is_operand(ch)) == "abcd"
    assert "(" not in result and ")" not in result
    assert sorted(ch for ch in result if not is_operand(ch)) == sorted("+*-")


def test_evaluate_postfix():
    assert evaluate_postfix("23*4+") == 10
    assert evaluate_postfix("72-") == 7 - 2
    assert evaluate_postfix("53^") == 5 ^ 3


def test_evaluate_postfix_errors():
    with pytest.raises(ZeroDivisionError):
        evaluate_postfix("50/")
    with pytest.raises(ValueError):
        evaluate_postfix("12%")
    with pytest.raises(ValueError):
        evaluate_postfix("")


def test_is_balanced():
    assert is_balanced("{[()]}")
    assert is_balanced("a+(b*c)")
    assert not is_balanced("([)]")
    assert not is_balanced("(()")
    assert not is_balanced(")")


def test_next_greater_elements_invariants():
    values = [4, 5, 2, 25, 7, 1]
    result = next_greater_elements(values)
    assert sorted(v for v, _ in result) == sorted(values)
    for value, greater in result:
        assert greater == -1 or greater > value


def test_next_greater_elements_small():
    assert next_greater_elements([1, 2]) == [(1, 2), (2, -1)]
    assert next_greater_elements([]) == []


def test_insert_at_bottom():
    stack = [2, 3]
    insert_at_bottom(stack, 1)
    assert stack == [1, 2, 3]


def test_reverse_stack():
    stack = [1, 2, 3, 4]
    reverse_stack(stack)
    assert stack == [4, 3, 2, 1]
    reverse_stack(stack)
    assert stack == [1, 2, 3, 4]


def test_stock_span_invariants():
    rising = [10, 20, 30, 40]
    assert stock_span(rising) == list(range(1, len(rising) + 1))
    falling = [40, 30, 20]
    assert stock_span(falling) == [1] * len(falling)
    prices = [100, 80, 60, 70, 60, 75, 85]
    spans = stock_span(prices)
    assert spans[0] == 1
    assert all(1 <= span <= day + 1 for day, span in enumerate(spans))