import io

from algostudy.stack_menu import main, run_menu
from algostudy.stacks import evaluate_postfix, infix_to_postfix, stock_span


def run(*lines):
    out = io.StringIO()
    run_menu(lines, out)
    return out.getvalue().splitlines()


def test_menu_printed_on_empty_input():
    lines = run()
    assert lines[0] == "MENU"
    assert "15.Create special stack which supports getMin" in lines


def test_array_stack_create_and_pop():
    lines = run("1", "3")
    assert "stack is full" in lines
    start = lines.index("Popping 3 items, Expecting 5 4 3")
    assert lines[start + 1 : start + 4] == ["5", "4", "3"]


def test_array_stack_needs_creation():
    lines = run("4")
    assert "Create the array stack first" in lines


def test_linked_stack_push_pop_and_empty():
    lines = run("5 2 7 9", "6", "6", "6")
    pops = [i for i, line in enumerate(lines) if line == "Pop top of stack"]
    assert [lines[i + 1] for i in pops] == ["9", "7", "stack is empty"]


def test_infix_conversion():
    lines = run("8", "a+b*c-d")
    assert infix_to_postfix("a+b*c-d") in lines


def test_postfix_evaluation():
    lines = run("9", "23+4*")
    assert f"Final result of expression 23+4* is {evaluate_postfix('23+4*')}" in lines


def test_dual_stack_session():
    lines = run("10", "3", "2 1 2", "2 8 9", "1", "1")
    assert "stack 2 is full" in lines
    assert "Stack1:2" in lines
    assert "Stack2:8" in lines


def test_balanced_check():
    assert "{(a)} is balanced expression" in run("11", "{(a)}")
    assert "Not balanced" in run("11", "{(a})")


def test_next_greater_element():
    lines = run("12", "2", "1", "2")
    assert "NGE for 1 is 2" in lines
    assert "NGE for 2 is -1" in lines


def test_reverse_stack():
    lines = run("13", "3", "1", "2", "3")
    original = lines.index("Original Stack")
    reversed_at = lines.index("Reversed Stack")
    assert [line for line in lines[original + 1 : reversed_at] if line.isdigit()] == ["3", "2", "1"]
    assert lines[reversed_at + 1 : reversed_at + 4] == ["1", "2", "3"]


def test_stock_span():
    prices = [100, 80, 60, 70, 60, 75, 85]
    lines = run("14", str(len(prices)), *map(str, prices))
    start = lines.index("Calculating span...")
    assert lines[start + 1] == " ".join(str(s) for s in stock_span(prices))


def test_invalid_choice_reports():
    assert "Invalid input" in run("xyz")


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("11\n(a)\n"))
    assert main([]) == 0
    assert "(a) is balanced expression" in capsys.readouterr().out