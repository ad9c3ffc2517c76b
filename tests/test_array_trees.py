import pytest

from algostudy.array_trees import letter_decodings, max_weight_increasing


def encode(word):
    return "".join(str(ord(ch) - ord("a") + 1) for ch in word)


def test_decodings_worked_example():
    assert letter_decodings([1, 2, 1]) == ["aba", "au", "la"]


@pytest.mark.parametrize("digits", ["121", "1111", "2626", "101", "110", "27", "9"])
def test_decodings_encode_back(digits):
    readings = letter_decodings(digits)
    assert readings
    assert len(set(readings)) == len(readings)
    for word in readings:
        assert encode(word) == digits


def test_decodings_accept_ints_and_strings_alike():
    assert letter_decodings([2, 6, 1]) == letter_decodings("261")


def test_decodings_first_is_all_single_letters():
    readings = letter_decodings("1234")
    assert readings[0] == "abcd"
    assert len(readings[0]) == 4


def test_decodings_impossible_zero():
    assert letter_decodings("30") == []
    assert letter_decodings("0") == []


def test_decodings_empty():
    assert letter_decodings([]) == []


@pytest.mark.parametrize("bad", [[10], ["x"], [-1]])
def test_decodings_reject_non_digits(bad):
    with pytest.raises(ValueError):
        letter_decodings(bad)


def test_weight_increasing_values_take_everything():
    weights = [3, 1, 4, 1, 5]
    assert max_weight_increasing([1, 2, 3, 4, 5], weights) == sum(weights)


def test_weight_decreasing_values_take_one():
    weights = [3, 1, 4, 1, 5]
    assert max_weight_increasing([5, 4, 3, 2, 1], weights) == max(weights)


def test_weight_equal_values_are_not_increasing():
    weights = [2, 7, 3]
    assert max_weight_increasing([4, 4, 4], weights) == max(weights)


def test_weight_worked_example():
    assert max_weight_increasing([1, 5, 2, 3], [1, 10, 1, 1]) == 11


def test_weight_empty_is_zero():
    assert max_weight_increasing([], []) == 0


def test_weight_never_negative():
    assert max_weight_increasing([1, 2], [-5, -1]) == 0


def test_weight_length_mismatch():
    with pytest.raises(ValueError):
        max_weight_increasing([1, 2], [1])