"""Array problems solved by walking a tree of choices."""

from __future__ import annotations

import string
from collections.abc import Iterable, Iterator

__all__ = ["letter_decodings", "max_weight_increasing"]

_LETTERS = string.ascii_lowercase


def _digits(items: Iterable) -> list[int]:
    digits = []
    for item in items:
        if isinstance(item, str):
            if len(item) != 1 or item not in string.digits:
                raise ValueError(f"not a digit: {item!r}")
            digits.append(int(item))
        elif isinstance(item, int) and 0 <= item <= 9:
            digits.append(item)
        else:
            raise ValueError(f"not a digit: {item!r}")
    return digits


def letter_decodings(digits):
    """Every reading of a digit sequence with 1 = a ... 26 = z.

    Readings that take one digit next come before those that take two.
    An empty sequence has no readings.
    """
    values = _digits(digits)
    if not values:
        return []

    def walk(start: int, prefix: str) -> Iterator[str]:
        if start == len(values):
            yield prefix
            return
        first = values[start]
        if first != 0:
            yield from walk(start + 1, prefix + _LETTERS[first - 1])
            if start + 1 < len(values):
                pair = first * 10 + values[start + 1]
                if pair <= 26:
                    yield from walk(start + 2, prefix + _LETTERS[pair - 1])

    return list(walk(0, ""))


def max_weight_increasing(values, weights):
    """Largest total weight of a strictly increasing subsequence of values.

    The empty subsequence counts, so the result is never below zero.
    """
    values = list(values)
    weights = list(weights)
    if len(values) != len(weights):
        raise ValueError("values and weights must have the same length")
    best: list[int] = []
    for index, (value, weight) in enumerate(zip(values, weights)):
        before = max(
            (total for earlier, total in zip(values[:index], best) if earlier < value),
            default=0,
        )
        best.append(weight + max(before, 0))
    return max(best + [0])