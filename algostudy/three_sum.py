"""Find all distinct triplets in a list that add up to zero."""

from __future__ import annotations

__all__ = ["three_sum"]


def three_sum(nums):
    """Return each distinct triplet of values summing to zero, in ascending order.

    The input is not modified.
    """
    values = sorted(nums)
    result: list[list[int]] = []
    count = len(values)
    for i, first in enumerate(values):
        if i > 0 and first == values[i - 1]:
            continue
        left, right = i + 1, count - 1
        while left < right:
            total = first + values[left] + values[right]
            if total == 0:
                result.append([first, values[left], values[right]])
                while left < right and values[left] == values[left + 1]:
                    left += 1
                while left < right and values[right] == values[right - 1]:
                    right -= 1
                left += 1
                right -= 1
            elif total < 0:
                left += 1
            else:
                right -= 1
    return result