"""Finding tuples of numbers that add up to a target."""

from __future__ import annotations

from typing import Iterable, List


def two_sum(nums: Iterable[int], target: int) -> List[int]:
    """Indices ``[i, j]`` with ``i < j`` of two numbers adding up to ``target``.

    Raises ValueError when no such pair exists.
    """
    seen: dict = {}
    for index, value in enumerate(nums):
        partner = target - value
        if partner in seen:
            return [seen[partner], index]
        seen[value] = index
    raise ValueError(f"no two numbers add up to {target}")


def three_sum(nums: Iterable[int]) -> List[List[int]]:
    """All distinct sorted triplets that add up to zero."""
    values = sorted(nums)
    size = len(values)
    result: List[List[int]] = []
    for i, first in enumerate(values):
        if i > 0 and first == values[i - 1]:
            continue
        lo, hi = i + 1, size - 1
        while lo < hi:
            total = first + values[lo] + values[hi]
            if total > 0:
                hi -= 1
            elif total < 0:
                lo += 1
            else:
                result.append([first, values[lo], values[hi]])
                lo += 1
                while lo < hi and values[lo] == values[lo - 1]:
                    lo += 1
    return result


def four_sum(nums: Iterable[int], target: int) -> List[List[int]]:
    """All distinct sorted quadruplets that add up to ``target``."""
    values = sorted(nums)
    size = len(values)
    result: List[List[int]] = []
    i = 0
    while i < size - 3:
        need_three = target - values[i]
        j = i + 1
        while j < size - 2:
            need_two = need_three - values[j]
            front, back = j + 1, size - 1
            while front < back:
                pair = values[front] + values[back]
                if pair < need_two:
                    front += 1
                elif pair > need_two:
                    back -= 1
                else:
                    quad = [values[i], values[j], values[front], values[back]]
                    result.append(quad)
                    while front < back and values[front] == quad[2]:
                        front += 1
                    while front < back and values[back] == quad[3]:
                        back -= 1
            while j + 1 < size - 2 and values[j + 1] == values[j]:
                j += 1
            j += 1
        while i + 1 < size - 3 and values[i + 1] == values[i]:
            i += 1
        i += 1
    return result