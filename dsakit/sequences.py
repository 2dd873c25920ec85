"""Scans over sequences: windows, intervals, scheduling and bracket matching."""

from __future__ import annotations

import heapq
import math
from collections import deque
from itertools import takewhile
from typing import Iterable, List, Sequence


def max_sliding_window(nums: Iterable[int], k: int) -> List[int]:
    """Maximum of every window of ``k`` consecutive values, left to right."""
    if k < 1:
        raise ValueError("window size must be at least 1")
    values = list(nums)
    window: deque = deque()
    result: List[int] = []
    for i, value in enumerate(values):
        if window and window[0] == i - k:
            window.popleft()
        while window and values[window[-1]] < value:
            window.pop()
        window.append(i)
        if i >= k - 1:
            result.append(values[window[0]])
    return result


def assign_tasks(servers: Iterable[int], tasks: Iterable[int]) -> List[int]:
    """Server index given each task, task ``j`` arriving at time ``j``.

    A free server of least weight (then least index) takes the oldest
    waiting task; tasks wait in arrival order while every server is busy.
    """
    weights = list(servers)
    durations = list(tasks)
    if durations and not weights:
        raise ValueError("tasks need at least one server")

    free = [(weight, index) for index, weight in enumerate(weights)]
    heapq.heapify(free)
    busy: list = []  # (finish time, weight, index)
    waiting: deque = deque()
    result = [0] * len(durations)

    for now in range(len(durations)):
        while busy and busy[0][0] <= now:
            _, weight, index = heapq.heappop(busy)
            heapq.heappush(free, (weight, index))
        waiting.append(now)
        while free and waiting:
            task = waiting.popleft()
            weight, index = heapq.heappop(free)
            result[task] = index
            heapq.heappush(busy, (now + durations[task], weight, index))

    while waiting:
        task = waiting.popleft()
        finish, weight, index = heapq.heappop(busy)
        result[task] = index
        heapq.heappush(busy, (finish + durations[task], weight, index))
    return result


def max_profit(prices: Iterable[int]) -> int:
    """Best gain from one buy followed by one later sell; 0 if none gains."""
    best = 0
    lowest = math.inf
    for price in prices:
        lowest = min(lowest, price)
        best = max(best, price - lowest)
    return best


def max_area(heights: Sequence[int]) -> int:
    """Largest water area held between two of the vertical lines."""
    lo, hi = 0, len(heights) - 1
    best = 0
    while lo < hi:
        best = max(best, (hi - lo) * min(heights[lo], heights[hi]))
        if heights[lo] < heights[hi]:
            lo += 1
        else:
            hi -= 1
    return best


def longest_common_prefix(strs: Iterable[str]) -> str:
    """Longest string that starts every one of ``strs``."""
    items = list(strs)
    if not items:
        raise ValueError("longest_common_prefix needs at least one string")
    first, last = min(items), max(items)
    return "".join(a for a, _ in takewhile(lambda pair: pair[0] == pair[1], zip(first, last)))


def max_sub_array(nums: Iterable[int]) -> int:
    """Largest sum of a non-empty contiguous run of ``nums``."""
    best = None
    running = 0
    for value in nums:
        running += value
        best = running if best is None else max(best, running)
        if running < 0:
            running = 0
    if best is None:
        raise ValueError("max_sub_array needs at least one number")
    return best


_PAIRS = {")": "(", "]": "[", "}": "{"}


def is_valid_parentheses(s: str) -> bool:
    """True if ``s`` consists only of properly nested ``()[]{}``."""
    stack: List[str] = []
    for ch in s:
        if ch in "([{":
            stack.append(ch)
        elif ch in _PAIRS and stack and stack[-1] == _PAIRS[ch]:
            stack.pop()
        else:
            return False
    return not stack