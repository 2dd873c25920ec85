"""Classic search-by-backtracking problems."""

from __future__ import annotations

import string
from functools import lru_cache
from itertools import combinations
from typing import Iterable, Iterator, List, Tuple

_KEYPAD = ("", "", "abc", "def", "ghi", "jkl", "mno", "pqrs", "tuv", "wxyz")


def solve_n_queens(n: int) -> List[List[str]]:
    """Every placement of ``n`` non-attacking queens, drawn with ``Q`` and ``.``."""
    boards: List[List[str]] = []
    columns: set = set()
    falling: set = set()
    rising: set = set()
    rows: List[str] = []

    def place(row: int) -> None:
        if row < 0:
            boards.append(list(rows))
            return
        for col in range(n):
            if col in columns or row - col in falling or row + col in rising:
                continue
            columns.add(col)
            falling.add(row - col)
            rising.add(row + col)
            rows.append("." * col + "Q" + "." * (n - col - 1))
            place(row - 1)
            rows.pop()
            columns.discard(col)
            falling.discard(row - col)
            rising.discard(row + col)

    place(n - 1)
    return boards


def total_n_queens(n: int) -> int:
    """Number of ways to place ``n`` non-attacking queens."""

    def place(col: int, rows: frozenset, upper: frozenset, lower: frozenset) -> int:
        if col == n:
            return 1
        total = 0
        for row in range(n):
            if row in rows or col - row in upper or row + col in lower:
                continue
            total += place(
                col + 1, rows | {row}, upper | {col - row}, lower | {row + col}
            )
        return total

    return place(0, frozenset(), frozenset(), frozenset())


def combination_sum(candidates: Iterable[int], target: int) -> List[List[int]]:
    """Combinations of candidates, each usable repeatedly, summing to ``target``."""
    values = list(candidates)
    if any(value <= 0 for value in values):
        raise ValueError("candidates must be positive")
    results: List[List[int]] = []
    chosen: List[int] = []

    def search(remaining: int, start: int) -> None:
        if remaining < 0:
            return
        if remaining == 0:
            results.append(list(chosen))
            return
        for index, value in enumerate(values[start:], start):
            chosen.append(value)
            search(remaining - value, index)
            chosen.pop()

    search(target, 0)
    return results


def generate_parenthesis(n: int) -> List[str]:
    """All balanced strings of ``n`` pairs of parentheses."""

    def build(opens: int, closes: int, prefix: str) -> Iterator[str]:
        if opens == 0 and closes == 0:
            yield prefix
            return
        if opens > 0:
            yield from build(opens - 1, closes, prefix + "(")
        if closes > opens:
            yield from build(opens, closes - 1, prefix + ")")

    return list(build(n, n, ""))


def letter_combinations(digits: str) -> List[str]:
    """Letter strings a phone keypad can spell for ``digits``."""
    if not digits:
        return []
    result = [""]
    for digit in digits:
        if digit not in string.digits:
            raise ValueError(f"not a keypad digit: {digit!r}")
        letters = _KEYPAD[int(digit)]
        result = [prefix + letter for letter in letters for prefix in result]
    return result


def permute(nums: Iterable[int]) -> List[List[int]]:
    """All orderings of ``nums``, generated by successive swaps."""
    values = list(nums)
    result: List[List[int]] = []

    def walk(i: int) -> None:
        if i == len(values):
            result.append(list(values))
            return
        for j in range(i, len(values)):
            values[i], values[j] = values[j], values[i]
            walk(i + 1)
            values[i], values[j] = values[j], values[i]

    walk(0)
    return result


def _unmatched(text: str) -> int:
    """Fewest parentheses to delete to balance ``text``."""
    removals = 0
    depth = 0
    for ch in text:
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
            if depth < 0:
                depth = 0
                removals += 1
    return removals + depth


def remove_invalid_parentheses(s: str) -> List[str]:
    """Sorted distinct balanced strings made by the fewest deletions from ``s``."""
    needed = _unmatched(s)
    if needed == 0:
        return [s]
    positions = [i for i, ch in enumerate(s) if ch in "()"]
    found = set()
    for removed in combinations(positions, needed):
        dropped = set(removed)
        candidate = "".join(ch for i, ch in enumerate(s) if i not in dropped)
        if _unmatched(candidate) == 0:
            found.add(candidate)
    return sorted(found)


def word_break(s: str, words: Iterable[str]) -> List[str]:
    """Every way to split ``s`` into dictionary words, joined by spaces."""
    dictionary = frozenset(words)

    @lru_cache(maxsize=None)
    def sentences(text: str) -> Tuple[str, ...]:
        result: List[str] = []
        if text in dictionary:
            result.append(text)
        for cut in range(1, len(text)):
            word = text[cut:]
            if word in dictionary:
                result.extend(f"{prefix} {word}" for prefix in sentences(text[:cut]))
        return tuple(result)

    return list(sentences(s))