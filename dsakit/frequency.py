"""Counting-based problems on sequences and strings."""

from __future__ import annotations

from collections import Counter
from typing import Dict, Hashable, Iterable, List, Tuple


def top_k_frequent(nums: Iterable[int], k: int) -> List[int]:
    """The ``k`` most frequent values; ties go to the larger value first."""
    counts = Counter(nums)
    ranked = sorted(counts.items(), key=lambda item: (item[1], item[0]), reverse=True)
    return [value for value, _ in ranked[: max(k, 0)]]


def first_uniq_char(s: str) -> int:
    """Index of the first character occurring once in ``s``, or -1."""
    counts = Counter(s)
    return next((i for i, ch in enumerate(s) if counts[ch] == 1), -1)


def group_anagrams(strs: Iterable[str]) -> List[List[str]]:
    """Strings grouped by letter counts, groups ordered by their sorted counts."""
    groups: Dict[Tuple[Tuple[Hashable, int], ...], List[str]] = {}
    for text in strs:
        key = tuple(sorted(Counter(text).items()))
        groups.setdefault(key, []).append(text)
    return [groups[key] for key in sorted(groups)]


def frequency_sort(s: str) -> str:
    """Characters of ``s`` regrouped by descending frequency.

    Characters of equal frequency keep the order of their first appearance.
    """
    return "".join(ch * count for ch, count in Counter(s).most_common())