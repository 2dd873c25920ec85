"""Searches over two-dimensional grids and in-place matrix rotation."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Sequence

_BLOCKED = "."


def _size(board: Sequence[Sequence]) -> tuple:
    return len(board), (len(board[0]) if board else 0)


def exist(board: Sequence[Sequence[str]], word: str) -> bool:
    """True if ``word`` can be traced through adjacent cells, each used once."""
    rows, cols = _size(board)
    visited: set = set()

    def search(r: int, c: int, k: int) -> bool:
        if k == len(word):
            return True
        if not (0 <= r < rows and 0 <= c < cols):
            return False
        if board[r][c] != word[k] or (r, c) in visited:
            return False
        visited.add((r, c))
        found = (
            search(r + 1, c, k + 1)
            or search(r - 1, c, k + 1)
            or search(r, c + 1, k + 1)
            or search(r, c - 1, k + 1)
        )
        visited.discard((r, c))
        return found

    return any(search(r, c, 0) for r in range(rows) for c in range(cols))


@dataclass
class _TrieNode:
    children: Dict[str, "_TrieNode"] = field(default_factory=dict)
    word: Optional[str] = None


def find_words(board: Sequence[Sequence[str]], words: Iterable[str]) -> List[str]:
    """Words that can be traced on the board, each reported once, in discovery order."""
    root = _TrieNode()
    for word in words:
        node = root
        for ch in word:
            node = node.children.setdefault(ch, _TrieNode())
        node.word = word

    rows, cols = _size(board)
    found: List[str] = []
    visited: set = set()

    def search(node: _TrieNode, r: int, c: int) -> None:
        cell = board[r][c]
        if cell == _BLOCKED or (r, c) in visited:
            return
        child = node.children.get(cell)
        if child is None:
            return
        if child.word is not None:
            found.append(child.word)
            child.word = None
        visited.add((r, c))
        if r > 0:
            search(child, r - 1, c)
        if c > 0:
            search(child, r, c - 1)
        if r < rows - 1:
            search(child, r + 1, c)
        if c < cols - 1:
            search(child, r, c + 1)
        visited.discard((r, c))

    for r in range(rows):
        for c in range(cols):
            search(root, r, c)
    return found


def num_islands(grid: Sequence[Sequence[str]]) -> int:
    """Number of 4-connected groups of ``"1"`` cells; the grid is not modified."""
    rows, cols = _size(grid)
    seen: set = set()
    count = 0
    for r, row in enumerate(grid):
        for c, cell in enumerate(row):
            if cell != "1" or (r, c) in seen:
                continue
            count += 1
            seen.add((r, c))
            queue = deque([(r, c)])
            while queue:
                x, y = queue.popleft()
                for nx, ny in ((x - 1, y), (x, y + 1), (x + 1, y), (x, y - 1)):
                    if (
                        0 <= nx < rows
                        and 0 <= ny < cols
                        and grid[nx][ny] == "1"
                        and (nx, ny) not in seen
                    ):
                        seen.add((nx, ny))
                        queue.append((nx, ny))
    return count


def rotate(matrix: List[list]) -> None:
    """Rotate a square matrix a quarter turn clockwise, in place."""
    n = len(matrix)
    if any(len(row) != n for row in matrix):
        raise ValueError("matrix must be square")
    for r in range(n):
        for c in range(r + 1, n):
            matrix[r][c], matrix[c][r] = matrix[c][r], matrix[r][c]
    for row in matrix:
        row.reverse()