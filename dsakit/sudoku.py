"""Solving and checking 9x9 sudoku boards of one-character cells."""

from __future__ import annotations

from itertools import chain
from typing import List, Sequence

EMPTY = "."
_DIGITS = "123456789"


def _box(row: int, col: int) -> int:
    return (row // 3) * 3 + col // 3


def _check_shape(board: Sequence[Sequence[str]]) -> None:
    if len(board) != 9 or any(len(row) != 9 for row in board):
        raise ValueError("a sudoku board must be 9 by 9")


def solve_sudoku(board: List[List[str]]) -> bool:
    """Fill the empty cells in place; return False and leave it unchanged if impossible."""
    _check_shape(board)
    rows = [set() for _ in range(9)]
    cols = [set() for _ in range(9)]
    boxes = [set() for _ in range(9)]
    empties = []
    for r, row in enumerate(board):
        for c, cell in enumerate(row):
            if cell == EMPTY:
                empties.append((r, c))
            else:
                rows[r].add(cell)
                cols[c].add(cell)
                boxes[_box(r, c)].add(cell)

    def fill(k: int) -> bool:
        if k == len(empties):
            return True
        r, c = empties[k]
        box = boxes[_box(r, c)]
        for digit in _DIGITS:
            if digit in rows[r] or digit in cols[c] or digit in box:
                continue
            rows[r].add(digit)
            cols[c].add(digit)
            box.add(digit)
            board[r][c] = digit
            if fill(k + 1):
                return True
            board[r][c] = EMPTY
            rows[r].discard(digit)
            cols[c].discard(digit)
            box.discard(digit)
        return False

    return fill(0)


def is_valid_sudoku(board: Sequence[Sequence[str]]) -> bool:
    """True if no row, column or 3x3 box repeats a filled value."""
    _check_shape(board)

    def no_repeats(cells) -> bool:
        filled = [cell for cell in cells if cell != EMPTY]
        return len(filled) == len(set(filled))

    boxes = (
        [board[r][c] for r in range(br, br + 3) for c in range(bc, bc + 3)]
        for br in range(0, 9, 3)
        for bc in range(0, 9, 3)
    )
    return all(no_repeats(unit) for unit in chain(board, zip(*board), boxes))