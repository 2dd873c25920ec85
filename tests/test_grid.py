import copy

import pytest

from dsakit.grid import exist, find_words, num_islands, rotate

BOARD = [
    ["A", "B", "C", "E"],
    ["S", "F", "C", "S"],
    ["A", "D", "E", "E"],
]

WORD_BOARD = [
    ["o", "a", "a", "n"],
    ["e", "t", "a", "e"],
    ["i", "h", "k", "r"],
    ["i", "f", "l", "v"],
]


def test_exist_traces_word():
    assert exist(BOARD, "ABCCED")


def test_exist_cannot_reuse_cell():
    assert not exist(BOARD, "ABCB")


def test_exist_any_adjacent_path_is_found():
    path = [(0, 0), (0, 1), (1, 1), (2, 1), (2, 2), (1, 2)]
    word = "".join(BOARD[r][c] for r, c in path)
    assert exist(BOARD, word)


def test_exist_letter_missing_from_board():
    letters = {cell for row in BOARD for cell in row}
    assert "Z" not in letters
    assert not exist(BOARD, "AZ")


def test_find_words_agrees_with_exist():
    words = ["oath", "pea", "eat", "rain", "oath"]
    board = copy.deepcopy(WORD_BOARD)
    found = find_words(board, words)
    assert board == WORD_BOARD
    assert len(set(found)) == len(found)
    assert set(found) == {w for w in words if exist(WORD_BOARD, w)}
    assert "oath" in found


def test_num_islands_example():
    grid = [
        ["1", "1", "0", "0", "0"],
        ["1", "1", "0", "0", "0"],
        ["0", "0", "1", "0", "0"],
        ["0", "0", "0", "1", "1"],
    ]
    original = copy.deepcopy(grid)
    assert num_islands(grid) == 3
    assert grid == original


def test_num_islands_separated_cells():
    row = list("10101")
    assert num_islands([row]) == row.count("1")


def test_num_islands_single_land_mass():
    grid = [["1"] * 4 for _ in range(3)]
    assert num_islands(grid) == len(grid[0]) // len(grid[0])


def test_rotate_moves_cells_clockwise():
    original = [[r * 4 + c for c in range(4)] for r in range(4)]
    matrix = copy.deepcopy(original)
    rotate(matrix)
    n = len(original)
    for r in range(n):
        for c in range(n):
            assert matrix[r][c] == original[n - 1 - c][r]


def test_rotate_four_times_is_identity():
    original = [[r * 3 + c for c in range(3)] for r in range(3)]
    matrix = copy.deepcopy(original)
    for _ in range(4):
        rotate(matrix)
    assert matrix == original


def test_rotate_rejects_non_square():
    with pytest.raises(ValueError):
        rotate([[1, 2, 3], [4, 5, 6]])