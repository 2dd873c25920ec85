"""Classic data-structure and algorithm routines in plain Python: trees, linked lists, backtracking, grids, bits, number theory and small containers."""

__version__ = "0.1.0"