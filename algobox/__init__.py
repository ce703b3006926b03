"""Classic algorithms: sorting, searching, recursion, matrices, graphs, strings and sudoku."""

__version__ = "0.1.0"