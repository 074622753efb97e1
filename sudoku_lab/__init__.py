"""Variable-size Sudoku generation and validation."""
