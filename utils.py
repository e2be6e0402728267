"""Utility helpers for rendering boards and checking Sudoku legality."""
from __future__ import annotations

from typing import Iterable, List, Sequence

Board = List[List[int]]

BLOCK_DIVIDER = "\n----------------------\n"


def render_grid(values: Iterable[int]) -> str:
    """Render 81 row-major values as text, 3x3 blocks separated by bars and dividers."""
    parts: List[str] = []
    for i, value in enumerate(values):
        if i != 0:
            if i % 27 == 0:
                parts.append(BLOCK_DIVIDER)
            elif i % 9 == 0:
                parts.append("\n")
            elif i % 3 == 0:
                parts.append("| ")
        parts.append(f"{value} " if value != 0 else "  ")
    return "".join(parts)


def _has_duplicates(values: Iterable[int]) -> bool:
    seen: set[int] = set()
    for value in values:
        if value == 0:
            continue
        if value in seen:
            return True
        seen.add(value)
    return False


def is_consistent(board: Sequence[Sequence[int]]) -> bool:
    """True if no row, column or block of a 9x9 board repeats a non-zero value."""
    for row in range(9):
        if _has_duplicates(board[row]):
            return False

    for col in range(9):
        if _has_duplicates(board[row][col] for row in range(9)):
            return False

    for start_row in range(0, 9, 3):
        for start_col in range(0, 9, 3):
            block = (
                board[r][c]
                for r in range(start_row, start_row + 3)
                for c in range(start_col, start_col + 3)
            )
            if _has_duplicates(block):
                return False
    return True


def is_solved(board: Sequence[Sequence[int]]) -> bool:
    return all(value != 0 for row in board for value in row) and is_consistent(board)
