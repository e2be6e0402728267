"""Bounds-checked storage for a 9x9 Sudoku grid."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Tuple, Union

import numpy as np

from errors import BadColumn, BadCoordinates, BadRow, BadValue
from utils import Board, render_grid

SIZE = 9
BLOCK = 3
CELL_COUNT = SIZE * SIZE


def index_of(row: int, column: int) -> int:
    """Row-major index of a cell in the flat 81-value array."""
    return row * SIZE + column


@dataclass(frozen=True, order=True)
class Coordinates:
    row: int
    column: int


def _build_neighbor_table() -> Tuple[Tuple[Coordinates, ...], ...]:
    table = []
    for row in range(SIZE):
        for column in range(SIZE):
            found = {Coordinates(row, i) for i in range(SIZE)}
            found.update(Coordinates(i, column) for i in range(SIZE))
            block_row = (row // BLOCK) * BLOCK
            block_column = (column // BLOCK) * BLOCK
            found.update(
                Coordinates(r, c)
                for r in range(block_row, block_row + BLOCK)
                for c in range(block_column, block_column + BLOCK)
            )
            found.discard(Coordinates(row, column))
            table.append(tuple(sorted(found)))
    return tuple(table)


_NEIGHBORS = _build_neighbor_table()


def neighbors(coords: Coordinates) -> Tuple[Coordinates, ...]:
    """The 20 cells sharing a row, column or block with ``coords``, in row-major order."""
    if not (0 <= coords.row < SIZE and 0 <= coords.column < SIZE):
        raise BadCoordinates(coords.row, coords.column)
    return _NEIGHBORS[index_of(coords.row, coords.column)]


class Grid:
    """The 81 cells of a puzzle plus a running count of the non-empty ones."""

    def __init__(self, cells: np.ndarray, set_count: int) -> None:
        self.cells = cells
        self.set_count = set_count

    @classmethod
    def new_empty(cls) -> "Grid":
        return cls(np.zeros(CELL_COUNT, dtype="uint8"), 0)

    @classmethod
    def new_from_state(cls, values: Union[Sequence[int], Sequence[Sequence[int]], np.ndarray]) -> "Grid":
        """Copy 81 values (flat or 9x9) into a new grid, counting the non-zero ones.

        Values are only checked to fit a byte (0..255); ``set`` is what
        enforces the 0..9 range.
        """
        raw = np.asarray(values)
        if raw.size != CELL_COUNT:
            raise ValueError(f"expected {CELL_COUNT} values, got {raw.size}")
        flat = raw.reshape(CELL_COUNT)
        outside = (flat < 0) | (flat > 255)
        if outside.any():
            raise BadValue(flat[outside][0].item())
        cells = flat.astype("uint8")
        return cls(cells, int(np.count_nonzero(cells)))

    def check_coords(self, row: int, column: int) -> None:
        if not (0 <= row < SIZE and 0 <= column < SIZE):
            raise BadCoordinates(row, column)

    def get_row(self, row: int) -> List[int]:
        if not 0 <= row < SIZE:
            raise BadRow(row)
        start = index_of(row, 0)
        return self.cells[start : start + SIZE].tolist()

    def get_column(self, column: int) -> List[int]:
        if not 0 <= column < SIZE:
            raise BadColumn(column)
        return self.cells[column::SIZE].tolist()

    def get_block(self, block_row: int, block_column: int) -> List[int]:
        if not (0 <= block_row < BLOCK and 0 <= block_column < BLOCK):
            raise BadCoordinates(block_row, block_column)
        square = self.cells.reshape(SIZE, SIZE)
        r0 = block_row * BLOCK
        c0 = block_column * BLOCK
        return square[r0 : r0 + BLOCK, c0 : c0 + BLOCK].ravel().tolist()

    def set(self, row: int, column: int, value: int) -> None:
        """Write ``value`` (0 clears) and keep ``set_count`` in step with the change."""
        self.check_coords(row, column)
        if not 0 <= value <= SIZE:
            raise BadValue(value)

        idx = index_of(row, column)
        if self.cells[idx] == 0:
            if value != 0:
                self.set_count += 1
        elif value == 0:
            self.set_count -= 1
        self.cells[idx] = value

    def is_set(self, row: int, column: int) -> bool:
        self.check_coords(row, column)
        return bool(self.cells[index_of(row, column)] != 0)

    def is_full(self) -> bool:
        return self.set_count >= CELL_COUNT

    def to_rows(self) -> Board:
        return self.cells.reshape(SIZE, SIZE).tolist()

    def __repr__(self) -> str:
        return f"Grid(set_count={self.set_count})"

    def __str__(self) -> str:
        return render_grid(self.cells.tolist())
