"""Randomized constraint-propagation Sudoku solver and puzzle generator."""
from __future__ import annotations

import logging
from typing import List, Optional, Set

import numpy as np

from errors import NoPossibilities, NoResetCandidates, SolverError, StepLimitExceeded, SudokuError
from sudoku_grid import CELL_COUNT, SIZE, Coordinates, Grid, index_of, neighbors

log = logging.getLogger(__name__)

ALL_VALUES = frozenset(range(1, SIZE + 1))
DEFAULT_MAX_STEPS: Optional[int] = 100_000


class Solver:
    """Fills a grid by committing forced cells, guessing otherwise, and resetting
    neighbours of dead-end cells.

    ``secure_state`` is a copy of the grid taken at construction and replaced at
    most once, after a step that forced cells without any doubt. Cells that are
    non-zero there are never cleared by the dead-end repair.
    """

    def __init__(
        self,
        grid: Grid,
        rng: Optional[np.random.Generator] = None,
        max_steps: Optional[int] = DEFAULT_MAX_STEPS,
    ) -> None:
        self.grid = grid
        self.rng = rng if rng is not None else np.random.default_rng()
        self.max_steps = max_steps
        self.secure_state: np.ndarray = grid.cells.copy()
        self.secure_state_set = False
        self.steps = 0
        self.last_status: str = "idle"

    def get_possible(self, row: int, column: int) -> Set[int]:
        """Values in 1..9 not yet used in the cell's row, column or block."""
        self.grid.check_coords(row, column)
        used = set(self.grid.get_row(row))
        used.update(self.grid.get_column(column))
        used.update(self.grid.get_block(row // 3, column // 3))
        return set(ALL_VALUES.difference(used))

    def _set_secure_state(self) -> None:
        self.secure_state = self.grid.cells.copy()
        self.secure_state_set = True
        log.debug("Secure state captured with %d cells set", self.grid.set_count)

    def _pick(self, options: List):
        return options[int(self.rng.integers(len(options)))]

    def _repair(self, row: int, column: int) -> Set[int]:
        """Clear random unprotected neighbours of a dead-end cell until it has a candidate."""
        eligible = [
            cell
            for cell in neighbors(Coordinates(row, column))
            if self.secure_state[index_of(cell.row, cell.column)] == 0
        ]
        if not eligible:
            raise NoResetCandidates(row, column)

        possibilities: Set[int] = set()
        while not possibilities:
            if not any(self.grid.is_set(cell.row, cell.column) for cell in eligible):
                raise NoResetCandidates(row, column, "clearing every unprotected neighbour leaves no candidate")
            reset = self._pick(eligible)
            log.debug("Dead end at (%d, %d), clearing (%d, %d)", row, column, reset.row, reset.column)
            self.grid.set(reset.row, reset.column, 0)
            possibilities = self.get_possible(row, column)
        return possibilities

    def step(self) -> None:
        """Scan every empty cell once.

        Singletons are committed as they are found. If none was, a random
        candidate goes into the cell with the fewest candidates (the last such
        cell in row-major order).
        """
        if self.grid.is_full():
            return

        changed = False
        certain = True
        lowest: Set[int] = set(ALL_VALUES)
        lowest_coords = Coordinates(0, 0)

        for row in range(SIZE):
            for column in range(SIZE):
                if self.grid.is_set(row, column):
                    continue
                possibilities = self.get_possible(row, column)

                if not possibilities:
                    certain = False
                    possibilities = self._repair(row, column)

                if len(possibilities) <= len(lowest):
                    certain = False
                    lowest = possibilities
                    lowest_coords = Coordinates(row, column)

                if len(possibilities) == 1:
                    changed = True
                    value = next(iter(possibilities), None)
                    if value is None:
                        raise NoPossibilities(f"no candidate left for ({row}, {column})")
                    self.grid.set(row, column, value)

        if not changed:
            if not lowest:
                raise NoPossibilities(f"no candidate left for ({lowest_coords.row}, {lowest_coords.column})")
            value = self._pick(sorted(lowest))
            log.debug("Guessing %d at (%d, %d)", value, lowest_coords.row, lowest_coords.column)
            self.grid.set(lowest_coords.row, lowest_coords.column, value)
        elif certain and not self.secure_state_set:
            self._set_secure_state()

    def solve(self) -> Grid:
        """Run steps until every cell is set. Returns the (mutated) grid."""
        self.steps = 0
        self.last_status = "idle"
        try:
            while not self.grid.is_full():
                if self.max_steps is not None and self.steps >= self.max_steps:
                    self.last_status = "timeout"
                    raise StepLimitExceeded(self.steps)
                self.step()
                self.steps += 1
        except SudokuError as exc:
            self.last_status = "failed"
            raise SolverError(f"grid rejected an update: {exc}") from exc
        except SolverError:
            if self.last_status != "timeout":
                self.last_status = "failed"
            raise
        self.last_status = "solved"
        log.debug("Solved in %d steps", self.steps)
        return self.grid

    @classmethod
    def generate(
        cls,
        difficulty: int,
        rng: Optional[np.random.Generator] = None,
        max_steps: Optional[int] = DEFAULT_MAX_STEPS,
    ) -> Grid:
        """Solve an empty grid, then blank each cell with probability ``difficulty`` percent."""
        if not 0 <= difficulty <= 100:
            raise ValueError(f"difficulty must be within [0, 100], got {difficulty}")
        rng = rng if rng is not None else np.random.default_rng()

        solver = cls(Grid.new_empty(), rng=rng, max_steps=max_steps)
        solver.solve()

        values = solver.grid.cells.copy()
        values[rng.integers(0, 100, size=CELL_COUNT) < difficulty] = 0
        puzzle = Grid.new_from_state(values)
        log.debug("Generated puzzle with %d givens after %d steps", puzzle.set_count, solver.steps)
        return puzzle

    def __str__(self) -> str:
        return str(self.grid)
