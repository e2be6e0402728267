"""Error types raised by the grid and the solver."""
from __future__ import annotations


class SudokuError(ValueError):
    """Bad index or value passed to a grid accessor or mutator."""

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other) and self.args == other.args  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self), self.args))


class BadRow(SudokuError):
    def __init__(self, row: int) -> None:
        super().__init__(row)
        self.row = row

    def __str__(self) -> str:
        return f"row index {self.row} outside [0, 9)"


class BadColumn(SudokuError):
    def __init__(self, column: int) -> None:
        super().__init__(column)
        self.column = column

    def __str__(self) -> str:
        return f"column index {self.column} outside [0, 9)"


class BadCoordinates(SudokuError):
    def __init__(self, row: int, column: int) -> None:
        super().__init__(row, column)
        self.row = row
        self.column = column

    def __str__(self) -> str:
        return f"coordinates ({self.row}, {self.column}) out of range"


class BadValue(SudokuError):
    def __init__(self, value: int) -> None:
        super().__init__(value)
        self.value = value

    def __str__(self) -> str:
        return f"value {self.value} outside [0, 9]"


class SolverError(RuntimeError):
    """Failure while solving or generating a puzzle."""


class NoPossibilities(SolverError):
    """A committed candidate set turned out to be empty."""


class NoResetCandidates(SolverError):
    """A dead-end cell has no neighbour that the repair is allowed to clear."""

    def __init__(self, row: int, column: int, reason: str = "every neighbour is protected") -> None:
        super().__init__(row, column, reason)
        self.row = row
        self.column = column
        self.reason = reason

    def __str__(self) -> str:
        return f"cannot repair cell ({self.row}, {self.column}): {self.reason}"


class StepLimitExceeded(SolverError):
    def __init__(self, steps: int) -> None:
        super().__init__(steps)
        self.steps = steps

    def __str__(self) -> str:
        return f"gave up after {self.steps} steps"
