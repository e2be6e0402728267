"""Endless Sudoku loop: generate a puzzle, print it, solve it, print the solution."""
from __future__ import annotations

import argparse
import logging
from typing import Optional

import numpy as np

from errors import SolverError
from solver import DEFAULT_MAX_STEPS, Solver
from utils import is_solved

log = logging.getLogger(__name__)

DEFAULT_DIFFICULTY = 70


def run(
    difficulty: int = DEFAULT_DIFFICULTY,
    seed: Optional[int] = None,
    count: Optional[int] = None,
    max_steps: Optional[int] = DEFAULT_MAX_STEPS,
) -> int:
    rng = np.random.default_rng(seed)
    rounds = 0

    while count is None or rounds < count:
        try:
            sudoku = Solver.generate(difficulty, rng=rng, max_steps=max_steps)
        except SolverError as exc:
            print(f"Error generating sudoku: {exc!r}")
            return 1
        print(f"New sudoku:\n{sudoku}")

        solver = Solver(sudoku, rng=rng, max_steps=max_steps)
        try:
            solver.solve()
        except SolverError as exc:
            print(f"Error solving sudoku: {exc!r}")
            break
        print(f"Solution:\n{solver}")
        if not is_solved(solver.grid.to_rows()):
            log.warning("Solution after %d steps breaks a Sudoku rule", solver.steps)
        rounds += 1

    return 0


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate and solve random Sudoku puzzles")
    parser.add_argument(
        "--difficulty",
        type=int,
        default=DEFAULT_DIFFICULTY,
        help=f"Percent chance for each cell to be blanked (default: {DEFAULT_DIFFICULTY})",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for the random generator")
    parser.add_argument("--count", type=int, default=None, help="Stop after this many puzzles (default: run forever)")
    parser.add_argument(
        "--max-steps",
        type=int,
        default=DEFAULT_MAX_STEPS,
        help=f"Give up solving after this many steps, 0 for no limit (default: {DEFAULT_MAX_STEPS})",
    )
    parser.add_argument("--verbose", action="store_true", help="Log solver decisions")
    args = parser.parse_args(argv)
    if not 0 <= args.difficulty <= 100:
        parser.error("--difficulty must be between 0 and 100")
    if args.max_steps is not None and args.max_steps < 0:
        parser.error("--max-steps must not be negative")
    if args.count is not None and args.count < 1:
        parser.error("--count must be at least 1")
    return args


def cli(argv: Optional[list[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    raise SystemExit(
        run(
            args.difficulty,
            seed=args.seed,
            count=args.count,
            max_steps=args.max_steps or None,
        )
    )


if __name__ == "__main__":
    cli()
