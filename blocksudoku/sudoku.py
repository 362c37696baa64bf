#!/usr/bin/env python

"""
sudoku.py

===============================================================================

    Copyright (C) 2019-2019 Rudolf Cardinal (rudolf@pobox.com).

    This is free software: you can redistribute it and/or modify
    it under the terms of the GNU General Public License as published by
    the Free Software Foundation, either version 3 of the License, or
    (at your option) any later version.

    This software is distributed in the hope that it will be useful,
    but WITHOUT ANY WARRANTY; without even the implied warranty of
    MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
    GNU General Public License for more details.

    You should have received a copy of the GNU General Public License
    along with this software. If not, see <http://www.gnu.org/licenses/>.

===============================================================================

**Solves and validates Sudoku puzzles with rectangular blocks.**

Boards are ``n x n``, where ``n = block_width * block_height`` (at most 12).
Symbols are ``1-9`` then ``A-C``, as many as are needed.

It uses two approaches:

- Logic, like a human would do, guessing only when logic runs out; see
  :class:`blocksudoku.solver.Solver`.

- Integer programming, as a cross-check; see
  :func:`blocksudoku.ipsolver.solve_by_integer_programming`.

"""


import argparse
import logging
import sys
from typing import List, Optional, Sequence

from cardinal_pythonlib.argparse_func import RawDescriptionArgumentDefaultsHelpFormatter  # noqa
from cardinal_pythonlib.logs import main_only_quicksetup_rootlogger

from blocksudoku.board import Board
from blocksudoku.common import (
    BLOCK,
    Cell,
    COL,
    ConfigurationError,
    DEFAULT_BLOCK_HEIGHT,
    DEFAULT_BLOCK_WIDTH,
    EMPTY,
    EXIT_FAILURE,
    EXIT_SUCCESS,
    HASH,
    NEWLINE,
    ROW,
    run_guard,
    SPACE,
    UNKNOWN,
)
from blocksudoku.ipsolver import solve_by_integer_programming
from blocksudoku.solver import Solver
from blocksudoku.validator import ValidationResult, Validator

log = logging.getLogger(__name__)


# =============================================================================
# Constants
# =============================================================================

DEMO_SUDOKU_1 = """
# Coton 54, Coton Community News Dec 2019-Jan 2020

... ... ...
..2 3.1 45.
.1. ... .6.

.47 .5. 38.
... 7.3 ...
.36 ... 14.

.7. ... .9.
.91 4.5 6..
... ..9 ...
"""

DEMO_SUDOKU_6X6 = """
# Blocks 3 wide, 2 tall: use --block_width 3 --block_height 2

1.. 4..
..6 ..3

.3. 5..
..4 .31

3.. ..5
.45 ..2
"""

# Demo puzzles by (block_width, block_height)
DEMOS = {
    (3, 3): DEMO_SUDOKU_1,
    (3, 2): DEMO_SUDOKU_6X6,
}


# =============================================================================
# Text format
# =============================================================================

def parse_values(string_version: str, n: int) -> List[Cell]:
    """
    Reads cell values from the text format.

    - Lines starting with ``#`` are comments.
    - Blank lines, and all spaces, are ignored.
    - There must be ``n`` remaining lines, each of ``n`` characters.
    - ``.`` represents an unknown cell; anything else is a symbol.

    Symbols are not checked here; that happens when a :class:`Board` is made.
    """
    lines = string_version.splitlines()
    lines = [line for line in lines if not line.strip().startswith(HASH)]
    lines = ["".join(line.split()) for line in lines]
    lines = [line for line in lines if line]  # remove blank lines
    if len(lines) != n:
        raise ConfigurationError(f"Must have {n} active lines; "
                                 f"found {len(lines)}, which are:\n"
                                 f"{lines}")
    values = []  # type: List[Cell]
    for row_zb, line in enumerate(lines):
        if len(line) != n:
            raise ConfigurationError(
                f"Data line {row_zb + 1} has wrong non-blank length: should "
                f"be {n}, but is {len(line)} ({line!r})")
        values.extend(EMPTY if c == UNKNOWN else c for c in line)
    return values


def format_values(values: Sequence[Cell], block_width: int,
                  block_height: int) -> str:
    """
    Writes cell values in the text format, with a gap between blocks.
    """
    n = block_width * block_height
    x = ""
    for row_zb in range(n):
        for col_zb in range(n):
            value = values[row_zb * n + col_zb]
            x += UNKNOWN if value == EMPTY else str(value)
            if col_zb % block_width == block_width - 1 and col_zb < n - 1:
                x += SPACE
        if row_zb < n - 1:
            x += NEWLINE
            if row_zb % block_height == block_height - 1:
                x += NEWLINE
    return x


def validation_report(result: ValidationResult, board: Board) -> str:
    """
    Describes validation failures, one per line, with one-based numbering.
    """
    if result.valid:
        return "Valid"
    lines = []  # type: List[str]
    for kind, description in ((ROW, "Row"), (COL, "Column"),
                              (BLOCK, "Block")):
        for g in result.failed_group_indices(kind):
            lines.append(f"{description} {g + 1} contains a duplicate")
    for index in sorted(result.failed_indices):
        row, col, _ = board.mapper.coordinates(index)
        lines.append(f"Duplicate {board.get(index)} at "
                     f"(row={row + 1}, col={col + 1})")
    return NEWLINE.join(lines)


# =============================================================================
# Sudoku
# =============================================================================

class Sudoku(object):
    """
    Represents and solves Sudoku puzzles.
    """

    def __init__(self, string_version: str,
                 block_width: int = DEFAULT_BLOCK_WIDTH,
                 block_height: int = DEFAULT_BLOCK_HEIGHT) -> None:
        """
        Args:
            string_version:
                String representation of the puzzle; see
                :func:`parse_values`.
            block_width:
                width of each block (3 for normal 9x9 Sudoku)
            block_height:
                height of each block (3 for normal 9x9 Sudoku)
        """
        self.block_width = block_width
        self.block_height = block_height
        self.n = block_width * block_height
        self.problem = Board(parse_values(string_version, self.n),
                             block_width=block_width,
                             block_height=block_height)
        self.solved = False
        self.solution_data = None  # type: Optional[List[Cell]]
        self.working = []  # type: List[str]

    # -------------------------------------------------------------------------
    # String representations
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        return self.solution_str() if self.solved else self.problem_str()

    def problem_str(self) -> str:
        """
        Creates the string representation of the problem.
        """
        return self._make_string(self.problem.values())

    def solution_str(self) -> str:
        """
        Creates the string representation of the solution.
        """
        if self.solution_data is None:
            return self.problem_str()
        return self._make_string(self.solution_data)

    def _make_string(self, data: Sequence[Cell]) -> str:
        return format_values(data, self.block_width, self.block_height)

    # -------------------------------------------------------------------------
    # Validate
    # -------------------------------------------------------------------------

    def validate(self) -> ValidationResult:
        """
        Checks the problem for duplicates.
        """
        return Validator(self.problem).result

    # -------------------------------------------------------------------------
    # Solve via integer programming
    # -------------------------------------------------------------------------

    def solve(self) -> bool:
        """
        Solves the problem, writing to :attr:`solved` and
        :attr:`solution_data`.

        Returns: solved?
        """
        if self.solved:
            log.info("Already solved")
            return True
        solution = solve_by_integer_programming(self.problem)
        if solution is not None:
            self.solved = True
            self.solution_data = solution
            self.working.append("Solved via integer programming method")
        return self.solved

    # -------------------------------------------------------------------------
    # Solve via puzzle logic and show working
    # -------------------------------------------------------------------------

    def solve_logic(self, no_guess: bool = False) -> bool:
        """
        Solve via conventional logic, and save our working.

        Returns: solved?
        """
        if self.solved:
            log.info("Already solved")
            return True
        solver = Solver(self.problem.copy())  # start from scratch
        solver.solve(no_guess=no_guess)
        self.working = solver.working
        if solver.status():
            self.solved = True
            self.solution_data = solver.values()
        else:
            log.error("Unable to solve!")
        return self.solved


# =============================================================================
# main
# =============================================================================

def main(argv: List[str] = None) -> None:
    """
    Command-line entry point.
    """
    cmd_demo = "demo"
    cmd_solve = "solve"
    cmd_validate = "validate"
    method_logic = "logic"
    method_ip = "ip"

    help_filename = (
        "Puzzle filename to read. Must contain text in format as above.")
    help_method = (
        f"Solving method: {method_logic!r} (show working) or "
        f"{method_ip!r} (integer programming)")

    parser = argparse.ArgumentParser(
        formatter_class=RawDescriptionArgumentDefaultsHelpFormatter,
        description=(
            f"Solve Sudoku puzzles. Format is:\n\n"
            f"{DEMO_SUDOKU_1}"
        )
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Be verbose")
    parser.add_argument(
        "--block_width", type=int, default=DEFAULT_BLOCK_WIDTH,
        help="Width of each block, in cells")
    parser.add_argument(
        "--block_height", type=int, default=DEFAULT_BLOCK_HEIGHT,
        help="Height of each block, in cells")
    subparsers = parser.add_subparsers(
        dest="command",
        help="Append --help for more help")

    parser_solve = subparsers.add_parser(cmd_solve, help="Solve from a file")
    parser_solve.add_argument(
        "filename", type=str, default="", help=help_filename)
    parser_solve.add_argument(
        "--method", choices=[method_logic, method_ip], default=method_logic,
        help=help_method)
    parser_solve.add_argument(
        "--noguess", action="store_true", help="Prevent guessing")

    parser_validate = subparsers.add_parser(
        cmd_validate, help="Check a file for duplicates")
    parser_validate.add_argument(
        "filename", type=str, default="", help=help_filename)

    demo_sizes = ", ".join(f"{w}x{h}" for w, h in DEMOS)
    _parser_demo = subparsers.add_parser(
        cmd_demo,
        help=f"Run demo for the chosen block size (available: {demo_sizes})")

    args = parser.parse_args(argv)
    main_only_quicksetup_rootlogger(level=logging.DEBUG if args.verbose
                                    else logging.INFO)

    if not args.command:
        print("Must specify command")
        sys.exit(EXIT_FAILURE)

    if args.command == cmd_demo:
        dimensions = (args.block_width, args.block_height)
        if dimensions not in DEMOS:
            raise ConfigurationError(
                f"No demo for blocks {args.block_width} wide, "
                f"{args.block_height} tall; available: {demo_sizes}")
        problem = Sudoku(DEMOS[dimensions],
                         block_width=args.block_width,
                         block_height=args.block_height)
        log.info(f"Solving:\n{problem}")
        ok = problem.solve_logic()
        log.info(f"Answer:\n{problem}")
        sys.exit(EXIT_SUCCESS if ok else EXIT_FAILURE)

    log.info(f"Reading {args.filename}")
    with open(args.filename, "rt") as f:
        string_version = f.read()
    problem = Sudoku(string_version,
                     block_width=args.block_width,
                     block_height=args.block_height)

    if args.command == cmd_validate:
        result = problem.validate()
        log.info(f"Puzzle:\n{problem}")
        print(validation_report(result, problem.problem))
        sys.exit(EXIT_SUCCESS if result.valid else EXIT_FAILURE)

    log.info(f"Solving:\n{problem}")
    if args.method == method_ip:
        ok = problem.solve()
    else:
        ok = problem.solve_logic(no_guess=args.noguess)
    for line in problem.working:
        log.debug(line)
    log.info(f"Answer:\n{problem}")
    sys.exit(EXIT_SUCCESS if ok else EXIT_FAILURE)


# =============================================================================
# Command-line entry point
# =============================================================================

def cli() -> None:
    run_guard(main)


if __name__ == "__main__":
    cli()
