#!/usr/bin/env python

"""
solver.py

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

**Solves block Sudoku puzzles by logic, guessing when logic runs out.**

Strategy:

1.  Work out the candidate symbols for every blank cell.

2.  Place any symbol that is the only candidate for its cell.
    Sudoku Snake: "Naked Singles".

3.  Place any symbol that can only go in one cell of some row, column or
    block. Sudoku Snake: "Hidden Singles", "Hidden Singles by Box".

4.  Repeat until the puzzle is solved or there is no improvement.

5.  If there is no improvement, pick the blank cell with the fewest
    candidates, and for each candidate in turn, solve an independent copy of
    the puzzle with that candidate filled in. The first copy that is solved
    wins; its answers are copied back.

A cell whose candidates run out marks a contradiction. That is not an error:
it fails the current guess (or, with no guesses left, the whole puzzle), and
:meth:`Solver.solve` returns ``False``.

"""

import logging
from typing import Any, FrozenSet, List, Optional, Set

from blocksudoku.board import Board, normalise_value
from blocksudoku.candidates import CandidateEngine
from blocksudoku.common import (
    Cell,
    EMPTY,
    GROUP_KINDS,
    GuessingProhibited,
    InvalidAssignment,
)
from blocksudoku.validator import ValidationResult, Validator

log = logging.getLogger(__name__)


# =============================================================================
# Solver
# =============================================================================

class Solver(object):
    """
    Solves the board it wraps, in place.

    Attributes:
        board: the :class:`Board` being solved
        start_indices: cells given in the original puzzle; never altered
        blank_indices: cells still unset
        engine: the :class:`CandidateEngine` for the blank cells
        depth: guess level (0 for the caller's solver)
        working: notes on how the puzzle was solved
    """
    def __init__(self, board: Board = None, other: "Solver" = None) -> None:
        """
        Args:
            board:
                the board to solve
            other:
                if given, make an independent copy of this solver (one guess
                level deeper) instead
        """
        if other is not None:
            self.board = other.board.copy()
            self.start_indices = other.start_indices
            self.blank_indices = set(other.blank_indices)  # type: Set[int]
            self.engine = other.engine.copy(self.board)
            self.depth = other.depth + 1
            self.working = list(other.working)  # type: List[str]
            return

        if board is None:
            raise ValueError("Need a board to solve")
        self.board = board
        self.start_indices = frozenset(board.filled_indices())  # type: FrozenSet[int]  # noqa
        self.depth = 0
        self.working = []
        self._rebuild()

        n_distinct = len(set(board.placed_in(self.start_indices)))
        if n_distinct < board.n - 1:
            log.warning(
                f"Not a well-formed Sudoku: {n_distinct} distinct initial "
                f"values given, but need {board.n - 1} to be well-formed.")
            # http://pi.math.cornell.edu/~mec/Summer2009/Mahmood/More.html

    def clone(self) -> "Solver":
        return self.__class__(other=self)

    def _rebuild(self) -> None:
        """
        Recomputes blanks, failures and all candidates from the board.
        Duplicates among the filled cells count as failures.
        """
        self.blank_indices = set(self.board.blank_indices())
        self.engine = CandidateEngine(self.board)
        self.engine.failed_indices.update(
            Validator(self.board).failed_indices)
        self.engine.compute_all()

    # -------------------------------------------------------------------------
    # Read access
    # -------------------------------------------------------------------------

    @property
    def failed_indices(self) -> Set[int]:
        """
        Cells involved in a contradiction.
        """
        return self.engine.failed_indices

    def values(self) -> List[Cell]:
        return self.board.values()

    def candidates(self, index: int) -> List[str]:
        return self.engine.get(index)

    def status(self) -> bool:
        """
        Is the puzzle solved (no blanks) and valid (no contradictions)?
        """
        return not self.blank_indices and not self.failed_indices

    def validate(self) -> ValidationResult:
        """
        Duplicate check for the current board.
        """
        return Validator(self.board).result

    # -------------------------------------------------------------------------
    # Show your working
    # -------------------------------------------------------------------------

    def note(self, msg: str) -> None:
        """
        Save some working.
        """
        self.working.append(msg)
        log.debug(msg)

    def _cell_str(self, index: int) -> str:
        row, col, _ = self.board.mapper.coordinates(index)
        return f"(row={row + 1}, col={col + 1})"

    # -------------------------------------------------------------------------
    # Mutation
    # -------------------------------------------------------------------------

    def set(self, index: int, value: Any) -> None:
        """
        Sets a cell from outside the solver.

        - Filling a blank cell prunes candidates as normal; if the symbol was
          not a candidate, the cell is marked as failed.
        - Clearing a cell, or changing a filled one, recomputes everything.

        Raises:
            :exc:`InvalidAssignment` (leaving the board unchanged) for a bad
            index or value, or an attempt to change a start cell.
        """
        if not self.board.contains(index):
            raise InvalidAssignment(
                f"Cannot set cell {index!r}: index out of range")
        if index in self.start_indices:
            raise InvalidAssignment(
                f"Cannot set cell {index}: it was given in the puzzle")
        try:
            value = normalise_value(value, self.board.alphabet)
        except ValueError:
            raise InvalidAssignment(
                f"Cannot set cell {index} to {value!r}: not {EMPTY!r} or one "
                f"of {''.join(self.board.alphabet)}")
        if value != EMPTY and self.board.is_blank(index):
            if not self.engine.is_candidate(index, value):
                log.info(f"{value} is not possible at "
                         f"{self._cell_str(index)}")
                self.failed_indices.add(index)
            self._place(index, value, source="Set")
        else:
            self.board.set(index, value)
            self._rebuild()

    def reset(self) -> None:
        """
        Blanks every cell except the start cells, and starts again.
        """
        for index in range(self.board.n_cells):
            if index not in self.start_indices:
                self.board.set(index, EMPTY)
        self.working = []
        self._rebuild()

    def _place(self, index: int, symbol: str,
               source: Optional[str] = None) -> None:
        """
        Fills a blank cell and prunes its neighbours' candidates.
        """
        self.board.set(index, symbol)
        self.blank_indices.discard(index)
        self.engine.remove(index)
        self.engine.reduce(symbol, index)
        if source:
            self.note(f"{source}: Assigning {symbol} to "
                      f"{self._cell_str(index)}")

    # -------------------------------------------------------------------------
    # Tactics
    # -------------------------------------------------------------------------

    def _place_naked_singles(self) -> int:
        """
        Fills every blank cell that has exactly one candidate.

        Returns: number of cells filled
        """
        n_placed = 0
        for index in sorted(self.blank_indices):
            if self.failed_indices:
                break
            symbols = self.engine.get(index)
            if len(symbols) == 1:
                self._place(index, symbols[0], source="Naked single")
                n_placed += 1
        return n_placed

    def _place_hidden_singles(self) -> int:
        """
        Where a candidate for a cell is a candidate nowhere else in that cell's
        row, column, or block, assign it.

        Returns: number of cells filled
        """
        view = self.board.view
        n_placed = 0
        for index in sorted(self.blank_indices):
            if self.failed_indices:
                break
            for symbol in self.engine.get(index):
                kind = next(
                    (
                        k for k in GROUP_KINDS
                        if self.engine.count_in(
                            view.group_containing(k, index), symbol) == 1
                    ),
                    None
                )
                if kind is not None:
                    self._place(index, symbol,
                                source=f"Hidden single (by {kind})")
                    n_placed += 1
                    break
        return n_placed

    # -------------------------------------------------------------------------
    # Guessing
    # -------------------------------------------------------------------------

    def _choose_guess_cell(self) -> int:
        """
        The blank cell with fewest candidates; ties go to the lowest index.
        Two is the best we can hope for, since one would have been placed.
        """
        best_index = None  # type: Optional[int]
        best_count = 0
        for index in sorted(self.blank_indices):
            count = self.engine.n_candidates(index)
            if best_index is None or count < best_count:
                best_index = index
                best_count = count
                if count <= 2:
                    break
        return best_index

    def _guess(self) -> bool:
        """
        Implements the "guess" method!

        Returns: did one of the guesses lead to a solution?
        """
        index = self._choose_guess_cell()
        for symbol in self.engine.get(index):
            trial = self.clone()
            log.debug(f"Guessing {symbol} at {self._cell_str(index)}, "
                      f"guess level {trial.depth}")
            trial._place(index, symbol,
                         source=f"Guess level {trial.depth}")
            if trial.solve() and trial.status():
                log.debug(f"Guess level {trial.depth} was good")
                self._assign_from_other(trial)
                return True
            log.debug(f"Bad guess at level {trial.depth}; moving on")
        return False

    def _assign_from_other(self, other: "Solver") -> None:
        """
        Copies in every cell that a solved copy has filled differently.
        """
        for index, value in enumerate(other.board.values()):
            if self.board.get(index) != value:
                self._place(index, value)
        self.working = list(other.working)

    # -------------------------------------------------------------------------
    # Strategy
    # -------------------------------------------------------------------------

    def solve(self, no_guess: bool = False) -> bool:
        """
        Solves by elimination, guessing if need be.

        Args:
            no_guess: prohibit guessing

        Returns:
            solved?

        Raises:
            :exc:`GuessingProhibited` if a guess was needed but ``no_guess``
            was set
        """
        iteration = 0
        while self.blank_indices:
            if self.failed_indices:
                log.debug(
                    f"Contradiction at guess level {self.depth}, in cells "
                    f"{sorted(self.failed_indices)}")
                return False
            log.debug(
                f"Guess level {self.depth}, iteration {iteration}. "
                f"Blank cells: {len(self.blank_indices)}")
            iteration += 1
            if self._place_naked_singles():
                continue
            if self._place_hidden_singles():
                continue
            if no_guess:
                raise GuessingProhibited("Would need to guess, but prohibited")
            self.note("No improvement; need to guess")
            if not self._guess():
                return False
        return not self.failed_indices
