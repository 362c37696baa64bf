#!/usr/bin/env python

"""
candidates.py

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

**Candidate symbols for the blank cells of a board.**

Candidates are computed in full once (:meth:`CandidateEngine.compute_all`),
then pruned cell by cell as symbols are placed (:meth:`CandidateEngine.reduce`).
Each candidate list is kept in alphabet order.

"""

import logging
from typing import Dict, Iterable, List, Set

from blocksudoku.board import Board
from blocksudoku.common import GROUP_KINDS

log = logging.getLogger(__name__)


# =============================================================================
# CandidateEngine
# =============================================================================

class CandidateEngine(object):
    """
    Holds the candidate symbols for every blank cell, and the set of cells
    whose candidates have run out (contradictions).
    """
    def __init__(self, board: Board, other: "CandidateEngine" = None) -> None:
        """
        Args:
            board:
                the board whose blank cells we track
            other:
                if given, copy candidates and failures from this engine
        """
        self.board = board
        if other is not None:
            self.candidates = {
                index: list(symbols)
                for index, symbols in other.candidates.items()
            }  # type: Dict[int, List[str]]
            self.failed_indices = set(other.failed_indices)  # type: Set[int]
        else:
            self.candidates = {}
            self.failed_indices = set()

    def copy(self, board: Board) -> "CandidateEngine":
        """
        An independent copy, attached to ``board`` (normally a copy of our
        own board).
        """
        return self.__class__(board, other=self)

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def get(self, index: int) -> List[str]:
        """
        Candidates for a cell, in alphabet order. Empty for a filled cell.
        """
        return list(self.candidates.get(index, []))

    def n_candidates(self, index: int) -> int:
        return len(self.candidates.get(index, []))

    def is_candidate(self, index: int, symbol: str) -> bool:
        return symbol in self.candidates.get(index, ())

    def count_in(self, cells: Iterable[int], symbol: str) -> int:
        """
        In how many of these cells is ``symbol`` still a candidate?
        """
        return sum(1 for i in cells if self.is_candidate(i, symbol))

    # -------------------------------------------------------------------------
    # Computations
    # -------------------------------------------------------------------------

    def compute_all(self) -> None:
        """
        Works out candidates for every blank cell from scratch: everything in
        the alphabet that is not placed in the cell's row, column or block.
        """
        board = self.board
        view = board.view
        self.candidates = {}
        for index in board.blank_indices():
            excluded = set()  # type: Set[str]
            for kind in GROUP_KINDS:
                excluded.update(
                    board.placed_in(view.group_containing(kind, index)))
            symbols = [s for s in board.alphabet if s not in excluded]
            self.candidates[index] = symbols
            if not symbols:
                log.debug(f"No candidates for cell {index}")
                self.failed_indices.add(index)

    def remove(self, index: int) -> None:
        """
        Stops tracking a cell, because it has been filled.
        """
        self.candidates.pop(index, None)

    def reduce(self, symbol: str, origin: int) -> None:
        """
        After ``symbol`` has been placed at ``origin``, removes it from the
        candidates of every other blank cell in the same row, column or block.
        Cells left with no candidates are recorded as failed immediately.
        """
        for index in self.board.view.peers(origin):
            symbols = self.candidates.get(index)
            if symbols is None or symbol not in symbols:
                continue
            symbols.remove(symbol)
            if not symbols:
                log.debug(f"Placing {symbol} at cell {origin} leaves no "
                          f"candidates for cell {index}")
                self.failed_indices.add(index)
