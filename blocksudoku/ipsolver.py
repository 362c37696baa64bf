#!/usr/bin/env python

"""
ipsolver.py

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

**Solves a board via integer programming.**

Close to magic: you say "here are my constraints; go" and a few milliseconds
later you have a valid answer. No working is shown, so this is mainly useful
as a cross-check on the logic-based :class:`blocksudoku.solver.Solver`.

"""

import logging
from typing import List, Optional

from mip import BINARY, Model, xsum

from blocksudoku.board import Board
from blocksudoku.common import (
    ALMOST_ONE,
    Cell,
    debug_model_constraints,
    debug_model_vars,
    EMPTY,
    GROUP_KINDS,
)

log = logging.getLogger(__name__)


def solve_by_integer_programming(board: Board) -> Optional[List[Cell]]:
    """
    Solves the board, which is not modified.

    Returns:
        the solved cell values, in index order, or ``None`` if there is no
        solution
    """
    m = Model("Block Sudoku solver")
    m.verbose = 0
    n = board.n
    alphabet = board.alphabet
    mapper = board.mapper

    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    # Variables
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    x = [
        [
            m.add_var(
                f"x(row={mapper.row_of(i) + 1}, col={mapper.col_of(i) + 1}, "
                f"symbol={alphabet[d]})",
                var_type=BINARY)
            for d in range(n)
        ] for i in range(board.n_cells)
    ]  # index as: x[cell_index][symbol_zb]

    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    # Constraints
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    # One symbol per cell
    for i in range(board.n_cells):
        m += xsum(x[i][d] for d in range(n)) == 1
    # One of each symbol per row, column and block
    for d in range(n):
        for kind in GROUP_KINDS:
            for cells in board.view.groups(kind):
                m += xsum(x[i][d] for i in cells) == 1
    # Starting values
    for i in board.filled_indices():
        d_zb = alphabet.index(board.get(i))
        m += x[i][d_zb] == 1

    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    # Solve
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    debug_model_constraints(m)
    m.optimize()

    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    # Read out answers
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    if not m.num_solutions:
        log.error("Unable to solve!")
        return None
    debug_model_vars(m)
    solution = [EMPTY] * board.n_cells  # type: List[Cell]
    for i in range(board.n_cells):
        for d_zb in range(n):
            if x[i][d_zb].x > ALMOST_ONE:
                solution[i] = alphabet[d_zb]
                break
    return solution
