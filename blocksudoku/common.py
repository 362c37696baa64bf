#!/usr/bin/env python

"""
common.py

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

Common constants, exceptions and functions for the block Sudoku solver.

"""

import logging
import sys
import traceback
from typing import Callable, Union

from mip import Constr, Model, Var

log = logging.getLogger(__name__)


# =============================================================================
# Constants
# =============================================================================

EMPTY = 0  # the empty marker for a blank cell
SYMBOLS = "123456789ABC"  # canonical symbol order: digits, then letters
MAX_ALPHABET_LENGTH = len(SYMBOLS)

DEFAULT_BLOCK_WIDTH = 3
DEFAULT_BLOCK_HEIGHT = 3

# Group kinds
ROW = "row"
COL = "col"
BLOCK = "block"
GROUP_KINDS = (ROW, COL, BLOCK)

# Text format
UNKNOWN = "."
NEWLINE = "\n"
SPACE = " "
HASH = "#"
ALMOST_ONE = 0.99

EXIT_FAILURE = 1
EXIT_SUCCESS = 0

# A cell holds either EMPTY or a symbol from the alphabet.
Cell = Union[str, int]


# =============================================================================
# Exceptions
# =============================================================================

class SudokuError(Exception):
    """
    Base class for our errors.
    """
    pass


class ConfigurationError(SudokuError):
    """
    Bad board dimensions or board length.
    """
    pass


class IllegalSymbolError(SudokuError):
    """
    Input contains something that is neither the empty marker nor a symbol.
    """
    pass


class InvalidAssignment(SudokuError):
    """
    An assignment to a cell was refused; the board is unchanged.
    """
    pass


class GuessingProhibited(SudokuError):
    """
    Logic alone could not finish the puzzle, and guessing was forbidden.
    """
    pass


# =============================================================================
# Functions for mip models
# =============================================================================

def debug_model_constraints(m: Model) -> None:
    """
    Shows constraints for a model.
    """
    lines = [f"Constraints in model {m.name!r}:"]
    for c in m.constrs:  # type: Constr
        lines.append(f"{c.name} == {c.expr}")
    log.debug("\n".join(lines))


def debug_model_vars(m: Model) -> None:
    """
    Show the names/values of model variables after fitting.
    """
    lines = [f"Variables in model {m.name!r}:"]
    for v in m.vars:  # type: Var
        lines.append(f"{v.name} == {v.x}")
    log.debug("\n".join(lines))


# =============================================================================
# Generic helper functions
# =============================================================================

def run_guard(function: Callable[[], None]) -> None:
    try:
        function()
    except Exception as e:
        log.critical(str(e))
        traceback.print_exc()
        sys.exit(EXIT_FAILURE)
