#!/usr/bin/env python

"""
indexmap.py

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

**Coordinate arithmetic for a flat Sudoku board.**

The board is a flat sequence of ``n * n`` cells, numbered row by row. Blocks
are ``block_width`` cells wide and ``block_height`` cells tall, so there are
``block_height`` blocks across each band of blocks and ``block_width`` bands.
Blocks are numbered row-major. For example, with ``block_width=3,
block_height=2`` (a 6x6 board):

.. code-block:: none

    0 0 0 1 1 1
    0 0 0 1 1 1
    2 2 2 3 3 3
    2 2 2 3 3 3
    4 4 4 5 5 5
    4 4 4 5 5 5

"""

from typing import Tuple

from blocksudoku.common import BLOCK, COL, ROW


# =============================================================================
# IndexMapper
# =============================================================================

class IndexMapper(object):
    """
    Converts between flat cell indices and (row, column, block) coordinates.
    Everything is zero-based.
    """
    def __init__(self, block_width: int, block_height: int) -> None:
        self.block_width = block_width
        self.block_height = block_height
        self.n = block_width * block_height

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(block_width={self.block_width}, "
            f"block_height={self.block_height})"
        )

    @property
    def n_cells(self) -> int:
        return self.n * self.n

    # -------------------------------------------------------------------------
    # Index -> coordinates
    # -------------------------------------------------------------------------

    def row_of(self, index: int) -> int:
        return index // self.n

    def col_of(self, index: int) -> int:
        return index % self.n

    def block_of(self, row: int, col: int) -> int:
        """
        Block number for a cell. The block width steps the columns; the block
        height is the stride between bands of blocks.
        """
        return (col // self.block_width +
                self.block_height * (row // self.block_height))

    def block_of_index(self, index: int) -> int:
        return self.block_of(self.row_of(index), self.col_of(index))

    def pos_in_row(self, index: int) -> int:
        return self.col_of(index)

    def pos_in_col(self, index: int) -> int:
        return self.row_of(index)

    def pos_in_block(self, index: int) -> int:
        row_in_block = self.row_of(index) % self.block_height
        col_in_block = self.col_of(index) % self.block_width
        return row_in_block * self.block_width + col_in_block

    def coordinates(self, index: int) -> Tuple[int, int, int]:
        """
        Returns ``row, col, block`` for a cell.
        """
        row = self.row_of(index)
        col = self.col_of(index)
        return row, col, self.block_of(row, col)

    # -------------------------------------------------------------------------
    # Coordinates -> index
    # -------------------------------------------------------------------------

    def index_from_row(self, row: int, pos_in_row: int) -> int:
        return row * self.n + pos_in_row

    def index_from_col(self, col: int, pos_in_col: int) -> int:
        return pos_in_col * self.n + col

    def index_from_block(self, block: int, pos_in_block: int) -> int:
        block_row = block // self.block_height
        row_in_block = pos_in_block // self.block_width
        row = block_row * self.block_height + row_in_block

        block_col = block % self.block_height
        col_in_block = pos_in_block % self.block_width
        col = block_col * self.block_width + col_in_block

        return row * self.n + col

    def index_from_group(self, kind: str, group: int, pos: int) -> int:
        """
        Flat index of the ``pos``'th cell of a row, column or block.
        """
        if kind == ROW:
            return self.index_from_row(group, pos)
        if kind == COL:
            return self.index_from_col(group, pos)
        if kind == BLOCK:
            return self.index_from_block(group, pos)
        raise ValueError(f"Unknown group kind: {kind!r}")

    def group_of(self, kind: str, index: int) -> int:
        """
        Which row, column or block a cell belongs to.
        """
        if kind == ROW:
            return self.row_of(index)
        if kind == COL:
            return self.col_of(index)
        if kind == BLOCK:
            return self.block_of_index(index)
        raise ValueError(f"Unknown group kind: {kind!r}")

    def pos_in_group(self, kind: str, index: int) -> int:
        if kind == ROW:
            return self.pos_in_row(index)
        if kind == COL:
            return self.pos_in_col(index)
        if kind == BLOCK:
            return self.pos_in_block(index)
        raise ValueError(f"Unknown group kind: {kind!r}")
