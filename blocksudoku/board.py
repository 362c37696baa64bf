#!/usr/bin/env python

"""
board.py

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

**The Sudoku board: alphabet, flat cell storage, and group tables.**

The board owns the only copy of the cell values. Rows, columns and blocks are
described by :class:`BoardView` purely as tuples of cell indices; these never
change for a given pair of block dimensions, so copies of a board share them.

"""

import logging
from typing import Any, Dict, FrozenSet, Iterable, List, Sequence, Tuple

from blocksudoku.common import (
    BLOCK,
    Cell,
    COL,
    ConfigurationError,
    DEFAULT_BLOCK_HEIGHT,
    DEFAULT_BLOCK_WIDTH,
    EMPTY,
    GROUP_KINDS,
    IllegalSymbolError,
    InvalidAssignment,
    MAX_ALPHABET_LENGTH,
    ROW,
    SYMBOLS,
)
from blocksudoku.indexmap import IndexMapper

log = logging.getLogger(__name__)


# =============================================================================
# Alphabet
# =============================================================================

def make_alphabet(block_width: int, block_height: int) -> Tuple[str, ...]:
    """
    Returns the ordered symbols for a board with these block dimensions.

    Raises:
        :exc:`ConfigurationError` if the dimensions are not positive, or the
        board side would exceed the number of symbols we have.
    """
    if (not isinstance(block_width, int) or
            isinstance(block_width, bool) or
            not isinstance(block_height, int) or
            isinstance(block_height, bool) or
            block_width < 1 or block_height < 1):
        raise ConfigurationError(
            f"Block dimensions must be positive integers; got "
            f"block_width={block_width!r}, block_height={block_height!r}")
    n = block_width * block_height
    if n > MAX_ALPHABET_LENGTH:
        raise ConfigurationError(
            f"Board side {n} ({block_width} x {block_height}) exceeds the "
            f"maximum alphabet length of {MAX_ALPHABET_LENGTH}")
    return tuple(SYMBOLS[:n])


def normalise_value(value: Any, alphabet: Sequence[str]) -> Cell:
    """
    Converts an incoming cell value to its stored form, or raises
    :exc:`ValueError`.

    - The empty marker stays as it is.
    - Alphabet symbols (strings) stay as they are.
    - Integers are accepted as their decimal symbol, so ``5`` means ``"5"``.
    """
    if isinstance(value, bool):
        raise ValueError(f"Not a cell value: {value!r}")
    if isinstance(value, int):
        if value == EMPTY:
            return EMPTY
        value = str(value)
    if isinstance(value, str) and value in alphabet:
        return value
    raise ValueError(f"Not a cell value: {value!r}")


# =============================================================================
# BoardView
# =============================================================================

class BoardView(object):
    """
    Group membership for a board of fixed dimensions: every row, column and
    block as an ordered tuple of flat cell indices.

    Read-only after construction, and so safe to share between boards.
    """
    def __init__(self, mapper: IndexMapper) -> None:
        self.mapper = mapper
        n = mapper.n
        self._groups = {
            kind: tuple(
                tuple(mapper.index_from_group(kind, g, pos)
                      for pos in range(n))
                for g in range(n)
            )
            for kind in GROUP_KINDS
        }  # type: Dict[str, Tuple[Tuple[int, ...], ...]]
        self._peers = tuple(
            frozenset(
                i
                for kind in GROUP_KINDS
                for i in self.group_containing(kind, index)
                if i != index
            )
            for index in range(mapper.n_cells)
        )  # type: Tuple[FrozenSet[int], ...]

    def groups(self, kind: str) -> Tuple[Tuple[int, ...], ...]:
        """
        All ``n`` groups of one kind (``"row"``, ``"col"``, ``"block"``).
        """
        try:
            return self._groups[kind]
        except KeyError:
            raise ValueError(f"Unknown group kind: {kind!r}")

    def group(self, kind: str, group_index: int) -> Tuple[int, ...]:
        return self.groups(kind)[group_index]

    def group_containing(self, kind: str, index: int) -> Tuple[int, ...]:
        """
        The row, column or block that contains a given cell.
        """
        return self.groups(kind)[self.mapper.group_of(kind, index)]

    def peers(self, index: int) -> FrozenSet[int]:
        """
        Every other cell sharing a row, column or block with this one. There
        are at most ``3n - 2`` of them.
        """
        return self._peers[index]

    @property
    def rows(self) -> Tuple[Tuple[int, ...], ...]:
        return self.groups(ROW)

    @property
    def cols(self) -> Tuple[Tuple[int, ...], ...]:
        return self.groups(COL)

    @property
    def blocks(self) -> Tuple[Tuple[int, ...], ...]:
        return self.groups(BLOCK)


# =============================================================================
# Board
# =============================================================================

class Board(object):
    """
    A flat board of ``n * n`` cells. Each cell is :data:`EMPTY` or a symbol
    from :attr:`alphabet`.

    Access is explicit, via :meth:`get`, :meth:`set` and :meth:`contains`.
    """
    def __init__(self, values: Iterable[Any] = None,
                 block_width: int = DEFAULT_BLOCK_WIDTH,
                 block_height: int = DEFAULT_BLOCK_HEIGHT,
                 other: "Board" = None) -> None:
        """
        Args:
            values:
                ``n * n`` cell values, row by row. If ``None``, the board is
                entirely blank.
            block_width:
                width of a block, in cells
            block_height:
                height of a block, in cells
            other:
                if given, copy this board instead (ignoring the other
                arguments); the group tables are shared, the cells are not.

        Raises:
            :exc:`ConfigurationError` for bad dimensions or the wrong number
            of values; :exc:`IllegalSymbolError` for a value that is neither
            the empty marker nor an alphabet member.
        """
        if other is not None:
            self.block_width = other.block_width
            self.block_height = other.block_height
            self.n = other.n
            self.alphabet = other.alphabet
            self.mapper = other.mapper
            self.view = other.view
            self._cells = list(other._cells)  # type: List[Cell]
            return

        self.alphabet = make_alphabet(block_width, block_height)
        self.block_width = block_width
        self.block_height = block_height
        self.n = block_width * block_height
        n_cells = self.n * self.n

        if values is None:
            values = [EMPTY] * n_cells
        else:
            values = list(values)
        if len(values) != n_cells:
            raise ConfigurationError(
                f"Board of side {self.n} needs {n_cells} values; "
                f"got {len(values)}")

        cells = []  # type: List[Cell]
        for index, value in enumerate(values):
            try:
                cells.append(normalise_value(value, self.alphabet))
            except ValueError:
                raise IllegalSymbolError(
                    f"Illegal value {value!r} at index {index}; allowed: "
                    f"{EMPTY!r} or one of {''.join(self.alphabet)}")
        self._cells = cells

        self.mapper = IndexMapper(block_width, block_height)
        self.view = BoardView(self.mapper)

    def copy(self) -> "Board":
        return self.__class__(other=self)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}({self._cells!r}, "
            f"block_width={self.block_width}, "
            f"block_height={self.block_height})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (
            self.block_width == other.block_width and
            self.block_height == other.block_height and
            self._cells == other._cells
        )

    # -------------------------------------------------------------------------
    # Cell access
    # -------------------------------------------------------------------------

    @property
    def n_cells(self) -> int:
        return len(self._cells)

    def contains(self, index: int) -> bool:
        """
        Is this a valid cell index?
        """
        return (isinstance(index, int) and not isinstance(index, bool) and
                0 <= index < len(self._cells))

    def get(self, index: int) -> Cell:
        if not self.contains(index):
            raise IndexError(f"No cell with index {index!r}")
        return self._cells[index]

    def set(self, index: int, value: Any) -> None:
        """
        Sets a cell to the empty marker or an alphabet symbol.

        Raises:
            :exc:`InvalidAssignment` (leaving the board unchanged) for a bad
            index or value.
        """
        if not self.contains(index):
            raise InvalidAssignment(
                f"Cannot set cell {index!r}: index out of range "
                f"0-{len(self._cells) - 1}")
        try:
            value = normalise_value(value, self.alphabet)
        except ValueError:
            raise InvalidAssignment(
                f"Cannot set cell {index} to {value!r}: not {EMPTY!r} or "
                f"one of {''.join(self.alphabet)}")
        self._cells[index] = value

    def is_blank(self, index: int) -> bool:
        return self.get(index) == EMPTY

    def values(self) -> List[Cell]:
        """
        The current cell values, in index order (a copy).
        """
        return list(self._cells)

    def blank_indices(self) -> List[int]:
        return [i for i, v in enumerate(self._cells) if v == EMPTY]

    def filled_indices(self) -> List[int]:
        return [i for i, v in enumerate(self._cells) if v != EMPTY]

    def placed_in(self, cells: Iterable[int]) -> List[str]:
        """
        The symbols placed in some cells (blank cells contribute nothing).
        """
        return [self._cells[i] for i in cells if self._cells[i] != EMPTY]
