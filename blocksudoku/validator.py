#!/usr/bin/env python

"""
validator.py

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

**Checks a board for duplicate symbols in its rows, columns and blocks.**

"""

import logging
from typing import Any, Dict, List, Set, Tuple

from blocksudoku.board import Board
from blocksudoku.common import EMPTY, GROUP_KINDS

log = logging.getLogger(__name__)


# =============================================================================
# Helper functions
# =============================================================================

def duplicate_positions(values: List[Any]) -> List[int]:
    """
    Returns the positions of every value that occurs more than once, ignoring
    blanks. Where a value is duplicated, all its positions are returned,
    including the first.

    .. code-block:: python

        duplicate_positions(["1", 0, "1", "2", 0, "1"])  # [0, 2, 5]

    """
    positions = {}  # type: Dict[Any, List[int]]
    for pos, value in enumerate(values):
        if value == EMPTY:
            continue
        positions.setdefault(value, []).append(pos)
    return sorted(
        pos
        for poslist in positions.values()
        if len(poslist) > 1
        for pos in poslist
    )


# =============================================================================
# ValidationResult
# =============================================================================

class ValidationResult(object):
    """
    The outcome of one validation pass.

    Attributes:
        failed_indices: cells holding a duplicated symbol
        failed_groups: ``(kind, group_index)`` pairs for groups containing a
            duplicate, e.g. ``("row", 0)``
    """
    def __init__(self,
                 failed_indices: Set[int] = None,
                 failed_groups: Set[Tuple[str, int]] = None) -> None:
        self.failed_indices = failed_indices or set()  # type: Set[int]
        self.failed_groups = failed_groups or set()  # type: Set[Tuple[str, int]]  # noqa

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"failed_indices={sorted(self.failed_indices)}, "
            f"failed_groups={sorted(self.failed_groups)})"
        )

    @property
    def valid(self) -> bool:
        return not self.failed_indices

    def failed_group_indices(self, kind: str) -> List[int]:
        """
        The failed rows, columns or blocks, in ascending order.
        """
        return sorted(g for k, g in self.failed_groups if k == kind)


# =============================================================================
# Validator
# =============================================================================

class Validator(object):
    """
    Wraps a :class:`Board` and keeps a full :class:`ValidationResult` for it.

    The result is recomputed from scratch on every :meth:`validate`, and after
    every :meth:`set`, including one that is refused.
    """
    def __init__(self, board: Board) -> None:
        self.board = board
        self.result = ValidationResult()
        self.validate()

    @property
    def failed_indices(self) -> Set[int]:
        return self.result.failed_indices

    @property
    def failed_groups(self) -> Set[Tuple[str, int]]:
        return self.result.failed_groups

    def status(self) -> bool:
        """
        Is the board free of duplicates?
        """
        return self.result.valid

    def set(self, index: int, value: Any) -> None:
        """
        Sets a cell, then revalidates.

        Raises:
            :exc:`blocksudoku.common.InvalidAssignment` for a bad index or
            value; the board is unchanged, but it is still revalidated.
        """
        try:
            self.board.set(index, value)
        finally:
            self.validate()

    def validate(self) -> ValidationResult:
        board = self.board
        view = board.view
        mapper = board.mapper
        failed_indices = set()  # type: Set[int]
        failed_groups = set()  # type: Set[Tuple[str, int]]
        for kind in GROUP_KINDS:
            for group_index, cells in enumerate(view.groups(kind)):
                dup_positions = duplicate_positions(
                    [board.get(i) for i in cells])
                if not dup_positions:
                    continue
                failed_groups.add((kind, group_index))
                for pos in dup_positions:
                    failed_indices.add(
                        mapper.index_from_group(kind, group_index, pos))
        self.result = ValidationResult(failed_indices=failed_indices,
                                       failed_groups=failed_groups)
        if failed_indices:
            log.debug(f"Validation failed: {self.result}")
        return self.result
