# tests/conftest.py
from typing import Callable, List

import pytest

from blocksudoku.board import Board
from blocksudoku.common import EMPTY, GROUP_KINDS

CANONICAL_PUZZLE = [
    0, 0, 0,  0, 0, 1,  0, 9, 0,
    0, 0, 9,  3, 0, 0,  7, 0, 4,
    0, 0, 0,  0, 0, 0,  0, 0, 5,

    0, 0, 0,  0, 0, 6,  0, 0, 1,
    1, 0, 0,  0, 0, 7,  4, 6, 8,
    0, 0, 0,  0, 0, 0,  5, 0, 0,

    5, 7, 0,  0, 0, 8,  3, 0, 0,
    0, 9, 3,  6, 0, 5,  0, 1, 7,
    8, 0, 6,  1, 0, 0,  9, 0, 0,
]

# A complete 6x6 grid with blocks 3 wide and 2 tall.
SOLVED_6X6 = [
    1, 2, 3,  4, 5, 6,
    4, 5, 6,  1, 2, 3,

    2, 3, 1,  5, 6, 4,
    5, 6, 4,  2, 3, 1,

    3, 1, 2,  6, 4, 5,
    6, 4, 5,  3, 1, 2,
]


@pytest.fixture
def canonical_puzzle() -> List[int]:
    return list(CANONICAL_PUZZLE)


@pytest.fixture
def solved_6x6() -> List[int]:
    return list(SOLVED_6X6)


@pytest.fixture
def assert_complete_grid() -> Callable[[Board], None]:
    """
    Checks that every row, column and block of a board is a permutation of
    its alphabet.
    """
    def check(board: Board) -> None:
        assert EMPTY not in board.values()
        for kind in GROUP_KINDS:
            for cells in board.view.groups(kind):
                assert sorted(board.get(i) for i in cells) == \
                    sorted(board.alphabet), (kind, cells)
    return check
