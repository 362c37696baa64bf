import pytest

from blocksudoku.board import Board, BoardView, make_alphabet
from blocksudoku.common import (
    ConfigurationError,
    EMPTY,
    GROUP_KINDS,
    IllegalSymbolError,
    InvalidAssignment,
)


# -----------------------------------------------------------------------------
# Alphabet
# -----------------------------------------------------------------------------

def test_alphabet_is_digits_then_letters():
    assert make_alphabet(3, 3) == tuple("123456789")
    assert make_alphabet(4, 3) == tuple("123456789ABC")
    assert make_alphabet(2, 2) == tuple("1234")
    assert make_alphabet(1, 1) == ("1", )


@pytest.mark.parametrize("block_width,block_height", [
    (4, 4), (13, 1), (0, 3), (3, 0), (-1, 2), (True, True), (True, 3),
    (3, 2.0),
])
def test_bad_dimensions(block_width, block_height):
    with pytest.raises(ConfigurationError):
        make_alphabet(block_width, block_height)


def test_bool_dimensions_rejected_by_board():
    with pytest.raises(ConfigurationError):
        Board(block_width=True, block_height=True)


# -----------------------------------------------------------------------------
# Construction
# -----------------------------------------------------------------------------

def test_blank_board_by_default():
    board = Board()
    assert board.n == 9
    assert board.n_cells == 81
    assert board.values() == [EMPTY] * 81
    assert board.blank_indices() == list(range(81))


def test_wrong_length():
    with pytest.raises(ConfigurationError):
        Board([0] * 80)
    with pytest.raises(ConfigurationError):
        Board([0] * 16, block_width=2, block_height=3)


def test_too_large():
    with pytest.raises(ConfigurationError):
        Board([0] * 256, block_width=4, block_height=4)


@pytest.mark.parametrize("bad", ["0", "A", 10, -1, None, True, 5.0])
def test_illegal_symbol(bad):
    values = [0] * 81
    values[17] = bad
    with pytest.raises(IllegalSymbolError):
        Board(values)


def test_integers_become_symbols(canonical_puzzle):
    board = Board(canonical_puzzle)
    assert board.get(5) == "1"
    assert board.get(7) == "9"
    assert board.get(0) == EMPTY
    mixed = list(canonical_puzzle)
    mixed[5] = "1"
    assert Board(mixed) == board


def test_letters_on_a_12x12_board():
    values = [0] * 144
    values[0] = "C"
    values[1] = "A"
    board = Board(values, block_width=4, block_height=3)
    assert board.get(0) == "C"
    assert board.filled_indices() == [0, 1]


# -----------------------------------------------------------------------------
# Access
# -----------------------------------------------------------------------------

def test_get_set_contains():
    board = Board()
    assert board.contains(0)
    assert board.contains(80)
    assert not board.contains(81)
    assert not board.contains(-1)
    board.set(40, 7)
    assert board.get(40) == "7"
    board.set(40, EMPTY)
    assert board.is_blank(40)
    with pytest.raises(IndexError):
        board.get(81)


@pytest.mark.parametrize("index,value", [
    (81, "1"), (-1, "1"), (0, "0"), (0, "A"), (0, 12),
])
def test_set_refuses_bad_input(index, value):
    board = Board()
    board.set(0, "3")
    with pytest.raises(InvalidAssignment):
        board.set(index, value)
    assert board.get(0) == "3"
    assert board.values().count(EMPTY) == 80


def test_copy_is_independent_but_shares_groups(canonical_puzzle):
    board = Board(canonical_puzzle)
    clone = board.copy()
    assert clone == board
    clone.set(0, "2")
    assert board.get(0) == EMPTY
    assert clone.view is board.view
    assert clone.mapper is board.mapper


def test_values_is_a_copy():
    board = Board()
    values = board.values()
    values[0] = "5"
    assert board.get(0) == EMPTY


# -----------------------------------------------------------------------------
# BoardView
# -----------------------------------------------------------------------------

@pytest.mark.parametrize("block_width,block_height",
                         [(1, 1), (3, 3), (3, 2), (2, 3), (4, 3)])
def test_groups_partition_the_board(block_width, block_height):
    board = Board(block_width=block_width, block_height=block_height)
    view = board.view
    everything = list(range(board.n_cells))
    for kind in GROUP_KINDS:
        groups = view.groups(kind)
        assert len(groups) == board.n
        assert all(len(g) == board.n for g in groups)
        assert sorted(i for g in groups for i in g) == everything


def test_group_contents():
    board = Board(block_width=3, block_height=2)
    view = board.view
    assert view.rows[1] == (6, 7, 8, 9, 10, 11)
    assert view.cols[2] == (2, 8, 14, 20, 26, 32)
    assert view.blocks[1] == (3, 4, 5, 9, 10, 11)
    assert view.blocks[2] == (12, 13, 14, 18, 19, 20)


def test_peers():
    board = Board()
    peers = board.view.peers(0)
    assert len(peers) == 20  # row and column, plus 4 more from the block
    assert 0 not in peers
    assert {1, 8, 9, 72, 10, 20} <= peers
    assert 80 not in peers


def test_mutation_is_visible_through_every_group():
    board = Board()
    view = board.view
    board.set(40, "4")
    for kind in GROUP_KINDS:
        group = view.group_containing(kind, 40)
        assert "4" in board.placed_in(group)


def test_unknown_kind():
    view = BoardView(Board().mapper)
    with pytest.raises(ValueError):
        view.groups("diagonal")
