import numpy as np
import pytest

from reversi import BOARD_SIZE, Board, Piece, Position


def test_piece_opposite_is_involution():
    for p in Piece:
        assert p.opposite() != p
        assert p.opposite().opposite() == p


def test_new_board_is_empty():
    board = Board()
    assert board.row_count() == BOARD_SIZE == 8
    assert board.col_count() == BOARD_SIZE == 8
    assert not board.is_full()
    assert all(tile is None for row in board.rows() for tile in row)
    assert len(board.empty_positions()) == 64


@pytest.mark.parametrize("pos", [(-1, 0), (0, -1), (8, 0), (0, 8), (8, 8)])
def test_out_of_range_positions_raise(pos):
    board = Board()
    with pytest.raises(IndexError):
        board.tile(pos)
    with pytest.raises(IndexError):
        board.place(pos, Piece.X)


def test_place_overwrites():
    board = Board()
    board.place(Position(2, 5), Piece.O)
    assert board.tile((2, 5)) is Piece.O
    board.place(Position(2, 5), Piece.X)
    assert board.tile((2, 5)) is Piece.X
    assert board.count(Piece.X) == 1
    assert board.count(Piece.O) == 0


def test_is_full():
    board = Board.from_strings(["XO" * 4] * 7 + ["XOXOXOX."])
    assert not board.is_full()
    board.place((7, 7), Piece.O)
    assert board.is_full()


def test_from_strings_rejects_wrong_shape():
    with pytest.raises(ValueError):
        Board.from_strings(["........"] * 7)
    with pytest.raises(ValueError):
        Board.from_strings(["......."] * 8)


def test_to_array_encoding():
    board = Board()
    board.place((0, 0), Piece.X)
    board.place((7, 6), Piece.O)
    arr = board.to_array()
    assert arr.shape == (8, 8)
    assert arr.dtype == np.int8
    assert arr[0, 0] == 1
    assert arr[7, 6] == -1
    assert np.count_nonzero(arr) == 2


def test_copy_is_independent():
    board = Board()
    board.place((1, 1), Piece.X)
    other = board.copy()
    assert other == board
    other.place((1, 1), Piece.O)
    assert board.tile((1, 1)) is Piece.X
    assert other != board


@pytest.mark.parametrize("tiles", [
    [[0] * 3 for _ in range(3)],
    [[0] * 8 for _ in range(7)],
    [[0] * 8 for _ in range(7)] + [[0] * 9],
    [],
])
def test_constructor_rejects_wrong_shape(tiles):
    with pytest.raises(ValueError):
        Board(tiles)


def test_constructor_rejects_bad_tile_value():
    tiles = [[0] * 8 for _ in range(8)]
    tiles[2][5] = 7
    with pytest.raises(ValueError):
        Board(tiles)


def test_constructor_copies_tiles():
    tiles = [[0] * 8 for _ in range(8)]
    tiles[3][3] = 1
    board = Board(tiles)

    tiles[0][0] = 7
    tiles[3][3] = -1
    assert board.tile((0, 0)) is None
    assert board.tile((3, 3)) is Piece.X
