"""Unit tests for /src/checkers/board.py"""

import pytest

from src.checkers.board import Board
from src.checkers.pieces import Owner, Piece, Rank
from src.checkers.square import Square
from src.core.exceptions import GameStateError

STARTING_GRID = [
    [None, "2", None, "2", None, "2", None, "2"],
    ["2", None, "2", None, "2", None, "2", None],
    [None, "2", None, "2", None, "2", None, "2"],
    [None, None, None, None, None, None, None, None],
    [None, None, None, None, None, None, None, None],
    ["1", None, "1", None, "1", None, "1", None],
    [None, "1", None, "1", None, "1", None, "1"],
    ["1", None, "1", None, "1", None, "1", None],
]
EMPTY_GRID = [[None] * 8 for _ in range(8)]


# -- CREATION LOGIC --
def test_starting_position_layout() -> None:
    """12 men per player, on the dark squares of the three rows closest to them"""
    board = Board.starting_position()
    assert board.to_grid() == STARTING_GRID
    assert board.count_pieces(Owner.PLAYER_ONE) == 12
    assert board.count_pieces(Owner.PLAYER_TWO) == 12
    assert all(square.is_playable() for square in board.position)
    assert all(piece.rank == Rank.MAN for piece in board.position.values())


def test_board_from_grid() -> None:
    board = Board.from_grid(STARTING_GRID)
    assert board == Board.starting_position()


def test_empty_grid() -> None:
    board = Board.from_grid(EMPTY_GRID)
    assert board.position == {}
    assert board.to_grid() == EMPTY_GRID


def test_grid_with_kings() -> None:
    grid = [row[:] for row in EMPTY_GRID]
    grid[0][1] = "11"
    grid[7][6] = "22"
    board = Board.from_grid(grid)
    assert board.piece(Square(0, 1)) == Piece(Owner.PLAYER_ONE, Rank.KING)
    assert board.piece(Square(7, 6)) == Piece(Owner.PLAYER_TWO, Rank.KING)
    assert board.to_grid() == grid


def test_grid_with_numeric_tags() -> None:
    """Numbers get normalised: the board written back only contains strings"""
    grid: list[list] = [row[:] for row in EMPTY_GRID]
    grid[5][0] = 1
    grid[2][1] = 22
    board = Board.from_grid(grid)
    expected = [row[:] for row in EMPTY_GRID]
    expected[5][0] = "1"
    expected[2][1] = "22"
    assert board.to_grid() == expected


@pytest.mark.parametrize(
    "grid",
    [
        [[None] * 8 for _ in range(7)],
        [[None] * 7 for _ in range(8)],
        [[None] * 8 for _ in range(7)] + [[None] * 9],
        [],
    ],
)
def test_grid_with_wrong_dimensions(grid: list) -> None:
    with pytest.raises(GameStateError):
        _ = Board.from_grid(grid)


def test_grid_with_unknown_tag() -> None:
    grid = [row[:] for row in EMPTY_GRID]
    grid[3][2] = "x"
    with pytest.raises(GameStateError):
        _ = Board.from_grid(grid)


@pytest.mark.parametrize("row, col", [(0, 0), (3, 3), (7, 7)])
def test_grid_with_piece_on_light_square(row: int, col: int) -> None:
    grid = [grid_row[:] for grid_row in EMPTY_GRID]
    grid[row][col] = "1"
    with pytest.raises(GameStateError):
        _ = Board.from_grid(grid)


# -- LOOKUPS --
def test_piece_lookup() -> None:
    board = Board.starting_position()
    assert board.piece(Square(5, 0)) == Piece(Owner.PLAYER_ONE)
    assert board.piece(Square(4, 1)) is None
    assert board.is_empty(Square(4, 1))
    assert not board.is_empty(Square(5, 0))


def test_is_owned_by() -> None:
    board = Board.starting_position()
    assert board.is_owned_by(Square(5, 0), Owner.PLAYER_ONE)
    assert not board.is_owned_by(Square(5, 0), Owner.PLAYER_TWO)
    assert not board.is_owned_by(Square(4, 1), Owner.PLAYER_ONE)


def test_locate_owner_is_sorted() -> None:
    board = Board.starting_position()
    squares = board.locate_owner(Owner.PLAYER_TWO)
    assert squares[0] == Square(0, 1)
    assert squares[-1] == Square(2, 7)
    assert len(squares) == 12


# -- UPDATES --
def test_move_piece() -> None:
    board = Board.starting_position()
    piece = board.move_piece(Square(5, 0), Square(4, 1))
    assert piece == Piece(Owner.PLAYER_ONE)
    assert board.is_empty(Square(5, 0))
    assert board.piece(Square(4, 1)) == piece


def test_move_from_empty_square() -> None:
    board = Board()
    with pytest.raises(GameStateError):
        _ = board.move_piece(Square(5, 0), Square(4, 1))


def test_place_and_remove_piece() -> None:
    board = Board()
    board.place_piece(Piece(Owner.PLAYER_TWO), Square(3, 2))
    assert board.count_pieces(Owner.PLAYER_TWO) == 1
    board.remove_piece(Square(3, 2))
    assert board.count_pieces(Owner.PLAYER_TWO) == 0


def test_remove_from_empty_square() -> None:
    with pytest.raises(GameStateError):
        Board().remove_piece(Square(3, 2))
