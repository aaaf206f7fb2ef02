"""
Movement and capturing rules

Key idea: a piece only ever moves diagonally, one square (regular move) or two squares over an opponent's piece (jump).
Men move forward only, kings both ways. Which way is forward depends on the owner (see pieces.py)

Everything in here is a pure function of the board: the Game decides what to do with the options.
"""

from dataclasses import dataclass
from typing import Callable, Optional, Protocol, Self

from src.checkers.pieces import Owner, Piece
from src.checkers.square import Square
from src.core.exceptions import IllegalSelectionError
from src.core.shared_types import MoveKind


class Board(Protocol):
    """Just the parts the movement rules need"""

    def piece(self, square: Square) -> Optional[Piece]: ...
    def is_empty(self, square: Square) -> bool: ...
    def locate_owner(self, owner: Owner) -> list[Square]: ...


# column direction of a diagonal step. The row direction comes from the piece.
COLUMN_DIRECTIONS: list[int] = [-1, 1]


@dataclass(frozen=True)
class MoveOption:
    """A generated destination for a selected piece. Never stored, only shown or compared against."""

    destination: Square
    captured: Optional[Square] = None

    @property
    def kind(self) -> MoveKind:
        return MoveKind.JUMP if self.captured else MoveKind.REGULAR


@dataclass(frozen=True)
class Move:
    """A move as submitted by a player

    Either a piece moving from one square to another (capturing the piece on `captured` if it is a jump),
    or the request to hand the turn to the opponent (`switch_player`)
    """

    from_square: Optional[Square] = None
    to_square: Optional[Square] = None
    captured: Optional[Square] = None
    switch_player: bool = False

    @classmethod
    def switch(cls) -> Self:
        return cls(switch_player=True)

    @property
    def kind(self) -> MoveKind:
        return MoveKind.JUMP if self.captured else MoveKind.REGULAR

    def matches(self, option: MoveOption) -> bool:
        return (
            self.to_square == option.destination and self.captured == option.captured
        )


# --- MOVEMENT RULES ---
def jump_moves(square: Square, board: Board) -> list[MoveOption]:
    """
    Jumps over an adjacent opponent piece onto the empty square right behind it.
    ----

    For every row direction the piece may use (d) and both column directions:
    * the landing square (r + 2d, c +- 2) must be on the board and empty
    * the square in between (r + d, c +- 1) must hold an opponent piece (man or king alike)
    """
    piece = board.piece(square)
    if piece is None:
        return []

    moves: list[MoveOption] = []
    for d_row in piece.row_directions():
        for d_col in COLUMN_DIRECTIONS:
            over = square.offset(d_row, d_col)
            landing = square.offset(2 * d_row, 2 * d_col)
            if not landing.is_within_bounds() or not board.is_empty(landing):
                continue

            jumped_piece = board.piece(over)
            if jumped_piece is not None and jumped_piece.owner != piece.owner:
                moves.append(MoveOption(destination=landing, captured=over))
    return moves


def regular_moves(square: Square, board: Board) -> list[MoveOption]:
    """Single diagonal step onto an empty square"""
    piece = board.piece(square)
    if piece is None:
        return []

    moves: list[MoveOption] = []
    for d_row in piece.row_directions():
        for d_col in COLUMN_DIRECTIONS:
            target = square.offset(d_row, d_col)
            if target.is_within_bounds() and board.is_empty(target):
                moves.append(MoveOption(destination=target))
    return moves


CandidateMovesFn = Callable[[Square, Board], list[MoveOption]]
MOVEMENT_RULES: dict[MoveKind, CandidateMovesFn] = {
    MoveKind.JUMP: jump_moves,
    MoveKind.REGULAR: regular_moves,
}


# --- LEGAL MOVES ---
def assert_selectable(square: Square, board: Board, owner: Owner) -> None:
    """You can only select one of your own pieces"""
    if not square.is_within_bounds():
        raise IllegalSelectionError(f"Square {square} is not on the board.")

    piece = board.piece(square)
    if piece is None:
        raise IllegalSelectionError(f"There is no piece on {square}.")
    if piece.owner != owner:
        raise IllegalSelectionError(f"The piece on {square} is not yours to move.")


def legal_moves(
    square: Square, board: Board, owner: Owner, mandatory_capture: bool = True
) -> list[MoveOption]:
    """
    All destinations for the piece on `square`, jumps first.
    ----

    ----
    With `mandatory_capture` a piece that can jump is not offered its regular moves.
    Without it, jumps and regular moves are simply concatenated.
    """
    assert_selectable(square, board, owner)

    jumps = MOVEMENT_RULES[MoveKind.JUMP](square, board)
    if jumps and mandatory_capture:
        return jumps
    return jumps + MOVEMENT_RULES[MoveKind.REGULAR](square, board)


def has_jump(square: Square, board: Board) -> bool:
    return len(jump_moves(square, board)) > 0


def has_any_jump(board: Board, owner: Owner) -> bool:
    """Can any of the player's pieces capture right now?"""
    return any(has_jump(square, board) for square in board.locate_owner(owner))


def movable_squares(
    board: Board, owner: Owner, mandatory_capture: bool = True
) -> list[Square]:
    """Squares of the player's pieces that have at least one legal option. Empty list: the player is blocked."""
    return [
        square
        for square in board.locate_owner(owner)
        if legal_moves(square, board, owner, mandatory_capture)
    ]
