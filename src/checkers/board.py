"""The Game board: where the pieces are, and the primitive operations on that placement"""

from dataclasses import dataclass, field
from typing import Optional, Self

from src.checkers.pieces import Owner, Piece
from src.checkers.square import BOARD_DIMENSIONS, Square
from src.core.exceptions import GameStateError
from src.core.models import Grid

# Rows holding the men at the start of a game
STARTING_ROWS: dict[Owner, range] = {
    Owner.PLAYER_TWO: range(0, 3),
    Owner.PLAYER_ONE: range(5, 8),
}


@dataclass
class Board:
    # only occupied squares are stored: a missing key is an empty square
    position: dict[Square, Piece] = field(default_factory=dict)

    @classmethod
    def starting_position(cls) -> Self:
        """12 men per side on the dark squares of the three rows nearest to their owner."""
        position: dict[Square, Piece] = {}
        for owner, rows in STARTING_ROWS.items():
            for row in rows:
                for col in range(BOARD_DIMENSIONS[1]):
                    square = Square(row, col)
                    if square.is_playable():
                        position[square] = Piece(owner)
        return cls(position)

    @classmethod
    def from_grid(cls, grid: Grid) -> Self:
        """Construct a board from the 8x8 grid of nullable piece tags used in the state document.

        ex. row 5 of the starting position:
        ['1', None, '1', None, '1', None, '1', None]
        """
        if len(grid) != BOARD_DIMENSIONS[0] or any(
            len(row) != BOARD_DIMENSIONS[1] for row in grid
        ):
            raise GameStateError(
                f"Board must be a {BOARD_DIMENSIONS[0]}x{BOARD_DIMENSIONS[1]} grid."
            )

        position: dict[Square, Piece] = {}
        for row_idx, row in enumerate(grid):
            for col_idx, tag in enumerate(row):
                if tag is None:
                    continue
                square = Square(row_idx, col_idx)
                if not square.is_playable():
                    raise GameStateError(
                        f"Piece {tag!r} on {square}: not a playable square."
                    )
                position[square] = Piece.from_tag(tag)
        return cls(position)

    def to_grid(self) -> Grid:
        return [
            [
                self.position[Square(row, col)].to_tag()
                if Square(row, col) in self.position
                else None
                for col in range(BOARD_DIMENSIONS[1])
            ]
            for row in range(BOARD_DIMENSIONS[0])
        ]

    def piece(self, square: Square) -> Optional[Piece]:
        return self.position.get(square)

    def is_empty(self, square: Square) -> bool:
        return square not in self.position

    def is_owned_by(self, square: Square, owner: Owner) -> bool:
        piece = self.piece(square)
        return piece is not None and piece.owner == owner

    def locate_owner(self, owner: Owner) -> list[Square]:
        """Squares holding a piece of the given player, top-left to bottom-right"""
        return sorted(
            (square for square, piece in self.position.items() if piece.owner == owner),
            key=lambda square: (square.row, square.col),
        )

    def count_pieces(self, owner: Owner) -> int:
        return len(self.locate_owner(owner))

    def place_piece(self, piece: Piece, square: Square) -> None:
        self.position[square] = piece

    def remove_piece(self, square: Square) -> None:
        """Remove whatever stands on the square. Removing from an empty square is a bug in the caller."""
        if square not in self.position:
            raise GameStateError(f"No piece to remove on {square}.")
        del self.position[square]

    def move_piece(self, from_square: Square, to_square: Square) -> Piece:
        """Relocate a piece and return it (so the caller can crown it if needed)"""
        if from_square not in self.position:
            raise GameStateError(f"No piece to move on {from_square}.")
        piece = self.position.pop(from_square)
        self.position[to_square] = piece
        return piece
