"""
A square on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass

# Checkers board is 8x8 (rows, columns). Row 0 is at the top: Player 2's side of the board.
BOARD_DIMENSIONS = (8, 8)


@dataclass(frozen=True)
class Square:
    row: int
    col: int

    @classmethod
    def from_location(cls, location: tuple[int, int]) -> Square:
        """The wire format uses {x: row, y: col}, the boundary model a (row, col) tuple."""
        row, col = location
        return cls(row, col)

    def to_location(self) -> tuple[int, int]:
        return (self.row, self.col)

    def is_within_bounds(self) -> bool:
        return (0 <= self.row < BOARD_DIMENSIONS[0]) and (
            0 <= self.col < BOARD_DIMENSIONS[1]
        )

    def is_playable(self) -> bool:
        """Only the dark squares are ever used. In the starting layout (0, 0) is a light square."""
        return self.is_within_bounds() and (self.row + self.col) % 2 == 1

    def offset(self, d_row: int, d_col: int) -> Square:
        return Square(self.row + d_row, self.col + d_col)

    def __str__(self) -> str:
        return f"({self.row},{self.col})"
