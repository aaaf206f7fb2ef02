"""Defines the checkers pieces: who owns them and whether they are crowned"""

from dataclasses import dataclass, replace
from enum import Enum, auto
from typing import Self

from src.core.exceptions import GameStateError


class Owner(Enum):
    PLAYER_ONE = auto()
    PLAYER_TWO = auto()

    @property
    def index(self) -> int:
        """Position of this player in the room's player list."""
        return 0 if self == Owner.PLAYER_ONE else 1

    @property
    def forward(self) -> int:
        """Player 1 starts at the bottom and moves up the board (decreasing row), Player 2 moves down."""
        return -1 if self == Owner.PLAYER_ONE else 1

    @property
    def crowning_row(self) -> int:
        """The far row, as seen from the owner's starting side"""
        return 0 if self == Owner.PLAYER_ONE else 7

    @property
    def opponent(self) -> "Owner":
        return Owner.PLAYER_TWO if self == Owner.PLAYER_ONE else Owner.PLAYER_ONE

    @classmethod
    def from_index(cls, index: int) -> Self:
        if index not in (0, 1):
            raise GameStateError(f"No player with index {index!r}. Use 0 or 1.")
        return cls.PLAYER_ONE if index == 0 else cls.PLAYER_TWO


class Rank(Enum):
    MAN = auto()
    KING = auto()


# The wire tags: a single digit for a man, a double digit for a king.
TAG_TO_PIECE: dict[str, tuple[Owner, Rank]] = {
    "1": (Owner.PLAYER_ONE, Rank.MAN),
    "11": (Owner.PLAYER_ONE, Rank.KING),
    "2": (Owner.PLAYER_TWO, Rank.MAN),
    "22": (Owner.PLAYER_TWO, Rank.KING),
}

PIECE_TO_TAG: dict[tuple[Owner, Rank], str] = {
    value: key for key, value in TAG_TO_PIECE.items()
}


@dataclass(frozen=True)
class Piece:
    owner: Owner
    rank: Rank = Rank.MAN

    @classmethod
    def from_tag(cls, tag: str | int) -> Self:
        """Clients have been known to send the tags as numbers. Normalise here, so nothing else has to care."""
        key = str(tag).strip()
        if key not in TAG_TO_PIECE:
            raise GameStateError(
                f"Unknown piece tag: {tag!r}. Pick one from {','.join(TAG_TO_PIECE)}"
            )
        owner, rank = TAG_TO_PIECE[key]
        return cls(owner, rank)

    def to_tag(self) -> str:
        return PIECE_TO_TAG[(self.owner, self.rank)]

    @property
    def is_king(self) -> bool:
        return self.rank == Rank.KING

    def row_directions(self) -> list[int]:
        """Men only go forward. Kings go both ways."""
        if self.is_king:
            return [self.owner.forward, -self.owner.forward]
        return [self.owner.forward]

    def crowned(self) -> Self:
        """Return the king version of this piece (a king stays a king)"""
        return replace(self, rank=Rank.KING)
