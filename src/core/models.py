"""
Boundary layer data model(s).

These objects are used to communicate with the Service.
Both the API layer (higher) and the domain layer (lower) send to/receive from the Service using the models defined here
(Decouples the pydantic wire models from the domain objects: neither needs to know the other exists)
"""

from dataclasses import dataclass
from typing import Optional

# Type aliases to make GameModel easier to read
PieceTag = str
Grid = list[list[Optional[PieceTag]]]
Location = tuple[int, int]


@dataclass(frozen=True)
class Player:
    """Identity handed to us by the room platform. Only `id` is used for comparisons."""

    id: str
    username: str


@dataclass
class MoveDetailsModel:
    move_kind: str
    piece_location: Location


@dataclass
class GameModel:
    """Transport-safe representation of the state document used between API, Service and Game layers."""

    board: Grid
    status: str
    player_one_remaining: int
    player_two_remaining: int
    player_to_move_index: Optional[int] = None
    move_details: Optional[MoveDetailsModel] = None
    winner: Optional[Player] = None
    pending_jump: Optional[Location] = None


@dataclass
class RoomModel:
    """What the room platform knows about a room. The engine reads it, but only ever returns a new state."""

    players: list[Player]
    state: Optional[GameModel] = None
    joinable: bool = True
    finished: bool = False
    version: int = 0


@dataclass
class RoomResultModel:
    """Fields the room platform should overwrite. None means: leave as is."""

    state: Optional[GameModel] = None
    joinable: Optional[bool] = None
    finished: Optional[bool] = None
