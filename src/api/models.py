"""Requests and Response models

Field names on the wire are camelCase (what the room host and its clients exchange).
In Python they are snake_case, both are accepted when parsing.
"""

from typing import Any, Optional, Self

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from src.checkers.moves import Move, MoveOption
from src.checkers.square import BOARD_DIMENSIONS, Square
from src.core.exceptions import InvalidRequestError
from src.core.models import (
    GameModel,
    Grid,
    Location,
    MoveDetailsModel,
    Player,
    RoomModel,
    RoomResultModel,
)
from src.core.shared_types import MoveKind, Status


class WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


# --- BUILDING BLOCKS ---
class LocationSchema(WireModel):
    """A square as {x: row, y: col}"""

    x: int
    y: int

    @field_validator("x", "y")
    @classmethod
    def validate_on_board(cls, value: int) -> int:
        if not 0 <= value < BOARD_DIMENSIONS[0]:
            raise InvalidRequestError(
                f"Coordinate {value} is off the board (0-{BOARD_DIMENSIONS[0] - 1})."
            )
        return value

    @classmethod
    def from_location(cls, location: Location) -> Self:
        return cls(x=location[0], y=location[1])

    @classmethod
    def from_square(cls, square: Square) -> Self:
        return cls(x=square.row, y=square.col)

    def to_location(self) -> Location:
        return (self.x, self.y)

    def to_square(self) -> Square:
        return Square(self.x, self.y)


class PlayerSchema(WireModel):
    id: str
    username: str

    @classmethod
    def from_player(cls, player: Player) -> Self:
        return cls(id=player.id, username=player.username)

    def to_player(self) -> Player:
        return Player(id=self.id, username=self.username)


class MoveDetailsSchema(WireModel):
    move_type: MoveKind = Field(alias="moveType")
    piece_location: LocationSchema = Field(alias="pieceLocation")


# --- STATE DOCUMENT ---
class GameStateDocument(WireModel):
    status: Status
    board: Grid
    plr_to_move_index: Optional[int] = Field(default=None, alias="plrToMoveIndex")
    plr_one_counter: int = Field(alias="plrOneCounter")
    plr_two_counter: int = Field(alias="plrTwoCounter")
    move_details: Optional[MoveDetailsSchema] = Field(default=None, alias="moveDetails")
    winner: Optional[PlayerSchema] = None
    pending_jump: Optional[LocationSchema] = Field(default=None, alias="pendingJump")

    @field_validator("board", mode="before")
    @classmethod
    def normalise_piece_tags(cls, value: Any) -> Any:
        """Some clients send the tags as numbers (1, 11, 2, 22). Turn those into strings before validating."""
        if not isinstance(value, list):
            return value
        return [
            [str(tag) if isinstance(tag, int) else tag for tag in row]
            if isinstance(row, list)
            else row
            for row in value
        ]

    @field_validator("move_details", mode="before")
    @classmethod
    def empty_move_details(cls, value: Any) -> Any:
        """The host used to store 'no move yet' as an empty object"""
        if value == {}:
            return None
        return value

    @classmethod
    def from_model(cls, model: GameModel) -> Self:
        return cls(
            status=Status(model.status),
            board=model.board,
            plr_to_move_index=model.player_to_move_index,
            plr_one_counter=model.player_one_remaining,
            plr_two_counter=model.player_two_remaining,
            move_details=(
                MoveDetailsSchema(
                    move_type=MoveKind(model.move_details.move_kind),
                    piece_location=LocationSchema.from_location(
                        model.move_details.piece_location
                    ),
                )
                if model.move_details
                else None
            ),
            winner=PlayerSchema.from_player(model.winner) if model.winner else None,
            pending_jump=(
                LocationSchema.from_location(model.pending_jump)
                if model.pending_jump
                else None
            ),
        )

    def to_model(self) -> GameModel:
        return GameModel(
            board=[list(row) for row in self.board],
            status=self.status.value,
            player_one_remaining=self.plr_one_counter,
            player_two_remaining=self.plr_two_counter,
            player_to_move_index=self.plr_to_move_index,
            move_details=(
                MoveDetailsModel(
                    move_kind=self.move_details.move_type.value,
                    piece_location=self.move_details.piece_location.to_location(),
                )
                if self.move_details
                else None
            ),
            winner=self.winner.to_player() if self.winner else None,
            pending_jump=self.pending_jump.to_location() if self.pending_jump else None,
        )


# --- REQUEST MODELS ---
class RoomRequest(WireModel):
    """The room as the host hands it over with every lifecycle event"""

    players: list[PlayerSchema] = []
    state: Optional[GameStateDocument] = None
    joinable: bool = True
    finished: bool = False
    version: int = 0

    def to_model(self) -> RoomModel:
        return RoomModel(
            players=[player.to_player() for player in self.players],
            state=self.state.to_model() if self.state else None,
            joinable=self.joinable,
            finished=self.finished,
            version=self.version,
        )


class MoveRequest(WireModel):
    """Either {switchPlayer: true} or {currentLoc, nextLoc, capture?}"""

    switch_player: bool = Field(default=False, alias="switchPlayer")
    current_loc: Optional[LocationSchema] = Field(default=None, alias="currentLoc")
    next_loc: Optional[LocationSchema] = Field(default=None, alias="nextLoc")
    capture: Optional[LocationSchema] = None

    @model_validator(mode="after")
    def validate_move_shape(self) -> Self:
        if self.switch_player:
            return self
        if self.current_loc is None or self.next_loc is None:
            raise InvalidRequestError(
                "A move needs both currentLoc and nextLoc (or switchPlayer: true)."
            )
        return self

    def to_move(self) -> Move:
        if self.switch_player:
            return Move.switch()

        # for the type checker: validate_move_shape made sure of this
        assert self.current_loc is not None and self.next_loc is not None
        return Move(
            from_square=self.current_loc.to_square(),
            to_square=self.next_loc.to_square(),
            captured=self.capture.to_square() if self.capture else None,
        )


# --- RESPONSE MODELS ---
class RoomResult(WireModel):
    """Fields the host should overwrite. Unset fields are left out of the wire format."""

    state: Optional[GameStateDocument] = None
    joinable: Optional[bool] = None
    finished: Optional[bool] = None

    @classmethod
    def from_model(cls, model: RoomResultModel) -> Self:
        return cls(
            state=GameStateDocument.from_model(model.state) if model.state else None,
            joinable=model.joinable,
            finished=model.finished,
        )

    def to_wire(self) -> dict[str, Any]:
        # NOTE: exclude_none only on this level, the board itself is full of None
        wire: dict[str, Any] = {}
        if self.state is not None:
            wire["state"] = self.state.to_wire()
        if self.joinable is not None:
            wire["joinable"] = self.joinable
        if self.finished is not None:
            wire["finished"] = self.finished
        return wire


class MoveOptionSchema(WireModel):
    """Same shape the clients use to highlight a square: {x, y, capture?}"""

    x: int
    y: int
    capture: Optional[LocationSchema] = None

    @classmethod
    def from_option(cls, option: MoveOption) -> Self:
        return cls(
            x=option.destination.row,
            y=option.destination.col,
            capture=(
                LocationSchema.from_square(option.captured) if option.captured else None
            ),
        )


class PossibleMovesResponse(WireModel):
    player: PlayerSchema
    selected_piece: LocationSchema = Field(alias="selectedPieceInfo")
    possible_moves: list[MoveOptionSchema] = Field(alias="possibleMoves")
