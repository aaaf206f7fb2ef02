"""Orchestration between the room host (API models in, API models out) and the Game (domain layer)."""

import logging
from contextlib import contextmanager
from typing import Generator, Optional

from src.api.models import (
    LocationSchema,
    MoveOptionSchema,
    MoveRequest,
    PlayerSchema,
    PossibleMovesResponse,
    RoomRequest,
    RoomResult,
)
from src.checkers.game import Game
from src.core.config import RulesConfig
from src.core.exceptions import GameError, GameStateError
from src.core.models import Player, RoomModel, RoomResultModel

logger = logging.getLogger(__name__)


class RoomService:
    """The four lifecycle hooks of the room host, plus the move query for the presentation layer.

    Stateless: every call builds a fresh Game from the room's state document and hands back a new one.
    The host's own copy is never touched, so a rejected request cannot leave it half-updated.
    """

    def __init__(self, rules: Optional[RulesConfig] = None) -> None:
        self.rules = rules or RulesConfig.from_env()

    # -- Room lifecycle logic ---
    def on_room_start(self) -> RoomResult:
        """The room was created: set up the board."""
        game = Game.new_game(self.rules)
        logger.info("Room started")
        return self._create_result(RoomResultModel(state=game.to_model()))

    def on_player_join(self, player: PlayerSchema, room: RoomRequest) -> RoomResult:
        """A player joined. The second one to do so starts the game."""
        room_model = room.to_model()

        with _log_rejection("join", player):
            game = self._load_game(room_model)
            joinable = game.join(room_model.players)

        logger.info(
            "%s joined (%d player(s) in the room)",
            player.username,
            len(room_model.players),
        )
        return self._create_result(
            RoomResultModel(state=game.to_model(), joinable=joinable)
        )

    def on_player_move(
        self, player: PlayerSchema, move: MoveRequest, room: RoomRequest
    ) -> RoomResult:
        """Attempt a move (or a switchPlayer request)."""
        room_model = room.to_model()

        with _log_rejection("move", player):
            game = self._load_game(room_model)
            game.make_move(player.to_player(), move.to_move(), room_model.players)

        if game.finished:
            logger.info("Game over. Winner: %s", self._describe_winner(game.winner))
            return self._create_result(
                RoomResultModel(state=game.to_model(), finished=True)
            )
        return self._create_result(RoomResultModel(state=game.to_model()))

    def on_player_quit(self, player: PlayerSchema, room: RoomRequest) -> RoomResult:
        """A player left. `room.players` no longer contains them."""
        room_model = room.to_model()

        with _log_rejection("quit", player):
            game = self._load_game(room_model)
            game.quit(room_model.players)

        logger.info(
            "%s quit. Winner: %s", player.username, self._describe_winner(game.winner)
        )
        return self._create_result(
            RoomResultModel(state=game.to_model(), joinable=False, finished=True)
        )

    # -- Presentation layer logic ---
    def possible_moves(
        self, player: PlayerSchema, selected: LocationSchema, room: RoomRequest
    ) -> PossibleMovesResponse:
        """Destinations to highlight for the selected piece. (The move itself gets re-validated anyway)"""
        room_model = room.to_model()

        with _log_rejection("select", player):
            game = self._load_game(room_model)
            options = game.legal_moves(
                player.to_player(), selected.to_square(), room_model.players
            )

        return PossibleMovesResponse(
            player=player,
            selected_piece=selected,
            possible_moves=[MoveOptionSchema.from_option(option) for option in options],
        )

    # -- Internal helpers --
    def _load_game(self, room: RoomModel) -> Game:
        """The host only has a state once on_room_start ran."""
        if room.state is None:
            raise GameStateError("Room has no game state. Was the room started?")
        return Game.from_model(room.state, self.rules)

    def _create_result(self, model: RoomResultModel) -> RoomResult:
        return RoomResult.from_model(model)

    def _describe_winner(self, winner: Optional[Player]) -> str:
        return winner.username if winner else "nobody (tie)"


@contextmanager
def _log_rejection(action: str, player: PlayerSchema) -> Generator[None, None, None]:
    """Log a refused action, then let the error propagate to the host."""
    try:
        yield
    except GameError as e:
        logger.warning("Rejected %s by %s: %s", action, player.username, e)
        raise
