"""
The Game class is the entrypoint into the domain layer for the service layer.
It owns the state document of one room and the transitions on it: start, join, move, quit.

Every move gets re-validated against the board (a client's highlighted squares are never taken at face value).
All checks are done before anything gets written, so a rejected request leaves the Game untouched.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional, Self

from src.checkers.board import Board
from src.checkers.moves import (
    Move,
    MoveOption,
    assert_selectable,
    has_jump,
    jump_moves,
    legal_moves,
    movable_squares,
)
from src.checkers.pieces import Owner
from src.checkers.square import Square
from src.core.config import RulesConfig
from src.core.exceptions import (
    GameStateError,
    IllegalMoveError,
    IllegalSelectionError,
    InvalidPhaseError,
    OutOfTurnError,
)
from src.core.models import GameModel, MoveDetailsModel, Player
from src.core.shared_types import MoveKind, Status

logger = logging.getLogger(__name__)

PIECES_PER_PLAYER = 12
PLAYERS_PER_GAME = 2


@dataclass(frozen=True)
class MoveDetails:
    """What happened last. Lets a client animate the move (or resume a jump chain)"""

    kind: MoveKind
    piece_location: Square


@dataclass
class Game:
    # --- DOMAIN LAYER API CALLED BY SERVICE---

    board: Board
    status: Status
    remaining: dict[Owner, int]
    player_to_move_index: Optional[int] = None
    last_move: Optional[MoveDetails] = None
    winner: Optional[Player] = None
    # AwaitingContinuation: the piece on this square just jumped and can jump again.
    # Only jumps from here (or, with forced_continuation off, switch_player) are accepted.
    pending_jump: Optional[Square] = None
    rules: RulesConfig = field(default_factory=RulesConfig, compare=False)

    @classmethod
    def new_game(cls, rules: Optional[RulesConfig] = None) -> Self:
        """The room just started: opening layout, nobody to move yet."""
        return cls(
            board=Board.starting_position(),
            status=Status.PRE_GAME,
            remaining={
                Owner.PLAYER_ONE: PIECES_PER_PLAYER,
                Owner.PLAYER_TWO: PIECES_PER_PLAYER,
            },
            rules=rules or RulesConfig(),
        )

    @classmethod
    def from_model(cls, model: GameModel, rules: Optional[RulesConfig] = None) -> Self:
        """Define how to construct a Game from the information the Service layer actually has"""

        # Validation
        try:
            status = Status(model.status)
        except ValueError as e:
            raise GameStateError(
                f"Invalid status code: {model.status!r}. \nPick one from {','.join(status.value for status in Status)}"
            ) from e

        if model.player_one_remaining < 0 or model.player_two_remaining < 0:
            raise GameStateError("Remaining piece counters cannot be negative.")

        if model.player_to_move_index is not None:
            # raises on anything but 0 / 1
            Owner.from_index(model.player_to_move_index)

        last_move: Optional[MoveDetails] = None
        if model.move_details:
            try:
                kind = MoveKind(model.move_details.move_kind)
            except ValueError as e:
                raise GameStateError(
                    f"Invalid move kind: {model.move_details.move_kind!r}. \nPick one from {','.join(move_kind.value for move_kind in MoveKind)}"
                ) from e
            last_move = MoveDetails(
                kind=kind,
                piece_location=Square.from_location(model.move_details.piece_location),
            )
        pending_jump = (
            Square.from_location(model.pending_jump) if model.pending_jump else None
        )

        return cls(
            board=Board.from_grid(model.board),
            status=status,
            remaining={
                Owner.PLAYER_ONE: model.player_one_remaining,
                Owner.PLAYER_TWO: model.player_two_remaining,
            },
            player_to_move_index=model.player_to_move_index,
            last_move=last_move,
            winner=model.winner,
            pending_jump=pending_jump,
            rules=rules or RulesConfig(),
        )

    def to_model(self) -> GameModel:
        """Encode back into a format the Service layer uses"""
        return GameModel(
            board=self.board.to_grid(),
            status=self.status.value,
            player_one_remaining=self.remaining[Owner.PLAYER_ONE],
            player_two_remaining=self.remaining[Owner.PLAYER_TWO],
            player_to_move_index=self.player_to_move_index,
            move_details=(
                MoveDetailsModel(
                    move_kind=self.last_move.kind.value,
                    piece_location=self.last_move.piece_location.to_location(),
                )
                if self.last_move
                else None
            ),
            winner=self.winner,
            pending_jump=self.pending_jump.to_location() if self.pending_jump else None,
        )

    @property
    def finished(self) -> bool:
        return self.status == Status.END_GAME

    def join(self, players: list[Player]) -> bool:
        """
        A player joined the room. `players` is the room's list, the new player included.
        Returns whether the room should stay joinable.
        """
        self._assert_status(Status.PRE_GAME)

        if len(players) < PLAYERS_PER_GAME:
            return True

        # second player in: the game starts, player one moves first
        self.player_to_move_index = Owner.PLAYER_ONE.index
        self._change_status(Status.IN_GAME)
        return False

    def legal_moves(
        self, player: Player, square: Square, players: list[Player]
    ) -> list[MoveOption]:
        """
        Options for the selected piece. Used by the presentation layer to highlight destinations.
        ----

        1. Check the game is running and it is your turn
        2. Generate the options (only jumps from the jumping piece while a chain is pending)
        """
        self._assert_status(Status.IN_GAME)
        self._assert_your_turn(player, players)
        return self._generate_options(square, self._get_turn_owner())

    def make_move(self, player: Player, move: Move, players: list[Player]) -> None:
        """
        Attempt to make a move
        -----

        1. game must be in progress and it must be your turn
        2. switch_player requests just hand the turn over
        3. the move must be one of the generated options for the piece
        4. update the board (relocate, capture, crown)
        5. check for end of game
        6. hand over the turn, unless the piece has to keep jumping
        """
        # make sure the game is (still) in progress
        self._assert_status(Status.IN_GAME)

        # make sure it is your turn
        self._assert_your_turn(player, players)

        if move.switch_player:
            self._switch_player(players)
            return

        mover = self._get_turn_owner()
        self._assert_legal(move, mover)

        crowned = self._update_board(move, mover)
        self.last_move = MoveDetails(kind=move.kind, piece_location=move.to_square)
        logger.debug(
            "%s moved %s -> %s (%s)",
            player.username,
            move.from_square,
            move.to_square,
            move.kind.value,
        )

        if self._update_game_status(players):
            return

        self._advance_turn(move, crowned, players)

    def quit(self, players: list[Player]) -> None:
        """
        A player left. `players` is what remains of the room.
        Whoever is left alone wins, otherwise nobody does.
        """
        if self.finished:
            # already decided: keep the original result
            return

        self.pending_jump = None
        self.winner = players[0] if len(players) == 1 else None
        self._change_status(Status.END_GAME)

    # -- PRIVATE HELPERS ---
    def _get_turn_owner(self) -> Owner:
        if self.player_to_move_index is None:
            raise GameStateError("Game is in progress, but nobody is set to move.")
        return Owner.from_index(self.player_to_move_index)

    def _get_turn_player(self, players: list[Player]) -> Player:
        owner = self._get_turn_owner()
        if len(players) < PLAYERS_PER_GAME:
            raise GameStateError(
                f"Room has {len(players)} player(s), a game in progress needs {PLAYERS_PER_GAME}."
            )
        return players[owner.index]

    def _assert_status(self, expected: Status) -> None:
        if self.status != expected:
            raise InvalidPhaseError(
                f"Cannot do this now. Game status is {self.status.value!r}, needs to be {expected.value!r}."
            )

    def _assert_your_turn(self, player: Player, players: list[Player]) -> None:
        """You must wait for your turn before looking for moves / making a move."""
        player_to_move = self._get_turn_player(players)
        if player.id != player_to_move.id:
            raise OutOfTurnError(
                f"It is not this player's turn: {player.username}. Waiting for {player_to_move.username}."
            )

    def _generate_options(self, square: Square, owner: Owner) -> list[MoveOption]:
        if self.pending_jump is not None:
            if square != self.pending_jump:
                raise IllegalSelectionError(
                    f"You must continue jumping with the piece on {self.pending_jump}."
                )
            assert_selectable(square, self.board, owner)
            return jump_moves(square, self.board)
        return legal_moves(square, self.board, owner, self.rules.mandatory_capture)

    def _assert_legal(self, move: Move, owner: Owner) -> None:
        if move.from_square is None or move.to_square is None:
            raise IllegalMoveError("A move needs both a starting and a target square.")

        if self.pending_jump is not None and move.from_square != self.pending_jump:
            raise IllegalMoveError(
                f"You must continue jumping with the piece on {self.pending_jump}."
            )

        options = self._generate_options(move.from_square, owner)
        if not any(move.matches(option) for option in options):
            raise IllegalMoveError(
                f"Move not allowed: {move.from_square} -> {move.to_square}"
            )

    def _update_board(self, move: Move, owner: Owner) -> bool:
        """Relocate, capture, crown. Returns True if the piece got crowned by this move."""
        # for the type checker: _assert_legal made sure of this
        assert move.from_square is not None and move.to_square is not None

        piece = self.board.move_piece(move.from_square, move.to_square)

        if move.captured is not None:
            self.board.remove_piece(move.captured)
            self.remaining[owner.opponent] -= 1

        if not piece.is_king and move.to_square.row == owner.crowning_row:
            self.board.place_piece(piece.crowned(), move.to_square)
            return True
        return False

    def _update_game_status(self, players: list[Player]) -> bool:
        """A player without pieces lost. Returns True if the game ended."""
        for owner in Owner:
            if self.remaining[owner] == 0:
                self._end_with_winner(players[owner.opponent.index])
                return True
        return False

    def _advance_turn(self, move: Move, crowned: bool, players: list[Player]) -> None:
        """
        After a jump, the same piece keeps going while it can (crowning ends the chain).
        With forced_continuation off the player may stop the chain with switch_player instead.
        Otherwise the turn passes: here, or (with auto_advance_turn off) with the next switch_player request.
        """
        assert move.to_square is not None

        can_continue = (
            move.kind == MoveKind.JUMP
            and not crowned
            and has_jump(move.to_square, self.board)
        )
        if can_continue:
            self.pending_jump = move.to_square
            return

        self.pending_jump = None
        if self.rules.auto_advance_turn:
            self._pass_turn(players)

    def _switch_player(self, players: list[Player]) -> None:
        """Explicit request to end your turn"""
        if self.pending_jump is not None and self.rules.forced_continuation:
            raise IllegalMoveError(
                f"Cannot end your turn. The piece on {self.pending_jump} must keep jumping."
            )
        self.last_move = None
        self.pending_jump = None
        self._pass_turn(players)

    def _pass_turn(self, players: list[Player]) -> None:
        next_owner = self._get_turn_owner().opponent
        self.player_to_move_index = next_owner.index

        # no legal move left at all? Then you lost.
        if self.rules.blocked_player_loses and not movable_squares(
            self.board, next_owner, self.rules.mandatory_capture
        ):
            logger.info("Player %d cannot move", next_owner.index + 1)
            self._end_with_winner(players[next_owner.opponent.index])

    def _end_with_winner(self, winner: Player) -> None:
        self.winner = winner
        self.pending_jump = None
        self._change_status(Status.END_GAME)

    def _change_status(self, new_status: Status) -> None:
        logger.info("Game status %s -> %s", self.status.value, new_status.value)
        self.status = new_status
