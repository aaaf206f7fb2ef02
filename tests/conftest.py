"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures required for testing multiple layers.
"""

from typing import Callable, Optional

import pytest

from src.checkers.board import Board
from src.checkers.game import Game
from src.checkers.pieces import Owner, Piece
from src.checkers.square import Square
from src.core.config import RulesConfig
from src.core.models import Player
from src.core.shared_types import Status

# (row, col) -> piece tag ("1", "11", "2", "22")
Placements = dict[tuple[int, int], str]


@pytest.fixture
def alice() -> Player:
    """Player 1: first to join, moves up the board"""
    return Player(id="id-alice", username="alice")


@pytest.fixture
def bob() -> Player:
    """Player 2: second to join, moves down the board"""
    return Player(id="id-bob", username="bob")


@pytest.fixture
def players(alice: Player, bob: Player) -> list[Player]:
    return [alice, bob]


@pytest.fixture
def make_board() -> Callable[[Placements], Board]:
    """Build a board with only the given pieces on it."""

    def _make_board(placements: Placements) -> Board:
        board = Board()
        for (row, col), tag in placements.items():
            board.place_piece(Piece.from_tag(tag), Square(row, col))
        return board

    return _make_board


@pytest.fixture
def make_game(
    make_board: Callable[[Placements], Board],
) -> Callable[..., Game]:
    """Build a game in progress on a custom board. Counters default to the pieces actually on the board."""

    def _make_game(
        placements: Placements,
        to_move: int = 0,
        rules: Optional[RulesConfig] = None,
        remaining: Optional[dict[Owner, int]] = None,
    ) -> Game:
        board = make_board(placements)
        counters = remaining or {owner: board.count_pieces(owner) for owner in Owner}
        return Game(
            board=board,
            status=Status.IN_GAME,
            remaining=counters,
            player_to_move_index=to_move,
            rules=rules or RulesConfig(),
        )

    return _make_game
