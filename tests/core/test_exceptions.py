"""Unit tests for /src/core/exceptions.py"""

import pytest

from src.core.exceptions import (
    GameError,
    GameStateError,
    IllegalMoveError,
    IllegalSelectionError,
    InvalidPhaseError,
    InvalidRequestError,
    OutOfTurnError,
)


@pytest.mark.parametrize(
    "error_type",
    [
        InvalidPhaseError,
        OutOfTurnError,
        IllegalSelectionError,
        IllegalMoveError,
        GameStateError,
        InvalidRequestError,
    ],
)
def test_all_errors_are_game_errors(error_type: type[GameError]) -> None:
    """The host catches GameError to reject an action"""
    with pytest.raises(GameError):
        raise error_type("nope")


def test_errors_are_not_value_errors() -> None:
    """pydantic would wrap a ValueError raised in a validator into a ValidationError"""
    assert not issubclass(InvalidRequestError, ValueError)
