"""
Custom exceptions shared by all layers.

Everything derives from GameError, so the service / host can catch a single type and reject the action.
(None of these derive from ValueError: pydantic validators let them propagate instead of wrapping them in a ValidationError)
"""


class GameError(Exception):
    """Top-level error for anything the engine refuses to do."""


# --- RULE VIOLATIONS ---
class InvalidPhaseError(GameError):
    """Transition attempted outside the phase it requires (ex. moving before the game started)."""


class OutOfTurnError(GameError):
    """The player acting is not the player whose turn it is."""


class IllegalSelectionError(GameError):
    """The selected square does not hold a piece of the acting player."""


class IllegalMoveError(GameError):
    """The submitted move is not one of the generated legal moves."""


# --- MALFORMED DATA ---
class GameStateError(GameError):
    """The state document handed to the engine cannot be interpreted."""


class InvalidRequestError(GameError):
    """A request payload failed validation."""
