"""
Rule switches.

Defaults give standard draughts behaviour. The original room host script was more permissive:
`RulesConfig.reference()` reproduces that one.
"""

import os
from dataclasses import dataclass
from typing import Self

ENV_PREFIX = "CHECKERS_"
TRUE_VALUES = {"1", "true", "yes", "on"}


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(f"{ENV_PREFIX}{name}")
    if value is None:
        return default
    return value.strip().lower() in TRUE_VALUES


@dataclass(frozen=True)
class RulesConfig:
    # no regular moves for a piece that can capture
    mandatory_capture: bool = True
    # after a jump the same piece must keep jumping while it can
    forced_continuation: bool = True
    # pass the turn inside the move itself (no separate switch_player round-trip needed)
    auto_advance_turn: bool = True
    # a player without any legal move on their turn loses
    blocked_player_loses: bool = True

    @classmethod
    def from_env(cls) -> Self:
        """Read the CHECKERS_* environment variables, falling back to the defaults."""
        defaults = cls()
        return cls(
            mandatory_capture=_env_flag("MANDATORY_CAPTURE", defaults.mandatory_capture),
            forced_continuation=_env_flag(
                "FORCED_CONTINUATION", defaults.forced_continuation
            ),
            auto_advance_turn=_env_flag("AUTO_ADVANCE_TURN", defaults.auto_advance_turn),
            blocked_player_loses=_env_flag(
                "BLOCKED_PLAYER_LOSES", defaults.blocked_player_loses
            ),
        )

    @classmethod
    def reference(cls) -> Self:
        """Behaviour of the original room host: the client drives turn switching and jump chains."""
        return cls(
            mandatory_capture=False,
            forced_continuation=False,
            auto_advance_turn=False,
            blocked_player_loses=False,
        )
