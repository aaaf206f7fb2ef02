"""
Type definitions used across layers
"""

from enum import StrEnum


class Status(StrEnum):
    PRE_GAME = "preGame"
    IN_GAME = "inGame"
    END_GAME = "endGame"


class MoveKind(StrEnum):
    JUMP = "jump"
    REGULAR = "regular"
