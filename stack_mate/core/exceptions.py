"""
Custom exceptions used across layers.

Every expected failure of a public operation is one of these. The `code` is part of the external contract:
clients rely on the exact numbers, so never renumber them.
"""


class GameError(Exception):
    """Top-level exception for anything that goes wrong while playing a game."""

    code: int = 0


class NotAuthorizedError(GameError):
    code = 100


class GameNotFoundError(GameError):
    code = 101


class InvalidMoveError(GameError):
    code = 102


class NotYourTurnError(GameError):
    code = 103


class GameOverError(GameError):
    code = 104


# NOTE: 105 is reserved. No exception uses it.


class InvalidDifficultyError(GameError):
    code = 106


class InvalidPositionError(GameError):
    code = 107
