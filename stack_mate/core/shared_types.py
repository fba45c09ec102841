"""
Type definitions used across layers
"""

from enum import IntEnum, StrEnum


class Status(StrEnum):
    ACTIVE = "active"
    RESIGNED = "resigned"
    FINISHED = "finished"


class Difficulty(IntEnum):
    EASY = 1
    HARD = 2


# --- NOTE the domain layer has its own Color enum (incl. NONE for empty squares). This one is what crosses the boundary.
class Color(StrEnum):
    WHITE = "white"
    BLACK = "black"
