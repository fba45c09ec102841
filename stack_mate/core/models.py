"""
Boundary layer data model(s).

These objects can be used to communicate with the Service.
Both the API layer (higher) and domain/db layers (lower) use the model defined here to send to/receive from the Service.
(Decouples the data model specific to the DB layer, API layer, or domain layer from the information needed to send across boundaries)
"""

from dataclasses import dataclass, field
from typing import Optional

# Type aliases to make GameModel easier to read
PieceCode = int
PlayerName = str


@dataclass
class GameModel:
    """Transport-safe representation of a game used between API, Service, DB, and Game layers."""

    board: list[PieceCode]
    owner: PlayerName
    difficulty: int
    white_turn: bool
    status: str
    move_count: int
    winner: Optional[str] = None
    moves: list[str] = field(default_factory=list)
