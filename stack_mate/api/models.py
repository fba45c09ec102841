"""Requests and Response models"""

from typing import Optional

from pydantic import BaseModel, Field

from stack_mate.core.shared_types import Color, Status

PlayerName = str


# --- REQUEST MODELS ---
class StartGameRequest(BaseModel):
    player_name: PlayerName
    # NOTE: not restricted to Difficulty here. The domain layer rejects unknown values with its own error code.
    difficulty: int


class MoveRequest(BaseModel):
    game_id: int
    player_name: PlayerName
    from_pos: int
    to_pos: int


class ComputerMoveRequest(BaseModel):
    game_id: int
    player_name: PlayerName


class ResignRequest(BaseModel):
    game_id: int
    player_name: PlayerName


class GetGameRequest(BaseModel):
    game_id: int


class PieceRequest(BaseModel):
    game_id: int
    pos: int


class PlayerGameRequest(BaseModel):
    player_name: PlayerName


class ValidateMoveRequest(BaseModel):
    """No player here: validating only looks at the board, not at who asks or whose turn it is."""

    game_id: int
    from_pos: int
    to_pos: int


# --- BODIES OF HTTP REQUESTS (game id and player come from the path / header) ---
class StartGameBody(BaseModel):
    difficulty: int


class MoveBody(BaseModel):
    from_pos: int
    to_pos: int


# --- RESPONSE MODELS ---
class GameCreatedResponse(BaseModel):
    game_id: int


class MoveResponse(BaseModel):
    game_id: int
    success: bool = True
    status: Status
    move_count: int
    white_turn: bool


class ComputerMoveResponse(BaseModel):
    """from_pos/to_pos/move are None when the computer had no move to play (the game is finished then)."""

    game_id: int
    from_pos: Optional[int]
    to_pos: Optional[int]
    move: Optional[str]
    status: Status
    move_count: int
    white_turn: bool


class GameResponse(BaseModel):
    game_id: int
    owner: PlayerName
    board: list[int] = Field(min_length=64, max_length=64)
    difficulty: int
    white_turn: bool
    status: Status
    move_count: int
    winner: Optional[Color]
    move_history: list[str]


class StatusResponse(BaseModel):
    game_id: int
    status: Status
    move_count: int
    white_turn: bool
    winner: Optional[Color]


class BoardResponse(BaseModel):
    game_id: int
    board: list[int] = Field(min_length=64, max_length=64)
    fen_position: str


class PieceResponse(BaseModel):
    game_id: int
    pos: int
    piece: int


class PlayerGameResponse(BaseModel):
    player_name: PlayerName
    game_id: int


class ValidateMoveResponse(BaseModel):
    game_id: int
    from_pos: int
    to_pos: int
    valid: bool


class ErrorResponse(BaseModel):
    code: int
    error: str
    detail: str
