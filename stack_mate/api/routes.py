"""
HTTP routes. Thin layer: build the request model, call the service, return its response.

The caller's identity comes from the `X-Player` header. Verifying that identity is the job of whatever sits in front
of this API.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Header, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from stack_mate.api.models import (
    BoardResponse,
    ComputerMoveRequest,
    ComputerMoveResponse,
    ErrorResponse,
    GameCreatedResponse,
    GameResponse,
    GetGameRequest,
    MoveBody,
    MoveRequest,
    MoveResponse,
    PieceRequest,
    PieceResponse,
    PlayerGameRequest,
    PlayerGameResponse,
    ResignRequest,
    StartGameBody,
    StartGameRequest,
    StatusResponse,
    ValidateMoveRequest,
    ValidateMoveResponse,
)
from stack_mate.core.exceptions import (
    GameError,
    GameNotFoundError,
    GameOverError,
    NotAuthorizedError,
    NotYourTurnError,
)
from stack_mate.db.database import get_db
from stack_mate.db.sql_repository import SQLGameRepository
from stack_mate.services.chess_service import ChessService

router = APIRouter()

HTTP_STATUS_BY_ERROR: dict[type[GameError], int] = {
    NotAuthorizedError: status.HTTP_403_FORBIDDEN,
    GameNotFoundError: status.HTTP_404_NOT_FOUND,
    NotYourTurnError: status.HTTP_409_CONFLICT,
    GameOverError: status.HTTP_409_CONFLICT,
}


def get_service(db: Session = Depends(get_db)) -> ChessService:
    return ChessService(SQLGameRepository(db))


Service = Annotated[ChessService, Depends(get_service)]
Player = Annotated[str, Header(alias="X-Player")]


async def game_error_handler(request: Request, exc: GameError) -> JSONResponse:
    """Every domain error becomes a JSON body carrying its numeric code."""
    http_status = HTTP_STATUS_BY_ERROR.get(
        type(exc), status.HTTP_400_BAD_REQUEST
    )
    body = ErrorResponse(code=exc.code, error=type(exc).__name__, detail=str(exc))
    return JSONResponse(status_code=http_status, content=body.model_dump())


# --- MUTATING ROUTES ---
@router.post(
    "/games", response_model=GameCreatedResponse, status_code=status.HTTP_201_CREATED
)
def start_game(body: StartGameBody, player: Player, service: Service):
    return service.start_game(
        StartGameRequest(player_name=player, difficulty=body.difficulty)
    )


@router.post("/games/{game_id}/moves", response_model=MoveResponse)
def make_move(game_id: int, body: MoveBody, player: Player, service: Service):
    return service.make_move(
        MoveRequest(
            game_id=game_id,
            player_name=player,
            from_pos=body.from_pos,
            to_pos=body.to_pos,
        )
    )


@router.post("/games/{game_id}/computer-move", response_model=ComputerMoveResponse)
def computer_move(game_id: int, player: Player, service: Service):
    return service.computer_move(
        ComputerMoveRequest(game_id=game_id, player_name=player)
    )


@router.post("/games/{game_id}/resign", response_model=MoveResponse)
def resign_game(game_id: int, player: Player, service: Service):
    return service.resign_game(ResignRequest(game_id=game_id, player_name=player))


# --- READ-ONLY ROUTES ---
@router.get("/games/{game_id}", response_model=GameResponse)
def get_game(game_id: int, service: Service):
    return service.get_game(GetGameRequest(game_id=game_id))


@router.get("/games/{game_id}/status", response_model=StatusResponse)
def get_game_status(game_id: int, service: Service):
    return service.get_game_status(GetGameRequest(game_id=game_id))


@router.get("/games/{game_id}/board", response_model=BoardResponse)
def get_board(game_id: int, service: Service):
    return service.get_board(GetGameRequest(game_id=game_id))


@router.get("/games/{game_id}/pieces/{pos}", response_model=PieceResponse)
def get_piece_at(game_id: int, pos: int, service: Service):
    return service.get_piece_at(PieceRequest(game_id=game_id, pos=pos))


@router.get("/games/{game_id}/validate", response_model=ValidateMoveResponse)
def validate_move(game_id: int, from_pos: int, to_pos: int, service: Service):
    return service.validate_move(
        ValidateMoveRequest(game_id=game_id, from_pos=from_pos, to_pos=to_pos)
    )


@router.get("/players/me/game", response_model=PlayerGameResponse)
def get_player_game(player: Player, service: Service):
    return service.get_player_game(PlayerGameRequest(player_name=player))
