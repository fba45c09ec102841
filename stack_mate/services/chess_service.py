"""Orchestration of communication from API router to business logic and persistence layers (and the reverse direction)."""

import logging

from stack_mate.api.models import (
    BoardResponse,
    ComputerMoveRequest,
    ComputerMoveResponse,
    GameCreatedResponse,
    GameResponse,
    GetGameRequest,
    MoveRequest,
    MoveResponse,
    PieceRequest,
    PieceResponse,
    PlayerGameRequest,
    PlayerGameResponse,
    ResignRequest,
    StartGameRequest,
    StatusResponse,
    ValidateMoveRequest,
    ValidateMoveResponse,
)
from stack_mate.chess.game import Game
from stack_mate.core.exceptions import GameNotFoundError, InvalidPositionError
from stack_mate.core.models import GameModel
from stack_mate.db.repository import GameRepository

logger = logging.getLogger(__name__)


class ChessService:
    """
    Orchestration of layers for a game against the computer.

    Every mutating call follows the same steps: fetch (or fail with GameNotFound), let the Game apply the change,
    store the result once. A failing check raises before anything gets stored.
    """

    def __init__(self, repository: GameRepository) -> None:
        self.repo = repository

    # -- MUTATING OPERATIONS ---
    def start_game(self, request: StartGameRequest) -> GameCreatedResponse:
        """Player requested to start a new game against the computer."""

        # Use info in StartGameRequest to create a new Game, and convert into GameModel
        new_game = Game.new_game(player=request.player_name, difficulty=request.difficulty)

        # Store the GameModel in the repository (also makes it the player's current game)
        _, game_id = self.repo.create_game(new_game.to_model())
        logger.info(
            "Player %r started game %d (%s)",
            request.player_name,
            game_id,
            new_game.difficulty.name.lower(),
        )
        return GameCreatedResponse(game_id=game_id)

    def make_move(self, request: MoveRequest) -> MoveResponse:
        """Make a move attempt."""

        # Create a new Game instance from the retrieved GameModel
        game = Game.from_model(self._fetch_game(request.game_id))

        # Attempt the move
        game.make_move(request.from_pos, request.to_pos, request.player_name)

        # Capture updated state in GameModel and store in repository
        after_move = self._store(request.game_id, game)
        return self._create_move_response(request.game_id, after_move)

    def computer_move(self, request: ComputerMoveRequest) -> ComputerMoveResponse:
        """Let the computer reply."""

        game = Game.from_model(self._fetch_game(request.game_id))
        move = game.computer_move(request.player_name, request.game_id)
        after_move = self._store(request.game_id, game)

        return ComputerMoveResponse(
            game_id=request.game_id,
            from_pos=move.from_pos if move else None,
            to_pos=move.to_pos if move else None,
            move=move.to_uci() if move else None,
            status=after_move.status,
            move_count=after_move.move_count,
            white_turn=after_move.white_turn,
        )

    def resign_game(self, request: ResignRequest) -> MoveResponse:
        """Owner gives up the game."""

        game = Game.from_model(self._fetch_game(request.game_id))
        game.resign(request.player_name)
        after_resign = self._store(request.game_id, game)
        logger.info("Player %r resigned game %d", request.player_name, request.game_id)
        return self._create_move_response(request.game_id, after_resign)

    # -- READ-ONLY QUERIES ---
    def get_game(self, request: GetGameRequest) -> GameResponse:
        """Full record of the game."""
        model = self._fetch_game(request.game_id)
        return GameResponse(
            game_id=request.game_id,
            owner=model.owner,
            board=model.board,
            difficulty=model.difficulty,
            white_turn=model.white_turn,
            status=model.status,
            move_count=model.move_count,
            winner=model.winner,
            move_history=model.moves,
        )

    def get_game_status(self, request: GetGameRequest) -> StatusResponse:
        """
        Retrieve current game state.
        ----
        Used in "polling" loop by frontend to check when it is the player's turn for instance.
        """
        model = self._fetch_game(request.game_id)
        return StatusResponse(
            game_id=request.game_id,
            status=model.status,
            move_count=model.move_count,
            white_turn=model.white_turn,
            winner=model.winner,
        )

    def get_board(self, request: GetGameRequest) -> BoardResponse:
        game = Game.from_model(self._fetch_game(request.game_id))
        return BoardResponse(
            game_id=request.game_id,
            board=game.board.cells,
            fen_position=game.board.to_fen(),
        )

    def get_piece_at(self, request: PieceRequest) -> PieceResponse:
        game = Game.from_model(self._fetch_game(request.game_id))
        piece = game.board.piece_at(request.pos)
        if piece is None:
            raise InvalidPositionError(
                f"Position {request.pos} is not on the board (0-63)."
            )
        return PieceResponse(game_id=request.game_id, pos=request.pos, piece=piece)

    def get_player_game(self, request: PlayerGameRequest) -> PlayerGameResponse:
        """The game the player started last."""
        game_id = self.repo.get_player_game(request.player_name)
        if game_id is None:
            raise GameNotFoundError(
                f"Player {request.player_name!r} has not started any game."
            )
        return PlayerGameResponse(player_name=request.player_name, game_id=game_id)

    def validate_move(self, request: ValidateMoveRequest) -> ValidateMoveResponse:
        """
        Would this move be legal for the human player? Only looks at the board:
        no ownership check, no turn check, no game status check.
        """
        game = Game.from_model(self._fetch_game(request.game_id))
        return ValidateMoveResponse(
            game_id=request.game_id,
            from_pos=request.from_pos,
            to_pos=request.to_pos,
            valid=game.is_legal_move(request.from_pos, request.to_pos),
        )

    # -- Internal helpers --
    def _create_move_response(self, game_id: int, model: GameModel) -> MoveResponse:
        return MoveResponse(
            game_id=game_id,
            status=model.status,
            move_count=model.move_count,
            white_turn=model.white_turn,
        )

    def _fetch_game(self, game_id: int) -> GameModel:
        """Attempt to find the game in the repository and raise error if it fails."""
        game_model = self.repo.get_game(game_id)
        if game_model is None:
            raise GameNotFoundError(f"Game with {game_id=} not found.")
        return game_model

    def _store(self, game_id: int, game: Game) -> GameModel:
        stored = self.repo.update_game(game_id, game.to_model())
        if stored is None:
            raise GameNotFoundError(f"Game with {game_id=} not found.")
        return stored
