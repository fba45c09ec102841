"""
The Game class is the entrypoint into the domain layer for the service layer.
It is responsible for orchestrating all the business logic required to play a turn: who may move, whether the game
is still going, whose turn it is, and whether the move itself is legal. The service layer fetches/stores the game.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional, Self

from stack_mate.chess.agent import COMPUTER_COLOR, HUMAN_COLOR, move_seed, select_move
from stack_mate.chess.board import Board
from stack_mate.chess.moves import Move, is_legal
from stack_mate.chess.pieces import Color, PieceType, piece_type
from stack_mate.core.exceptions import (
    GameError,
    GameOverError,
    InvalidDifficultyError,
    InvalidMoveError,
    NotAuthorizedError,
    NotYourTurnError,
)
from stack_mate.core.models import GameModel
from stack_mate.core.shared_types import Difficulty, Status

logger = logging.getLogger(__name__)


def parse_difficulty(value: int) -> Difficulty:
    try:
        return Difficulty(value)
    except ValueError:
        raise InvalidDifficultyError(
            f"Unknown difficulty {value!r}. Pick one from {','.join(str(d.value) for d in Difficulty)}"
        ) from None


@dataclass
class Game:
    # --- DOMAIN LAYER API CALLED BY SERVICE---

    board: Board
    owner: str
    difficulty: Difficulty
    white_turn: bool = True
    status: Status = Status.ACTIVE
    move_count: int = 0
    winner: Optional[Color] = None
    moves: list[Move] = field(default_factory=list)

    @classmethod
    def new_game(cls, player: str, difficulty: int) -> Self:
        """Human player (white) starts a game against the computer from the standard starting position."""
        return cls(
            board=Board.starting_position(),
            owner=player,
            difficulty=parse_difficulty(difficulty),
        )

    @classmethod
    def from_model(cls, model: GameModel) -> Self:
        """Define how to construct a Game from the information the Service layer actually has"""

        # Validation
        if model.status not in {status.value for status in Status}:
            raise GameError(
                f"Invalid status: {model.status!r}. \nPick one from {','.join(status.value for status in Status)}"
            )

        return cls(
            board=Board(list(model.board)),
            owner=model.owner,
            difficulty=parse_difficulty(model.difficulty),
            white_turn=model.white_turn,
            status=Status(model.status),
            move_count=model.move_count,
            winner=Color(model.winner) if model.winner else None,
            moves=[Move.from_uci(uci) for uci in model.moves],
        )

    def to_model(self) -> GameModel:
        """Encode back into a format the Service layer uses"""

        return GameModel(
            board=list(self.board.cells),
            owner=self.owner,
            difficulty=int(self.difficulty),
            white_turn=self.white_turn,
            status=self.status.value,
            move_count=self.move_count,
            winner=self.winner.value if self.winner else None,
            moves=[move.to_uci() for move in self.moves],
        )

    def is_legal_move(self, from_pos: int, to_pos: int) -> bool:
        """Read-only: would the human (white) be allowed to make this move on the current board? Ignores whose turn it is."""
        return is_legal(self.board, from_pos, to_pos, HUMAN_COLOR)

    def make_move(self, from_pos: int, to_pos: int, player: str) -> None:
        """
        The human player attempts a move
        -----

        1. only the owner may play
        2. the game must still be active
        3. it must be white's turn
        4. the move must be legal for white
        5. update the board, counters, and the game status
        """
        self._assert_owner(player)
        self._assert_active()
        if not self.white_turn:
            raise NotYourTurnError(
                "It is not your turn. Waiting for the computer to make a move first."
            )

        if not is_legal(self.board, from_pos, to_pos, HUMAN_COLOR):
            logger.debug("Rejected move %d -> %d by %s", from_pos, to_pos, player)
            raise InvalidMoveError(f"Move not allowed: {from_pos} -> {to_pos}")

        self._apply_move(Move(from_pos, to_pos), HUMAN_COLOR)

    def computer_move(self, player: str, game_id: int) -> Optional[Move]:
        """
        The owner asks the computer (black) to reply.
        -----

        Returns the move the computer made.
        Returns None if the computer has no legal move left: the game is then FINISHED, nothing else changes.
        """
        self._assert_owner(player)
        self._assert_active()
        if self.white_turn:
            raise NotYourTurnError(
                "It is not the computer's turn. Waiting for you to make a move first."
            )

        move = select_move(
            self.board, self.difficulty, move_seed(game_id, self.move_count)
        )
        if move is None:
            self._change_status(Status.FINISHED)
            return None

        self._apply_move(move, COMPUTER_COLOR)
        return move

    def resign(self, player: str) -> None:
        """Owner gives up. Resigning twice is just a move on a game that is over."""
        self._assert_owner(player)
        self._assert_active()
        self._change_status(Status.RESIGNED)

    # -- PRIVATE HELPERS ---
    def _assert_owner(self, player: str) -> None:
        if player != self.owner:
            raise NotAuthorizedError(f"Player {player!r} does not own this game.")

    def _assert_active(self) -> None:
        if self.status != Status.ACTIVE:
            raise GameOverError(f"Game is not active. status: {self.status}")

    def _apply_move(self, move: Move, color: Color) -> None:
        """Update the board, move history, counters, and turn. Then check if the game has ended."""
        captured = self.board.move_piece(move)
        self.moves.append(move)
        self.move_count += 1
        self.white_turn = color == COMPUTER_COLOR
        logger.info(
            "%s played %s (move %d)", color.value, move.to_uci(), self.move_count
        )
        self._update_game_status(captured, color)

    def _update_game_status(self, captured: int, mover: Color) -> None:
        """Capturing the opponent's king ends the game."""
        if piece_type(captured) == PieceType.KING:
            self.winner = mover
            self._change_status(Status.FINISHED)

    def _change_status(self, new_status: Status) -> None:
        logger.info("Game of %s: %s -> %s", self.owner, self.status, new_status)
        self.status = new_status
