"""Unit tests for /stack_mate/chess/game.py"""

from unittest.mock import patch

import pytest

from stack_mate.chess.board import STARTING_POSITION_FEN, Board
from stack_mate.chess.game import Game, parse_difficulty
from stack_mate.chess.moves import Move
from stack_mate.chess.pieces import Color
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

OWNER = "alice"
INTRUDER = "mallory"


@pytest.fixture
def game() -> Game:
    return Game.new_game(player=OWNER, difficulty=1)


# --- CREATING GAMES ---
def test_new_game() -> None:
    game = Game.new_game(player=OWNER, difficulty=2)
    assert game.board.to_fen() == STARTING_POSITION_FEN
    assert game.owner == OWNER
    assert game.difficulty == Difficulty.HARD
    assert game.white_turn is True
    assert game.status == Status.ACTIVE
    assert game.move_count == 0
    assert game.winner is None
    assert game.moves == []


@pytest.mark.parametrize("difficulty", [0, 3, 99, -1])
def test_new_game_with_unknown_difficulty(difficulty: int) -> None:
    with pytest.raises(InvalidDifficultyError) as exc_info:
        Game.new_game(player=OWNER, difficulty=difficulty)
    assert exc_info.value.code == 106


def test_parse_difficulty() -> None:
    assert parse_difficulty(1) == Difficulty.EASY
    assert parse_difficulty(2) == Difficulty.HARD


def test_model_conversion(game: Game) -> None:
    """to_model / from_model carry the full state"""
    game.make_move(52, 36, OWNER)
    model = game.to_model()
    assert model == GameModel(
        board=game.board.cells,
        owner=OWNER,
        difficulty=1,
        white_turn=False,
        status="active",
        move_count=1,
        winner=None,
        moves=["e2e4"],
    )
    assert Game.from_model(model) == game


def test_model_with_unknown_status() -> None:
    model = Game.new_game(OWNER, 1).to_model()
    model.status = "paused"
    with pytest.raises(GameError):
        Game.from_model(model)


# --- HUMAN MOVES ---
def test_make_move(game: Game) -> None:
    game.make_move(52, 36, OWNER)
    assert game.board.piece(36) == 1
    assert game.board.piece(52) == 0
    assert game.move_count == 1
    assert game.white_turn is False
    assert game.moves == [Move(52, 36)]


@pytest.mark.parametrize(
    "from_pos, to_pos",
    [
        (52, 28),  # three squares
        (52, 52),  # not moving
        (12, 20),  # black pawn
        (56, 48),  # onto own pawn
        (36, 28),  # empty square
        (100, 50),  # off the board
    ],
)
def test_make_illegal_move(game: Game, from_pos: int, to_pos: int) -> None:
    with pytest.raises(InvalidMoveError) as exc_info:
        game.make_move(from_pos, to_pos, OWNER)
    assert exc_info.value.code == 102
    # nothing changed
    assert game.move_count == 0
    assert game.white_turn is True
    assert game.board.to_fen() == STARTING_POSITION_FEN


def test_make_move_by_someone_else(game: Game) -> None:
    with pytest.raises(NotAuthorizedError) as exc_info:
        game.make_move(52, 36, INTRUDER)
    assert exc_info.value.code == 100


def test_make_move_twice(game: Game) -> None:
    game.make_move(52, 36, OWNER)
    with pytest.raises(NotYourTurnError) as exc_info:
        game.make_move(51, 35, OWNER)
    assert exc_info.value.code == 103


def test_make_move_after_resigning(game: Game) -> None:
    game.resign(OWNER)
    with pytest.raises(GameOverError) as exc_info:
        game.make_move(52, 36, OWNER)
    assert exc_info.value.code == 104


# --- ORDER OF CHECKS ---
def test_authorization_checked_before_status(game: Game) -> None:
    game.resign(OWNER)
    with pytest.raises(NotAuthorizedError):
        game.make_move(52, 36, INTRUDER)


def test_status_checked_before_turn(game: Game) -> None:
    game.make_move(52, 36, OWNER)
    game.resign(OWNER)
    with pytest.raises(GameOverError):
        game.make_move(51, 35, OWNER)
    with pytest.raises(GameOverError):
        game.computer_move(OWNER, game_id=1)


def test_turn_checked_before_legality(game: Game) -> None:
    game.make_move(52, 36, OWNER)
    with pytest.raises(NotYourTurnError):
        game.make_move(52, 28, OWNER)


# --- COMPUTER MOVES ---
def test_computer_move(game: Game) -> None:
    game.make_move(52, 36, OWNER)
    move = game.computer_move(OWNER, game_id=1)
    assert move is not None
    assert game.board.piece(move.to_pos) >= 7
    assert game.board.piece(move.from_pos) == 0
    assert game.move_count == 2
    assert game.white_turn is True
    assert game.moves[-1] == move


def test_computer_move_on_whites_turn(game: Game) -> None:
    with pytest.raises(NotYourTurnError) as exc_info:
        game.computer_move(OWNER, game_id=1)
    assert exc_info.value.code == 103


def test_computer_move_by_someone_else(game: Game) -> None:
    game.make_move(52, 36, OWNER)
    with pytest.raises(NotAuthorizedError):
        game.computer_move(INTRUDER, game_id=1)


def test_computer_move_is_reproducible() -> None:
    """Same game id, same moves: same replies"""
    replies = []
    for _ in range(2):
        game = Game.new_game(OWNER, 1)
        game.make_move(52, 36, OWNER)
        first = game.computer_move(OWNER, game_id=5)
        game.make_move(57, 42, OWNER)
        second = game.computer_move(OWNER, game_id=5)
        replies.append((first, second))
    assert replies[0] == replies[1]


def test_computer_without_moves_finishes_the_game() -> None:
    """Black's only piece is a blocked pawn: nothing to play, the game is over"""
    game = Game(
        board=Board.from_fen("8/p7/P7/8/8/8/8/4K3"),
        owner=OWNER,
        difficulty=Difficulty.EASY,
        white_turn=False,
        move_count=6,
    )
    assert game.computer_move(OWNER, game_id=1) is None
    assert game.status == Status.FINISHED
    assert game.winner is None
    # no move was made
    assert game.move_count == 6
    assert game.white_turn is False


def test_computer_move_uses_game_id_and_move_count_as_seed(game: Game) -> None:
    game.make_move(52, 36, OWNER)
    with patch("stack_mate.chess.game.select_move", return_value=Move(12, 28)) as mock_select:
        game.computer_move(OWNER, game_id=9)
    board, difficulty, seed = mock_select.call_args.args
    assert board is game.board
    assert difficulty == Difficulty.EASY
    assert seed == 9 * 1_000_003 + 1


# --- RESIGNING ---
def test_resign(game: Game) -> None:
    game.resign(OWNER)
    assert game.status == Status.RESIGNED
    assert game.move_count == 0
    assert game.white_turn is True


def test_resign_twice(game: Game) -> None:
    """No separate 'already resigned' error"""
    game.resign(OWNER)
    with pytest.raises(GameOverError):
        game.resign(OWNER)


def test_resign_by_someone_else(game: Game) -> None:
    with pytest.raises(NotAuthorizedError):
        game.resign(INTRUDER)
    assert game.status == Status.ACTIVE


def test_resign_on_computers_turn(game: Game) -> None:
    """Resigning does not care whose turn it is"""
    game.make_move(52, 36, OWNER)
    game.resign(OWNER)
    assert game.status == Status.RESIGNED


# --- CAPTURING THE KING ---
def test_capturing_the_king_ends_the_game() -> None:
    game = Game(
        board=Board.from_fen("4k3/8/8/8/8/8/8/4RK2"),
        owner=OWNER,
        difficulty=Difficulty.EASY,
    )
    game.make_move(60, 4, OWNER)
    assert game.status == Status.FINISHED
    assert game.winner == Color.WHITE
    assert game.move_count == 1

    with pytest.raises(GameOverError):
        game.computer_move(OWNER, game_id=1)
