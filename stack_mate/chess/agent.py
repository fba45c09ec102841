"""
The computer opponent. Always plays black.

Every choice is reproducible: the only source of randomness is a `random.Random` seeded from the game id and the
number of moves played so far. Replaying the same sequence of calls against the same game gives the same moves.
"""

import logging
import random
from typing import Callable, Optional

from stack_mate.chess.board import Board
from stack_mate.chess.moves import Move, legal_moves
from stack_mate.chess.pieces import Color, piece_points
from stack_mate.core.shared_types import Difficulty

logger = logging.getLogger(__name__)

COMPUTER_COLOR = Color.BLACK
HUMAN_COLOR = Color.WHITE

# Large prime to keep seeds of neighbouring games from overlapping
_SEED_MULTIPLIER = 1_000_003


def move_seed(game_id: int, move_count: int) -> int:
    """Deterministic seed for the computer's move in a given game at a given point in time."""
    return game_id * _SEED_MULTIPLIER + move_count


# --- MOVE SELECTION STRATEGIES ---
def choose_easy(board: Board, moves: list[Move], rng: random.Random) -> Move:
    """Uniformly random legal move"""
    return rng.choice(moves)


def choose_hard(board: Board, moves: list[Move], rng: random.Random) -> Move:
    """
    Greedy one-ply search on material
    ----

    For every candidate move:
    1. apply it on a copy of the board
    2. material balance from black's point of view (so captures score directly)
    3. subtract the most valuable black piece white could take right back

    The best scoring moves are kept, the generator picks among them.
    """
    scored = [(evaluate_move(board, move), move) for move in moves]
    best_score = max(score for score, _ in scored)
    best_moves = [move for score, move in scored if score == best_score]
    return rng.choice(best_moves)


def evaluate_move(board: Board, move: Move) -> int:
    new_board = board.after_move(move)
    material = new_board.count_material()
    balance = material[COMPUTER_COLOR] - material[HUMAN_COLOR]
    return balance - _best_reply_capture(new_board)


def _best_reply_capture(board: Board) -> int:
    """Points of the most valuable piece the human side can capture in a single move."""
    return max(
        (piece_points(board.piece(reply.to_pos)) for reply in legal_moves(board, HUMAN_COLOR)),
        default=0,
    )


# -- STRATEGY PATTERN: DIFFICULTY LEVELS ---
ChooseMoveFn = Callable[[Board, list[Move], random.Random], Move]
STRATEGIES: dict[Difficulty, ChooseMoveFn] = {
    Difficulty.EASY: choose_easy,
    Difficulty.HARD: choose_hard,
}


def select_move(board: Board, difficulty: Difficulty, seed: int) -> Optional[Move]:
    """
    Pick the computer's next move. None if black has no legal move at all.

    The board is not changed; applying the move is up to the caller.
    """
    moves = legal_moves(board, COMPUTER_COLOR)
    if not moves:
        logger.info("Computer has no legal moves left.")
        return None

    rng = random.Random(seed)
    move = STRATEGIES[difficulty](board, moves, rng)
    logger.debug(
        "Computer (%s) chose %s out of %d legal moves",
        difficulty.name.lower(),
        move.to_uci(),
        len(moves),
    )
    return move
