"""
Geometry/Base movement and capturing rules

Key idea: every piece type has its own pure rule function. `is_legal` does the checks shared by all pieces and then
dispatches through MOVEMENT_RULES.

NOTE: Legality here is purely geometric (piece movement, blocked paths, no capturing your own pieces).
Whether a move leaves your own king under attack is NOT checked.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Protocol, Self

from stack_mate.chess.pieces import Color, PieceType, opponent, piece_color, piece_type
from stack_mate.chess.square import NUM_SQUARES, Square, is_valid_position

logger = logging.getLogger(__name__)


class Board(Protocol):
    """Just the parts the movement rules need"""

    def piece(self, pos: int) -> int: ...
    def locate_color(self, color: Color) -> list[int]: ...


Vector = tuple[int, int]

# Pawns advance toward row 0 for white and toward row 7 for black
PAWN_DIRECTION: dict[Color, int] = {Color.WHITE: -1, Color.BLACK: 1}
PAWN_START_ROW: dict[Color, int] = {Color.WHITE: 6, Color.BLACK: 1}


@dataclass(frozen=True)
class Move:
    """basic definition of a move to be made"""

    from_pos: int
    to_pos: int

    @classmethod
    def from_uci(cls, uci: str) -> Self:
        """
        Coordinate notation: <from_square><to_square>

        examples:
        * "e2e4": move the piece on e2 (pos 52) to e4 (pos 36)
        * "b1c3": knight from b1 (pos 57) to c3 (pos 42)
        """
        from_sq = Square.from_algebraic(uci[:2])
        to_sq = Square.from_algebraic(uci[2:4])
        return cls(from_sq.to_position(), to_sq.to_position())

    def to_uci(self) -> str:
        from_sq = Square.from_position(self.from_pos)
        to_sq = Square.from_position(self.to_pos)
        return f"{from_sq.to_algebraic()}{to_sq.to_algebraic()}"


# --- PATH HELPERS ---
def _delta(from_square: Square, to_square: Square) -> Vector:
    return to_square.row - from_square.row, to_square.col - from_square.col


def squares_between(from_square: Square, to_square: Square) -> list[Square]:
    """
    Squares strictly in between two squares on the same row, column, or diagonal.

    Sliding pieces can only move if all of these are empty.
    """
    dr, dc = _delta(from_square, to_square)
    if not (dr == 0 or dc == 0 or abs(dr) == abs(dc)):
        raise ValueError(
            f"squares_between requires both squares to share a line. \n from: {from_square}\n to:{to_square}"
        )

    step_row = (dr > 0) - (dr < 0)
    step_col = (dc > 0) - (dc < 0)
    squares_found: list[Square] = []
    row, col = from_square.row + step_row, from_square.col + step_col
    while (row, col) != (to_square.row, to_square.col):
        squares_found.append(Square(row, col))
        row += step_row
        col += step_col
    return squares_found


def is_path_clear(from_square: Square, to_square: Square, board: Board) -> bool:
    return all(
        board.piece(square.to_position()) == 0
        for square in squares_between(from_square, to_square)
    )


# --- MOVEMENT RULES ---
def is_legal_pawn_move(from_square: Square, to_square: Square, board: Board) -> bool:
    """
    A pawn:
    - moves by a single square forward onto an empty square.
    - can move by two when still on its starting row (both squares must be empty)
    - takes diagonally forward, but ONLY when capturing (diagonal step onto an empty square is illegal)
    """
    color = piece_color(board.piece(from_square.to_position()))
    direction = PAWN_DIRECTION[color]
    dr, dc = _delta(from_square, to_square)
    target = board.piece(to_square.to_position())

    # straight pushes
    if dc == 0:
        if target != 0:
            return False
        if dr == direction:
            return True
        if dr == 2 * direction and from_square.row == PAWN_START_ROW[color]:
            return is_path_clear(from_square, to_square, board)
        return False

    # diagonal takes
    if dr == direction and abs(dc) == 1:
        return piece_color(target) == opponent(color)
    return False


def is_legal_knight_move(
    from_square: Square, to_square: Square, board: Board
) -> bool:
    """Knights always move such that |delta_row| + |delta_col| = 3 (and jump over anything in between)"""
    dr, dc = _delta(from_square, to_square)
    return {abs(dr), abs(dc)} == {1, 2}


def is_legal_bishop_move(
    from_square: Square, to_square: Square, board: Board
) -> bool:
    """Bishops move diagonally: |delta_row| = |delta_col|"""
    dr, dc = _delta(from_square, to_square)
    if abs(dr) != abs(dc):
        return False
    return is_path_clear(from_square, to_square, board)


def is_legal_rook_move(from_square: Square, to_square: Square, board: Board) -> bool:
    """Rooks move either horizontally or vertically"""
    dr, dc = _delta(from_square, to_square)
    if dr != 0 and dc != 0:
        return False
    return is_path_clear(from_square, to_square, board)


def is_legal_queen_move(
    from_square: Square, to_square: Square, board: Board
) -> bool:
    """
    The Queen combines the rook moves (horizontal + vertical movements) and bishop moves (diagonal movement)
    """
    return is_legal_rook_move(from_square, to_square, board) or is_legal_bishop_move(
        from_square, to_square, board
    )


def is_legal_king_move(from_square: Square, to_square: Square, board: Board) -> bool:
    """The king can move by a single square at the time. No castling."""
    dr, dc = _delta(from_square, to_square)
    return abs(dr) <= 1 and abs(dc) <= 1


# -- STRATEGY PATTERN: MOVEMENT RULES ---
MoveRuleFn = Callable[[Square, Square, Board], bool]
MOVEMENT_RULES: dict[PieceType, MoveRuleFn] = {
    PieceType.PAWN: is_legal_pawn_move,
    PieceType.KNIGHT: is_legal_knight_move,
    PieceType.BISHOP: is_legal_bishop_move,
    PieceType.ROOK: is_legal_rook_move,
    PieceType.QUEEN: is_legal_queen_move,
    PieceType.KING: is_legal_king_move,
}


def is_legal(board: Board, from_pos: int, to_pos: int, mover: Color) -> bool:
    """
    Is moving the piece on `from_pos` to `to_pos` allowed for the `mover`?
    ----

    Checks are done in this order, the first one that fails rejects the move:
    1. the piece has to actually move
    2. both positions must be on the board
    3. there must be a piece to move
    4. it must be a piece of the mover's color
    5. you cannot capture your own piece
    6. the piece specific movement rule
    """
    if from_pos == to_pos:
        return False
    if not (is_valid_position(from_pos) and is_valid_position(to_pos)):
        return False

    moving_piece = board.piece(from_pos)
    if moving_piece == 0:
        return False
    if piece_color(moving_piece) != mover:
        return False
    if piece_color(board.piece(to_pos)) == mover:
        return False

    movement_rule = MOVEMENT_RULES[piece_type(moving_piece)]
    return movement_rule(
        Square.from_position(from_pos), Square.from_position(to_pos), board
    )


def legal_moves(board: Board, color: Color) -> list[Move]:
    """
    Every legal move for the pieces of the given color.

    Only squares occupied by the color's own pieces are tried as origins. Each (origin, target) pair goes through
    `is_legal`, so this set is by construction exactly the set of moves `is_legal` accepts.
    """
    moves = [
        Move(from_pos, to_pos)
        for from_pos in board.locate_color(color)
        for to_pos in range(NUM_SQUARES)
        if is_legal(board, from_pos, to_pos, color)
    ]
    logger.debug("%d legal moves for %s", len(moves), color.value)
    return moves
