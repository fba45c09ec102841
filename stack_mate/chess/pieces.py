"""
Defines the types of chess pieces and how they are encoded on the board.

A cell holds a single integer:
* 0: empty
* 1-6: white pawn, knight, bishop, rook, queen, king
* 7-12: black pieces in the same order
"""

from enum import Enum, IntEnum


class PieceType(IntEnum):
    EMPTY = 0
    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


class Color(Enum):
    NONE = "none"
    WHITE = "white"
    BLACK = "black"


# Offset between a white piece code and the black piece of the same type
BLACK_OFFSET = 6
EMPTY = 0

FEN_TO_PIECE: dict[str, PieceType] = {
    "p": PieceType.PAWN,
    "n": PieceType.KNIGHT,
    "b": PieceType.BISHOP,
    "r": PieceType.ROOK,
    "q": PieceType.QUEEN,
    "k": PieceType.KING,
}

PIECE_TO_FEN: dict[PieceType, str] = {value: key for key, value in FEN_TO_PIECE.items()}


PIECE_POINTS: dict[PieceType, int] = {
    PieceType.PAWN: 1,
    PieceType.KNIGHT: 3,
    PieceType.BISHOP: 3,
    PieceType.ROOK: 5,
    PieceType.QUEEN: 9,
    # NOTE: losing the king ends the game, so it outweighs everything else combined
    PieceType.KING: 100,
}


def opponent(color: Color) -> Color:
    return Color.WHITE if color == Color.BLACK else Color.BLACK


def piece_code(piece_type: PieceType, color: Color) -> int:
    if piece_type == PieceType.EMPTY or color == Color.NONE:
        return EMPTY
    return int(piece_type) + (BLACK_OFFSET if color == Color.BLACK else 0)


def piece_type(code: int) -> PieceType:
    if code == EMPTY:
        return PieceType.EMPTY
    return PieceType(code - BLACK_OFFSET if code > BLACK_OFFSET else code)


def piece_color(code: int) -> Color:
    """Color follows from the range the code is in."""
    if 1 <= code <= BLACK_OFFSET:
        return Color.WHITE
    if BLACK_OFFSET < code <= 2 * BLACK_OFFSET:
        return Color.BLACK
    return Color.NONE


def piece_points(code: int) -> int:
    return PIECE_POINTS.get(piece_type(code), 0)


def code_from_fen(character: str) -> int:
    # lower case: Black pieces, upper case: White pieces
    color = Color.WHITE if character.isupper() else Color.BLACK
    return piece_code(FEN_TO_PIECE[character.lower()], color)


def code_to_fen(code: int) -> str:
    fen_char = PIECE_TO_FEN[piece_type(code)]
    return fen_char.upper() if piece_color(code) == Color.WHITE else fen_char
