"""Unit tests for /stack_mate/chess/pieces.py"""

import pytest

from stack_mate.chess.pieces import (
    Color,
    PieceType,
    code_from_fen,
    code_to_fen,
    opponent,
    piece_code,
    piece_color,
    piece_points,
    piece_type,
)


@pytest.mark.parametrize(
    "code, expected_type, expected_color",
    [
        (0, PieceType.EMPTY, Color.NONE),
        (1, PieceType.PAWN, Color.WHITE),
        (2, PieceType.KNIGHT, Color.WHITE),
        (3, PieceType.BISHOP, Color.WHITE),
        (4, PieceType.ROOK, Color.WHITE),
        (5, PieceType.QUEEN, Color.WHITE),
        (6, PieceType.KING, Color.WHITE),
        (7, PieceType.PAWN, Color.BLACK),
        (8, PieceType.KNIGHT, Color.BLACK),
        (9, PieceType.BISHOP, Color.BLACK),
        (10, PieceType.ROOK, Color.BLACK),
        (11, PieceType.QUEEN, Color.BLACK),
        (12, PieceType.KING, Color.BLACK),
    ],
)
def test_decoding_piece_codes(
    code: int, expected_type: PieceType, expected_color: Color
) -> None:
    """The color is derived from the range the code is in"""
    assert piece_type(code) == expected_type
    assert piece_color(code) == expected_color
    assert piece_code(expected_type, expected_color) == code


@pytest.mark.parametrize(
    "fen_char, code",
    [("P", 1), ("N", 2), ("K", 6), ("p", 7), ("r", 10), ("k", 12)],
)
def test_fen_characters(fen_char: str, code: int) -> None:
    """Upper case: white, lower case: black"""
    assert code_from_fen(fen_char) == code
    assert code_to_fen(code) == fen_char


def test_points() -> None:
    """Empty squares are worth nothing, both colors are worth the same"""
    assert piece_points(0) == 0
    assert piece_points(1) == piece_points(7) == 1
    assert piece_points(5) == piece_points(11) == 9
    assert piece_points(6) > piece_points(5) * 2


def test_opponent() -> None:
    assert opponent(Color.WHITE) == Color.BLACK
    assert opponent(Color.BLACK) == Color.WHITE
