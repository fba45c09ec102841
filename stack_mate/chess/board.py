"""The Game board holds the `position`: 64 cells with a piece code each (0 when empty)."""

from dataclasses import dataclass, field
from typing import Self

from stack_mate.chess.moves import Move
from stack_mate.chess.pieces import (
    EMPTY,
    Color,
    code_from_fen,
    code_to_fen,
    piece_color,
    piece_points,
)
from stack_mate.chess.square import BOARD_DIMENSIONS, NUM_SQUARES, is_valid_position

STARTING_POSITION_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"


@dataclass
class Board:
    cells: list[int] = field(default_factory=lambda: [EMPTY] * NUM_SQUARES)

    def __post_init__(self) -> None:
        if len(self.cells) != NUM_SQUARES:
            raise ValueError(
                f"A board has exactly {NUM_SQUARES} cells, got {len(self.cells)}."
            )

    @classmethod
    def starting_position(cls) -> Self:
        return cls.from_fen(STARTING_POSITION_FEN)

    @classmethod
    def from_fen(cls, fen_str: str) -> Self:
        """Construct a board using the piece placement part of a FEN string.

        ex. standard starting position:
        rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR
        means:
        * black pieces are on the 8th rank (row 0), starting with the rook on a8 (pos 0)
        * pawns cover the 7th rank (row 1) entirely
        * ranks 6 through 3 have 8 consecutive empty squares
        * rank 2 (row 6) are the white pawns (capital letters)
        * rank 1 (row 7) are the white pieces, a1 is pos 56.

        The FEN ranks are read in the same order as the cells are stored, so the cells can be filled front to back.
        """
        cells: list[int] = []
        for fen_one_rank in fen_str.split("/"):
            for character in fen_one_rank:
                if character.isalpha():
                    # simple case: a letter directly denotes the piece
                    cells.append(code_from_fen(character))
                else:
                    # A number denotes the amount of empty squares after each other
                    cells.extend([EMPTY] * int(character))
        return cls(cells)

    def to_fen(self) -> str:
        """Ranks are separated by slashes in FEN string."""
        return "/".join(self._row_to_fen(row) for row in range(BOARD_DIMENSIONS[0]))

    def _row_to_fen(self, row: int) -> str:
        """FEN string of a single row"""
        fen_characters: list[str] = []
        empty_count = 0
        for col in range(BOARD_DIMENSIONS[1]):
            code = self.piece(row * BOARD_DIMENSIONS[1] + col)

            if code != EMPTY:
                if empty_count > 0:
                    fen_characters.append(str(empty_count))
                    empty_count = 0
                fen_characters.append(code_to_fen(code))
            else:
                empty_count += 1

        # if the entire row is empty, then we still place this number in the string
        if empty_count > 0:
            fen_characters.append(str(empty_count))
        return "".join(fen_characters)

    def piece(self, pos: int) -> int:
        return self.cells[pos]

    def piece_at(self, pos: int) -> int | None:
        """Same as `piece()`, but None instead of an IndexError for positions off the board."""
        if not is_valid_position(pos):
            return None
        return self.cells[pos]

    def locate_color(self, color: Color) -> list[int]:
        return [pos for pos, code in enumerate(self.cells) if piece_color(code) == color]

    def move_piece(self, move: Move) -> int:
        """Update the position on the board. Returns the code of whatever stood on the target square."""
        captured = self.cells[move.to_pos]
        self.cells[move.to_pos] = self.cells[move.from_pos]
        self.cells[move.from_pos] = EMPTY
        return captured

    def after_move(self, move: Move) -> Self:
        """A new board with the move applied. This board stays untouched."""
        new_board = self.copy()
        new_board.move_piece(move)
        return new_board

    def copy(self) -> Self:
        return type(self)(list(self.cells))

    def count_material(self) -> dict[Color, int]:
        """Tally the points of material each player has on the board"""
        return {
            color: self._count_material_player(color)
            for color in Color
            if color != Color.NONE
        }

    def _count_material_player(self, color: Color) -> int:
        """Tally the points of material for a specific player"""
        return sum(
            piece_points(code) for code in self.cells if piece_color(code) == color
        )
