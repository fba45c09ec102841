"""
A square on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass

# Board is always 8x8 (rows, cols). Flattened into a list of 64 cells: pos = row * 8 + col
BOARD_DIMENSIONS = (8, 8)
NUM_SQUARES = BOARD_DIMENSIONS[0] * BOARD_DIMENSIONS[1]


def is_valid_position(pos: int) -> bool:
    return 0 <= pos < NUM_SQUARES


@dataclass(frozen=True)
class Square:
    """
    Row 0 is black's back rank (the 8th rank), row 7 is white's back rank (the 1st rank).
    Col 0 is the a-file, col 7 is the h-file.
    """

    row: int
    col: int

    @classmethod
    def from_position(cls, pos: int) -> Square:
        return cls(pos // BOARD_DIMENSIONS[1], pos % BOARD_DIMENSIONS[1])

    def to_position(self) -> int:
        return self.row * BOARD_DIMENSIONS[1] + self.col

    @classmethod
    def from_algebraic(cls, sq: str) -> Square:
        """Algebraic notation: 'a8' is (0,0), 'h1' is (7,7)"""
        col = ord(sq[0]) - ord("a")
        row = BOARD_DIMENSIONS[0] - int(sq[1])
        return cls(row, col)

    def to_algebraic(self) -> str:
        return f"{chr(self.col + ord('a'))}{BOARD_DIMENSIONS[0] - self.row}"

    def is_within_bounds(self) -> bool:
        return (0 <= self.row < BOARD_DIMENSIONS[0]) and (
            0 <= self.col < BOARD_DIMENSIONS[1]
        )
