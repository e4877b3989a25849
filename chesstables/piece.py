"""Piece kinds and side colours."""

from __future__ import annotations

from enum import IntEnum

from chesstables.rank import Rank

NUM_COLORS = 2
NUM_PIECES = 6
NUM_PROMOTION_PIECES = 4


class Color(IntEnum):
    """The side a piece belongs to."""

    WHITE = 0
    BLACK = 1

    def opposite(self) -> Color:
        """Return the other colour."""
        return Color.BLACK if self is Color.WHITE else Color.WHITE

    def __invert__(self) -> Color:
        return self.opposite()

    def to_my_backrank(self) -> Rank:
        """The rank this side's pieces start on."""
        return Rank.FIRST if self is Color.WHITE else Rank.EIGHTH

    def to_second_rank(self) -> Rank:
        """The rank this side's pawns start on."""
        return Rank.SECOND if self is Color.WHITE else Rank.SEVENTH

    def to_seventh_rank(self) -> Rank:
        """The rank from which this side's pawns promote."""
        return Rank.SEVENTH if self is Color.WHITE else Rank.SECOND


_LETTERS = "pnbrqk"


class Piece(IntEnum):
    """A kind of chess piece, in ascending order of value."""

    PAWN = 0
    KNIGHT = 1
    BISHOP = 2
    ROOK = 3
    QUEEN = 4
    KING = 5

    def symbol(self, color: Color) -> str:
        """Letter for this piece: uppercase for white, lowercase for black."""
        letter = str(self)
        return letter.upper() if color is Color.WHITE else letter

    def __str__(self) -> str:
        return _LETTERS[self.value]


ALL_COLORS: tuple[Color, ...] = (Color.WHITE, Color.BLACK)
ALL_PIECES: tuple[Piece, ...] = tuple(Piece)
PROMOTION_PIECES: tuple[Piece, ...] = (
    Piece.QUEEN,
    Piece.KNIGHT,
    Piece.ROOK,
    Piece.BISHOP,
)