"""Squares of a chess board."""

from __future__ import annotations

from functools import total_ordering
from typing import Optional

from chesstables.piece import Color
from chesstables.rank import File, Rank

NUM_SQUARES = 64


@total_ordering
class Square:
    """One of the 64 squares, indexed 0 (a1) to 63 (h8), rank-major."""

    __slots__ = ("_index",)

    def __init__(self, index: int = 0) -> None:
        self._index = int(index) & 63

    @classmethod
    def make_square(cls, rank: Rank, file: File) -> Square:
        """Build the square on the given rank and file."""
        return cls((int(rank) << 3) ^ int(file))

    @property
    def index(self) -> int:
        """The square's index, 0 to 63."""
        return self._index

    def rank(self) -> Rank:
        """The rank this square lies on."""
        return Rank.from_index(self._index >> 3)

    def file(self) -> File:
        """The file this square lies on."""
        return File.from_index(self._index & 7)

    def up(self) -> Optional[Square]:
        """The square above, or None on the eighth rank."""
        if self.rank() is Rank.EIGHTH:
            return None
        return self.uup()

    def down(self) -> Optional[Square]:
        """The square below, or None on the first rank."""
        if self.rank() is Rank.FIRST:
            return None
        return self.udown()

    def left(self) -> Optional[Square]:
        """The square to the left, or None on the a-file."""
        if self.file() is File.A:
            return None
        return self.uleft()

    def right(self) -> Optional[Square]:
        """The square to the right, or None on the h-file."""
        if self.file() is File.H:
            return None
        return self.uright()

    def forward(self, color: Color) -> Optional[Square]:
        """The square ahead from ``color``'s point of view, or None at the edge."""
        return self.up() if color is Color.WHITE else self.down()

    def backward(self, color: Color) -> Optional[Square]:
        """The square behind from ``color``'s point of view, or None at the edge."""
        return self.down() if color is Color.WHITE else self.up()

    def uup(self) -> Square:
        """The square above, wrapping from the eighth rank to the first."""
        return Square.make_square(self.rank().up(), self.file())

    def udown(self) -> Square:
        """The square below, wrapping from the first rank to the eighth."""
        return Square.make_square(self.rank().down(), self.file())

    def uleft(self) -> Square:
        """The square to the left, wrapping from the a-file to the h-file."""
        return Square.make_square(self.rank(), self.file().left())

    def uright(self) -> Square:
        """The square to the right, wrapping from the h-file to the a-file."""
        return Square.make_square(self.rank(), self.file().right())

    def uforward(self, color: Color) -> Square:
        """The square ahead for ``color``, wrapping around the board."""
        return self.uup() if color is Color.WHITE else self.udown()

    def ubackward(self, color: Color) -> Square:
        """The square behind for ``color``, wrapping around the board."""
        return self.udown() if color is Color.WHITE else self.uup()

    @classmethod
    def from_str(cls, s: str) -> Square:
        """Parse a square in algebraic form such as ``"e4"``."""
        if len(s) < 2:
            raise ValueError(f"invalid square: {s!r}")
        file_ch, rank_ch = s[0], s[1]
        if file_ch not in "abcdefgh" or rank_ch not in "12345678":
            raise ValueError(f"invalid square: {s!r}")
        return cls.make_square(
            Rank.from_index(ord(rank_ch) - ord("1")),
            File.from_index(ord(file_ch) - ord("a")),
        )

    def __str__(self) -> str:
        return chr(ord("a") + (self._index & 7)) + chr(ord("1") + (self._index >> 3))

    def __repr__(self) -> str:
        return f"Square({str(self)!r})"

    def __int__(self) -> int:
        return self._index

    def __index__(self) -> int:
        return self._index

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Square):
            return self._index == other._index
        return NotImplemented

    def __lt__(self, other: object) -> bool:
        if isinstance(other, Square):
            return self._index < other._index
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._index)