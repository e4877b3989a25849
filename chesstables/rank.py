"""Ranks (rows) and files (columns) of a chess board."""

from __future__ import annotations

from enum import IntEnum

NUM_RANKS = 8
NUM_FILES = 8


class Rank(IntEnum):
    """A rank (row) on a chess board, numbered 0 for the first rank."""

    FIRST = 0
    SECOND = 1
    THIRD = 2
    FOURTH = 3
    FIFTH = 4
    SIXTH = 5
    SEVENTH = 6
    EIGHTH = 7

    @classmethod
    def from_index(cls, i: int) -> Rank:
        """Return the rank with index ``i``, wrapping around past 7."""
        return cls(i & 7)

    def down(self) -> Rank:
        """Go one rank down, wrapping from the first rank to the eighth."""
        return Rank.from_index(self.value - 1)

    def up(self) -> Rank:
        """Go one rank up, wrapping from the eighth rank to the first."""
        return Rank.from_index(self.value + 1)

    @classmethod
    def from_str(cls, s: str) -> Rank:
        """Parse a rank from the first character of ``s`` ('1' to '8')."""
        if not s:
            raise ValueError("invalid rank: empty string")
        ch = s[0]
        if ch not in "12345678":
            raise ValueError(f"invalid rank: {s!r}")
        return cls(ord(ch) - ord("1"))


class File(IntEnum):
    """A file (column) on a chess board, numbered 0 for the a-file."""

    A = 0
    B = 1
    C = 2
    D = 3
    E = 4
    F = 5
    G = 6
    H = 7

    @classmethod
    def from_index(cls, i: int) -> File:
        """Return the file with index ``i``, wrapping around past 7."""
        return cls(i & 7)

    def left(self) -> File:
        """Go one file left, wrapping from the a-file to the h-file."""
        return File.from_index(self.value - 1)

    def right(self) -> File:
        """Go one file right, wrapping from the h-file to the a-file."""
        return File.from_index(self.value + 1)

    @classmethod
    def from_str(cls, s: str) -> File:
        """Parse a file from the first character of ``s`` ('a' to 'h')."""
        if not s:
            raise ValueError("invalid file: empty string")
        ch = s[0]
        if ch not in "abcdefgh":
            raise ValueError(f"invalid file: {s!r}")
        return cls(ord(ch) - ord("a"))


ALL_RANKS: tuple[Rank, ...] = tuple(Rank)
ALL_FILES: tuple[File, ...] = tuple(File)