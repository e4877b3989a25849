"""Bitboard helpers and rank, file and edge masks.

A bitboard is a plain ``int`` whose bit ``n`` stands for the square with
index ``n``.
"""

from __future__ import annotations

from typing import Iterable, Iterator

from chesstables.rank import ALL_FILES, ALL_RANKS, File, Rank
from chesstables.square import Square
from chesstables.squares import ALL_SQUARES

EMPTY = 0
FULL = (1 << 64) - 1


def squares_mask(squares: Iterable[Square]) -> int:
    """Return the bitboard with a bit set for each of ``squares``."""
    result = EMPTY
    for sq in squares:
        result |= 1 << int(sq)
    return result


def iter_squares(bitboard: int) -> Iterator[Square]:
    """Yield the squares set in ``bitboard``, lowest index first."""
    bb = bitboard & FULL
    while bb:
        lowest = bb & -bb
        yield Square(lowest.bit_length() - 1)
        bb ^= lowest


_EDGES = squares_mask(
    sq
    for sq in ALL_SQUARES
    if sq.rank() in (Rank.FIRST, Rank.EIGHTH) or sq.file() in (File.A, File.H)
)

_RANKS: tuple[int, ...] = tuple(
    squares_mask(sq for sq in ALL_SQUARES if sq.rank() == rank) for rank in ALL_RANKS
)

_FILES: tuple[int, ...] = tuple(
    squares_mask(sq for sq in ALL_SQUARES if sq.file() == file) for file in ALL_FILES
)

_ADJACENT_FILES: tuple[int, ...] = tuple(
    squares_mask(
        sq for sq in ALL_SQUARES if abs(int(sq.file()) - int(file)) == 1
    )
    for file in ALL_FILES
)


def get_rank(rank: Rank) -> int:
    """Bitboard of every square on ``rank``."""
    return _RANKS[int(rank)]


def get_file(file: File) -> int:
    """Bitboard of every square on ``file``."""
    return _FILES[int(file)]


def get_adjacent_files(file: File) -> int:
    """Bitboard of the squares on the one or two files next to ``file``."""
    return _ADJACENT_FILES[int(file)]


def get_edges() -> int:
    """Bitboard of every square on the outer edge of the board."""
    return _EDGES