"""Zobrist hashing keys.

The keys come from a fixed-seed xoshiro256++ generator (seeded through
SplitMix64), so they are the same on every run.  They are drawn in this
order: side to move, pieces by colour, piece and square, castling rights by
colour, then en passant files by colour.
"""

from __future__ import annotations

from typing import Iterator

from chesstables.piece import NUM_COLORS, NUM_PIECES, Color, Piece
from chesstables.rank import NUM_FILES, File
from chesstables.square import NUM_SQUARES, Square

_SEED = 0xDEADBEEF12345678
_MASK64 = (1 << 64) - 1
NUM_CASTLE_RIGHTS = 4


def _rotl(x: int, k: int) -> int:
    return ((x << k) | (x >> (64 - k))) & _MASK64


def _splitmix64(seed: int) -> Iterator[int]:
    state = seed & _MASK64
    while True:
        state = (state + 0x9E3779B97F4A7C15) & _MASK64
        z = state
        z = ((z ^ (z >> 30)) * 0xBF58476D1CE4E5B9) & _MASK64
        z = ((z ^ (z >> 27)) * 0x94D049BB133111EB) & _MASK64
        yield z ^ (z >> 31)


def _xoshiro256pp(seed: int) -> Iterator[int]:
    seeder = _splitmix64(seed)
    s0, s1, s2, s3 = (next(seeder) for _ in range(4))
    while True:
        yield (_rotl((s0 + s3) & _MASK64, 23) + s0) & _MASK64
        t = (s1 << 17) & _MASK64
        s2 ^= s0
        s3 ^= s1
        s1 ^= s2
        s0 ^= s3
        s2 ^= t
        s3 = _rotl(s3, 45)


_rng = _xoshiro256pp(_SEED)

_SIDE_TO_MOVE: int = next(_rng)

_PIECES: tuple[tuple[tuple[int, ...], ...], ...] = tuple(
    tuple(tuple(next(_rng) for _ in range(NUM_SQUARES)) for _ in range(NUM_PIECES))
    for _ in range(NUM_COLORS)
)

_CASTLES: tuple[tuple[int, ...], ...] = tuple(
    tuple(next(_rng) for _ in range(NUM_CASTLE_RIGHTS)) for _ in range(NUM_COLORS)
)

_EN_PASSANT: tuple[tuple[int, ...], ...] = tuple(
    tuple(next(_rng) for _ in range(NUM_FILES)) for _ in range(NUM_COLORS)
)

del _rng


def piece_key(piece: Piece, square: Square, color: Color) -> int:
    """Key for a ``color`` ``piece`` standing on ``square``."""
    return _PIECES[int(color)][int(piece)][int(square)]


def castles_key(castle_rights: int, color: Color) -> int:
    """Key for ``color`` holding the given castling rights (0 to 3)."""
    index = int(castle_rights)
    if not 0 <= index < NUM_CASTLE_RIGHTS:
        raise ValueError(f"invalid castle rights: {castle_rights!r}")
    return _CASTLES[int(color)][index]


def en_passant_key(file: File, color: Color) -> int:
    """Key for an en passant square on ``file`` for ``color``."""
    return _EN_PASSANT[int(color)][int(file)]


def side_to_move_key() -> int:
    """Key toggled when the side to move changes."""
    return _SIDE_TO_MOVE