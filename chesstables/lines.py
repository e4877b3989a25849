"""Rays, lines and in-between masks for sliding pieces.

All results are bitboards: plain ``int`` values where bit ``n`` stands for
the square with index ``n``.
"""

from __future__ import annotations

from chesstables.masks import EMPTY
from chesstables.piece import Piece
from chesstables.square import Square
from chesstables.squares import ALL_SQUARES


def _coords(sq: Square) -> tuple[int, int]:
    return int(sq.rank()), int(sq.file())


def _on_diagonal(a: Square, b: Square) -> bool:
    ar, af = _coords(a)
    br, bf = _coords(b)
    return abs(ar - br) == abs(af - bf)


def _on_rank_or_file(a: Square, b: Square) -> bool:
    ar, af = _coords(a)
    br, bf = _coords(b)
    return ar == br or af == bf


def _mask(squares) -> int:
    result = EMPTY
    for sq in squares:
        result |= 1 << int(sq)
    return result


_BISHOP_RAYS: tuple[int, ...] = tuple(
    _mask(dest for dest in ALL_SQUARES if dest != src and _on_diagonal(src, dest))
    for src in ALL_SQUARES
)

_ROOK_RAYS: tuple[int, ...] = tuple(
    _mask(dest for dest in ALL_SQUARES if dest != src and _on_rank_or_file(src, dest))
    for src in ALL_SQUARES
)


def _line_mask(src: Square, dest: Square) -> int:
    if src == dest:
        return EMPTY
    ends = (1 << int(src)) | (1 << int(dest))
    if _on_diagonal(src, dest):
        return (_BISHOP_RAYS[int(src)] & _BISHOP_RAYS[int(dest)]) | ends
    if _on_rank_or_file(src, dest):
        return (_ROOK_RAYS[int(src)] & _ROOK_RAYS[int(dest)]) | ends
    return EMPTY


def _sign(n: int) -> int:
    return (n > 0) - (n < 0)


def _between_mask(src: Square, dest: Square) -> int:
    if src == dest or not (_on_diagonal(src, dest) or _on_rank_or_file(src, dest)):
        return EMPTY
    sr, sf = _coords(src)
    dr, df = _coords(dest)
    step_r, step_f = _sign(dr - sr), _sign(df - sf)
    result = EMPTY
    r, f = sr + step_r, sf + step_f
    while (r, f) != (dr, df):
        result |= 1 << (r * 8 + f)
        r += step_r
        f += step_f
    return result


_LINE: tuple[tuple[int, ...], ...] = tuple(
    tuple(_line_mask(src, dest) for dest in ALL_SQUARES) for src in ALL_SQUARES
)

_BETWEEN: tuple[tuple[int, ...], ...] = tuple(
    tuple(_between_mask(src, dest) for dest in ALL_SQUARES) for src in ALL_SQUARES
)


def line(sq1: Square, sq2: Square) -> int:
    """The whole rank, file or diagonal through both squares, edge to edge.

    Empty when the squares are equal or do not share a line.
    """
    return _LINE[int(sq1)][int(sq2)]


def between(sq1: Square, sq2: Square) -> int:
    """The squares strictly between two aligned squares, else empty."""
    return _BETWEEN[int(sq1)][int(sq2)]


def get_bishop_rays(sq: Square) -> int:
    """Squares a bishop on ``sq`` would attack on an empty board."""
    return _BISHOP_RAYS[int(sq)]


def get_rook_rays(sq: Square) -> int:
    """Squares a rook on ``sq`` would attack on an empty board."""
    return _ROOK_RAYS[int(sq)]


def get_rays(sq: Square, piece: Piece) -> int:
    """Rook rays for a rook, bishop rays for any other piece."""
    if piece is Piece.ROOK:
        return get_rook_rays(sq)
    return get_bishop_rays(sq)