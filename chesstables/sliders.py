"""Move lookup for sliding pieces (rooks, bishops and queens).

For every square the relevant blocker squares are enumerated once, and the
resulting attack sets are kept in a table keyed by the blockers that matter.
Tables are built on first use for each square and piece.  All results are
bitboards: plain ``int`` values where bit ``n`` stands for the square with
index ``n``.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Callable, Optional

from chesstables.lines import get_rays
from chesstables.masks import EMPTY, FULL, get_edges, iter_squares, squares_mask
from chesstables.piece import Piece
from chesstables.rank import File, Rank
from chesstables.square import Square
from chesstables.squares import ALL_SQUARES

Step = Callable[[Square], Optional[Square]]


def _nw(sq: Square) -> Optional[Square]:
    nxt = sq.left()
    return None if nxt is None else nxt.up()


def _ne(sq: Square) -> Optional[Square]:
    nxt = sq.right()
    return None if nxt is None else nxt.up()


def _sw(sq: Square) -> Optional[Square]:
    nxt = sq.left()
    return None if nxt is None else nxt.down()


def _se(sq: Square) -> Optional[Square]:
    nxt = sq.right()
    return None if nxt is None else nxt.down()


_ROOK_STEPS: tuple[Step, ...] = (Square.left, Square.right, Square.up, Square.down)
_BISHOP_STEPS: tuple[Step, ...] = (_nw, _ne, _sw, _se)


def _check_slider(piece: Piece) -> None:
    if piece not in (Piece.ROOK, Piece.BISHOP):
        raise ValueError(f"not a rook or bishop: {piece!r}")


def magic_mask(sq: Square, piece: Piece) -> int:
    """The squares whose occupancy can change where a rook or bishop on ``sq`` moves.

    These are the piece's rays with the far end of each ray removed.
    """
    _check_slider(piece)
    rays = get_rays(sq, piece)
    if piece is Piece.BISHOP:
        return rays & ~get_edges() & FULL
    ray_ends = squares_mask(
        edge
        for edge in ALL_SQUARES
        if (edge.rank() == sq.rank() and edge.file() in (File.A, File.H))
        or (edge.file() == sq.file() and edge.rank() in (Rank.FIRST, Rank.EIGHTH))
    )
    return rays & ~ray_ends & FULL


def blocker_subsets(mask: int) -> list[int]:
    """Every subset of the squares in ``mask``, 2**n of them for n set bits.

    Subset ``i`` holds the ``j``-th lowest square of ``mask`` exactly when bit
    ``j`` of ``i`` is set, so the list starts with the empty set.
    """
    bits = [1 << int(sq) for sq in iter_squares(mask)]
    subsets = []
    for i in range(1 << len(bits)):
        current = EMPTY
        for j, bit in enumerate(bits):
            if i >> j & 1:
                current |= bit
        subsets.append(current)
    return subsets


def _attacks(sq: Square, steps: tuple[Step, ...], blockers: int) -> int:
    result = EMPTY
    for step in steps:
        nxt = step(sq)
        while nxt is not None:
            bit = 1 << int(nxt)
            result ^= bit
            if bit & blockers:
                break
            nxt = step(nxt)
    return result


def questions_and_answers(sq: Square, piece: Piece) -> tuple[list[int], list[int]]:
    """All relevant blocker sets for ``sq`` and the moves each one allows.

    Returns two lists of equal length: the blocker sets from
    :func:`blocker_subsets` and, at the same positions, the squares a
    rook or bishop on ``sq`` reaches with those blockers (captures included).
    """
    _check_slider(piece)
    questions = blocker_subsets(magic_mask(sq, piece))
    steps = _BISHOP_STEPS if piece is Piece.BISHOP else _ROOK_STEPS
    answers = [_attacks(sq, steps, question) for question in questions]
    return questions, answers


@lru_cache(maxsize=None)
def _table(index: int, piece: Piece) -> tuple[int, dict[int, int]]:
    sq = Square(index)
    questions, answers = questions_and_answers(sq, piece)
    return magic_mask(sq, piece), dict(zip(questions, answers))


def _lookup(sq: Square, piece: Piece, blockers: int) -> int:
    mask, moves = _table(int(sq), piece)
    return moves[blockers & mask] & get_rays(sq, piece)


def get_rook_moves(sq: Square, blockers: int) -> int:
    """Squares a rook on ``sq`` reaches, stopping at (and including) blockers."""
    return _lookup(sq, Piece.ROOK, blockers)


def get_bishop_moves(sq: Square, blockers: int) -> int:
    """Squares a bishop on ``sq`` reaches, stopping at (and including) blockers."""
    return _lookup(sq, Piece.BISHOP, blockers)


def get_queen_moves(sq: Square, blockers: int) -> int:
    """Squares a queen on ``sq`` reaches: rook and bishop moves together."""
    return get_rook_moves(sq, blockers) ^ get_bishop_moves(sq, blockers)