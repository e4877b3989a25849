"""Move tables for knights, kings and pawns.

All results are bitboards: plain ``int`` values where bit ``n`` stands for
the square with index ``n``.
"""

from __future__ import annotations

from chesstables.masks import EMPTY, FULL, get_rank, squares_mask
from chesstables.piece import ALL_COLORS, Color
from chesstables.rank import File, Rank
from chesstables.square import Square
from chesstables.squares import ALL_SQUARES, by_name


def _bit(sq: Square) -> int:
    return 1 << int(sq)


def _distance(a: Square, b: Square) -> tuple[int, int]:
    return abs(int(a.rank()) - int(b.rank())), abs(int(a.file()) - int(b.file()))


_KNIGHT_MOVES: tuple[int, ...] = tuple(
    squares_mask(dest for dest in ALL_SQUARES if _distance(src, dest) in ((2, 1), (1, 2)))
    for src in ALL_SQUARES
)

_KING_MOVES: tuple[int, ...] = tuple(
    squares_mask(
        dest
        for dest in ALL_SQUARES
        if dest != src and max(_distance(src, dest)) == 1
    )
    for src in ALL_SQUARES
)


def _backrank_mask(color: Color, files) -> int:
    rank = color.to_my_backrank()
    return squares_mask(Square.make_square(rank, f) for f in files)


_KINGSIDE_CASTLE_SQUARES: tuple[int, ...] = tuple(
    _backrank_mask(color, (File.F, File.G)) for color in ALL_COLORS
)

_QUEENSIDE_CASTLE_SQUARES: tuple[int, ...] = tuple(
    _backrank_mask(color, (File.B, File.C, File.D)) for color in ALL_COLORS
)

_CASTLE_MOVES = squares_mask(by_name(n) for n in ("c1", "c8", "e1", "e8", "g1", "g8"))


def _pawn_quiet_targets(src: Square, color: Color) -> int:
    if src.rank() == color.to_second_rank():
        one = src.uforward(color)
        return _bit(one) ^ _bit(one.uforward(color))
    ahead = src.forward(color)
    return EMPTY if ahead is None else _bit(ahead)


def _pawn_attack_targets(src: Square, color: Color) -> int:
    ahead = src.forward(color)
    if ahead is None:
        return EMPTY
    return squares_mask(sq for sq in (ahead.left(), ahead.right()) if sq is not None)


_PAWN_MOVES: tuple[tuple[int, ...], ...] = tuple(
    tuple(_pawn_quiet_targets(src, color) for src in ALL_SQUARES) for color in ALL_COLORS
)

_PAWN_ATTACKS: tuple[tuple[int, ...], ...] = tuple(
    tuple(_pawn_attack_targets(src, color) for src in ALL_SQUARES) for color in ALL_COLORS
)

_PAWN_SOURCE_DOUBLE_MOVES = get_rank(Rank.SECOND) | get_rank(Rank.SEVENTH)
_PAWN_DEST_DOUBLE_MOVES = get_rank(Rank.FOURTH) | get_rank(Rank.FIFTH)


def get_knight_moves(sq: Square) -> int:
    """Squares a knight on ``sq`` can reach."""
    return _KNIGHT_MOVES[int(sq)]


def get_king_moves(sq: Square) -> int:
    """Squares a king on ``sq`` can step to, castling aside."""
    return _KING_MOVES[int(sq)]


def kingside_castle_squares(color: Color) -> int:
    """Squares that must be empty for ``color`` to castle kingside."""
    return _KINGSIDE_CASTLE_SQUARES[int(color)]


def queenside_castle_squares(color: Color) -> int:
    """Squares that must be empty for ``color`` to castle queenside."""
    return _QUEENSIDE_CASTLE_SQUARES[int(color)]


def get_castle_moves() -> int:
    """The king squares involved in castling for both sides."""
    return _CASTLE_MOVES


def get_pawn_attacks(sq: Square, color: Color, blockers: int) -> int:
    """Captures for a ``color`` pawn on ``sq`` among the pieces in ``blockers``."""
    return _PAWN_ATTACKS[int(color)][int(sq)] & blockers


def get_pawn_quiets(sq: Square, color: Color, blockers: int) -> int:
    """Non-capturing moves for a ``color`` pawn on ``sq`` given ``blockers``."""
    if _bit(sq.uforward(color)) & blockers:
        return EMPTY
    return _PAWN_MOVES[int(color)][int(sq)] & ~blockers & FULL


def get_pawn_moves(sq: Square, color: Color, blockers: int) -> int:
    """All pawn moves, captures and quiet moves together."""
    return get_pawn_attacks(sq, color, blockers) ^ get_pawn_quiets(sq, color, blockers)


def get_pawn_source_double_moves() -> int:
    """Squares a pawn may make a double step from (second and seventh ranks)."""
    return _PAWN_SOURCE_DOUBLE_MOVES


def get_pawn_dest_double_moves() -> int:
    """Squares a pawn double step may land on (fourth and fifth ranks)."""
    return _PAWN_DEST_DOUBLE_MOVES