"""The full list of board squares and lookup by name."""

from __future__ import annotations

from chesstables.square import NUM_SQUARES, Square

ALL_SQUARES: tuple[Square, ...] = tuple(Square(i) for i in range(NUM_SQUARES))

_BY_NAME: dict[str, Square] = {str(sq): sq for sq in ALL_SQUARES}


def all_squares() -> tuple[Square, ...]:
    """Every square on the board, in index order from a1 to h8."""
    return ALL_SQUARES


def by_name(name: str) -> Square:
    """Return the square named ``name``, such as ``"a1"`` or ``"H8"``.

    Unlike :meth:`Square.from_str`, the name must be exactly two characters.
    """
    try:
        return _BY_NAME[name.lower()]
    except KeyError:
        raise ValueError(f"no square named {name!r}") from None