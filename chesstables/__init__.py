"""Bitboard lookup tables for chess: squares, masks, rays, leaper and slider moves, Zobrist keys."""

__version__ = "0.1.0"

__all__ = [
    "rank",
    "piece",
    "square",
    "squares",
    "masks",
    "lines",
    "leapers",
    "sliders",
    "zobrist",
]