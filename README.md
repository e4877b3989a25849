# chesstables

Precomputed bitboard tables for chess move generation.

A bitboard is a plain Python `int` holding 64 bits, one per square. Bit 0 is a1,
bit 7 is h1 and bit 63 is h8.

## Installing

    pip install chesstables

## What is inside

- `chesstables.rank`: the `Rank` and `File` enums, with wrap-around stepping
  (`Rank.up`, `Rank.down`, `File.left`, `File.right`), `from_index` (which wraps
  past 7) and parsing through `from_str`, which raises `ValueError` on bad input.
- `chesstables.piece`: the `Color` and `Piece` enums. `Color` has `opposite()`
  (also `~color`) and the back, second and seventh ranks for each side.
  `str(piece)` is the lower-case letter, and `Piece.symbol(color)` gives the
  letter upper case for white and lower case for black.
- `chesstables.square`: `Square`, built from an index 0 to 63 (wrapped with
  `& 63`) or with `Square.make_square(rank, file)`. It has bounded steps that
  return `None` at the edge of the board (`up`, `down`, `left`, `right`,
  `forward`, `backward`) and wrapping steps (`uup`, `udown`, `uleft`, `uright`,
  `uforward`, `ubackward`). `Square.from_str("e4")` parses a square; `str(sq)`
  gives its name back.
- `chesstables.squares`: `all_squares()` lists the 64 squares from a1 to h8, and
  `by_name("e4")` looks a square up by its two-character name (case does not
  matter), raising `ValueError` for an unknown name.
- `chesstables.masks`: `EMPTY` and `FULL`, `squares_mask`, `iter_squares`, and
  `get_rank`, `get_file`, `get_adjacent_files` and `get_edges`.
- `chesstables.lines`: `line` (the whole rank, file or diagonal through two
  squares), `between` (the squares strictly between them), and the empty-board
  rays `get_rook_rays`, `get_bishop_rays` and `get_rays`.
- `chesstables.leapers`: `get_knight_moves`, `get_king_moves`,
  `kingside_castle_squares`, `queenside_castle_squares`, `get_castle_moves`,
  `get_pawn_attacks`, `get_pawn_quiets`, `get_pawn_moves`, and the pawn
  double-move masks `get_pawn_source_double_moves` and
  `get_pawn_dest_double_moves`.
- `chesstables.sliders`: `get_rook_moves`, `get_bishop_moves` and
  `get_queen_moves` for a given set of blockers. Moves stop at the first blocker
  in each direction and include it. For each square and piece, every relevant
  blocker set (from `magic_mask` and `blocker_subsets`, paired with its moves by
  `questions_and_answers`) is worked out once on first use and kept in a table.
- `chesstables.zobrist`: fixed Zobrist hash keys, the same on every run:
  `piece_key`, `castles_key` (castling rights 0 to 3, else `ValueError`),
  `en_passant_key` and `side_to_move_key`.

## Example

```python
from chesstables.piece import Color
from chesstables.squares import by_name
from chesstables.masks import iter_squares, squares_mask
from chesstables.sliders import get_rook_moves
from chesstables.leapers import get_knight_moves, get_pawn_moves

e4 = by_name("e4")
knight_targets = [str(sq) for sq in iter_squares(get_knight_moves(e4))]

blockers = squares_mask([by_name("e6"), by_name("c4")])
rook_targets = get_rook_moves(e4, blockers)

pawn_targets = get_pawn_moves(by_name("e2"), Color.WHITE, 0)
```

## What it does not do

The package holds tables and per-square lookups only. It has no board or
position type, does not read or write FEN, does not generate the legal moves of
a position or check for check, pins or mate, and keeps no game history. There is
no command-line program.

## Running the tests

    pip install -e .[test]
    pytest