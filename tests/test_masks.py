import pytest

from chesstables.masks import (
    EMPTY,
    FULL,
    get_adjacent_files,
    get_edges,
    get_file,
    get_rank,
    iter_squares,
    squares_mask,
)
from chesstables.rank import ALL_FILES, ALL_RANKS, File, Rank
from chesstables.square import Square
from chesstables.squares import all_squares, by_name


def test_all_squares_fill_the_universe():
    assert squares_mask(all_squares()) == FULL


def test_empty_mask_has_no_squares():
    assert squares_mask([]) == EMPTY
    assert list(iter_squares(EMPTY)) == []


def test_single_square_round_trip():
    for sq in all_squares():
        assert list(iter_squares(squares_mask([sq]))) == [sq]


def test_iter_squares_ascending_order():
    picked = [by_name("h8"), by_name("a1"), by_name("e4")]
    assert list(iter_squares(squares_mask(picked))) == sorted(picked)


def test_iter_squares_full_board():
    assert list(iter_squares(FULL)) == list(all_squares())


@pytest.mark.parametrize("rank", ALL_RANKS)
def test_rank_mask_holds_its_rank(rank):
    squares = list(iter_squares(get_rank(rank)))
    assert len(squares) == len(ALL_FILES)
    assert all(sq.rank() == rank for sq in squares)


@pytest.mark.parametrize("file", ALL_FILES)
def test_file_mask_holds_its_file(file):
    squares = list(iter_squares(get_file(file)))
    assert len(squares) == len(ALL_RANKS)
    assert all(sq.file() == file for sq in squares)


def test_ranks_partition_the_board():
    union = EMPTY
    for rank in ALL_RANKS:
        assert union & get_rank(rank) == EMPTY
        union |= get_rank(rank)
    assert union == FULL


def test_files_partition_the_board():
    union = EMPTY
    for file in ALL_FILES:
        assert union & get_file(file) == EMPTY
        union |= get_file(file)
    assert union == FULL


def test_adjacent_files_at_edges():
    assert get_adjacent_files(File.A) == get_file(File.B)
    assert get_adjacent_files(File.H) == get_file(File.G)


def test_adjacent_files_in_middle():
    assert get_adjacent_files(File.D) == get_file(File.C) | get_file(File.E)


@pytest.mark.parametrize("file", ALL_FILES)
def test_adjacent_files_exclude_own_file(file):
    assert get_adjacent_files(file) & get_file(file) == EMPTY


def test_edges_are_outer_ranks_and_files():
    expected = (
        get_rank(Rank.FIRST)
        | get_rank(Rank.EIGHTH)
        | get_file(File.A)
        | get_file(File.H)
    )
    assert get_edges() == expected


def test_edges_contain_corners_not_centre():
    edges = get_edges()
    assert edges & squares_mask([Square(0), Square(63)]) == squares_mask(
        [Square(0), Square(63)]
    )
    assert edges & squares_mask([by_name("d4"), by_name("e5")]) == EMPTY