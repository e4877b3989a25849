import pytest

from chesstables.piece import Color
from chesstables.rank import File, Rank
from chesstables.square import Square


def sq(rank, file):
    return Square.make_square(rank, file)


def test_default_is_a1():
    assert Square() == sq(Rank.FIRST, File.A)
    assert Square(0) == Square()


def test_new_wraps_index():
    assert Square(64) == Square()


def test_make_square_and_back():
    s = sq(Rank.SEVENTH, File.D)
    assert s.rank() is Rank.SEVENTH
    assert s.file() is File.D


def test_to_index():
    assert int(sq(Rank.FIRST, File.A)) == 0
    assert int(sq(Rank.SECOND, File.A)) == 8
    assert sq(Rank.FIRST, File.B).index == 1
    assert sq(Rank.EIGHTH, File.H).index == 63


def test_up_and_down():
    s = sq(Rank.SEVENTH, File.D)
    assert s.up() == sq(Rank.EIGHTH, File.D)
    assert s.up().up() is None
    s = sq(Rank.SECOND, File.D)
    assert s.down() == sq(Rank.FIRST, File.D)
    assert s.down().down() is None


def test_left_and_right():
    s = sq(Rank.SEVENTH, File.B)
    assert s.left() == sq(Rank.SEVENTH, File.A)
    assert s.left().left() is None
    s = sq(Rank.SEVENTH, File.G)
    assert s.right() == sq(Rank.SEVENTH, File.H)
    assert s.right().right() is None


def test_forward():
    s = sq(Rank.SEVENTH, File.D)
    assert s.forward(Color.WHITE) == sq(Rank.EIGHTH, File.D)
    assert s.forward(Color.WHITE).forward(Color.WHITE) is None
    s = sq(Rank.SECOND, File.D)
    assert s.forward(Color.BLACK) == sq(Rank.FIRST, File.D)
    assert s.forward(Color.BLACK).forward(Color.BLACK) is None


def test_backward():
    s = sq(Rank.SEVENTH, File.D)
    assert s.backward(Color.BLACK) == sq(Rank.EIGHTH, File.D)
    assert s.backward(Color.BLACK).backward(Color.BLACK) is None
    s = sq(Rank.SECOND, File.D)
    assert s.backward(Color.WHITE) == sq(Rank.FIRST, File.D)
    assert s.backward(Color.WHITE).backward(Color.WHITE) is None


def test_wrapping_vertical():
    s = sq(Rank.SEVENTH, File.D)
    assert s.uup() == sq(Rank.EIGHTH, File.D)
    assert s.uup().uup() == sq(Rank.FIRST, File.D)
    s = sq(Rank.SECOND, File.D)
    assert s.udown() == sq(Rank.FIRST, File.D)
    assert s.udown().udown() == sq(Rank.EIGHTH, File.D)


def test_wrapping_horizontal():
    s = sq(Rank.SEVENTH, File.B)
    assert s.uleft() == sq(Rank.SEVENTH, File.A)
    assert s.uleft().uleft() == sq(Rank.SEVENTH, File.H)
    s = sq(Rank.SEVENTH, File.G)
    assert s.uright() == sq(Rank.SEVENTH, File.H)
    assert s.uright().uright() == sq(Rank.SEVENTH, File.A)


def test_uforward():
    s = sq(Rank.SEVENTH, File.D)
    assert s.uforward(Color.WHITE) == sq(Rank.EIGHTH, File.D)
    assert s.uforward(Color.WHITE).uforward(Color.WHITE) == sq(Rank.FIRST, File.D)
    s = sq(Rank.SECOND, File.D)
    assert s.uforward(Color.BLACK) == sq(Rank.FIRST, File.D)
    assert s.uforward(Color.BLACK).uforward(Color.BLACK) == sq(Rank.EIGHTH, File.D)


def test_ubackward():
    s = sq(Rank.SEVENTH, File.D)
    assert s.ubackward(Color.BLACK) == sq(Rank.EIGHTH, File.D)
    assert s.ubackward(Color.BLACK).ubackward(Color.BLACK) == sq(Rank.FIRST, File.D)
    s = sq(Rank.SECOND, File.D)
    assert s.ubackward(Color.WHITE) == sq(Rank.FIRST, File.D)
    assert s.ubackward(Color.WHITE).ubackward(Color.WHITE) == sq(Rank.EIGHTH, File.D)


def test_from_str_a1():
    assert Square.from_str("a1") == Square()


def test_str_round_trip_all_squares():
    for i in range(64):
        s = Square(i)
        assert Square.from_str(str(s)) == s


def test_str_corners():
    assert str(Square(0)) == "a1"
    assert str(Square(63)) == "h8"


@pytest.mark.parametrize("text", ["", "a", "i1", "a9", "a0", "A1", "11"])
def test_from_str_invalid(text):
    with pytest.raises(ValueError):
        Square.from_str(text)


def test_ordering_and_hash():
    squares = [Square(i) for i in (5, 1, 63, 0)]
    assert sorted(squares) == [Square(0), Square(1), Square(5), Square(63)]
    assert len({Square(3), Square(3), Square(67)}) == 1


def test_wrapping_moves_are_inverse():
    for i in range(64):
        s = Square(i)
        assert s.uup().udown() == s
        assert s.uleft().uright() == s
        assert s.uforward(Color.WHITE).ubackward(Color.WHITE) == s
        assert s.uforward(Color.BLACK).ubackward(Color.BLACK) == s