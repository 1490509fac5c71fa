import pytest

from dpkit.rectangle_cutting import min_cuts


def test_known_example():
    assert min_cuts(3, 5) == 3


@pytest.mark.parametrize("side", [1, 2, 7, 20])
def test_square_needs_no_cuts(side):
    assert min_cuts(side, side) == 0


@pytest.mark.parametrize("length", [1, 2, 5, 12])
def test_strip_is_cut_into_unit_squares(length):
    assert min_cuts(1, length) == length - 1
    assert min_cuts(length, 1) == length - 1


@pytest.mark.parametrize("a", range(1, 9))
@pytest.mark.parametrize("b", range(1, 9))
def test_symmetric_and_bounded(a, b):
    result = min_cuts(a, b)
    assert result == min_cuts(b, a)
    assert 0 <= result <= a * b - 1


@pytest.mark.parametrize("a,b", [(0, 3), (3, 0), (-1, 2)])
def test_non_positive_sides_raise(a, b):
    with pytest.raises(ValueError):
        min_cuts(a, b)