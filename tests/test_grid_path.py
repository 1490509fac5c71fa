import pytest

from dpkit.grid_path import min_moves


@pytest.mark.parametrize("n", [1, 2, 5])
def test_full_grid_needs_no_moves(n):
    assert min_moves("1" * n, "1" * n) == 0


def test_path_already_in_place():
    assert min_moves("11", "01") == 0


def test_one_slide_needed():
    assert min_moves("101", "011") == 1


@pytest.mark.parametrize(
    "top,bottom",
    [("", ""), ("0", "0"), ("10", "01"), ("000", "111"), ("100", "001")],
)
def test_too_few_ones(top, bottom):
    assert min_moves(top, bottom) is None


@pytest.mark.parametrize(
    "top,bottom",
    [("1101", "0111"), ("1011", "1101"), ("11100", "00111"), ("0111", "1110")],
)
def test_feasible_results_are_non_negative(top, bottom):
    result = min_moves(top, bottom)
    assert result is not None
    assert result >= 0


def test_length_mismatch_raises():
    with pytest.raises(ValueError):
        min_moves("11", "1")


def test_bad_characters_raise():
    with pytest.raises(ValueError):
        min_moves("1a", "11")