import pytest

from dpkit.largest_square import max_square


@pytest.mark.parametrize("rows,cols", [(1, 1), (2, 5), (4, 4), (6, 3)])
def test_all_ones(rows, cols):
    assert max_square([[1] * cols for _ in range(rows)]) == min(rows, cols)


@pytest.mark.parametrize("rows,cols", [(1, 1), (3, 4)])
def test_all_zeros(rows, cols):
    assert max_square([[0] * cols for _ in range(rows)]) == 0


def test_identity_matrix():
    size = 5
    matrix = [[1 if i == j else 0 for j in range(size)] for i in range(size)]
    assert max_square(matrix) == 1


@pytest.mark.parametrize("side", [1, 2, 3, 4])
def test_embedded_block(side):
    size = 7
    matrix = [[0] * size for _ in range(size)]
    for i in range(2, 2 + side):
        for j in range(1, 1 + side):
            matrix[i][j] = 1
    assert max_square(matrix) == side


def test_block_broken_by_a_zero():
    matrix = [[1] * 4 for _ in range(4)]
    matrix[0][0] = 0
    assert max_square(matrix) == 3


def test_empty_raises():
    with pytest.raises(ValueError):
        max_square([])
    with pytest.raises(ValueError):
        max_square([[]])


def test_ragged_raises():
    with pytest.raises(ValueError):
        max_square([[1, 1], [1]])