import pytest

from dpkit.removing_digits import min_steps


def test_known_example():
    assert min_steps(27) == 5


@pytest.mark.parametrize("n", range(0, 10))
def test_single_digits_take_one_step(n):
    assert min_steps(n) == 1


@pytest.mark.parametrize("n", range(10, 400))
def test_optimal_substructure(n):
    steps = min_steps(n)
    digits = {int(c) for c in str(n)} - {0}
    follow_ups = [1 + min_steps(n - d) for d in digits]
    assert all(steps <= value for value in follow_ups)
    assert steps in follow_ups


@pytest.mark.parametrize("n", [1, 9, 10, 99, 1000, 12345])
def test_lower_bound_by_largest_digit(n):
    assert 9 * min_steps(n) >= n


def test_negative_raises():
    with pytest.raises(ValueError):
        min_steps(-1)