import pytest

from dpkit.edit_distance import edit_distance

WORDS = ["", "a", "ab", "abc", "kitten", "sitting", "LOVE", "MOVIE", "banana", "ananas"]


def test_known_examples():
    assert edit_distance("kitten", "sitting") == 3
    assert edit_distance("LOVE", "MOVIE") == 2


def test_single_replacement():
    assert edit_distance("abc", "abd") == 1


@pytest.mark.parametrize("word", WORDS)
def test_identical_strings_cost_nothing(word):
    assert edit_distance(word, word) == 0


@pytest.mark.parametrize("word", WORDS)
def test_distance_to_empty_is_length(word):
    assert edit_distance(word, "") == len(word)
    assert edit_distance("", word) == len(word)


@pytest.mark.parametrize("first", WORDS)
@pytest.mark.parametrize("second", WORDS)
def test_symmetric_and_bounded(first, second):
    distance = edit_distance(first, second)
    assert distance == edit_distance(second, first)
    assert abs(len(first) - len(second)) <= distance <= max(len(first), len(second))


@pytest.mark.parametrize("a", WORDS[:6])
@pytest.mark.parametrize("b", WORDS[:6])
@pytest.mark.parametrize("c", WORDS[:6])
def test_triangle_inequality(a, b, c):
    assert edit_distance(a, c) <= edit_distance(a, b) + edit_distance(b, c)