"""Largest square of ones in a binary matrix."""

from collections.abc import Iterable


def max_square(matrix: Iterable[Iterable[int]]) -> int:
    """Return the side of the largest all-ones square in *matrix*.

    Cells equal to 1 count as filled; anything else as empty. Raises
    ValueError for an empty or ragged matrix.
    """
    rows = [list(row) for row in matrix]
    if not rows or not rows[0]:
        raise ValueError("matrix must not be empty")
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("all rows must have the same length")

    best = 0
    below = [0] * (width + 1)
    for row in reversed(rows):
        current = [0] * (width + 1)
        for j in range(width - 1, -1, -1):
            if row[j] == 1:
                current[j] = 1 + min(current[j + 1], below[j], below[j + 1])
                best = max(best, current[j])
        below = current
    return best