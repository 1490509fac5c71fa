"""Fewest straight cuts splitting a rectangle into squares."""

from itertools import chain


def min_cuts(width: int, height: int) -> int:
    """Return the fewest full-length cuts dividing a rectangle into squares."""
    if width < 1 or height < 1:
        raise ValueError("sides must be positive")
    short, long_ = sorted((width, height))
    if short == long_:
        return 0

    cuts = [[0] * (long_ + 1) for _ in range(short + 1)]
    for h in range(1, short + 1):
        for w in range(1, long_ + 1):
            if h == w:
                continue
            cuts[h][w] = 1 + min(
                chain(
                    (cuts[c][w] + cuts[h - c][w] for c in range(1, h)),
                    (cuts[h][c] + cuts[h][w - c] for c in range(1, w)),
                )
            )
    return cuts[short][long_]