"""Fewest moves to make a monotone path of ones across a two-row grid.

The path runs right along the top row to a turning column, steps down,
and runs right along the bottom row to the end. Ones may be slid within
their own row, each step of a one costing a move.
"""

_DIGITS = frozenset("01")


def _route_cost(top: str, bottom: str, turn: int) -> int | None:
    n = len(top)
    top_gaps = [i for i in range(turn, -1, -1) if top[i] == "0"]
    top_spare = [i for i in range(turn + 1, n) if top[i] == "1"]
    bottom_gaps = [i for i in range(turn, n) if bottom[i] == "0"]
    bottom_spare = [i for i in range(turn - 1, -1, -1) if bottom[i] == "1"]
    if len(top_spare) < len(top_gaps) or len(bottom_spare) < len(bottom_gaps):
        return None
    return sum(one - gap for gap, one in zip(top_gaps, top_spare)) + sum(
        gap - one for gap, one in zip(bottom_gaps, bottom_spare)
    )


def min_moves(top: str, bottom: str) -> int | None:
    """Return the fewest moves needed, or None when no path can be formed.

    Three turning columns are tried: where the bottom's ones fit exactly,
    where the top's ones fit exactly, and the middle column.
    """
    if len(top) != len(bottom):
        raise ValueError("rows must have the same length")
    if not set(top) <= _DIGITS or not set(bottom) <= _DIGITS:
        raise ValueError("rows may contain only '0' and '1'")

    n = len(top)
    top_ones = top.count("1")
    bottom_ones = bottom.count("1")
    if top_ones + bottom_ones < n + 1:
        return None

    turns = (n - bottom_ones, top_ones - 1, n // 2)
    costs = [
        cost
        for turn in turns
        if 0 <= turn < n and (cost := _route_cost(top, bottom, turn)) is not None
    ]
    return min(costs) if costs else None