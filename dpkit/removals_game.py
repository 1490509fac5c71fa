"""Decide the winner of the two-permutation removals game."""

from collections.abc import Sequence


def winner(alice: Sequence[int], bob: Sequence[int]) -> str:
    """Return "Bob" if his array equals Alice's or its reverse, else "Alice"."""
    first = list(alice)
    second = list(bob)
    if len(first) != len(second):
        raise ValueError("both arrays must have the same length")
    if first == second or first[::-1] == second:
        return "Bob"
    return "Alice"