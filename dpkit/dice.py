"""Count the ways to reach a sum with throws of a six-sided die."""

from collections import deque

MOD = 1_000_000_007
FACES = 6


def dice_combinations(n: int) -> int:
    """Return the number of ordered throw sequences summing to *n*, mod 1e9+7."""
    if n < 0:
        raise ValueError("sum must not be negative")
    window = deque([0] * (FACES - 1) + [1], maxlen=FACES)
    for _ in range(n):
        window.append(sum(window) % MOD)
    return window[-1]