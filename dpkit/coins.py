"""Coin problems: counting ways to make a sum and the fewest coins needed."""

from collections.abc import Iterable

MOD = 1_000_000_007


def _validate(coins: Iterable[int]) -> list[int]:
    values = list(coins)
    for coin in values:
        if coin < 1:
            raise ValueError(f"coin value must be positive, got {coin}")
    return values


def count_ordered_ways(coins: Iterable[int], target: int) -> int:
    """Count ordered sequences of coins summing to *target*, modulo 1e9+7."""
    values = _validate(coins)
    if target < 0:
        raise ValueError("target must not be negative")
    ways = [0] * (target + 1)
    ways[0] = 1
    for total in range(1, target + 1):
        ways[total] = sum(ways[total - c] for c in values if c <= total) % MOD
    return ways[target]


def count_unordered_ways(coins: Iterable[int], target: int) -> int:
    """Count distinct multisets of coins summing to *target*, modulo 1e9+7."""
    values = _validate(coins)
    if target < 0:
        raise ValueError("target must not be negative")
    ways = [0] * (target + 1)
    ways[0] = 1
    for coin in values:
        for total in range(coin, target + 1):
            ways[total] = (ways[total] + ways[total - coin]) % MOD
    return ways[target]


def min_coins(coins: Iterable[int], target: int) -> int | None:
    """Return the fewest coins summing to *target*, or None if impossible.

    A target of zero or less needs no coins.
    """
    values = _validate(coins)
    if target <= 0:
        return 0
    best: list[int | None] = [None] * (target + 1)
    best[0] = 0
    for total in range(1, target + 1):
        options = [
            best[total - c] + 1
            for c in values
            if c <= total and best[total - c] is not None
        ]
        if options:
            best[total] = min(options)
    return best[target]