"""Count the towers of width two and a given height built from blocks."""

MOD = 1_000_000_007


def _tower_states(limit: int):
    """Yield the totals for heights 1..limit."""
    joined = split = 1
    yield (joined + split) % MOD
    for _ in range(2, limit + 1):
        joined, split = (
            (2 * joined + split) % MOD,
            (4 * split + joined) % MOD,
        )
        yield (joined + split) % MOD


def tower_table(limit: int) -> list[int]:
    """Return counts for every height up to *limit*, indexed by height.

    Entry 0 is not a height and holds 0.
    """
    if limit < 1:
        raise ValueError("limit must be at least 1")
    return [0, *_tower_states(limit)]


def count_towers(n: int) -> int:
    """Return the number of towers of height *n*, modulo 1e9+7."""
    if n < 1:
        raise ValueError("height must be at least 1")
    result = 0
    for result in _tower_states(n):
        pass
    return result