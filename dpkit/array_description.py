"""Count arrays that fit a partial description.

Each element lies in ``1..upper``, and neighbouring elements differ by at
most one. A zero in the description marks an unknown element.
"""

from collections.abc import Iterable

MOD = 1_000_000_007


def count_arrays(values: Iterable[int], upper: int) -> int:
    """Return the number of arrays matching *values*, modulo 1e9+7.

    Zeros in *values* are unknown and may be any number in ``1..upper``.
    Raises ValueError for an empty description, an upper bound below one,
    or a known value outside ``1..upper``.
    """
    description = list(values)
    if not description:
        raise ValueError("description must not be empty")
    if upper < 1:
        raise ValueError("upper bound must be at least 1")
    for value in description:
        if not 0 <= value <= upper:
            raise ValueError(f"value {value} outside 0..{upper}")

    first = description[0]
    if len(description) == 1:
        return upper if first == 0 else 1

    # Padded with a zero on each side so neighbours never fall off the edge.
    prev = [0] * (upper + 2)
    if first == 0:
        for j in range(1, upper + 1):
            prev[j] = 1
    else:
        prev[first] = 1

    for value in description[1:]:
        curr = [0] * (upper + 2)
        candidates = range(1, upper + 1) if value == 0 else (value,)
        for j in candidates:
            curr[j] = (prev[j - 1] + prev[j] + prev[j + 1]) % MOD
        prev = curr

    last = description[-1]
    if last == 0:
        return sum(prev) % MOD
    return prev[last]