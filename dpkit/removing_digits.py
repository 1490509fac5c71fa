"""Fewest steps to reach zero by subtracting one of the number's digits."""

from collections import deque

_WINDOW = 9


def min_steps(n: int) -> int:
    """Return the fewest digit subtractions taking *n* to zero.

    Every number below ten takes a single step.
    """
    if n < 0:
        raise ValueError("number must not be negative")
    if n < 10:
        return 1

    # window[-d] holds the answer for i - d.
    window = deque([1] * _WINDOW, maxlen=_WINDOW)
    for i in range(10, n + 1):
        digits = {int(c) for c in str(i)} - {0}
        window.append(1 + min(window[-d] for d in digits))
    return window[-1]