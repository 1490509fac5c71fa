"""Josephus circle with every second child removed."""

from collections import deque


def elimination_order(n: int) -> list[int]:
    """Return children 1..n in the order they leave; the survivor comes last."""
    if n < 1:
        raise ValueError("circle must hold at least one child")
    circle = deque(range(1, n + 1))
    order = []
    while len(circle) > 1:
        circle.rotate(-1)
        order.append(circle.popleft())
    order.append(circle[0])
    return order


def kth_removed(n: int, k: int) -> int:
    """Return the child at position *k* of the removal sequence for *n* children.

    The even children go first, in order; the odd children left behind form
    a circle of (n + 1) // 2 children that is resolved the same way.
    """
    if n < 1:
        raise ValueError("circle must hold at least one child")
    if not 1 <= k <= n:
        raise ValueError(f"k must lie in 1..{n}")
    if n == 1:
        return 1
    half = n // 2
    if k <= half:
        return 2 * k
    return 2 * kth_removed((n + 1) // 2, k - half) - 1