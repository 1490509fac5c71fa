"""Choose books within a budget to maximise the total number of pages."""

from collections.abc import Sequence


def max_pages(prices: Sequence[int], pages: Sequence[int], budget: int) -> int:
    """Return the most pages obtainable buying each book at most once."""
    if len(prices) != len(pages):
        raise ValueError("prices and pages must have the same length")
    if budget < 0:
        raise ValueError("budget must not be negative")
    if any(price < 0 for price in prices):
        raise ValueError("prices must not be negative")

    best = [0] * (budget + 1)
    for price, count in zip(prices, pages):
        for spend in range(budget, price - 1, -1):
            best[spend] = max(best[spend], count + best[spend - price])
    return best[budget]