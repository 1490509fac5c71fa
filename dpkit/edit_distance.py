"""Edit distance between two strings."""


def edit_distance(first: str, second: str) -> int:
    """Return the fewest insertions, deletions and replacements turning *first* into *second*."""
    previous = list(range(len(second) + 1))
    for i, left in enumerate(first, 1):
        current = [i]
        for j, right in enumerate(second, 1):
            if left == right:
                current.append(previous[j - 1])
            else:
                current.append(1 + min(previous[j], current[j - 1], previous[j - 1]))
        previous = current
    return previous[-1]