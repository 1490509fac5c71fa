"""Command-line entry point: read a problem's input from stdin and print its answer."""

import argparse
import sys
from collections.abc import Callable, Iterator

from dpkit.array_description import count_arrays
from dpkit.book_shop import max_pages
from dpkit.coins import count_ordered_ways, count_unordered_ways, min_coins
from dpkit.dice import dice_combinations
from dpkit.edit_distance import edit_distance
from dpkit.grid_path import min_moves
from dpkit.josephus import elimination_order, kth_removed
from dpkit.rectangle_cutting import min_cuts
from dpkit.removals_game import winner
from dpkit.removing_digits import min_steps
from dpkit.towers import tower_table


class _Tokens:
    """Whitespace-separated tokens of the input, read in order."""

    def __init__(self, text: str) -> None:
        self._items = iter(text.split())

    def word(self) -> str:
        try:
            return next(self._items)
        except StopIteration:
            raise ValueError("unexpected end of input") from None

    def integer(self) -> int:
        token = self.word()
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"expected an integer, got {token!r}") from None

    def integers(self, count: int) -> list[int]:
        if count < 0:
            raise ValueError("count must not be negative")
        return [self.integer() for _ in range(count)]


def _array_description(tokens: _Tokens) -> Iterator[str]:
    n = tokens.integer()
    upper = tokens.integer()
    yield str(count_arrays(tokens.integers(n), upper))


def _removals_game(tokens: _Tokens) -> Iterator[str]:
    for _ in range(tokens.integer()):
        n = tokens.integer()
        alice = tokens.integers(n)
        bob = tokens.integers(n)
        yield winner(alice, bob)


def _book_shop(tokens: _Tokens) -> Iterator[str]:
    n = tokens.integer()
    budget = tokens.integer()
    prices = tokens.integers(n)
    pages = tokens.integers(n)
    yield str(max_pages(prices, pages, budget))


def _coin_combinations_ordered(tokens: _Tokens) -> Iterator[str]:
    n = tokens.integer()
    target = tokens.integer()
    yield str(count_ordered_ways(tokens.integers(n), target))


def _coin_combinations_unordered(tokens: _Tokens) -> Iterator[str]:
    n = tokens.integer()
    target = tokens.integer()
    yield str(count_unordered_ways(tokens.integers(n), target))


def _counting_towers(tokens: _Tokens) -> Iterator[str]:
    heights = tokens.integers(tokens.integer())
    if not heights:
        return
    if min(heights) < 1:
        raise ValueError("height must be at least 1")
    table = tower_table(max(heights))
    for height in heights:
        yield str(table[height])


def _dice(tokens: _Tokens) -> Iterator[str]:
    yield str(dice_combinations(tokens.integer()))


def _edit_distance(tokens: _Tokens) -> Iterator[str]:
    first = tokens.word()
    second = tokens.word()
    yield str(edit_distance(first, second))


def _grid_path(tokens: _Tokens) -> Iterator[str]:
    for _ in range(tokens.integer()):
        n = tokens.integer()
        tokens.integer()  # query count, unused
        top = tokens.word()
        bottom = tokens.word()
        if len(top) != n or len(bottom) != n:
            raise ValueError(f"rows must have length {n}")
        moves = min_moves(top, bottom)
        yield str(-1 if moves is None else moves)


def _minimizing_coins(tokens: _Tokens) -> Iterator[str]:
    n = tokens.integer()
    target = tokens.integer()
    best = min_coins(tokens.integers(n), target)
    yield str(-1 if best is None else best)


def _rectangle_cutting(tokens: _Tokens) -> Iterator[str]:
    width = tokens.integer()
    height = tokens.integer()
    yield str(min_cuts(width, height))


def _removing_digits(tokens: _Tokens) -> Iterator[str]:
    yield str(min_steps(tokens.integer()))


def _josephus(tokens: _Tokens) -> Iterator[str]:
    yield " ".join(map(str, elimination_order(tokens.integer())))


def _josephus_queries(tokens: _Tokens) -> Iterator[str]:
    for _ in range(tokens.integer()):
        n = tokens.integer()
        k = tokens.integer()
        yield str(kth_removed(n, k))


_COMMANDS: dict[str, tuple[Callable[[_Tokens], Iterator[str]], str]] = {
    "array-description": (_array_description, "count arrays matching a description"),
    "removals-game": (_removals_game, "decide the removals game for each case"),
    "book-shop": (_book_shop, "most pages within a budget"),
    "coin-combinations-1": (_coin_combinations_ordered, "ordered ways to make a sum"),
    "coin-combinations-2": (_coin_combinations_unordered, "unordered ways to make a sum"),
    "counting-towers": (_counting_towers, "count towers for each height"),
    "dice": (_dice, "ways to reach a sum with dice throws"),
    "edit-distance": (_edit_distance, "edit distance between two words"),
    "grid-path": (_grid_path, "fewest moves to form a path in a two-row grid"),
    "minimizing-coins": (_minimizing_coins, "fewest coins making a sum"),
    "rectangle-cutting": (_rectangle_cutting, "fewest cuts into squares"),
    "removing-digits": (_removing_digits, "fewest digit subtractions to zero"),
    "josephus": (_josephus, "removal order for every second child"),
    "josephus-queries": (_josephus_queries, "k-th removed child for each query"),
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dpkit",
        description="Solve a counting or optimisation problem read from standard input.",
    )
    commands = parser.add_subparsers(dest="command", required=True, metavar="COMMAND")
    for name, (_, help_text) in _COMMANDS.items():
        commands.add_parser(name, help=help_text)
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the chosen problem on standard input; return the exit status."""
    args = _build_parser().parse_args(argv)
    handler, _ = _COMMANDS[args.command]
    tokens = _Tokens(sys.stdin.read())
    try:
        lines = list(handler(tokens))
    except ValueError as error:
        print(f"dpkit: error: {error}", file=sys.stderr)
        return 1
    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())