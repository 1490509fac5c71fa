# dpkit

A small collection of classic dynamic-programming and counting problems,
each solved as a plain Python function. Results that can grow large are
reported modulo 1 000 000 007, as the problems define them. Invalid input
(negative sums, values out of range, rows of different lengths and so on)
raises `ValueError`.

## Installation

```
pip install .
```

Install the test extra to run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Function(s) | Problem |
| --- | --- | --- |
| `dpkit.array_description` | `count_arrays(values, upper)` | Fill the zeros of an array with numbers in `1..upper` so neighbours differ by at most one; count the ways |
| `dpkit.coins` | `count_ordered_ways(coins, target)`, `count_unordered_ways(coins, target)`, `min_coins(coins, target)` | Coin combinations (ordered and unordered) and the fewest coins for a sum; `min_coins` returns `None` when the sum cannot be made |
| `dpkit.dice` | `dice_combinations(n)` | Ways to reach a sum by throwing a six-sided die |
| `dpkit.towers` | `tower_table(limit)`, `count_towers(n)` | Ways to build a tower of width 2 and height `n`; `tower_table` gives every height up to `limit` at once |
| `dpkit.book_shop` | `max_pages(prices, pages, budget)` | 0/1 knapsack: most pages within a budget |
| `dpkit.edit_distance` | `edit_distance(first, second)` | Minimum inserts, deletes and replacements |
| `dpkit.largest_square` | `max_square(matrix)` | Side of the largest all-ones square in a 0/1 matrix |
| `dpkit.grid_path` | `min_moves(top, bottom)` | Fewest moves of ones to open a path through a two-row grid, or `None` when no path can be formed |
| `dpkit.rectangle_cutting` | `min_cuts(width, height)` | Fewest cuts to split a rectangle into squares |
| `dpkit.removing_digits` | `min_steps(n)` | Fewest steps to reach zero by subtracting one of the number's digits |
| `dpkit.removals_game` | `winner(alice, bob)` | Who wins the permutation removals game (`"Alice"` or `"Bob"`) |
| `dpkit.josephus` | `elimination_order(n)`, `kth_removed(n, k)` | Josephus circle with every second child removed |

## Examples

```python
from dpkit.coins import count_ordered_ways, count_unordered_ways, min_coins
from dpkit.dice import dice_combinations
from dpkit.edit_distance import edit_distance
from dpkit.rectangle_cutting import min_cuts
from dpkit.removing_digits import min_steps

count_ordered_ways([2, 3, 5], 9)    # 8
count_unordered_ways([2, 3, 5], 9)  # 3
min_coins([1, 5, 7], 11)            # 3
dice_combinations(3)                # 4
edit_distance("LOVE", "MOVIE")      # 2
min_cuts(3, 5)                      # 3
min_steps(27)                       # 5
```

## Command line

Installing the package provides a `dpkit` command. It takes one
subcommand naming a problem, reads that problem's input as
whitespace-separated tokens from standard input, and prints the answer.
Impossible cases print `-1`; malformed input prints an error to standard
error and exits with status 1.

| Subcommand | Input |
| --- | --- |
| `array-description` | `n upper`, then `n` values (0 for unknown) |
| `removals-game` | number of cases; each: `n`, then two arrays of `n` |
| `book-shop` | `n budget`, then `n` prices, then `n` page counts |
| `coin-combinations-1` | `n target`, then `n` coins (ordered ways) |
| `coin-combinations-2` | `n target`, then `n` coins (unordered ways) |
| `counting-towers` | number of heights, then the heights |
| `dice` | the sum |
| `edit-distance` | two words |
| `grid-path` | number of cases; each: `n q`, then two rows of `n` digits |
| `minimizing-coins` | `n target`, then `n` coins |
| `rectangle-cutting` | width and height |
| `removing-digits` | the number |
| `josephus` | number of children; prints the removal order |
| `josephus-queries` | number of queries; each: `n k` |

For example:

```
echo "3 9 2 3 5" | dpkit coin-combinations-1
```

List the subcommands with:

```
dpkit --help
```

## What it does not do

The largest-square problem (`dpkit.largest_square.max_square`) is
available only as a function; the `dpkit` command has no subcommand for it.