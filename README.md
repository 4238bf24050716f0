# contestkit

Solvers for five short contest problems. Each solver is a plain Python
function. Each module also has a command that reads a batch of test cases and
writes one answer per line.

## Install

    pip install .

## Library use

```python
from contestkit.phone import smallest_beautiful
from contestkit.apartment import median_range_first, median_range_second
from contestkit.betting import (
    can_win_by_counts,
    can_win_max_frequency,
    can_win_connected,
    can_win_by_pairs,
)
from contestkit.baggage import count_paths, MOD
from contestkit.bermuda import count_reflections, MAX_REFLECTIONS
```

### `contestkit.phone`

`smallest_beautiful(digits)` takes a string of digits as a pool. For each
position *i* from 1 to 10, it picks the smallest digit still in the pool that
is at least `10 - i`. A position with no such digit is skipped, so the result
can be shorter than ten digits. A string with any non-digit character raises
`ValueError`.

### `contestkit.apartment`

`median_range_first(prices, k)` and `median_range_second(prices, k)` sort the
prices and return `high - low + 1` for the range of medians that remain after
closing up to `k` bars. With `m = len(prices) - k` and `h = (m + 1) // 2`, the
low end is the `h`-th smallest price in both. The high end differs:

- `median_range_first` takes the price at sorted index `k + h - 1`.
- `median_range_second` takes the price at sorted index `len(prices) - h`.

Both raise `ValueError` unless `0 <= k < len(prices)`.

### `contestkit.betting`

Four strategies decide whether a list of bet days guarantees a win. Each
returns a `bool`:

- `can_win_by_counts(bets)`: true if some day has four or more bets. Otherwise
  it is true if there are at least three distinct days, if there are two
  distinct days and at least three bets, or if there is one distinct day and at
  least four bets.
- `can_win_max_frequency(bets)`: true only if some day has four or more bets.
- `can_win_connected(bets)`: true if some day has four or more bets. Otherwise
  it maps each bet `d` to the day pair `(d + 1, d + 2)`. It is true if there are
  at least three bets and all the pairs form one group that is connected
  through shared days.
- `can_win_by_pairs(bets)`: true if there are at least four bets or any day
  appears more than once.

### `contestkit.baggage`

`count_paths(n, m, odd_cells)` takes the 1-based `(row, column)` cells that
hold the odd positions of a path on an `n` by `m` grid. It counts the ways to
place a cell between each consecutive pair. The placed cell must lie in the
grid, be adjacent to both neighbours, and not repeat any cell already used.
The count is returned modulo `MOD` (1 000 000 007). A single fixed cell gives
`1`. An empty list raises `ValueError`.

### `contestkit.bermuda`

`count_reflections(n, x, y, vx, vy)` traces a ball inside the triangle with
corners `(0, 0)`, `(n, 0)` and `(0, n)`. The ball starts at `(x, y)` with
velocity `(vx, vy)`. The function returns the number of reflections before the
ball reaches a corner. It returns `-1` if the ball hits no wall, or if it does
not reach a corner within `MAX_REFLECTIONS` (10 000) steps. The calculation uses
floating point with a tolerance of `EPS` (1e-9).

## Commands

Each command reads from the file given as its only positional argument. With
no argument it reads standard input. The input is whitespace-separated and
starts with the number of test cases.

    contestkit-phone [input]
        each case: a digit string; prints the smallest beautiful number

    contestkit-apartment [--variant {first,second}] [input]
        each case: n k, then n prices; prints the median range size
        (default variant: second)

    contestkit-betting [--variant {connected,counts,frequency,pairs}] [input]
        each case: n, then n bet days; prints Yes or No
        (default variant: pairs)

    contestkit-baggage [input]
        each case: n m k, then k + 1 cells as row column; prints the path count

    contestkit-bermuda [input]
        each case: n x y vx vy; prints the reflection count or -1

Each module can also be run with `python -m`, for example
`python -m contestkit.phone < input.txt`.

## Tests

    pip install .[test]
    pytest