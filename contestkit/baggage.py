"""Count grid paths whose odd-numbered cells are fixed in advance."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator, Sequence
from itertools import pairwise

MOD = 1_000_000_007

Cell = tuple[int, int]

_DIRECTIONS = ((-1, 0), (1, 0), (0, -1), (0, 1))


def _bridges(start: Cell, end: Cell, n: int, m: int) -> list[Cell]:
    """Cells adjacent to both ``start`` and ``end`` inside the grid, sorted."""
    found = set()
    for dx, dy in _DIRECTIONS:
        nx, ny = start[0] + dx, start[1] + dy
        if 0 <= nx < n and 0 <= ny < m and abs(nx - end[0]) + abs(ny - end[1]) == 1:
            found.add((nx, ny))
    return sorted(found)


def count_paths(n: int, m: int, odd_cells: Sequence[tuple[int, int]]) -> int:
    """Number of ways to fill the even cells of a path, modulo 1e9+7.

    ``odd_cells`` are 1-based (row, column) pairs. Each even cell must be
    adjacent to its two neighbours and no cell may be used twice.
    """
    if not odd_cells:
        raise ValueError("at least one fixed cell is required")
    cells = [(x - 1, y - 1) for x, y in odd_cells]
    candidates = [_bridges(a, b, n, m) for a, b in pairwise(cells)]
    segments = len(candidates)
    if segments == 0:
        return 1

    used = set(cells)
    chosen: list[Cell] = []
    stack: list[Iterator[Cell]] = [iter(candidates[0])]
    total = 0
    while stack:
        cell = next((c for c in stack[-1] if c not in used), None)
        if cell is None:
            stack.pop()
            if chosen:
                used.discard(chosen.pop())
            continue
        if len(stack) == segments:
            total += 1
            continue
        used.add(cell)
        chosen.append(cell)
        stack.append(iter(candidates[len(stack)]))
    return total % MOD


def main(argv=None) -> int:
    """Read test cases and print the number of valid paths for each."""
    parser = argparse.ArgumentParser(
        prog="contestkit-baggage",
        description="Count paths through fixed odd-numbered cells.",
    )
    parser.add_argument(
        "input", nargs="?", type=argparse.FileType("r"), default=sys.stdin
    )
    args = parser.parse_args(argv)
    tokens = iter(args.input.read().split())
    out = []
    for _ in range(int(next(tokens))):
        n, m, k = (int(next(tokens)) for _ in range(3))
        cells = [(int(next(tokens)), int(next(tokens))) for _ in range(k + 1)]
        out.append(count_paths(n, m, cells))
    sys.stdout.write("".join(f"{value}\n" for value in out))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())