"""Count how many median values are reachable after closing up to k bars."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence


def _sorted_checked(prices: Sequence[int], k: int) -> list[int]:
    if not 0 <= k < len(prices):
        raise ValueError(f"k must satisfy 0 <= k < {len(prices)}, got {k}")
    return sorted(prices)


def median_range_first(prices: Sequence[int], k: int) -> int:
    """Size of the median range using the lower median on both ends."""
    a = _sorted_checked(prices, k)
    half = (len(a) - k + 1) // 2
    return a[k + half - 1] - a[half - 1] + 1


def median_range_second(prices: Sequence[int], k: int) -> int:
    """Size of the median range with the upper end mirrored from the top."""
    a = _sorted_checked(prices, k)
    half = (len(a) - k + 1) // 2
    return a[len(a) - half] - a[half - 1] + 1


_VARIANTS = {"first": median_range_first, "second": median_range_second}


def main(argv=None) -> int:
    """Read test cases and print the number of reachable median values."""
    parser = argparse.ArgumentParser(
        prog="contestkit-apartment",
        description="Count possible medians after closing up to k bars.",
    )
    parser.add_argument("--variant", choices=sorted(_VARIANTS), default="second")
    parser.add_argument(
        "input", nargs="?", type=argparse.FileType("r"), default=sys.stdin
    )
    args = parser.parse_args(argv)
    solve = _VARIANTS[args.variant]
    tokens = iter(args.input.read().split())
    out = []
    for _ in range(int(next(tokens))):
        n, k = int(next(tokens)), int(next(tokens))
        prices = [int(next(tokens)) for _ in range(n)]
        out.append(solve(prices, k))
    sys.stdout.write("".join(f"{value}\n" for value in out))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())