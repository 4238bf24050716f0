"""Smallest "beautiful" phone number that can be built from a pool of digits."""

from __future__ import annotations

import argparse
import sys
from collections import Counter

_LENGTH = 10


def smallest_beautiful(digits: str) -> str:
    """Build the smallest number whose i-th digit (1-based) is at least 10 - i.

    Each position takes the smallest digit still in the pool that meets its
    lower bound; a position with no such digit is skipped.
    """
    if not all(c in "0123456789" for c in digits):
        raise ValueError(f"not a digit string: {digits!r}")
    pool = Counter(int(c) for c in digits)
    result = []
    for position in range(1, _LENGTH + 1):
        lowest = max(0, _LENGTH - position)
        chosen = next((d for d in range(lowest, 10) if pool[d] > 0), None)
        if chosen is not None:
            pool[chosen] -= 1
            result.append(str(chosen))
    return "".join(result)


def main(argv=None) -> int:
    """Read test cases and print the smallest beautiful number for each."""
    parser = argparse.ArgumentParser(
        prog="contestkit-phone",
        description="Print the smallest beautiful phone number for each digit pool.",
    )
    parser.add_argument(
        "input", nargs="?", type=argparse.FileType("r"), default=sys.stdin
    )
    args = parser.parse_args(argv)
    tokens = iter(args.input.read().split())
    cases = int(next(tokens))
    out = [smallest_beautiful(next(tokens)) for _ in range(cases)]
    sys.stdout.write("".join(f"{line}\n" for line in out))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())