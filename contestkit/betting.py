"""Decide whether a set of two-day bets can guarantee a win."""

from __future__ import annotations

import argparse
import sys
from collections import Counter, defaultdict, deque
from collections.abc import Sequence


def _max_frequency(bets: Sequence[int]) -> int:
    return max(Counter(bets).values(), default=0)


def can_win_by_counts(bets: Sequence[int]) -> bool:
    """Win by day counts: four equal bets, or enough bets over enough days."""
    if _max_frequency(bets) >= 4:
        return True
    distinct = len(set(bets))
    if distinct >= 3:
        return True
    if distinct == 2:
        return len(bets) >= 3
    return len(bets) >= 4


def can_win_max_frequency(bets: Sequence[int]) -> bool:
    """Win only when some day carries at least four bets."""
    return _max_frequency(bets) >= 4


def can_win_connected(bets: Sequence[int]) -> bool:
    """Win with four equal bets, or with at least three bets whose day pairs connect."""
    if _max_frequency(bets) >= 4:
        return True
    pairs = [(day + 1, day + 2) for day in bets]
    by_day: dict[int, list[int]] = defaultdict(list)
    for index, pair in enumerate(pairs):
        for day in pair:
            by_day[day].append(index)

    if not pairs:
        return False
    seen = {0}
    queue = deque([0])
    while queue:
        current = queue.popleft()
        for day in pairs[current]:
            for other in by_day[day]:
                if other not in seen:
                    seen.add(other)
                    queue.append(other)
    return len(seen) == len(pairs) and len(pairs) >= 3


def can_win_by_pairs(bets: Sequence[int]) -> bool:
    """Win with at least four bets or with any day repeated."""
    return len(bets) >= 4 or len(set(bets)) < len(bets)


_VARIANTS = {
    "counts": can_win_by_counts,
    "frequency": can_win_max_frequency,
    "connected": can_win_connected,
    "pairs": can_win_by_pairs,
}


def main(argv=None) -> int:
    """Read test cases and print Yes or No for each."""
    parser = argparse.ArgumentParser(
        prog="contestkit-betting",
        description="Decide whether the bets guarantee a win.",
    )
    parser.add_argument("--variant", choices=sorted(_VARIANTS), default="pairs")
    parser.add_argument(
        "input", nargs="?", type=argparse.FileType("r"), default=sys.stdin
    )
    args = parser.parse_args(argv)
    decide = _VARIANTS[args.variant]
    tokens = iter(args.input.read().split())
    out = []
    for _ in range(int(next(tokens))):
        n = int(next(tokens))
        bets = [int(next(tokens)) for _ in range(n)]
        out.append("Yes" if decide(bets) else "No")
    sys.stdout.write("".join(f"{line}\n" for line in out))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())