"""Trace a ball bouncing inside a right triangle until it leaves through a corner."""

from __future__ import annotations

import argparse
import sys

EPS = 1e-9
MAX_REFLECTIONS = 10000
_FAR = 1e18


def count_reflections(n: int, x: int, y: int, vx: int, vy: int) -> int:
    """Reflections before the ball reaches a corner of the triangle, or -1.

    The triangle has corners (0, 0), (n, 0) and (0, n). The ball starts at
    (x, y) moving with velocity (vx, vy); -1 means it never reaches a corner
    within the reflection limit.
    """
    px, py = float(x), float(y)
    dvx, dvy = float(vx), float(vy)
    for reflections in range(MAX_REFLECTIONS):
        t_x = -px / dvx if dvx < -EPS else _FAR
        t_y = -py / dvy if dvy < -EPS else _FAR
        t_h = (n - px - py) / (dvx + dvy) if dvx + dvy > EPS else _FAR

        t = min((c for c in (t_x, t_y, t_h) if c > EPS), default=_FAR)
        if t >= 1e17:
            return -1
        next_x = px + t * dvx
        next_y = py + t * dvy

        on_x0 = abs(next_x) < EPS
        on_y0 = abs(next_y) < EPS
        if (
            (on_x0 and on_y0)
            or (on_x0 and abs(next_y - n) < EPS)
            or (abs(next_x - n) < EPS and on_y0)
        ):
            return reflections

        if abs(t - t_x) < EPS:
            dvx = -dvx
        elif abs(t - t_y) < EPS:
            dvy = -dvy
        elif abs(t - t_h) < EPS:
            dvx, dvy = -dvy, -dvx

        px, py = next_x, next_y
    return -1


def main(argv=None) -> int:
    """Read test cases and print the reflection count for each."""
    parser = argparse.ArgumentParser(
        prog="contestkit-bermuda",
        description="Count reflections before a ball escapes through a corner.",
    )
    parser.add_argument(
        "input", nargs="?", type=argparse.FileType("r"), default=sys.stdin
    )
    args = parser.parse_args(argv)
    tokens = iter(args.input.read().split())
    out = []
    for _ in range(int(next(tokens))):
        n, x, y, vx, vy = (int(next(tokens)) for _ in range(5))
        out.append(count_reflections(n, x, y, vx, vy))
    sys.stdout.write("".join(f"{value}\n" for value in out))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())