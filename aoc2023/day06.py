"""Day 6: boat races won by holding the button long enough."""

from __future__ import annotations

import math
import re
from collections.abc import Iterable

from aoc2023.common import read_lines

_TIME = re.compile(r"Time:")
_DISTANCE = re.compile(r"Distance:")
_NUMBER = re.compile(r"[0-9]+")


def count_wins(time: int, distance: int) -> int:
    """Count the button hold times in 0..time that travel further than distance."""

    def travelled(hold: int) -> int:
        return hold * (time - hold)

    mid = time // 2
    if time < 0 or travelled(mid) <= distance:
        return 0
    disc = time * time - 4 * distance
    lo = (time - math.isqrt(max(disc, 0))) // 2
    lo = min(max(lo, 0), mid)
    while lo > 0 and travelled(lo - 1) > distance:
        lo -= 1
    while travelled(lo) <= distance:
        lo += 1
    return time - 2 * lo + 1


def part1(lines: Iterable[str]) -> int:
    """Multiply the numbers of ways to win each race that can be won at all."""
    times: list[int] = []
    distances: list[int] = []
    for line in lines:
        if _TIME.search(line):
            times.extend(int(n) for n in _NUMBER.findall(line))
        elif _DISTANCE.search(line):
            distances.extend(int(n) for n in _NUMBER.findall(line))
    if len(distances) < len(times):
        raise ValueError("Every race needs a distance")
    wins = [count_wins(t, d) for t, d in zip(times, distances)]
    wins = [w for w in wins if w > 0]
    return math.prod(wins) if wins else 0


def part2(lines: Iterable[str]) -> int:
    """Count the ways to win the single race formed by joining the digits."""
    times: list[str] = []
    distances: list[str] = []
    for line in lines:
        if _TIME.search(line):
            times = _NUMBER.findall(line)
        elif _DISTANCE.search(line):
            distances = _NUMBER.findall(line)
    return count_wins(int("".join(times)), int("".join(distances)))


def run(path) -> tuple[int, int]:
    """Solve both parts for the input file and print the results."""
    lines = read_lines(path)
    first, second = part1(lines), part2(lines)
    print(f"Day06 Result 1: {first}")
    print(f"Day06 Result 2: {second}")
    return first, second