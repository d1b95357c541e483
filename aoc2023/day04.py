"""Day 4: scratchcards and their winning numbers."""

from __future__ import annotations

import re
from collections.abc import Sequence

from aoc2023.common import read_lines

_NUMBER = re.compile(r"[0-9]+")


def parse_card(line: str) -> tuple[set[int], set[int]]:
    """Return the winning numbers and our numbers; a malformed card gives two empty sets."""
    parts = line.split(":")
    if len(parts) < 2:
        return set(), set()
    halves = parts[1].split("|")
    if len(halves) < 2:
        return set(), set()
    winning = {int(n) for n in _NUMBER.findall(halves[0])}
    ours = {int(n) for n in _NUMBER.findall(halves[1])}
    return winning, ours


def match_count(winning: set[int], ours: set[int]) -> int:
    """Count how many of our numbers are winning numbers."""
    return len(winning & ours)


def _matches(line: str) -> int:
    return match_count(*parse_card(line))


def part1(lines: Sequence[str]) -> int:
    """Sum the card scores, doubling for every match after the first."""
    return sum(2 ** (m - 1) for m in map(_matches, lines) if m > 0)


def part2(lines: Sequence[str]) -> int:
    """Count all cards once winning cards hand out copies of the following ones."""
    copies = [1] * len(lines)
    for index, line in enumerate(lines):
        for following in range(index + 1, index + _matches(line) + 1):
            copies[following] += copies[index]
    return sum(copies)


def run(path) -> tuple[int, int]:
    """Solve both parts for the input file and print the results."""
    lines = read_lines(path)
    first, second = part1(lines), part2(lines)
    print(f"day04 result1: {first}")
    print(f"day04 result2: {second}")
    return first, second