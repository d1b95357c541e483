"""Day 12: counting arrangements of damaged springs."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from functools import cache

from aoc2023.common import read_lines

_UNFOLD = 5


@cache
def _count(pattern: str, groups: tuple[int, ...]) -> int:
    if pattern == "":
        return 1 if not groups else 0
    if not groups:
        return 0 if "#" in pattern else 1

    result = 0
    first = pattern[0]
    if first in ".?":
        result += _count(pattern[1:], groups)
    if first in "#?":
        size = groups[0]
        length = len(pattern)
        if (
            size <= length
            and "." not in pattern[:size]
            and (size == length or pattern[size] != "#")
        ):
            result += _count(pattern[min(size + 1, length):], groups[1:])
    return result


def count_arrangements(pattern: str, groups: Sequence[int]) -> int:
    """Count the ways the unknown springs can be filled to give these damaged groups."""
    return _count(pattern, tuple(groups))


def parse_record(line: str) -> tuple[str, tuple[int, ...]]:
    """Split a record into its spring pattern and its damaged group sizes."""
    parts = line.split(" ")
    if len(parts) < 2:
        raise ValueError(f"Missing group sizes in line: {line!r}")
    return parts[0], tuple(int(n) for n in parts[1].split(","))


def part1(lines: Iterable[str]) -> int:
    """Sum the arrangement counts of all records."""
    return sum(count_arrangements(*parse_record(line)) for line in lines)


def part2(lines: Iterable[str]) -> int:
    """Sum the arrangement counts of all records unfolded five times."""
    total = 0
    for line in lines:
        pattern, groups = parse_record(line)
        total += count_arrangements("?".join([pattern] * _UNFOLD), groups * _UNFOLD)
    return total


def run(path) -> tuple[int, int]:
    """Solve both parts for the input file and print the results."""
    lines = read_lines(path)
    first = part1(lines)
    print(f"Day12 part1 result: {first}")
    second = part2(lines)
    print(f"Day12 part2 result: {second}")
    return first, second