"""Day 9: extrapolating sensor histories from repeated differences."""

from __future__ import annotations

import re
from collections.abc import Iterable
from itertools import pairwise

from aoc2023.common import read_lines

_NUMBER = re.compile(r"-?[0-9]+")


def parse_history(line: str) -> list[int]:
    """Return the signed integers found in a line."""
    return [int(n) for n in _NUMBER.findall(line)]


def _difference_rows(line: str) -> list[list[int]]:
    """The history followed by its difference rows, down to the last non-zero one."""
    history = parse_history(line)
    if not history:
        raise ValueError(f"No values in history: {line!r}")
    rows = [history]
    current = history
    while True:
        differences = [b - a for a, b in pairwise(current)]
        if all(value == 0 for value in differences):
            break
        rows.append(differences)
        current = differences
    return rows


def successor(line: str) -> int:
    """Extrapolate the value that follows the history."""
    return sum(row[-1] for row in _difference_rows(line))


def predecessor(line: str) -> int:
    """Extrapolate the value that precedes the history."""
    result = 0
    for row in reversed(_difference_rows(line)):
        result = row[0] - result
    return result


def part1(lines: Iterable[str]) -> int:
    """Sum the extrapolated next values of all non-empty lines."""
    return sum(successor(line) for line in lines if line)


def part2(lines: Iterable[str]) -> int:
    """Sum the extrapolated previous values of all non-empty lines."""
    return sum(predecessor(line) for line in lines if line)


def run(path) -> tuple[int, int]:
    """Solve both parts for the input file and print the results."""
    lines = read_lines(path)
    first, second = part1(lines), part2(lines)
    print(f"Day09 Result1: {first}")
    print(f"Day09 Result2: {second}")
    return first, second