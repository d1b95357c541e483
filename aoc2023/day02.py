"""Day 2: games of coloured cubes drawn from a bag."""

from __future__ import annotations

import math
import re
from collections.abc import Iterable

from aoc2023.common import read_lines, trim

_NUMBER = re.compile(r"[0-9]+")
# Order matters: a draw is checked for blue first, then red, then green.
_COLOURS = ("blue", "red", "green")


def parse_game_data(data: str) -> dict[str, int]:
    """Return the largest count of each colour seen across a game's draws."""
    counts = dict.fromkeys(_COLOURS, 0)
    for draw in data.split(";"):
        for entry in draw.split(","):
            for colour in _COLOURS:
                idx = entry.find(colour)
                if idx != -1:
                    counts[colour] = max(counts[colour], int(trim(entry[:idx])))
                    break
    return counts


def split_game(line: str) -> tuple[int, str]:
    """Split a line into its game number and the text describing the draws."""
    parts = line.split(":")
    match = _NUMBER.search(parts[0])
    if match is None:
        raise ValueError(f"No game number in line: {line}")
    if len(parts) < 2:
        raise ValueError(f"No game data in line: {line}")
    return int(match.group()), trim(parts[1])


def game_fits(counts: dict[str, int], red: int, green: int, blue: int) -> bool:
    """Whether a game is possible with the given number of cubes of each colour."""
    return counts["blue"] <= blue and counts["red"] <= red and counts["green"] <= green


def _games(lines: Iterable[str]):
    for line in lines:
        if not trim(line):
            continue
        number, data = split_game(line)
        yield number, parse_game_data(data)


def part1(lines: Iterable[str]) -> int:
    """Sum the numbers of games possible with 12 red, 13 green and 14 blue cubes."""
    return sum(number for number, counts in _games(lines) if game_fits(counts, 12, 13, 14))


def part2(lines: Iterable[str]) -> int:
    """Sum the powers of the minimal cube sets of all games."""
    return sum(math.prod(counts[colour] for colour in _COLOURS) for _, counts in _games(lines))


def run(path) -> tuple[int, int]:
    """Solve both parts for the input file and print the results."""
    lines = read_lines(path)
    first, second = part1(lines), part2(lines)
    print(f"Sum: {first}")
    print(f"Sum2: {second}")
    return first, second