"""Day 5: following seeds through the almanac's chain of mappings."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence

from aoc2023.common import read_lines

_NUMBER = re.compile(r"[0-9]+")
_SEEDS = re.compile(r"seeds:")
_NO_LOCATION = 2**31 - 1

CATEGORIES = (
    "seed-to-soil",
    "soil-to-fertilizer",
    "fertilizer-to-water",
    "water-to-light",
    "light-to-temperature",
    "temperature-to-humidity",
    "humidity-to-location",
)

Range = tuple[int, int, int]


def parse_seeds(lines: Iterable[str]) -> list[int]:
    """Return the numbers on the first line that lists the seeds."""
    for line in lines:
        if _SEEDS.search(line):
            return [int(n) for n in _NUMBER.findall(line)]
    return []


def parse_map(lines: Iterable[str], name: str) -> list[Range]:
    """Return the (destination, source, length) entries of the named map."""
    header = re.compile(name + " map:")
    ranges: list[Range] = []
    parsing = False
    for line in lines:
        if header.search(line):
            parsing = True
            continue
        if line == "":
            parsing = False
            continue
        if parsing:
            numbers = [int(n) for n in _NUMBER.findall(line)]
            if len(numbers) == 3:
                dest, src, length = numbers
                ranges.append((dest, src, length))
    return ranges


def map_value(ranges: Iterable[Range], value: int) -> int:
    """Map a value through the first range containing it; unmapped values stay."""
    for dest, src, length in ranges:
        if src <= value < src + length:
            return dest + (value - src)
    return value


def _map_intervals(
    ranges: Iterable[Range], intervals: Iterable[tuple[int, int]]
) -> list[tuple[int, int]]:
    """Map half-open intervals through the ranges, the first match winning."""
    mapped: list[tuple[int, int]] = []
    pending = list(intervals)
    for dest, src, length in ranges:
        src_end = src + length
        remaining: list[tuple[int, int]] = []
        for start, end in pending:
            lo, hi = max(start, src), min(end, src_end)
            if lo < hi:
                mapped.append((lo - src + dest, hi - src + dest))
                if start < lo:
                    remaining.append((start, lo))
                if hi < end:
                    remaining.append((hi, end))
            else:
                remaining.append((start, end))
        pending = remaining
    return mapped + pending


def _maps(lines: Sequence[str]) -> list[list[Range]]:
    return [parse_map(lines, name) for name in CATEGORIES]


def part1(lines: Sequence[str]) -> int:
    """Return the lowest location of any listed seed."""
    maps = _maps(lines)
    result = _NO_LOCATION
    for seed in parse_seeds(lines):
        value = seed
        for ranges in maps:
            value = map_value(ranges, value)
        result = min(result, value)
    return result


def part2(lines: Sequence[str]) -> int:
    """Return the lowest location of any seed in the listed (start, length) pairs."""
    seeds = parse_seeds(lines)
    if len(seeds) % 2:
        raise ValueError("Seed ranges must come in pairs")
    intervals = [
        (start, start + length)
        for start, length in zip(seeds[::2], seeds[1::2])
        if length > 0
    ]
    for ranges in _maps(lines):
        intervals = _map_intervals(ranges, intervals)
    return min([_NO_LOCATION, *(start for start, _ in intervals)])


def run(path) -> tuple[int, int]:
    """Solve both parts for the input file and print the results."""
    lines = read_lines(path)
    first, second = part1(lines), part2(lines)
    print(f"Day 05 Result 1: {first}")
    print(f"Day 05 Result 2: {second}")
    return first, second