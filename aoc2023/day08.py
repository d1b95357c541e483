"""Day 8: walking a network of left/right nodes."""

from __future__ import annotations

import math
import re
from collections.abc import Iterable, Sequence

from aoc2023.common import read_lines

_NODE = re.compile(r"[0-9A-Z]{3}")


def map_nodes(lines: Iterable[str]) -> dict[str, tuple[str, str]]:
    """Map every node name to its left and right neighbours."""
    nodes: dict[str, tuple[str, str]] = {}
    for line in lines:
        if line == "":
            continue
        names = _NODE.findall(line)
        if len(names) < 3:
            raise ValueError(f"Unknown format: {line}")
        nodes[names[0]] = (names[1], names[2])
    return nodes


def starting_nodes(nodes: Iterable[str]) -> list[str]:
    """Return the names of all nodes ending in 'A'."""
    return [name for name in nodes if name[2] == "A"]


def _step(nodes: dict[str, tuple[str, str]], current: str, direction: str) -> str:
    left, right = nodes[current]
    return left if direction == "L" else right


def part1(lines: Sequence[str]) -> int:
    """Count the steps from AAA to ZZZ following the instructions."""
    pattern = lines[0]
    nodes = map_nodes(lines[2:])
    current = "AAA"
    steps = 0
    while current != "ZZZ":
        current = _step(nodes, current, pattern[steps % len(pattern)])
        steps += 1
    return steps


def _cycle_distances(
    nodes: dict[str, tuple[str, str]], pattern: str, start: str
) -> list[int]:
    """Distances between successive visits to '..Z' nodes until one repeats."""
    distances: list[int] = []
    seen: set[tuple[str, str]] = set()
    current = start
    step = 0
    distance = 0
    while True:
        direction = pattern[step % len(pattern)]
        if current[2] == "Z":
            key = (direction, current)
            if key in seen:
                return distances
            seen.add(key)
            distances.append(distance)
            distance = 0
        current = _step(nodes, current, direction)
        step += 1
        distance += 1


def part2(lines: Sequence[str]) -> int:
    """Steps until every '..A' walker stands on a '..Z' node at once."""
    pattern = lines[0]
    nodes = map_nodes(lines[2:])
    distances = [
        distance
        for start in starting_nodes(nodes)
        for distance in _cycle_distances(nodes, pattern, start)
    ]
    if not distances:
        raise ValueError("No paths reach an end node")
    return math.lcm(*distances)


def run(path) -> tuple[int, int]:
    """Solve both parts for the input file and print the results."""
    lines = read_lines(path)
    first, second = part1(lines), part2(lines)
    print(f"Day08 result 1: {first}")
    print(f"Day08 result 2: {second}")
    return first, second