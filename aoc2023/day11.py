"""Day 11: distances between galaxies in an expanding universe."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, replace
from itertools import combinations

from aoc2023.common import read_lines

Coord = tuple[int, int]
Galaxy = list[list["GalaxyTile"]]


@dataclass
class GalaxyTile:
    """A cell of the image with the width and height it stands for."""

    character: str
    xsize: int = 1
    ysize: int = 1


def _is_empty(tiles: Sequence[GalaxyTile]) -> bool:
    return all(tile.character == "." for tile in tiles)


def to_galaxy(lines: Sequence[str]) -> Galaxy:
    """Turn text lines into rows of unit-sized tiles."""
    return [[GalaxyTile(ch) for ch in line] for line in lines]


def transpose(galaxy: Galaxy) -> Galaxy:
    """Return a copy of the galaxy with rows and columns swapped."""
    return [[replace(tile) for tile in column] for column in zip(*galaxy)]


def galaxy_to_strings(galaxy: Galaxy) -> list[str]:
    """Render the galaxy with every tile drawn at its expanded size."""
    result: list[str] = []
    for row in galaxy:
        text = "".join(tile.character * tile.xsize for tile in row)
        height = row[0].ysize if row else 1
        result.extend([text] * height)
    return result


def expand(galaxy: Galaxy, factor: int) -> Galaxy:
    """Grow empty rows and columns to the given size, in place; returns the galaxy."""
    if not galaxy:
        return galaxy
    for row in galaxy:
        if _is_empty(row):
            for tile in row:
                tile.ysize = factor
    for x in range(len(galaxy[0])):
        column = [row[x] for row in galaxy]
        if _is_empty(column):
            for tile in column:
                tile.xsize = factor
    return galaxy


def find_galaxies(galaxy: Galaxy) -> list[Coord]:
    """Return the (x, y) positions of all galaxies, row by row."""
    return [
        (x, y)
        for y, row in enumerate(galaxy)
        for x, tile in enumerate(row)
        if tile.character == "#"
    ]


def distances(galaxy: Galaxy, galaxies: Sequence[Coord]) -> list[int]:
    """Return the expanded distance of every pair of galaxies."""
    result: list[int] = []
    for (sx, sy), (dx, dy) in combinations(galaxies, 2):
        xstep = -1 if sx > dx else 1
        ystep = -1 if sy > dy else 1
        xdist = sum(galaxy[sy][x].xsize for x in range(sx, dx, xstep))
        ydist = sum(galaxy[y][dx].ysize for y in range(sy, dy, ystep))
        result.append(xdist + ydist)
    return result


def total_distance(galaxy: Galaxy, factor: int) -> int:
    """Expand the galaxy by the factor and sum all pairwise distances."""
    expanded = expand(galaxy, factor)
    return sum(distances(expanded, find_galaxies(expanded)))


def part1(galaxy: Galaxy) -> int:
    """Sum of distances with empty lines doubled."""
    return total_distance(galaxy, 2)


def part2(galaxy: Galaxy) -> int:
    """Sum of distances with empty lines a million times as large."""
    return total_distance(galaxy, 1000000)


def run(path) -> tuple[int, int]:
    """Solve both parts for the input file and print the results."""
    galaxy = to_galaxy(read_lines(path))
    first, second = part1(galaxy), part2(galaxy)
    print(f"day11 result 1: {first}")
    print(f"day11 result 2: {second}")
    return first, second