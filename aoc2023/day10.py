"""Day 10: a loop of pipes and the tiles it encloses."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, replace

from aoc2023.common import read_lines

Coord = tuple[int, int]

_RAY_LIMIT = 10000


@dataclass(frozen=True)
class Tile:
    """A map tile and the directions its pipe connects to."""

    character: str
    x: int
    y: int
    north: bool = False
    east: bool = False
    south: bool = False
    west: bool = False


_NOTHING = Tile("", -1, -1)


def parse_map(lines: Sequence[str]) -> dict[Coord, Tile]:
    """Map every position to its tile, working out how the start connects."""
    tiles: dict[Coord, Tile] = {}
    for y, line in enumerate(lines):
        for x, ch in enumerate(line):
            tiles[(x, y)] = Tile(
                ch,
                x,
                y,
                north=ch in "|LJ",
                east=ch in "-LF",
                south=ch in "|7F",
                west=ch in "-J7",
            )

    for (x, y), tile in tiles.items():
        if tile.character == "S":
            tiles[(x, y)] = replace(
                tile,
                north=tiles.get((x, y - 1), _NOTHING).south,
                east=tiles.get((x + 1, y), _NOTHING).west,
                south=tiles.get((x, y + 1), _NOTHING).north,
                west=tiles.get((x - 1, y), _NOTHING).east,
            )
            break
    return tiles


def find_start(tiles: dict[Coord, Tile]) -> Coord:
    """Return the position of the starting tile 'S'."""
    for coord, tile in tiles.items():
        if tile.character == "S":
            return coord
    raise ValueError("No starting node found")


def follow_path(tiles: dict[Coord, Tile]) -> list[Coord]:
    """Return the positions of the loop, starting at 'S'."""
    start = find_start(tiles)
    coord = start
    tile = tiles[start]
    last = None
    path = [start]
    while True:
        x, y = coord
        if tile.north and last != "s":
            coord, last = (x, y - 1), "n"
        elif tile.east and last != "w":
            coord, last = (x + 1, y), "e"
        elif tile.south and last != "n":
            coord, last = (x, y + 1), "s"
        elif tile.west and last != "e":
            coord, last = (x - 1, y), "w"
        else:
            raise ValueError(f"Nowhere to go from {coord}")
        tile = tiles.get(coord, _NOTHING)
        if tile.character == "S":
            break
        path.append(coord)
    return path


def _is_crossing(pos: Coord, path: set[Coord], tiles: dict[Coord, Tile]) -> bool:
    """Whether a diagonal ray crossing this loop tile counts as crossing the loop."""
    x, y = pos

    def linked(coord: Coord) -> Tile:
        return tiles[coord] if coord in tiles and coord in path else _NOTHING

    north = linked((x, y - 1)).south
    south = linked((x, y + 1)).north
    west = linked((x - 1, y)).east
    east = linked((x + 1, y)).west
    return (west and east) or (north and south) or (north and west) or (south and east)


def _bounds(tiles: dict[Coord, Tile]) -> Coord:
    if not tiles:
        return -1, -1
    return max(x for x, _ in tiles), max(y for _, y in tiles)


def _inside(
    coord: Coord, path: set[Coord], tiles: dict[Coord, Tile], bounds: Coord
) -> bool:
    max_x, max_y = bounds
    x, y = coord
    crossings = 0
    while x < _RAY_LIMIT and y < _RAY_LIMIT and x <= max_x and y <= max_y:
        if (x, y) in path and _is_crossing((x, y), path, tiles):
            crossings += 1
        x, y = x + 1, y + 1
    return crossings % 2 == 1


def is_inside(coord: Coord, path: Iterable[Coord], tiles: dict[Coord, Tile]) -> bool:
    """Whether the position lies inside the loop, by a diagonal ray cast."""
    return _inside(coord, set(path), tiles, _bounds(tiles))


def part1(lines: Sequence[str]) -> int:
    """Steps to the point of the loop furthest from the start."""
    return len(follow_path(parse_map(lines))) // 2


def part2(lines: Sequence[str]) -> int:
    """Count the tiles enclosed by the loop."""
    tiles = parse_map(lines)
    path = set(follow_path(tiles))
    bounds = _bounds(tiles)
    return sum(
        1
        for coord in tiles
        if coord not in path and _inside(coord, path, tiles, bounds)
    )


def run(path) -> tuple[int, int]:
    """Solve both parts for the input file and print the results."""
    lines = read_lines(path)
    first, second = part1(lines), part2(lines)
    print(f"day 10 result 1: {first}")
    print(f"day 10 result 2: {second}")
    return first, second