import pytest

from aoc2023.day10 import (
    find_start,
    follow_path,
    is_inside,
    parse_map,
    part1,
    part2,
    run,
)


def _grid(spec):
    """Split a slash-separated grid description into its rows."""
    return spec.strip("/").split("/")


SQUARE = _grid("...../.S-7./.|.|./.L-J./.....")

WINDING = _grid("..F7./.FJ|./SJ.L7/|F--J/LJ...")

ENCLOSED_1 = _grid(
    ".........../.S-------7./.|F-----7|./"
    ".||.....||./.||.....||./.|L-7.F-J|./"
    ".|..|.|..|./.L--J.L--J./..........."
)

ENCLOSED_2 = _grid(
    ".F----7F7F7F7F-7..../.|F--7||||||||FJ..../"
    ".||.FJ||||||||L7..../FJL7L7LJLJ||LJ.L-7../"
    "L--J.L7...LJS7F-7L7./....F-J..F7FJ|L7L7L7/"
    "....L7.F7||L7|.L7L7|/.....|FJLJ|FJ|F7|.LJ/"
    "....FJL-7.||.||||.../....L---J.LJ.LJLJ..."
)

ENCLOSED_3 = _grid(
    "FF7FSF7F7F7F7F7F---7/L|LJ||||||||||||F--J/"
    "FL-7LJLJ||||||LJL-77/F--JF--7||LJLJ7F7FJ-/"
    "L---JF-JLJ.||-FJLJJ7/|F|F-JF---7F7-L7L|7|/"
    "|FFJF7L7F-JF7|JL---7/7-L-JL7||F7|L7F-7F7|/"
    "L.L7LFJ|||||FJL7||LJ/L7JLJL-JLJLJL--JLJ.L"
)


@pytest.mark.parametrize(
    "grid, rows, cols",
    [
        (SQUARE, 5, 5),
        (WINDING, 5, 5),
        (ENCLOSED_1, 9, 11),
        (ENCLOSED_2, 10, 20),
        (ENCLOSED_3, 10, 20),
    ],
)
def test_parse_map_covers_every_cell(grid, rows, cols):
    tiles = parse_map(grid)
    assert len(tiles) == rows * cols
    assert max(x for x, _ in tiles) == cols - 1
    assert max(y for _, y in tiles) == rows - 1


def test_part1_testdata1():
    assert part1(SQUARE) == 4


def test_part1_testdata2():
    assert part1(WINDING) == 8


def test_part2_testdata1():
    assert part2(ENCLOSED_1) == 4


def test_part2_testdata2():
    assert part2(ENCLOSED_2) == 8


def test_part2_testdata3():
    assert part2(ENCLOSED_3) == 10


def test_start_connections_are_derived_from_neighbours():
    tiles = parse_map(SQUARE)
    start = tiles[(1, 1)]
    assert start.character == "S"
    assert (start.north, start.east, start.south, start.west) == (
        False,
        True,
        True,
        False,
    )


def test_find_start():
    assert find_start(parse_map(WINDING)) == (0, 2)


def test_find_start_without_start_raises():
    with pytest.raises(ValueError):
        find_start(parse_map(["-7", "LJ"]))


def test_follow_path_walks_the_loop():
    path = follow_path(parse_map(SQUARE))
    assert path[0] == (1, 1)
    assert path[1] == (2, 1)
    assert len(path) == 8
    assert len(set(path)) == 8


def test_follow_path_dead_end_raises():
    with pytest.raises(ValueError):
        follow_path(parse_map(["S.."]))


def test_is_inside():
    tiles = parse_map(ENCLOSED_1)
    path = follow_path(tiles)
    assert is_inside((2, 6), path, tiles) is True
    assert is_inside((0, 0), path, tiles) is False


def test_run_reads_file(tmp_path):
    data = tmp_path / "input.txt"
    data.write_text("\n".join(ENCLOSED_1) + "\n")
    first, second = run(data)
    assert second == 4
    assert first == len(follow_path(parse_map(ENCLOSED_1))) // 2