import pytest

from aoc2023.day06 import count_wins, part1, part2, run

EXAMPLE = [
    "Time:      7  15   30",
    "Distance:  9  40  200",
]


@pytest.mark.parametrize(
    "time, distance, expected",
    [
        (7, 9, 4),
        (15, 40, 8),
        (30, 200, 9),
        (71530, 940200, 71503),
        (0, 0, 0),
        (2, 0, 1),
        (4, 3, 1),
        (4, 4, 0),
        (5, 4, 2),
    ],
)
def test_count_wins(time, distance, expected):
    assert count_wins(time, distance) == expected


def test_part1_testdata():
    assert part1(EXAMPLE) == 288


def test_part2_testdata():
    assert part2(EXAMPLE) == 71503


def test_part1_no_winnable_race():
    assert part1(["Time: 4", "Distance: 10"]) == 0


def test_part1_missing_distances():
    with pytest.raises(ValueError):
        part1(["Time: 7 15", "Distance: 9"])


def test_part2_without_numbers():
    with pytest.raises(ValueError):
        part2(["Distance: 9"])


def test_run(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("\n".join(EXAMPLE) + "\n")
    assert run(path) == (288, 71503)
    out = capsys.readouterr().out
    assert "Day06 Result 1: 288" in out
    assert "Day06 Result 2: 71503" in out