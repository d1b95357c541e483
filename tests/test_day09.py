import pytest

from aoc2023.day09 import (
    parse_history,
    part1,
    part2,
    predecessor,
    run,
    successor,
)

EXAMPLE = [
    "0 3 6 9 12 15",
    "1 3 6 10 15 21",
    "10 13 16 21 30 45\t",
]


def test_part1_testdata():
    assert part1(EXAMPLE) == 114


def test_part2_testdata():
    assert part2(EXAMPLE) == 2


def test_parse_history_handles_negative_numbers():
    assert parse_history("3 -1 -20 7") == [3, -1, -20, 7]


def test_successor_of_single_lines():
    assert successor("0 3 6 9 12 15") == 18
    assert successor("10 13 16 21 30 45") == 68


def test_predecessor_of_single_lines():
    assert predecessor("0 3 6 9 12 15") == -3
    assert predecessor("10 13 16 21 30 45") == 5


def test_constant_history():
    assert successor("7 7 7") == 7
    assert predecessor("7 7 7") == 7


def test_single_value_history():
    assert successor("42") == 42
    assert predecessor("42") == 42


def test_empty_lines_are_skipped():
    assert part1(["", "1 2 3", ""]) == 4
    assert part2(["", "1 2 3", ""]) == 0


def test_history_without_values_is_rejected():
    with pytest.raises(ValueError):
        successor("no numbers here")


def test_run_reads_file(tmp_path):
    data = tmp_path / "input.txt"
    data.write_text("\n".join(EXAMPLE) + "\n")
    assert run(data) == (114, 2)