import pytest

from aoc2023.day04 import match_count, parse_card, part1, part2, run

EXAMPLE = [
    "Card 1: 41 48 83 86 17 | 83 86  6 31 17  9 48 53",
    "Card 2: 13 32 20 16 61 | 61 30 68 82 17 32 24 19",
    "Card 3:  1 21 53 59 44 | 69 82 63 72 16 21 14  1",
    "Card 4: 41 92 73 84 69 | 59 84 76 51 58  5 54 83",
    "Card 5: 87 83 26 28 32 | 88 30 70 12 93 22 82 36",
    "Card 6: 31 18 13 56 72 | 74 77 10 23 35 67 36 11",
]


def test_part1_testdata():
    assert part1(EXAMPLE) == 13


def test_part2_testdata():
    assert part2(EXAMPLE) == 30


def test_parse_card():
    winning, ours = parse_card(EXAMPLE[0])
    assert winning == {41, 48, 83, 86, 17}
    assert ours == {83, 86, 6, 31, 17, 9, 48, 53}


@pytest.mark.parametrize("line", ["garbage", "Card 1: 1 2 3", ""])
def test_broken_card_is_empty(line):
    assert parse_card(line) == (set(), set())


def test_match_count():
    assert match_count(*parse_card(EXAMPLE[0])) == 4
    assert match_count(*parse_card(EXAMPLE[5])) == 0


def test_match_count_is_symmetric():
    winning, ours = parse_card(EXAMPLE[1])
    assert match_count(winning, ours) == match_count(ours, winning)


def test_part2_cards_without_matches_count_once():
    lines = ["Card 1: 1 | 2", "Card 2: 3 | 4"]
    assert part2(lines) == len(lines)


def test_part2_copies_past_last_card_fail():
    with pytest.raises(IndexError):
        part2(["Card 1: 1 2 | 1 2"])


def test_run_reads_file(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("\n".join(EXAMPLE) + "\n")
    assert run(path) == (13, 30)
    assert capsys.readouterr().out == "day04 result1: 13\nday04 result2: 30\n"