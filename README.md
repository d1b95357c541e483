# aoc2023

Solvers for days 1 to 12 of the Advent of Code 2023 puzzles, usable from
the command line or as a library. No third-party packages are needed.

## Installation

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## Command line

Name the days to run; each one reads its input file, solves it and prints
the results:

    aoc2023 day01 day02 day03

Names that are not known are reported as `Unknown parameter: <name>` and
skipped. Inputs are looked up in a directory that defaults to `data`,
relative to the current directory; choose another with `--data-dir`:

    aoc2023 --data-dir ~/puzzles day05

The file each day reads:

| Day   | File               |
|-------|--------------------|
| day01 | `day01_input.txt`  |
| day02 | `day02_input.txt`  |
| day03 | `day03_input.txt`  |
| day04 | `day04_part1.txt`  |
| day05 | `day05_input.txt`  |
| day06 | `day06_input.txt`  |
| day07 | `day07_input.txt`  |
| day08 | `day08_input.txt`  |
| day09 | `day09_input.txt`  |
| day10 | `day10_input.txt`  |
| day11 | `day11_input.txt`  |
| day12 | `day12_input.txt`  |

## Library

Every day lives in its own module, `aoc2023.day01` to `aoc2023.day12`.
`aoc2023.common.read_lines(path)` reads a file as a list of lines,
normalising Windows line endings and dropping a trailing blank line.

Most `part1` and `part2` functions take the input as a list of lines:

    from aoc2023 import day06
    from aoc2023.common import read_lines

    lines = read_lines("data/day06_input.txt")
    print(day06.part1(lines), day06.part2(lines))

Some differences between the days:

- `day01.total_calibration(lines)` solves day 1, counting spelled-out
  digits (`one` … `nine`, and `zero`) as well as numerals.
- `day07.part2(lines)` scores hands with `J` as the weakest card acting as
  a joker; there is no solver for the variant without jokers.
- `day08.part2(lines)` returns the answer as a plain `int`.
- Day 11 works on a parsed galaxy rather than on lines:

      from aoc2023 import day11

      galaxy = day11.to_galaxy(lines)
      print(day11.part1(galaxy))

  `day11.expand` changes the galaxy in place, so parse a fresh galaxy for
  each call of `part1`, `part2` or `total_distance` with a different factor.
- `day12.count_arrangements(pattern, groups)` counts the arrangements of a
  single record.

Every day module has a `run(path)` function that solves one input file,
prints the results and returns them.

Malformed input raises `ValueError`, for example a day 1 line without any
digit, a day 7 line without a bid, or a day 10 map without a start tile.