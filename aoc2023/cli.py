"""Command line entry point that runs the solvers for the named days."""

from __future__ import annotations

import argparse
from collections.abc import Callable, Sequence
from pathlib import Path

from aoc2023 import (
    day01,
    day02,
    day03,
    day04,
    day05,
    day06,
    day07,
    day08,
    day09,
    day10,
    day11,
    day12,
)

_SOLVERS: dict[str, tuple[Callable[[Path], object], str]] = {
    "day01": (day01.run, "day01_input.txt"),
    "day02": (day02.run, "day02_input.txt"),
    "day03": (day03.run, "day03_input.txt"),
    "day04": (day04.run, "day04_part1.txt"),
    "day05": (day05.run, "day05_input.txt"),
    "day06": (day06.run, "day06_input.txt"),
    "day07": (day07.run, "day07_input.txt"),
    "day08": (day08.run, "day08_input.txt"),
    "day09": (day09.run, "day09_input.txt"),
    "day10": (day10.run, "day10_input.txt"),
    "day11": (day11.run, "day11_input.txt"),
    "day12": (day12.run, "day12_input.txt"),
}


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="aoc2023", description="Solve the puzzles of the named days."
    )
    parser.add_argument("days", nargs="*", help="days to run, such as day01")
    parser.add_argument(
        "--data-dir",
        default="data",
        type=Path,
        help="directory holding the puzzle inputs (default: data)",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run every named day in order, reporting names that are not known."""
    args = _parser().parse_args(argv)
    for name in args.days:
        entry = _SOLVERS.get(name)
        if entry is None:
            print(f"Unknown parameter: {name}")
            continue
        solve, filename = entry
        solve(args.data_dir / filename)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())