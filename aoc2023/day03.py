"""Day 3: part numbers and gears in an engine schematic."""

from __future__ import annotations

import math
import re
from collections.abc import Sequence
from dataclasses import dataclass, field

from aoc2023.common import read_lines

_NUMBER = re.compile(r"[0-9]+")
_SYMBOL = re.compile(r"[^.0-9]")


@dataclass(frozen=True)
class Token:
    """A run of characters at a position in the schematic."""

    x: int
    y: int
    length: int
    content: str

    def cells(self):
        """Yield every (x, y) position the token covers."""
        for offset in range(self.length):
            yield self.x + offset, self.y


def _tokens(lines: Sequence[str], pattern: re.Pattern[str]) -> list[Token]:
    return [
        Token(match.start(), y, match.end() - match.start(), match.group())
        for y, line in enumerate(lines)
        for match in pattern.finditer(line)
    ]


@dataclass
class Schematic:
    """The numbers and symbols found in an engine schematic."""

    numbers: list[Token]
    symbols: list[Token]
    _number_cells: dict[tuple[int, int], Token] = field(
        init=False, repr=False, compare=False
    )
    _symbol_cells: dict[tuple[int, int], Token] = field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        self._number_cells = {cell: t for t in reversed(self.numbers) for cell in t.cells()}
        self._symbol_cells = {cell: t for t in reversed(self.symbols) for cell in t.cells()}

    @classmethod
    def parse(cls, lines: Sequence[str]) -> Schematic:
        """Find all numbers and all symbols in the schematic lines."""
        return cls(_tokens(lines, _NUMBER), _tokens(lines, _SYMBOL))

    def number_at(self, x: int, y: int) -> Token | None:
        """Return the number covering the given position, if any."""
        return self._number_cells.get((x, y))

    def symbol_at(self, x: int, y: int) -> Token | None:
        """Return the symbol at the given position, if any."""
        return self._symbol_cells.get((x, y))


def neighbours(token: Token) -> list[tuple[int, int]]:
    """Return the positions surrounding a token, row above first."""
    x, y, length = token.x, token.y, token.length
    above = [(x - 1, y - 1), (x + length, y - 1)]
    above += [(x + i, y - 1) for i in range(length)]
    middle = [(x - 1, y), (x + length, y)]
    below = [(x - 1, y + 1), (x + length, y + 1)]
    below += [(x + i, y + 1) for i in range(length)]
    return above + middle + below


def part1(lines: Sequence[str]) -> int:
    """Sum the numbers once for every symbol adjacent to them."""
    schematic = Schematic.parse(lines)
    return sum(
        int(token.content)
        for token in schematic.numbers
        for pos in neighbours(token)
        if schematic.symbol_at(*pos) is not None
    )


def part2(lines: Sequence[str]) -> int:
    """Sum the products of the numbers next to each '*' touching two or more."""
    schematic = Schematic.parse(lines)
    total = 0
    for token in schematic.symbols:
        if token.content != "*":
            continue
        adjacent = {
            number
            for pos in neighbours(token)
            if (number := schematic.number_at(*pos)) is not None
        }
        if len(adjacent) > 1:
            total += math.prod(int(number.content) for number in adjacent)
    return total


def run(path) -> tuple[int, int]:
    """Solve both parts for the input file and print the results."""
    lines = read_lines(path)
    first, second = part1(lines), part2(lines)
    print(f"Day03 Result: {first}")
    print(f"Day03 Result2: {second}")
    return first, second