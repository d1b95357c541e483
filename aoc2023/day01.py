"""Day 1: calibration values from the first and last digit of each line."""

from __future__ import annotations

import re
from collections.abc import Iterable

from aoc2023.common import read_lines

_DIGITS = {
    "zero": 0,
    "one": 1,
    "two": 2,
    "three": 3,
    "four": 4,
    "five": 5,
    "six": 6,
    "seven": 7,
    "eight": 8,
    "nine": 9,
}
_DIGITS.update({str(value): value for value in range(10)})

# A lookahead finds every digit, including ones that overlap such as "twone".
_DIGIT_PATTERN = re.compile(
    "(?=(zero|one|two|three|four|five|six|seven|eight|nine|[0-9]))"
)


def digit_value(token: str) -> int:
    """Return the value of a digit written as a numeral or an English word."""
    try:
        return _DIGITS[token]
    except KeyError:
        raise ValueError(f"Unknown digit: {token}") from None


def calibration_value(line: str) -> int:
    """Combine the first and last digit found in a line into a two-digit number."""
    digits = [
        digit_value(match.group(1)) for match in _DIGIT_PATTERN.finditer(line)
    ]
    if not digits:
        raise ValueError(f"No digits found on line: {line}")
    return digits[0] * 10 + digits[-1]


def total_calibration(lines: Iterable[str]) -> int:
    """Sum the calibration values of all non-empty lines."""
    return sum(calibration_value(line) for line in lines if line)


def run(path) -> int:
    """Solve the puzzle for the input file and print the result."""
    result = total_calibration(read_lines(path))
    print(f"Result: {result}")
    return result