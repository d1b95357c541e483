"""Helpers shared by the daily puzzle solvers."""

from __future__ import annotations

import os
from pathlib import Path

_WHITESPACE = " \t\n\r"


def trim(text: str) -> str:
    """Strip spaces, tabs, carriage returns and newlines from both ends."""
    return text.strip(_WHITESPACE)


def read_lines(path: str | os.PathLike[str]) -> list[str]:
    """Read a text file as a list of lines.

    Windows line endings are normalised and a trailing blank line is dropped.
    """
    content = Path(path).read_text()
    lines = content.replace("\r\n", "\n").split("\n")
    if trim(lines[-1]) == "":
        lines.pop()
    return lines