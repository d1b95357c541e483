"""Solvers for days 1 to 12 of the Advent of Code 2023 puzzles, with a command line runner."""

__version__ = "1.0.0"