"""Command line entry point: solve one puzzle part from an input file."""

import argparse
import sys
from pathlib import Path

from aocsolutions.y2023 import calibration
from aocsolutions.y2024 import (
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
    day13,
    day14,
    day15,
)

_DAYS_2024 = (
    day01, day02, day03, day04, day05, day06, day07, day08,
    day09, day10, day11, day12, day13, day14, day15,
)

_SOLVERS = {
    (2023, 1): (calibration.digit_calibration_sum, calibration.spelled_calibration_sum),
    **{(2024, n): (m.part1, m.part2) for n, m in enumerate(_DAYS_2024, start=1)},
}


def solve(year, day, part, text):
    """Solve one part of a puzzle and return the answer as text."""
    try:
        parts = _SOLVERS[(year, day)]
    except KeyError:
        raise ValueError(f"no solution for {year} day {day}") from None
    if part not in (1, 2):
        raise ValueError(f"no part {part}")
    return str(parts[part - 1](text))


def main(argv=None):
    """Read puzzle input, print the answer, and return the exit status."""
    parser = argparse.ArgumentParser(description="Solve a puzzle part.")
    parser.add_argument("year", type=int)
    parser.add_argument("day", type=int)
    parser.add_argument("part", type=int, choices=(1, 2))
    parser.add_argument(
        "input", nargs="?", default="input.txt", help="input file, or - for stdin"
    )
    args = parser.parse_args(argv)

    if (args.year, args.day) not in _SOLVERS:
        print(f"error: no solution for {args.year} day {args.day}", file=sys.stderr)
        return 2
    try:
        text = sys.stdin.read() if args.input == "-" else Path(args.input).read_text()
    except OSError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    try:
        result = solve(args.year, args.day, args.part, text)
    except ValueError as exc:
        print(f"error: process part {args.part}: {exc}", file=sys.stderr)
        return 1
    print(result)
    return 0