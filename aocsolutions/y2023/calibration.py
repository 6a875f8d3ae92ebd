"""Trebuchet: recover calibration values from lines of text."""

import re

_NUMBERS = (
    "0", "zero", "1", "one", "2", "two", "3", "three", "4", "four",
    "5", "five", "6", "six", "7", "seven", "8", "eight", "9", "nine",
)


def _lines(text):
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


def _digit_value(line):
    digits = [c for c in line if "0" <= c <= "9"]
    if not digits:
        raise ValueError(f"first digit not found in {line!r}")
    return int(digits[0] + digits[-1])


def _spelled_value(line):
    found = [
        (match.start(), index // 2)
        for index, number in enumerate(_NUMBERS)
        for match in re.finditer(re.escape(number), line)
    ]
    if not found:
        raise ValueError(f"no number found in {line!r}")
    return min(found)[1] * 10 + max(found)[1]


def digit_calibration_sum(text):
    """Sum of the numbers made of each line's first and last digit."""
    return sum(_digit_value(line) for line in _lines(text))


def spelled_calibration_sum(text):
    """Sum of the numbers made of each line's first and last digit or digit word."""
    return sum(_spelled_value(line) for line in _lines(text))