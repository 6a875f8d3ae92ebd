"""Bridge Repair: find equations that can be made true with operators."""

import re
from operator import add, mul

_NUMBER = re.compile(r"\+?[0-9]+")


def _number(token):
    if not _NUMBER.fullmatch(token):
        raise ValueError(f"invalid number {token!r}")
    return int(token)


def _concat(a, b):
    return int(f"{a}{b}")


def _parse(text):
    equations = []
    for line in text.splitlines():
        target, sep, rest = line.partition(": ")
        if not sep:
            raise ValueError(f"missing ': ' in line {line!r}")
        rest = rest.split(": ", 1)[0]
        equations.append((_number(target), [_number(p) for p in rest.split(" ")]))
    return equations


def _solvable(target, factors, operations):
    """True if some left-to-right choice of operations yields the target."""
    first, *others = factors
    values = {first}
    for factor in others:
        values = {op(value, factor) for value in values for op in operations}
    return target in values


def _calibration(text, operations):
    return sum(
        target
        for target, factors in _parse(text)
        if _solvable(target, factors, operations)
    )


def part1(text):
    """Sum of targets reachable with addition and multiplication."""
    return _calibration(text, (add, mul))


def part2(text):
    """Sum of targets reachable with addition, multiplication and concatenation."""
    return _calibration(text, (add, mul, _concat))