"""Red-Nosed Reports: count reports whose levels change safely."""

import re
from itertools import combinations, pairwise

_REPORT = re.compile(r"[+-]?\d+(?:[ \t]+[+-]?\d+)*")
_LINE_END = re.compile(r"\r?\n")


def parse(text):
    """Parse newline-separated reports of space-separated integers."""
    match = _REPORT.match(text)
    if match is None:
        raise ValueError("expected at least one report")
    reports = []
    while True:
        reports.append([int(n) for n in match.group().split()])
        end = _LINE_END.match(text, match.end())
        if end is None:
            break
        match = _REPORT.match(text, end.end())
        if match is None:
            break
    return reports


def _levels_safe(levels):
    sign = None
    for a, b in pairwise(levels):
        diff = b - a
        if not 1 <= abs(diff) <= 3:
            return False
        diff_sign = 1 if diff > 0 else -1
        if sign is not None and sign != diff_sign:
            return False
        sign = diff_sign
    return True


def is_safe(report):
    """True when levels strictly increase or decrease by 1 to 3 each step."""
    return _levels_safe(report)


def part1(text):
    """Number of safe reports."""
    return sum(1 for report in parse(text) if is_safe(report))


def part2(text):
    """Number of reports that are safe, or safe after removing one level."""
    return sum(
        1
        for report in parse(text)
        if is_safe(report)
        or any(_levels_safe(rest) for rest in combinations(report, len(report) - 1))
    )