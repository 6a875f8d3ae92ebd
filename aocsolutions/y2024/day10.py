"""Hoof It: score and rate hiking trails on a topographic map."""

import re

_ROW = re.compile(r"[0-9]+")
_LINE_END = re.compile(r"\r?\n")
_STEPS = ((0, -1), (0, 1), (1, 0), (-1, 0))


def _parse(text):
    """Parse newline-separated rows of single-digit heights."""
    match = _ROW.match(text)
    if match is None:
        raise ValueError("expected at least one row of digits")
    rows = []
    while True:
        rows.append([int(c) for c in match.group()])
        end = _LINE_END.match(text, match.end())
        if end is None:
            break
        match = _ROW.match(text, end.end())
        if match is None:
            break
    return rows


def _peaks(rows):
    return [
        (x, y)
        for y, row in enumerate(rows)
        for x, height in enumerate(row)
        if height == 9
    ]


def _descents(rows, start):
    """Yield the trailhead reached by every path descending one step at a time."""
    width, height = len(rows[0]), len(rows)
    x, y = start
    level = rows[y][x]
    if level == 0:
        yield start
        return
    for dx, dy in _STEPS:
        nx, ny = x + dx, y + dy
        if (
            0 <= nx < width
            and 0 <= ny < height
            and nx < len(rows[ny])
            and rows[ny][nx] == level - 1
        ):
            yield from _descents(rows, (nx, ny))


def part1(text):
    """Sum over all peaks of the number of distinct trailheads that reach them."""
    rows = _parse(text)
    return sum(len(set(_descents(rows, peak))) for peak in _peaks(rows))


def part2(text):
    """Sum over all peaks of the number of distinct trails that reach them."""
    rows = _parse(text)
    return sum(sum(1 for _ in _descents(rows, peak)) for peak in _peaks(rows))