"""Ceres Search: find XMAS words in a letter grid."""

import re

_ROW = re.compile(r"[A-Za-z]+")
_LINE_END = re.compile(r"\r?\n")

_ALL_DIRECTIONS = (
    (0, -1),
    (0, 1),
    (-1, 0),
    (1, 0),
    (-1, -1),
    (1, -1),
    (-1, 1),
    (1, 1),
)
_DIAGONALS = ((-1, -1), (1, -1), (-1, 1), (1, 1))


def _parse(text):
    """Return a mapping of (x, y) to letter, plus the width and height."""
    match = _ROW.match(text)
    if match is None:
        raise ValueError("expected at least one row of letters")
    rows = []
    while True:
        rows.append(match.group())
        end = _LINE_END.match(text, match.end())
        if end is None:
            break
        match = _ROW.match(text, end.end())
        if match is None:
            break
    grid = {(x, y): c for y, row in enumerate(rows) for x, c in enumerate(row)}
    return grid, len(rows[0]), len(rows)


def part1(text):
    """Count occurrences of XMAS in any of the eight directions."""
    grid, cols, rows = _parse(text)
    count = 0
    for (x, y), letter in grid.items():
        if letter != "X":
            continue
        for dx, dy in _ALL_DIRECTIONS:
            cells = [(x + dx * step, y + dy * step) for step in range(1, 4)]
            if all(0 <= cx < cols and 0 <= cy < rows for cx, cy in cells) and "".join(
                grid.get(cell, "") for cell in cells
            ) == "MAS":
                count += 1
    return count


def part2(text):
    """Count A letters that sit at the centre of two crossing MAS words."""
    grid, cols, rows = _parse(text)
    count = 0
    for (x, y), letter in grid.items():
        if letter != "A" or x in (0, cols - 1) or y in (0, rows - 1):
            continue
        arms = sum(
            1
            for dx, dy in _DIAGONALS
            if grid.get((x + dx, y + dy)) == "M" and grid.get((x - dx, y - dy)) == "S"
        )
        if arms == 2:
            count += 1
    return count