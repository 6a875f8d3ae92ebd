"""Resonant Collinearity: count antinodes made by antenna pairs."""

from itertools import combinations, groupby
from operator import itemgetter


def _parse(text):
    """Return map height, width and antenna positions grouped by frequency."""
    lines = text.splitlines()
    if not lines:
        raise ValueError("empty map")
    antennas = [
        ((x, y), char)
        for y, line in enumerate(text.split("\n"))
        for x, char in enumerate(line)
        if char.isascii() and char.isalnum()
    ]
    if not antennas:
        raise ValueError("no antennas on the map")
    antennas.sort(key=itemgetter(1))
    groups = [
        [pos for pos, _ in members]
        for _, members in groupby(antennas, key=itemgetter(1))
    ]
    return len(lines), len(lines[0]), groups


def _inside(rows, cols):
    return lambda pos: 0 <= pos[0] < cols and 0 <= pos[1] < rows


def _ray(start, step, inside):
    """Yield start and every further step along the line while inside the map."""
    x, y = start
    dx, dy = step
    yield start
    while inside((x + dx, y + dy)):
        x, y = x + dx, y + dy
        yield (x, y)


def part1(text):
    """Number of in-bounds antinodes at twice the distance of each pair."""
    rows, cols, groups = _parse(text)
    inside = _inside(rows, cols)
    antinodes = set()
    for group in groups:
        for (ax, ay), (bx, by) in combinations(group, 2):
            dx, dy = ax - bx, ay - by
            antinodes.update(
                pos for pos in ((ax + dx, ay + dy), (bx - dx, by - dy)) if inside(pos)
            )
    return len(antinodes)


def part2(text):
    """Number of cells on any line through two antennas of one frequency."""
    rows, cols, groups = _parse(text)
    inside = _inside(rows, cols)
    antinodes = set()
    for group in groups:
        for a, b in combinations(group, 2):
            dx, dy = b[0] - a[0], b[1] - a[1]
            antinodes.update(_ray(b, (dx, dy), inside))
            antinodes.update(_ray(a, (-dx, -dy), inside))
    return len(antinodes)