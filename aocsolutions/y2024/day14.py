"""Restroom Redoubt: predict where patrolling robots end up."""

import re
from dataclasses import dataclass

_ROBOT = re.compile(
    r"p=([+-]?[0-9]+),([+-]?[0-9]+)[ \t]+v=([+-]?[0-9]+),([+-]?[0-9]+)(?:\r?\n)?"
)
_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1
_BATHROOM = (101, 103)
_SECONDS = 100


@dataclass(frozen=True)
class _Robot:
    position: tuple
    velocity: tuple

    def after(self, seconds, size):
        """Position after the given number of seconds, wrapping around the edges."""
        (px, py), (vx, vy), (w, h) = self.position, self.velocity, size
        return (px + vx * seconds) % w, (py + vy * seconds) % h


def _parse(text):
    """Parse consecutive 'p=x,y v=dx,dy' lines from the start of the text."""
    robots = []
    pos = 0
    while (match := _ROBOT.match(text, pos)) is not None:
        values = [int(v) for v in match.groups()]
        if any(not _I32_MIN <= v <= _I32_MAX for v in values):
            break
        px, py, vx, vy = values
        robots.append(_Robot((px, py), (vx, vy)))
        pos = match.end()
    if not robots:
        raise ValueError("expected at least one robot")
    return robots


def part1(text, size=_BATHROOM):
    """Safety factor: product of non-empty quadrant counts after 100 seconds."""
    width, height = size
    half_x, half_y = width // 2, height // 2
    quadrants = (
        (range(0, half_x), range(0, half_y)),
        (range(half_x + 1, width), range(0, half_y)),
        (range(0, half_x), range(half_y + 1, height)),
        (range(half_x + 1, width), range(half_y + 1, height)),
    )
    counts = [0] * len(quadrants)
    for robot in _parse(text):
        x, y = robot.after(_SECONDS, size)
        for index, (xs, ys) in enumerate(quadrants):
            if x in xs and y in ys:
                counts[index] += 1
                break
    product = 1
    for count in counts:
        if count > 0:
            product *= count
    return product


def part2(text):
    """First second at which no two robots share a tile."""
    robots = _parse(text)
    seconds = 0
    while True:
        seconds += 1
        positions = [robot.after(seconds, _BATHROOM) for robot in robots]
        if len(set(positions)) == len(positions):
            return seconds