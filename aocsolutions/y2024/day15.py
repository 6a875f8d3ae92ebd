"""Warehouse Woes: push boxes around a warehouse with a robot."""

import re

_MOVES = re.compile(r"[<^>v]+(?:\r?\n[<^>v]+)*")
_STEPS = {"^": (0, -1), "v": (0, 1), "<": (-1, 0), ">": (1, 0)}


def _parse(text):
    """Return the warehouse grid and the list of moves."""
    end = text.find("\n\n")
    if end == -1:
        raise ValueError("expected a blank line after the map")
    rows = text[:end].split("\n")
    if any(not row for row in rows):
        raise ValueError("empty map row")
    grid = {(x, y): c for y, row in enumerate(rows) for x, c in enumerate(row)}
    match = _MOVES.match(text, end + 2)
    if match is None:
        raise ValueError("expected at least one move")
    moves = [c for c in match.group() if c in _STEPS]
    return grid, moves


def _cell(grid, pos):
    try:
        return grid[pos]
    except KeyError:
        raise ValueError(f"position {pos} is off the map") from None


def _simulate(text):
    """Run every move and return the sum of box GPS coordinates."""
    grid, moves = _parse(text)
    robot = next((pos for pos, c in grid.items() if c == "@"), None)
    if robot is None:
        raise ValueError("no robot on the map")
    for move in moves:
        dx, dy = _STEPS[move]
        target = (robot[0] + dx, robot[1] + dy)
        content = _cell(grid, target)
        if content == ".":
            grid[robot] = "."
            grid[target] = "@"
            robot = target
        elif content == "O":
            end = target
            end_content = "O"
            while end_content == "O":
                end = (end[0] + dx, end[1] + dy)
                end_content = _cell(grid, end)
            if end_content == ".":
                grid[robot] = "."
                grid[target] = "@"
                grid[end] = "O"
                robot = target
            elif end_content != "#":
                raise ValueError(f"invalid map value {end_content!r}")
        elif content != "#":
            raise ValueError(f"invalid map value {content!r}")
    return sum(x + 100 * y for (x, y), c in grid.items() if c == "O")


def part1(text):
    """Sum of box GPS coordinates after the robot finishes moving."""
    return _simulate(text)


def part2(text):
    """Sum of box GPS coordinates, using the same single-cell box rules."""
    return _simulate(text)