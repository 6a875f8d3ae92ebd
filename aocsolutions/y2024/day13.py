"""Claw Contraption: find the cheapest button presses that reach each prize."""

import re
from dataclasses import dataclass

_MACHINE = re.compile(
    r"Button A: X\+([0-9]+), Y\+([0-9]+)\r?\n"
    r"Button B: X\+([0-9]+), Y\+([0-9]+)\r?\n"
    r"Prize: X=([0-9]+), Y=([0-9]+)"
)
_GAP = re.compile(r"\r?\n\r?\n")
_U32_MAX = 2**32 - 1
_U64_MAX = 2**64 - 1
_A_COST = 3
_B_COST = 1
_PRIZE_OFFSET = 10_000_000_000_000


@dataclass(frozen=True)
class _Machine:
    a: tuple
    b: tuple
    prize: tuple


def _parse(text, maximum):
    """Parse blank-line-separated machine descriptions."""
    machines = []
    pos = 0
    while (match := _MACHINE.match(text, pos)) is not None:
        values = [int(v) for v in match.groups()]
        if any(v > maximum for v in values):
            break
        ax, ay, bx, by, px, py = values
        machines.append(_Machine((ax, ay), (bx, by), (px, py)))
        gap = _GAP.match(text, match.end())
        if gap is None:
            break
        pos = gap.end()
    if not machines:
        raise ValueError("expected at least one machine")
    return machines


def _search_cost(machine):
    """Sum, over total press counts 2..199, of the cost of the first winning split."""
    (ax, ay), (bx, by), (px, py) = machine.a, machine.b, machine.prize
    total = 0
    for presses in range(2, 200):
        for a in range(presses, -1, -1):
            b = presses - a
            if a * ax + b * bx == px and a * ay + b * by == py:
                total += _A_COST * a + _B_COST * b
                break
    return total


def _solve(machine, limit):
    """Exact press counts for both buttons, or None when there are none."""
    (ax, ay), (bx, by), (px, py) = machine.a, machine.b, machine.prize
    det = ax * by - bx * ay
    if det == 0:
        return None
    a, a_rem = divmod(px * by - bx * py, det)
    b, b_rem = divmod(ax * py - px * ay, det)
    if a_rem or b_rem or a < 0 or b < 0:
        return None
    if limit is not None and (a > limit or b > limit):
        return None
    return a, b


def part1(text):
    """Tokens spent winning prizes by searching press combinations."""
    return sum(_search_cost(machine) for machine in _parse(text, _U32_MAX))


def part2(text, offset=_PRIZE_OFFSET, limit=None):
    """Tokens spent winning prizes moved by offset, solving each machine exactly."""
    total = 0
    for machine in _parse(text, _U64_MAX):
        px, py = machine.prize
        moved = _Machine(machine.a, machine.b, (px + offset, py + offset))
        solution = _solve(moved, limit)
        if solution is not None:
            a, b = solution
            total += _A_COST * a + _B_COST * b
    return total