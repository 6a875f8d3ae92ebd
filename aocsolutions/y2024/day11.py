"""Plutonian Pebbles: count stones that change every time you blink."""

import re
from collections import Counter

_STONE = re.compile(r"\+?[0-9]+")
_BLINKS = 25


def _parse(text):
    stones = []
    for token in text.split():
        if not _STONE.fullmatch(token):
            raise ValueError(f"invalid stone {token!r}")
        stones.append(int(token))
    return stones


def _transform(stone):
    """The stones that one stone becomes after a single blink."""
    if stone == 0:
        return (1,)
    digits = str(stone)
    if len(digits) % 2 == 0:
        half = len(digits) // 2
        return int(digits[:half]), int(digits[half:])
    return (stone * 2024,)


def part1(text):
    """Number of stones after 25 blinks, tracking every stone."""
    stones = _parse(text)
    for _ in range(_BLINKS):
        stones = [new for stone in stones for new in _transform(stone)]
    return len(stones)


def part2(text):
    """Number of stones after 25 blinks, tracking counts per engraving."""
    counts = Counter(_parse(text))
    for _ in range(_BLINKS):
        blinked = Counter()
        for stone, count in counts.items():
            for new in _transform(stone):
                blinked[new] += count
        counts = blinked
    return sum(counts.values())