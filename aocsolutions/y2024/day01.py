"""Historian Hysteria: compare two location-id lists."""

from collections import Counter

_SEPARATOR = "   "


def _parse(text):
    """Split each line on the three-space separator into two sorted columns."""
    left, right = [], []
    for line in text.splitlines():
        a, sep, b = line.partition(_SEPARATOR)
        if not sep:
            continue
        left.append(int(a))
        right.append(int(b))
    return sorted(left), sorted(right)


def part1(text):
    """Sum of distances between the sorted left and right lists."""
    left, right = _parse(text)
    return sum(abs(a - b) for a, b in zip(left, right))


def part2(text):
    """Similarity score: each left number times its count in the right list."""
    left, right = _parse(text)
    counts = Counter(right)
    return sum(a * counts[a] for a in left)