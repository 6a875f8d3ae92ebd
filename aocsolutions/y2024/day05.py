"""Print Queue: check page updates against ordering rules."""

import re
from functools import cmp_to_key
from itertools import combinations

_RULE = re.compile(r"(\d+)\|(\d+)\r?\n")
_UPDATE = re.compile(r"\d+(?:,\d+)*")
_LINE_END = re.compile(r"\r?\n")


def _parse(text):
    """Return the set of (before, after) rules and the list of updates."""
    rules = set()
    pos = 0
    while (match := _RULE.match(text, pos)) is not None:
        rules.add((int(match.group(1)), int(match.group(2))))
        pos = match.end()
    if not rules:
        raise ValueError("expected at least one ordering rule")
    while pos < len(text) and text[pos] == "\n":
        pos += 1
    match = _UPDATE.match(text, pos)
    if match is None:
        raise ValueError("expected at least one update")
    updates = []
    while True:
        updates.append([int(n) for n in match.group().split(",")])
        end = _LINE_END.match(text, match.end())
        if end is None:
            break
        match = _UPDATE.match(text, end.end())
        if match is None:
            break
    return rules, updates


def _violates(update, rules):
    return any((later, earlier) in rules for earlier, later in combinations(update, 2))


def part1(text):
    """Sum of middle pages of correctly ordered updates."""
    rules, updates = _parse(text)
    return sum(u[len(u) // 2] for u in updates if not _violates(u, rules))


def part2(text):
    """Sum of middle pages of incorrectly ordered updates after reordering."""
    rules, updates = _parse(text)
    key = cmp_to_key(lambda a, b: 1 if (a, b) in rules else -1)
    return sum(
        sorted(u, key=key)[len(u) // 2] for u in updates if _violates(u, rules)
    )