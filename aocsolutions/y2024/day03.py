"""Mull It Over: sum the valid multiplication instructions in corrupted memory."""

import re

_U32_MAX = 2**32 - 1
_MUL = re.compile(r"mul\((\d+),(\d+)\)")
_INSTRUCTION = re.compile(r"(don't\(\))|(do\(\))|mul\((\d+),(\d+)\)")


def _fits(*numbers):
    return all(int(n) <= _U32_MAX for n in numbers)


def part1(text):
    """Sum of all products of well-formed mul(a,b) instructions."""
    products = [
        int(a) * int(b) for a, b in _MUL.findall(text) if _fits(a, b)
    ]
    if not products:
        raise ValueError("no mul instruction found")
    return sum(products)


def part2(text):
    """Sum of products, honouring do() and don't() switches."""
    enabled = True
    total = 0
    found = False
    for dont, do, a, b in _INSTRUCTION.findall(text):
        if dont:
            enabled = False
        elif do:
            enabled = True
        elif _fits(a, b):
            if enabled:
                total += int(a) * int(b)
        else:
            continue
        found = True
    if not found:
        raise ValueError("no instruction found")
    return total