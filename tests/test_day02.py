import pytest

from aocsolutions.y2024.day02 import is_safe, parse, part1, part2

EXAMPLE = """7 6 4 2 1
1 2 7 8 9
9 7 6 2 1
1 3 2 4 5
8 6 4 4 1
1 3 6 7 9
1 1 1 1 1"""


def test_part1_example():
    assert part1(EXAMPLE) == 2


def test_part2_negative():
    text = """1 2 7 8 9
9 7 6 2 1
1 1 1 1 8"""
    assert part2(text) == 0


def test_part2_positive():
    text = """7 6 4 2 1
1 3 2 4 5
8 6 4 4 1
1 3 6 7 9"""
    assert part2(text) == len(text.splitlines())


def test_parse_reports():
    assert parse("1 2 3\n4 5\n") == [[1, 2, 3], [4, 5]]


def test_parse_empty_raises():
    with pytest.raises(ValueError):
        parse("")


@pytest.mark.parametrize(
    "report, expected",
    [
        ([7, 6, 4, 2, 1], True),
        ([1, 2, 7, 8, 9], False),
        ([1, 3, 2, 4, 5], False),
        ([8, 6, 4, 4, 1], False),
        ([1, 3, 6, 7, 9], True),
        ([5], True),
    ],
)
def test_is_safe(report, expected):
    assert is_safe(report) is expected