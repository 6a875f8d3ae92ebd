import pytest

from aocsolutions.y2024.day08 import part1, part2

SAMPLE = """............
........0...
.....0......
.......0....
....0.......
......A.....
............
............
........A...
.........A..
............
............"""


def test_part1_sample():
    assert part1(SAMPLE) == 14


def test_part2_sample():
    assert part2(SAMPLE) == 34


def test_single_antenna_has_no_antinodes():
    assert part1("...\n.a.\n...") == 0
    assert part2("...\n.a.\n...") == 0


def test_no_antennas_raises():
    with pytest.raises(ValueError):
        part1("...\n...")


def test_empty_map_raises():
    with pytest.raises(ValueError):
        part2("")


def test_part2_at_least_part1():
    assert part2(SAMPLE) >= part1(SAMPLE)