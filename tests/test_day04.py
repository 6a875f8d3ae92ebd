import pytest

from aocsolutions.y2024.day04 import part1, part2

EXAMPLE = """MMMSXXMASM
MSAMXMSMSA
AMXSXMAAMM
MSAMASMSMX
XMASAMXAMM
XXAMMXXAMA
SMSMSASXSS
SAXAMASAAA
MAMMMXMMMM
MXMXAXMASX"""


def test_part1_example():
    assert part1(EXAMPLE) == 18


def test_part2_example():
    assert part2(EXAMPLE) == 9


def test_part1_single_word_both_ways():
    assert part1("XMASAMX") == 2


def test_part2_single_cross():
    assert part2("M.S\n.A.\nM.S".replace(".", "Z")) == 1


def test_empty_grid_raises():
    with pytest.raises(ValueError):
        part1("")