import pytest

from aocsolutions.y2024.day11 import part1, part2


def test_part1_example():
    assert part1("125 17") == 55312


def test_part2_example():
    assert part2("125 17") == 55312


@pytest.mark.parametrize("text", ["0", "1 10 99 999", "2024 7\n"])
def test_parts_agree(text):
    assert part1(text) == part2(text)


def test_empty_input():
    assert part1("") == 0
    assert part2("") == 0


@pytest.mark.parametrize("solver", [part1, part2])
def test_invalid_stone(solver):
    with pytest.raises(ValueError):
        solver("12 abc")