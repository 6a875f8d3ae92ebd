import pytest

from aocsolutions.y2024.day03 import part1, part2


def test_part1_example():
    text = "xmul(2,4)%&mul[3,7]!@^do_not_mul(5,5)+mul(32,64]then(mul(11,8)mul(8,5))"
    assert part1(text) == 161


def test_part2_example():
    text = "xmul(2,4)&mul[3,7]!^don't()_mul(5,5)+mul(32,64](mul(11,8)undo()?mul(8,5))"
    assert part2(text) == 48


def test_part2_reenables_after_do():
    assert part2("don't()mul(2,3)do()mul(4,5)") == 20


def test_part1_without_instructions_raises():
    with pytest.raises(ValueError):
        part1("nothing to see here")


def test_part2_without_instructions_raises():
    with pytest.raises(ValueError):
        part2("mul[1,2]")