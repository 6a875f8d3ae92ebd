import pytest

from aocsolutions.y2024.day15 import part1, part2

WAREHOUSE = "\n".join(
    [
        "########",
        "#..O.O.#",
        "##@.O..#",
        "#...O..#",
        "#.#.O..#",
        "#...O..#",
        "#......#",
        "########",
    ]
)

WAREHOUSE_TEXT = WAREHOUSE + "\n\n" + "<^^>>>vv<v>>v<<"

SMALL = "#####\n#@O.#\n#####\n\n>>"


def test_part1_small_warehouse():
    assert part1(WAREHOUSE_TEXT) == 2028


def test_part1_moves_split_over_lines():
    assert part1(WAREHOUSE + "\n\n<^^>>>vv\n<v>>v<<") == 2028


def test_part1_box_stops_at_wall():
    assert part1(SMALL) == 103


def test_part2_matches_part1_on_narrow_map():
    assert part2(SMALL) == part1(SMALL)


def test_part2_rejects_wide_boxes():
    with pytest.raises(ValueError):
        part2("####\n#@[]#\n####\n\n>")


def test_missing_robot():
    with pytest.raises(ValueError):
        part1("####\n#..#\n####\n\n>")


def test_missing_blank_line():
    with pytest.raises(ValueError):
        part1("####\n#@.#\n####\n>")


def test_missing_moves():
    with pytest.raises(ValueError):
        part1("####\n#@.#\n####\n\nxyz")


def test_walking_off_the_map():
    with pytest.raises(ValueError):
        part1("@.\n\n<")