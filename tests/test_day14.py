import pytest

from aocsolutions.y2024.day14 import part1, part2

# Each robot: position (x, y), velocity (x, y).
ROBOTS = [
    (0, 4, 3, -3),
    (6, 3, -1, -3),
    (10, 3, -1, 2),
    (2, 0, 2, -1),
    (0, 0, 1, 3),
    (3, 0, -2, -2),
    (7, 6, -1, -3),
    (3, 0, -1, -2),
    (9, 3, 2, 3),
    (7, 3, -1, 2),
    (2, 4, 2, -3),
    (9, 5, -3, -3),
]

SAMPLE = "\n".join(f"p={px},{py} v={vx},{vy}" for px, py, vx, vy in ROBOTS)


def test_part1_sample():
    assert part1(SAMPLE, size=(11, 7)) == 12


def test_part1_ignores_trailing_text():
    assert part1(SAMPLE + "\nnot a robot", size=(11, 7)) == 12


def test_part1_robots_on_middle_lines_count_nowhere():
    assert part1("p=5,3 v=0,0", size=(11, 7)) == 1


def test_part1_rejects_missing_robots():
    with pytest.raises(ValueError):
        part1("nothing here", size=(11, 7))


def test_part2_unique_after_first_second():
    assert part2("p=0,0 v=1,0\np=5,5 v=1,0") == 1


def test_part2_waits_past_collision():
    assert part2("p=0,0 v=1,0\np=2,0 v=-1,0") == 2


def test_part2_rejects_missing_robots():
    with pytest.raises(ValueError):
        part2("")