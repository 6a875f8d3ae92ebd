# aocsolutions

Solutions to Advent of Code puzzles: the first day of 2023 and days 1 to 15
of 2024. Each solution takes the puzzle input as plain text and returns the
answer as an integer. It needs nothing outside the standard library.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Command line

The package installs one command, `aocsolutions`:

```
aocsolutions YEAR DAY PART [INPUT]
```

`PART` is `1` or `2`. `INPUT` is the path of the puzzle input and defaults
to `input.txt` in the current directory; give `-` to read from standard
input. The answer is printed on standard output.

```
aocsolutions 2024 1 1 input.txt
aocsolutions 2023 1 2 - < input.txt
```

The exit status is 0 on success, 2 when there is no solution for the year
and day asked for, and 1 when the input cannot be read or is malformed; in
those cases a message starting with `error:` goes to standard error.

## Library

Every 2024 day lives in its own module under `aocsolutions.y2024`, named
`day01` to `day15`, and has a `part1` and a `part2` function that take the
puzzle input as text and return an `int`:

```python
from aocsolutions.y2024 import day01

text = "3   4\n4   3\n2   5\n1   3\n3   9\n3   3"
print(day01.part1(text))  # 11
print(day01.part2(text))  # 31
```

Input that cannot be parsed raises `ValueError`.

A few functions take extra arguments with defaults:

- `day13.part2(text, offset=10_000_000_000_000, limit=None)`: `offset` is
  added to both coordinates of every prize; `limit`, when given, is the
  largest number of presses allowed per button.
- `day14.part1(text, size=(101, 103))`: the width and height of the room.

Some days offer more than the two parts:

- `day02.parse(text)` returns the reports as lists of integers, and
  `day02.is_safe(report)` tells whether one report is safe.
- `day06.parse_game(text)` returns a `Game`. `Game.update()` moves the guard
  one step and returns a `GameStatus` (`RUNNING`, `FINISHED` or `LOOPING`);
  `Game.run()` steps until the guard leaves the map or starts looping.
  `Game.visited` holds the cells the guard has been on.

The 2023 calibration puzzle is in `aocsolutions.y2023.calibration`:

```python
from aocsolutions.y2023 import calibration

calibration.digit_calibration_sum("1abc2\npqr3stu8vwx")  # 50
calibration.spelled_calibration_sum("two1nine\neightwothree")  # 112
```

To pick a puzzle by number, use
`aocsolutions.cli.solve(year, day, part, text)`, which returns the answer as
a string and raises `ValueError` for an unknown puzzle or part.

## What it does not do

- `day15.part2` pushes boxes by the same single-cell rules as `day15.part1`;
  it does not widen the warehouse or handle two-cell `[]` boxes.
- `day14.part2` returns the first second at which no two robots share a
  tile in a 101 by 103 room; it does not draw the room or look for a
  picture.
- The package does not download puzzle input or submit answers.