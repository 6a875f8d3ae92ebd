"""Guard Gallivant: follow a patrolling guard around a lab map."""

from dataclasses import dataclass, field
from enum import Enum


class Spot(Enum):
    """What occupies a map cell."""

    NOTHING = "."
    OBSTACLE = "#"

    @classmethod
    def from_char(cls, char):
        if char in ("^", "."):
            return cls.NOTHING
        if char == "#":
            return cls.OBSTACLE
        raise ValueError(f"invalid spot {char!r}")


class Direction(Enum):
    """Facing of the guard, valued by its (dx, dy) step."""

    UP = (0, -1)
    RIGHT = (1, 0)
    DOWN = (0, 1)
    LEFT = (-1, 0)

    def turn_right(self):
        order = (Direction.UP, Direction.RIGHT, Direction.DOWN, Direction.LEFT)
        return order[(order.index(self) + 1) % len(order)]


class GameStatus(Enum):
    """Outcome of a single step of the patrol."""

    RUNNING = "running"
    FINISHED = "finished"
    LOOPING = "looping"


@dataclass
class Game:
    """Map, guard state and the history of where the guard has been."""

    rows: list
    guard: tuple = (0, 0)
    direction: Direction = Direction.UP
    visited: set = field(default_factory=set)
    visited_directions: set = field(default_factory=set)

    def __post_init__(self):
        self.visited.add(self.guard)
        self.visited_directions.add((self.guard, self.direction))

    def update(self):
        """Advance the guard one step and report the resulting status."""
        x, y = self.guard
        dx, dy = self.direction.value
        nx, ny = x + dx, y + dy
        if nx < 0 or ny < 0 or ny >= len(self.rows) or nx >= len(self.rows[0]):
            return GameStatus.FINISHED
        if self.rows[ny][nx] is Spot.OBSTACLE:
            self.direction = self.direction.turn_right()
            return GameStatus.RUNNING
        position = (nx, ny)
        self.visited.add(position)
        state = (position, self.direction)
        if state in self.visited_directions:
            return GameStatus.LOOPING
        self.visited_directions.add(state)
        self.guard = position
        return GameStatus.RUNNING

    def run(self):
        """Step until the guard leaves the map or starts looping."""
        while (status := self.update()) is GameStatus.RUNNING:
            pass
        return status


def parse_game(text):
    """Build a game from a map where '^' marks the guard facing up."""
    guard = (0, 0)
    rows = []
    for y, line in enumerate(text.splitlines()):
        row = []
        for x, char in enumerate(line):
            if char == "^":
                guard = (x, y)
            row.append(Spot.from_char(char))
        rows.append(row)
    return Game(rows=rows, guard=guard)


def part1(text):
    """Number of distinct cells the guard visits before leaving the map."""
    game = parse_game(text)
    if game.run() is GameStatus.LOOPING:
        raise ValueError("the guard never leaves the map")
    return len(game.visited)


def _with_obstacle(rows, x, y):
    blocked = list(rows)
    blocked[y] = list(rows[y])
    blocked[y][x] = Spot.OBSTACLE
    return blocked


def part2(text):
    """Number of free cells where one new obstacle traps the guard in a loop."""
    start = parse_game(text)
    patrol = parse_game(text)
    if patrol.run() is GameStatus.FINISHED:
        # An obstacle off the original path is never reached, so it changes nothing.
        candidates = patrol.visited
    else:
        candidates = {
            (x, y)
            for y, row in enumerate(start.rows)
            for x, spot in enumerate(row)
            if spot is Spot.NOTHING
        }
    return sum(
        1
        for x, y in candidates
        if Game(rows=_with_obstacle(start.rows, x, y), guard=start.guard).run()
        is GameStatus.LOOPING
    )