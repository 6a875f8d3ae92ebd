"""Garden Groups: price fences around regions of a garden plot map."""

from collections import deque

_DIRECTIONS = ((0, 1), (1, 0), (0, -1), (-1, 0))


def _parse(text):
    """Map each (x, y) to its plant, splitting lines as text lines."""
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return {
        (x, y): plant
        for y, line in enumerate(lines)
        for x, plant in enumerate(line.removesuffix("\r"))
    }


def _same_neighbours(grid, cell):
    x, y = cell
    plant = grid[cell]
    return [
        (x + dx, y + dy)
        for dx, dy in _DIRECTIONS
        if grid.get((x + dx, y + dy)) == plant
    ]


def _regions(grid):
    """Yield each connected region of equal plants as a set of cells."""
    seen = set()
    for start in grid:
        if start in seen:
            continue
        region = {start}
        queue = deque([start])
        while queue:
            cell = queue.popleft()
            for neighbour in _same_neighbours(grid, cell):
                if neighbour not in region:
                    region.add(neighbour)
                    queue.append(neighbour)
        seen |= region
        yield region


def _corners(grid, cell):
    """Number of fence corners at a cell, inner and outer."""
    x, y = cell
    plant = grid[cell]
    count = 0
    for (ax, ay), (bx, by) in zip(_DIRECTIONS, _DIRECTIONS[1:] + _DIRECTIONS[:1]):
        a_same = grid.get((x + ax, y + ay)) == plant
        b_same = grid.get((x + bx, y + by)) == plant
        diagonal = grid.get((x + ax + bx, y + ay + by))
        if a_same and b_same and diagonal is not None and diagonal != plant:
            count += 1
        elif not a_same and not b_same:
            count += 1
    return count


def part1(text):
    """Total price: area times perimeter for every region."""
    grid = _parse(text)
    return sum(
        len(region)
        * sum(4 - len(_same_neighbours(grid, cell)) for cell in region)
        for region in _regions(grid)
    )


def part2(text):
    """Total bulk price: area times number of sides for every region."""
    grid = _parse(text)
    return sum(
        len(region) * sum(_corners(grid, cell) for cell in region)
        for region in _regions(grid)
    )