"""Pattern generators that draw on a toroidal binary grid."""

from __future__ import annotations

import enum
import random
from collections.abc import Callable
from itertools import product
from typing import Protocol

from .grid import Grid

_GROW_PROBABILITY = 0.25


class RandomSource(Protocol):
    def random(self) -> float: ...

    def randrange(self, stop: int) -> int: ...


class Pattern(enum.IntEnum):
    """The available pattern generators, in menu order."""

    ELEMENTARY = 0
    MIXED_ELEMENTARY = 1
    SPARSE_GROWTH = 2
    DENSE_GROWTH = 3
    EROSION = 4
    MAZE_GROWTH = 5


def apply_rule(a: int, b: int, c: int, rule: int) -> int:
    """Look up the next state of a cell from its three-cell neighbourhood.

    Empty cells contribute the set bits of the index, so a fully set
    neighbourhood selects bit 0 of ``rule`` and an empty one selects bit 7.
    """
    n = (4 if a == 0 else 0) + (2 if b == 0 else 0) + (1 if c == 0 else 0)
    return (rule >> n) & 1


def _cells(grid: Grid):
    for y, x in product(range(grid.height), range(grid.width)):
        yield x, y


def seed_first_column(grid: Grid, rng: RandomSource) -> None:
    """Set each cell of column 0 at random with even odds."""
    for y in range(grid.height):
        grid[0, y] = 1 if rng.random() < 0.5 else 0


def _evolve_columns(grid: Grid, next_rule: Callable[[], int]) -> None:
    height = grid.height
    for x in range(1, grid.width):
        for y in range(height):
            rule = next_rule()
            grid[x, y] = apply_rule(
                grid[x - 1, (y - 1) % height],
                grid[x - 1, y],
                grid[x - 1, (y + 1) % height],
                rule,
            )


def elementary(grid: Grid, rng: RandomSource) -> None:
    """Run one random elementary rule from a random first column."""
    seed_first_column(grid, rng)
    rule = rng.randrange(256)
    _evolve_columns(grid, lambda: rule)


def mixed_elementary(grid: Grid, rng: RandomSource) -> None:
    """Run two random elementary rules, picked per cell with a random bias."""
    seed_first_column(grid, rng)
    first = rng.randrange(256)
    second = rng.randrange(256)
    threshold = rng.random()
    _evolve_columns(grid, lambda: first if rng.random() > threshold else second)


def _grow(grid: Grid, rng: RandomSource, limit: int) -> None:
    grid.fill(0)
    seed_first_column(grid, rng)
    changed = True
    while changed:
        changed = False
        for x, y in _cells(grid):
            if grid[x, y]:
                continue
            if 1 <= grid.count8_neighbours(x, y) <= limit:
                changed = True
                if rng.random() < _GROW_PROBABILITY:
                    grid[x, y] = 1


def sparse_growth(grid: Grid, rng: RandomSource) -> None:
    """Grow set cells into empty cells that touch exactly one set cell."""
    _grow(grid, rng, 1)


def dense_growth(grid: Grid, rng: RandomSource) -> None:
    """Grow set cells into empty cells that touch one to three set cells."""
    _grow(grid, rng, 3)


def erosion(grid: Grid, rng: RandomSource) -> None:
    """Start full and clear crowded cells until a pass changes nothing."""
    grid.fill(1)
    seed_first_column(grid, rng)
    changed = True
    while changed:
        changed = False
        for x, y in _cells(grid):
            if (
                grid[x, y]
                and grid.count4_neighbours(x, y) == 3
                and grid.count8_neighbours(x, y) >= 5
                and rng.random() < _GROW_PROBABILITY
            ):
                grid[x, y] = 0
                changed = True


def _extends_corridor(grid: Grid, x: int, y: int) -> bool:
    if grid.count4_neighbours(x, y) != 1:
        return False
    left, right = (x - 1) % grid.width, (x + 1) % grid.width
    up, down = (y - 1) % grid.height, (y + 1) % grid.height
    if grid[x, down]:
        far_side = ((left, up), (right, up))
    elif grid[x, up]:
        far_side = ((left, down), (right, down))
    elif grid[left, y]:
        far_side = ((right, down), (right, up))
    else:
        far_side = ((left, down), (left, up))
    return not any(grid[point] for point in far_side)


def maze_growth(grid: Grid, rng: RandomSource) -> None:
    """Grow thin corridors outward from the centre cell."""
    grid.fill(0)
    grid[grid.width >> 1, grid.height >> 1] = 1
    changed = True
    while changed:
        changed = False
        for x, y in _cells(grid):
            if not grid[x, y] and _extends_corridor(grid, x, y):
                if rng.random() < _GROW_PROBABILITY:
                    grid[x, y] = 1
                changed = True


_GENERATORS: dict[Pattern, Callable[[Grid, RandomSource], None]] = {
    Pattern.ELEMENTARY: elementary,
    Pattern.MIXED_ELEMENTARY: mixed_elementary,
    Pattern.SPARSE_GROWTH: sparse_growth,
    Pattern.DENSE_GROWTH: dense_growth,
    Pattern.EROSION: erosion,
    Pattern.MAZE_GROWTH: maze_growth,
}


def generate(
    pattern: Pattern | int,
    width: int,
    height: int,
    rng: RandomSource | None = None,
) -> Grid:
    """Create a new grid and draw ``pattern`` on it."""
    chosen = Pattern(pattern)
    grid = Grid(width, height)
    _GENERATORS[chosen](grid, rng if rng is not None else random.Random())
    return grid