"""A binary grid whose edges wrap around, as on a torus."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

Point = tuple[int, int]

_FOUR_OFFSETS = ((0, 1), (0, -1), (1, 0), (-1, 0))
_DIAGONAL_OFFSETS = ((-1, 1), (-1, -1), (1, 1), (1, -1))


def _bit(value: int) -> int:
    if value not in (0, 1):
        raise ValueError(f"cell value must be 0 or 1, got {value!r}")
    return int(value)


class Grid:
    """A width x height grid of 0/1 cells addressed as ``grid[x, y]``."""

    __slots__ = ("width", "height", "_cells")

    def __init__(self, width: int, height: int, value: int = 0) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"grid size must be positive, got {width}x{height}")
        fill = _bit(value)
        self.width = width
        self.height = height
        self._cells = [[fill] * width for _ in range(height)]

    def _check(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"point ({x}, {y}) outside {self.width}x{self.height} grid")

    def __getitem__(self, point: Point) -> int:
        x, y = point
        self._check(x, y)
        return self._cells[y][x]

    def __setitem__(self, point: Point, value: int) -> None:
        x, y = point
        self._check(x, y)
        self._cells[y][x] = _bit(value)

    def __iter__(self) -> Iterator[int]:
        """Yield cell values row by row, so position ``x + y * width`` is ``(x, y)``."""
        for row in self._cells:
            yield from row

    def __len__(self) -> int:
        return self.width * self.height

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self._cells == other._cells

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Grid({self.width}x{self.height})"

    def fill(self, value: int) -> None:
        """Set every cell to ``value``."""
        fill = _bit(value)
        for row in self._cells:
            row[:] = [fill] * self.width

    def wrap(self, x: int, y: int) -> Point:
        """Bring a point back inside the grid across its wrapped edges."""
        return x % self.width, y % self.height

    def _sum(self, x: int, y: int, offsets: Iterable[Point]) -> int:
        return sum(
            self._cells[(y + dy) % self.height][(x + dx) % self.width]
            for dx, dy in offsets
        )

    def count4_neighbours(self, x: int, y: int) -> int:
        """Count set cells among the four orthogonal neighbours."""
        return self._sum(x, y, _FOUR_OFFSETS)

    def count8_neighbours(self, x: int, y: int) -> int:
        """Count set cells among all eight surrounding neighbours."""
        return self._sum(x, y, _FOUR_OFFSETS + _DIAGONAL_OFFSETS)

    def rows(self) -> tuple[tuple[int, ...], ...]:
        """Return the cells as a tuple of rows, top to bottom."""
        return tuple(tuple(row) for row in self._cells)

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[int]]) -> Grid:
        """Build a grid from rows of 0/1 values, top to bottom."""
        materialised = [list(row) for row in rows]
        if not materialised or not materialised[0]:
            raise ValueError("a grid needs at least one row and one column")
        width = len(materialised[0])
        if any(len(row) != width for row in materialised):
            raise ValueError("all rows must have the same length")
        grid = cls(width, len(materialised))
        grid._cells = [[_bit(value) for value in row] for row in materialised]
        return grid