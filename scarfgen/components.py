"""Counting connected regions of a toroidal binary grid."""

from __future__ import annotations

from dataclasses import dataclass

from .grid import Grid

_FOUR = ((1, 0), (-1, 0), (0, 1), (0, -1))
_EIGHT = _FOUR + ((1, 1), (-1, 1), (1, -1), (-1, -1))


@dataclass(frozen=True)
class ComponentCounts:
    """Number of distinct region labels among black (0) and white (1) cells."""

    black: int
    white: int


def _offsets(connectivity: int):
    if connectivity == 4:
        return _FOUR
    if connectivity == 8:
        return _EIGHT
    raise ValueError(f"connectivity must be 4 or 8, got {connectivity!r}")


def label_components(grid: Grid, connectivity: int = 4) -> list[int]:
    """Label each cell, in row-major order, by propagating labels forward.

    A label moves from a cell to a same-coloured neighbour with a higher
    position until nothing changes; every label is the position of a cell
    of the same colour at or before the labelled one.
    """
    offsets = _offsets(connectivity)
    width, height = grid.width, grid.height
    cells = list(grid)
    labels = list(range(len(cells)))
    pending = list(labels)
    while pending:
        updated = []
        for index in pending:
            y, x = divmod(index, width)
            for dx, dy in offsets:
                other = (x + dx) % width + ((y + dy) % height) * width
                if (
                    labels[index] != labels[other]
                    and cells[index] == cells[other]
                    and index < other
                ):
                    labels[other] = labels[index]
                    updated.append(other)
        pending = updated
    return labels


def count_components(grid: Grid, connectivity: int = 4) -> ComponentCounts:
    """Count the distinct labels found among black and among white cells."""
    labels = label_components(grid, connectivity)
    black: set[int] = set()
    white: set[int] = set()
    for label, cell in zip(labels, grid):
        (white if cell else black).add(label)
    return ComponentCounts(black=len(black), white=len(white))