import pytest

from scarfgen.grid import Grid


def test_new_grid_is_filled_with_value():
    grid = Grid(4, 3, 1)
    assert list(grid) == [1] * 12
    assert len(grid) == 12
    assert (grid.width, grid.height) == (4, 3)


def test_iteration_is_row_major():
    grid = Grid.from_rows([[0, 1, 1], [1, 0, 0]])
    assert list(grid) == [0, 1, 1, 1, 0, 0]


def test_set_and_get_round_trip():
    grid = Grid(5, 4)
    grid[3, 2] = 1
    assert grid[3, 2] == 1
    assert sum(grid) == 1
    assert grid.rows()[2][3] == 1


@pytest.mark.parametrize("point", [(5, 0), (0, 4), (-1, 0), (0, -1)])
def test_out_of_range_access_raises(point):
    grid = Grid(5, 4)
    with pytest.raises(IndexError):
        grid[point]
    with pytest.raises(IndexError):
        grid[point] = 1
    assert list(grid) == [0] * 20


@pytest.mark.parametrize("value", [2, -1])
def test_invalid_cell_value_raises(value):
    grid = Grid(2, 2)
    with pytest.raises(ValueError):
        grid[0, 0] = value
    with pytest.raises(ValueError):
        grid.fill(value)


@pytest.mark.parametrize("size", [(0, 3), (3, 0), (-2, 2)])
def test_invalid_size_raises(size):
    with pytest.raises(ValueError):
        Grid(*size)


def test_fill_replaces_every_cell():
    grid = Grid.from_rows([[0, 1], [1, 0]])
    grid.fill(1)
    assert grid == Grid(2, 2, 1)
    grid.fill(0)
    assert grid == Grid(2, 2, 0)


def test_wrap_crosses_edges():
    grid = Grid(5, 4)
    assert grid.wrap(-1, 4) == (4, 0)
    assert grid.wrap(5, -1) == (0, 3)
    assert grid.wrap(2, 1) == (2, 1)


def test_neighbour_counts_wrap_around():
    grid = Grid.from_rows([[0, 0, 0], [0, 1, 0], [0, 0, 0]])
    assert grid.count8_neighbours(0, 0) == 1
    assert grid.count4_neighbours(0, 0) == 0
    assert grid.count4_neighbours(1, 0) == 1
    assert grid.count4_neighbours(1, 1) == 0


def test_full_grid_counts_every_neighbour():
    grid = Grid(3, 3, 1)
    assert grid.count4_neighbours(0, 0) == 4
    assert grid.count8_neighbours(2, 2) == 8


def test_rows_from_rows_round_trip():
    rows = ((1, 0, 1, 1), (0, 0, 1, 0))
    grid = Grid.from_rows(rows)
    assert grid.rows() == rows
    assert Grid.from_rows(grid.rows()) == grid


def test_from_rows_rejects_bad_shapes():
    with pytest.raises(ValueError):
        Grid.from_rows([[0, 1], [1]])
    with pytest.raises(ValueError):
        Grid.from_rows([])
    with pytest.raises(ValueError):
        Grid.from_rows([[0, 3]])