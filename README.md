# scarfgen

scarfgen grows two-colour patterns on a wrap-around grid, the kind you could
knit into a scarf. It has six generators. Two are built on one-dimensional
elementary automata. Four are built on two-dimensional growth and erosion
rules. For each pattern it counts the black and white regions under 4- and
8-connectivity. It can also save the pattern as a black-and-white image.

Every grid wraps at its edges, horizontally and vertically. Cells hold 0
(black) or 1 (white).

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
scarfgen [--width N] [--height N] [--pattern NAME] [--seed N] [--output FILE]
```

- `--width`: number of columns, default 128.
- `--height`: number of rows, default 32.
- `--pattern`: one of `elementary`, `mixed-elementary`, `sparse-growth`,
  `dense-growth`, `erosion`, `maze-growth`. The default is `elementary`.
- `--seed`: a seed for the random generator, so that a run can be repeated.
- `--output`: an image file to write. The image is scaled to twice the grid
  height and keeps its aspect ratio.

The command prints the number of cells, width times height. It then prints
the region counts in this form:

```
4-Composantes Connexes : <white>/<black>
8-Composantes Connexes : <white>/<black>
```

## Library use

```python
import random

from scarfgen.grid import Grid
from scarfgen.automata import elementary
from scarfgen.components import count_components
from scarfgen.cli import format_report, to_image

rng = random.Random(42)

grid = Grid(120, 40, 0)   # 120 columns, 40 rows
elementary(grid, rng)     # random first column, then one random rule

counts4 = count_components(grid, 4)
counts8 = count_components(grid, 8)
print(format_report(counts4, counts8))

to_image(grid, 80).save("scarf.png")
```

`Grid` is indexed as `grid[x, y]`. It iterates over its cells row by row. It
also offers `fill`, `wrap`, `count4_neighbours`, `count8_neighbours`, `rows`
and `Grid.from_rows`.

`generate(pattern, width, height, rng)` in `scarfgen.automata` builds a new
grid for any member of `Pattern` in one call. The generators can also be
called one at a time on a grid you already have:

- `elementary`: a random first column, then one elementary rule, chosen at
  random, for every later column.
- `mixed_elementary`: two random rules, picked cell by cell with a random
  bias.
- `sparse_growth` and `dense_growth`: start from a random first column on a
  black field. White spreads into black cells that have exactly one white
  neighbour among the eight around them (sparse), or one to three white
  neighbours (dense).
- `erosion`: start from a random first column on a white field. Crowded
  white cells turn black.
- `maze_growth`: thin corridors that grow out from the centre cell.

`apply_rule(a, b, c, rule)` gives the next state of a cell for an elementary
rule number. `seed_first_column(grid, rng)` fills column 0 at random.

`label_components(grid, connectivity)` gives the region label of every cell,
in row-major order. `count_components(grid, connectivity)` returns a
`ComponentCounts` that holds the number of `black` regions and the number of
`white` regions. `connectivity` is 4 or 8. Any other value raises
`ValueError`.

## What it does not do

scarfgen has no interactive window. Patterns are chosen and viewed through
the command line or the library. To see a pattern, save it with `--output`
or `to_image`.