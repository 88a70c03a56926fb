"""Command line entry point: generate a pattern, report regions, save a picture."""

from __future__ import annotations

import argparse
import random
from pathlib import Path

from PIL import Image

from .automata import Pattern, generate
from .components import ComponentCounts, count_components
from .grid import Grid

_PALETTE = [0, 0, 0, 255, 255, 255]


def to_image(grid: Grid, scale_height: int | None = None) -> Image.Image:
    """Render the grid as a black-and-white palette image scaled to a height.

    The default height is twice the grid height; width keeps the aspect ratio.
    """
    target = 2 * grid.height if scale_height is None else scale_height
    if target <= 0:
        raise ValueError(f"scale height must be positive, got {target}")
    image = Image.new("P", (grid.width, grid.height))
    image.putpalette(_PALETTE)
    image.putdata(list(grid))
    width = max(1, round(grid.width * target / grid.height))
    return image.resize((width, target), Image.Resampling.NEAREST)


def format_report(counts4: ComponentCounts, counts8: ComponentCounts) -> str:
    """Format white/black region counts for both connectivities."""
    return (
        f"4-Composantes Connexes : {counts4.white}/{counts4.black}\n"
        f"8-Composantes Connexes : {counts8.white}/{counts8.black}"
    )


def _positive(text: str) -> int:
    value = int(text)
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be positive: {text}")
    return value


def _pattern_name(pattern: Pattern) -> str:
    return pattern.name.lower().replace("_", "-")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="scarfgen",
        description="Generate a cellular-automaton pattern and count its regions.",
    )
    parser.add_argument("--width", type=_positive, default=128, help="columns")
    parser.add_argument("--height", type=_positive, default=32, help="rows")
    parser.add_argument(
        "--pattern",
        choices=[_pattern_name(p) for p in Pattern],
        default=_pattern_name(Pattern.ELEMENTARY),
    )
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    parser.add_argument("--output", type=Path, default=None, help="image file to write")
    args = parser.parse_args(argv)

    pattern = Pattern[args.pattern.upper().replace("-", "_")]
    grid = generate(pattern, args.width, args.height, random.Random(args.seed))

    print(args.width * args.height)
    print(format_report(count_components(grid, 4), count_components(grid, 8)))

    if args.output is not None:
        to_image(grid).save(args.output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())