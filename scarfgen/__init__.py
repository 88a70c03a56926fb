"""Cellular-automaton scarf patterns on a wrap-around grid, with region counts and image output."""

__version__ = "0.1.0"
__all__ = ["automata", "cli", "components", "grid"]