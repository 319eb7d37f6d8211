# src/mazerealm/mapgen/division.py
# Recursive division: open the interior, then split it with walls that each
# keep a single doorway.

from ..grid import Grid
from ..rng import Mulberry32
from ..tiles import WALL
from .carve import XY


def _divide(grid: Grid, rng: Mulberry32, x1: int, y1: int, x2: int, y2: int) -> None:
    """
    Split the chamber spanning rooms (x1, y1)..(x2, y2), all odd coordinates.
    Walls go on an even line, doorways on an odd one.
    """
    w = (x2 - x1) // 2 + 1
    h = (y2 - y1) // 2 + 1
    if w < 2 or h < 2:
        return
    if w > h:
        vertical = True
    elif w < h:
        vertical = False
    else:
        vertical = rng.next() > 0.5

    if vertical:
        wx = x1 + 1 + 2 * rng.int_below(w - 1)
        for y in range(y1, y2 + 1):
            grid.set(wx, y, WALL)
        grid.carve(wx, y1 + 2 * rng.int_below(h))
        _divide(grid, rng, x1, y1, wx - 1, y2)
        _divide(grid, rng, wx + 1, y1, x2, y2)
    else:
        wy = y1 + 1 + 2 * rng.int_below(h - 1)
        for x in range(x1, x2 + 1):
            grid.set(x, wy, WALL)
        grid.carve(x1 + 2 * rng.int_below(w), wy)
        _divide(grid, rng, x1, y1, x2, wy - 1)
        _divide(grid, rng, x1, wy + 1, x2, y2)


def carve_recursive_division(grid: Grid, rng: Mulberry32, start: XY, goal: XY) -> None:
    grid.open_interior()
    last = grid.size - 2
    _divide(grid, rng, 1, 1, last, last)
    # A partition may not run through either marker cell.
    grid.carve(*start)
    grid.carve(*goal)
