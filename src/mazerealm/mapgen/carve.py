# src/mazerealm/mapgen/carve.py
# Shared vocabulary for the carving algorithms: style ids, room steps, faults.

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from ..grid import Grid
from ..tiles import WALL

XY = Tuple[int, int]
# (room x, room y, between x, between y)
Step = Tuple[int, int, int, int]


# Declaration order is the realm rotation (realm 1 first)
class Mode(str, Enum):
    BACKTRACKER = "backtracker"
    PRIM = "prim"
    KRUSKAL = "kruskal"
    HUNT_AND_KILL = "huntandkill"
    ALDOUS_BRODER = "aldousbroder"
    WILSON = "wilson"
    GROWING_TREE_LONG = "growingtree_longrooms"
    GROWING_TREE_SHORT = "growingtree_short"
    RECURSIVE_DIVISION = "recursive_division"
    BACKTRACKER_SPARSE = "backtracker_sparse"


# Room-to-room moves: up, right, down, left
DIRS: Tuple[XY, ...] = ((0, -2), (2, 0), (0, 2), (-2, 0))


class CarveFault(RuntimeError):
    """An algorithm could not finish carving its grid."""


@dataclass(frozen=True)
class CarveOutcome:
    mode: Mode
    ok: bool
    error: Optional[BaseException] = None


def room_steps(grid: Grid, x: int, y: int, dirs=DIRS, want: int = WALL) -> List[Step]:
    """
    Rooms two cells away from (x, y) inside the interior whose cell equals
    `want` (WALL = not carved yet), with the between cell for each.
    """
    out = []
    for dx, dy in dirs:
        nx, ny = x + dx, y + dy
        if grid.in_interior(nx, ny) and grid.get(nx, ny) == want:
            out.append((nx, ny, x + dx // 2, y + dy // 2))
    return out


def carve_step(grid: Grid, step: Step) -> XY:
    nx, ny, bx, by = step
    grid.carve(bx, by)
    grid.carve(nx, ny)
    return (nx, ny)
