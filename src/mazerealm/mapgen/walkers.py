# src/mazerealm/mapgen/walkers.py
# Walk-based carvers: depth-first backtracker, growing tree, hunt-and-kill,
# Aldous-Broder. Each one grows a single tree of rooms out from `start`.

from typing import List, Optional

from ..grid import Grid
from ..rng import Mulberry32
from ..tiles import PATH
from .carve import DIRS, XY, CarveFault, carve_step, room_steps


def carve_backtracker(grid: Grid, rng: Mulberry32, start: XY) -> None:
    """Explicit-stack depth-first search; long winding corridors."""
    grid.carve(*start)
    stack: List[XY] = [start]
    while stack:
        x, y = stack[-1]
        steps = room_steps(grid, x, y, rng.shuffle(list(DIRS)))
        if not steps:
            stack.pop()
            continue
        stack.append(carve_step(grid, rng.pick(steps)))


def carve_growing_tree(
    grid: Grid,
    rng: Mulberry32,
    start: XY,
    newest_bias: Optional[float] = None,
) -> None:
    """
    Growing tree over an active list of rooms.
      - newest_bias=None: always extend a uniformly random active room
        (bushy, many short dead ends).
      - newest_bias=p: with probability p extend the newest active room,
        otherwise a random one (longer corridors).
    A room leaves the list once it has no uncarved neighbour.
    """
    grid.carve(*start)
    active: List[XY] = [start]
    while active:
        if newest_bias is not None and rng.next() < newest_bias:
            idx = len(active) - 1
        else:
            idx = rng.int_below(len(active))
        x, y = active[idx]
        steps = room_steps(grid, x, y, rng.shuffle(list(DIRS)))
        if not steps:
            active.pop(idx)
            continue
        active.append(carve_step(grid, rng.pick(steps)))


def _hunt(grid: Grid, rng: Mulberry32) -> Optional[XY]:
    # First uncarved room (row-major) touching the carved region; link it in.
    for rx, ry in grid.rooms():
        if not grid.is_wall(rx, ry):
            continue
        links = room_steps(grid, rx, ry, want=PATH)
        if links:
            _, _, bx, by = rng.pick(links)
            grid.carve(bx, by)
            grid.carve(rx, ry)
            return (rx, ry)
    return None


def carve_hunt_and_kill(grid: Grid, rng: Mulberry32, start: XY) -> None:
    x, y = start
    grid.carve(x, y)
    while True:
        steps = room_steps(grid, x, y)
        if steps:
            x, y = carve_step(grid, rng.pick(steps))
            continue
        found = _hunt(grid, rng)
        if found is None:
            break
        x, y = found


def carve_aldous_broder(grid: Grid, rng: Mulberry32, start: XY, max_steps: int) -> None:
    """
    Unrestricted random walk over rooms; entering an uncarved room carves the
    wall it came through. Stops once every room on the lattice is carved.
    """
    x, y = start
    grid.carve(x, y)
    visited = 1
    total = grid.room_count()
    walked = 0
    while visited < total:
        walked += 1
        if walked > max_steps:
            raise CarveFault(f"aldous-broder: {visited}/{total} rooms after {max_steps} steps")
        dx, dy = rng.pick(DIRS)
        nx, ny = x + dx, y + dy
        if not grid.in_interior(nx, ny):
            continue
        if grid.is_wall(nx, ny):
            grid.carve(x + dx // 2, y + dy // 2)
            grid.carve(nx, ny)
            visited += 1
        x, y = nx, ny
