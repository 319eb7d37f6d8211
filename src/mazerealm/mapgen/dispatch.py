# src/mazerealm/mapgen/dispatch.py
# One entry point per carving style; every style id maps to exactly one carver.

from ..config import DEFAULTS, GeneratorConfig
from ..grid import Grid
from ..rng import Mulberry32
from . import division, spanning, walkers
from .carve import XY, CarveFault, CarveOutcome, Mode


def _carve(mode: Mode, grid: Grid, rng: Mulberry32, start: XY, goal: XY, config: GeneratorConfig) -> None:
    walk_budget = config.max_walk_factor * grid.room_count() ** 2
    if mode in (Mode.BACKTRACKER, Mode.BACKTRACKER_SPARSE):
        walkers.carve_backtracker(grid, rng, start)
    elif mode is Mode.PRIM:
        spanning.carve_prim(grid, rng, start)
    elif mode is Mode.KRUSKAL:
        spanning.carve_kruskal(grid, rng)
    elif mode is Mode.HUNT_AND_KILL:
        walkers.carve_hunt_and_kill(grid, rng, start)
    elif mode is Mode.ALDOUS_BRODER:
        walkers.carve_aldous_broder(grid, rng, start, walk_budget)
    elif mode is Mode.WILSON:
        spanning.carve_wilson(grid, rng, start, walk_budget)
    elif mode is Mode.GROWING_TREE_LONG:
        walkers.carve_growing_tree(grid, rng, start, newest_bias=config.newest_bias)
    elif mode is Mode.GROWING_TREE_SHORT:
        walkers.carve_growing_tree(grid, rng, start)
    elif mode is Mode.RECURSIVE_DIVISION:
        division.carve_recursive_division(grid, rng, start, goal)
    else:
        raise CarveFault(f"no carver for mode {mode!r}")


def run_mode(
    mode: Mode,
    grid: Grid,
    rng: Mulberry32,
    start: XY,
    goal: XY,
    config: GeneratorConfig = DEFAULTS,
) -> CarveOutcome:
    """
    Carve `grid` in place with the given style. Faults raised while carving
    come back as a failed outcome instead of propagating; the grid is then in
    an unspecified partial state and must be reset before reuse.
    """
    try:
        _carve(mode, grid, rng, start, goal, config)
    except Exception as exc:
        return CarveOutcome(mode=mode, ok=False, error=exc)
    return CarveOutcome(mode=mode, ok=True)
