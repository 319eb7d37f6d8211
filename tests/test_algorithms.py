# tests/test_algorithms.py
from mazerealm.config import GeneratorConfig
from mazerealm.grid import Grid
from mazerealm.mapgen.carve import CarveFault, Mode
from mazerealm.mapgen.dispatch import run_mode
from mazerealm.mapgen.spanning import DisjointSet
from mazerealm.rng import Mulberry32

from mazecheck import is_perfect_maze, reachable, walkable_cells

PERFECT_MODES = [m for m in Mode if m is not Mode.RECURSIVE_DIVISION]

def carve(mode, size=25, seed=1, config=GeneratorConfig()):
    g = Grid.filled(size)
    start, goal = (1, 1), (size - 2, size - 2)
    g.carve(*start)
    outcome = run_mode(mode, g, Mulberry32(seed), start, goal, config)
    return g, outcome

def test_every_tree_mode_carves_a_perfect_maze():
    for mode in PERFECT_MODES:
        for size, seed in ((25, 1), (25, 2024), (31, 77)):
            g, outcome = carve(mode, size, seed)
            assert outcome.ok, f"{mode.value} faulted: {outcome.error}"
            assert is_perfect_maze(g.buf), f"{mode.value} size {size} seed {seed}"

def test_smallest_grid_is_still_perfect():
    for mode in PERFECT_MODES:
        g, outcome = carve(mode, size=7, seed=3)
        assert outcome.ok and is_perfect_maze(g.buf), mode.value

def test_recursive_division_keeps_every_chamber_reachable():
    for seed in (1, 9, 123):
        g, outcome = carve(Mode.RECURSIVE_DIVISION, 25, seed)
        assert outcome.ok
        assert g.get(1, 1) == 0 and g.get(23, 23) == 0
        assert reachable(g.buf, (1, 1)) == walkable_cells(g.buf)
        # partitions were actually inserted
        assert any(g.is_wall(x, y) for y in range(1, 24) for x in range(1, 24))

def test_same_rng_same_carving():
    for mode in Mode:
        a, _ = carve(mode, 27, 555)
        b, _ = carve(mode, 27, 555)
        assert a.buf == b.buf, mode.value

def test_growing_tree_bias_changes_layout():
    long_g, _ = carve(Mode.GROWING_TREE_LONG, 31, 8)
    short_g, _ = carve(Mode.GROWING_TREE_SHORT, 31, 8)
    assert long_g.buf != short_g.buf

def test_walk_budget_exhaustion_is_a_failed_outcome():
    starved = GeneratorConfig(max_walk_factor=0)
    for mode in (Mode.ALDOUS_BRODER, Mode.WILSON):
        _, outcome = carve(mode, 25, 4, config=starved)
        assert not outcome.ok
        assert isinstance(outcome.error, CarveFault)
        assert outcome.mode is mode

def test_disjoint_set():
    ds = DisjointSet(5)
    assert ds.union(0, 1)
    assert ds.union(1, 2)
    assert not ds.union(0, 2)
    assert ds.find(2) == ds.find(0)
    assert ds.find(3) != ds.find(0)
