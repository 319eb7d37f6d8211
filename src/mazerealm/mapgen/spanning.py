# src/mazerealm/mapgen/spanning.py
# Spanning-tree carvers: randomized Prim, Kruskal (union-find) and Wilson's
# loop-erased random walk.

from typing import Dict, List, Set, Tuple

from ..grid import Grid
from ..rng import Mulberry32
from .carve import DIRS, XY, CarveFault, Step, carve_step, room_steps


def carve_prim(grid: Grid, rng: Mulberry32, start: XY) -> None:
    grid.carve(*start)
    # Frontier entries: (candidate room x, y, between x, y) next to carved rooms
    frontier: List[Step] = room_steps(grid, *start)
    while frontier:
        step = frontier.pop(rng.int_below(len(frontier)))
        nx, ny, _, _ = step
        if grid.is_wall(nx, ny):
            carve_step(grid, step)
            frontier.extend(room_steps(grid, nx, ny))


class DisjointSet:
    def __init__(self, n: int):
        self.parent = list(range(n))

    def find(self, i: int) -> int:
        root = i
        while self.parent[root] != root:
            root = self.parent[root]
        # path compression
        while self.parent[i] != root:
            self.parent[i], i = root, self.parent[i]
        return root

    def union(self, a: int, b: int) -> bool:
        ra, rb = self.find(a), self.find(b)
        if ra == rb:
            return False
        self.parent[rb] = ra
        return True


def carve_kruskal(grid: Grid, rng: Mulberry32) -> None:
    """Every room starts as its own set; shuffled edges join sets by carving."""
    index: Dict[XY, int] = {}
    for room in grid.rooms():
        index[room] = len(index)
        grid.carve(*room)

    # (room a, room b, between x, between y) for right and down neighbours
    edges: List[Tuple[int, int, int, int]] = []
    for (x, y), i in index.items():
        if grid.in_interior(x + 2, y):
            edges.append((i, index[(x + 2, y)], x + 1, y))
        if grid.in_interior(x, y + 2):
            edges.append((i, index[(x, y + 2)], x, y + 1))

    sets = DisjointSet(len(index))
    rng.shuffle(edges)
    for a, b, bx, by in edges:
        if sets.union(a, b):
            grid.carve(bx, by)


def _loop_erased_walk(
    grid: Grid,
    rng: Mulberry32,
    origin: XY,
    in_tree: Set[XY],
    budget: int,
) -> Tuple[List[XY], int]:
    """
    Random walk from `origin` until it touches the tree. Revisiting a room
    cuts the walk back to that room's first occurrence, so the returned path
    is simple. Returns (path, steps used).
    """
    walk = [origin]
    seen = {origin: 0}
    used = 0
    while walk[-1] not in in_tree:
        used += 1
        if used > budget:
            raise CarveFault(f"wilson: walk from {origin} exhausted its step budget")
        x, y = walk[-1]
        dx, dy = rng.pick(DIRS)
        nxt = (x + dx, y + dy)
        if not grid.in_interior(*nxt):
            continue
        cut = seen.get(nxt)
        if cut is not None:
            for erased in walk[cut + 1:]:
                del seen[erased]
            del walk[cut + 1:]
        else:
            seen[nxt] = len(walk)
            walk.append(nxt)
    return walk, used


def carve_wilson(grid: Grid, rng: Mulberry32, start: XY, max_steps: int) -> None:
    grid.carve(*start)
    in_tree: Set[XY] = {start}
    pending = [room for room in grid.rooms() if room != start]
    where = {room: i for i, room in enumerate(pending)}

    def settle(room: XY) -> None:
        # swap-remove from the pending list
        i = where.pop(room)
        last = pending.pop()
        if last != room:
            pending[i] = last
            where[last] = i
        in_tree.add(room)

    budget = max_steps
    while pending:
        origin = pending[rng.int_below(len(pending))]
        path, used = _loop_erased_walk(grid, rng, origin, in_tree, budget)
        budget -= used
        grid.carve(*origin)
        for (ax, ay), (bx, by) in zip(path, path[1:]):
            grid.carve((ax + bx) // 2, (ay + by) // 2)
            grid.carve(bx, by)
        for room in path[:-1]:
            settle(room)
