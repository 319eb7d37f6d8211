# tests/mazecheck.py
# Structural checks shared by the generator/algorithm tests.

from collections import deque
from typing import List, Sequence, Set, Tuple

from mazerealm.tiles import WALL, is_walkable

XY = Tuple[int, int]

def border_is_wall(grid: Sequence[Sequence[int]]) -> bool:
    n = len(grid)
    for i in range(n):
        if WALL != grid[0][i] or WALL != grid[n-1][i] or WALL != grid[i][0] or WALL != grid[i][n-1]:
            return False
    return True

def room_links(grid: Sequence[Sequence[int]]) -> Tuple[List[XY], List[Tuple[XY, XY]]]:
    """Rooms (odd,odd) and the open between-cells joining right/down neighbours."""
    n = len(grid)
    rooms = [(x, y) for y in range(1, n-1, 2) for x in range(1, n-1, 2)]
    links = []
    for x, y in rooms:
        if x + 2 < n - 1 and is_walkable(grid[y][x+1]):
            links.append(((x, y), (x+2, y)))
        if y + 2 < n - 1 and is_walkable(grid[y+1][x]):
            links.append(((x, y), (x, y+2)))
    return rooms, links

def is_perfect_maze(grid: Sequence[Sequence[int]]) -> bool:
    n = len(grid)
    rooms, links = room_links(grid)
    if not all(is_walkable(grid[y][x]) for x, y in rooms):
        return False
    # pillars between four rooms never open
    for y in range(2, n-1, 2):
        for x in range(2, n-1, 2):
            if is_walkable(grid[y][x]):
                return False
    if len(links) != len(rooms) - 1:
        return False
    adj = {r: [] for r in rooms}
    for a, b in links:
        adj[a].append(b)
        adj[b].append(a)
    seen = {rooms[0]}
    todo = deque([rooms[0]])
    while todo:
        cur = todo.popleft()
        for nxt in adj[cur]:
            if nxt not in seen:
                seen.add(nxt)
                todo.append(nxt)
    return len(seen) == len(rooms)

def reachable(grid: Sequence[Sequence[int]], start: XY) -> Set[XY]:
    n = len(grid)
    seen = {start}
    todo = deque([start])
    while todo:
        x, y = todo.popleft()
        for dx, dy in ((1,0),(-1,0),(0,1),(0,-1)):
            nx, ny = x+dx, y+dy
            if 0 <= nx < n and 0 <= ny < n and (nx, ny) not in seen and is_walkable(grid[ny][nx]):
                seen.add((nx, ny))
                todo.append((nx, ny))
    return seen

def walkable_cells(grid: Sequence[Sequence[int]]) -> Set[XY]:
    return {(x, y) for y, row in enumerate(grid) for x, c in enumerate(row) if is_walkable(c)}
