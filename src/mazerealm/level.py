# src/mazerealm/level.py
# Immutable result of one generate call, as handed to world assembly/minimap.

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from .tiles import is_walkable

XY = Tuple[int, int]


@dataclass(frozen=True)
class LevelDescriptor:
    grid: Tuple[Tuple[int, ...], ...]   # grid[y][x]: 0 path, 1 wall, 2 start, 3 goal
    width: int
    height: int
    start: XY
    goal: XY
    total_level: int
    realm: int
    level: int
    seed: int                           # resolved signed 32-bit seed
    mode: str                           # requested style id, even after a fallback
    fallback_used: bool = False
    fallback_error: Optional[str] = None

    def cell(self, x: int, y: int) -> int:
        return self.grid[y][x]

    def is_walkable(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height and is_walkable(self.grid[y][x])

    def walkable_mask(self) -> List[List[bool]]:
        return [[is_walkable(c) for c in row] for row in self.grid]

    def to_dict(self) -> Dict[str, Any]:
        """JSON-ready record using the field names downstream renderers expect."""
        return {
            "grid": [list(row) for row in self.grid],
            "width": self.width,
            "height": self.height,
            "start": {"x": self.start[0], "y": self.start[1]},
            "goal": {"x": self.goal[0], "y": self.goal[1]},
            "totalLevel": self.total_level,
            "realm": self.realm,
            "level": self.level,
            "seed": self.seed,
            "mode": self.mode,
        }
