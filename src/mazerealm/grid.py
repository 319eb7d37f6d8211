from dataclasses import dataclass
from typing import Iterator, List, Tuple

from .tiles import PATH, WALL

XY = Tuple[int, int]

@dataclass
class Grid:
    """
    Square N x N cell buffer addressed (x, y); rows are stored as buf[y][x].
    Rooms live on odd-odd coordinates, cells between two rooms on the
    even coordinate separating them.
    """
    size: int
    buf: List[List[int]]

    @classmethod
    def filled(cls, size: int, cell: int = WALL) -> "Grid":
        if size < 3 or size % 2 == 0:
            raise ValueError(f"grid size must be odd and >= 3, got {size}")
        return cls(size=size, buf=[[cell] * size for _ in range(size)])

    def get(self, x: int, y: int) -> int:
        return self.buf[y][x]

    def set(self, x: int, y: int, v: int) -> None:
        self.buf[y][x] = v

    def carve(self, x: int, y: int) -> None:
        self.buf[y][x] = PATH

    def is_wall(self, x: int, y: int) -> bool:
        return self.buf[y][x] == WALL

    def in_interior(self, x: int, y: int) -> bool:
        return 0 < x < self.size - 1 and 0 < y < self.size - 1

    def rooms(self) -> Iterator[XY]:
        # Row-major, like the hunt scan
        for y in range(1, self.size - 1, 2):
            for x in range(1, self.size - 1, 2):
                yield (x, y)

    def room_count(self) -> int:
        per_axis = (self.size - 1) // 2
        return per_axis * per_axis

    def reset(self, cell: int = WALL) -> None:
        for row in self.buf:
            for x in range(self.size):
                row[x] = cell

    def open_interior(self) -> None:
        for y in range(1, self.size - 1):
            row = self.buf[y]
            for x in range(1, self.size - 1):
                row[x] = PATH

    def seal_border(self) -> None:
        last = self.size - 1
        for i in range(self.size):
            self.buf[0][i] = WALL
            self.buf[last][i] = WALL
            self.buf[i][0] = WALL
            self.buf[i][last] = WALL
