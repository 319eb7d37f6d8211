import pytest

from mazerealm.grid import Grid
from mazerealm.tiles import PATH, WALL

def test_filled_rejects_even_or_tiny():
    for bad in (1, 2, 24):
        with pytest.raises(ValueError):
            Grid.filled(bad)

def test_rooms_on_odd_lattice():
    g = Grid.filled(25)
    rooms = list(g.rooms())
    assert len(rooms) == g.room_count() == 144
    assert all(x % 2 == 1 and y % 2 == 1 for x, y in rooms)
    assert rooms[0] == (1, 1) and rooms[-1] == (23, 23)

def test_open_interior_then_seal():
    g = Grid.filled(7)
    g.open_interior()
    assert g.get(1, 1) == PATH and g.get(5, 5) == PATH
    g.buf[0][3] = PATH
    g.seal_border()
    assert g.get(3, 0) == WALL
    assert g.in_interior(1, 1) and not g.in_interior(0, 3) and not g.in_interior(6, 3)

def test_reset_refills_every_cell():
    g = Grid.filled(5)
    g.carve(1, 1)
    assert g.get(1, 1) == PATH
    g.reset()
    assert g.is_wall(1, 1)
    assert all(c == WALL for row in g.buf for c in row)
