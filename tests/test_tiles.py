from mazerealm.tiles import GOAL, PATH, START, WALL, is_walkable

def test_cell_codes():
    assert (PATH, WALL, START, GOAL) == (0, 1, 2, 3)

def test_walkable():
    assert is_walkable(PATH) and is_walkable(START) and is_walkable(GOAL)
    assert not is_walkable(WALL)
