# Canonical cell codes (numeric encoding handed to renderers/minimaps)

PATH = 0
WALL = 1
START = 2
GOAL = 3

def is_walkable(cell: int) -> bool:
    # Start and goal are floor cells with a marker on them.
    return cell in (PATH, START, GOAL)
