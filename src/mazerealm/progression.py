# src/mazerealm/progression.py
# Size/algorithm progression: 100 linear levels, 10 realms of 10 levels.

from typing import Tuple

from .mapgen.carve import Mode

LEVELS_PER_REALM = 10
TOTAL_LEVELS = 100

# Grid side for totalLevelIndex 1..100 (+2 every three levels)
SIZES: Tuple[int, ...] = (
    25, 25, 25, 27, 27, 27, 29, 29, 29, 31,
    31, 31, 33, 33, 33, 35, 35, 35, 37, 37,
    37, 39, 39, 39, 41, 41, 41, 43, 43, 43,
    45, 45, 45, 47, 47, 47, 49, 49, 49, 51,
    51, 51, 53, 53, 53, 55, 55, 55, 57, 57,
    57, 59, 59, 59, 61, 61, 61, 63, 63, 63,
    65, 65, 65, 67, 67, 67, 69, 69, 69, 71,
    71, 71, 73, 73, 73, 75, 75, 75, 77, 77,
    77, 79, 79, 79, 81, 81, 81, 83, 83, 83,
    85, 85, 85, 87, 87, 87, 89, 89, 89, 91,
)

# One carving style per realm, rotating every 10 realms
MODES: Tuple[Mode, ...] = tuple(Mode)


def total_level_index(realm: int, level: int) -> int:
    total = (realm - 1) * LEVELS_PER_REALM + level
    return max(1, min(TOTAL_LEVELS, total))


def size_for_total(total: int) -> int:
    if not (1 <= total <= TOTAL_LEVELS):
        raise ValueError(f"total level must be 1..{TOTAL_LEVELS}, got {total}")
    return SIZES[total - 1]


def grid_size_for(total: int) -> int:
    """Table size rounded up to odd so rooms sit on odd coordinates."""
    size = size_for_total(total)
    return size if size % 2 == 1 else size + 1


def mode_for_realm(realm: int) -> Mode:
    # Level never influences the style, only size and seed.
    return MODES[(realm - 1) % len(MODES)]
