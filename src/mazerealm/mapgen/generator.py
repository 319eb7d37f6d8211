# src/mazerealm/mapgen/generator.py
# Level generator: (realm, level, seed) -> LevelDescriptor, deterministic and total.

import logging
from typing import Any, Mapping, Optional

from ..config import DEFAULTS, GeneratorConfig
from ..grid import Grid
from ..level import LevelDescriptor
from ..progression import grid_size_for, mode_for_realm, total_level_index
from ..rng import resolve_seed, rng_for_level
from ..tiles import GOAL, START
from .carve import Mode
from .dispatch import run_mode

logger = logging.getLogger(__name__)


def _coerce_index(value: Any) -> int:
    # Realm/level numbers: anything int() accepts, floored at 1; junk -> 1.
    try:
        n = int(value)
    except (TypeError, ValueError, OverflowError):
        return 1
    return max(1, n)


def generate_level(
    realm: Any = 1,
    level: Any = 1,
    seed: Any = None,
    config: GeneratorConfig = DEFAULTS,
) -> LevelDescriptor:
    """
    Build one level. Same (realm, level, seed) always gives the same grid.

    Steps:
      1) totalLevel = clamp((realm-1)*10 + level, 1, 100) -> odd side N
      2) seed resolved to signed 32 bits, mixed with realm/level for the RNG
      3) N x N all-wall grid carved by the realm's style; a faulting style is
         discarded and the configured fallback reruns on a fresh grid, with
         the backtracker as the last resort
      4) border forced to wall, start (1,1) and goal (N-2,N-2) stamped
    """
    if not isinstance(config, GeneratorConfig):
        config = DEFAULTS
    realm = _coerce_index(realm)
    level = _coerce_index(level)
    total = total_level_index(realm, level)
    size = grid_size_for(total)
    resolved = resolve_seed(seed)
    mode = mode_for_realm(realm)
    rng = rng_for_level(resolved, realm, level)

    grid = Grid.filled(size)
    start = (1, 1)
    goal = (size - 2, size - 2)
    grid.carve(*start)

    logger.debug(
        "generating realm %d level %d (total %d): %dx%d %s seed=%d",
        realm, level, total, size, size, mode.value, resolved,
    )

    outcome = run_mode(mode, grid, rng, start, goal, config)
    fallback_error = None
    if not outcome.ok:
        fallback_error = f"{type(outcome.error).__name__}: {outcome.error}"
        logger.warning(
            "%s failed for realm %d level %d (%s); regenerating with %s",
            mode.value, realm, level, fallback_error, config.fallback_mode.value,
        )
        fallbacks = [config.fallback_mode]
        if config.fallback_mode is not Mode.BACKTRACKER:
            fallbacks.append(Mode.BACKTRACKER)
        for fallback in fallbacks:
            grid.reset()
            grid.carve(*start)
            retry = run_mode(fallback, grid, rng, start, goal, config)
            if retry.ok:
                break
            logger.warning("fallback %s failed too: %r", fallback.value, retry.error)
        else:
            # the backtracker itself is broken
            raise retry.error

    grid.seal_border()
    grid.set(*start, START)
    grid.set(*goal, GOAL)

    return LevelDescriptor(
        grid=tuple(tuple(row) for row in grid.buf),
        width=size,
        height=size,
        start=start,
        goal=goal,
        total_level=total,
        realm=realm,
        level=level,
        seed=resolved,
        mode=mode.value,
        fallback_used=not outcome.ok,
        fallback_error=fallback_error,
    )


def generate(options: Optional[Mapping[str, Any]] = None, **overrides: Any) -> LevelDescriptor:
    """
    Options-mapping front door: {"realm": 1, "level": 1, "seed": <now>} with
    missing keys defaulted. Keyword overrides win over the mapping.
    """
    opts = dict(options or {})
    opts.update(overrides)
    return generate_level(
        realm=opts.get("realm", 1),
        level=opts.get("level", 1),
        seed=opts.get("seed"),
        config=opts.get("config", DEFAULTS),
    )
