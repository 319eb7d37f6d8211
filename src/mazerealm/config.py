from dataclasses import dataclass

from .mapgen.carve import Mode

@dataclass(frozen=True)
class GeneratorConfig:
    # Growing-tree (long rooms): chance of extending the newest active room.
    newest_bias: float = 0.85
    # Style rerun from scratch when the requested one faults.
    fallback_mode: Mode = Mode.BACKTRACKER
    # Random walks (Aldous-Broder, Wilson) give up after factor * rooms**2 steps.
    max_walk_factor: int = 4

    def __post_init__(self) -> None:
        # accept the plain style id as well as the enum member
        object.__setattr__(self, "fallback_mode", Mode(self.fallback_mode))

# Global defaults (can be swapped by launcher)
DEFAULTS = GeneratorConfig()
