# src/mazerealm/rng.py
# Mulberry32 seeded RNG plus the seed folding used by the level generator.

import math
import time
from dataclasses import dataclass
from typing import Any, MutableSequence, Sequence, TypeVar

T = TypeVar("T")

M32 = 0xFFFFFFFF
GOLDEN_STEP = 0x6D2B79F5
TWO_32 = 4294967296.0

# Realm/level multipliers mixed into the RNG seed
REALM_PRIME = 15485863
LEVEL_PRIME = 32452843


def imul(a: int, b: int) -> int:
    """32-bit wrapping multiply; result is unsigned."""
    return ((a & M32) * (b & M32)) & M32


def to_int32(v: int) -> int:
    v &= M32
    return v - 0x100000000 if (v & 0x80000000) else v


@dataclass
class Mulberry32:
    state: int

    def __post_init__(self) -> None:
        self.state &= M32

    def next(self) -> float:
        """Uniform float in [0, 1)."""
        self.state = (self.state + GOLDEN_STEP) & M32
        t = self.state
        t = imul(t ^ (t >> 15), t | 1)
        t ^= (t + imul(t ^ (t >> 7), t | 61)) & M32
        return ((t ^ (t >> 14)) & M32) / TWO_32

    def int_below(self, n: int) -> int:
        if n <= 0:
            raise ValueError("int_below needs n > 0")
        return int(self.next() * n)

    def pick(self, seq: Sequence[T]) -> T:
        if not seq:
            raise IndexError("pick from empty sequence")
        return seq[self.int_below(len(seq))]

    def shuffle(self, seq: MutableSequence[T]) -> MutableSequence[T]:
        # Fisher-Yates from the tail, in place
        for i in range(len(seq) - 1, 0, -1):
            j = int(self.next() * (i + 1))
            seq[i], seq[j] = seq[j], seq[i]
        return seq


def fold_string_seed(text: str) -> int:
    """
    Fold a string into a signed 32-bit seed: h = int32(h*31 + unit) over
    the UTF-16 code units of `text`.
    """
    data = text.encode("utf-16-le", "surrogatepass")
    h = 0
    for i in range(0, len(data), 2):
        unit = data[i] | (data[i + 1] << 8)
        h = to_int32(h * 31 + unit)
    return h


def wall_clock_seed() -> int:
    return to_int32(int(time.time() * 1000))


def resolve_seed(seed: Any) -> int:
    """
    Canonical signed 32-bit seed:
      - int/bool: reduced mod 2**32
      - float: truncated toward zero (NaN/inf -> 0)
      - str: folded with fold_string_seed
      - None: wall-clock milliseconds
      - anything else: 0
    """
    if seed is None:
        return wall_clock_seed()
    if isinstance(seed, int):
        return to_int32(seed)
    if isinstance(seed, float):
        if not math.isfinite(seed):
            return 0
        return to_int32(int(seed))
    if isinstance(seed, str):
        return fold_string_seed(seed)
    return 0


def derive_rng_seed(resolved: int, realm: int, level: int) -> int:
    return (resolved ^ (realm * REALM_PRIME) ^ (level * LEVEL_PRIME)) & M32


def rng_for_level(resolved: int, realm: int, level: int) -> Mulberry32:
    return Mulberry32(derive_rng_seed(resolved, realm, level))

