"""
Randomness source for palette generation.
Callers may pass any random.Random-compatible object; seeded instances make
generation reproducible, the default draws from the OS entropy pool.
"""
import random
import secrets
from typing import Any


def make_rng(seed: int | None = None) -> random.Random:
    """Seeded random.Random when seed is given, otherwise SystemRandom."""
    if seed is None:
        return secrets.SystemRandom()
    return random.Random(seed)


_default_rng: random.Random | None = None


def default_rng() -> random.Random:
    """Process-wide source used when no rng is passed in."""
    global _default_rng
    if _default_rng is None:
        _default_rng = make_rng()
    return _default_rng


def random_in_range(rng: Any, lo: int, hi: int) -> int:
    """Uniform integer in [lo, hi] (both inclusive)."""
    return rng.randint(lo, hi)
