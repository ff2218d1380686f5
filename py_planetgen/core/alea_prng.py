"""
Python implementation of the Alea PRNG used for all planet generation.

Based on Johannes Baagøe's Alea algorithm. Every generation stage draws
from its own AleaPRNG instance so results depend only on the seed string,
never on global interpreter state.
"""

import math
from typing import List, Sequence, TypeVar

import numpy as np

T = TypeVar("T")


def _uint32(n):
    """Convert to unsigned 32-bit integer."""
    return int(n) & 0xFFFFFFFF


def _mash_factory():
    mash_n = 0xEFC8249D  # 4022871197

    def mash(data):
        nonlocal mash_n
        data = str(data)
        for char in data:
            mash_n = mash_n + ord(char)
            h = 0.02519603282416938 * mash_n
            mash_n = _uint32(h)
            h -= mash_n
            h *= mash_n
            mash_n = _uint32(h)
            h -= mash_n
            mash_n += h * 0x100000000  # 2^32
        return _uint32(mash_n) * 2.3283064365386963e-10  # 2^-32

    return mash


class AleaPRNG:
    """
    Seedable Alea PRNG with the range helpers the generators need.

    Two instances built from the same seed produce identical sequences.
    """

    def __init__(self, seed):
        """Initialize with seed string or number."""
        self.seed = str(seed)

        mash = _mash_factory()

        self.s0 = mash(" ")
        self.s1 = mash(" ")
        self.s2 = mash(" ")
        self.c = 1

        self.s0 -= mash(self.seed)
        if self.s0 < 0:
            self.s0 += 1
        self.s1 -= mash(self.seed)
        if self.s1 < 0:
            self.s1 += 1
        self.s2 -= mash(self.seed)
        if self.s2 < 0:
            self.s2 += 1

    def random(self) -> float:
        """Generate next random number in [0, 1)."""
        t = 2091639 * self.s0 + self.c * 2.3283064365386963e-10  # 2^-32
        self.s0 = self.s1
        self.s1 = self.s2
        self.c = int(t)
        self.s2 = t - self.c
        return self.s2

    def random_range(self, min_val: float, max_val: float) -> float:
        """Uniform float in [min_val, max_val)."""
        return min_val + self.random() * (max_val - min_val)

    def randint(self, min_val: int, max_val: int) -> int:
        """Uniform integer in [min_val, max_val], both ends inclusive."""
        low = math.ceil(min_val)
        high = math.floor(max_val)
        if high < low:
            raise ValueError(f"Empty integer range [{min_val}, {max_val}]")
        return low + int(self.random() * (high - low + 1))

    def choice(self, seq: Sequence[T]) -> T:
        """Choose a random element from a non-empty sequence."""
        if not seq:
            raise IndexError("Cannot choose from an empty sequence")
        return seq[int(self.random() * len(seq))]

    def random_array(self, count: int, min_val: float = 0.0, max_val: float = 1.0) -> np.ndarray:
        """Draw ``count`` sequential uniform values as a float64 array."""
        values = np.fromiter((self.random() for _ in range(count)), dtype=np.float64, count=count)
        return min_val + values * (max_val - min_val)

    def seed_new(self, *tags) -> "AleaPRNG":
        """
        Derive an independent named substream.

        The substream is built from the initial seed and the tags only, so
        it is the same no matter how many values this instance has drawn.
        """
        parts: List[str] = [self.seed] + [str(tag) for tag in tags]
        return AleaPRNG("::".join(parts))
