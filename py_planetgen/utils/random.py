"""
Seed derivation utilities.

A body is generated from a single root seed. Each pipeline stage draws
from its own named sub-seed so that adding or reordering draws in one stage
never perturbs another. Python's random and NumPy's random are not used;
all sequential randomness comes from AleaPRNG and all per-cell randomness
from the coordinate hash below.
"""

import hashlib
from dataclasses import dataclass, fields
from typing import Dict, Union

import numpy as np

from ..core.alea_prng import AleaPRNG

_MASK32 = 0xFFFFFFFF
_C1 = 0xCC9E2D51
_C2 = 0x1B873593


def derive_seed(root: Union[str, int], purpose: str) -> str:
    """
    Derive a purpose-specific seed string from a root seed.

    Args:
        root: Root seed of the body
        purpose: Name of the stage the seed is for

    Returns:
        Hex digest string, stable across runs and platforms
    """
    digest = hashlib.sha256(f"{root}|{purpose}".encode("utf-8")).hexdigest()
    return digest[:16]


def seed_to_int(seed: Union[str, int]) -> int:
    """Fold a seed string into an unsigned 32-bit integer."""
    digest = hashlib.sha256(str(seed).encode("utf-8")).digest()
    return int.from_bytes(digest[:4], "little")


@dataclass(frozen=True)
class SeedBundle:
    """Named sub-seeds for every stage of the pipeline."""

    root: str
    physical: str
    atmosphere: str
    surface: str
    minerals: str
    heightmap: str
    craters: str
    elements: str

    @classmethod
    def from_root(cls, root: Union[str, int]) -> "SeedBundle":
        root = str(root)
        names = [f.name for f in fields(cls) if f.name != "root"]
        return cls(root=root, **{name: derive_seed(root, name) for name in names})

    def prng(self, purpose: str) -> AleaPRNG:
        """Fresh PRNG for the named sub-seed."""
        return AleaPRNG(getattr(self, purpose))

    def as_dict(self) -> Dict[str, str]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


def _rotl32(value: np.ndarray, bits: int) -> np.ndarray:
    return ((value << np.uint64(bits)) | (value >> np.uint64(32 - bits))) & np.uint64(_MASK32)


def _mix_key(h: np.ndarray, key: np.ndarray) -> np.ndarray:
    k = (key * np.uint64(_C1)) & np.uint64(_MASK32)
    k = _rotl32(k, 15)
    k = (k * np.uint64(_C2)) & np.uint64(_MASK32)
    h = h ^ k
    h = _rotl32(h, 13)
    return (h * np.uint64(5) + np.uint64(0xE6546B64)) & np.uint64(_MASK32)


def cell_hash(x, y, seed_int: int) -> np.ndarray:
    """
    Vectorised 32-bit hash of integer grid coordinates.

    Args:
        x: Column index (scalar or array, non-negative)
        y: Row index (scalar or array, non-negative)
        seed_int: Unsigned 32-bit seed

    Returns:
        uint64 array of 32-bit hash values
    """
    x = np.asarray(x, dtype=np.int64).astype(np.uint64) & np.uint64(_MASK32)
    y = np.asarray(y, dtype=np.int64).astype(np.uint64) & np.uint64(_MASK32)
    h = np.full(np.broadcast(x, y).shape, seed_int & _MASK32, dtype=np.uint64)
    h = _mix_key(h, x)
    h = _mix_key(h, y)
    # Finalization avalanche
    h = h ^ (h >> np.uint64(16))
    h = (h * np.uint64(0x85EBCA6B)) & np.uint64(_MASK32)
    h = h ^ (h >> np.uint64(13))
    h = (h * np.uint64(0xC2B2AE35)) & np.uint64(_MASK32)
    return h ^ (h >> np.uint64(16))


def cell_random(x, y, seed_int: int) -> np.ndarray:
    """Per-cell deterministic float in [0, 1)."""
    return cell_hash(x, y, seed_int).astype(np.float64) / 4294967296.0
