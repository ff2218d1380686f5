"""
Utility helpers for seeding and logging.
"""

from .random import SeedBundle, derive_seed, seed_to_int, cell_hash, cell_random
from .logging import configure_logging

__all__ = ["SeedBundle", "derive_seed", "seed_to_int", "cell_hash", "cell_random",
           "configure_logging"]
