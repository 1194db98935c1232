# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""
Randomness used by the jumble builder.

Every random draw (anchor row, anchor column, direction and filler letters)
goes through a RandomSource. Builders that are not handed one share a single
process-wide source, seeded from the clock the first time it is needed.
"""

import logging
import random
import string
import time
from typing import Optional


logger = logging.getLogger(__name__)

ALPHABET = string.ascii_lowercase


class RandomSource:
    """
    Uniform integer and letter source.

    Usage:
        source = RandomSource(seed=42)
        row = source.randrange(size)
        filler = source.random_letter()
    """

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._rng = random.Random(seed)

    def reseed(self, seed: int):
        """Restart the stream from a new seed."""
        self.seed = seed
        self._rng.seed(seed)

    def randrange(self, n: int) -> int:
        """Uniform integer in [0, n)."""
        return self._rng.randrange(n)

    def random_letter(self) -> str:
        """Uniform lowercase letter a-z."""
        return ALPHABET[self.randrange(len(ALPHABET))]


_default_source: Optional[RandomSource] = None


def get_default_source() -> RandomSource:
    """Get the shared source, creating it with a time-based seed on first use."""
    global _default_source
    if _default_source is None:
        seed = int(time.time())
        _default_source = RandomSource(seed)
        logger.debug(f"Default random source seeded with {seed}")
    return _default_source


def seed_default_source(seed: int) -> RandomSource:
    """Reseed the shared source so later puzzles are reproducible."""
    source = get_default_source()
    source.reseed(seed)
    logger.debug(f"Default random source reseeded with {seed}")
    return source
