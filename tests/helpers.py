# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""Shared test doubles."""

import os
import sys

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from word_jumble.random_source import RandomSource


FILLER = "*"


class ScriptedSource(RandomSource):
    """
    Random source that replays fixed integers and fills with FILLER.

    Makes every word cell easy to tell apart from filler cells.
    """

    def __init__(self, values):
        super().__init__(seed=0)
        self.values = list(values)
        self.calls = []

    def randrange(self, n: int) -> int:
        value = self.values.pop(0)
        assert 0 <= value < n, f"scripted value {value} out of range [0, {n})"
        self.calls.append(n)
        return value

    def random_letter(self) -> str:
        return FILLER
