
"""Uniform piece/color randomizer"""
import random
from typing import Optional


class PieceRandom:
    def __init__(self, seed: Optional[int] = None):
        # pick a seed ourselves so any game can be replayed from the log
        if seed is None:
            seed = random.SystemRandom().randrange(2 ** 32)
        self.seed = seed
        self._rng = random.Random(seed)

    def choose_shape(self, count: int) -> int:
        return self._rng.randrange(count)

    def choose_color(self, palette_size: int) -> int:
        # index 0 is the background
        return self._rng.randrange(1, palette_size)
