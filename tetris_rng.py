
"""Piece-type generator"""
import random
from typing import Optional

from tetris_piece import SHAPES


class PieceGenerator:
    """Uniform pick over the shape table. Pass a seed for reproducible sequences."""
    def __init__(self, seed: Optional[int] = None):
        self.types = list(SHAPES)
        self._rng = random.Random(seed)

    def next_type(self) -> str:
        return self._rng.choice(self.types)
