
"""Piece model, shapes, simple horizontal-kick rotation"""
import logging
from dataclasses import dataclass
from typing import List, Dict, Tuple

from tetris_config import COLS

logger = logging.getLogger(__name__)

SHAPES: Dict[str, List[List[int]]] = {
    "I": [[1,1,1,1]],
    "O": [[1,1],[1,1]],
    "T": [[0,1,0],[1,1,1]],
    "S": [[0,1,1],[1,1,0]],
    "Z": [[1,1,0],[0,1,1]],
    "J": [[1,0,0],[1,1,1]],
    "L": [[0,0,1],[1,1,1]],
}

# Horizontal-only kicks, tried in order
KICKS: List[Tuple[int,int]] = [(0,0), (-1,0), (1,0), (-2,0), (2,0)]


def rotate_cw(m: List[List[int]]) -> List[List[int]]:
    rows, cols = len(m), len(m[0])
    out = [[0] * rows for _ in range(cols)]
    for r in range(rows):
        for c in range(cols):
            if m[r][c]:
                out[c][rows - 1 - r] = m[r][c]
    return out


@dataclass
class Piece:
    t: str
    shape: List[List[int]]
    x: int
    y: int

    @staticmethod
    def spawn(t: str) -> "Piece":
        if t in SHAPES:
            shape = [r[:] for r in SHAPES[t]]
        else:
            logger.warning("No shape defined for piece type %r, using a single cell", t)
            shape = [[1]]
        w = len(shape[0]) if shape and shape[0] else 1
        return Piece(t, shape, (COLS - w) // 2, 0)

    def cells(self) -> List[Tuple[int,int]]:
        """Absolute (col, row) of every occupied cell."""
        return [(self.x + c, self.y + r)
                for r, row in enumerate(self.shape)
                for c, v in enumerate(row) if v]

    def move_left(self, board) -> bool:
        if board.is_valid(self.shape, self.x - 1, self.y):
            self.x -= 1
            return True
        return False

    def move_right(self, board) -> bool:
        if board.is_valid(self.shape, self.x + 1, self.y):
            self.x += 1
            return True
        return False

    def move_down(self, board) -> bool:
        """Step one row down. Returns True when the piece is resting (no move)."""
        if board.is_valid(self.shape, self.x, self.y + 1):
            self.y += 1
            return False
        return True

    def rotate(self, board) -> bool:
        if self.t == "O":
            return False
        previous = self.shape
        self.shape = rotate_cw(previous)
        for dx, dy in KICKS:
            if board.is_valid(self.shape, self.x + dx, self.y + dy):
                self.x += dx
                self.y += dy
                return True
        self.shape = previous
        return False
