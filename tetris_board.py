
"""Board: grid, collision, fix, line clear, ghost"""
from dataclasses import dataclass, field
from typing import Optional, List

from tetris_config import COLS, ROWS

Grid = List[List[Optional[str]]]


@dataclass
class LineClearInfo:
    count: int = 0
    indices: List[int] = field(default_factory=list)


class Board:
    def __init__(self, cols: int = COLS, rows: int = ROWS):
        self.cols = cols
        self.rows = rows
        self.reset()

    def reset(self):
        self.grid: Grid = [[None] * self.cols for _ in range(self.rows)]

    def is_valid(self, shape: List[List[int]], x: int, y: int) -> bool:
        for r, row in enumerate(shape):
            for c, v in enumerate(row):
                if not v: continue
                bx, by = x + c, y + r
                if bx < 0 or bx >= self.cols or by >= self.rows: return False
                if by >= 0 and self.grid[by][bx] is not None: return False
        return True

    def fix(self, piece):
        for r, row in enumerate(piece.shape):
            for c, v in enumerate(row):
                if not v: continue
                bx, by = piece.x + c, piece.y + r
                if 0 <= by < self.rows and 0 <= bx < self.cols:
                    self.grid[by][bx] = piece.t

    def is_row_full(self, row: int) -> bool:
        if not 0 <= row < self.rows:
            return False
        return all(cell is not None for cell in self.grid[row])

    def clear_lines(self) -> LineClearInfo:
        """Remove full rows bottom-up; the row shifted into a cleared slot is re-checked.

        Indices are reported against the grid as it was before the call.
        """
        info = LineClearInfo()
        y = self.rows - 1
        while y >= 0:
            if self.is_row_full(y):
                # rows above have already slid down by info.count
                info.indices.append(y - info.count)
                info.count += 1
                del self.grid[y]
                self.grid.insert(0, [None] * self.cols)
            else:
                y -= 1
        return info

    def ghost_drop_row(self, piece) -> int:
        y = piece.y
        while self.is_valid(piece.shape, piece.x, y + 1):
            y += 1
        return y
