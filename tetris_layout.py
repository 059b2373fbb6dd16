# tetris_layout.py
from dataclasses import dataclass
from typing import Optional, Tuple

import pygame

from tetris_config import CONFIG, COLS, ROWS

MARGIN = 16
PANEL_W = 220
PREVIEW_BLOCKS = 4
PREVIEW_TOP = 130       # below the score / level / best lines


@dataclass
class Dims:
    """Pixel geometry: board on the left, score and next-piece panel on the right."""
    cell: int
    size: Tuple[int, int]
    board: pygame.Rect
    panel: pygame.Rect
    preview: pygame.Rect
    preview_cell: int


def compute_dims(cell: Optional[int] = None) -> Dims:
    cell = int(cell or CONFIG["BLOCK_SIZE"])
    board = pygame.Rect(MARGIN, MARGIN, COLS * cell, ROWS * cell)
    panel = pygame.Rect(board.right + MARGIN, MARGIN, PANEL_W, board.h)
    preview_cell = max(14, int(cell * 0.75))
    preview = pygame.Rect(panel.x + 12, panel.y + PREVIEW_TOP,
                          preview_cell * PREVIEW_BLOCKS, preview_cell * PREVIEW_BLOCKS)
    size = (panel.right + MARGIN, board.bottom + MARGIN)
    return Dims(cell=cell, size=size, board=board, panel=panel,
                preview=preview, preview_cell=preview_cell)
