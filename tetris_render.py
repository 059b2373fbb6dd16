
"""
Rendering helpers for the game screen.

- Pre-render bevelled block sprites per colour and blit them.
- Pre-render the static background (board frame, grid, panel) per theme.
- Cache a BOARD SURFACE with all *locked* blocks; rebuild it only when the grid changes.
- Cache HUD text surfaces; re-render only when values change.
"""
from __future__ import annotations
import random
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

import pygame

from tetris_config import COLS, ROWS
from tetris_layout import Dims, PREVIEW_BLOCKS
from tetris_theme import darken, ghost_color, lighten, piece_color

BEVEL = 3
HIGHLIGHT_PERCENT = 25
SHADOW_PERCENT = 25


@dataclass
class HudCache:
    score: int = -1
    level: int = -1
    best: int = -1
    lang: str = ""
    next_type: str = ""
    score_s: Optional[pygame.Surface] = None
    level_s: Optional[pygame.Surface] = None
    best_s: Optional[pygame.Surface] = None
    next_label: Optional[pygame.Surface] = None
    next_preview: Optional[pygame.Surface] = None
    hint: Optional[pygame.Surface] = None


def make_block(size: int, color) -> pygame.Surface:
    s = pygame.Surface((size, size))
    s.fill(darken(color, SHADOW_PERCENT))
    pygame.draw.polygon(s, lighten(color, HIGHLIGHT_PERCENT), [
        (0, size - BEVEL), (0, 0), (size - BEVEL, 0),
        (size - BEVEL, BEVEL), (BEVEL, BEVEL), (BEVEL, size - BEVEL),
    ])
    s.fill(color, (BEVEL, BEVEL, size - 2 * BEVEL, size - 2 * BEVEL))
    return s


class RenderAssets:
    """Holds all pre-rendered assets for fast blitting."""
    def __init__(self, dims: Dims, font: pygame.font.Font, theme: dict):
        self.dims = dims
        self.font = font
        self.set_theme(theme)

    def set_theme(self, theme: dict):
        self.theme = theme
        self.blocks: Dict[Tuple[str, int], pygame.Surface] = {}
        self._make_static()
        self.board_surface = pygame.Surface(self.dims.board.size, pygame.SRCALPHA)
        self._board_key = None
        self.hud = HudCache()

    # ---------- Static background ----------
    def _make_static(self):
        d, th = self.dims, self.theme
        self.bg = pygame.Surface(d.size)
        self.bg.fill(th["body_bg"])
        pygame.draw.rect(self.bg, th["board_bg"], d.board)
        for x in range(COLS + 1):
            X = d.board.x + x * d.cell
            pygame.draw.line(self.bg, th["grid"], (X, d.board.y), (X, d.board.y + d.board.h))
        for y in range(ROWS + 1):
            Y = d.board.y + y * d.cell
            pygame.draw.line(self.bg, th["grid"], (d.board.x, Y), (d.board.x + d.board.w, Y))
        pygame.draw.rect(self.bg, th["board_border"], d.board.inflate(4, 4), 2)
        pygame.draw.rect(self.bg, th["panel_bg"], d.panel)
        pygame.draw.rect(self.bg, th["board_border"], d.panel, 1)
        pygame.draw.rect(self.bg, th["board_bg"], d.preview.inflate(12, 12))

    def block(self, t: str, size: int) -> pygame.Surface:
        key = (t, size)
        if key not in self.blocks:
            self.blocks[key] = make_block(size, piece_color(self.theme, t))
        return self.blocks[key]

    # ---------- Board surface cache ----------
    def rebuild_board_surface(self, grid):
        key = tuple(tuple(r) for r in grid)
        if key == self._board_key:
            return
        self.board_surface.fill((0, 0, 0, 0))
        c = self.dims.cell
        for y, row in enumerate(grid):
            for x, t in enumerate(row):
                if t is not None:
                    self.board_surface.blit(self.block(t, c), (x * c, y * c))
        self._board_key = key

    # ---------- Pieces ----------
    def draw_piece(self, screen, piece):
        c = self.dims.cell
        for cx, cy in piece.cells():
            if cy >= 0:
                screen.blit(self.block(piece.t, c), (self.dims.board.x + cx * c, self.dims.board.y + cy * c))

    def draw_ghost(self, screen, piece, row: int):
        c = self.dims.cell
        s = pygame.Surface((c, c), pygame.SRCALPHA)
        s.fill(ghost_color(self.theme))
        for cx, cy in piece.cells():
            cy += row - piece.y
            if cy >= 0:
                screen.blit(s, (self.dims.board.x + cx * c, self.dims.board.y + cy * c))

    def draw_line_clears(self, screen, animations, now: float):
        d = self.dims
        for anim in animations:
            p = min(1.0, max(0.0, anim.progress(now)))
            for r in anim.rows:
                y = d.board.y + r * d.cell
                strip = pygame.Surface((d.board.w, d.cell), pygame.SRCALPHA)
                if anim.kind == "tetris":
                    alpha = max(0.0, 0.8 * (1 - abs(0.5 - p) * 2))
                    strip.fill((255, 223, 0, int(alpha * 255)))
                    if p < 0.5:
                        for _ in range(5):
                            sx = random.randrange(d.board.w)
                            sy = random.randrange(d.cell)
                            strip.fill((255, 255, 255, int(0.5 * (1 - p * 2) * 255)), (sx, sy, 3, 3))
                else:
                    alpha = max(0.0, 0.6 * (1 - p))
                    strip.fill((255, 255, 255, int(alpha * 255)))
                screen.blit(strip, (d.board.x, y))

    # ---------- HUD / Panel ----------
    def draw_panel_hud(self, screen, session, tr):
        d, f, th = self.dims, self.font, self.theme
        lang_changed = tr.lang != self.hud.lang
        self.hud.lang = tr.lang
        if lang_changed or session.score != self.hud.score:
            self.hud.score = session.score
            self.hud.score_s = f.render(f"{tr('score')}: {session.score}", True, th["text"])
        if lang_changed or session.level != self.hud.level:
            self.hud.level = session.level
            self.hud.level_s = f.render(f"{tr('level')}: {session.level}", True, th["text"])
        best = session.high_scores.best
        if lang_changed or best != self.hud.best:
            self.hud.best = best
            self.hud.best_s = f.render(f"{tr('best')}: {best}", True, th["text_dim"])
        if lang_changed or self.hud.next_label is None:
            self.hud.next_label = f.render(f"{tr('next')}:", True, th["text"])
            self.hud.hint = f.render(tr("swap_hint"), True, th["text_dim"])
        next_type = session.next.t if session.next else ""
        if next_type != self.hud.next_type:
            self.hud.next_type = next_type
            self.hud.next_preview = self._render_preview(session.next)

        screen.blit(self.hud.score_s, (d.panel.x + 12, d.panel.y + 12))
        screen.blit(self.hud.level_s, (d.panel.x + 12, d.panel.y + 36))
        screen.blit(self.hud.best_s, (d.panel.x + 12, d.panel.y + 60))
        screen.blit(self.hud.next_label, (d.panel.x + 12, d.panel.y + 100))
        if self.hud.next_preview:
            screen.blit(self.hud.next_preview, (d.preview.x, d.preview.y))
        screen.blit(self.hud.hint, (d.panel.x + 12, d.preview.y + d.preview.h + 16))

    def _render_preview(self, piece) -> Optional[pygame.Surface]:
        if piece is None:
            return None
        pc = self.dims.preview_cell
        s = pygame.Surface((pc * PREVIEW_BLOCKS, pc * PREVIEW_BLOCKS), pygame.SRCALPHA)
        offx = (PREVIEW_BLOCKS - len(piece.shape[0])) / 2
        offy = (PREVIEW_BLOCKS - len(piece.shape)) / 2
        for r, row in enumerate(piece.shape):
            for c, v in enumerate(row):
                if v:
                    s.blit(self.block(piece.t, pc), (int((offx + c) * pc), int((offy + r) * pc)))
        return s

    # ---------- Whole frame ----------
    def draw_game(self, screen, session, tr, now: float):
        screen.blit(self.bg, (0, 0))
        self.rebuild_board_surface(session.board.grid)
        screen.blit(self.board_surface, (self.dims.board.x, self.dims.board.y))
        piece = session.current
        if piece is not None and not session.game_over:
            ghost = session.ghost_row()
            if ghost is not None and ghost != piece.y:
                self.draw_ghost(screen, piece, ghost)
            self.draw_piece(screen, piece)
        self.draw_line_clears(screen, session.active_animations(now), now)
        self.draw_panel_hud(screen, session, tr)
