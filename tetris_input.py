
"""Keyboard and pointer (mouse / touch) controls"""
import math
from typing import Optional

import pygame

from tetris_config import CONFIG
from tetris_session import State

TAP_DURATION_MS = 250
TAP_MOVEMENT_PX = 20
DRAG_SENSITIVITY = 0.8
VERTICAL_SWIPE_PX = 50
SWIPE_RATIO = 1.5


class KeyboardControls:
    LEFT = (pygame.K_LEFT, pygame.K_a)
    RIGHT = (pygame.K_RIGHT, pygame.K_d)
    DOWN = (pygame.K_DOWN, pygame.K_s)
    ROTATE = (pygame.K_UP, pygame.K_w, pygame.K_x)
    HARD_DROP = (pygame.K_SPACE,)
    SWAP = (pygame.K_c,)
    PAUSE = (pygame.K_p,)

    def __init__(self, session):
        self.session = session

    def handle_key(self, key: int) -> bool:
        s = self.session
        if s.state == State.PAUSED:
            if key in self.PAUSE:
                return s.resume()
            return False
        if s.state != State.PLAYING or s.current is None:
            return False
        if key in self.LEFT: s.move_left()
        elif key in self.RIGHT: s.move_right()
        elif key in self.DOWN: s.soft_drop()
        elif key in self.ROTATE: s.rotate()
        elif key in self.HARD_DROP: s.hard_drop_and_lock()
        elif key in self.SWAP: s.swap()
        elif key in self.PAUSE: s.pause()
        else: return False
        return True


class PointerControls:
    """
    One gesture at a time: begin() on press, move() while held, end() on release.

    • Horizontal drag moves the piece live, one column per
      BLOCK_SIZE * DRAG_SENSITIVITY pixels from the gesture start.
    • On release: a short, still press is a tap (rotate); a dominant
      vertical stroke is a swipe (up pauses, down hard-drops).
    """
    def __init__(self, session, block_size: Optional[int] = None):
        self.session = session
        self.block_size = block_size or CONFIG["BLOCK_SIZE"]
        self.active = False
        self.start_x = 0.0
        self.start_y = 0.0
        self.start_time = 0.0
        self.anchor_col = 0
        self.dragging = False

    @property
    def column_px(self) -> float:
        return self.block_size * DRAG_SENSITIVITY

    def _playing(self) -> bool:
        return self.session.state == State.PLAYING and self.session.current is not None

    def begin(self, x: float, y: float, now: float):
        if not self._playing():
            self.active = False
            return
        self.active = True
        self.start_x, self.start_y = x, y
        self.start_time = now
        self.anchor_col = self.session.current.x
        self.dragging = False

    def move(self, x: float, y: float) -> int:
        """Returns the number of columns the piece moved."""
        if not self.active or not self._playing():
            return 0
        dx, dy = x - self.start_x, y - self.start_y
        if not self.dragging and abs(dx) > abs(dy) and abs(dx) > TAP_MOVEMENT_PX / 2:
            self.dragging = True
        if not self.dragging:
            return 0

        piece = self.session.current
        target = self.anchor_col + math.floor(dx / self.column_px)
        moved = 0
        while piece.x != target:
            step = 1 if target > piece.x else -1
            if not self.session.shift_to(step):
                # blocked: rest against the obstacle and measure from here
                self.anchor_col = piece.x
                self.start_x = x
                break
            moved += 1
        return moved

    def end(self, x: float, y: float, now: float) -> str:
        """Classify the finished gesture: "tap", "swipe_up", "swipe_down", "drag" or ""."""
        if not self.active:
            return ""
        self.active = False
        dragging, self.dragging = self.dragging, False
        if not self._playing():
            return ""
        dx, dy = x - self.start_x, y - self.start_y
        if (not dragging and now - self.start_time < TAP_DURATION_MS
                and abs(dx) < TAP_MOVEMENT_PX and abs(dy) < TAP_MOVEMENT_PX):
            self.session.rotate()
            return "tap"
        if not dragging and abs(dy) > VERTICAL_SWIPE_PX and abs(dy) >= abs(dx) * SWIPE_RATIO:
            if dy < 0:
                self.session.pause()
                return "swipe_up"
            self.session.hard_drop()
            return "swipe_down"
        return "drag" if dragging else ""
