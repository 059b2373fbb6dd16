
"""
Game session: the single owner of board, pieces, timers and score.

Everything that mutates play state goes through GameSession. Input
handlers, the per-frame tick and the lock-delay timer all run on the
same thread; the timer is polled from tick() rather than called back,
and every transition that could invalidate a pending lock cancels it
first.

States:
  MENU -> PLAYING -> (PAUSED <-> PLAYING) | GAMEOVER
  GAMEOVER -> PLAYING (continue / restart) | MENU
  MENU <-> HIGH_SCORES
"""
from __future__ import annotations
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional

import pygame

from tetris_audio import SilentAudio
from tetris_board import Board, LineClearInfo
from tetris_config import CONFIG, DYNAMIC_SPEED_KEY
from tetris_piece import Piece
from tetris_rng import PieceGenerator
from tetris_scoring import check_level_up, drop_interval, points_for_lines, total_score_for_level
from tetris_storage import HighScoreTable, MemoryStore
from tetris_timer import LockTimer

logger = logging.getLogger(__name__)

NORMAL_CLEAR_MS = 350
TETRIS_CLEAR_MS = 600


class State(str, Enum):
    MENU = "MENU"
    PLAYING = "PLAYING"
    PAUSED = "PAUSED"
    GAMEOVER = "GAMEOVER"
    HIGH_SCORES = "HIGH_SCORES"


@dataclass
class LineClearAnimation:
    rows: List[int]
    kind: str           # "normal" or "tetris"
    start: float
    duration: int

    def progress(self, now: float) -> float:
        return (now - self.start) / self.duration


@dataclass
class GameOverSummary:
    score: int
    best: int
    is_new_high: bool


@dataclass
class GameSession:
    store: MemoryStore = field(default_factory=MemoryStore)
    audio: SilentAudio = field(default_factory=SilentAudio)
    generator: PieceGenerator = field(default_factory=lambda: PieceGenerator(CONFIG["PIECE_SEED"]))
    clock: Callable[[], float] = pygame.time.get_ticks

    def __post_init__(self):
        self.board = Board()
        self.high_scores = HighScoreTable(self.store)
        self.state = State.MENU
        self.current: Optional[Piece] = None
        self.next: Optional[Piece] = None
        self.score = 0
        self.level = 0
        self.next_level_score = total_score_for_level(1)
        self.dynamic_speed = bool(self.store.load_preference(DYNAMIC_SPEED_KEY, CONFIG["DYNAMIC_SPEED"]))
        self.drop_interval_ms = drop_interval(0, self.dynamic_speed)
        self.drop_counter = 0.0
        self.last_time = 0.0
        self.landed = False
        self.can_swap = True
        self.game_over = False
        self.lock_timer = LockTimer(CONFIG["LOCK_DELAY_MS"])
        self.animations: List[LineClearAnimation] = []
        self.last_summary: Optional[GameOverSummary] = None

    # ---------- lifecycle ----------
    def start_game(self, keep_score: bool = False):
        """New game; with keep_score the previous score and level carry over."""
        self.board.reset()
        self.game_over = False
        self.landed = False
        self.lock_timer.cancel()
        if not keep_score:
            self.score = 0
            self.level = 0
            self.next_level_score = total_score_for_level(self.level + 1)
        self.can_swap = True
        self.update_drop_speed()
        self.last_time = self.clock()
        self.drop_counter = 0.0
        self.animations = []
        self.last_summary = None

        self.next = Piece.spawn(self.generator.next_type())
        self.spawn()
        logger.info("New game (keep_score=%s, score=%d, level=%d)", keep_score, self.score, self.level)
        if self.game_over:
            self.handle_game_over()
        else:
            self.state = State.PLAYING
            self.audio.play_music()

    def restart(self):
        self.audio.stop_music()
        self.start_game(keep_score=False)

    def continue_after_game_over(self):
        if self.state != State.GAMEOVER:
            return
        self.start_game(keep_score=True)

    def go_to_menu(self):
        self.state = State.MENU
        self.lock_timer.cancel()
        self.landed = False
        self.current = None
        self.next = None
        self.audio.stop_music()

    def show_high_scores(self) -> List[int]:
        if self.state == State.MENU:
            self.state = State.HIGH_SCORES
        return self.high_scores.scores

    def back_to_menu(self):
        if self.state == State.HIGH_SCORES:
            self.state = State.MENU

    def pause(self) -> bool:
        if self.state != State.PLAYING:
            return False
        self.state = State.PAUSED
        self.lock_timer.suspend(self.clock())
        self.audio.pause_music()
        return True

    def resume(self) -> bool:
        if self.state != State.PAUSED:
            return False
        self.state = State.PLAYING
        now = self.clock()
        # paused wall-clock time is not credited to gravity
        self.last_time = now
        self.lock_timer.resume(now)
        self.audio.play_music()
        return True

    def toggle_pause(self) -> bool:
        return self.pause() or self.resume()

    def set_dynamic_speed(self, enabled: bool):
        self.dynamic_speed = bool(enabled)
        self.store.save_preference(DYNAMIC_SPEED_KEY, self.dynamic_speed)
        self.update_drop_speed()

    def update_drop_speed(self):
        self.drop_interval_ms = drop_interval(self.level, self.dynamic_speed)

    # ---------- spawning ----------
    def spawn(self):
        self.landed = False
        self.lock_timer.cancel()
        self.current = self.next
        self.next = Piece.spawn(self.generator.next_type())
        self.can_swap = True
        if self.current and not self.board.is_valid(self.current.shape, self.current.x, self.current.y):
            self.game_over = True
        logger.debug("Spawned %s, next %s", self.current and self.current.t, self.next.t)

    def swap(self) -> bool:
        """Exchange current and next piece types, once per spawn."""
        if not self.current or not self.next or not self.can_swap or self.state != State.PLAYING:
            return False
        old_type = self.current.t
        self.lock_timer.cancel()
        self.landed = False
        self.current = Piece.spawn(self.next.t)
        if not self.board.is_valid(self.current.shape, self.current.x, self.current.y):
            self.game_over = True
            self.handle_game_over()
            return False
        self.next = Piece.spawn(old_type)
        self.can_swap = False
        self.drop_counter = 0.0
        return True

    # ---------- piece control ----------
    def _active(self) -> bool:
        return self.state == State.PLAYING and self.current is not None and not self.game_over

    def move_left(self) -> bool:
        if not self._active():
            return False
        moved = self.current.move_left(self.board)
        if moved and self.landed:
            self.handle_landed_move()
        return moved

    def move_right(self) -> bool:
        if not self._active():
            return False
        moved = self.current.move_right(self.board)
        if moved and self.landed:
            self.handle_landed_move()
        return moved

    def shift_to(self, direction: int) -> bool:
        return self.move_right() if direction > 0 else self.move_left()

    def rotate(self) -> bool:
        if not self._active():
            return False
        rotated = self.current.rotate(self.board)
        if rotated and self.landed:
            self.handle_landed_move()
        return rotated

    def soft_drop(self):
        """One row down; touching down here locks at once, without lock delay."""
        if not self._active():
            return
        if self.current.move_down(self.board):
            self.lock_piece()
            if self.game_over:
                return
        self.drop_counter = 0.0

    def _fall_to_contact(self):
        while not self.current.move_down(self.board):
            pass

    def hard_drop(self):
        """Fall to contact and start the lock delay."""
        if not self._active():
            return
        self._fall_to_contact()
        self.piece_has_landed()
        self.drop_counter = 0.0

    def hard_drop_and_lock(self):
        if not self._active():
            return
        self._fall_to_contact()
        self.lock_piece()
        if not self.game_over:
            self.drop_counter = 0.0

    # ---------- landing / locking ----------
    def piece_has_landed(self):
        if self.game_over or not self.current:
            return
        self.landed = True
        self.lock_timer.arm(self.clock())

    def handle_landed_move(self):
        """A landed piece moved: restart the delay if still resting, else let it fall."""
        if not self.landed or not self.current:
            return
        self.lock_timer.cancel()
        if self.board.is_valid(self.current.shape, self.current.x, self.current.y + 1):
            self.landed = False
        else:
            self.lock_timer.arm(self.clock())

    def _on_lock_timer(self):
        if self.state != State.PLAYING or not self.landed or not self.current:
            return
        if self.board.is_valid(self.current.shape, self.current.x, self.current.y + 1):
            self.landed = False
            return
        self.lock_piece()

    def lock_piece(self):
        if not self.current:
            return
        self.lock_timer.cancel()
        self.board.fix(self.current)
        logger.debug("Locked %s at (%d, %d)", self.current.t, self.current.x, self.current.y)
        self.handle_line_clears(self.board.clear_lines())
        self.spawn()
        if self.game_over:
            self.handle_game_over()
            return
        self.landed = False
        self.drop_counter = 0.0

    def handle_line_clears(self, info: LineClearInfo):
        if info.count <= 0:
            return
        self.add_score(info.count)
        tetris = info.count == 4
        if tetris:
            self.audio.tetris_clear()
        else:
            self.audio.line_clear()
        self.animations.append(LineClearAnimation(
            rows=list(info.indices),
            kind="tetris" if tetris else "normal",
            start=self.clock(),
            duration=TETRIS_CLEAR_MS if tetris else NORMAL_CLEAR_MS,
        ))

    def add_score(self, lines: int) -> int:
        earned = points_for_lines(lines, self.level)
        if not earned:
            return 0
        self.score += earned
        self.check_level_up()
        return earned

    def check_level_up(self) -> bool:
        self.level, self.next_level_score, changed = check_level_up(self.score, self.level, self.next_level_score)
        if changed:
            self.update_drop_speed()
            logger.info("Level up: %d (drop interval %d ms)", self.level, self.drop_interval_ms)
        return changed

    def handle_game_over(self):
        self.state = State.GAMEOVER
        self.audio.stop_music()
        self.landed = False
        self.lock_timer.cancel()
        is_new = self.high_scores.add(self.score)
        self.last_summary = GameOverSummary(self.score, self.high_scores.best, is_new)
        if is_new:
            self.audio.new_high_score()
        else:
            self.audio.game_over()
        logger.info("Game over: score=%d level=%d new_high=%s", self.score, self.level, is_new)

    # ---------- frame tick ----------
    def tick(self, now: Optional[float] = None):
        if self.state != State.PLAYING:
            return
        if now is None:
            now = self.clock()
        delta = now - self.last_time
        self.last_time = now

        if self.lock_timer.poll(now):
            self._on_lock_timer()
            if self.state != State.PLAYING:
                return

        if not self.landed:
            self.drop_counter += delta
            if self.drop_counter > self.drop_interval_ms:
                if self.current and self.current.move_down(self.board):
                    self.piece_has_landed()
                self.drop_counter = 0.0

    # ---------- render queries ----------
    def ghost_row(self) -> Optional[int]:
        if not self.current:
            return None
        return self.board.ghost_drop_row(self.current)

    def active_animations(self, now: Optional[float] = None) -> List[LineClearAnimation]:
        if now is None:
            now = self.clock()
        self.animations = [a for a in self.animations if now - a.start < a.duration]
        return list(self.animations)
