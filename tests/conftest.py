import os
import sys
import pytest

# Ensure the project root (holding the tetris_* modules) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
PROJECT_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from tetris_audio import SilentAudio
from tetris_board import Board
from tetris_rng import PieceGenerator
from tetris_session import GameSession
from tetris_storage import MemoryStore


class FakeClock:
    def __init__(self, now=0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, ms):
        self.now += ms
        return self.now


class RecordingAudio(SilentAudio):
    def __init__(self):
        self.events = []

    def play(self, name):
        self.events.append(name)

    def play_music(self):
        self.events.append("music")

    def stop_music(self):
        self.events.append("stop_music")


class FixedGenerator(PieceGenerator):
    """Hands out the given types in order, then repeats the last one."""
    def __init__(self, types):
        super().__init__(0)
        self.queue = list(types)

    def next_type(self):
        if len(self.queue) > 1:
            return self.queue.pop(0)
        return self.queue[0]


def fill_row(board, row, t="X", gap=None):
    for c in range(board.cols):
        board.grid[row][c] = None if c == gap else t


@pytest.fixture()
def board():
    return Board()


@pytest.fixture()
def clock():
    return FakeClock(1000)


@pytest.fixture()
def audio():
    return RecordingAudio()


@pytest.fixture()
def store():
    return MemoryStore()


@pytest.fixture()
def make_session(clock, audio, store):
    def _make(types=("T",)):
        return GameSession(store=store, audio=audio, generator=FixedGenerator(types), clock=clock)
    return _make


@pytest.fixture()
def session(make_session):
    s = make_session(("T", "I", "O"))
    s.start_game()
    return s
