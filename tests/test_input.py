import pygame
import pytest

from tetris_input import KeyboardControls, PointerControls
from tetris_session import State


@pytest.fixture()
def keys(session):
    return KeyboardControls(session)


@pytest.fixture()
def pointer(session):
    return PointerControls(session, block_size=30)


def test_horizontal_keys(keys, session):
    assert keys.handle_key(pygame.K_LEFT)
    assert session.current.x == 2
    keys.handle_key(pygame.K_d)
    keys.handle_key(pygame.K_RIGHT)
    assert session.current.x == 4
    keys.handle_key(pygame.K_a)
    assert session.current.x == 3


def test_soft_drop_and_rotate_keys(keys, session):
    keys.handle_key(pygame.K_DOWN)
    keys.handle_key(pygame.K_s)
    assert session.current.y == 2
    for key in (pygame.K_UP, pygame.K_w, pygame.K_x):
        before = session.current.shape
        keys.handle_key(key)
        assert session.current.shape != before


def test_space_locks_at_once(keys, session):
    keys.handle_key(pygame.K_SPACE)
    assert session.board.grid[19][3:6] == ["T", "T", "T"]
    assert session.current.t == "I"


def test_swap_key(keys, session):
    keys.handle_key(pygame.K_c)
    assert session.current.t == "I"
    assert not session.can_swap


def test_pause_key_toggles_and_blocks_moves(keys, session):
    keys.handle_key(pygame.K_p)
    assert session.state == State.PAUSED
    assert keys.handle_key(pygame.K_LEFT) is False
    assert session.current.x == 3
    assert keys.handle_key(pygame.K_p)
    assert session.state == State.PLAYING


def test_unmapped_key_is_not_consumed(keys):
    assert keys.handle_key(pygame.K_q) is False


def test_keys_ignored_outside_play(make_session):
    s = make_session()
    assert KeyboardControls(s).handle_key(pygame.K_LEFT) is False


def test_tap_rotates(pointer, session):
    pointer.begin(100, 100, 0)
    assert pointer.end(105, 103, 100) == "tap"
    assert session.current.shape == [[1, 0], [1, 1], [1, 0]]


def test_long_press_does_nothing(pointer, session):
    pointer.begin(100, 100, 0)
    assert pointer.end(100, 100, 400) == ""
    assert session.current.shape == [[0, 1, 0], [1, 1, 1]]


def test_swipe_down_hard_drops_with_lock_delay(pointer, session):
    pointer.begin(100, 100, 0)
    assert pointer.end(104, 300, 150) == "swipe_down"
    assert session.current.y == 18
    assert session.landed
    assert session.lock_timer.armed


def test_swipe_up_pauses(pointer, session):
    pointer.begin(100, 300, 0)
    assert pointer.end(110, 100, 150) == "swipe_up"
    assert session.state == State.PAUSED


def test_diagonal_release_is_not_a_swipe(pointer, session):
    pointer.begin(100, 100, 0)
    assert pointer.end(160, 160, 400) == ""
    assert session.state == State.PLAYING
    assert session.current.y == 0


def test_vertical_stroke_of_exactly_50px_is_not_a_swipe(pointer, session):
    pointer.begin(100, 100, 0)
    assert pointer.end(100, 150, 400) == ""
    assert session.current.y == 0


def test_swipe_at_exactly_one_and_a_half_times_dx(pointer, session):
    pointer.begin(100, 100, 0)
    assert pointer.end(140, 160, 400) == "swipe_down"
    assert session.landed


def test_small_jitter_does_not_start_a_drag(pointer, session):
    pointer.begin(100, 100, 0)
    assert pointer.move(105, 100) == 0
    assert pointer.move(115, 140) == 0
    assert session.current.x == 3


def test_drag_moves_by_columns(pointer, session):
    pointer.begin(100, 100, 0)
    assert pointer.move(150, 102) == 2
    assert session.current.x == 5
    assert pointer.move(70, 100) == 4
    assert session.current.x == 1
    assert pointer.end(70, 100, 500) == "drag"
    assert session.current.shape == [[0, 1, 0], [1, 1, 1]]


def test_drag_reanchors_at_an_obstacle(pointer, session):
    pointer.begin(100, 100, 0)
    assert pointer.move(340, 100) == 4
    assert session.current.x == 7
    # one column back from where the piece got stuck
    assert pointer.move(316, 100) == 1
    assert session.current.x == 6


def test_gesture_ignored_when_not_playing(pointer, session):
    session.pause()
    pointer.begin(100, 100, 0)
    assert not pointer.active
    assert pointer.end(100, 100, 50) == ""
    assert session.state == State.PAUSED
