import pytest

from tetris_scoring import (_round, check_level_up, drop_interval, points_for_lines,
                            score_multiplier, total_score_for_level)


@pytest.mark.parametrize("level,expected", [(0, 1.0), (1, 1.1), (2, 1.3), (3, 1.6), (4, 2.0), (15, 13.0)])
def test_score_multiplier(level, expected):
    assert score_multiplier(level) == expected


def test_score_multiplier_clamps_level():
    assert score_multiplier(-3) == 1.0
    assert score_multiplier(40) == score_multiplier(15)


def test_round_is_half_up():
    assert _round(0.5) == 1
    assert _round(2.5) == 3
    assert _round(2.49) == 2


def test_total_score_for_level():
    assert total_score_for_level(0) == 0
    assert total_score_for_level(1) == 2000
    assert total_score_for_level(2) == 4200
    assert total_score_for_level(3) == 6800


@pytest.mark.parametrize("level,expected", [(0, 1000), (1, 935), (10, 350), (14, 100), (15, 100), (99, 100)])
def test_drop_interval(level, expected):
    assert drop_interval(level) == expected


def test_drop_interval_fixed_without_dynamic_speed():
    assert drop_interval(0, False) == 1000
    assert drop_interval(12, False) == 1000


@pytest.mark.parametrize("lines,level,expected", [
    (1, 0, 100), (2, 0, 220), (3, 0, 350), (4, 0, 500),
    (2, 1, 242), (3, 2, 455), (4, 3, 800),
])
def test_points_for_lines(lines, level, expected):
    assert points_for_lines(lines, level) == expected


def test_points_for_unknown_line_counts_is_zero():
    assert points_for_lines(0, 3) == 0
    assert points_for_lines(5, 0) == 0


def test_check_level_up_exact_threshold():
    assert check_level_up(2000, 0, 2000) == (1, 4200, True)
    assert check_level_up(1999, 0, 2000) == (0, 2000, False)


def test_check_level_up_can_jump_several_levels():
    assert check_level_up(7000, 0, 2000) == (3, 10000, True)


def test_check_level_up_stops_at_max_level():
    level, threshold, changed = check_level_up(10 ** 9, 0, 2000)
    assert level == 15
    assert changed
    assert threshold == total_score_for_level(16)
    assert check_level_up(10 ** 9, 15, threshold) == (15, threshold, False)
