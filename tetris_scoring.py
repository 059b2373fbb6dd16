
"""Score multiplier curve, level thresholds and drop speed"""
import math
from typing import Tuple

from tetris_config import CONFIG, BASE_POINTS_LINE_CLEAR


def _round(v: float) -> int:
    # half-up, not banker's rounding
    return int(math.floor(v + 0.5))


def _clamp_level(level: int) -> int:
    return max(0, min(level, CONFIG["MAX_GAME_LEVEL"]))


def score_multiplier(level: int) -> float:
    """Level 0 -> x1, 1 -> x1.1, 2 -> x1.3, 3 -> x1.6, ... (step grows by 0.1)."""
    level = _clamp_level(level)
    if level == 0:
        return 1.0
    m = 1.0
    for i in range(1, level + 1):
        m += 0.1 * i
    return round(m, 2)


def total_score_for_level(target: int) -> int:
    if target <= 0:
        return 0
    base = CONFIG["BASE_POINTS_TO_LEVEL_UP"]
    return sum(_round(base * score_multiplier(i)) for i in range(target))


def drop_interval(level: int, dynamic_enabled: bool = True) -> int:
    if not dynamic_enabled:
        return CONFIG["ORIGINAL_DROP_INTERVAL"]
    interval = CONFIG["ORIGINAL_DROP_INTERVAL"] - _clamp_level(level) * CONFIG["DROP_INTERVAL_REDUCTION_PER_LEVEL"]
    return max(CONFIG["MIN_DROP_INTERVAL"], interval)


def points_for_lines(lines: int, level: int) -> int:
    base = BASE_POINTS_LINE_CLEAR.get(lines, 0)
    if not base:
        return 0
    return _round(base * score_multiplier(level))


def check_level_up(score: int, level: int, threshold: int) -> Tuple[int, int, bool]:
    """Advance as many levels as the score allows. Returns (level, threshold, changed)."""
    changed = False
    while score >= threshold and level < CONFIG["MAX_GAME_LEVEL"]:
        level += 1
        changed = True
        threshold = total_score_for_level(level + 1)
    return level, threshold, changed
