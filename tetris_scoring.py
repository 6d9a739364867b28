"""Score table, level curve and gravity interval"""

LINE_SCORES = {1: 100, 2: 300, 3: 500, 4: 800}
SOFT_DROP_POINTS = 1
HARD_DROP_POINTS_PER_CELL = 2

SCORE_PER_LEVEL = 5000


def line_clear_score(lines: int, level: int) -> int:
    return LINE_SCORES.get(lines, 0) * level


def level_for_score(score: int) -> int:
    return max(1, score // SCORE_PER_LEVEL + 1)


def drop_interval_ms(level: int) -> int:
    """Milliseconds between gravity steps: 1s at level 1, 50ms faster per level, 100ms floor."""
    base, step = 1000, 50
    return max(100, base - (level - 1) * step)
