
CONFIG = {
    "CELL_SIZE": 32,
    "LOCK_DELAY_MS": 500,
    "CLEAR_PHASE_MS": 120,
    "SEED": None,
    "HIGH_SCORE_PATH": "~/.tetris/high_score.json",
    "LOG_LEVEL": "INFO",
}
