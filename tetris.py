"""
Tetris engine
=============

The game engine without any rendering or input code. A front end drives it by:

  • calling Game.tick(now_ms) once per frame with a monotonic millisecond clock
  • forwarding player commands (move_left, rotate_cw, hard_drop, ...)
  • reading Game.snapshot() to draw the frame

-------------------------------------------------------------
STATE MACHINES
-------------------------------------------------------------

Session:   MENU -> PLAYING <-> PAUSED
                     |
                     v
                 GAME_OVER -> PLAYING (start_game)

Lock/clear (only advances while PLAYING):

  FALLING --down move fails---> GROUNDED --lock delay elapsed--> lock
     ^                             |
     +----successful move----------+

  lock -> no full rows   -> spawn
       -> full rows      -> CLEARING phase 1 -> 2 -> 3 -> compact -> spawn

Spawning onto occupied cells is the one way a game ends.

Everything runs on one thread: ticks and commands are applied one at a time,
and timers compare wall-clock deltas so speed does not depend on frame rate.
"""

from __future__ import annotations
import logging
import time
from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable, List, Optional, Tuple

from tetris_board import (Board, clear_rows, drop_distance, empty_board, full_rows,
                          ghost_piece, is_valid, lock)
from tetris_config import CONFIG
from tetris_piece import KICKS, Piece
from tetris_rng import BagRandom
from tetris_scoring import (HARD_DROP_POINTS_PER_CELL, SOFT_DROP_POINTS, drop_interval_ms,
                            level_for_score, line_clear_score)
from tetris_storage import HighScore, HighScoreStore, MemoryStore

logger = logging.getLogger(__name__)

Cells = Tuple[Tuple[int, int], ...]


def monotonic_ms() -> float:
    return time.monotonic() * 1000.0


class SessionState(Enum):
    MENU = "menu"
    PLAYING = "playing"
    PAUSED = "paused"
    GAME_OVER = "game_over"


class LockState(Enum):
    FALLING = "falling"
    GROUNDED = "grounded"
    CLEARING = "clearing"


@dataclass(frozen=True)
class Snapshot:
    """Read-only view of everything a renderer needs for one frame."""
    board: Board
    active_cells: Cells
    ghost_cells: Cells
    active_color: Optional[str]
    clearing_rows: Tuple[int, ...]
    clear_phase: int
    score: int
    lines: int
    level: int
    state: SessionState
    next_kind: Optional[str]
    high_score: HighScore
    new_record: bool


class Game:
    """One player's session: board, active piece, timers, counters."""

    def __init__(self, store=None, rng: Optional[BagRandom] = None,
                 clock: Optional[Callable[[], float]] = None):
        self.rng = rng if rng is not None else BagRandom(CONFIG["SEED"])
        self.records = HighScoreStore(store if store is not None else MemoryStore())
        self.clock = clock or monotonic_ms
        self.state = SessionState.MENU
        self._reset()
        self.high_score = self.records.load()
        self.new_record = False

    def _reset(self):
        self.board: Board = empty_board()
        self.active: Optional[Piece] = None
        self.next_kind: Optional[str] = None
        self.score = 0
        self.lines = 0
        self.level = 1

        self.lock_state = LockState.FALLING
        self.grounded_at: Optional[float] = None
        self.clearing_rows: Tuple[int, ...] = ()
        self.clear_phase = 0
        self.phase_started_at: Optional[float] = None

        self.last_drop_at: Optional[float] = None
        self.paused_at: Optional[float] = None

    # ---------- session ----------

    def start_game(self) -> bool:
        if self.state not in (SessionState.MENU, SessionState.GAME_OVER):
            return False
        self._reset()
        self.high_score = self.records.load()
        self.new_record = False
        self.next_kind = self.rng.next_piece()
        self.state = SessionState.PLAYING
        logger.info("session started (high score %d)", self.high_score.score)
        self._spawn()
        return True

    def toggle_pause(self) -> None:
        now = self.clock()
        if self.state is SessionState.PLAYING:
            self.state = SessionState.PAUSED
            self.paused_at = now
            self.last_drop_at = None
        elif self.state is SessionState.PAUSED:
            # Lock and clear timers resume where they stopped
            frozen = now - self.paused_at if self.paused_at is not None else 0
            if self.grounded_at is not None:
                self.grounded_at += frozen
            if self.phase_started_at is not None:
                self.phase_started_at += frozen
            self.paused_at = None
            self.state = SessionState.PLAYING

    def submit_record(self, name: str, country: str) -> HighScore:
        """Attach a holder to the record set at game over."""
        if not self.new_record:
            return self.high_score
        name, country = self.records.save_holder(name, country)
        self.high_score = replace(self.high_score, name=name, country=country)
        self.new_record = False
        logger.info("new record %d by %s", self.high_score.score, name)
        return self.high_score

    def dismiss_record(self) -> None:
        self.new_record = False

    def _game_over(self):
        self.state = SessionState.GAME_OVER
        self.active = None
        self.last_drop_at = None
        logger.info("game over: score %d, lines %d, level %d", self.score, self.lines, self.level)
        if self.score > self.high_score.score:
            self.records.save_score(self.score)
            self.high_score = replace(self.high_score, score=self.score)
            self.new_record = True

    # ---------- scoring ----------

    def _add_score(self, points: int):
        if points <= 0:
            return
        self.score += points
        self.level = level_for_score(self.score)

    @property
    def drop_interval(self) -> int:
        return drop_interval_ms(self.level)

    # ---------- piece controller ----------

    def _controllable(self) -> bool:
        return self.state is SessionState.PLAYING and self.active is not None

    def try_move(self, dx: int, dy: int, now: Optional[float] = None) -> bool:
        if not self._controllable():
            return False
        if now is None:
            now = self.clock()
        moved = self.active.shifted(dx, dy)
        if is_valid(self.board, moved):
            self.active = moved
            self._moved(now, downward=dy > 0)
            return True
        if dy > 0:
            self._fall_blocked(now)
        return False

    def move_left(self) -> bool:
        return self.try_move(-1, 0)

    def move_right(self) -> bool:
        return self.try_move(1, 0)

    def rotate(self, direction: int) -> bool:
        if not self._controllable():
            return False
        now = self.clock()
        turned = self.active.turned(direction)
        for dx, dy in KICKS:
            candidate = turned.shifted(dx, dy)
            if is_valid(self.board, candidate):
                self.active = candidate
                self._moved(now, downward=False)
                return True
        return False

    def rotate_cw(self) -> bool:
        return self.rotate(1)

    def rotate_ccw(self) -> bool:
        return self.rotate(-1)

    def soft_drop(self) -> bool:
        if self.try_move(0, 1):
            self._add_score(SOFT_DROP_POINTS)
            return True
        return False

    def hard_drop(self) -> int:
        """Drop straight to the floor and lock at once; returns rows fallen."""
        if not self._controllable():
            return 0
        now = self.clock()
        distance = drop_distance(self.board, self.active)
        self._add_score(distance * HARD_DROP_POINTS_PER_CELL)
        self._lock(self.active.shifted(0, distance), now)
        return distance

    def ghost_cells(self) -> Cells:
        if self.active is None:
            return ()
        return tuple(ghost_piece(self.board, self.active).cells())

    # ---------- lock & clear ----------

    def _resting(self) -> bool:
        return not is_valid(self.board, self.active.shifted(0, 1))

    def _moved(self, now: float, downward: bool):
        if self.lock_state is not LockState.GROUNDED:
            return
        if downward or not self._resting():
            self.lock_state = LockState.FALLING
            self.grounded_at = None
        else:
            self.grounded_at = now

    def _fall_blocked(self, now: float):
        if self.lock_state is LockState.FALLING:
            self.lock_state = LockState.GROUNDED
            self.grounded_at = now
        elif self._lock_due(now):
            self._lock(self.active, now)

    def _lock_due(self, now: float) -> bool:
        return (self.lock_state is LockState.GROUNDED and self.grounded_at is not None
                and now - self.grounded_at >= CONFIG["LOCK_DELAY_MS"])

    def _lock(self, piece: Piece, now: float):
        self.board = lock(self.board, piece)
        self.active = None
        self.grounded_at = None
        logger.debug("locked %s at rotation %d (%d, %d)", piece.kind, piece.rotation, piece.x, piece.y)
        rows = full_rows(self.board)
        if not rows:
            self.lock_state = LockState.FALLING
            self._spawn()
            return
        self.lock_state = LockState.CLEARING
        self.clearing_rows = rows
        self.clear_phase = 1
        self.phase_started_at = now

    def _advance_clear(self, now: float):
        step = CONFIG["CLEAR_PHASE_MS"]
        while self.lock_state is LockState.CLEARING and now - self.phase_started_at >= step:
            self.phase_started_at += step
            if self.clear_phase < 3:
                self.clear_phase += 1
            else:
                self._compact()

    def _compact(self):
        rows = self.clearing_rows
        points = line_clear_score(len(rows), self.level)
        self.board = clear_rows(self.board, rows)
        self.lines += len(rows)
        self._add_score(points)
        logger.debug("cleared rows %s for %d points", list(rows), points)
        self.clearing_rows = ()
        self.clear_phase = 0
        self.phase_started_at = None
        self.lock_state = LockState.FALLING
        self._spawn()

    def _spawn(self):
        piece = Piece.spawn(self.next_kind)
        self.next_kind = self.rng.next_piece()
        self.lock_state = LockState.FALLING
        self.grounded_at = None
        if not is_valid(self.board, piece):
            logger.debug("spawn of %s blocked", piece.kind)
            self._game_over()
            return
        # last_drop_at is left alone: gravity keeps its cadence across pieces
        self.active = piece
        logger.debug("spawned %s, next %s", piece.kind, self.next_kind)

    # ---------- timing ----------

    def tick(self, now: Optional[float] = None) -> None:
        """Advance gravity, lock delay and the clear animation to `now` (ms)."""
        if now is None:
            now = self.clock()
        if self.state is not SessionState.PLAYING:
            self.last_drop_at = None
            return
        if self.lock_state is LockState.CLEARING:
            self._advance_clear(now)
            return
        if self.active is None:
            return

        if self.last_drop_at is None:
            self.last_drop_at = now
        elif now - self.last_drop_at >= self.drop_interval:
            self.last_drop_at = now
            self.try_move(0, 1, now)

        if self.active is not None and self._lock_due(now):
            self._lock(self.active, now)

    # ---------- render boundary ----------

    def snapshot(self) -> Snapshot:
        active_cells: List[Tuple[int, int]] = self.active.cells() if self.active else []
        return Snapshot(
            board=self.board,
            active_cells=tuple(active_cells),
            ghost_cells=self.ghost_cells(),
            active_color=self.active.color if self.active else None,
            clearing_rows=self.clearing_rows,
            clear_phase=self.clear_phase,
            score=self.score,
            lines=self.lines,
            level=self.level,
            state=self.state,
            next_kind=self.next_kind,
            high_score=self.high_score,
            new_record=self.new_record,
        )
