"""
Game session: all state for one round of Collapse plus the fixed-step tick.

A session owns the grid, the tile pool and the counters. The host calls
``tick(dt_ms)`` once per frame and forwards player actions (``tap``,
``pause_resume``, ``restart``, ``mute``...). Every mutation happens inside one
of those calls, so there is a single writer at any time.

Row lifecycle, driven by ``tick``:

  • every TIME_LAPSE_MS one tile from the pool lands in the next staging column;
  • once the staging row is full, all rows shift up and a line is used up;
  • when no lines are left and no group can be cleared, the round is won;
  • a shift with anything in row 0 ends the round.

Gravity runs on its own accumulator (GRAVITY_LAPSE_MS).

Sound cues and terminal transitions are queued as event names ("clear",
"explosion", "game-over", "win") for the host to pick up with
``drain_events()``.
"""
from __future__ import annotations

import enum
import logging
from typing import Iterable, List, Mapping, Optional

from collapse_config import make_config
from collapse_grid import BOMB, Grid, blast, clear_group, gravity_step, has_matches, inject, shift_up
from collapse_pool import TilePool

logger = logging.getLogger(__name__)


class Phase(enum.Enum):
    READY = "ready"
    PLAYING = "playing"
    PAUSED = "paused"
    GAME_OVER = "game-over"
    WON = "won"


class GameSession:
    def __init__(self, config: Optional[Mapping] = None, pool: Optional[TilePool] = None):
        self.config = dict(config) if config is not None else make_config()
        self.width: int = self.config["WIDTH"]
        self.height: int = self.config["HEIGHT"]
        self.pool = pool if pool is not None else TilePool(
            self.config["N_LINES"] * self.width,
            n_colors=self.config["N_COLORS"],
            bomb_chance=self.config["BOMB_CHANCE"],
            seed=self.config["SEED"],
        )
        self.phase = Phase.READY
        self.muted = False
        self.level = 1
        self.events: List[str] = []
        self._reset_state()

    @classmethod
    def from_grid(cls, rows: Iterable[Iterable[int]], lines_left: int = 0, **overrides) -> "GameSession":
        """A playing session over a prepared grid (last row = staging row)."""
        grid = Grid.from_rows(rows)
        overrides.setdefault("N_LINES", lines_left)
        cfg = make_config(WIDTH=grid.width, HEIGHT=grid.height, **overrides)
        session = cls(cfg)
        session.grid = grid
        session.lines_left = lines_left
        session.phase = Phase.PLAYING
        return session

    def _reset_state(self):
        self.grid = Grid(self.width, self.height)
        self.score = 0
        self.lines_left: int = self.config["N_LINES"]
        self.offset = 1
        self.frame_timer = 0.0
        self.gravity_timer = 0.0
        self.pause_blink = False

    # ---------- state ----------
    @property
    def playing(self) -> bool:
        return self.phase is Phase.PLAYING

    @property
    def finished(self) -> bool:
        return self.phase in (Phase.GAME_OVER, Phase.WON)

    @property
    def silent(self) -> bool:
        """True when the host should not play cues: muted or paused."""
        return self.muted or self.phase is Phase.PAUSED

    def no_more_matches(self) -> bool:
        return not has_matches(self.grid, self.config["MIN_GROUP"])

    def drain_events(self) -> List[str]:
        events, self.events = self.events, []
        return events

    def _set_phase(self, phase: Phase):
        logger.info("phase %s -> %s (score=%d, lines_left=%d)",
                    self.phase.value, phase.value, self.score, self.lines_left)
        self.phase = phase

    # ---------- frame loop ----------
    def tick(self, dt_ms: float):
        """Advance timers by ``dt_ms`` and act on whichever threshold was crossed."""
        self.frame_timer += dt_ms
        self.gravity_timer += dt_ms

        if self.phase is Phase.PLAYING:
            if self.frame_timer > self.config["TIME_LAPSE_MS"]:
                self.frame_timer = 0.0
                if self.lines_left > 0:
                    if self.offset == self.width + 1:
                        self.offset = 1
                        self.move_lines_up()
                    else:
                        self.add_tile(self.offset)
                        self.offset += 1
                elif self.no_more_matches():
                    self.win()
            if self.phase is Phase.PLAYING and self.gravity_timer > self.config["GRAVITY_LAPSE_MS"]:
                self.gravity_timer = 0.0
                gravity_step(self.grid)
        elif self.phase is Phase.PAUSED:
            if self.frame_timer > self.config["TIME_LAPSE_PAUSE_MS"]:
                self.frame_timer = 0.0
                self.pause_blink = not self.pause_blink

    def add_tile(self, offset: int):
        """Put the next pool tile into staging column ``offset - 1``."""
        tile = self.pool.next_tile()
        if tile is None:
            return
        inject(self.grid, offset - 1, tile.code)

    def move_lines_up(self):
        if not shift_up(self.grid):
            self.game_over()
            return
        self.lines_left = max(0, self.lines_left - 1)
        logger.debug("lines up, %d left", self.lines_left)

    def game_over(self):
        self._set_phase(Phase.GAME_OVER)
        self.events.append("game-over")

    def win(self):
        self._set_phase(Phase.WON)
        self.events.append("win")

    # ---------- player actions ----------
    def tap(self, x: int, y: int) -> int:
        """Clear the group or fire the bomb at ``(x, y)``; returns points scored."""
        if not self.playing or not self.grid.in_play(x, y):
            return 0
        if self.grid.get(x, y) == BOMB:
            return self.explode_bomb(x, y)
        return self.remove_group(x, y)

    def remove_group(self, x: int, y: int) -> int:
        if not self.playing:
            return 0
        n = clear_group(self.grid, x, y, self.config["MIN_GROUP"])
        if n:
            self.score += n
            self.events.append("clear")
        return n

    def explode_bomb(self, x: int, y: int) -> int:
        if not self.playing or not self.grid.in_play(x, y):
            return 0
        points = blast(self.grid, x, y, self.config["BOMB_RANGE"])
        self.score += points
        self.events.append("explosion")
        return points

    def start(self):
        if self.phase is Phase.READY:
            self._set_phase(Phase.PLAYING)

    def pause_resume(self):
        if self.phase is Phase.PLAYING:
            self._set_phase(Phase.PAUSED)
        elif self.phase is Phase.PAUSED:
            self.pause_blink = False
            self._set_phase(Phase.PLAYING)

    def restart(self):
        self.pool.reset()
        self._reset_state()
        self.events.clear()
        self._set_phase(Phase.PLAYING)

    # volume toggles are disabled while paused
    def mute(self):
        if self.phase is not Phase.PAUSED:
            self.muted = True

    def unmute(self):
        if self.phase is not Phase.PAUSED:
            self.muted = False

    def toggle_mute(self):
        if self.phase is not Phase.PAUSED:
            self.muted = not self.muted
