"""
Rendering helpers for Collapse.

- Pre-render one tile Surface per code (normal + half-alpha staging copy) and blit them.
- Pre-render the static background (board frame + panel) once per Dims.
- Cache HUD text surfaces; re-render only when values change.
"""
from __future__ import annotations
import pygame
from dataclasses import dataclass
from typing import Dict, Tuple, Optional
from collapse_grid import BOMB, EMPTY, Grid
from collapse_layout import Dims, cell_origin
from collapse_session import GameSession, Phase

# Colors per tile code
COLORS: Dict[int, Tuple[int,int,int]] = {
    1: (255,0,0),
    2: (0,255,0),
    3: (0,0,255),
    BOMB: (245,212,66),
}
WHITE = (255,255,255)
BG = (0,0,0)

STATUS = {
    Phase.READY: "Space to Play",
    Phase.GAME_OVER: "GAME OVER (R to Restart)",
    Phase.WON: "Win! (R to Restart)",
}

@dataclass
class HudCache:
    score: int = -1
    level: int = -1
    lines: int = -1
    status: str = ""
    score_s: Optional[pygame.Surface] = None
    level_s: Optional[pygame.Surface] = None
    lines_s: Optional[pygame.Surface] = None
    status_s: Optional[pygame.Surface] = None

class RenderAssets:
    """Holds all pre-rendered assets for fast blitting."""
    def __init__(self, dims: Dims, font: pygame.font.Font):
        self.dims = dims
        self.font = font
        self._make_static()
        self._make_cells()
        self.hud = HudCache()

    # ---------- Static background (board frame + panel) ----------
    def _make_static(self):
        d = self.dims
        self.bg = pygame.Surface((d.total_w, d.total_h))
        self.bg.fill(BG)
        frame = pygame.Rect(d.board_x - d.gap//2, d.board_y - d.gap//2, d.board_w, d.board_h)
        pygame.draw.rect(self.bg, (40,50,90), frame, 1)
        self.panel_rect = pygame.Rect(d.panel_x, d.panel_y, d.panel_w, d.board_h)
        pygame.draw.rect(self.bg, (21,25,53), self.panel_rect)

    # ---------- Tile sprites (solid + staging) ----------
    def _make_cells(self):
        self.cell_surf: Dict[int, pygame.Surface] = {}
        self.staging_surf: Dict[int, pygame.Surface] = {}
        t = self.dims.tile
        for code, col in COLORS.items():
            s = pygame.Surface((t, t), pygame.SRCALPHA)
            if code == BOMB:
                pygame.draw.circle(s, col, (t//2, t//2), t//2)
            else:
                pygame.draw.rect(s, col, (0,0,t,t), border_radius=1)
                pygame.draw.rect(s, WHITE, (0,0,t,t), 2, border_radius=1)
            self.cell_surf[code] = s
            g = s.copy()
            g.set_alpha(128)
            self.staging_surf[code] = g

    def cell_rect(self, x: int, y: int) -> pygame.Rect:
        return pygame.Rect(cell_origin(self.dims, x, y), (self.dims.tile, self.dims.tile))

    # ---------- Board ----------
    def draw_board(self, screen: pygame.Surface, grid: Grid):
        screen.blit(self.bg, (0,0))
        for y, row in enumerate(grid.cells):
            surfs = self.staging_surf if y == grid.height else self.cell_surf
            for x, code in enumerate(row):
                if code != EMPTY:
                    screen.blit(surfs[code], cell_origin(self.dims, x, y))

    # ---------- HUD / Panel ----------
    def draw_panel_hud(self, screen: pygame.Surface, session: GameSession):
        d = self.dims
        f = self.font
        if session.score != self.hud.score:
            self.hud.score = session.score
            self.hud.score_s = f.render(f"Score: {session.score}", True, WHITE)
        if session.level != self.hud.level:
            self.hud.level = session.level
            self.hud.level_s = f.render(f"Level: {session.level}", True, WHITE)
        if session.lines_left != self.hud.lines:
            self.hud.lines = session.lines_left
            self.hud.lines_s = f.render(f"Lines Left: {session.lines_left}", True, WHITE)
        status = self.status_text(session)
        if status != self.hud.status:
            self.hud.status = status
            self.hud.status_s = f.render(status, True, WHITE) if status else None
        x = d.panel_x + 12
        screen.blit(self.hud.score_s, (x, d.panel_y + 44))
        screen.blit(self.hud.level_s, (x, d.panel_y + 68))
        screen.blit(self.hud.lines_s, (x, d.panel_y + 92))
        if self.hud.status_s: screen.blit(self.hud.status_s, (x, d.panel_y + 12))
        mute = "M Unmute" if session.muted else "M Mute"
        screen.blit(f.render(f"P Pause • {mute}", True, (165,175,215)), (x, d.panel_y + 140))

    @staticmethod
    def status_text(session: GameSession) -> str:
        if session.phase is Phase.PAUSED:
            return "" if session.pause_blink else "Resume (P)"
        return STATUS.get(session.phase, "Pause (P)")
