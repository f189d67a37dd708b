import pygame
import pytest

from collapse_grid import BOMB
from collapse_layout import cell_origin, compute_dims
from collapse_render import RenderAssets
from collapse_session import GameSession, Phase


@pytest.fixture(scope="module", autouse=True)
def pygame_init():
    pygame.init()
    yield
    pygame.quit()


def center(dims, x, y):
    px, py = cell_origin(dims, x, y)
    return px + dims.tile // 2, py + dims.tile // 2


def make(rows):
    s = GameSession.from_grid(rows)
    d = compute_dims(s.config)
    r = RenderAssets(d, pygame.font.Font(None, 22))
    screen = pygame.Surface((d.total_w, d.total_h))
    return s, d, r, screen


def test_board_draws_tiles_and_dim_staging_row():
    s, d, r, screen = make([[1, 2, BOMB], [3, 0, 0]])
    r.draw_board(screen, s.grid)
    assert tuple(screen.get_at(center(d, 0, 0)))[:3] == (255, 0, 0)
    assert tuple(screen.get_at(center(d, 1, 0)))[:3] == (0, 255, 0)
    assert tuple(screen.get_at(center(d, 2, 0)))[:3] == (245, 212, 66)
    staged = tuple(screen.get_at(center(d, 0, 1)))[:3]
    assert staged[0] == 0 and staged[1] == 0 and 100 < staged[2] < 160
    assert tuple(screen.get_at(center(d, 1, 1)))[:3] == (0, 0, 0)


def test_hud_tracks_session_state():
    s, d, r, screen = make([[1, 1, 1], [0, 0, 0]])
    r.draw_panel_hud(screen, s)
    assert r.hud.score == 0
    s.tap(0, 0)
    r.draw_panel_hud(screen, s)
    assert r.hud.score == 3
    assert r.hud.lines == 0
    assert r.hud.status == "Pause (P)"


def test_status_text_per_phase():
    s, d, r, screen = make([[1, 1, 1], [0, 0, 0]])
    s.pause_resume()
    assert r.status_text(s) == "Resume (P)"
    s.pause_blink = True
    assert r.status_text(s) == ""
    s.phase = Phase.WON
    assert r.status_text(s).startswith("Win!")
    s.phase = Phase.GAME_OVER
    assert r.status_text(s).startswith("GAME OVER")
