import pygame
import pytest

from collapse_config import make_config
from collapse_input import handle_event
from collapse_layout import cell_at, cell_origin, compute_dims
from collapse_session import GameSession, Phase


@pytest.fixture
def dims():
    return compute_dims(make_config())


def test_dims_cover_grid_and_staging_row(dims):
    assert dims.pitch == 35
    assert dims.cols == 12
    assert dims.rows == 17
    assert dims.board_w == 12 * 35
    assert dims.total_w == 20 + 12 * 35 + 20 + 220 + 20


def test_cell_at_converts_pointer_to_cell(dims):
    assert cell_at(dims, 20, 20) == (0, 0)
    assert cell_at(dims, 20 + 35 * 3 + 5, 20 + 35 * 2) == (3, 2)
    assert cell_at(dims, *cell_origin(dims, 11, 16)) == (11, 16)


@pytest.mark.parametrize("pos", [(19, 30), (30, 0), (20 + 35 * 12, 30), (30, 20 + 35 * 17)])
def test_cell_at_outside_board(dims, pos):
    assert cell_at(dims, *pos) is None


def click(dims, x, y, button=1):
    px, py = cell_origin(dims, x, y)
    return pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=button, pos=(px + 1, py + 1))


def key(k):
    return pygame.event.Event(pygame.KEYDOWN, key=k)


def test_click_taps_cell():
    s = GameSession.from_grid([[1, 1, 1], [0, 0, 0]])
    d = compute_dims(s.config)
    assert handle_event(s, d, click(d, 1, 0)) is True
    assert s.score == 3


def test_right_click_and_click_outside_are_ignored():
    s = GameSession.from_grid([[1, 1, 1], [0, 0, 0]])
    d = compute_dims(s.config)
    assert handle_event(s, d, click(d, 1, 0, button=3)) is False
    outside = pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(0, 0))
    assert handle_event(s, d, outside) is False
    assert s.score == 0


def test_keys_drive_session(small_config):
    s = GameSession(small_config)
    d = compute_dims(small_config)
    assert handle_event(s, d, key(pygame.K_r)) is False
    assert handle_event(s, d, key(pygame.K_SPACE)) is True
    assert s.playing
    handle_event(s, d, key(pygame.K_p))
    assert s.phase is Phase.PAUSED
    handle_event(s, d, key(pygame.K_p))
    assert s.playing
    handle_event(s, d, key(pygame.K_m))
    assert s.muted
    s.game_over()
    assert handle_event(s, d, key(pygame.K_r)) is True
    assert s.playing
    assert handle_event(s, d, key(pygame.K_a)) is False
