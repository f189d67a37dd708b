"""pygame event -> session action"""
import logging

import pygame

from collapse_layout import Dims, cell_at
from collapse_session import GameSession, Phase

logger = logging.getLogger(__name__)


def handle_event(session: GameSession, dims: Dims, e) -> bool:
    """Apply one pygame event to the session; returns True if it was used."""
    if e.type == pygame.MOUSEBUTTONDOWN and e.button == 1:
        cell = cell_at(dims, *e.pos)
        if cell is None or not session.playing:
            return False
        points = session.tap(*cell)
        logger.debug("tap %s -> %d points", cell, points)
        return True
    if e.type != pygame.KEYDOWN:
        return False
    if e.key in (pygame.K_SPACE, pygame.K_RETURN) and session.phase is Phase.READY:
        session.start(); return True
    if e.key == pygame.K_p:
        session.pause_resume(); return True
    if e.key == pygame.K_r and session.finished:
        session.restart(); return True
    if e.key == pygame.K_m:
        session.toggle_mute(); return True
    return False
