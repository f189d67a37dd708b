import logging
import sys

import pygame

from collapse_config import make_config
from collapse_input import handle_event
from collapse_layout import compute_dims
from collapse_render import RenderAssets
from collapse_session import GameSession

logger = logging.getLogger("collapse")


def recreate_window(dims, flags=pygame.DOUBLEBUF):
    try:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags, vsync=1)
    except TypeError:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags)


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN, pygame.MOUSEBUTTONDOWN])

    config = make_config()
    dims = compute_dims(config)
    screen = recreate_window(dims)
    pygame.display.set_caption("Collapse")
    font = pygame.font.SysFont(None, 22)

    render = RenderAssets(dims, font)
    clock = pygame.time.Clock()
    session = GameSession(config)

    while True:
        dt = clock.tick(60)

        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                pygame.quit(); sys.exit()
            handle_event(session, dims, e)

        session.tick(dt)

        for name in session.drain_events():
            # no audio backend; cues only go to the log
            if not session.silent:
                logger.info("cue %s", name)

        render.draw_board(screen, session.grid)
        render.draw_panel_hud(screen, session)
        pygame.display.flip()


if __name__ == '__main__':
    main()
