import logging
import sys

import pygame

from tetris_config import CONFIG
from tetris_input import TICK, start_ticks, stop_ticks, game_events
from tetris_layout import compute_dims
from tetris_reducer import step
from tetris_render import RenderAssets
from tetris_rng import entropy_seed
from tetris_state import initial_state

logger = logging.getLogger("tetris")


def recreate_window(dims, flags=pygame.DOUBLEBUF):
    try:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags, vsync=1)
    except TypeError:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags)


def new_game():
    seed = CONFIG["SEED"]
    if seed is None:
        seed = entropy_seed()
    logger.info("new game, seed=%d", seed)
    return initial_state(seed)


def main():
    logging.basicConfig(level=CONFIG["LOG_LEVEL"], format="%(asctime)s %(name)s %(levelname)s %(message)s")
    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN, TICK])

    dims = compute_dims()
    screen = recreate_window(dims)
    pygame.display.set_caption("Tetris")
    font = pygame.font.SysFont(None, 22)
    big_font = pygame.font.SysFont(None, 42)
    render = RenderAssets(dims, font, big_font)
    clock = pygame.time.Clock()

    state = new_game()
    start_ticks()

    while True:
        clock.tick(60)
        raw = pygame.event.get()
        for e in raw:
            if e.type == pygame.QUIT:
                stop_ticks()
                pygame.quit(); sys.exit()
            if e.type == pygame.KEYDOWN and e.key == pygame.K_r and state.game_end:
                state = new_game()
        was_over = state.game_end
        for ev in game_events(raw):
            state = step(state, ev)
        if state.game_end and not was_over:
            logger.info("game over: score=%d level=%d", state.score, state.level)

        render.render(screen, state)
        pygame.display.flip()


if __name__ == '__main__':
    main()
