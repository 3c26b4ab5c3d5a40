"""pygame events -> reducer events (keyboard + gravity timer)"""
import logging
from typing import Iterable, List, Optional

import pygame

from tetris_config import CONFIG
from tetris_events import Event, Move, Rotate, GRAVITY

logger = logging.getLogger(__name__)

TICK = pygame.USEREVENT + 1

KEYMAP = {
    pygame.K_a: Move(-1, 0),
    pygame.K_d: Move(1, 0),
    pygame.K_s: Move(0, 1),
    pygame.K_w: Rotate(),
}


def start_ticks(rate_ms: Optional[int] = None):
    """Post a TICK event every rate_ms; the event source for gravity."""
    rate_ms = CONFIG["TICK_RATE_MS"] if rate_ms is None else rate_ms
    pygame.time.set_timer(TICK, rate_ms)
    logger.debug("gravity tick every %d ms", rate_ms)


def stop_ticks():
    pygame.time.set_timer(TICK, 0)


def translate(e: pygame.event.Event) -> Optional[Event]:
    if e.type == TICK:
        return GRAVITY
    if e.type == pygame.KEYDOWN:
        return KEYMAP.get(e.key)
    return None


def game_events(raw: Iterable[pygame.event.Event]) -> List[Event]:
    """Translate a batch of pygame events, keeping arrival order."""
    out = []
    for e in raw:
        ev = translate(e)
        if ev is not None:
            out.append(ev)
    return out
