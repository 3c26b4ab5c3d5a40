"""State reducer: one event in, one new GameState out"""
import logging
from dataclasses import replace
from itertools import accumulate
from typing import Iterable, Iterator

from tetris_board import collide, merge, clear_rows, top_row_filled
from tetris_config import GRID_WIDTH, GRID_HEIGHT
from tetris_events import Event, EventKind
from tetris_piece import Piece, rotate_cw
from tetris_rng import spawn_piece
from tetris_state import GameState

logger = logging.getLogger(__name__)


def should_lock(grid, piece: Piece) -> bool:
    if piece.y + piece.height > GRID_HEIGHT - 1:
        return True
    if collide(grid, piece, 0, 1):
        return True
    return piece.y < -1


def clamp_x(piece: Piece) -> Piece:
    if piece.x < 0:
        piece = piece.at(0, piece.y)
    if piece.x + piece.width > GRID_WIDTH:
        piece = piece.at(GRID_WIDTH - piece.width, piece.y)
    return piece


def apply_event(state: GameState, event: Event) -> Piece:
    """Move or rotate the falling piece; a colliding rotation is dropped."""
    piece = state.falling_block
    if event.kind is EventKind.MOVE:
        piece = piece.moved(event.dx, event.dy)
    elif event.kind is EventKind.ROTATE:
        rotated = piece.with_shape(rotate_cw(piece.shape))
        if not collide(state.grid, rotated):
            piece = rotated
    # clamp runs after the rotation check and is not re-validated
    return clamp_x(piece)


def lock(state: GameState, piece: Piece) -> GameState:
    grid = merge(state.grid, piece)
    fresh, seed = spawn_piece(state.seed)
    if top_row_filled(grid):
        logger.debug("lock at (%d, %d) reached the top row; game over", piece.x, piece.y)
        return replace(state, grid=grid, seed=seed, game_end=True)
    logger.debug("locked color %d at (%d, %d)", piece.color, piece.x, piece.y)
    # completed rows stay until the next non-locking event
    return replace(
        state,
        grid=grid,
        falling_block=state.next_block,
        next_block=fresh,
        seed=seed,
    )


def step(state: GameState, event: Event) -> GameState:
    """Fold one event into the state. Total: never raises for a valid event."""
    if state.game_end:
        return state
    piece = apply_event(state, event)
    if should_lock(state.grid, piece):
        return lock(state, piece)
    if piece.y < -1:
        return replace(state, game_end=True)
    grid, score, level = clear_rows(state.grid, state.score, state.level)
    if score != state.score:
        logger.debug("cleared rows: score %d -> %d, level %d", state.score, score, level)
    return replace(state, grid=grid, falling_block=piece, score=score, level=level)


def scan(events: Iterable[Event], state: GameState) -> Iterator[GameState]:
    """Yield the initial state and then the state after each event."""
    return accumulate(events, step, initial=state)


def run(events: Iterable[Event], state: GameState) -> GameState:
    for state in scan(events, state):
        pass
    return state
