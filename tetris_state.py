"""Game state value and its construction"""
import random
from dataclasses import dataclass
from typing import Optional

from tetris_board import Board, empty_board
from tetris_piece import Piece, TETROMINOES
from tetris_rng import LCG_M, entropy_seed


@dataclass(frozen=True)
class GameState:
    grid: Board
    falling_block: Piece
    next_block: Piece
    score: int = 0
    level: int = 1
    game_end: bool = False
    seed: int = 0


def initial_state(seed: Optional[int] = None, chooser=None) -> GameState:
    """Empty board and two independently chosen catalog pieces.

    The first two pieces come from `chooser` (anything with `randrange`,
    the `random` module by default), not from the seeded LCG, and keep the
    catalog anchor one row above the board.
    """
    if seed is None:
        seed = entropy_seed()
    chooser = chooser or random
    falling = TETROMINOES[chooser.randrange(len(TETROMINOES))]
    nxt = TETROMINOES[chooser.randrange(len(TETROMINOES))]
    return GameState(
        grid=empty_board(),
        falling_block=falling,
        next_block=nxt,
        seed=seed % LCG_M,
    )
