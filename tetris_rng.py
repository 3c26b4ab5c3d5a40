"""Seeded LCG piece generator; the seed is threaded, never stored"""
import random
from typing import Tuple

from tetris_config import SPAWN_X
from tetris_piece import Piece, TETROMINOES

LCG_A = 1664525
LCG_C = 1013904223
LCG_M = 2 ** 32


def entropy_seed() -> int:
    """One-shot seed for process start."""
    return random.SystemRandom().randrange(LCG_M)


def draw(seed: int) -> Tuple[float, int]:
    """Advance the seed; return (value in [0, 1), new seed)."""
    seed = (LCG_A * seed + LCG_C) % LCG_M
    return seed / LCG_M, seed


def next_piece_index(seed: int) -> Tuple[int, int]:
    value, seed = draw(seed)
    return int(value * len(TETROMINOES)), seed


def spawn_piece(seed: int) -> Tuple[Piece, int]:
    """Catalog entry for the next index, anchored at the top row."""
    i, seed = next_piece_index(seed)
    return TETROMINOES[i].at(SPAWN_X, 0), seed
