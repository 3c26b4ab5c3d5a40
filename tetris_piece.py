"""Piece model, catalog, clockwise rotation"""
from dataclasses import dataclass, replace
from typing import Tuple

from tetris_config import SPAWN_X

Shape = Tuple[Tuple[int, ...], ...]


@dataclass(frozen=True)
class Piece:
    shape: Shape
    color: int
    x: int
    y: int

    @property
    def width(self) -> int:
        return len(self.shape[0])

    @property
    def height(self) -> int:
        return len(self.shape)

    def moved(self, dx: int, dy: int) -> "Piece":
        return replace(self, x=self.x + dx, y=self.y + dy)

    def with_shape(self, shape: Shape) -> "Piece":
        return replace(self, shape=shape)

    def at(self, x: int, y: int) -> "Piece":
        return replace(self, x=x, y=y)

    def cells(self):
        """Yield absolute (x, y) of every occupied cell."""
        for r, row in enumerate(self.shape):
            for c, v in enumerate(row):
                if v:
                    yield self.x + c, self.y + r


def _shape(rows) -> Shape:
    return tuple(tuple(r) for r in rows)


PIECE_NAMES = ("O", "I", "T", "L", "J", "S", "Z")

SHAPES = {
    "O": _shape([[1,1],[1,1]]),
    "I": _shape([[1,1,1,1]]),
    "T": _shape([[0,1,0],[1,1,1]]),
    "L": _shape([[1,1,1],[1,0,0]]),
    "J": _shape([[1,1,1],[0,0,1]]),
    "S": _shape([[1,1,0],[0,1,1]]),
    "Z": _shape([[0,1,1],[1,1,0]]),
}

# Index order is part of the RNG contract: index i has color i + 1.
TETROMINOES: Tuple[Piece, ...] = tuple(
    Piece(SHAPES[t], i + 1, SPAWN_X, -1) for i, t in enumerate(PIECE_NAMES)
)


def rotate_cw(m: Shape) -> Shape:
    """Transpose then reverse each row; R x C becomes C x R."""
    return tuple(tuple(reversed(col)) for col in zip(*m))
