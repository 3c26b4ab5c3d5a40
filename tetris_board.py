"""Board helpers: collide, merge, clear_rows"""
from typing import Tuple

from tetris_config import GRID_WIDTH, GRID_HEIGHT, POINTS_PER_ROW, POINTS_PER_LEVEL
from tetris_piece import Piece

Row = Tuple[int, ...]
Board = Tuple[Row, ...]

EMPTY_ROW: Row = (0,) * GRID_WIDTH


def empty_board() -> Board:
    return (EMPTY_ROW,) * GRID_HEIGHT


def collide(board: Board, piece: Piece, dx: int = 0, dy: int = 0) -> bool:
    """True if the piece, shifted by (dx, dy), hits a wall, the floor or a locked cell.

    Rows above the board never collide, so pieces may hang over the top.
    """
    for bx, by in piece.cells():
        bx, by = bx + dx, by + dy
        if bx < 0 or bx >= GRID_WIDTH or by >= GRID_HEIGHT:
            return True
        if by >= 0 and board[by][bx] != 0:
            return True
    return False


def merge(board: Board, piece: Piece) -> Board:
    """Return a new board with the piece written in; filled cells are kept."""
    rows = [list(r) for r in board]
    for bx, by in piece.cells():
        if 0 <= by < GRID_HEIGHT and 0 <= bx < GRID_WIDTH and rows[by][bx] <= 0:
            rows[by][bx] = piece.color
    return tuple(tuple(r) for r in rows)


def clear_rows(board: Board, score: int, level: int) -> Tuple[Board, int, int]:
    """Drop complete rows, refill from the top, award points and recompute level."""
    kept = tuple(r for r in board if 0 in r)
    cleared = len(board) - len(kept)
    score += cleared * POINTS_PER_ROW
    level = score // POINTS_PER_LEVEL + 1
    return (EMPTY_ROW,) * cleared + kept, score, level


def top_row_filled(board: Board) -> bool:
    return any(board[0])
