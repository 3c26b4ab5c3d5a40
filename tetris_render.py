"""
Rendering helpers for the Tetris shell.

The renderer only reads a GameState (grid, falling_block, next_block, score,
level, game_end) and never talks back to the reducer.

- Pre-render one cell Surface per color id and blit them.
- Pre-render the static background (board frame, grid lines, preview frame).
- Cache HUD text surfaces; re-render only when values change.
- The falling piece is drawn through a preview merge into a copy of the grid.
"""
from __future__ import annotations
import pygame
from dataclasses import dataclass
from typing import Dict, Tuple, Optional
from tetris_board import Board, merge
from tetris_config import GRID_WIDTH, GRID_HEIGHT
from tetris_layout import Dims
from tetris_piece import Piece
from tetris_state import GameState

# Color per color id; anything else draws black
COLORS: Dict[int, Tuple[int,int,int]] = {
    1: (255,255,0),     # yellow
    2: (0,255,255),     # cyan
    3: (128,0,128),     # purple
    4: (255,165,0),     # orange
    5: (0,0,255),       # blue
    6: (255,0,0),       # red
    7: (0,128,0),       # green
}
BLACK = (0,0,0)

def block_colour(color_id: int) -> Tuple[int,int,int]:
    return COLORS.get(color_id, BLACK)

@dataclass
class HudCache:
    score: int = -1
    level: int = -1
    next_block: Optional[Piece] = None
    score_s: Optional[pygame.Surface] = None
    level_s: Optional[pygame.Surface] = None
    next_label: Optional[pygame.Surface] = None
    game_over: Optional[pygame.Surface] = None

class RenderAssets:
    """Holds all pre-rendered assets for fast blitting."""
    def __init__(self, dims: Dims, font: pygame.font.Font, big_font: pygame.font.Font):
        self.dims = dims
        self.font = font
        self.big_font = big_font
        self._make_static()
        self._make_cells()
        self.hud = HudCache()

    # ---------- Static background (grid + preview frame) ----------
    def _make_static(self):
        d = self.dims
        self.bg = pygame.Surface((d.total_w, d.total_h))
        self.bg.fill((10,13,34))
        pygame.draw.rect(self.bg, BLACK, (d.board_x, d.board_y, d.board_w, d.board_h))
        grid_col = (40,50,90)
        for x in range(GRID_WIDTH+1):
            X = d.board_x + x*d.cell
            pygame.draw.line(self.bg, grid_col, (X, d.board_y), (X, d.board_y + d.board_h))
        for y in range(GRID_HEIGHT+1):
            Y = d.board_y + y*d.cell
            pygame.draw.line(self.bg, grid_col, (d.board_x, Y), (d.board_x + d.board_w, Y))
        self.pv_rect = pygame.Rect(d.panel_x, d.panel_y, d.preview_w, d.preview_h)
        pygame.draw.rect(self.bg, (15,18,40), self.pv_rect)
        pygame.draw.rect(self.bg, (55,65,110), self.pv_rect, 1)

    # ---------- Small cell sprites ----------
    def _make_cells(self):
        self.cell_surf: Dict[int, pygame.Surface] = {}
        c = self.dims.cell
        for color_id, col in COLORS.items():
            s = pygame.Surface((c-2, c-2))
            s.fill(col)
            self.cell_surf[color_id] = s

    def _cell(self, color_id: int) -> pygame.Surface:
        if color_id not in self.cell_surf:
            s = pygame.Surface((self.dims.cell-2, self.dims.cell-2))
            s.fill(block_colour(color_id))
            self.cell_surf[color_id] = s
        return self.cell_surf[color_id]

    # ---------- Board ----------
    def draw_board(self, screen: pygame.Surface, grid: Board):
        d = self.dims
        for y, row in enumerate(grid):
            for x, v in enumerate(row):
                if v:
                    screen.blit(self._cell(v), (d.board_x + x*d.cell + 1, d.board_y + y*d.cell + 1))

    # ---------- Next preview ----------
    def _render_preview(self, piece: Piece) -> pygame.Surface:
        pc = self.dims.preview_cell
        s = pygame.Surface((self.dims.preview_w, self.dims.preview_h), pygame.SRCALPHA)
        offx = (self.dims.preview_w // pc - piece.width) // 2
        offy = max(0, (self.dims.preview_h // pc - piece.height) // 2)
        for y, row in enumerate(piece.shape):
            for x, v in enumerate(row):
                if v:
                    block = pygame.Surface((pc-2, pc-2))
                    block.fill(block_colour(piece.color))
                    s.blit(block, ((x + offx)*pc + 1, (y + offy)*pc + 1))
        return s

    # ---------- HUD / Panel ----------
    def draw_panel_hud(self, screen: pygame.Surface, s: GameState):
        d = self.dims
        f = self.font
        if s.score != self.hud.score:
            self.hud.score = s.score
            self.hud.score_s = f.render(f"Score: {s.score}", True, (200,210,240))
        if s.level != self.hud.level:
            self.hud.level = s.level
            self.hud.level_s = f.render(f"Level: {s.level}", True, (200,210,240))
        if s.next_block != self.hud.next_block:
            self.hud.next_block = s.next_block
            self.hud.next_label = self._render_preview(s.next_block)
        screen.blit(self.hud.next_label, self.pv_rect.topleft)
        y = d.panel_y + d.preview_h + 16
        screen.blit(self.hud.level_s, (d.panel_x, y))
        screen.blit(self.hud.score_s, (d.panel_x, y + 24))

    def draw_game_over(self, screen: pygame.Surface):
        d = self.dims
        if self.hud.game_over is None:
            self.hud.game_over = self.big_font.render("Game Over", True, (255,220,220))
        rect = self.hud.game_over.get_rect(center=(d.board_x + d.board_w // 2, d.board_y + d.board_h // 2))
        screen.blit(self.hud.game_over, rect)

    def render(self, screen: pygame.Surface, s: GameState):
        """Draw one frame. After game end the last board stays and the banner is shown."""
        if not s.game_end:
            screen.blit(self.bg, (0,0))
            self.draw_board(screen, merge(s.grid, s.falling_block))
            self.draw_panel_hud(screen, s)
        else:
            self.draw_game_over(screen)
