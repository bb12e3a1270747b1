
"""
Rendering for the Tetris board.

The renderer only reads the game: settled cells from the grid, the falling
piece, the score and the phase. Colors are palette ids; an id outside the
palette is skipped rather than drawn.
"""
from __future__ import annotations
import logging
from typing import Optional, Tuple

import pygame

from tetris_layout import Dims
from tetris_overlay import Overlay
from tetris_piece import PALETTE

log = logging.getLogger(__name__)

TEXT_COLOR: Tuple[int, int, int] = (255, 255, 255)


class Renderer:
    def __init__(self, screen: Optional[pygame.Surface], dims: Dims,
                 font: Optional[pygame.font.Font] = None,
                 big_font: Optional[pygame.font.Font] = None,
                 flip: bool = True):
        self.screen = screen
        self.dims = dims
        self.font = font or pygame.font.SysFont(None, 20)
        self.overlay = Overlay(big_font or pygame.font.SysFont(None, 40))
        self.flip = flip

    def draw(self, game) -> None:
        if self.screen is None:
            log.warning("no surface to draw on, skipping frame")
            return
        self.screen.fill(PALETTE[0])

        for y, row in enumerate(game.grid):
            for x, color in enumerate(row):
                if color:
                    self.draw_block(x, y, color)

        if game.piece is not None:
            for x, y in game.piece.cells():
                self.draw_block(x, y, game.piece.color)

        score = self.font.render(f"Score: {game.score}", True, TEXT_COLOR)
        self.screen.blit(score, (10, 10))

        self.overlay.draw(self.screen, game.phase)

        if self.flip:
            pygame.display.flip()

    def draw_block(self, x: int, y: int, color: int) -> bool:
        if not 0 <= color < len(PALETTE):
            return False
        c = self.dims.cell
        pygame.draw.rect(self.screen, PALETTE[color], (x * c, y * c, c - 1, c - 1))
        return True
