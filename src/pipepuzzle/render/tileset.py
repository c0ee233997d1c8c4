from __future__ import annotations
import pygame
from functools import lru_cache

from ..tiles import DIRECTIONS, Shape, connections

PIPE_COLOR = (176, 176, 176, 255)
EDGE_COLOR = (136, 136, 136, 255)
FLOW_COLOR = (90, 170, 255, 255)     # tiles on the solved path
CELL_COLOR = (245, 245, 245, 255)
GRID_COLOR = (200, 200, 200, 255)

class PipeTileset:
    """
    Draws pipe tiles from their open ports instead of loading art:
      - one arm per open port, from the edge to the tile centre
      - a hub in the centre, rounded like the original metal pipes
      - cached per (shape, rotation, highlighted)
    """
    def __init__(self, tile_size: int, font=None):
        self.tile_size = tile_size
        self.font = font or pygame.font.SysFont(None, max(10, tile_size // 5))

    def _arm_rect(self, direction: int, pipe_w: int) -> pygame.Rect:
        s = self.tile_size
        half = s // 2
        lo = half - pipe_w // 2
        if direction == 0:   # up
            return pygame.Rect(lo, 0, pipe_w, half + pipe_w // 2)
        if direction == 1:   # right
            return pygame.Rect(lo, lo, s - lo, pipe_w)
        if direction == 2:   # down
            return pygame.Rect(lo, lo, pipe_w, s - lo)
        return pygame.Rect(0, lo, half + pipe_w // 2, pipe_w)  # left

    @lru_cache(maxsize=64)
    def get(self, shape: Shape, rotation: int, highlighted: bool = False) -> pygame.Surface:
        s = self.tile_size
        pipe_w = max(4, s // 3)
        img = pygame.Surface((s, s), pygame.SRCALPHA)
        img.fill(CELL_COLOR)
        pygame.draw.rect(img, GRID_COLOR, img.get_rect(), 1)
        fill = FLOW_COLOR if highlighted else PIPE_COLOR
        ports = connections(shape, rotation)
        for d in DIRECTIONS:
            if ports[d]:
                r = self._arm_rect(d, pipe_w)
                pygame.draw.rect(img, fill, r, border_radius=pipe_w // 2)
                pygame.draw.rect(img, EDGE_COLOR, r, 2, border_radius=pipe_w // 2)
        pygame.draw.circle(img, fill, (s // 2, s // 2), pipe_w // 2)
        return img

    def label(self, text: str) -> pygame.Surface:
        return self.font.render(text, True, (0, 0, 0))
