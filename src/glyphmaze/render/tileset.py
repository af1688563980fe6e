# src/glyphmaze/render/tileset.py
from __future__ import annotations
import pygame
from functools import lru_cache
from typing import Tuple

from ..glyphs import ATLAS

FLOOR_COLOR: Tuple[int, int, int] = (235, 235, 220)
WALL_COLOR: Tuple[int, int, int] = (40, 40, 40)

class Tileset:
    """
    Tiny cached surface builder:
      - one surface per N,E,S,W wall pattern ("0000".."1111")
      - walls drawn as filled bars along the tile edges
      - view() scales on demand and caches per size
    """
    def __init__(self, tile_size: int, wall_width: int = 2):
        if tile_size < 2 * wall_width:
            raise ValueError("tile_size too small for wall width")
        self.tile_size = tile_size
        self.wall_width = wall_width

    @lru_cache(maxsize=64)
    def get(self, key: str) -> pygame.Surface:
        if key not in ATLAS:
            raise KeyError(key)
        t, w = self.tile_size, self.wall_width
        img = pygame.Surface((t, t))
        img.fill(FLOOR_COLOR)
        north, east, south, west = (ch == "1" for ch in key)
        if north: pygame.draw.rect(img, WALL_COLOR, pygame.Rect(0, 0, t, w))
        if east:  pygame.draw.rect(img, WALL_COLOR, pygame.Rect(t - w, 0, w, t))
        if south: pygame.draw.rect(img, WALL_COLOR, pygame.Rect(0, t - w, t, w))
        if west:  pygame.draw.rect(img, WALL_COLOR, pygame.Rect(0, 0, w, t))
        return img

    @lru_cache(maxsize=512)
    def view(self, key: str, size: int) -> pygame.Surface:
        base = self.get(key)
        if base.get_size() == (size, size):
            return base
        return pygame.transform.scale(base, (size, size))
