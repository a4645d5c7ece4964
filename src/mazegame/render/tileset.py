# src/mazegame/render/tileset.py
from __future__ import annotations

from functools import lru_cache

import pygame

from ..tiles import COLORS, PLAYER_COLOR, Tile


class Tileset:
    """
    Tiny cached surface factory:
      - one flat-coloured square per Tile
      - a round player marker on a transparent square
    All surfaces are exactly (tile_size, tile_size).
    """
    def __init__(self, tile_size: int):
        self.tile_size = tile_size

    @lru_cache(maxsize=8)
    def get(self, tile: Tile) -> pygame.Surface:
        img = pygame.Surface((self.tile_size, self.tile_size), pygame.SRCALPHA)
        img.fill(COLORS[tile])
        return img

    @lru_cache(maxsize=1)
    def player(self) -> pygame.Surface:
        img = pygame.Surface((self.tile_size, self.tile_size), pygame.SRCALPHA)
        r = max(1, self.tile_size // 2 - self.tile_size // 6)
        pygame.draw.circle(img, PLAYER_COLOR, (self.tile_size // 2, self.tile_size // 2), r)
        return img
