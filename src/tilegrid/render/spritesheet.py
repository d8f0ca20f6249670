# src/tilegrid/render/spritesheet.py
from __future__ import annotations

from functools import lru_cache
from typing import Tuple

import pygame

from ..errors import ConfigurationError


def image_width(image) -> int:
    # pygame surfaces expose get_width(); Pillow images expose .width
    if hasattr(image, "get_width"):
        return image.get_width()
    return image.width


class SpriteSheet:
    """
    A sheet of square frames laid out left-to-right, top-to-bottom.
    Tile index i lives at column i % columns, row i // columns.
    """
    def __init__(self, image, tile_size: int):
        if isinstance(tile_size, bool) or not isinstance(tile_size, int) or tile_size <= 0:
            raise ConfigurationError(f"tile_size must be a positive int, got {tile_size!r}")
        width = image_width(image)
        if width % tile_size:
            raise ConfigurationError(
                f"sprite sheet width {width} is not a multiple of tile size {tile_size}"
            )
        self.image = image
        self.tile_size = tile_size
        self.columns = width // tile_size
        if self.columns == 0:
            raise ConfigurationError(f"sprite sheet narrower than one tile ({width}px)")

    def frame(self, tile_index: int) -> Tuple[int, int]:
        return tile_index % self.columns, tile_index // self.columns

    def source_rect(self, tile_index: int) -> pygame.Rect:
        fx, fy = self.frame(tile_index)
        s = self.tile_size
        return pygame.Rect(fx * s, fy * s, s, s)


@lru_cache(maxsize=32)
def load_sprite_sheet(path: str, tile_size: int) -> SpriteSheet:
    """Load once per (path, tile_size). Needs an initialised display for convert_alpha()."""
    img = pygame.image.load(path)
    if pygame.display.get_init() and pygame.display.get_surface() is not None:
        img = img.convert_alpha()
    return SpriteSheet(img, tile_size)
