# tests/conftest.py
import pygame
import pytest

from tilegrid.render.spritesheet import SpriteSheet


class RecordingTarget:
    """Drawing surface that remembers every blit instead of drawing it."""
    def __init__(self, width, height):
        self.width, self.height = width, height
        self.blits = []

    def get_width(self):
        return self.width

    def get_height(self):
        return self.height

    def blit(self, image, dest, area=None):
        self.blits.append((dest, tuple(area) if area is not None else None))


@pytest.fixture
def target():
    return RecordingTarget(100, 60)


@pytest.fixture
def sheet10():
    # 4 frames per row, 2 rows, 10px tiles
    return SpriteSheet(pygame.Surface((40, 20)), 10)
