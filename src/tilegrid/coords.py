# src/tilegrid/coords.py
"""
Three coordinate spaces meet here:
  - world:     pixels on the shared drawing surface
  - map-local: pixels relative to the grid origin (grid.position)
  - cell:      (col, row) indices into the tile matrix
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Union

XY = Tuple[int, int]


@dataclass
class Vec:
    x: float = 0
    y: float = 0

    @classmethod
    def of(cls, p: Union["Vec", Tuple[float, float]]) -> "Vec":
        if isinstance(p, Vec):
            return cls(p.x, p.y)
        x, y = p
        return cls(x, y)

    def copy(self) -> "Vec":
        return Vec(self.x, self.y)

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def __add__(self, other: "Vec") -> "Vec":
        return Vec(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vec") -> "Vec":
        return Vec(self.x - other.x, self.y - other.y)

    def __truediv__(self, k: float) -> "Vec":
        return Vec(self.x / k, self.y / k)


def world_to_local(world: Vec, origin: Vec) -> Vec:
    return world - origin


def map_cell_for(position: Vec, tile_size: int, synchronized: bool, origin: Vec) -> Vec:
    """
    Fractional cell coordinates of an overlay.
    Synchronized overlays keep their position in map-local space already;
    free ones are placed in world space and get the origin removed first.
    """
    if synchronized:
        return position / tile_size
    return (position - origin) / tile_size


def cell_of(local: Vec, tile_size: int) -> XY:
    # floor division so that -1px lands in cell -1, not 0
    return (int(local.x // tile_size), int(local.y // tile_size))
