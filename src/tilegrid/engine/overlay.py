# src/tilegrid/engine/overlay.py
# Overlay capability set + a small reference overlay.
#
# A GridSurface accepts anything that quacks like an overlay; it never checks
# the concrete class. It writes exactly two fields on an overlay:
#   shift    - grid position for this frame (synchronized overlays only)
#   map_cell - fractional cell coordinates, recomputed every frame

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional, Protocol, Tuple

from ..coords import Vec

REQUIRED_ATTRS = ("position", "synchronized")
REQUIRED_METHODS = ("update", "assign_touch_event")


class Overlay(Protocol):
    position: Vec
    synchronized: bool

    def update(self, target) -> None: ...

    def assign_touch_event(self, event_type, finger_position) -> None: ...


def missing_capabilities(obj) -> Tuple[str, ...]:
    missing = [a for a in REQUIRED_ATTRS if not hasattr(obj, a)]
    # position is read as a point, so a bare tuple does not qualify
    if "position" not in missing:
        pos = obj.position
        if not (hasattr(pos, "x") and hasattr(pos, "y")):
            missing.insert(0, "position.x/position.y")
    missing += [m for m in REQUIRED_METHODS if not callable(getattr(obj, m, None))]
    return tuple(missing)


def is_overlay(obj) -> bool:
    return not missing_capabilities(obj)


@dataclass
class OverlayTile:
    """
    One sprite-sheet frame placed over the grid.

    position is map-local when synchronized (the grid's scroll is added back
    through shift at draw time) and world-space otherwise.
    """
    sheet: object
    tile_index: int
    position: Vec = field(default_factory=Vec)
    synchronized: bool = True

    shift: Vec = field(default_factory=Vec)
    map_cell: Vec = field(default_factory=Vec)

    # optional per-overlay touch handler: fn(overlay, event_type, finger_position)
    on_touch: Optional[Callable[..., None]] = None

    def screen_position(self) -> Vec:
        if self.synchronized:
            return self.position + self.shift
        return self.position.copy()

    def update(self, target) -> None:
        self.render(target)

    def render(self, target) -> None:
        p = self.screen_position()
        target.blit(self.sheet.image, (p.x, p.y), self.sheet.source_rect(self.tile_index))

    def contains(self, finger_position: Vec) -> bool:
        p = self.screen_position()
        s = self.sheet.tile_size
        return p.x <= finger_position.x <= p.x + s and p.y <= finger_position.y <= p.y + s

    def assign_touch_event(self, event_type, finger_position) -> None:
        if self.on_touch is not None and self.contains(finger_position):
            self.on_touch(self, event_type, finger_position)
