# src/tilegrid/engine/hooks.py
# Scene callbacks injected into a GridSurface. Every field defaults to a no-op,
# so a scene only supplies the ones it cares about.

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable


def _noop(*args, **kwargs) -> None:
    return None


@dataclass
class SurfaceHooks:
    # on_enter_frame(surface); on_touch_*(surface, x, y) with map-local x/y
    on_enter_frame: Callable[..., None] = _noop
    on_touch_start: Callable[..., None] = _noop
    on_touch_move: Callable[..., None] = _noop
    on_touch_end: Callable[..., None] = _noop
