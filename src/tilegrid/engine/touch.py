# src/tilegrid/engine/touch.py
from __future__ import annotations

from enum import Enum
from typing import Optional, Tuple

import pygame

from ..coords import Vec


class TouchEvent(str, Enum):
    START = "touchstart"
    MOVE = "touchmove"
    END = "touchend"


_MOUSE = {
    pygame.MOUSEBUTTONDOWN: TouchEvent.START,
    pygame.MOUSEMOTION: TouchEvent.MOVE,
    pygame.MOUSEBUTTONUP: TouchEvent.END,
}

_FINGER = {
    pygame.FINGERDOWN: TouchEvent.START,
    pygame.FINGERMOTION: TouchEvent.MOVE,
    pygame.FINGERUP: TouchEvent.END,
}


def touch_from_pygame_event(ev, screen_size: Tuple[int, int]) -> Optional[Tuple[TouchEvent, Vec]]:
    """
    Map a pygame mouse/finger event onto (TouchEvent, world position).
    Finger events carry normalised 0..1 coordinates and are scaled to the
    screen. Mouse motion only counts while the left button is held.
    """
    if ev.type in _MOUSE:
        if ev.type == pygame.MOUSEMOTION and not ev.buttons[0]:
            return None
        if ev.type != pygame.MOUSEMOTION and ev.button != 1:
            return None
        return _MOUSE[ev.type], Vec.of(ev.pos)
    if ev.type in _FINGER:
        w, h = screen_size
        return _FINGER[ev.type], Vec(ev.x * w, ev.y * h)
    return None
