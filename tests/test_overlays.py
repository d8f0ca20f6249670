# tests/test_overlays.py
import logging

import pygame

from tilegrid.coords import Vec
from tilegrid.engine.hooks import SurfaceHooks
from tilegrid.engine.overlay import OverlayTile, is_overlay
from tilegrid.engine.surface import GridSurface


class Probe:
    """Overlay that records what the surface told it."""
    def __init__(self, x, y, synchronized, log):
        self.position = Vec(x, y)
        self.synchronized = synchronized
        self.log = log

    def update(self, target):
        self.log.append(("update", getattr(self, "shift", None)))

    def assign_touch_event(self, event_type, finger_position):
        self.log.append(("touch", event_type, finger_position))


def make_surface(sheet):
    s = GridSurface(sheet, 10)
    s.grid = [[1] * 4 for _ in range(4)]
    return s

def test_capability_check_is_structural():
    assert is_overlay(Probe(0, 0, True, []))
    assert not is_overlay(object())

def test_rejected_overlay_is_reported_not_raised(sheet10, caplog):
    s = make_surface(sheet10)
    class Half:
        position = Vec()
        synchronized = True
        update = None  # not callable
    with caplog.at_level(logging.ERROR, logger="tilegrid.engine.surface"):
        assert s.add_overlay(Half()) is False
    assert s.overlays == []
    assert "update" in caplog.text and "assign_touch_event" in caplog.text

def test_initial_map_cell_depends_on_sync_flag(sheet10):
    s = make_surface(sheet10)
    s.position.x, s.position.y = 20, 10
    synced = Probe(30, 40, True, [])
    free = Probe(30, 40, False, [])
    assert s.add_overlay(synced) and s.add_overlay(free)
    assert synced.map_cell.as_tuple() == (3.0, 4.0)
    assert free.map_cell.as_tuple() == (1.0, 3.0)
    assert s.overlays == [synced, free]

def test_add_overlay_does_not_render(sheet10, target):
    s = make_surface(sheet10)
    log = []
    s.add_overlay(Probe(0, 0, True, log))
    assert log == [] and target.blits == []

def test_synchronized_shift_sees_advanced_position(sheet10, target):
    s = make_surface(sheet10)
    s.position.x, s.position.y = 5, 7
    s.velocity.x, s.velocity.y = -2, 3
    log = []
    synced = Probe(0, 0, True, log)
    free = Probe(0, 0, False, log)
    s.add_overlay(synced)
    s.add_overlay(free)
    s.update(target)
    assert synced.shift.as_tuple() == (3, 10)
    assert not hasattr(free, "shift")
    assert log == [("update", synced.shift), ("update", None)]

def test_shift_is_a_copy_of_position(sheet10, target):
    s = make_surface(sheet10)
    s.velocity.x = 1
    o = Probe(0, 0, True, [])
    s.add_overlay(o)
    s.update(target)
    s.position.x = 100
    assert o.shift.x == 1

def test_map_cell_recomputed_after_overlay_update(sheet10, target):
    s = make_surface(sheet10)
    s.velocity.x = 10

    class Walker(Probe):
        def update(self, target):
            self.position.x += 5

    free = Walker(20, 0, False, [])
    s.add_overlay(free)
    s.update(target)
    # position 25, grid origin now 10 -> (25 - 10) / 10
    assert free.map_cell.as_tuple() == (1.5, 0.0)

def test_update_order_render_hook_advance(sheet10, target):
    seen = []
    def on_enter_frame(surface):
        seen.append((len(target.blits), surface.position.as_tuple()))
    s = make_surface(sheet10)
    s.hooks = SurfaceHooks(on_enter_frame=on_enter_frame)
    s.velocity.x = 4
    s.update(target)
    assert seen == [(16, (0, 0))]
    assert s.position.as_tuple() == (4, 0)

def test_overlay_tile_draws_with_shift(sheet10, target):
    s = make_surface(sheet10)
    s.velocity.x, s.velocity.y = 3, 0
    tile = OverlayTile(sheet10, 6, Vec(20, 10))
    s.add_overlay(tile)
    s.update(target)
    dest, area = target.blits[-1]
    assert dest == (23, 10)
    assert area == (20, 10, 10, 10)
    assert tile.map_cell.as_tuple() == (2.0, 1.0)

def test_free_overlay_tile_ignores_grid_scroll(sheet10, target):
    s = make_surface(sheet10)
    s.velocity.x = 3
    tile = OverlayTile(sheet10, 1, Vec(20, 10), synchronized=False)
    s.add_overlay(tile)
    s.update(target)
    assert target.blits[-1][0] == (20, 10)
    assert tile.map_cell.as_tuple() == (1.7, 1.0)

def test_overlay_tile_is_accepted():
    sheet = GridSurface(pygame.Surface((40, 20)), 10).sheet
    assert is_overlay(OverlayTile(sheet, 0))

def test_tuple_position_is_rejected_without_raising(sheet10, caplog):
    s = make_surface(sheet10)
    class TuplePos(Probe):
        pass
    bad = TuplePos(0, 0, False, [])
    bad.position = (0, 0)
    with caplog.at_level(logging.ERROR, logger="tilegrid.engine.surface"):
        assert s.add_overlay(bad) is False
    assert s.overlays == []
    assert not hasattr(bad, "map_cell")
    assert "position" in caplog.text
    assert not is_overlay(bad)
