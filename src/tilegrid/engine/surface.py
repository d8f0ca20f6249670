# src/tilegrid/engine/surface.py
# GridSurface: scrolling tile map + overlays + touch routing.
# Frame order inside update():
#   render -> on_enter_frame hook -> advance position -> overlays (shift, update, map_cell)
# Overlays therefore always see the grid position *after* this frame's advance.

from __future__ import annotations

import logging
from typing import Iterator, List, Optional, Sequence, Set, Tuple, Union

from ..config import DEFAULTS, SurfaceConfig
from ..coords import Vec, cell_of, map_cell_for, world_to_local
from ..errors import CapabilityMismatch, ConfigurationError
from ..grid import TileGrid
from ..render.spritesheet import SpriteSheet, load_sprite_sheet
from .hooks import SurfaceHooks
from .overlay import Overlay, missing_capabilities
from .touch import TouchEvent

logger = logging.getLogger(__name__)

VisibleCell = Tuple[int, int, int, float, float]  # x, y, tile, screen_x, screen_y


class GridSurface:
    def __init__(
        self,
        sheet: Union[SpriteSheet, str, object],
        tile_size: Optional[int] = None,
        *,
        config: Optional[SurfaceConfig] = None,
        hooks: Optional[SurfaceHooks] = None,
    ) -> None:
        config = config or DEFAULTS
        if tile_size is not None:
            config = SurfaceConfig(tile_size=tile_size, obstacle_indices=config.obstacle_indices)
        self._tile_size = config.resolved_tile_size()

        self.sheet = self._coerce_sheet(sheet)

        self.position = Vec(0, 0)
        self.velocity = Vec(0, 0)
        self._grid: Optional[TileGrid] = None
        self.overlays: List[Overlay] = []
        self.obstacle_indices: Set[int] = set(config.obstacle_indices)
        self.hooks = hooks or SurfaceHooks()

    def _coerce_sheet(self, sheet) -> SpriteSheet:
        if isinstance(sheet, str):
            return load_sprite_sheet(sheet, self._tile_size)
        if isinstance(sheet, SpriteSheet):
            if sheet.tile_size != self._tile_size:
                raise ConfigurationError(
                    f"sheet frames are {sheet.tile_size}px but surface tiles are {self._tile_size}px"
                )
            return sheet
        return SpriteSheet(sheet, self._tile_size)

    # ---------- configuration ----------

    @property
    def tile_size(self) -> int:
        return self._tile_size

    @property
    def grid(self) -> TileGrid:
        if self._grid is None:
            raise ConfigurationError("no grid assigned to this surface")
        return self._grid

    @grid.setter
    def grid(self, rows: Union[TileGrid, Sequence[Sequence[int]]]) -> None:
        self._grid = TileGrid.from_rows(rows)

    # ---------- overlays ----------

    def _sync_map_cell(self, overlay) -> None:
        overlay.map_cell = map_cell_for(
            overlay.position, self._tile_size, overlay.synchronized, self.position
        )

    def add_overlay(self, overlay) -> bool:
        """Register an overlay. Rejected objects are logged, not raised."""
        missing = missing_capabilities(overlay)
        if missing:
            err = CapabilityMismatch(overlay, missing)
            logger.error("add_overlay rejected: %s", err)
            return False
        self._sync_map_cell(overlay)
        self.overlays.append(overlay)
        return True

    # ---------- queries ----------

    def tile_at(self, map_x: int, map_y: int) -> int:
        return self.grid.get(map_x, map_y)

    def has_obstacle(self, map_x: int, map_y: int) -> bool:
        return self.tile_at(map_x, map_y) in self.obstacle_indices

    def cell_at(self, world: Union[Vec, Tuple[float, float]]) -> Tuple[int, int]:
        """Grid cell under a world-space point (may lie outside the grid)."""
        return cell_of(world_to_local(Vec.of(world), self.position), self._tile_size)

    # ---------- frame ----------

    def update(self, target) -> None:
        self.render(target)
        self.hooks.on_enter_frame(self)

        self.position.x += self.velocity.x
        self.position.y += self.velocity.y

        for overlay in self.overlays:
            if overlay.synchronized:
                overlay.shift = self.position.copy()
            overlay.update(target)
            self._sync_map_cell(overlay)

    def visible_cells(self, width: int, height: int) -> Iterator[VisibleCell]:
        """Cells that overlap a width x height viewport at the current position."""
        s = self._tile_size
        for y, row in enumerate(self.grid.rows):
            ty = s * y + self.position.y
            if ty < -s or ty > height:
                continue
            for x, tile in enumerate(row):
                tx = s * x + self.position.x
                if tx < -s or tx > width:
                    continue
                yield x, y, tile, tx, ty

    def render(self, target) -> None:
        sheet = self.sheet
        for _x, _y, tile, tx, ty in self.visible_cells(target.get_width(), target.get_height()):
            target.blit(sheet.image, (tx, ty), sheet.source_rect(tile))

    # ---------- touch ----------

    def relative_finger_position(self, finger_position) -> Optional[Vec]:
        """
        Map-local position of a touch, or None when it falls outside the
        grid's bounding box. Width comes from the first row; bounds are inclusive.
        """
        rel = world_to_local(Vec.of(finger_position), self.position)
        grid = self.grid
        w = self._tile_size * grid.row_length(0)
        h = self._tile_size * grid.height
        if 0 <= rel.x <= w and 0 <= rel.y <= h:
            return rel
        return None

    def assign_touch_event(self, event_type, finger_position) -> None:
        rel = self.relative_finger_position(finger_position)
        if rel is None:
            return
        event = TouchEvent(event_type)

        if event is TouchEvent.START:
            self.hooks.on_touch_start(self, rel.x, rel.y)
        elif event is TouchEvent.MOVE:
            self.hooks.on_touch_move(self, rel.x, rel.y)
        else:
            self.hooks.on_touch_end(self, rel.x, rel.y)

        for overlay in self.overlays:
            overlay.assign_touch_event(event_type, finger_position)
