from dataclasses import dataclass, field
from typing import FrozenSet, Optional

from .errors import ConfigurationError

DEFAULT_TILE_SIZE = 32
DEFAULT_OBSTACLES = frozenset({0})

@dataclass(frozen=True)
class SurfaceConfig:
    # None means "not supplied"; 0 is rejected rather than replaced.
    tile_size: Optional[int] = None
    obstacle_indices: FrozenSet[int] = field(default=DEFAULT_OBSTACLES)

    def resolved_tile_size(self) -> int:
        size = DEFAULT_TILE_SIZE if self.tile_size is None else self.tile_size
        if isinstance(size, bool) or not isinstance(size, int) or size <= 0:
            raise ConfigurationError(f"tile_size must be a positive int, got {size!r}")
        return size

# Used when a GridSurface is built without an explicit config
DEFAULTS = SurfaceConfig()
