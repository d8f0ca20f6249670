from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Sequence

from .errors import ConfigurationError, GridIndexError


@dataclass
class TileGrid:
    """
    Row-major tile-index matrix.
    Rows may differ in length; every lookup uses the length of the row it
    lands in. Negative indices are treated as out of range (no wrap).
    """
    rows: List[List[int]]

    def __post_init__(self) -> None:
        if not self.rows:
            raise ConfigurationError("grid must have at least one row")
        for y, row in enumerate(self.rows):
            for x, v in enumerate(row):
                if isinstance(v, bool) or not isinstance(v, int):
                    raise ConfigurationError(f"tile at ({x}, {y}) is not an int: {v!r}")

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[int]]) -> "TileGrid":
        if isinstance(rows, TileGrid):
            return rows
        return cls(rows=[list(r) for r in rows])

    @property
    def height(self) -> int:
        return len(self.rows)

    def row_length(self, y: int) -> int:
        if not 0 <= y < len(self.rows):
            raise GridIndexError(0, y, f"grid has {len(self.rows)} rows")
        return len(self.rows[y])

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= y < len(self.rows) and 0 <= x < len(self.rows[y])

    def get(self, x: int, y: int) -> int:
        if not self.in_bounds(x, y):
            raise GridIndexError(x, y)
        return self.rows[y][x]


def read_tsv(path: str) -> TileGrid:
    rows = []
    with open(path, encoding="utf-8") as f:
        for line in f:
            line = line.rstrip("\n")
            if not line:
                continue
            rows.append([int(x) for x in line.split("\t")])
    return TileGrid.from_rows(rows)
