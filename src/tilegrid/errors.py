# src/tilegrid/errors.py
# Error taxonomy for the grid surface. Builtin bases keep the usual
# `except IndexError` / `except ValueError` call sites working.


class ConfigurationError(ValueError):
    """Empty grid, bad tile size, or a sprite sheet that does not tile evenly."""


class GridIndexError(IndexError):
    """A cell or row outside the grid was addressed."""

    def __init__(self, x: int, y: int, detail: str = "") -> None:
        self.x = x
        self.y = y
        msg = f"cell ({x}, {y}) is outside the grid"
        if detail:
            msg = f"{msg}: {detail}"
        super().__init__(msg)


class CapabilityMismatch(TypeError):
    """Object handed to add_overlay() lacks part of the overlay capability set."""

    def __init__(self, obj, missing) -> None:
        self.obj = obj
        self.missing = tuple(missing)
        super().__init__(
            f"{type(obj).__name__} cannot be added as an overlay; missing: {', '.join(self.missing)}"
        )
