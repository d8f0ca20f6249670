# src/tilegrid/render/pillow_canvas.py
# Headless drawing surface on top of Pillow, same blit shape as pygame.Surface.

from __future__ import annotations

from typing import Optional, Tuple

from PIL import Image


class PillowCanvas:
    def __init__(self, width: int, height: int, fill=(0, 0, 0, 255)):
        self.image = Image.new("RGBA", (width, height), color=fill)

    def get_width(self) -> int:
        return self.image.width

    def get_height(self) -> int:
        return self.image.height

    def blit(self, source: Image.Image, dest, area=None) -> Tuple[int, int, int, int]:
        dx, dy = int(dest[0]), int(dest[1])
        if area is not None:
            ax, ay, aw, ah = (int(v) for v in area)
            source = source.crop((ax, ay, ax + aw, ay + ah))
        src = source if source.mode == "RGBA" else source.convert("RGBA")
        # paste() clips to the canvas itself; negative offsets are fine
        self.image.paste(src, (dx, dy), src)
        return (dx, dy, src.width, src.height)

    def save(self, path: str, fmt: Optional[str] = None) -> None:
        self.image.save(path, fmt)
