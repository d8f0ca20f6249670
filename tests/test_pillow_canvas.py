# tests/test_pillow_canvas.py
from PIL import Image

from tilegrid.engine.surface import GridSurface
from tilegrid.render.pillow_canvas import PillowCanvas

RED = (255, 0, 0, 255)
BLUE = (0, 0, 255, 255)

def two_frame_sheet():
    img = Image.new("RGBA", (20, 10), RED)
    img.paste(BLUE, (10, 0, 20, 10))
    return img

def test_render_to_pillow_canvas_picks_frames():
    s = GridSurface(two_frame_sheet(), 10)
    s.grid = [[0, 1], [1, 0]]
    canvas = PillowCanvas(20, 20)
    s.render(canvas)
    px = canvas.image.getpixel
    assert px((2, 2)) == RED and px((12, 2)) == BLUE
    assert px((2, 12)) == BLUE and px((12, 12)) == RED

def test_partially_visible_tiles_are_clipped():
    s = GridSurface(two_frame_sheet(), 10)
    s.grid = [[1, 0]]
    s.position.x = -5
    canvas = PillowCanvas(10, 10)
    s.render(canvas)
    assert canvas.image.getpixel((0, 0)) == BLUE
    assert canvas.image.getpixel((6, 0)) == RED

def test_save_png(tmp_path):
    canvas = PillowCanvas(4, 4, fill=RED)
    out = tmp_path / "snap.png"
    canvas.save(str(out))
    assert Image.open(out).getpixel((0, 0)) == RED
