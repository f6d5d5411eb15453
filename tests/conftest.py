import os

import pytest

from fontgen.atlas.sampler import BoundingBox, CoverageBitmap
from fontgen.errors import RasterizationError, RasterStage


class FakeRasterizer:
    """
    In-memory rasterizer with deterministic glyphs.

    Like FreeType, it keeps one internal buffer and overwrites it on every
    render() call; returned bitmaps alias that buffer.
    """

    def __init__(self, fail_stage=None, fail_code_point=None, row_padding=0):
        self.fail_stage = fail_stage
        self.fail_code_point = fail_code_point
        self.row_padding = row_padding
        self.pixels = None
        self.calls = []
        self._buffer = bytearray()
        self._current = None

    def glyph_shape(self, code_point):
        size = max(self.pixels, 1)
        width = 1 + code_point % size
        rows = 1 + (code_point * 7) % size
        return rows, width

    def y_min(self, code_point):
        return (code_point % 5) - 2

    def coverage(self, code_point, x, y):
        return (code_point * 3 + x * 5 + y * 11) % 256

    def set_pixel_size(self, pixels):
        self.calls.append(("set_pixel_size", pixels))
        if self.fail_stage == RasterStage.SET_PIXEL_SIZE:
            raise RasterizationError(RasterStage.SET_PIXEL_SIZE, 0, pixels)
        self.pixels = pixels
        size = max(pixels, 1)
        self._buffer = bytearray(size * (size + self.row_padding))

    def render(self, code_point):
        self.calls.append(("render", code_point))
        for stage in (RasterStage.LOAD_CHARACTER, RasterStage.RENDER_CHARACTER):
            if self.fail_stage == stage and self.fail_code_point == code_point:
                raise RasterizationError(stage, code_point)

        rows, width = self.glyph_shape(code_point)
        pitch = width + self.row_padding
        for y in range(rows):
            for x in range(pitch):
                value = self.coverage(code_point, x, y) if x < width else 0
                self._buffer[y * pitch + x] = value
        self._current = code_point
        view = memoryview(self._buffer)[:rows * pitch]
        return CoverageBitmap(rows=rows, width=width, pitch=pitch, buffer=view)

    def bounding_box(self, code_point):
        self.calls.append(("bounding_box", code_point))
        if self.fail_stage == RasterStage.GET_GLYPH_IMAGE and self.fail_code_point == code_point:
            raise RasterizationError(RasterStage.GET_GLYPH_IMAGE, code_point)
        rows, width = self.glyph_shape(code_point)
        y_min = self.y_min(code_point)
        return BoundingBox(x_min=0, y_min=y_min, x_max=width, y_max=y_min + rows)


@pytest.fixture
def fake_rasterizer():
    return FakeRasterizer()


@pytest.fixture
def make_rasterizer():
    return FakeRasterizer


FONT_CANDIDATES = [
    "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf",
    "/usr/share/fonts/TTF/DejaVuSans.ttf",
    "/usr/share/fonts/truetype/liberation/LiberationSans-Regular.ttf",
    "/usr/share/fonts/truetype/freefont/FreeSans.ttf",
    "/Library/Fonts/Arial.ttf",
    "C:\\Windows\\Fonts\\arial.ttf",
]


@pytest.fixture
def system_font():
    pytest.importorskip("freetype")
    for path in FONT_CANDIDATES:
        if os.path.exists(path):
            return path
    pytest.skip("no system TrueType font found")
