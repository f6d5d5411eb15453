# fontgen/atlas/sampler.py
"""
Glyph sampling.

The rasterizer keeps a single bitmap per face and overwrites it on every
render call, so each bitmap is copied into a GlyphRecord before the next
code point is requested.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from fontgen import log
from fontgen.atlas.spec import AtlasSpec
from fontgen.errors import FontFileError, RasterizationError, RasterStage

SPACE_CODE_POINT = 32
FIRST_CODE_POINT = 33
LAST_CODE_POINT = 255


@dataclass(frozen=True)
class CoverageBitmap:
    """8-bit anti-aliased coverage bitmap as returned by a rasterizer."""

    rows: int
    width: int
    # Bytes per row; may exceed width when the rasterizer pads rows
    pitch: int
    buffer: bytes


@dataclass(frozen=True)
class BoundingBox:
    """Glyph control box in whole pixels."""

    x_min: int
    y_min: int
    x_max: int
    y_max: int


class Rasterizer(Protocol):
    """
    Scalable font rasterizer.

    render() invalidates the buffer of any bitmap returned by a previous call.
    bounding_box() refers to the glyph rendered by the last render() call.
    """

    def set_pixel_size(self, pixels: int) -> None: ...

    def render(self, code_point: int) -> CoverageBitmap: ...

    def bounding_box(self, code_point: int) -> BoundingBox: ...


@dataclass(frozen=True)
class GlyphRecord:
    """Sampled glyph: bitmap metrics, vertical bearing and owned pixel data."""

    # Height of the bitmap in pixels
    rows: int
    # Width of a bitmap row in pixels
    width: int
    # Bytes per bitmap row
    pitch: int
    # Offset of the glyph box from the baseline (negative for descenders)
    y_min: int
    data: bytes


GlyphTable = dict[int, GlyphRecord]


def copy_glyph_image(bitmap: CoverageBitmap) -> bytes:
    """Copy the rasterizer buffer out before it gets overwritten."""
    size = bitmap.rows * abs(bitmap.pitch)
    return bytes(bitmap.buffer[:size])


def sample_typeface(rasterizer: Rasterizer, spec: AtlasSpec) -> GlyphTable:
    """Sample every code point in [33, 255]. The first failure aborts the pass."""
    rasterizer.set_pixel_size(spec.glyph_size)

    table: GlyphTable = {}
    for code_point in range(FIRST_CODE_POINT, LAST_CODE_POINT + 1):
        bitmap = rasterizer.render(code_point)
        data = copy_glyph_image(bitmap)
        bbox = rasterizer.bounding_box(code_point)
        table[code_point] = GlyphRecord(
            rows=bitmap.rows,
            width=bitmap.width,
            pitch=bitmap.pitch,
            y_min=bbox.y_min,
            data=data,
        )

    log.debug(f"[Sampler] sampled {len(table)} glyphs at {spec.glyph_size} px")
    return table


class FreeTypeRasterizer:
    """Rasterizer backed by a FreeType face (freetype-py)."""

    def __init__(self, face):
        self.face = face
        self._pixels = 0

    @classmethod
    def open(cls, path: str | Path, index: int = 0) -> "FreeTypeRasterizer":
        import freetype

        try:
            face = freetype.Face(str(path), index)
        except (freetype.FT_Exception, OSError) as e:
            raise FontFileError(path) from e
        return cls(face)

    def set_pixel_size(self, pixels: int) -> None:
        import freetype

        try:
            self.face.set_pixel_sizes(0, pixels)
        except freetype.FT_Exception as e:
            raise RasterizationError(RasterStage.SET_PIXEL_SIZE, 0, pixels) from e
        self._pixels = pixels

    def render(self, code_point: int) -> CoverageBitmap:
        import freetype

        try:
            self.face.load_char(chr(code_point), freetype.FT_LOAD_RENDER)
        except freetype.FT_Exception as e:
            raise RasterizationError(RasterStage.LOAD_CHARACTER, code_point) from e

        slot = self.face.glyph
        try:
            slot.render(freetype.FT_RENDER_MODE_NORMAL)
        except freetype.FT_Exception as e:
            raise RasterizationError(RasterStage.RENDER_CHARACTER, code_point) from e

        bitmap = slot.bitmap
        return CoverageBitmap(
            rows=bitmap.rows,
            width=bitmap.width,
            pitch=bitmap.pitch,
            buffer=bytes(bitmap.buffer),
        )

    def bounding_box(self, code_point: int) -> BoundingBox:
        import freetype

        try:
            glyph = self.face.glyph.get_glyph()
        except freetype.FT_Exception as e:
            raise RasterizationError(RasterStage.GET_GLYPH_IMAGE, code_point) from e

        # Truncate mode gives the box in whole pixels.
        cbox = glyph.get_cbox(freetype.FT_GLYPH_BBOX_TRUNCATE)
        return BoundingBox(
            x_min=cbox.xMin,
            y_min=cbox.yMin,
            x_max=cbox.xMax,
            y_max=cbox.yMax,
        )
