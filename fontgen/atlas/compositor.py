# fontgen/atlas/compositor.py
"""
Atlas compositor.

Packs sampled glyph bitmaps into one RGBA image. Slot (row, column) holds
code point row * columns + column + 32. Inside a slot the glyph starts at
padding // 2 on both axes; everything outside the glyph box is transparent
black. Coverage goes to all four channels (white-on-transparent mask).
"""

from __future__ import annotations

import numpy as np

from fontgen import log
from fontgen.atlas.sampler import LAST_CODE_POINT, SPACE_CODE_POINT, GlyphRecord, GlyphTable
from fontgen.atlas.spec import AtlasSpec, Origin


class AtlasImage:
    """RGBA atlas pixels, shape (height, width, 4), uint8, row-major."""

    def __init__(self, data: np.ndarray, origin: Origin):
        if data.ndim != 3 or data.shape[2] != 4:
            raise ValueError(f"Expected (height, width, 4) pixel array, got {data.shape}")
        self.data = np.ascontiguousarray(data, dtype=np.uint8)
        self.origin = origin

    @property
    def width(self) -> int:
        return self.data.shape[1]

    @property
    def height(self) -> int:
        return self.data.shape[0]

    def tobytes(self) -> bytes:
        return self.data.tobytes()

    def __eq__(self, other) -> bool:
        if not isinstance(other, AtlasImage):
            return NotImplemented
        return self.origin == other.origin and np.array_equal(self.data, other.data)

    def __repr__(self) -> str:
        return f"AtlasImage({self.width}x{self.height}, origin={self.origin.name})"


def glyph_coverage(glyph: GlyphRecord) -> np.ndarray:
    """Coverage as a (rows, width) array, addressed as y * width + x."""
    count = glyph.rows * glyph.width
    if count == 0:
        return np.zeros((glyph.rows, glyph.width), dtype=np.uint8)
    flat = np.frombuffer(glyph.data, dtype=np.uint8, count=count)
    return flat.reshape(glyph.rows, glyph.width)


def _paste_glyph(atlas: np.ndarray, glyph: GlyphRecord, top: int, left: int, spec: AtlasSpec):
    """Copy one glyph into the slot whose top-left pixel is (top, left)."""
    offset = spec.padding // 2
    # The glyph box is clipped to the slot; coordinates past it belong to
    # the next slot.
    visible = spec.slot_glyph_size - offset
    rows = min(glyph.rows, visible)
    cols = min(glyph.width, visible)
    if rows <= 0 or cols <= 0:
        return

    coverage = glyph_coverage(glyph)[:rows, :cols]
    y0 = top + offset
    x0 = left + offset
    atlas[y0:y0 + rows, x0:x0 + cols, :] = coverage[:, :, np.newaxis]


def flip_vertical(image: AtlasImage) -> AtlasImage:
    """Swap row i with row height - 1 - i. Applying it twice is the identity."""
    origin = Origin.TOP_LEFT if image.origin == Origin.BOTTOM_LEFT else Origin.BOTTOM_LEFT
    return AtlasImage(image.data[::-1, :, :].copy(), origin)


def create_bitmap_image(glyph_table: GlyphTable, spec: AtlasSpec) -> AtlasImage:
    """Pack the glyph bitmaps into a single atlas image."""
    atlas = np.zeros((spec.height, spec.width, 4), dtype=np.uint8)
    slot = spec.slot_glyph_size

    for row in range(spec.rows):
        for column in range(spec.columns):
            glyph_index = row * spec.columns + column + SPACE_CODE_POINT
            if not SPACE_CODE_POINT < glyph_index <= LAST_CODE_POINT:
                continue
            _paste_glyph(atlas, glyph_table[glyph_index], row * slot, column * slot, spec)

    image = AtlasImage(atlas, Origin.TOP_LEFT)
    if spec.origin == Origin.BOTTOM_LEFT:
        image = flip_vertical(image)

    log.debug(f"[Compositor] composed {image!r}")
    return image
